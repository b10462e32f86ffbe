from .procession import DEFAULT_LAGS, Procession, approach

__all__ = ["DEFAULT_LAGS", "Procession", "approach"]
