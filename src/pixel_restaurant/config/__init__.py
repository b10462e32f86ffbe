from .settings import SceneSettings, Settings, TimingSettings, WindowSettings

__all__ = ["SceneSettings", "Settings", "TimingSettings", "WindowSettings"]
