from __future__ import annotations

from pixel_restaurant.config.settings import TimingSettings
from pixel_restaurant.engine import EngineConfig, GameEngine
from pixel_restaurant.game import GameStatus, SeatingSession
from pixel_restaurant.grid import Position, RestaurantGrid, create_restaurant_grid, start_position, target_position


def make_session() -> SeatingSession:
    return SeatingSession(create_restaurant_grid(), start_position(), target_position(), TimingSettings())


def test_engine_runs_until_guests_are_seated():
    timing = TimingSettings(show_path_seconds=0.5, step_interval_seconds=0.25)
    session = SeatingSession(create_restaurant_grid(), start_position(), target_position(), timing)
    session.start()
    engine = GameEngine(session, EngineConfig(tick_rate=0, fixed_dt=0.25))
    engine.run()

    assert session.status is GameStatus.FINISHED
    assert engine.running is False
    # Two ticks of path preview, then one tick per procession step.
    assert engine.step == 2 + (len(session.route) - 1 + 2)


def test_engine_respects_max_steps():
    session = make_session()
    session.start()
    engine = GameEngine(session, EngineConfig(tick_rate=0, max_steps=3, fixed_dt=0.1))
    engine.run()

    assert engine.step == 3
    assert session.status is GameStatus.SHOWING_PATH


def test_engine_stops_when_no_path():
    grid = RestaurantGrid.from_lines([".#."])
    session = SeatingSession(grid, Position(0, 0), Position(0, 2))
    session.start()
    engine = GameEngine(session, EngineConfig(tick_rate=0, fixed_dt=0.1))
    engine.run()

    assert engine.step == 1
    assert session.status is GameStatus.NO_PATH


def test_update_ignored_when_not_running():
    session = make_session()
    engine = GameEngine(session, EngineConfig(tick_rate=0))
    engine.update(0.016)
    assert engine.step == 0


def test_engine_keeps_running_after_seating_when_asked():
    timing = TimingSettings(show_path_seconds=0.0, step_interval_seconds=0.25)
    session = SeatingSession(create_restaurant_grid(), start_position(), target_position(), timing)
    session.start()
    engine = GameEngine(session, EngineConfig(tick_rate=0, max_steps=100, fixed_dt=0.25, stop_when_settled=False))
    engine.run()

    assert session.status is GameStatus.FINISHED
    assert engine.step == 100


def test_max_steps_applies_to_externally_driven_updates():
    session = make_session()
    engine = GameEngine(session, EngineConfig(max_steps=2, stop_when_settled=False))
    engine.start()
    engine.update(0.016)
    engine.update(0.016)

    assert engine.running is False
    engine.update(0.016)
    assert engine.step == 2
