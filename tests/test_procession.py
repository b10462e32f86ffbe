import pytest

from pixel_restaurant.animation import Procession, approach
from pixel_restaurant.errors import InvalidInputError
from pixel_restaurant.grid import Position

ROUTE = [Position(0, 0), Position(0, 1), Position(0, 2), Position(1, 2)]


def test_followers_replay_route_with_lag():
    proc = Procession(ROUTE)
    assert proc.positions == [ROUTE[0]] * 3

    proc.advance()
    assert proc.positions == [ROUTE[1], ROUTE[0], ROUTE[0]]

    proc.advance()
    assert proc.positions == [ROUTE[2], ROUTE[1], ROUTE[0]]

    proc.advance()
    assert proc.positions == [ROUTE[3], ROUTE[2], ROUTE[1]]
    assert proc.finished is False

    proc.advance()
    assert proc.positions == [ROUTE[3], ROUTE[3], ROUTE[2]]


def test_finishes_when_last_follower_arrives():
    proc = Procession(ROUTE)
    steps = 0
    while proc.advance():
        steps += 1

    assert steps == proc.total_steps == len(ROUTE) - 1 + 2
    assert proc.finished is True
    assert proc.positions == [ROUTE[-1]] * 3
    assert proc.advance() is False


def test_single_tile_route():
    proc = Procession([Position(2, 2)], lags=(0,))
    assert proc.finished is True
    assert proc.positions == [Position(2, 2)]


def test_empty_route_is_rejected():
    with pytest.raises(InvalidInputError):
        Procession([])


def test_negative_lag_is_rejected():
    with pytest.raises(InvalidInputError):
        Procession(ROUTE, lags=(0, -1))


def test_approach_clamps_to_target():
    assert approach((0.0, 0.0), (10.0, -10.0), 4.0) == (4.0, -4.0)
    assert approach((8.0, -8.0), (10.0, -10.0), 4.0) == (10.0, -10.0)
    assert approach((5.0, 5.0), (5.0, 5.0), 1.0) == (5.0, 5.0)
