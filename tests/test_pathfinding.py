import pytest

from pixel_restaurant.errors import InvalidInputError
from pixel_restaurant.grid import GridBuilder, Position, RestaurantGrid, TileKind
from pixel_restaurant.pathfinding import find_path, is_valid_route


def open_grid(rows: int, cols: int) -> RestaurantGrid:
    return GridBuilder(rows, cols, default_tile=TileKind.FLOOR).build()


@pytest.mark.parametrize(
    "start,end",
    [
        (Position(0, 0), Position(3, 5)),
        (Position(3, 5), Position(0, 0)),
        (Position(2, 1), Position(2, 4)),
        (Position(0, 5), Position(3, 0)),
    ],
)
def test_open_grid_route_is_manhattan_optimal(start, end):
    grid = open_grid(4, 6)
    route = find_path(grid, start, end)

    assert route is not None
    assert len(route) == start.manhattan(end) + 1
    assert route[0] == start
    assert route[-1] == end
    assert is_valid_route(route)


def test_same_start_and_end_is_single_cell_route():
    grid = open_grid(3, 3)
    p = Position(1, 2)
    assert find_path(grid, p, p) == [p]


def test_wall_with_single_gap_forces_route_through_gap():
    grid = RestaurantGrid.from_lines([
        ".....",
        ".....",
        "##.##",
        ".....",
        ".....",
    ])
    route = find_path(grid, Position(0, 0), Position(4, 0))

    assert route is not None
    assert Position(2, 2) in route
    assert len(route) == 9
    assert is_valid_route(route)


def test_fully_blocked_grid_returns_none():
    builder = GridBuilder(3, 3, default_tile=TileKind.OBSTACLE)
    builder.set(0, 0, TileKind.FLOOR)
    grid = builder.build()

    assert find_path(grid, Position(0, 0), Position(2, 2)) is None


def test_disconnecting_wall_of_tables_and_obstacles_returns_none():
    grid = RestaurantGrid.from_lines([
        "..T..",
        "..#..",
        "..T..",
    ])
    assert find_path(grid, Position(1, 0), Position(1, 4)) is None


def test_table_block_forces_detour():
    grid = RestaurantGrid.from_lines([
        "......",
        "......",
        ".TT...",
        ".TT...",
        "......",
    ])
    start, end = Position(2, 0), Position(2, 3)
    route = find_path(grid, start, end)

    assert route is not None
    assert len(route) - 1 > start.manhattan(end)
    assert len(route) - 1 == 5
    assert all(grid.is_walkable(p) for p in route)


def test_ties_broken_by_up_down_left_right_order():
    grid = open_grid(2, 2)
    route = find_path(grid, Position(0, 0), Position(1, 1))
    # Down is expanded before right, so the route goes down first.
    assert route == [Position(0, 0), Position(1, 0), Position(1, 1)]


def test_repeated_calls_return_identical_routes():
    grid = RestaurantGrid.from_lines([
        "......",
        ".#..T.",
        "..T...",
        "......",
    ])
    first = find_path(grid, Position(0, 0), Position(3, 5))
    second = find_path(grid, Position(0, 0), Position(3, 5))
    assert first == second


def test_start_tile_walkability_is_not_checked():
    grid = RestaurantGrid.from_lines([".#."])
    assert find_path(grid, Position(0, 1), Position(0, 2)) == [Position(0, 1), Position(0, 2)]


def test_target_table_and_door_are_walkable():
    grid = RestaurantGrid.from_lines(["D..X"])
    route = find_path(grid, Position(0, 0), Position(0, 3))
    assert route is not None
    assert route[-1] == Position(0, 3)


def test_blocking_end_tile_is_unreachable():
    grid = RestaurantGrid.from_lines(["..T"])
    assert find_path(grid, Position(0, 0), Position(0, 2)) is None


@pytest.mark.parametrize(
    "start,end",
    [
        (Position(-1, 0), Position(0, 0)),
        (Position(0, 0), Position(0, -1)),
        (Position(3, 0), Position(0, 0)),
        (Position(0, 0), Position(0, 4)),
    ],
)
def test_out_of_bounds_endpoints_are_rejected(start, end):
    grid = open_grid(3, 4)
    with pytest.raises(InvalidInputError):
        find_path(grid, start, end)


def test_invalid_input_is_a_value_error():
    grid = open_grid(1, 1)
    with pytest.raises(ValueError):
        find_path(grid, Position(0, 0), Position(5, 5))


def test_search_does_not_modify_grid():
    lines = [
        "..#",
        ".T.",
        "...",
    ]
    grid = RestaurantGrid.from_lines(lines)
    find_path(grid, Position(0, 0), Position(2, 2))
    assert grid.to_lines() == lines


def test_is_valid_route_rejects_gaps_repeats_and_empty():
    assert is_valid_route([]) is False
    assert is_valid_route([Position(0, 0), Position(0, 2)]) is False
    assert is_valid_route([Position(0, 0), Position(1, 1)]) is False
    assert is_valid_route([Position(0, 0), Position(0, 1), Position(0, 0)]) is False
    assert is_valid_route([Position(0, 0), Position(0, 1), Position(1, 1)]) is True
