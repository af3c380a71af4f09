import pytest

from tank_arena.core.world import ArenaSettings, Point, World


def test_generated_walls_avoid_border_and_start_band():
    world = World(ArenaSettings(seed=99))

    assert world.walls
    for wall in world.walls:
        assert world.is_interior(*wall)
        assert wall.x >= world.settings.reserved_columns


def test_divider_is_placed_at_midpoint():
    world = World(ArenaSettings(seed=5))

    for y in range(5, 15):
        assert world.is_wall(world.width // 2, y)


def test_divider_is_clipped_to_interior():
    world = World(ArenaSettings(width=12, height=8, wall_count=0, seed=1))

    assert world.walls == {Point(6, y) for y in range(5, 7)}


def test_remove_wall_is_permanent(open_world: World):
    open_world.add_wall(Point(8, 4))

    assert open_world.remove_wall(Point(8, 4)) is True
    assert open_world.remove_wall(Point(8, 4)) is False
    assert not open_world.is_wall(8, 4)


def test_add_wall_rejects_border(open_world: World):
    with pytest.raises(ValueError):
        open_world.add_wall(Point(0, 3))


def test_blocked_cells(open_world: World):
    open_world.add_wall(Point(5, 5))

    assert open_world.is_blocked(5, 5)
    assert open_world.is_blocked(0, 5)
    assert open_world.is_blocked(5, open_world.height - 1)
    assert not open_world.is_blocked(4, 5)


def test_iter_rows_draws_border_and_walls(open_world: World):
    open_world.add_wall(Point(6, 2))
    rows = list(open_world.iter_rows())

    assert len(rows) == open_world.height
    assert rows[0] == "#" * open_world.width
    assert rows[2][6] == "%"
    assert rows[1][0] == "#" and rows[1][-1] == "#"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"width": 8},
        {"width": 40, "reserved_columns": 21},
        {"reserved_columns": 2},
        {"reserved_columns": 0},
        {"height": 4},
        {"wall_count": -1},
    ],
)
def test_invalid_settings_raise(kwargs):
    with pytest.raises(ValueError):
        ArenaSettings(**kwargs)
