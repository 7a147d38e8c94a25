import math

import pytest

from cubray.config import PI, TILE
from cubray.grid import Grid
from cubray.raycast import (
    COLLISION_DISTANCE,
    FIELD_OF_VIEW,
    Probe,
    cast_ray,
    fov_angles,
    probe_walls,
)

CENTER = 2 * TILE + TILE / 2


@pytest.fixture
def room():
    grid = Grid.from_lines(["11111", "10001", "10N01", "10001", "11111"])
    grid.validate()
    return grid


def _cell(x, y):
    return int(x / TILE), int(y / TILE)


def test_cast_ray_east_stops_at_first_wall(room):
    x, y = cast_ray(room, 0.0, CENTER, CENTER)
    assert room.at(*_cell(x, y)) == "1"
    assert room.at(*_cell(x - 1, y)) != "1"
    assert _cell(x, y)[0] == 4
    assert y == pytest.approx(CENTER)


def test_cast_ray_north_reaches_top_row(room):
    x, y = cast_ray(room, 3 * PI / 2, CENTER, CENTER)
    assert _cell(x, y)[1] == 0
    assert x == pytest.approx(CENTER, abs=1e-3)


def test_cast_ray_leaving_map_raises():
    grid = Grid.from_lines(["000"])
    with pytest.raises(IndexError):
        cast_ray(grid, 0.0, TILE / 2, TILE / 2)


def test_probe_walls_symmetric_room(room):
    probe = probe_walls(room, 0.0, CENTER, CENTER)
    assert probe.forward == pytest.approx(probe.back, abs=1.5)
    assert probe.right == pytest.approx(probe.left, abs=1.5)
    assert probe.forward == pytest.approx(probe.right, abs=1.5)
    assert probe.blocked() == (False, False, False, False)


def test_probe_walls_near_wall_blocks_forward(room):
    probe = probe_walls(room, 0.0, 4 * TILE - 10, CENTER)
    assert probe.forward < COLLISION_DISTANCE
    assert probe.blocked()[0] is True
    assert probe.blocked()[2] is False


def test_probe_blocked_threshold():
    probe = Probe(forward=10, right=30, back=19.9, left=COLLISION_DISTANCE)
    assert probe.blocked() == (True, False, True, False)


def test_fov_angles_span_field_of_view():
    count = 40
    angles = fov_angles(1.0, count)
    assert len(angles) == count
    assert angles[-1] == pytest.approx(1.0 + FIELD_OF_VIEW / 2)
    steps = [b - a for a, b in zip(angles, angles[1:])]
    assert all(step == pytest.approx(FIELD_OF_VIEW / count) for step in steps)


def test_fov_angles_wrap_past_full_turn():
    angles = fov_angles(2 * PI - 0.01, 50)
    assert all(angle <= 2 * PI for angle in angles)
    assert min(angles) < 1.0


def test_fov_angles_rejects_zero_columns():
    with pytest.raises(ValueError):
        fov_angles(0.0, 0)


def test_probe_distances_match_cast_ray(room):
    probe = probe_walls(room, PI / 2, CENTER, CENTER)
    x, y = cast_ray(room, PI / 2, CENTER, CENTER)
    assert probe.forward == pytest.approx(math.hypot(x - CENTER, y - CENTER))