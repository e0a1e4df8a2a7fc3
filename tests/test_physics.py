import random

import pytest

from gorillas.framebuffer import HEIGHT, WIDTH, Screen
from gorillas.physics import (
    FALL_LIMIT,
    Outcome,
    launch_velocity,
    simulate_shot,
    trajectory,
)
from gorillas.world import SPRITE_SIZE, Position, World


def empty_world():
    world = World(random.Random(0))
    world.skyline = [0] * WIDTH
    return world


def test_flat_throw_is_all_horizontal():
    assert launch_velocity(0, 100, 1) == (100.0, 0.0)


def test_vertical_throw_has_no_horizontal_speed():
    vx, vy = launch_velocity(90, 50, 1)
    assert vx == 0.0
    assert vy == 50.0


def test_player_two_throws_left():
    vx1, vy1 = launch_velocity(30, 60, 1)
    vx2, vy2 = launch_velocity(30, 60, 2)
    assert vx2 == -vx1
    assert vy2 == vy1
    assert vx1 > 0


@pytest.mark.parametrize("angle", [-1, 91])
def test_angle_out_of_table(angle):
    with pytest.raises(ValueError):
        launch_velocity(angle, 10, 1)


def test_unknown_player_rejected():
    with pytest.raises(ValueError):
        launch_velocity(45, 10, 3)


def test_dropped_banana_falls_straight_until_far_below():
    points = list(trajectory(Position(40, 10), 0, 0, 1, 0))
    xs = [x for x, _ in points]
    ys = [y for _, y in points]
    assert len(set(xs)) == 1
    assert ys == sorted(ys)
    assert ys[-1] > FALL_LIMIT
    assert all(y <= FALL_LIMIT for y in ys[:-1])


def test_trajectory_stops_at_side_of_screen():
    points = list(trajectory(Position(100, 30), 0, 100, 1, 0))
    assert all(0 <= x < WIDTH for x, _ in points)
    assert len(points) < 3


def test_shot_off_the_side_misses():
    world = empty_world()
    world.gorilla1 = Position(118, 30)
    world.gorilla2 = Position(0, 30)
    result = simulate_shot(world, Screen(), 1, 0, 100)
    assert result.outcome is Outcome.MISS
    assert result.point is None


def test_shot_lands_on_building():
    world = empty_world()
    world.skyline = [20] * WIDTH
    world.place_gorillas()
    result = simulate_shot(world, Screen(), 1, 0, 0)
    assert result.outcome is Outcome.BUILDING
    x, y = result.point
    assert y >= HEIGHT - world.skyline[x]
    assert x == world.gorilla1.x + SPRITE_SIZE // 2


def test_shot_hits_other_gorilla_and_reports_frames():
    world = empty_world()
    world.gorilla1 = Position(10, 20)
    world.gorilla2 = Position(10, 40)
    seen = []
    result = simulate_shot(world, Screen(), 1, 0, 0, seen.append)
    assert result.outcome is Outcome.GORILLA
    x, y = result.point
    target = world.gorilla2
    assert target.x <= x < target.x + SPRITE_SIZE
    assert target.y <= y < target.y + SPRITE_SIZE
    assert result.frames == len(seen) > 0


def test_own_gorilla_is_not_a_target():
    world = empty_world()
    world.gorilla1 = Position(10, 20)
    world.gorilla2 = Position(100, 40)
    result = simulate_shot(world, Screen(), 1, 0, 0)
    assert result.outcome is Outcome.MISS
    assert result.frames > 0