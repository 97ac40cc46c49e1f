import math

import pytest

from raycub.canvas import create_trgb
from raycub.casting import Ray, cast_ray, cast_rays, horizontal_ray, march, vertical_ray
from raycub.config import Settings
from raycub.geometry import Vector, calc_hyp

ROOM = ["11111", "10001", "10001", "10001", "11111"]


def test_vertical_ray_straight_down_is_far_and_still():
    ray, step = vertical_ray(Vector(2.5, 2.5), math.pi / 2)
    assert ray.end == Vector(1000000, 1000000)
    assert step == Vector(0.0, 0.0)
    assert ray.vertical
    assert ray.color == create_trgb(0, 118, 137, 245)


def test_horizontal_ray_facing_north_steps_up():
    ray, step = horizontal_ray(Vector(2.5, 2.5), math.pi / 2 * 3)
    assert step.y == -1
    assert int(ray.end.y) == 1
    assert not ray.vertical
    assert ray.color == create_trgb(0, 214, 15, 15)


def test_march_respects_depth():
    grid = ["0" * 10]
    ray, step = vertical_ray(Vector(0.5, 0.5), 0.0)
    marched = march(ray, step, grid, 3)
    assert marched.end.x == ray.end.x + 3
    assert marched.end.y == ray.end.y


def test_march_stops_at_grid_edge():
    grid = ["0" * 10]
    ray, step = vertical_ray(Vector(0.5, 0.5), 0.0)
    marched = march(ray, step, grid, 100)
    assert marched.end.x == len(grid[0])


def test_march_without_step_does_not_move():
    ray, step = vertical_ray(Vector(2.5, 2.5), math.pi / 2)
    assert march(ray, step, ROOM, 20).end == ray.end


def test_cast_east_hits_wall_column():
    ray = cast_ray(Vector(2.5, 2.5), 0.0, ROOM, 20)
    assert ray.vertical
    assert ray.end == Vector(4.0, 2.5)
    assert ray.length == pytest.approx(calc_hyp(ray.start, ray.end))


def test_cast_west_hits_wall_column():
    ray = cast_ray(Vector(2.5, 2.5), math.pi, ROOM, 20)
    assert ray.vertical
    assert int(ray.end.x) == 0
    assert ROOM[int(ray.end.y)][int(ray.end.x)] == "1"


def test_cast_south_uses_horizontal_ray():
    ray = cast_ray(Vector(2.5, 2.5), math.pi / 2, ROOM, 20)
    assert not ray.vertical
    assert ray.end.y == len(ROOM) - 1
    assert ray.start == Vector(2.5, 2.5)


def test_cast_rays_spread_and_hit_walls():
    settings = Settings(rays=8)
    position = Vector(2.3, 2.6)
    rays = cast_rays(position, 1.0, ROOM, settings)
    assert len(rays) == settings.rays
    assert rays[settings.rays // 2].angle == pytest.approx(1.0)
    for before, after in zip(rays, rays[1:]):
        assert after.angle - before.angle == pytest.approx(settings.ray_step)
    for ray in rays:
        assert isinstance(ray, Ray) and ray.start == position
        assert ray.length == pytest.approx(calc_hyp(position, ray.end))
        assert ROOM[int(ray.end.y)][int(ray.end.x)] == "1"


def test_cast_rays_wraps_angles_into_range():
    settings = Settings(rays=16)
    rays = cast_rays(Vector(2.5, 2.5), 0.05, ROOM, settings)
    assert all(0 <= ray.angle <= 2 * math.pi for ray in rays)
    assert rays[0].angle > math.pi