"""Grid ray casting: one ray per screen column, stopped at the first wall."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, replace

from raycub.canvas import create_trgb
from raycub.config import Settings
from raycub.geometry import Vector, calc_hyp, reset_angle

_HORIZONTAL_COLOR = create_trgb(0, 214, 15, 15)
_VERTICAL_COLOR = create_trgb(0, 118, 137, 245)
_FAR = 1000000.0
_NUDGE = 0.0001


@dataclass(frozen=True)
class Ray:
    """A ray from ``start`` to where it stopped, with its measured length."""

    start: Vector
    end: Vector
    length: float
    vertical: bool
    angle: float
    color: int


def horizontal_ray(position: Vector, angle: float) -> tuple[Ray, Vector]:
    """Return a ray at its first horizontal grid line and the step between lines."""
    tangent = math.tan(angle)
    arctan = -1 / tangent if tangent else -math.copysign(math.inf, tangent)
    if angle > math.pi:
        end_y = int(position.y) - _NUDGE
        step_y = -1.0
    else:
        end_y = int(position.y) + 1.0
        step_y = 1.0
    end_x = (position.y - end_y) * arctan + position.x
    step = Vector(-step_y * arctan, step_y)
    ray = Ray(position, Vector(end_x, end_y), 0.0, False, angle, _HORIZONTAL_COLOR)
    return ray, step


def vertical_ray(position: Vector, angle: float) -> tuple[Ray, Vector]:
    """Return a ray at its first vertical grid line and the step between lines."""
    if angle == math.pi / 2 or angle == math.pi / 2 * 3:
        ray = Ray(position, Vector(_FAR, _FAR), 0.0, True, angle, _VERTICAL_COLOR)
        return ray, Vector(0.0, 0.0)
    ntan = -math.tan(angle)
    if math.pi / 2 < angle < math.pi / 2 * 3:
        end_x = int(position.x) - _NUDGE
        step_x = -1.0
    else:
        end_x = int(position.x) + 1.0
        step_x = 1.0
    end_y = (position.x - end_x) * ntan + position.y
    step = Vector(step_x, -step_x * ntan)
    ray = Ray(position, Vector(end_x, end_y), 0.0, True, angle, _VERTICAL_COLOR)
    return ray, step


def march(ray: Ray, step: Vector, grid: Sequence[str], dof: int) -> Ray:
    """Advance a ray by ``step`` until it meets a wall, leaves the grid or runs out."""
    end = ray.end
    taken = 0
    while taken < dof and step.x:
        if end.y < 0 or end.y >= len(grid):
            break
        row = grid[int(end.y)]
        if end.x < 0 or end.x >= len(row):
            break
        if row[int(end.x)] == "1":
            break
        end = end + step
        taken += 1
    return replace(ray, end=end)


def cast_ray(position: Vector, angle: float, grid: Sequence[str], dof: int) -> Ray:
    """Cast both ray kinds at ``angle`` and return the shorter, measured."""
    horizontal, h_step = horizontal_ray(position, angle)
    vertical, v_step = vertical_ray(position, angle)
    vertical = march(vertical, v_step, grid, dof)
    horizontal = march(horizontal, h_step, grid, dof)
    vertical = replace(vertical, start=position, length=calc_hyp(position, vertical.end))
    horizontal = replace(
        horizontal, start=position, length=calc_hyp(position, horizontal.end)
    )
    return vertical if vertical.length < horizontal.length else horizontal


def cast_rays(
    position: Vector, angle: float, grid: Sequence[str], settings: Settings
) -> list[Ray]:
    """Cast ``settings.rays`` rays spread over the field of view around ``angle``."""
    step = settings.ray_step
    angle -= step * (settings.rays // 2)
    rays = []
    for _ in range(settings.rays):
        angle = reset_angle(angle)
        rays.append(cast_ray(position, angle, grid, settings.dof))
        angle += step
    return rays