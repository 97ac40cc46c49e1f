"""Window, player and casting settings, and the key codes the game reacts to."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class Key(enum.IntEnum):
    """Keys the game handles, valued by their X11 keysyms."""

    ESC = 0xFF1B
    W = 0x77
    A = 0x61
    S = 0x73
    D = 0x64
    E = 0x65
    M = 0x6D
    LEFT = 0xFF51
    RIGHT = 0xFF53


@dataclass(frozen=True)
class Settings:
    """Fixed parameters of one game variant."""

    bonus: bool = False
    title: str = "raycub"
    win_width: int = 1920
    win_height: int = 1080
    wall_size: int = 32
    mmap_ratio: int = 25
    player_hitbox: float = 0.6
    player_look: float = 0.1
    player_speed: float = 0.1
    player_size: int = 9
    degree_in_radians: float = 0.0174533
    dof: int = 20
    fov: int = 60
    rays: int = 1920
    mouse_sensitivity: float = 0.01

    @property
    def minimap_size(self) -> int:
        """Width in pixels given to the minimap."""
        return int((self.mmap_ratio * 0.01) * self.win_width)

    @property
    def column_width(self) -> int:
        """Width in pixels of the screen column drawn for one ray."""
        return self.win_width // self.rays

    @property
    def ray_step(self) -> float:
        """Angle in radians between two neighbouring rays."""
        return (math.pi / 180) * (self.fov / self.rays)


_PLAIN = Settings()
_BONUS = Settings(bonus=True, title="raycub_bonus", mmap_ratio=50, dof=100000)


def settings_for(bonus: bool) -> Settings:
    """Return the settings of the plain or the bonus variant."""
    return _BONUS if bonus else _PLAIN