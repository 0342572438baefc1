"""The player and the sprites that populate the level."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass

from .gamemap import GameMap

__all__ = ["Player", "Sprite", "update_sprite_distances"]

TURN_SPEED = 0.05
WALK_SPEED = 0.1


@dataclass
class Player:
    """Position, view direction and current movement intent."""

    x: float
    y: float
    angle: float
    fov: float
    turn: int = 0
    walk: int = 0

    def step(self, game_map: GameMap) -> None:
        """Turn and walk one frame, sliding along walls instead of entering them."""
        self.angle += self.turn * TURN_SPEED
        nx = self.x + self.walk * math.cos(self.angle) * WALK_SPEED
        ny = self.y + self.walk * math.sin(self.angle) * WALK_SPEED
        if 0 <= int(nx) < game_map.width and 0 <= int(ny) < game_map.height:
            if game_map.is_empty(nx, self.y):
                self.x = nx
            if game_map.is_empty(self.x, ny):
                self.y = ny


@dataclass
class Sprite:
    """A billboard object drawn with texture number tex_id."""

    x: float
    y: float
    tex_id: int
    player_dist: float = 0.0


def update_sprite_distances(sprites: Iterable[Sprite], player: Player) -> None:
    """Store each sprite's distance to the player."""
    for sprite in sprites:
        sprite.player_dist = math.hypot(player.x - sprite.x, player.y - sprite.y)