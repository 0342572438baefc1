"""The game window and main loop."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Sequence
from pathlib import Path

import pygame

from .colors import pack_color
from .controls import handle_event
from .entities import Player, Sprite, update_sprite_distances
from .framebuffer import Framebuffer
from .gamemap import default_map
from .render import render, sort_sprites
from .texture import TextureError, load_texture
from .timer import FrameLimiter

__all__ = ["default_sprites", "default_player", "main"]

WINDOW_TITLE = "Shooter"
SCREEN_WIDTH = 1024
SCREEN_HEIGHT = 512
WALL_TEXTURE_FILE = "walltext.bmp"
SPRITE_TEXTURE_FILE = "monsters.bmp"


def default_sprites() -> list[Sprite]:
    """Return the monsters placed in the built-in level."""
    return [
        Sprite(3.523, 3.812, 2),
        Sprite(1.834, 8.765, 0),
        Sprite(5.323, 5.365, 1),
        Sprite(14.32, 13.36, 3),
        Sprite(4.123, 10.26, 1),
    ]


def default_player() -> Player:
    """Return the player at the level's starting position."""
    return Player(3.456, 2.345, 1.523, math.pi / 3.0)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tinyraycaster", description="A tiny ray-casting shooter.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("assets"),
        help="directory holding walltext.bmp and monsters.bmp",
    )
    return parser.parse_args(argv)


def _poll_events(player: Player) -> bool:
    for event in pygame.event.get():
        if not handle_event(player, event):
            return False
    return True


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game; return the process exit status."""
    args = _parse_args(argv)

    try:
        wall_textures = load_texture(args.assets / WALL_TEXTURE_FILE)
        sprite_textures = load_texture(args.assets / SPRITE_TEXTURE_FILE)
    except TextureError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        print("Failed to load textures")
        return -1

    white = pack_color(255, 255, 255, 255)
    ray_color = pack_color(160, 160, 160, 255)
    fb = Framebuffer(SCREEN_WIDTH, SCREEN_HEIGHT, white)
    game_map = default_map()
    player = default_player()
    sprites = default_sprites()

    pygame.init()
    try:
        screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT), pygame.RESIZABLE)
        pygame.display.set_caption(WINDOW_TITLE)
        limiter = FrameLimiter()

        while _poll_events(player):
            player.step(game_map)
            update_sprite_distances(sprites, player)
            sort_sprites(sprites)

            render(fb, game_map, player, sprites, wall_textures, sprite_textures, white, ray_color)

            frame = pygame.image.frombuffer(fb.to_bytes(), (fb.width, fb.height), "RGBA")
            screen.blit(pygame.transform.scale(frame, screen.get_size()), (0, 0))
            pygame.display.flip()

            limiter.cap()
    finally:
        pygame.quit()
    return 0