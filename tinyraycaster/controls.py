"""Keyboard handling: WASD to move, Escape or closing the window to quit."""

from __future__ import annotations

import pygame

from .entities import Player

__all__ = ["handle_event"]

_TURN_KEYS = {pygame.K_a: -1, pygame.K_d: 1}
_WALK_KEYS = {pygame.K_w: 1, pygame.K_s: -1}


def handle_event(player: Player, event: pygame.event.Event) -> bool:
    """Apply one event to the player; return False when the game should end."""
    if event.type == pygame.QUIT:
        return False
    if event.type == pygame.KEYDOWN:
        if event.key == pygame.K_ESCAPE:
            return False
        if event.key in _TURN_KEYS:
            player.turn = _TURN_KEYS[event.key]
        elif event.key in _WALK_KEYS:
            player.walk = _WALK_KEYS[event.key]
    elif event.type == pygame.KEYUP:
        if event.key in _TURN_KEYS:
            player.turn = 0
        elif event.key in _WALK_KEYS:
            player.walk = 0
    return True