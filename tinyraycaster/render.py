"""Drawing of the top-down map, the ray-cast 3D view and billboard sprites."""

from __future__ import annotations

import math
from collections.abc import Sequence
from operator import attrgetter

from .colors import pack_color, unpack_color
from .entities import Player, Sprite, update_sprite_distances
from .framebuffer import Framebuffer
from .gamemap import GameMap
from .texture import Texture

__all__ = [
    "sort_sprites",
    "wall_tex_coord_x",
    "draw_map_sprite",
    "draw_sprite",
    "render",
]

MAP_SPRITE_COLOR = pack_color(255, 0, 0, 255)
MAX_SPRITE_SIZE = 1000
MAX_COLUMN_HEIGHT = 2000
FAR_DEPTH = 1000.0
RAY_STEP = 0.01
RAY_STEPS = 2000  # rays travel at most 20 map cells


def sort_sprites(sprites: list[Sprite]) -> None:
    """Sort sprites in place, farthest from the player first."""
    sprites.sort(key=attrgetter("player_dist"), reverse=True)


def wall_tex_coord_x(hit_x: float, hit_y: float, texture: Texture) -> int:
    """Return the texture column for the point where a ray hit a wall."""
    x = hit_x - math.floor(hit_x + 0.5)
    y = hit_y - math.floor(hit_y + 0.5)
    tex = int(x * texture.size)
    if abs(y) > abs(x):
        tex = int(y * texture.size)
    if tex < 0:
        tex += texture.size
    if not 0 <= tex < texture.size:
        raise ValueError(f"texture column {tex} outside 0..{texture.size - 1}")
    return tex


def _cell_size(fb: Framebuffer, game_map: GameMap) -> tuple[int, int]:
    return fb.width // (game_map.width * 2), fb.height // game_map.height


def _scaled_size(height: int, dist: float, limit: int) -> int:
    if dist <= 0 or height / dist >= limit:
        return limit
    return int(height / dist)


def draw_map_sprite(sprite: Sprite, fb: Framebuffer, game_map: GameMap) -> None:
    """Mark a sprite's position on the top-down map."""
    rect_w, rect_h = _cell_size(fb, game_map)
    fb.draw_rect(
        sprite.x * rect_w - 3, sprite.y * rect_h - 1, 6, 6, MAP_SPRITE_COLOR
    )


def draw_sprite(
    sprite: Sprite,
    depth_buffer: Sequence[float],
    fb: Framebuffer,
    player: Player,
    texture: Texture,
) -> None:
    """Draw a sprite into the 3D view, hidden where walls are nearer."""
    sprite_dir = math.atan2(sprite.y - player.y, sprite.x - player.x)
    while sprite_dir - player.angle > math.pi:
        sprite_dir -= 2 * math.pi
    while sprite_dir - player.angle < -math.pi:
        sprite_dir += 2 * math.pi

    half = fb.width // 2
    size = _scaled_size(fb.height, sprite.player_dist, MAX_SPRITE_SIZE)
    if size <= 0:
        return
    h_offset = int(
        (sprite_dir - player.angle) * half / player.fov + half // 2 - size // 2
    )
    v_offset = fb.height // 2 - size // 2
    rows = range(max(0, -v_offset), min(size, fb.height - v_offset))

    for i in range(max(0, -h_offset), min(size, half - h_offset)):
        if depth_buffer[h_offset + i] < sprite.player_dist:
            continue
        tex_i = i * texture.size // size
        x = half + h_offset + i
        for j in rows:
            color = texture.texel(tex_i, j * texture.size // size, sprite.tex_id)
            if unpack_color(color)[3] > 128:
                fb.set_pixel(x, v_offset + j, color)


def _draw_map(fb: Framebuffer, game_map: GameMap, wall_textures: Texture) -> None:
    rect_w, rect_h = _cell_size(fb, game_map)
    for j in range(game_map.height):
        for i in range(game_map.width):
            if game_map.is_empty(i, j):
                continue
            color = wall_textures.texel(0, 0, game_map.cell(i, j))
            fb.draw_rect(i * rect_w, j * rect_h, rect_w, rect_h, color)


def _cast_ray(
    fb: Framebuffer,
    game_map: GameMap,
    player: Player,
    angle: float,
    wall_textures: Texture,
    cone_color: int,
) -> tuple[float, list[int]] | None:
    """Walk a ray, tracing it on the map; return wall distance and column."""
    rect_w, rect_h = _cell_size(fb, game_map)
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    for step in range(RAY_STEPS):
        t = step * RAY_STEP
        x = player.x + t * cos_a
        y = player.y + t * sin_a
        fb.set_pixel(x * rect_w, y * rect_h, cone_color)
        if game_map.is_empty(x, y):
            continue
        tex_id = game_map.cell(x, y)
        dist = t * math.cos(angle - player.angle)
        height = _scaled_size(fb.height, dist, MAX_COLUMN_HEIGHT)
        tex_x = wall_tex_coord_x(x, y, wall_textures)
        return dist, wall_textures.column(tex_id, tex_x, height)
    return None


def render(
    fb: Framebuffer,
    game_map: GameMap,
    player: Player,
    sprites: list[Sprite],
    wall_textures: Texture,
    sprite_textures: Texture,
    clear_color: int,
    cone_color: int,
) -> None:
    """Draw the map on the left half and the player's view on the right."""
    fb.clear(clear_color)
    _draw_map(fb, game_map, wall_textures)

    half = fb.width // 2
    depth_buffer = [FAR_DEPTH] * half

    for i in range(half):
        angle = player.angle - player.fov / 2 + player.fov * i / half
        hit = _cast_ray(fb, game_map, player, angle, wall_textures, cone_color)
        if hit is None:
            continue
        dist, column = hit
        depth_buffer[i] = dist
        top = fb.height // 2 - len(column) // 2
        for offset in range(max(0, -top), min(len(column), fb.height - top)):
            fb.set_pixel(half + i, top + offset, column[offset])

    update_sprite_distances(sprites, player)
    sort_sprites(sprites)
    for sprite in sprites:
        draw_map_sprite(sprite, fb, game_map)
        draw_sprite(sprite, depth_buffer, fb, player, sprite_textures)