import pytest

from tinyraycaster.colors import pack_color
from tinyraycaster.framebuffer import Framebuffer

WHITE = pack_color(255, 255, 255, 255)
RED = pack_color(255, 0, 0, 255)


def test_created_filled_with_clear_color():
    fb = Framebuffer(8, 4, WHITE)
    assert len(fb.pixels) == 32
    assert all(p == WHITE for p in fb.pixels)


def test_set_and_get_pixel():
    fb = Framebuffer(8, 4, WHITE)
    fb.set_pixel(3, 2, RED)
    assert fb.get_pixel(3, 2) == RED
    assert fb.pixels[3 + 2 * 8] == RED
    assert sum(1 for p in fb.pixels if p == RED) == 1


def test_set_pixel_truncates_floats():
    fb = Framebuffer(8, 4, WHITE)
    fb.set_pixel(2.9, 1.7, RED)
    assert fb.get_pixel(2, 1) == RED


@pytest.mark.parametrize("x,y", [(8, 0), (0, 4), (-1, 0), (0, -2)])
def test_out_of_bounds_pixel(x, y):
    fb = Framebuffer(8, 4, WHITE)
    with pytest.raises(IndexError):
        fb.set_pixel(x, y, RED)
    with pytest.raises(IndexError):
        fb.get_pixel(x, y)


def test_clear_resets_everything():
    fb = Framebuffer(5, 5, WHITE)
    fb.draw_rect(0, 0, 3, 3, RED)
    fb.clear(WHITE)
    assert all(p == WHITE for p in fb.pixels)


def test_draw_rect_inside():
    fb = Framebuffer(10, 10, WHITE)
    fb.draw_rect(2, 3, 4, 2, RED)
    painted = {(i % 10, i // 10) for i, p in enumerate(fb.pixels) if p == RED}
    assert painted == {(x, y) for x in range(2, 6) for y in range(3, 5)}


def test_draw_rect_clips_at_edges():
    fb = Framebuffer(10, 10, WHITE)
    fb.draw_rect(8, 8, 5, 5, RED)
    painted = {(i % 10, i // 10) for i, p in enumerate(fb.pixels) if p == RED}
    assert painted == {(x, y) for x in range(8, 10) for y in range(8, 10)}


def test_draw_rect_negative_origin_clips():
    fb = Framebuffer(10, 10, WHITE)
    fb.draw_rect(-3, -1, 6, 6, RED)
    painted = {(i % 10, i // 10) for i, p in enumerate(fb.pixels) if p == RED}
    assert painted == {(x, y) for x in range(0, 3) for y in range(0, 5)}


def test_draw_rect_fully_outside_changes_nothing():
    fb = Framebuffer(10, 10, WHITE)
    fb.draw_rect(20, 20, 3, 3, RED)
    assert all(p == WHITE for p in fb.pixels)


def test_to_bytes_layout():
    fb = Framebuffer(2, 1, WHITE)
    fb.set_pixel(0, 0, pack_color(1, 2, 3, 4))
    data = fb.to_bytes()
    assert len(data) == 8
    assert data[:4] == bytes([1, 2, 3, 4])
    assert data[4:] == bytes([255, 255, 255, 255])


def test_invalid_size():
    with pytest.raises(ValueError):
        Framebuffer(0, 4, WHITE)