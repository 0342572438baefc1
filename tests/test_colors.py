import pytest

from tinyraycaster.colors import pack_color, unpack_color, write_ppm


def test_pack_places_red_in_low_byte():
    assert pack_color(255, 0, 0, 255) == 0xFF0000FF


def test_pack_white_is_all_ones():
    assert pack_color(255, 255, 255, 255) == 0xFFFFFFFF


def test_unpack_orders_components():
    assert unpack_color(0x11223344) == (0x44, 0x33, 0x22, 0x11)


@pytest.mark.parametrize(
    "rgba",
    [(0, 0, 0, 0), (255, 255, 255, 255), (160, 160, 160, 255), (1, 2, 3, 4), (255, 0, 128, 7)],
)
def test_round_trip(rgba):
    assert unpack_color(pack_color(*rgba)) == rgba


def test_pack_rejects_out_of_range():
    with pytest.raises(ValueError):
        pack_color(256, 0, 0, 0)
    with pytest.raises(ValueError):
        pack_color(0, -1, 0, 0)


def test_write_ppm_header_and_body(tmp_path):
    path = tmp_path / "out.ppm"
    image = [pack_color(255, 0, 0, 255), pack_color(0, 255, 0, 0)]
    write_ppm(path, image, 2, 1)
    data = path.read_bytes()
    header = b"P6\n2 1\n255\n"
    assert data.startswith(header)
    assert data[len(header):] == bytes([255, 0, 0, 0, 255, 0])


def test_write_ppm_size_mismatch(tmp_path):
    with pytest.raises(ValueError):
        write_ppm(tmp_path / "bad.ppm", [0, 0, 0], 2, 2)