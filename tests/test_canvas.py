import pytest

from raycub.canvas import Image, Rect, create_trgb
from raycub.colornames import lookup_color
from raycub.geometry import Vector


def _count(image, color):
    return sum(
        image.get_pixel(x, y) == color
        for y in range(image.height)
        for x in range(image.width)
    )


def test_create_trgb_matches_named_colours():
    assert create_trgb(0, 255, 0, 0) == lookup_color("red")
    assert create_trgb(0, 0, 0, 255) == lookup_color("blue")
    assert create_trgb(0, 255, 255, 255) == lookup_color("white")


def test_create_trgb_places_transparency_on_top():
    assert create_trgb(1, 0, 0, 0) >> 24 == 1
    assert create_trgb(1, 2, 3, 4) & 0xFFFFFF == create_trgb(0, 2, 3, 4)


@pytest.mark.parametrize("endian", [0, 1])
def test_put_get_round_trip(endian):
    image = Image(4, 3, endian)
    image.put_pixel(2, 1, 0x11223344)
    assert image.get_pixel(2, 1) == 0x11223344
    assert image.get_pixel(1, 2) == 0


def test_little_endian_byte_order():
    image = Image(2, 2, 0)
    image.put_pixel(0, 0, 0x11223344)
    assert image.data[:4] == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_order():
    image = Image(2, 2, 1)
    image.put_pixel(0, 0, 0x11223344)
    assert image.data[:4] == bytes([0x11, 0x22, 0x33, 0x44])


def test_negative_colour_is_stored_as_unsigned():
    image = Image(1, 1)
    image.put_pixel(0, 0, -1)
    assert image.get_pixel(0, 0) == 0xFFFFFFFF


def test_out_of_bounds_put_is_ignored():
    image = Image(3, 3)
    for x, y in [(-1, 0), (3, 0), (0, 3), (0, -1)]:
        image.put_pixel(x, y, 0xFFFFFF)
    assert image.data == bytearray(3 * 3 * 4)


def test_out_of_bounds_get_raises():
    image = Image(3, 3)
    with pytest.raises(IndexError):
        image.get_pixel(3, 0)


def test_negative_dimensions_rejected():
    with pytest.raises(ValueError):
        Image(-1, 2)


def test_rectangle_fills_exact_area():
    image = Image(10, 8)
    image.draw_rectangle(Rect(Vector(3, 2), Vector(4, 5), 0xABCDEF))
    assert _count(image, 0xABCDEF) == 3 * 2
    assert image.get_pixel(4, 5) == 0xABCDEF
    assert image.get_pixel(6, 6) == 0xABCDEF
    assert image.get_pixel(7, 5) == 0
    assert image.get_pixel(4, 7) == 0


def test_rectangle_is_clipped_at_top_left():
    image = Image(6, 6)
    image.draw_rectangle(Rect(Vector(3, 3), Vector(-1, -1), 0x123456))
    assert _count(image, 0x123456) == 2 * 2
    assert image.get_pixel(0, 0) == 0x123456


def test_rectangle_covering_whole_image():
    image = Image(5, 4)
    image.draw_rectangle(Rect(Vector(5, 4), Vector(0, 0), 0x00FF00))
    assert _count(image, 0x00FF00) == 5 * 4


def test_ray_draws_horizontal_run():
    image = Image(10, 10)
    image.draw_ray(Vector(0, 5), 0.0, 4, 0xFF0000)
    assert [image.get_pixel(x, 5) for x in range(1, 5)] == [0xFF0000] * 4
    assert _count(image, 0xFF0000) == 4


def test_ray_stops_at_image_edge():
    image = Image(4, 4)
    image.draw_ray(Vector(0, 1), 0.0, 100, 0x0000FF)
    assert _count(image, 0x0000FF) == 3


@pytest.mark.parametrize("endian", [0, 1])
def test_rgb_bytes(endian):
    image = Image(2, 1, endian)
    image.put_pixel(0, 0, 0x112233)
    image.put_pixel(1, 0, 0xFF445566)
    assert image.to_rgb_bytes() == bytes([0x11, 0x22, 0x33, 0x44, 0x55, 0x66])


def test_rgb_bytes_length():
    image = Image(7, 3)
    assert len(image.to_rgb_bytes()) == 7 * 3 * 3