import pytest

from raycub.xpm import XpmError, load_xpm, parse_xpm, strip_comments, text_to_rgb


def test_strip_block_comment_keeps_length():
    text = "/* XPM */\nstatic char *x[] = {"
    result = strip_comments(text)
    assert "XPM" not in result
    assert len(result) == len(text)
    assert result.endswith("static char *x[] = {")


def test_strip_line_comment_swallows_newline():
    text = "a // note\nb"
    result = strip_comments(text)
    assert result == "a" + " " * (len(text) - 2) + "b"


def test_comment_markers_inside_quotes_survive():
    text = '"/* kept */"'
    assert strip_comments(text) == text


@pytest.mark.parametrize(
    "name, extra, expected",
    [
        ("#FF0000", None, 0xFF0000),
        ("red", None, 0xFF0000),
        ("RED", None, 0xFF0000),
        ("ghost", "white", 0xF8F8FF),
        ("None", None, -1),
        ("nosuchcolour", None, 0),
    ],
)
def test_text_to_rgb(name, extra, expected):
    assert text_to_rgb(name, extra) == expected


def test_parse_small_image():
    image = parse_xpm(["2 2 2 1", "a c #FF0000", "b c None", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_short_keys_keep_last_definition():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.get_pixel(0, 0) == 0x0000FF


def test_long_keys_keep_first_definition():
    image = parse_xpm(["1 1 2 3", "aaa c red", "aaa c blue", "aaa"])
    assert image.get_pixel(0, 0) == 0xFF0000


def test_unknown_pixel_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.get_pixel(0, 0) == 0


@pytest.mark.parametrize("header", ["0 1 1 1", "1 1 1", "x 1 1 1"])
def test_bad_header(header):
    with pytest.raises(XpmError):
        parse_xpm([header, "a c red", "a"])


def test_missing_c_key():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", "a s red", "a"])


def test_truncated_data():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", "a c red", "a"])


def test_load_from_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(
        "/* XPM */\n"
        "static char *wall[] = {\n"
        "/* columns rows colors chars-per-pixel */\n"
        '"2 1 2 1",\n'
        '"a c #00FF00",\n'
        '"b c blue",\n'
        "// pixels\n"
        '"ab"\n'
        "};\n"
    )
    image = load_xpm(path)
    assert image.width == 2
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == 0x0000FF


def test_load_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")