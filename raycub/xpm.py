"""Reading XPM images into packed pixel images."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from typing import Optional

from raycub.canvas import Image
from raycub.colornames import lookup_color
from raycub.wordtab import find, find_unquoted, split_words

_TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class XpmError(Exception):
    """An XPM image could not be read."""


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def _hex_value(text: str) -> int:
    match = _HEX.match(text)
    if not match:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def strip_comments(text: str) -> str:
    """Blank out ``/* */`` and ``//`` comments that lie outside quotes.

    The text keeps its length; a line comment swallows its newline.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find(text[begin + 2:], "*/", len(text) - begin - 2)
        count = min(end + 4, len(text) - begin)
        text = text[:begin] + " " * count + text[begin + count:]
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find(text[begin + 2:], "\n", len(text) - begin - 2)
        count = min(end + 3, len(text) - begin)
        text = text[:begin] + " " * count + text[begin + count:]
    return text


def text_to_rgb(name: str, extra: Optional[str]) -> int:
    """Return the colour for an XPM colour word, optionally two words long.

    ``#rrggbb`` is read as hexadecimal; names are looked up ignoring case,
    ``none`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        return _hex_value(name[1:])
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_BUFFER]
    value = lookup_color(name)
    return 0 if value is None else value


def _pixel_bytes(color: int) -> bytes:
    if color == -1:
        color = _TRANSPARENT
    return (color & 0xFFFFFFFF).to_bytes(4, "little")


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError("incomplete XPM header")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError("invalid XPM header")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    words = split_words(line[cpp:])
    try:
        index = words.index("c")
    except ValueError:
        raise XpmError("colour definition without a 'c' key") from None
    if index + 1 >= len(words):
        raise XpmError("colour definition without a value")
    extra = words[index + 2] if index + 2 < len(words) else None
    return line[:cpp], text_to_rgb(words[index + 1], extra)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM file, header first."""
    source = iter(lines)

    def next_line() -> str:
        line = next(source, None)
        if line is None:
            raise XpmError("XPM data ends early")
        return line

    width, height, ncolors, cpp = _read_header(next_line())
    # Short keys keep the last definition, long keys the first.
    last_wins = cpp <= 2
    palette: dict[str, bytes] = {}
    for _ in range(ncolors):
        key, color = _read_color(next_line(), cpp)
        if last_wins or key not in palette:
            palette[key] = _pixel_bytes(color)
    blank = _pixel_bytes(0)
    image = Image(width, height)
    for row in range(height):
        line = next_line()
        pixels = b"".join(
            palette.get(line[x * cpp:(x + 1) * cpp], blank) for x in range(width)
        )
        offset = row * image.line_len
        image.data[offset:offset + len(pixels)] = pixels
    return image


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            return
        closing = text.find('"', opening + 1)
        if closing == -1:
            return
        yield text[opening + 1:closing]
        pos = closing + 1


def load_xpm(path: str | os.PathLike[str]) -> Image:
    """Read an XPM file from disk."""
    try:
        with open(path, encoding="latin-1", newline="") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)}") from exc
    return parse_xpm(_quoted_strings(strip_comments(text)))