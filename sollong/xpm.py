"""Reader for XPM images as used for the game's sprites."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from .colors import lookup_color
from .wordtab import find, find_unquoted, split_words

# Pixel value given to the "None" colour.
TRANSPARENT = 0xFF000000

_QUOTED_RE = re.compile(r'"([^"]*)"')
_ATOI_RE = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xRRGGBB pixel values."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def _atoi(text: str) -> int:
    match = _ATOI_RE.match(text)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, count: int) -> str:
    count = max(0, min(count, len(text) - start))
    return text[:start] + " " * count + text[start + count:]


def strip_comments(text: str) -> str:
    """Replace comments outside double quotes with spaces.

    Block comments are blanked through their closing ``*/``; line comments
    are blanked together with the newline that ends them. The length of the
    text is unchanged.
    """
    while (begin := find_unquoted(text, "/*")) != -1:
        end = find(text[begin + 2:], "*/")
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//")) != -1:
        end = find(text[begin + 2:], "\n")
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings."""
    for match in _QUOTED_RE.finditer(text):
        yield match.group(1)


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"bad header line: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"bad header values: {line!r}")
    return values


def _parse_color(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"no colour key in {line!r}") from None
    if index >= len(words):
        raise XpmError(f"no colour after key in {line!r}")
    suffix = words[index + 1] if index + 1 < len(words) else None
    return lookup_color(words[index], suffix)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an XPM image from its sequence of data strings."""
    rows = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(rows, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour line")
        key = line[:cpp]
        value = _parse_color(line, cpp)
        if cpp <= 2:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    pixels = []
    for _ in range(height):
        line = _next_line(rows, "pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        pixels.append(tuple(row))
    return XpmImage(width, height, tuple(pixels))


def read_xpm(text: str) -> XpmImage:
    """Decode an XPM image from the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode the XPM file at ``path``."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return read_xpm(text)