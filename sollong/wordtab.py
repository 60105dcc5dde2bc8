"""Substring search and whitespace splitting used by the XPM reader."""

from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("needle must not be empty")


def find(text: str, needle: str) -> int:
    """Return the index of the first occurrence of ``needle``, or -1."""
    _check_needle(needle)
    return text.find(needle)


def find_unquoted(text: str, needle: str) -> int:
    """Return the index of the first ``needle`` outside double quotes, or -1.

    A double quote toggles the quoted state before the match is tried at
    its own position, so a needle that begins with a quote is never found.
    """
    _check_needle(needle)
    quoted = False
    last_start = len(text) - len(needle) + 1
    for pos, char in enumerate(text[:max(last_start, 0)]):
        if char == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs only."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]