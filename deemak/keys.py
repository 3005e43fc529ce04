"""Translation of pressed keys into the characters they type."""

from __future__ import annotations

from typing import Optional

__all__ = ["key_to_char"]

# Key codes follow the pygame convention: a printable key's code is the code
# point of the character it types without shift.
_SHIFTED = {
    "0": ")",
    "1": "!",
    "2": "@",
    "3": "#",
    "4": "$",
    "5": "%",
    "6": "^",
    "7": "&",
    "8": "*",
    "9": "(",
    ",": "<",
    ".": ">",
    "/": "?",
    ";": ":",
    "'": '"',
    "[": "{",
    "]": "}",
    "-": "_",
    "=": "+",
    "\\": "|",
    "`": "~",
}

_KEYS = {ord(plain): (plain, shifted) for plain, shifted in _SHIFTED.items()}
_KEYS.update({code: (chr(code), chr(code).upper()) for code in range(ord("a"), ord("z") + 1)})
_KEYS[ord(" ")] = (" ", " ")


def key_to_char(key: int, shift: bool) -> Optional[str]:
    """Return the character typed by ``key`` on a US layout, or ``None``."""
    pair = _KEYS.get(key)
    if pair is None:
        return None
    plain, shifted = pair
    return shifted if shift else plain