"""Mapping between 6-bit indices and base64 alphabet characters."""

from __future__ import annotations

from .constants import (
    DIGIT_OFFSET,
    LOWERCASE_OFFSET,
    PLUS_CHAR,
    PLUS_INDEX,
    SLASH_CHAR,
    SLASH_INDEX,
    UPPERCASE_OFFSET,
)
from .errors import InvalidCharacterError, InvalidIndexError


def index_to_char(index: int) -> int:
    """Map a 6-bit index to the ASCII code of its base64 character.

    Args:
        index: Value in [0, 63].

    Returns:
        ASCII code from ``A-Z a-z 0-9 + /``.

    Raises:
        InvalidIndexError: If the index is outside [0, 63].
    """
    if 0 <= index <= 25:
        return index + UPPERCASE_OFFSET
    if 26 <= index <= 51:
        return index + LOWERCASE_OFFSET
    if 52 <= index <= 61:
        return index - DIGIT_OFFSET
    if index == PLUS_INDEX:
        return PLUS_CHAR
    if index == SLASH_INDEX:
        return SLASH_CHAR
    raise InvalidIndexError(index)


def char_to_index(char: int) -> int:
    """Map the ASCII code of a base64 character back to its 6-bit index.

    Args:
        char: ASCII code of the character.

    Returns:
        Index in [0, 63].

    Raises:
        InvalidCharacterError: If the code is not in the alphabet.
    """
    if 65 <= char <= 90:  # A-Z
        return char - UPPERCASE_OFFSET
    if 97 <= char <= 122:  # a-z
        return char - LOWERCASE_OFFSET
    if 48 <= char <= 57:  # 0-9
        return char + DIGIT_OFFSET
    if char == PLUS_CHAR:
        return PLUS_INDEX
    if char == SLASH_CHAR:
        return SLASH_INDEX
    raise InvalidCharacterError(char)
