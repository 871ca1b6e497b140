"""Unpadded base64 encode/decode into caller-supplied buffers."""

from __future__ import annotations

import logging
from typing import Any

from .alphabet import char_to_index, index_to_char
from .bits import combine, split
from .constants import ENCODED_CHUNK_SIZE, LOGGER_NAME, RAW_CHUNK_SIZE
from .errors import InvalidCharacterError, InvalidInputLengthError, InvalidOutputLengthError

logger = logging.getLogger(LOGGER_NAME)


def _byte_view(buffer: Any) -> memoryview:
    """Return a flat unsigned-byte view of a buffer-protocol object."""
    return memoryview(buffer).cast("B")


def _check_lengths(src: memoryview, dst: memoryview, in_size: int, out_size: int) -> None:
    nin = len(src)
    nout = len(dst)
    if nin % in_size != 0:
        logger.debug("Rejecting input of %d bytes: not a multiple of %d", nin, in_size)
        raise InvalidInputLengthError(nin, in_size)
    expected = nin // in_size * out_size
    if nout != expected:
        logger.debug("Rejecting output buffer of %d bytes: expected %d", nout, expected)
        raise InvalidOutputLengthError(nout, expected)


def encode(data: Any, out: Any) -> None:
    """Encode bytes as unpadded base64 into ``out``.

    Args:
        data: Bytes-like input. Length must be a multiple of 3.
        out: Writable buffer of exactly ``len(data) * 4 // 3`` bytes.

    Raises:
        TypeError: If ``out`` is read-only.
        InvalidInputLengthError: If the input is not a multiple of 3 bytes.
        InvalidOutputLengthError: If ``out`` has the wrong size.
        InvalidIndexError: If an index falls outside the alphabet.
    """
    with _byte_view(data) as src, _byte_view(out) as dst:
        if dst.readonly:
            raise TypeError("Output buffer must be writable")
        _check_lengths(src, dst, RAW_CHUNK_SIZE, ENCODED_CHUNK_SIZE)

        for j in range(len(src) // RAW_CHUNK_SIZE):
            start = RAW_CHUNK_SIZE * j
            base = ENCODED_CHUNK_SIZE * j
            for i, index in enumerate(split(src[start : start + RAW_CHUNK_SIZE])):
                dst[base + i] = index_to_char(index)


def decode(data: Any, out: Any) -> None:
    """Decode unpadded base64 text into ``out``.

    Args:
        data: Bytes-like ASCII input. Length must be a multiple of 4.
        out: Writable buffer of exactly ``len(data) * 3 // 4`` bytes.

    Raises:
        TypeError: If ``out`` is read-only.
        InvalidInputLengthError: If the input is not a multiple of 4 bytes.
        InvalidOutputLengthError: If ``out`` has the wrong size.
        InvalidCharacterError: On the first byte outside the alphabet.
    """
    with _byte_view(data) as src, _byte_view(out) as dst:
        if dst.readonly:
            raise TypeError("Output buffer must be writable")
        _check_lengths(src, dst, ENCODED_CHUNK_SIZE, RAW_CHUNK_SIZE)

        converted = [0] * ENCODED_CHUNK_SIZE
        for j in range(len(src) // ENCODED_CHUNK_SIZE):
            start = ENCODED_CHUNK_SIZE * j
            base = RAW_CHUNK_SIZE * j
            for i in range(ENCODED_CHUNK_SIZE):
                char = src[start + i]
                try:
                    converted[i] = char_to_index(char)
                except InvalidCharacterError:
                    logger.debug("Invalid base64 character 0x%02x at position %d", char, start + i)
                    raise InvalidCharacterError(char, start + i) from None
            dst[base], dst[base + 1], dst[base + 2] = combine(converted)
