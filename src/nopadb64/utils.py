"""Buffer sizing and convenience helpers for nopadb64."""

from __future__ import annotations

from .codec import decode, encode
from .constants import ENCODED_CHUNK_SIZE, RAW_CHUNK_SIZE
from .errors import InvalidCharacterError, InvalidInputLengthError


def encoded_length(n: int) -> int:
    """Return the encoded size of ``n`` raw bytes.

    Raises:
        ValueError: If ``n`` is negative.
        InvalidInputLengthError: If ``n`` is not a multiple of 3.
    """
    if n < 0:
        raise ValueError(f"Length cannot be negative: {n}")
    if n % RAW_CHUNK_SIZE != 0:
        raise InvalidInputLengthError(n, RAW_CHUNK_SIZE)
    return n // RAW_CHUNK_SIZE * ENCODED_CHUNK_SIZE


def decoded_length(n: int) -> int:
    """Return the decoded size of ``n`` encoded characters.

    Raises:
        ValueError: If ``n`` is negative.
        InvalidInputLengthError: If ``n`` is not a multiple of 4.
    """
    if n < 0:
        raise ValueError(f"Length cannot be negative: {n}")
    if n % ENCODED_CHUNK_SIZE != 0:
        raise InvalidInputLengthError(n, ENCODED_CHUNK_SIZE)
    return n // ENCODED_CHUNK_SIZE * RAW_CHUNK_SIZE


def to_base64(data: bytes) -> str:
    """Encode bytes to unpadded base64.

    Args:
        data: The bytes to encode. Length must be a multiple of 3.

    Returns:
        Base64 string without padding.
    """
    out = bytearray(encoded_length(len(data)))
    encode(data, out)
    return out.decode("ascii")


def from_base64(s: str | bytes) -> bytes:
    """Decode an unpadded base64 string to bytes.

    Args:
        s: The base64 text. Length must be a multiple of 4.

    Returns:
        The decoded bytes.
    """
    if isinstance(s, str):
        for position, c in enumerate(s):
            if ord(c) > 0x7F:
                raise InvalidCharacterError(ord(c), position)
        s = s.encode("ascii")
    out = bytearray(decoded_length(len(s)))
    decode(s, out)
    return bytes(out)
