"""nopadb64 - unpadded base64 codec over caller-supplied buffers.

Encodes byte strings whose length is a multiple of 3 into the standard base64
alphabet (``A-Z a-z 0-9 + /``) without ``=`` padding, and decodes them back,
writing into exactly sized output buffers.

Example:
    ```python
    from nopadb64 import decode, encode

    out = bytearray(4)
    encode(b"\\x00\\x01\\x02", out)
    assert out == b"AAEC"

    raw = bytearray(3)
    decode(b"AAEC", raw)
    assert raw == b"\\x00\\x01\\x02"
    ```
"""

from .alphabet import char_to_index, index_to_char
from .bits import combine, split
from .codec import decode, encode
from .constants import ALPHABET, ENCODED_CHUNK_SIZE, RAW_CHUNK_SIZE
from .errors import (
    InvalidCharacterError,
    InvalidIndexError,
    InvalidInputLengthError,
    InvalidOutputLengthError,
    NoPadBase64Error,
)
from .utils import decoded_length, encoded_length, from_base64, to_base64

__version__ = "0.1.0"

__all__ = [
    # Codec
    "encode",
    "decode",
    # Building blocks
    "index_to_char",
    "char_to_index",
    "split",
    "combine",
    # Helpers
    "encoded_length",
    "decoded_length",
    "to_base64",
    "from_base64",
    # Constants
    "ALPHABET",
    "RAW_CHUNK_SIZE",
    "ENCODED_CHUNK_SIZE",
    # Errors
    "NoPadBase64Error",
    "InvalidInputLengthError",
    "InvalidOutputLengthError",
    "InvalidCharacterError",
    "InvalidIndexError",
    # Version
    "__version__",
]
