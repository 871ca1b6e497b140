"""Error hierarchy for nopadb64."""

from __future__ import annotations


class NoPadBase64Error(Exception):
    """Base exception for all nopadb64 errors."""

    pass


class InvalidInputLengthError(NoPadBase64Error):
    """Input length is not a whole number of chunks.

    Attributes:
        length: Length of the rejected input.
        chunk_size: Chunk size the input must be a multiple of.
    """

    def __init__(self, length: int, chunk_size: int) -> None:
        self.length = length
        self.chunk_size = chunk_size
        super().__init__(f"Input length {length} is not a multiple of {chunk_size} bytes")


class InvalidOutputLengthError(NoPadBase64Error):
    """Output buffer does not have exactly the required size.

    Attributes:
        length: Length of the supplied output buffer.
        expected: Length the output buffer must have.
    """

    def __init__(self, length: int, expected: int) -> None:
        self.length = length
        self.expected = expected
        super().__init__(f"Output length {length} does not match required length {expected}")


class InvalidCharacterError(NoPadBase64Error):
    """Byte outside the base64 alphabet.

    Attributes:
        char: The offending byte value.
        position: Offset of the byte in the decoded input, if known.
    """

    def __init__(self, char: int, position: int | None = None) -> None:
        self.char = char
        self.position = position
        message = f"Invalid base64 character 0x{char:02x}"
        if position is not None:
            message += f" at position {position}"
        super().__init__(message)


class InvalidIndexError(NoPadBase64Error):
    """6-bit index outside [0, 63]."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Invalid base64 index: {index}")
