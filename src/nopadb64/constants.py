"""Alphabet and chunking constants for nopadb64."""

# Standard base64 alphabet, in table order. No padding character.
ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"

# ASCII offsets between a 6-bit index and its character
UPPERCASE_OFFSET = 65  # 'A' - 0
LOWERCASE_OFFSET = 71  # 'a' - 26
DIGIT_OFFSET = 4  # 52 - '0'

PLUS_INDEX = 62
SLASH_INDEX = 63
PLUS_CHAR = 43  # '+'
SLASH_CHAR = 47  # '/'

# Chunk sizes (bytes)
RAW_CHUNK_SIZE = 3
ENCODED_CHUNK_SIZE = 4

LOGGER_NAME = "nopadb64"
