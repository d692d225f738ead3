from core.errors import (
    UlidError,
    InvalidLengthError,
    InvalidCharacterError,
    UlidOverflowError,
    EncodeError,
)
from core.codec import ALPHABET, MAX_TIMESTAMP, decode, encode, encode_into
from core.ulid import Ulid, generate, generate_ulid
from core.generator import UlidGenerator

__all__ = [
    "ALPHABET",
    "MAX_TIMESTAMP",
    "encode",
    "encode_into",
    "decode",
    "generate",
    "generate_ulid",
    "Ulid",
    "UlidGenerator",
    "UlidError",
    "InvalidLengthError",
    "InvalidCharacterError",
    "UlidOverflowError",
    "EncodeError",
]
