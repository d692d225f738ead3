"""
Crockford Base32 codec for ULIDs.

Layout: 48-bit millisecond timestamp + 80-bit randomness = 128 bits,
written as 26 base32 chars (130 bits, top 2 always zero).
Big-endian throughout, so string order equals numeric order.
"""

from core.errors import (
    EncodeError,
    InvalidCharacterError,
    InvalidLengthError,
    UlidOverflowError,
)

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ENCODED_LEN = 26
TIMESTAMP_LEN = 10
RANDOMNESS_LEN = 10
RANDOMNESS_BITS = 80
MAX_TIMESTAMP = (1 << 48) - 1
MAX_RANDOMNESS = b"\xff" * RANDOMNESS_LEN
INVALID = 0xFF

_ALPHABET_BYTES = ALPHABET.encode("ascii")
_RANDOMNESS_MASK = (1 << RANDOMNESS_BITS) - 1


def _build_decode_table():
    table = [INVALID] * 256
    for value, char in enumerate(ALPHABET):
        table[ord(char)] = value
        table[ord(char.lower())] = value
    return tuple(table)


# Read-only after import; safe to share between threads.
DECODE_TABLE = _build_decode_table()


def check_timestamp(timestamp):
    if timestamp < 0 or timestamp > MAX_TIMESTAMP:
        raise UlidOverflowError(
            f"timestamp {timestamp} outside 0..{MAX_TIMESTAMP}", timestamp_ms=timestamp
        )
    return timestamp


def check_randomness(randomness):
    randomness = bytes(randomness)
    if len(randomness) != RANDOMNESS_LEN:
        raise InvalidLengthError(
            f"randomness must be {RANDOMNESS_LEN} bytes, got {len(randomness)}",
            expected=RANDOMNESS_LEN,
            actual=len(randomness),
        )
    return randomness


def pack(timestamp, randomness):
    """Combine timestamp and randomness into the 128-bit integer."""
    check_timestamp(timestamp)
    randomness = check_randomness(randomness)
    return (timestamp << RANDOMNESS_BITS) | int.from_bytes(randomness, "big")


def unpack(value):
    """Split a 128-bit integer into (timestamp, randomness)."""
    timestamp = (value >> RANDOMNESS_BITS) & MAX_TIMESTAMP
    randomness = (value & _RANDOMNESS_MASK).to_bytes(RANDOMNESS_LEN, "big")
    return timestamp, randomness


def _encode_int(value):
    return bytes(
        _ALPHABET_BYTES[(value >> (125 - 5 * i)) & 0x1F] for i in range(ENCODED_LEN)
    )


def encode(timestamp, randomness):
    """Encode (timestamp, randomness) as a 26-char uppercase ULID string."""
    return _encode_int(pack(timestamp, randomness)).decode("ascii")


def encode_into(timestamp, randomness, buffer):
    """Write the 26 ASCII bytes of the ULID into a writable buffer.

    The buffer is left untouched unless its length is exactly 26.
    """
    if len(buffer) != ENCODED_LEN:
        raise EncodeError(
            f"encode buffer must be {ENCODED_LEN} bytes, got {len(buffer)}",
            buffer_len=len(buffer),
        )
    buffer[:] = _encode_int(pack(timestamp, randomness))


def _as_bytes(value):
    if isinstance(value, str):
        try:
            return value.encode("ascii")
        except UnicodeEncodeError as exc:
            raise InvalidCharacterError(
                f"non-ASCII character at position {exc.start}",
                position=exc.start,
                char=value[exc.start],
                cause=exc,
            ) from exc
    return bytes(value)


def decode_int(value):
    """Decode a ULID string (str or bytes-like) into its 128-bit integer."""
    if len(value) != ENCODED_LEN:
        raise InvalidLengthError(
            f"ULID must be {ENCODED_LEN} characters, got {len(value)}",
            expected=ENCODED_LEN,
            actual=len(value),
        )
    data = _as_bytes(value)

    acc = 0
    for position, byte in enumerate(data):
        bits = DECODE_TABLE[byte]
        if bits == INVALID:
            raise InvalidCharacterError(
                f"invalid character {chr(byte)!r} at position {position}",
                position=position,
                char=chr(byte),
            )
        acc = (acc << 5) | bits
    if acc >> 128:
        raise UlidOverflowError(
            f"ULID {data.decode('ascii')!r} exceeds 128 bits; first character must be 0-7"
        )
    return acc


def decode(value):
    """Decode a ULID string into (timestamp, randomness)."""
    return unpack(decode_int(value))
