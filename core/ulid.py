"""
ULID - Universally Unique Lexicographically Sortable Identifier.

Format: 6 bytes ms timestamp + 10 bytes random = 26 char Crockford base32.
"""

from functools import total_ordering

from core import codec
from core.errors import InvalidLengthError, UlidOverflowError
from utils.entropy import random_bytes
from utils.timestamp import format_timestamp, now_millis, to_datetime


@total_ordering
class Ulid:
    """Immutable (timestamp, randomness) pair, ordered by its 128-bit value."""

    __slots__ = ("_timestamp", "_randomness")

    def __init__(self, timestamp, randomness):
        object.__setattr__(self, "_timestamp", codec.check_timestamp(timestamp))
        object.__setattr__(self, "_randomness", codec.check_randomness(randomness))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def decode(cls, value):
        return cls(*codec.decode(value))

    @classmethod
    def from_int(cls, value):
        if value < 0 or value >> 128:
            raise UlidOverflowError(f"{value} does not fit in 128 bits")
        return cls(*codec.unpack(value))

    @classmethod
    def from_bytes(cls, data):
        data = bytes(data)
        if len(data) != 16:
            raise InvalidLengthError(
                f"ULID bytes must be 16 long, got {len(data)}", expected=16, actual=len(data)
            )
        return cls.from_int(int.from_bytes(data, "big"))

    @property
    def timestamp(self):
        return self._timestamp

    @property
    def randomness(self):
        return self._randomness

    @property
    def milliseconds(self):
        return self._timestamp

    @property
    def datetime(self):
        """UTC time of the timestamp, or None past datetime.max (year 9999)."""
        try:
            return to_datetime(self._timestamp)
        except OverflowError:
            return None

    @property
    def int(self):
        return codec.pack(self._timestamp, self._randomness)

    @property
    def bytes(self):
        return self.int.to_bytes(16, "big")

    def encode(self):
        return codec.encode(self._timestamp, self._randomness)

    def to_dict(self):
        dt = self.datetime
        return {
            "ulid": self.encode(),
            "timestamp": self._timestamp,
            "time": format_timestamp(self._timestamp) if dt is not None else None,
            "randomness": self._randomness.hex(),
        }

    def __str__(self):
        return self.encode()

    def __repr__(self):
        return f"Ulid('{self.encode()}')"

    def __eq__(self, other):
        if not isinstance(other, Ulid):
            return NotImplemented
        return self._timestamp == other._timestamp and self._randomness == other._randomness

    def __lt__(self, other):
        if not isinstance(other, Ulid):
            return NotImplemented
        return (self._timestamp, self._randomness) < (other._timestamp, other._randomness)

    def __hash__(self):
        return hash((self._timestamp, self._randomness))


def generate_ulid(clock=now_millis, entropy=random_bytes):
    """Generate a fresh, non-monotonic ULID value."""
    return Ulid(codec.check_timestamp(clock()), entropy(codec.RANDOMNESS_LEN))


def generate(clock=now_millis, entropy=random_bytes):
    """Generate a 26-character ULID string."""
    return generate_ulid(clock, entropy).encode()
