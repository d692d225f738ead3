"""Monotonic ULID generation within a millisecond."""

from core import codec
from core.errors import UlidOverflowError
from core.ulid import Ulid
from internal.logging import get_logger
from utils.entropy import random_bytes
from utils.timestamp import now_millis

_MAX_RANDOMNESS_INT = (1 << codec.RANDOMNESS_BITS) - 1


class UlidGenerator:
    """Issues strictly increasing ULIDs for calls sharing a timestamp.

    When the timestamp repeats, the previous randomness is incremented by one
    instead of being redrawn. Not thread-safe: give each worker its own
    generator, or guard a shared one with a lock.
    """

    def __init__(self, clock=None, entropy=None):
        self.clock = clock or now_millis
        self.entropy = entropy or random_bytes
        self.last_timestamp = 0
        self.last_randomness = bytes(codec.RANDOMNESS_LEN)
        self._log = get_logger()

    def new(self, timestamp=None):
        """Return the next ULID value; `timestamp` overrides the clock."""
        current = codec.check_timestamp(self.clock() if timestamp is None else timestamp)

        if current == self.last_timestamp:
            value = int.from_bytes(self.last_randomness, "big") + 1
            if value > _MAX_RANDOMNESS_INT:
                raise UlidOverflowError(
                    "randomness exhausted for this millisecond", timestamp_ms=current
                )
            self.last_randomness = value.to_bytes(codec.RANDOMNESS_LEN, "big")
        else:
            if current < self.last_timestamp:
                self._log.warn("clock regression", previous_ms=self.last_timestamp, current_ms=current)
            self.last_randomness = codec.check_randomness(self.entropy(codec.RANDOMNESS_LEN))
            self.last_timestamp = current

        return Ulid(current, self.last_randomness)

    def generate(self, timestamp=None):
        """Return the next ULID as a 26-character string."""
        return self.new(timestamp).encode()
