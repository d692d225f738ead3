"""Unit tests for the Ulid value and one-shot generation."""

from datetime import datetime, timezone

import pytest

from core.codec import ALPHABET, MAX_TIMESTAMP
from core.errors import InvalidLengthError, UlidOverflowError
from core.ulid import Ulid, generate, generate_ulid

KNOWN_ULID = "01AN4Z07BY79KA1307SR9X4MV3"
KNOWN_TIMESTAMP = 1465824320894
KNOWN_RANDOMNESS = bytes.fromhex("3a66a08c07ce13d25363")


class TestUlid:
    """Tests for the Ulid value object."""

    def test_decode(self):
        """Ulid.decode exposes timestamp and randomness."""
        ulid = Ulid.decode(KNOWN_ULID)
        assert ulid.timestamp == KNOWN_TIMESTAMP
        assert ulid.milliseconds == KNOWN_TIMESTAMP
        assert ulid.randomness == KNOWN_RANDOMNESS

    def test_str(self):
        """str() is the canonical encoding."""
        ulid = Ulid(KNOWN_TIMESTAMP, KNOWN_RANDOMNESS)
        assert str(ulid) == KNOWN_ULID
        assert ulid.encode() == KNOWN_ULID
        assert repr(ulid) == f"Ulid('{KNOWN_ULID}')"

    def test_lowercase_decode_encodes_upper(self):
        """Lowercase input re-encodes uppercase."""
        assert str(Ulid.decode(KNOWN_ULID.lower())) == KNOWN_ULID

    def test_datetime(self):
        """datetime is the UTC time of the timestamp."""
        ulid = Ulid.decode(KNOWN_ULID)
        assert ulid.datetime == datetime(2016, 6, 13, 13, 25, 20, 894000, tzinfo=timezone.utc)

    def test_int_and_bytes(self):
        """int and bytes views agree and round-trip."""
        ulid = Ulid.decode(KNOWN_ULID)
        assert ulid.int == int.from_bytes(ulid.bytes, "big")
        assert ulid.bytes[:6] == KNOWN_TIMESTAMP.to_bytes(6, "big")
        assert ulid.bytes[6:] == KNOWN_RANDOMNESS
        assert Ulid.from_int(ulid.int) == ulid
        assert Ulid.from_bytes(ulid.bytes) == ulid

    def test_from_int_out_of_range(self):
        """Integers beyond 128 bits are rejected."""
        with pytest.raises(UlidOverflowError):
            Ulid.from_int(1 << 128)
        with pytest.raises(UlidOverflowError):
            Ulid.from_int(-1)

    def test_from_bytes_length(self):
        """Binary form must be 16 bytes."""
        with pytest.raises(InvalidLengthError):
            Ulid.from_bytes(b"\x00" * 15)

    def test_rejects_large_timestamp(self):
        """Construction rejects timestamps above 48 bits."""
        with pytest.raises(UlidOverflowError):
            Ulid(MAX_TIMESTAMP + 1, bytes(10))

    def test_rejects_short_randomness(self):
        """Construction rejects randomness that is not 10 bytes."""
        with pytest.raises(InvalidLengthError):
            Ulid(0, b"\x00" * 11)

    def test_immutable(self):
        """Attributes cannot be reassigned."""
        ulid = Ulid.decode(KNOWN_ULID)
        with pytest.raises(AttributeError):
            ulid.timestamp = 0
        with pytest.raises(AttributeError):
            ulid._timestamp = 0

    def test_ordering_matches_strings(self):
        """Value order equals string order."""
        values = [
            Ulid(1, b"\xff" * 10),
            Ulid(2, bytes(10)),
            Ulid(2, bytes(9) + b"\x01"),
            Ulid(MAX_TIMESTAMP, bytes(10)),
        ]
        assert sorted(reversed(values)) == values
        assert sorted(str(v) for v in reversed(values)) == [str(v) for v in values]

    def test_equality_and_hash(self):
        """Equal values hash equally; mixed case decodes to the same value."""
        a = Ulid.decode(KNOWN_ULID)
        b = Ulid.decode(KNOWN_ULID.lower())
        assert a == b
        assert len({a, b}) == 1
        assert a != KNOWN_ULID

    def test_to_dict(self):
        """to_dict gives a JSON-friendly view."""
        assert Ulid.decode(KNOWN_ULID).to_dict() == {
            "ulid": KNOWN_ULID,
            "timestamp": KNOWN_TIMESTAMP,
            "time": "2016-06-13T13:25:20.894Z",
            "randomness": "3a66a08c07ce13d25363",
        }

    def test_datetime_beyond_range(self):
        """Timestamps past year 9999 have no datetime."""
        assert Ulid(MAX_TIMESTAMP, bytes(10)).datetime is None

    def test_to_dict_beyond_datetime_range(self):
        """Timestamps past year 9999 have no formatted time."""
        assert Ulid(MAX_TIMESTAMP, bytes(10)).to_dict()["time"] is None


class TestGenerate:
    """Tests for one-shot generation."""

    def test_generate_shape(self):
        """generate returns 26 alphabet characters."""
        value = generate()
        assert len(value) == 26
        assert set(value) <= set(ALPHABET)

    def test_generate_unique(self):
        """Generated ULIDs are unique."""
        values = [generate() for _ in range(1000)]
        assert len(set(values)) == 1000

    def test_generate_uses_sources(self, fixed_clock, timestamp, entropy):
        """Clock and entropy sources are injectable."""
        ulid = generate_ulid(clock=fixed_clock, entropy=entropy)
        assert ulid.timestamp == timestamp
        assert ulid.randomness == b"\x01" * 10
        assert generate(clock=fixed_clock, entropy=entropy).startswith("013XRZP16B")

    def test_generate_redraws_randomness(self, fixed_clock, entropy):
        """One-shot generation draws fresh randomness every call."""
        first = generate_ulid(clock=fixed_clock, entropy=entropy)
        second = generate_ulid(clock=fixed_clock, entropy=entropy)
        assert first.randomness != second.randomness
        assert entropy.calls == 2

    def test_generate_clock_overflow(self):
        """Clock beyond 48 bits raises UlidOverflowError."""
        with pytest.raises(UlidOverflowError) as exc_info:
            generate(clock=lambda: MAX_TIMESTAMP + 1)
        assert exc_info.value.timestamp_ms == MAX_TIMESTAMP + 1

    def test_generate_timestamp_is_now(self):
        """Default clock is the current wall clock."""
        ulid = generate_ulid()
        assert ulid.timestamp > 1577836800000  # 2020-01-01
