"""ULID errors with context for tracking."""

from utils.timestamp import format_timestamp


class UlidError(Exception):
    """Base error with timestamp and context for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class InvalidLengthError(UlidError):
    """Input is not the expected number of characters or bytes."""

    def __init__(self, message, expected=None, actual=None, **kwargs):
        context = kwargs.pop("context", {})
        if expected is not None:
            context["expected"] = expected
        if actual is not None:
            context["actual"] = actual
        super().__init__(message, context=context, **kwargs)
        self.expected = expected
        self.actual = actual


class InvalidCharacterError(UlidError):
    """Input holds a character outside the Crockford Base32 alphabet."""

    def __init__(self, message, position=None, char=None, **kwargs):
        context = kwargs.pop("context", {})
        if position is not None:
            context["position"] = position
        if char is not None:
            context["char"] = char
        super().__init__(message, context=context, **kwargs)
        self.position = position
        self.char = char


class UlidOverflowError(UlidError):
    """Timestamp out of 48-bit range, or randomness exhausted for a millisecond."""

    def __init__(self, message, timestamp_ms=None, **kwargs):
        context = kwargs.pop("context", {})
        if timestamp_ms is not None:
            context["timestamp_ms"] = timestamp_ms
        super().__init__(message, context=context, **kwargs)
        self.timestamp_ms = timestamp_ms


class EncodeError(UlidError):
    """Encode target buffer has the wrong size."""

    def __init__(self, message, buffer_len=None, **kwargs):
        context = kwargs.pop("context", {})
        if buffer_len is not None:
            context["buffer_len"] = buffer_len
        super().__init__(message, context=context, **kwargs)
        self.buffer_len = buffer_len
