"""Cryptographically strong random bytes for identifier payloads."""

import os


def random_bytes(size):
    """Return `size` bytes from the OS CSPRNG."""
    return os.urandom(size)
