"""Micro-benchmarks for ULID generation and parsing."""

import time

from core.codec import decode, encode
from core.generator import UlidGenerator
from core.ulid import generate

KNOWN_ULID = "01AN4Z07BY79KA1307SR9X4MV3"


def _cases():
    generator = UlidGenerator()
    lowercase = "".join(c.lower() if i in (5, 15) else c for i, c in enumerate(KNOWN_ULID))
    timestamp, randomness = decode(KNOWN_ULID)
    return [
        ("generate", generate),
        ("generate_monotonic", generator.generate),
        ("decode", lambda: decode(KNOWN_ULID)),
        ("decode_lowercase", lambda: decode(lowercase)),
        ("encode", lambda: encode(timestamp, randomness)),
    ]


def run_benchmarks(iterations=10000):
    """Time each case over `iterations` calls and return one result per case."""
    results = []
    for name, fn in _cases():
        start = time.perf_counter()
        for _ in range(iterations):
            fn()
        elapsed = time.perf_counter() - start
        results.append({
            "name": name,
            "iterations": iterations,
            "seconds": elapsed,
            "ops_per_sec": iterations / elapsed if elapsed > 0 else float("inf"),
        })
    return results
