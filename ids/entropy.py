"""
Entropy sources for the random half of an identifier.

EntropyMixer is fast and never blocks, but it is NOT cryptographically
secure: it hashes weak, partly predictable inputs to make collisions between
rapid or concurrent calls unlikely. Use SecureEntropy wherever identifiers
must be unpredictable (tokens, secrets).
"""

import itertools
import os
import struct
import threading
import time

ENTROPY_SIZE = 10
_CHUNKS = ENTROPY_SIZE // 2


class EntropyMixer:
    """Mixes clock, counter and thread identity into 10 bytes."""

    name = "mixed"

    def __init__(self):
        # next() on itertools.count is atomic, each call sees a distinct value
        self._counter = itertools.count()
        self._seed = int.from_bytes(os.urandom(8), "big")

    def next(self):
        now = time.time_ns()
        nanos = now % 1_000_000_000
        micros = now // 1_000
        counter = next(self._counter)
        thread_id = hash((self._seed, threading.get_ident()))

        chunks = []
        for i in range(_CHUNKS):
            digest = hash((self._seed, nanos * (i + 1), micros + i, counter * (i + 7),
                           thread_id * (i + 13), i * 17))
            digest ^= digest >> 32
            chunks.append(struct.pack(">H", digest & 0xFFFF))
        return b"".join(chunks)


class SecureEntropy:
    """OS CSPRNG with the same interface as EntropyMixer."""

    name = "secure"

    def next(self):
        return os.urandom(ENTROPY_SIZE)


ENTROPY_SOURCES = {
    EntropyMixer.name: EntropyMixer,
    SecureEntropy.name: SecureEntropy,
}


def create_entropy(name):
    """Build an entropy source by its config name."""
    try:
        return ENTROPY_SOURCES[name]()
    except KeyError:
        raise ValueError(f"unknown entropy source {name!r}, expected one of {sorted(ENTROPY_SOURCES)}") from None
