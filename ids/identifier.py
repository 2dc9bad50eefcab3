"""
Sortable 128-bit identifier value type.

Layout (16 bytes, big-endian):
- bytes 0-5: milliseconds since Unix epoch (48 bits)
- bytes 6-15: randomness

Identifiers compare as their raw bytes, so ordering by value, by integer
form and by text form always agree.
"""

from datetime import datetime, timezone
from functools import total_ordering

SIZE = 16
TIMESTAMP_SIZE = 6
RANDOM_SIZE = 10
TIMESTAMP_MASK = (1 << 48) - 1


def _as_bytes(value):
    # bytes(n) would silently build n zero bytes
    if isinstance(value, int):
        raise TypeError("expected a bytes-like value, got int")
    return bytes(value)


@total_ordering
class Identifier:
    """Immutable 48-bit timestamp + 80-bit random identifier."""

    __slots__ = ("_bytes",)

    def __init__(self, raw):
        raw = _as_bytes(raw)
        if len(raw) != SIZE:
            raise ValueError(f"identifier needs {SIZE} bytes, got {len(raw)}")
        object.__setattr__(self, "_bytes", raw)

    @classmethod
    def from_parts(cls, timestamp_ms, random):
        """Pack the low 48 bits of timestamp_ms with 10 random bytes.

        Timestamps wider than 48 bits lose their high bits.
        """
        random = _as_bytes(random)
        if len(random) != RANDOM_SIZE:
            raise ValueError(f"random part needs {RANDOM_SIZE} bytes, got {len(random)}")
        return cls((timestamp_ms & TIMESTAMP_MASK).to_bytes(TIMESTAMP_SIZE, "big") + random)

    @classmethod
    def from_bytes(cls, raw):
        return cls(raw)

    @classmethod
    def from_int(cls, value):
        if not 0 <= value < 1 << (SIZE * 8):
            raise ValueError("identifier integer out of 128-bit range")
        return cls(value.to_bytes(SIZE, "big"))

    @classmethod
    def from_str(cls, text):
        from ids.codec import decode
        return decode(text)

    @property
    def timestamp_ms(self):
        return int.from_bytes(self._bytes[:TIMESTAMP_SIZE], "big")

    @property
    def random(self):
        return self._bytes[TIMESTAMP_SIZE:]

    @property
    def datetime(self):
        """Creation time as an aware UTC datetime (OverflowError past year 9999)."""
        return datetime.fromtimestamp(self.timestamp_ms / 1000, tz=timezone.utc)

    @property
    def bytes(self):
        return self._bytes

    def hex(self):
        return self._bytes.hex()

    def __setattr__(self, name, value):
        raise AttributeError("Identifier is immutable")

    def __delattr__(self, name):
        raise AttributeError("Identifier is immutable")

    def __reduce__(self):
        return (self.__class__, (self._bytes,))

    def __eq__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._bytes == other._bytes

    def __lt__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return self._bytes < other._bytes

    def __hash__(self):
        return hash(self._bytes)

    def __bytes__(self):
        return self._bytes

    def __int__(self):
        return int.from_bytes(self._bytes, "big")

    def __str__(self):
        from ids.codec import encode
        return encode(self)

    def __repr__(self):
        return f"Identifier('{self}')"
