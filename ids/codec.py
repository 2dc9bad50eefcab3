"""
Crockford base-32 text codec for identifiers.

Text form: 26 characters, 10 for the 48-bit timestamp followed by 16 for the
80 random bits. Decoding is case-insensitive and accepts O, I and L as
aliases for 0, 1 and 1.
"""

from internal.errors import InvalidCharacter, InvalidLength
from ids.identifier import Identifier

ALPHABET = "0123456789ABCDEFGHJKMNPQRSTVWXYZ"
ENCODED_LENGTH = 26
TIMESTAMP_LENGTH = 10
_ALIASES = {"O": 0, "I": 1, "L": 1}


def _build_decode_table():
    table = {}
    for value, char in enumerate(ALPHABET):
        table[char] = table[char.lower()] = value
    for char, value in _ALIASES.items():
        table[char] = table[char.lower()] = value
    return table


_DECODE = _build_decode_table()


def encode(identifier):
    """Encode an identifier as its 26-character text form."""
    timestamp = identifier.timestamp_ms
    # 10 groups of 5 bits hold the 48-bit timestamp, top two bits always zero
    chars = [ALPHABET[(timestamp >> shift) & 0x1F] for shift in range(45, -1, -5)]

    value = bits = 0
    for byte in identifier.random:
        value = (value << 8) | byte
        bits += 8
        while bits >= 5:
            bits -= 5
            chars.append(ALPHABET[(value >> bits) & 0x1F])
        value &= (1 << bits) - 1

    return "".join(chars)


def decode(text):
    """Decode 26-character text into an Identifier.

    Raises InvalidLength or InvalidCharacter on malformed input; decoding
    stops at the first bad character.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if len(text) != ENCODED_LENGTH:
        raise InvalidLength(len(text))

    symbols = []
    for position, char in enumerate(text):
        symbol = _DECODE.get(char)
        if symbol is None:
            raise InvalidCharacter(char, position)
        symbols.append(symbol)

    timestamp = 0
    for symbol in symbols[:TIMESTAMP_LENGTH]:
        timestamp = (timestamp << 5) | symbol

    random = bytearray()
    value = bits = 0
    for symbol in symbols[TIMESTAMP_LENGTH:]:
        value = (value << 5) | symbol
        bits += 5
        if bits >= 8:
            bits -= 8
            random.append((value >> bits) & 0xFF)
            value &= (1 << bits) - 1

    return Identifier.from_parts(timestamp, bytes(random))


def is_valid(text):
    """True if text decodes to an identifier."""
    try:
        decode(text)
    except (InvalidLength, InvalidCharacter, TypeError):
        return False
    return True
