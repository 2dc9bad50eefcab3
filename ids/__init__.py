from ids.identifier import Identifier
from ids.codec import ALPHABET, ENCODED_LENGTH, decode, encode, is_valid
from ids.entropy import ENTROPY_SOURCES, EntropyMixer, SecureEntropy, create_entropy
from ids.generator import Generator
from internal.errors import DecodeError, InvalidCharacter, InvalidLength

__all__ = [
    "Identifier",
    "ALPHABET",
    "ENCODED_LENGTH",
    "decode",
    "encode",
    "is_valid",
    "ENTROPY_SOURCES",
    "EntropyMixer",
    "SecureEntropy",
    "create_entropy",
    "Generator",
    "DecodeError",
    "InvalidCharacter",
    "InvalidLength",
]
