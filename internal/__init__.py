from internal.errors import BaseServiceError, DecodeError, InvalidLength, InvalidCharacter, ClockError
from internal.logging import LogLevel, StructuredLogger, get_logger

__all__ = [
    "BaseServiceError",
    "DecodeError",
    "InvalidLength",
    "InvalidCharacter",
    "ClockError",
    "LogLevel",
    "StructuredLogger",
    "get_logger",
]
