"""Service errors with context for tracking."""

from utils.timestamp import format_timestamp


class BaseServiceError(Exception):
    """Base error with context and timestamp for tracking."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class DecodeError(BaseServiceError, ValueError):
    """Text could not be decoded into an identifier. Never retryable."""

    code = "decode_error"

    def to_dict(self):
        return {"error": self.code, "message": str(self), **self.context}


class InvalidLength(DecodeError):
    """Input is not exactly 26 characters."""

    code = "invalid_length"

    def __init__(self, length, **kwargs):
        context = kwargs.pop("context", {})
        context["length"] = length
        super().__init__(f"expected 26 characters, got {length}", context=context, **kwargs)


class InvalidCharacter(DecodeError):
    """Input holds a character outside the base-32 alphabet."""

    code = "invalid_character"

    def __init__(self, character, position, **kwargs):
        context = kwargs.pop("context", {})
        context["character"] = character
        context["position"] = position
        super().__init__(f"invalid character {character!r} at position {position}", context=context, **kwargs)


class ClockError(BaseServiceError):
    """System clock reports a time before the Unix epoch."""

    def __init__(self, message, epoch_ms=None, **kwargs):
        context = kwargs.pop("context", {})
        if epoch_ms is not None:
            context["epoch_ms"] = epoch_ms
        super().__init__(message, context=context, **kwargs)
