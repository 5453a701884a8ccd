"""Decode errors with the offending input attached."""

from utils.timestamp import format_timestamp


class KsuidError(ValueError):
    """Base error for KSUID encode/decode failures."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.message = message
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class InvalidCharacterError(KsuidError):
    """Input contains a character outside the base62 alphabet."""

    def __init__(self, message, character=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if character is not None:
            context["character"] = character
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context, **kwargs)
        self.character = character
        self.position = position


class InvalidLengthError(KsuidError):
    """Decoded bytes are not a 20-byte KSUID."""

    def __init__(self, message, length=None, expected=20, **kwargs):
        context = kwargs.pop("context", {})
        if length is not None:
            context["length"] = length
        context["expected"] = expected
        super().__init__(message, context=context, **kwargs)
        self.length = length
        self.expected = expected
