"""Exceptions for fnkit."""


class FnkitError(Exception):
    """Base exception for fnkit errors."""


class SerializationError(FnkitError):
    """Raise when a store cannot encode a value for persistence."""

    def __init__(self, value: object, reason: str) -> None:
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot serialize value: {reason}")
