"""Errors raised by the variable store."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kinds of store failure, reported by the non-raising mutation helpers."""

    UNKNOWN_VARIABLE = "unknown_variable"
    TYPE_MISMATCH = "type_mismatch"
    INVALID_ADJUSTMENT = "invalid_adjustment"


class VariableError(Exception):
    """Base class for variable store failures."""

    kind: ErrorKind

    def __init__(self, name: str, message: str) -> None:
        super().__init__(message)
        self.name = name


class UnknownVariableError(VariableError):
    """Raised when setting or adjusting a variable that is not registered."""

    kind = ErrorKind.UNKNOWN_VARIABLE

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Invalid variable name: {name}")


class TypeMismatchError(VariableError):
    """Raised when a value does not match the variable's type."""

    kind = ErrorKind.TYPE_MISMATCH


class InvalidAdjustmentError(VariableError):
    """Raised when an adjustment amount is malformed or out of range."""

    kind = ErrorKind.INVALID_ADJUSTMENT


class DefaultRegistryError(Exception):
    """Raised when the default variable registry cannot be loaded."""

    pass
