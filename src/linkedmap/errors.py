"""Exception classes for linkedmap."""

from typing import Any


class LinkedMapError(Exception):
    """Base exception for all linkedmap errors."""


class DuplicateKeyError(LinkedMapError, ValueError):
    """Raised by add_new(..., if_present="raise") when the value is already present."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message if message is not None else f"value {value!r} is already present")


class MissingKeyError(LinkedMapError, LookupError):
    """Raised by remove(..., if_missing="raise") when the value is not present."""

    def __init__(self, value: Any, message: str | None = None) -> None:
        self.value = value
        super().__init__(message if message is not None else f"value {value!r} is not present")
