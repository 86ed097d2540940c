"""Custom exceptions for the augmentation pass."""

from __future__ import annotations


class AugmentError(Exception):
    """Base exception for augmentation errors."""

    def __init__(self, message: str, method: str | None = None) -> None:
        self.method = method
        full_message = f"{message}" if not method else f"[{method}] {message}"
        super().__init__(full_message)


class PreconditionError(AugmentError):
    """Raised when a method does not have the classification an operation requires."""


class NotFoundError(AugmentError):
    """Raised when a registry lookup is made for a type that was never registered."""

    def __init__(self, type_name: str, method: str | None = None) -> None:
        self.type_name = type_name
        super().__init__(f"No registered type equal to '{type_name}'", method)


class DescriptionError(AugmentError):
    """Raised when a service description file cannot be turned into a model."""

    def __init__(
        self,
        message: str,
        source: str | None = None,
        method: str | None = None,
    ) -> None:
        self.source = source
        if source:
            message = f"{source}: {message}"
        super().__init__(message, method)
