"""Errors raised by farmhand."""

from pathlib import Path


class FarmhandError(Exception):
    """Base error for this package."""


class ParseError(FarmhandError):
    """Raised when a stored line cannot be decoded into an animal."""


class StorageError(FarmhandError):
    """Raised when the data file cannot be read or written."""

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class InvalidLoginError(FarmhandError):
    """Raised when a username/password pair does not match any account."""


class PermissionDeniedError(FarmhandError):
    """Raised when an account's role does not allow an operation."""
