"""Custom exceptions for bubbles."""

from typing import Optional


class BubblesError(Exception):
    """Base exception for bubbles."""


class ConfigError(BubblesError):
    """Raised when configuration is missing or invalid."""


class ValidationError(BubblesError):
    """Raised when a highlight payload is missing a required field."""

    def __init__(self, field: str, message: str = ""):
        self.field = field
        super().__init__(message or f"missing {field}")


class AuthenticationError(BubblesError):
    """Raised when the caller's token does not match the configured secret."""


class NotFoundError(BubblesError):
    """Raised when the content store has no file at the requested path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class StoreError(BubblesError):
    """Raised when the content store answers with a failure."""

    def __init__(self, message: str, status: Optional[int] = None, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(message)


class ConflictError(StoreError):
    """Raised when a write is rejected because the revision was stale."""
