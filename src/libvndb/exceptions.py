"""Custom exceptions for the libvndb client.

Every error raised by the library derives from `VndbError`, which carries a
human-readable message plus arbitrary key-value context in `details`.
"""

from typing import Any, Dict


# Base exception
class VndbError(Exception):
    """Base exception for all libvndb errors.

    Attributes:
        message: Error message
        details: Additional error context as key-value pairs
    """

    def __init__(self, message: str = "", **kwargs: Any) -> None:
        """Initialize exception with message and additional details.

        Args:
            message: Human-readable error message
            **kwargs: Additional context (e.g., url, status_code, path)
        """
        self.message = message
        self.details: Dict[str, Any] = kwargs
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the complete error message with details."""
        if not self.details:
            return self.message

        details_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        if self.message:
            return f"{self.message} ({details_str})"
        return details_str

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r}, details={self.details!r})"


# Configuration exceptions
class ConfigurationError(VndbError):
    """Raised when client configuration is invalid or missing."""


class CredentialAbsentError(ConfigurationError):
    """Raised when an operation needs an API token and none is configured.

    Always raised before any request is sent.

    Example:
        >>> raise CredentialAbsentError("API token required", operation="authinfo")
    """


# Transport exceptions
class TransportError(VndbError):
    """Raised when the HTTP exchange fails or the reply body is unusable.

    Covers connectivity errors, non-2xx statuses and reply bodies that are not
    valid JSON or do not match the expected record shape.

    Example:
        >>> raise TransportError("Request failed", url="https://api.vndb.org/kana/vn", status_code=400)
    """


# Validation exceptions
class ValidationError(VndbError):
    """Raised when a value does not fit the filter or query model."""


class DecodeError(ValidationError):
    """Raised when a JSON value cannot be decoded into a filter token.

    Only JSON strings and arrays are valid at any filter position.

    Example:
        >>> raise DecodeError("Invalid filter token", path="$[2]", value=3)
    """


class InvalidFilterError(ValidationError):
    """Raised when a Python value cannot be converted into a filter token.

    Example:
        >>> raise InvalidFilterError("Unsupported filter value", value=None)
    """


# Builder exceptions
class BuilderConsumedError(VndbError):
    """Raised when a query builder is used after `build()` was called."""
