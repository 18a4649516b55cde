"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used across all subdomains)
    - Infrastructure Layer raises its own exceptions (e.g. TelegramApiError)
    - API Layer maps domain exceptions to HTTP responses
"""


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes
        - Infrastructure Layer should not raise DomainException (use own exceptions)

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.__class__.__name__}: {self.message}"

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"{self.__class__.__name__}(message={self.message!r})"


class MissingConfigurationError(DomainException):
    """
    Raised when required relay configuration is absent.

    The relay cannot contact the messaging platform without a bot credential
    and a destination chat. This error is fatal to the request and is raised
    before any outbound call.

    Examples:
        >>> raise MissingConfigurationError(
        ...     "Missing required environment variables: BOT_TOKEN",
        ...     missing=["BOT_TOKEN"],
        ... )
    """

    def __init__(self, message: str, missing: list[str] | None = None) -> None:
        """
        Initialize configuration error.

        Args:
            message: Error description
            missing: Names of the missing settings (optional)
        """
        self.missing = list(missing or [])
        super().__init__(message)


class InvalidDataUrlError(DomainException):
    """
    Raised when an inline attachment cannot be decoded.

    This exception is raised when:
    - The value starts with "data:" but does not match data:<type>;base64,<payload>

    Examples:
        >>> raise InvalidDataUrlError("Reference for 'foto_ktp' is not a base64 data URL")
    """
