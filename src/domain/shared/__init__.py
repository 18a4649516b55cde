"""
Shared Domain Module

Shared domain concepts used across subdomains.

This module exports:
    - DomainException: Base exception for all domain errors
    - MissingConfigurationError: Relay secrets are not configured
    - InvalidDataUrlError: Inline attachment cannot be decoded
"""

from .exceptions import DomainException, InvalidDataUrlError, MissingConfigurationError

__all__ = [
    "DomainException",
    "MissingConfigurationError",
    "InvalidDataUrlError",
]
