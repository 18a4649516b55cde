"""
Domain Layer - Core Business Logic

Framework-independent rules of the submission relay: how a form payload
becomes a Submission, how it is summarised, and how attachment references
are classified and decoded.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
    - Domain-Driven Design: Entities, Value Objects, Services

Subdomains:
    - submission: Permit application relay
    - shared: Cross-subdomain concepts

Usage:
    >>> from src.domain import build_submission, SummaryFormatter
    >>> text = SummaryFormatter().format(build_submission({"nama_lengkap": "Budi"}))
"""

# Submission Subdomain
from .submission import (
    AttachmentDelivery,
    AttachmentOutcome,
    RelayReport,
    Submission,
    SummaryFormatter,
    build_submission,
)

# Shared Domain
from .shared import DomainException, InvalidDataUrlError, MissingConfigurationError

__all__ = [
    # Submission Subdomain
    "Submission",
    "build_submission",
    "SummaryFormatter",
    "AttachmentDelivery",
    "AttachmentOutcome",
    "RelayReport",
    # Shared Domain
    "DomainException",
    "MissingConfigurationError",
    "InvalidDataUrlError",
]
