"""
Application Services

Responsibility:
    Orchestration services that coordinate domain services and
    infrastructure components.

Contains:
    - RelaySubmissionUseCase: Summary + best-effort attachment delivery

Does NOT contain:
    - Domain business logic (use Domain services)
    - Direct infrastructure construction (use dependency injection)
"""

from src.application.services.relay_submission_use_case import RelaySubmissionUseCase

__all__ = ["RelaySubmissionUseCase"]
