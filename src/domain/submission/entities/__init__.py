"""
Submission Entities
"""

from .submission import DEFAULT_STATUS, PLACEHOLDER, Submission, build_submission

__all__ = ["Submission", "build_submission", "PLACEHOLDER", "DEFAULT_STATUS"]
