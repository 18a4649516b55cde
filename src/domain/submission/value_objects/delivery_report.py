"""
Delivery Report Value Objects

Typed outcome of one relay run: whether the summary reached the chat and
what happened to each attachment. The report is logged, never returned
to the caller.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class AttachmentOutcome(str, Enum):
    """
    Result of a single best-effort attachment attempt.

    States:
        SENT: Platform accepted the upload or URL reference
        SKIPPED_UNPARSEABLE: Inline reference could not be decoded, nothing sent
        FAILED: Transport error or platform replied ok=false
    """

    SENT = "sent"
    SKIPPED_UNPARSEABLE = "skipped_unparseable"
    FAILED = "failed"


@dataclass(frozen=True)
class AttachmentDelivery:
    """
    Outcome of delivering one attachment.

    Attributes:
        name: Submission field the attachment came from (e.g. "foto_ktp_url")
        outcome: AttachmentOutcome
        method: Bot API method used ("sendPhoto"/"sendDocument"), None if skipped
        detail: Error description for skipped/failed attempts
    """

    name: str
    outcome: AttachmentOutcome
    method: Optional[str] = None
    detail: Optional[str] = None


@dataclass
class RelayReport:
    """
    Aggregated, non-blocking report of one relay run.

    Attributes:
        summary_delivered: True if the summary message was accepted
        summary_error: Error description when it was not
        attachments: One entry per attachment that was present in the submission

    Example:
        >>> report = RelayReport(summary_delivered=True)
        >>> report.attachments.append(
        ...     AttachmentDelivery("foto_ktp_url", AttachmentOutcome.SENT, "sendPhoto")
        ... )
        >>> report.failures
        []
    """

    summary_delivered: bool = False
    summary_error: Optional[str] = None
    attachments: list[AttachmentDelivery] = field(default_factory=list)

    @property
    def failures(self) -> list[AttachmentDelivery]:
        """Attachments that were skipped or failed."""
        return [a for a in self.attachments if a.outcome != AttachmentOutcome.SENT]

    @property
    def fully_delivered(self) -> bool:
        """True when the summary and every present attachment were sent."""
        return self.summary_delivered and not self.failures

    def describe(self) -> str:
        """One-line description for logs."""
        parts = [f"summary={'sent' if self.summary_delivered else 'failed'}"]
        for a in self.attachments:
            parts.append(f"{a.name}={a.outcome.value}")
        return ", ".join(parts)
