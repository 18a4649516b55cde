"""
Submission Subdomain

Permit application relay: the Submission entity, attachment references,
delivery outcomes and the summary formatter.
"""

from .entities import Submission, build_submission
from .services import SummaryFormatter
from .value_objects import (
    AttachmentDelivery,
    AttachmentOutcome,
    InlineAttachment,
    RelayReport,
    RemoteAttachment,
    parse_attachment_reference,
)

__all__ = [
    "Submission",
    "build_submission",
    "SummaryFormatter",
    "AttachmentDelivery",
    "AttachmentOutcome",
    "InlineAttachment",
    "RelayReport",
    "RemoteAttachment",
    "parse_attachment_reference",
]
