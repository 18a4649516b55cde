"""
Submission Value Objects

Immutable objects describing attachment references and delivery outcomes.
"""

from .attachment import (
    AttachmentReference,
    InlineAttachment,
    RemoteAttachment,
    extension_for_mime_type,
    is_data_url,
    parse_attachment_reference,
    parse_data_url,
)
from .delivery_report import AttachmentDelivery, AttachmentOutcome, RelayReport

__all__ = [
    "AttachmentReference",
    "InlineAttachment",
    "RemoteAttachment",
    "extension_for_mime_type",
    "is_data_url",
    "parse_attachment_reference",
    "parse_data_url",
    "AttachmentDelivery",
    "AttachmentOutcome",
    "RelayReport",
]
