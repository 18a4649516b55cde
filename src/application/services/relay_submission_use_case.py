"""
Relay Submission Use Case

Responsibility:
    Orchestrates delivery of one Submission to the configured chat:
    summary message first, then the identification photo, then the
    supporting document. Attachment delivery is best effort.

Architecture Notes:
    - Part of Application Layer (Services)
    - Uses MessagingClientProtocol (implemented by TelegramBotClient)
    - Called by API Layer (submissions.py router)
    - Returns RelayReport (logged by caller, not sent to the client)

Process Flow:
    API Layer builds Submission (build_submission)
    → RelaySubmissionUseCase.execute(submission)
    → SummaryFormatter.format() → send_message
    → identification photo: sendPhoto (upload or URL)
    → supporting document: sendPhoto for inline images, sendDocument otherwise
    → RelayReport

Delivery Policy:
    - Calls are strictly sequential, each attempted exactly once
    - A failed summary does not stop attachment delivery
    - A failed or unparseable attachment does not stop the next one
    - No failure below this level is surfaced to the HTTP caller
"""

import logging
from typing import Optional

from src.application.ports.messaging import MessagingClientProtocol
from src.domain.shared.exceptions import InvalidDataUrlError
from src.domain.submission.entities.submission import (
    FIELD_ID_PHOTO,
    FIELD_SUPPORTING_DOCUMENT,
    Submission,
)
from src.domain.submission.services.summary_formatter import SummaryFormatter
from src.domain.submission.value_objects.attachment import (
    InlineAttachment,
    parse_attachment_reference,
)
from src.domain.submission.value_objects.delivery_report import (
    AttachmentDelivery,
    AttachmentOutcome,
    RelayReport,
)

logger = logging.getLogger(__name__)

ID_PHOTO_STEM = "foto_ktp"
ID_PHOTO_CAPTION = "📄 Foto KTP"

SUPPORTING_DOCUMENT_STEM = "surat_keterangan"
SUPPORTING_DOCUMENT_CAPTION = "📎 Surat Keterangan"

SEND_PHOTO = "sendPhoto"
SEND_DOCUMENT = "sendDocument"


class RelaySubmissionUseCase:
    """
    Use case for relaying a submission to the messaging platform.

    Attributes:
        client: Messaging client (injected)
        chat_id: Destination chat identifier (from RelayConfig)
        formatter: SummaryFormatter used for the summary text

    Examples:
        >>> async with TelegramBotClient(config.bot_token) as client:
        ...     use_case = RelaySubmissionUseCase(client=client, chat_id=config.chat_id)
        ...     report = await use_case.execute(build_submission(payload))
        >>> report.summary_delivered
        True
    """

    def __init__(
        self,
        client: MessagingClientProtocol,
        chat_id: str,
        formatter: Optional[SummaryFormatter] = None,
    ) -> None:
        self.client = client
        self.chat_id = chat_id
        self.formatter = formatter or SummaryFormatter()

    async def execute(self, submission: Submission) -> RelayReport:
        """
        Deliver summary and attachments for one submission.

        Args:
            submission: Defaulted Submission entity

        Returns:
            RelayReport with the summary status and one entry per present
            attachment

        Note:
            Never raises for delivery problems; those are logged and recorded
            in the report.
        """
        report = RelayReport()

        # 1. Summary message
        text = self.formatter.format(submission)
        try:
            await self.client.send_message(self.chat_id, text)
            report.summary_delivered = True
        except Exception as e:
            # Attachments are still attempted
            report.summary_error = str(e)
            logger.warning(f"sendMessage failed, continuing with attachments: {e}")

        # 2. Identification photo (always a photo)
        if submission.id_photo:
            report.attachments.append(
                await self._deliver(
                    FIELD_ID_PHOTO,
                    submission.id_photo,
                    ID_PHOTO_STEM,
                    ID_PHOTO_CAPTION,
                    remote_method=SEND_PHOTO,
                    inline_images_only=True,
                )
            )

        # 3. Supporting document (photo for inline images, document otherwise)
        if submission.supporting_document:
            report.attachments.append(
                await self._deliver(
                    FIELD_SUPPORTING_DOCUMENT,
                    submission.supporting_document,
                    SUPPORTING_DOCUMENT_STEM,
                    SUPPORTING_DOCUMENT_CAPTION,
                    remote_method=SEND_DOCUMENT,
                    inline_images_only=False,
                )
            )

        if report.fully_delivered:
            logger.info(f"Submission relayed: {report.describe()}")
        else:
            logger.warning(f"Submission relayed with failures: {report.describe()}")

        return report

    async def _deliver(
        self,
        name: str,
        reference: str,
        stem: str,
        caption: str,
        remote_method: str,
        inline_images_only: bool,
    ) -> AttachmentDelivery:
        """
        Deliver one attachment and classify the outcome.

        Args:
            name: Submission field name (for logs and the report)
            reference: Raw reference (data URL or remote URL)
            stem: Filename stem for inline uploads
            caption: Caption shown under the attachment
            remote_method: Bot API method used for URL references
            inline_images_only: If True inline uploads always use sendPhoto;
                otherwise sendPhoto is used only for image/* media types
        """
        try:
            parsed = parse_attachment_reference(reference, stem)
        except InvalidDataUrlError as e:
            logger.warning(f"Skipping {name}: {e.message}")
            return AttachmentDelivery(
                name, AttachmentOutcome.SKIPPED_UNPARSEABLE, detail=e.message
            )

        if isinstance(parsed, InlineAttachment):
            method = SEND_PHOTO if inline_images_only or parsed.is_image else SEND_DOCUMENT
            content = parsed.data
            filename: Optional[str] = parsed.filename
            mime_type: Optional[str] = parsed.mime_type
            kind = "dataurl"
        else:
            method = remote_method
            content = parsed.url
            filename = None
            mime_type = None
            kind = "url"

        send = self.client.send_photo if method == SEND_PHOTO else self.client.send_document

        try:
            await send(
                self.chat_id,
                content,
                filename=filename,
                mime_type=mime_type,
                caption=caption,
            )
        except Exception as e:
            logger.warning(f"Failed sending {name} ({kind}) via {method}: {e}")
            return AttachmentDelivery(
                name, AttachmentOutcome.FAILED, method=method, detail=str(e)
            )

        logger.info(f"Sent {name} ({kind}) via {method}")
        return AttachmentDelivery(name, AttachmentOutcome.SENT, method=method)
