"""
Summary Formatter Domain Service

Builds the human-readable summary message for a Submission, using the
HTML subset understood by the Telegram renderer (parse_mode="HTML").

Responsibility:
    - Render every submission field on its own labelled line
    - Render the submission timestamp in Indonesian numeric layout
    - Escape user-provided values so they cannot break the markup

Architecture Notes:
    - Part of Submission subdomain (Domain Service)
    - Pure, framework-independent, no I/O
"""

import html
from datetime import datetime, timezone, tzinfo
from typing import Union

from src.domain.submission.entities.submission import Submission

SUMMARY_TITLE = "📝 <b>Pengajuan Izin Baru</b>"


def format_timestamp_id(
    value: Union[str, int, float], tz: tzinfo = timezone.utc
) -> str:
    """
    Render a timestamp the way the id-ID locale prints date and time.

    Layout is "D/M/YYYY, HH.MM.SS" (day and month without padding, dots
    between time components). Naive timestamps are taken as UTC. Numbers
    are epoch milliseconds. Values that cannot be parsed are returned as
    given.

    Examples:
        >>> format_timestamp_id("2024-01-05T09:05:00Z")
        '5/1/2024, 09.05.00'
        >>> format_timestamp_id(0)
        '1/1/1970, 00.00.00'
        >>> format_timestamp_id("kemarin")
        'kemarin'
    """
    try:
        if isinstance(value, (int, float)):
            moment = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        else:
            text = value.strip()
            if text.endswith("Z"):
                text = text[:-1] + "+00:00"
            moment = datetime.fromisoformat(text)
    except (ValueError, OverflowError, OSError):
        return str(value)

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(tz)

    return f"{moment.day}/{moment.month}/{moment.year}, {moment:%H.%M.%S}"


class SummaryFormatter:
    """
    Formats a Submission into the summary message text.

    Attributes:
        tz: Timezone used to display the submission timestamp (default UTC)

    Examples:
        >>> from src.domain.submission.entities import build_submission
        >>> text = SummaryFormatter().format(build_submission({}))
        >>> "👤 <b>Nama</b>: -" in text
        True
    """

    def __init__(self, tz: tzinfo = timezone.utc) -> None:
        self.tz = tz

    def format(self, submission: Submission) -> str:
        """
        Build the multi-line summary for one submission.

        Returns:
            Message text with <b> markup, lines joined by "\\n"
        """
        e = html.escape
        lines = [
            SUMMARY_TITLE,
            "",
            f"👤 <b>Nama</b>: {e(submission.full_name)}",
            f"🆔 <b>NIK</b>: {e(submission.national_id)}",
            f"📍 <b>TTL</b>: {e(submission.birthplace)}, {e(submission.birth_date)}",
            f"🏠 <b>Alamat</b>: {e(submission.address)}",
            f"📞 <b>Kontak</b>: {e(submission.phone)}",
            f"✉️ <b>Email</b>: {e(submission.email)}",
            f"🗓️ <b>Tanggal Pengajuan</b>: "
            f"{e(format_timestamp_id(submission.submitted_at, self.tz))}",
            f"🏷️ <b>Status</b>: {e(submission.status)}",
            "",
            f"✍️ <b>Alasan</b>:\n{e(submission.reason)}",
            "",
        ]
        return "\n".join(lines)
