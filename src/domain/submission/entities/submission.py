"""
Submission Entity.

Transient domain entity representing one permit application sent by the
web form. Created from the request payload, consumed by the relay, and
discarded once the response is sent.

Defaulting is a pure function (build_submission) so it can be tested
without any network dependency.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Optional, Union

PLACEHOLDER = "-"
DEFAULT_STATUS = "Menunggu"

# Wire field names used by the web form
FIELD_FULL_NAME = "nama_lengkap"
FIELD_NATIONAL_ID = "nik"
FIELD_BIRTHPLACE = "tempat_lahir"
FIELD_BIRTH_DATE = "tanggal_lahir"
FIELD_ADDRESS = "alamat"
FIELD_PHONE = "no_telepon"
FIELD_EMAIL = "email"
FIELD_REASON = "alasan"
FIELD_SUBMITTED_AT = "tanggal_pengajuan"
FIELD_STATUS = "status"
FIELD_ID_PHOTO = "foto_ktp_url"
FIELD_SUPPORTING_DOCUMENT = "surat_keterangan_url"

TEXT_FIELDS = {
    "full_name": FIELD_FULL_NAME,
    "national_id": FIELD_NATIONAL_ID,
    "birthplace": FIELD_BIRTHPLACE,
    "birth_date": FIELD_BIRTH_DATE,
    "address": FIELD_ADDRESS,
    "phone": FIELD_PHONE,
    "email": FIELD_EMAIL,
    "reason": FIELD_REASON,
}


@dataclass(frozen=True)
class Submission:
    """
    Permit application received from the web form.

    All text attributes fall back to "-" when the form omits them; status
    falls back to "Menunggu" (pending). Attachment references stay raw
    strings here; they are parsed by the relay so that a bad reference only
    affects its own delivery.

    Attributes:
        full_name: Applicant full name (nama_lengkap)
        national_id: National ID number (nik)
        birthplace: Place of birth (tempat_lahir)
        birth_date: Date of birth as entered (tanggal_lahir)
        address: Home address (alamat)
        phone: Contact phone (no_telepon)
        email: Contact email (email)
        reason: Justification text (alasan)
        submitted_at: ISO 8601 string or epoch milliseconds (tanggal_pengajuan)
        status: Free-text status label (status)
        id_photo: Identification photo reference (foto_ktp_url)
        supporting_document: Supporting document reference (surat_keterangan_url)
    """

    full_name: str = PLACEHOLDER
    national_id: str = PLACEHOLDER
    birthplace: str = PLACEHOLDER
    birth_date: str = PLACEHOLDER
    address: str = PLACEHOLDER
    phone: str = PLACEHOLDER
    email: str = PLACEHOLDER
    reason: str = PLACEHOLDER
    submitted_at: Union[str, int, float] = ""
    status: str = DEFAULT_STATUS
    id_photo: Optional[str] = None
    supporting_document: Optional[str] = None

    @property
    def has_attachments(self) -> bool:
        return bool(self.id_photo or self.supporting_document)


def _text(value: Any, default: str) -> str:
    if value is None:
        return default
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _attachment(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _timestamp(value: Any, received_at: datetime) -> Union[str, int, float]:
    if value is None:
        utc = received_at.astimezone(timezone.utc)
        return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return _text(value, PLACEHOLDER)


def build_submission(
    payload: Any, received_at: Optional[datetime] = None
) -> Submission:
    """
    Build a Submission from a raw request payload, applying defaults.

    Rules:
        - Missing keys and null values take the default
        - Empty strings are kept as sent
        - Numbers and booleans are rendered as text
        - A payload that is not a mapping is treated as empty
        - Attachments that are empty or not strings are treated as absent
        - submitted_at defaults to received_at (ISO 8601, UTC, "Z" suffix)

    Args:
        payload: Decoded request body (normally a dict)
        received_at: Time the request was received (default: now, UTC)

    Returns:
        Submission with every attribute populated

    Examples:
        >>> s = build_submission({"nama_lengkap": "Budi"})
        >>> s.full_name, s.national_id, s.status
        ('Budi', '-', 'Menunggu')
    """
    if not isinstance(payload, Mapping):
        payload = {}
    if received_at is None:
        received_at = datetime.now(timezone.utc)

    texts = {
        attr: _text(payload.get(key), PLACEHOLDER) for attr, key in TEXT_FIELDS.items()
    }

    return Submission(
        **texts,
        submitted_at=_timestamp(payload.get(FIELD_SUBMITTED_AT), received_at),
        status=_text(payload.get(FIELD_STATUS), DEFAULT_STATUS),
        id_photo=_attachment(payload.get(FIELD_ID_PHOTO)),
        supporting_document=_attachment(payload.get(FIELD_SUPPORTING_DOCUMENT)),
    )
