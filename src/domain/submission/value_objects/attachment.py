"""
Attachment Value Objects

Represents the two shapes an attachment reference can take in a submission:
an inline data URL carrying the file bytes, or a remote URL that the
messaging platform fetches by itself.

Responsibility:
    - Classify a raw reference string (inline vs remote)
    - Decode inline data URLs into bytes + media type + filename
    - Derive filename extensions from media types

Architecture Notes:
    - Value Objects (immutable, defined by values)
    - Uses Pydantic for validation
    - Pure functions, no network access
"""

import base64
import re
from typing import Union

from pydantic import BaseModel, Field

from src.domain.shared.exceptions import InvalidDataUrlError

DATA_URL_PREFIX = "data:"

# Same shape the web form produces via FileReader.readAsDataURL().
# Matched with fullmatch, so a trailing newline is rejected.
DATA_URL_PATTERN = re.compile(r"data:([^;]+);base64,(.*)")

# Characters outside both base64 alphabets are ignored when decoding
BASE64_NOISE_PATTERN = re.compile(r"[^A-Za-z0-9+/_-]")

FALLBACK_EXTENSION = "bin"


class InlineAttachment(BaseModel):
    """
    Attachment embedded in the request as a base64 data URL.

    Attributes:
        mime_type: Declared media type (e.g. "image/jpeg")
        data: Decoded file bytes
        filename: Upload filename built from a stem and the media subtype

    Examples:
        >>> att = parse_data_url("data:image/jpeg;base64,/9j/4A==", "foto_ktp")
        >>> att.filename
        'foto_ktp.jpeg'
        >>> att.is_image
        True
    """

    mime_type: str = Field(description="Declared media type")
    data: bytes = Field(description="Decoded file content")
    filename: str = Field(description="Filename sent with the multipart upload")

    model_config = {"frozen": True}

    @property
    def is_image(self) -> bool:
        """True when the declared media type is an image/* type."""
        return self.mime_type.startswith("image/")


class RemoteAttachment(BaseModel):
    """
    Attachment referenced by URL, fetched by the messaging platform.

    Attributes:
        url: Remote resource location, passed through unchanged
    """

    url: str = Field(description="Remote resource URL")

    model_config = {"frozen": True}


AttachmentReference = Union[InlineAttachment, RemoteAttachment]


def is_data_url(value: str) -> bool:
    """Check whether a reference uses the inline data URL scheme."""
    return value.startswith(DATA_URL_PREFIX)


def extension_for_mime_type(mime_type: str) -> str:
    """
    Derive a filename extension from a media type.

    The subtype is cut at the first "+", so structured-syntax suffixes
    are dropped ("image/svg+xml" -> "svg").

    Examples:
        >>> extension_for_mime_type("image/jpeg")
        'jpeg'
        >>> extension_for_mime_type("application/pdf")
        'pdf'
        >>> extension_for_mime_type("text")
        'bin'
    """
    parts = mime_type.split("/")
    subtype = parts[1] if len(parts) > 1 else ""
    if not subtype:
        return FALLBACK_EXTENSION
    return subtype.split("+")[0]


def decode_base64_lenient(payload: str) -> bytes:
    """
    Decode base64 the way browsers and Node.js buffers do: never fail.

    Decoding stops at the first "=", characters outside the standard and
    URL-safe alphabets are ignored, missing padding is restored and a
    dangling sextet is dropped.

    Examples:
        >>> decode_base64_lenient("aGk")
        b'hi'
        >>> decode_base64_lenient("a G\\nk=ignored")
        b'hi'
    """
    cleaned = BASE64_NOISE_PATTERN.sub("", payload.split("=", 1)[0])
    cleaned = cleaned.replace("-", "+").replace("_", "/")
    if len(cleaned) % 4 == 1:
        cleaned = cleaned[:-1]
    return base64.b64decode(cleaned + "=" * (-len(cleaned) % 4))


def parse_data_url(value: str, filename_stem: str = "file") -> InlineAttachment:
    """
    Decode a data:<media-type>;base64,<payload> reference.

    Args:
        value: Raw data URL string
        filename_stem: Filename without extension (e.g. "foto_ktp")

    Returns:
        InlineAttachment with decoded bytes and derived filename

    Raises:
        InvalidDataUrlError: If the string does not match
            data:<media-type>;base64,<payload>
    """
    match = DATA_URL_PATTERN.fullmatch(value)
    if match is None:
        raise InvalidDataUrlError(
            f"Reference for '{filename_stem}' is not a base64 data URL"
        )

    mime_type, payload = match.group(1), match.group(2)

    return InlineAttachment(
        mime_type=mime_type,
        data=decode_base64_lenient(payload),
        filename=f"{filename_stem}.{extension_for_mime_type(mime_type)}",
    )


def parse_attachment_reference(
    value: str, filename_stem: str = "file"
) -> AttachmentReference:
    """
    Classify and parse a raw attachment reference.

    Strings starting with "data:" are decoded locally; anything else is
    treated as a remote URL and is not touched.

    Raises:
        InvalidDataUrlError: If an inline reference is not a base64 data URL
    """
    if is_data_url(value):
        return parse_data_url(value, filename_stem)
    return RemoteAttachment(url=value)
