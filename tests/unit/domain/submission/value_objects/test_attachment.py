"""
Tests for attachment value objects.

Covers:
- Data URL detection and decoding
- Extension derivation from media types
- Remote URL pass-through
- Unparseable references
"""

import base64

import pytest

from src.domain.shared.exceptions import InvalidDataUrlError
from src.domain.submission.value_objects.attachment import (
    InlineAttachment,
    RemoteAttachment,
    decode_base64_lenient,
    extension_for_mime_type,
    is_data_url,
    parse_attachment_reference,
    parse_data_url,
)


@pytest.mark.parametrize(
    "mime_type, expected",
    [
        ("image/jpeg", "jpeg"),
        ("image/png", "png"),
        ("application/pdf", "pdf"),
        ("image/svg+xml", "svg"),
        ("application/vnd.api+json", "vnd.api"),
        ("application", "bin"),
        ("image/", "bin"),
    ],
)
def test_extension_for_mime_type(mime_type, expected):
    assert extension_for_mime_type(mime_type) == expected


def test_parse_data_url_jpeg(jpeg_data_url):
    """image/jpeg data URL decodes to bytes with a .jpeg filename."""
    att = parse_data_url(jpeg_data_url, "foto_ktp")

    assert att.mime_type == "image/jpeg"
    assert att.data == b"\xff\xd8\xff\xe0fake-jpeg"
    assert att.filename == "foto_ktp.jpeg"
    assert att.is_image is True


def test_parse_data_url_pdf_is_not_image(pdf_data_url):
    att = parse_data_url(pdf_data_url, "surat_keterangan")

    assert att.filename == "surat_keterangan.pdf"
    assert att.is_image is False


def test_parse_data_url_default_stem():
    att = parse_data_url("data:text/plain;base64," + base64.b64encode(b"hi").decode())

    assert att.filename == "file.plain"


@pytest.mark.parametrize(
    "value",
    [
        "data:image/png,rawdata",  # not base64-flagged
        "data:;base64,AAAA",  # empty media type
        "data:image/png;base64",  # no payload separator
        "data:image/png;charset=utf-8;base64,AAAA",  # parameters before base64
        "data:image/png;base64,AAAA\n",  # trailing newline
    ],
)
def test_parse_data_url_rejects_pattern_mismatch(value):
    with pytest.raises(InvalidDataUrlError):
        parse_data_url(value, "foto_ktp")


def test_parse_data_url_accepts_missing_padding():
    att = parse_data_url("data:application/pdf;base64,aGk", "surat_keterangan")

    assert att.data == b"hi"
    assert att.filename == "surat_keterangan.pdf"


def test_parse_data_url_error_names_the_attachment():
    with pytest.raises(InvalidDataUrlError) as exc_info:
        parse_data_url("data:image/png,raw", "foto_ktp")

    assert "foto_ktp" in exc_info.value.message


@pytest.mark.parametrize(
    "payload, expected",
    [
        ("aGk=", b"hi"),
        ("aGk", b"hi"),  # padding restored
        ("abc", b"i\xb7"),
        ("aG k\n", b"hi"),  # noise ignored
        ("aGk=trailing", b"hi"),  # stops at padding
        ("-_8", b"\xfb\xff"),  # URL-safe alphabet
        ("aGkx5", b"hi1"),  # dangling character dropped
        ("", b""),
    ],
)
def test_decode_base64_lenient_never_fails(payload, expected):
    assert decode_base64_lenient(payload) == expected


def test_parse_attachment_reference_remote_url_untouched():
    ref = parse_attachment_reference("https://cdn.example.id/ktp.jpg", "foto_ktp")

    assert ref == RemoteAttachment(url="https://cdn.example.id/ktp.jpg")


def test_parse_attachment_reference_inline(jpeg_data_url):
    ref = parse_attachment_reference(jpeg_data_url, "foto_ktp")

    assert isinstance(ref, InlineAttachment)
    assert ref.filename == "foto_ktp.jpeg"


def test_is_data_url():
    assert is_data_url("data:image/png;base64,AAAA")
    assert not is_data_url("https://example.com/data:image")


def test_inline_attachment_is_frozen(jpeg_data_url):
    att = parse_data_url(jpeg_data_url, "foto_ktp")

    with pytest.raises(Exception):
        att.filename = "other.jpeg"
