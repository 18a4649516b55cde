"""
Pytest Configuration and Shared Fixtures

This module contains pytest configuration and shared fixtures used across
all test suites (unit, e2e).

Fixtures:
    - relay_config: RelayConfig with test credentials
    - telegram: Recorder standing in for the Telegram Bot API
    - sample_payload: Fully populated form submission
    - jpeg_data_url / pdf_data_url: Inline attachment references

Architecture Notes:
    - Outbound HTTP is captured with httpx.MockTransport (no network)
    - TelegramRecorder replies {"ok": true} unless told otherwise

Usage:
    def test_something(telegram, relay_config):
        client = TelegramBotClient(relay_config.bot_token, transport=telegram.transport())
"""

import base64
import json
import logging
from typing import Any

import httpx
import pytest

from src.infrastructure.telegram.config import RelayConfig

# Configure logger for tests
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

TEST_BOT_TOKEN = "123456:TEST-TOKEN"
TEST_CHAT_ID = "-1001234567890"

JPEG_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"
PDF_BYTES = b"%PDF-1.4 fake"


# ============================================================================
# TELEGRAM RECORDER
# ============================================================================


class TelegramRecorder:
    """
    Records Bot API calls made through httpx.MockTransport.

    Attributes:
        requests: Every httpx.Request received, in order
        replies: Per-method override, either (status_code, json_body) or an
            exception to raise (transport failure)
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.replies: dict[str, Any] = {}

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        method = request.url.path.rsplit("/", 1)[-1]

        reply = self.replies.get(method)
        if isinstance(reply, Exception):
            raise reply
        if reply is not None:
            status_code, body = reply
            return httpx.Response(status_code, json=body)

        return httpx.Response(
            200, json={"ok": True, "result": {"message_id": len(self.requests)}}
        )

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def fail(self, method: str, description: str = "Bad Request", code: int = 400) -> None:
        self.replies[method] = (code, {"ok": False, "error_code": code, "description": description})

    def break_transport(self, method: str) -> None:
        self.replies[method] = httpx.ConnectError("connection refused")

    @property
    def methods(self) -> list[str]:
        return [r.url.path.rsplit("/", 1)[-1] for r in self.requests]

    def json_body(self, index: int) -> dict[str, Any]:
        return json.loads(self.requests[index].content)


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def relay_config() -> RelayConfig:
    """RelayConfig with test credentials."""
    return RelayConfig(bot_token=TEST_BOT_TOKEN, chat_id=TEST_CHAT_ID)


@pytest.fixture
def telegram() -> TelegramRecorder:
    """Fresh Bot API recorder for each test."""
    return TelegramRecorder()


@pytest.fixture
def sample_payload() -> dict[str, Any]:
    """Fully populated form submission without attachments."""
    return {
        "nama_lengkap": "Budi Santoso",
        "nik": "3174012345678901",
        "tempat_lahir": "Jakarta",
        "tanggal_lahir": "1990-05-17",
        "alamat": "Jl. Merdeka No. 10, Jakarta Pusat",
        "no_telepon": "081234567890",
        "email": "budi@example.com",
        "alasan": "Mengadakan acara syukuran warga",
        "tanggal_pengajuan": "2024-01-05T09:05:00.000Z",
        "status": "Menunggu",
    }


@pytest.fixture
def jpeg_data_url() -> str:
    return "data:image/jpeg;base64," + base64.b64encode(JPEG_BYTES).decode()


@pytest.fixture
def pdf_data_url() -> str:
    return "data:application/pdf;base64," + base64.b64encode(PDF_BYTES).decode()
