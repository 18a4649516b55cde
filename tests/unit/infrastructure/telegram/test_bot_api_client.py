"""
Tests for TelegramBotClient.

Uses httpx.MockTransport (TelegramRecorder) so no network is touched.

Covers:
- URL construction
- JSON calls (sendMessage, URL references)
- Multipart uploads (field names, filenames, captions)
- ok=false and non-JSON replies
- Transport errors
"""

import httpx
import pytest

from src.infrastructure.telegram.bot_api_client import TelegramApiError, TelegramBotClient

TOKEN = "123456:TEST-TOKEN"
CHAT_ID = "-100555"


@pytest.fixture
def bot(telegram):
    return TelegramBotClient(TOKEN, transport=telegram.transport())


@pytest.mark.asyncio
async def test_send_message_posts_json(bot, telegram):
    async with bot:
        reply = await bot.send_message(CHAT_ID, "<b>Halo</b>")

    assert reply["ok"] is True
    request = telegram.requests[0]
    assert str(request.url) == f"https://api.telegram.org/bot{TOKEN}/sendMessage"
    assert telegram.json_body(0) == {
        "chat_id": CHAT_ID,
        "text": "<b>Halo</b>",
        "parse_mode": "HTML",
        "disable_web_page_preview": True,
    }


@pytest.mark.asyncio
async def test_custom_base_url(telegram):
    async with TelegramBotClient(
        TOKEN, api_base_url="http://localhost:8081/", transport=telegram.transport()
    ) as bot:
        await bot.send_message(CHAT_ID, "x")

    assert str(telegram.requests[0].url) == f"http://localhost:8081/bot{TOKEN}/sendMessage"


@pytest.mark.asyncio
async def test_send_photo_bytes_is_multipart_upload(bot, telegram):
    async with bot:
        await bot.send_photo(
            CHAT_ID,
            b"\xff\xd8jpeg",
            filename="foto_ktp.jpeg",
            mime_type="image/jpeg",
            caption="📄 Foto KTP",
        )

    request = telegram.requests[0]
    assert request.url.path.endswith("/sendPhoto")
    assert request.headers["content-type"].startswith("multipart/form-data")
    body = request.content
    assert b'name="photo"; filename="foto_ktp.jpeg"' in body
    assert b"Content-Type: image/jpeg" in body
    assert b"\xff\xd8jpeg" in body
    assert b'name="chat_id"' in body and CHAT_ID.encode() in body
    assert "📄 Foto KTP".encode() in body


@pytest.mark.asyncio
async def test_send_document_bytes_uses_document_field(bot, telegram):
    async with bot:
        await bot.send_document(
            CHAT_ID, b"%PDF", filename="surat_keterangan.pdf", mime_type="application/pdf"
        )

    request = telegram.requests[0]
    assert request.url.path.endswith("/sendDocument")
    assert b'name="document"; filename="surat_keterangan.pdf"' in request.content
    assert b'name="caption"' not in request.content


@pytest.mark.asyncio
async def test_send_photo_url_is_json_reference(bot, telegram):
    url = "https://cdn.example.id/ktp.jpg"

    async with bot:
        await bot.send_photo(CHAT_ID, url, caption="📄 Foto KTP")

    assert telegram.methods == ["sendPhoto"]
    assert telegram.json_body(0) == {"chat_id": CHAT_ID, "photo": url, "caption": "📄 Foto KTP"}


@pytest.mark.asyncio
async def test_send_document_url_is_json_reference(bot, telegram):
    url = "https://cdn.example.id/surat.pdf"

    async with bot:
        await bot.send_document(CHAT_ID, url)

    assert telegram.json_body(0) == {"chat_id": CHAT_ID, "document": url}


@pytest.mark.asyncio
async def test_ok_false_raises_telegram_api_error(bot, telegram):
    telegram.fail("sendMessage", "Bad Request: chat not found", code=400)

    async with bot:
        with pytest.raises(TelegramApiError) as exc_info:
            await bot.send_message(CHAT_ID, "x")

    err = exc_info.value
    assert err.method == "sendMessage"
    assert err.error_code == 400
    assert err.description == "Bad Request: chat not found"
    assert TOKEN not in str(err)


@pytest.mark.asyncio
async def test_non_json_reply_raises_telegram_api_error(telegram):
    def handler(request):
        return httpx.Response(502, text="<html>Bad Gateway</html>")

    async with TelegramBotClient(TOKEN, transport=httpx.MockTransport(handler)) as bot:
        with pytest.raises(TelegramApiError) as exc_info:
            await bot.send_message(CHAT_ID, "x")

    assert exc_info.value.error_code == 502


@pytest.mark.asyncio
async def test_transport_error_propagates(bot, telegram):
    telegram.break_transport("sendDocument")

    async with bot:
        with pytest.raises(httpx.ConnectError):
            await bot.send_document(CHAT_ID, b"x", filename="a.bin")
