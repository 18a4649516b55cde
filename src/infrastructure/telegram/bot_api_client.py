"""
Telegram Bot API Client.

Thin async adapter over the three Bot API methods the relay needs:
sendMessage, sendPhoto and sendDocument.

Responsibility:
    - Build Bot API URLs (https://api.telegram.org/bot<token>/<method>)
    - Send JSON requests (text, URL references) and multipart uploads (bytes)
    - Turn ok=false replies into TelegramApiError

Architecture Notes:
    - Infrastructure Layer (external dependency on Telegram over HTTP)
    - Implements MessagingClientProtocol from the Application Layer
    - Uses httpx.AsyncClient; one client per request, closed on exit
    - No retries: every call is attempted exactly once

Error Handling:
    - Transport problems surface as httpx.HTTPError (timeouts, connection errors)
    - Replies with "ok": false, or bodies that are not JSON, raise TelegramApiError
    - The bot token never appears in log messages or exception text

Examples:
    >>> async with TelegramBotClient(config) as client:
    ...     await client.send_message(config.chat_id, "<b>Halo</b>")
"""

import logging
from types import TracebackType
from typing import Any, Optional, Union

import httpx

from src.infrastructure.telegram.config import DEFAULT_API_BASE_URL, DEFAULT_TIMEOUT_SECONDS

logger = logging.getLogger(__name__)

SEND_MESSAGE = "sendMessage"
SEND_PHOTO = "sendPhoto"
SEND_DOCUMENT = "sendDocument"

DEFAULT_UPLOAD_MIME_TYPE = "application/octet-stream"


class TelegramApiError(Exception):
    """
    Raised when the Bot API rejects a call.

    Attributes:
        method: Bot API method name (e.g. "sendPhoto")
        error_code: Telegram error code from the reply, if any
        description: Telegram error description, if any
    """

    def __init__(
        self,
        method: str,
        description: str,
        error_code: Optional[int] = None,
    ) -> None:
        self.method = method
        self.description = description
        self.error_code = error_code
        super().__init__(f"{method} failed ({error_code}): {description}")


class TelegramBotClient:
    """
    Async client for the Telegram Bot API.

    Attributes:
        base_url: Bot API root including the bot token path segment
        timeout: httpx timeout applied to every call

    Usage:
        Use as an async context manager so the underlying connection pool
        is closed when the request finishes. A custom httpx transport can be
        passed for testing (httpx.MockTransport).
    """

    def __init__(
        self,
        bot_token: str,
        api_base_url: str = DEFAULT_API_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = f"{api_base_url.rstrip('/')}/bot{bot_token}"
        self.timeout = httpx.Timeout(timeout_seconds)
        self._client = httpx.AsyncClient(timeout=self.timeout, transport=transport)

    async def __aenter__(self) -> "TelegramBotClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Bot API methods
    # ------------------------------------------------------------------

    async def send_message(
        self,
        chat_id: str,
        text: str,
        parse_mode: str = "HTML",
        disable_web_page_preview: bool = True,
    ) -> dict[str, Any]:
        """
        Send a text message.

        Returns:
            Decoded Bot API reply (with "ok": true)

        Raises:
            TelegramApiError: If Telegram rejects the message
            httpx.HTTPError: On transport failure
        """
        return await self._post_json(
            SEND_MESSAGE,
            {
                "chat_id": chat_id,
                "text": text,
                "parse_mode": parse_mode,
                "disable_web_page_preview": disable_web_page_preview,
            },
        )

    async def send_photo(
        self,
        chat_id: str,
        photo: Union[bytes, str],
        filename: Optional[str] = None,
        mime_type: Optional[str] = None,
        caption: str = "",
    ) -> dict[str, Any]:
        """
        Send a photo, either uploaded (bytes) or by URL reference (str).

        Raises:
            TelegramApiError: If Telegram rejects the photo
            httpx.HTTPError: On transport failure
        """
        return await self._send_file(
            SEND_PHOTO, "photo", chat_id, photo, filename, mime_type, caption
        )

    async def send_document(
        self,
        chat_id: str,
        document: Union[bytes, str],
        filename: Optional[str] = None,
        mime_type: Optional[str] = None,
        caption: str = "",
    ) -> dict[str, Any]:
        """
        Send a generic file, either uploaded (bytes) or by URL reference (str).

        Raises:
            TelegramApiError: If Telegram rejects the document
            httpx.HTTPError: On transport failure
        """
        return await self._send_file(
            SEND_DOCUMENT, "document", chat_id, document, filename, mime_type, caption
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _send_file(
        self,
        method: str,
        field_name: str,
        chat_id: str,
        content: Union[bytes, str],
        filename: Optional[str],
        mime_type: Optional[str],
        caption: str,
    ) -> dict[str, Any]:
        if isinstance(content, str):
            payload: dict[str, Any] = {"chat_id": chat_id, field_name: content}
            if caption:
                payload["caption"] = caption
            return await self._post_json(method, payload)

        data = {"chat_id": chat_id}
        if caption:
            data["caption"] = caption
        files = {
            field_name: (
                filename or field_name,
                content,
                mime_type or DEFAULT_UPLOAD_MIME_TYPE,
            )
        }
        logger.debug(f"Uploading {filename} ({len(content)} bytes) via {method}")
        response = await self._client.post(self._url(method), data=data, files=files)
        return self._parse_reply(method, response)

    async def _post_json(self, method: str, payload: dict[str, Any]) -> dict[str, Any]:
        response = await self._client.post(self._url(method), json=payload)
        return self._parse_reply(method, response)

    def _url(self, method: str) -> str:
        return f"{self.base_url}/{method}"

    @staticmethod
    def _parse_reply(method: str, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            raise TelegramApiError(
                method,
                f"non-JSON reply with HTTP {response.status_code}",
                error_code=response.status_code,
            )

        if not isinstance(body, dict) or not body.get("ok"):
            description = body.get("description") if isinstance(body, dict) else None
            error_code = body.get("error_code") if isinstance(body, dict) else None
            raise TelegramApiError(
                method,
                description or f"HTTP {response.status_code}",
                error_code=error_code or response.status_code,
            )

        return body
