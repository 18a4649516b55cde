"""
Messaging Client Port

Protocol describing the outbound messaging operations the relay needs.
Implemented by TelegramBotClient in the Infrastructure Layer; tests can
substitute any object with the same async methods.
"""

from typing import Any, Optional, Protocol, Union


class MessagingClientProtocol(Protocol):
    """
    Outbound messaging operations.

    Every method returns the decoded platform reply on success and raises
    on failure (platform rejection or transport error).
    """

    async def send_message(
        self,
        chat_id: str,
        text: str,
        parse_mode: str = "HTML",
        disable_web_page_preview: bool = True,
    ) -> dict[str, Any]:
        ...

    async def send_photo(
        self,
        chat_id: str,
        photo: Union[bytes, str],
        filename: Optional[str] = None,
        mime_type: Optional[str] = None,
        caption: str = "",
    ) -> dict[str, Any]:
        ...

    async def send_document(
        self,
        chat_id: str,
        document: Union[bytes, str],
        filename: Optional[str] = None,
        mime_type: Optional[str] = None,
        caption: str = "",
    ) -> dict[str, Any]:
        ...
