"""
Relay Configuration.

Environment-sourced settings for the Telegram relay, validated once and
injected into the application at construction time.

Environment Variables:
    - BOT_TOKEN: Telegram bot credential (required)
    - CHAT_ID: Destination chat/channel identifier (required)

A .env file in the working directory is honoured via python-dotenv.

Examples:
    >>> config = RelayConfig.from_env()
    >>> config.chat_id
    '-1001234567890'
"""

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from src.domain.shared.exceptions import MissingConfigurationError

logger = logging.getLogger(__name__)

BOT_TOKEN_ENV = "BOT_TOKEN"
CHAT_ID_ENV = "CHAT_ID"

DEFAULT_API_BASE_URL = "https://api.telegram.org"
DEFAULT_TIMEOUT_SECONDS = 30.0


class RelayConfig(BaseModel):
    """
    Immutable relay configuration.

    Attributes:
        bot_token: Telegram bot token (secret, excluded from repr)
        chat_id: Destination chat identifier
        api_base_url: Bot API root (overridable for local Bot API servers)
        timeout_seconds: Per-call timeout for outbound requests
    """

    bot_token: str = Field(min_length=1, repr=False, description="Bot credential")
    chat_id: str = Field(min_length=1, description="Destination chat identifier")
    api_base_url: str = Field(default=DEFAULT_API_BASE_URL)
    timeout_seconds: float = Field(default=DEFAULT_TIMEOUT_SECONDS, gt=0)

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls) -> "RelayConfig":
        """
        Load configuration from the process environment.

        Returns:
            RelayConfig with token and chat id set

        Raises:
            MissingConfigurationError: If BOT_TOKEN or CHAT_ID is missing or blank
        """
        load_dotenv()

        bot_token = (os.getenv(BOT_TOKEN_ENV) or "").strip()
        chat_id = (os.getenv(CHAT_ID_ENV) or "").strip()

        missing = [
            name
            for name, value in ((BOT_TOKEN_ENV, bot_token), (CHAT_ID_ENV, chat_id))
            if not value
        ]
        if missing:
            raise MissingConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}",
                missing=missing,
            )

        logger.info(f"Relay configured for chat {chat_id}")
        return cls(bot_token=bot_token, chat_id=chat_id)
