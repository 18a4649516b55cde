"""
Infrastructure Layer - External Dependencies

Implements technical capabilities that support the Application Layer.
Handles the only external dependency of the relay: the Telegram Bot API.

Architecture:
    - Implements Application Layer protocols (MessagingClientProtocol)
    - Depends on external libraries (httpx, python-dotenv)
    - No Domain business logic (only technical implementations)

Modules:
    - telegram: Bot API client and environment-sourced configuration

Usage:
    >>> from src.infrastructure import TelegramBotClient, RelayConfig
    >>> config = RelayConfig.from_env()
"""

# Telegram
from .telegram import RelayConfig, TelegramApiError, TelegramBotClient

__all__ = [
    "RelayConfig",
    "TelegramApiError",
    "TelegramBotClient",
]
