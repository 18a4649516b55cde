"""
Telegram Infrastructure Module

Bot API adapter and environment-sourced relay configuration.
"""

from .bot_api_client import TelegramApiError, TelegramBotClient
from .config import RelayConfig

__all__ = ["TelegramBotClient", "TelegramApiError", "RelayConfig"]
