"""
Common fixtures for API unit tests.

Provides shared test utilities:
- FastAPI app wired to a TelegramRecorder
- FastAPI TestClient
- App without configuration (MISSING_ENV)
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import create_app
from src.api.routers.submissions import get_messaging_client
from src.infrastructure.telegram.bot_api_client import TelegramBotClient


def override_messaging_client(config, telegram):
    """Build a get_messaging_client override that talks to the recorder."""

    async def _client():
        async with TelegramBotClient(
            config.bot_token, transport=telegram.transport()
        ) as client:
            yield client

    return _client


@pytest.fixture
def app(relay_config, telegram):
    """FastAPI app with test configuration and recorded Bot API calls."""
    app = create_app(config=relay_config)
    app.dependency_overrides[get_messaging_client] = override_messaging_client(
        relay_config, telegram
    )
    return app


@pytest.fixture
def client(app):
    """
    FastAPI TestClient for testing endpoints.

    Returns TestClient configured with the recorder-backed app.
    """
    return TestClient(app)


@pytest.fixture
def unconfigured_client(monkeypatch, relay_config, telegram):
    """TestClient for an app created without BOT_TOKEN/CHAT_ID."""
    # Blank values also stop python-dotenv from filling them in
    monkeypatch.setenv("BOT_TOKEN", "")
    monkeypatch.setenv("CHAT_ID", "")
    app = create_app()
    app.dependency_overrides[get_messaging_client] = override_messaging_client(
        relay_config, telegram
    )
    return TestClient(app)
