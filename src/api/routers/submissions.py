"""
API Router for Submission Relay

Responsibility:
    HTTP interface for the permit application form. Receives one submission
    and relays it to the configured Telegram chat.
    Thin layer that delegates to Application Layer use case via dependency injection.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (RelaySubmissionUseCase)
    - Configuration comes from app.state (validated once in create_app)
    - One TelegramBotClient per request, closed by the yield dependency

Contains:
    - POST /telegram - Relay a submission (summary + attachments)

Does NOT contain:
    - Summary formatting (Domain Layer: SummaryFormatter)
    - Attachment decoding (Domain Layer: attachment value objects)
    - HTTP calls to Telegram (Infrastructure Layer: TelegramBotClient)
"""

import json
import logging
from typing import Any, AsyncIterator

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from src.api.schemas.common import SERVER_ERROR, RelayResponse
from src.application.ports.messaging import MessagingClientProtocol
from src.application.services.relay_submission_use_case import RelaySubmissionUseCase
from src.domain.shared.exceptions import MissingConfigurationError
from src.domain.submission.entities.submission import build_submission
from src.infrastructure.telegram.bot_api_client import TelegramBotClient
from src.infrastructure.telegram.config import RelayConfig

# Configure logger
logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/telegram",
    tags=["submissions"],
    responses={
        405: {"model": RelayResponse, "description": "Method Not Allowed"},
        500: {
            "model": RelayResponse,
            "description": "Missing configuration (MISSING_ENV) or unexpected error (SERVER_ERROR)",
        },
    },
)


# ============================================================================
# DEPENDENCY INJECTION
# ============================================================================


def get_relay_config(request: Request) -> RelayConfig:
    """
    Dependency injection for RelayConfig.

    Returns the configuration validated by create_app().

    Raises:
        MissingConfigurationError: If BOT_TOKEN or CHAT_ID were not set when
            the app was created (mapped to 500 MISSING_ENV)
    """
    config = getattr(request.app.state, "relay_config", None)
    if config is None:
        error = getattr(request.app.state, "config_error", None)
        missing = error.missing if error is not None else []
        raise MissingConfigurationError(
            "Relay is not configured (BOT_TOKEN/CHAT_ID)", missing=missing
        )
    return config


async def get_messaging_client(
    config: RelayConfig = Depends(get_relay_config),
) -> AsyncIterator[MessagingClientProtocol]:
    """
    Dependency injection for the Telegram client.

    Yields:
        TelegramBotClient bound to the configured bot; closed after the request
    """
    async with TelegramBotClient(
        config.bot_token,
        api_base_url=config.api_base_url,
        timeout_seconds=config.timeout_seconds,
    ) as client:
        yield client


def get_relay_use_case(
    config: RelayConfig = Depends(get_relay_config),
    client: MessagingClientProtocol = Depends(get_messaging_client),
) -> RelaySubmissionUseCase:
    """
    Dependency injection for RelaySubmissionUseCase.

    Returns:
        RelaySubmissionUseCase wired to the client and destination chat
    """
    return RelaySubmissionUseCase(client=client, chat_id=config.chat_id)


# ============================================================================
# HELPERS
# ============================================================================


async def read_payload(request: Request) -> Any:
    """
    Decode the request body.

    JSON is the primary format; URL-encoded and multipart form fields are
    accepted as plain text values. An empty body decodes to {}.

    Raises:
        ValueError: If a JSON body is malformed
    """
    content_type = request.headers.get("content-type", "").lower()

    if content_type.startswith(FORM_CONTENT_TYPES):
        async with request.form() as form:
            return {key: value for key, value in form.items() if isinstance(value, str)}

    body = await request.body()
    if not body.strip():
        return {}
    return json.loads(body)


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "",
    status_code=status.HTTP_200_OK,
    response_model=RelayResponse,
    response_model_exclude_none=True,
    summary="Relay a permit application to Telegram",
    description=(
        "Send a formatted summary of the submission to the configured chat, "
        "then best-effort upload of foto_ktp_url and surat_keterangan_url "
        "(base64 data URLs or remote URLs). Attachment failures do not change "
        "the response."
    ),
)
async def relay_submission(
    request: Request,
    use_case: RelaySubmissionUseCase = Depends(get_relay_use_case),
):
    """
    Relay one submission.

    Process Flow:
        1. Decode body (JSON or form fields)
        2. Build Submission with defaults (build_submission)
        3. Delegate to RelaySubmissionUseCase (summary → photo → document)
        4. Return {"ok": true}

    Returns:
        200 {"ok": true} once every step was attempted
        500 {"ok": false, "error": "SERVER_ERROR"} on any unexpected exception

    Examples:
        >>> curl -X POST http://localhost:8000/api/telegram \\
        ...      -H "Content-Type: application/json" \\
        ...      -d '{"nama_lengkap": "Budi Santoso", "nik": "3174..."}'
        {"ok": true}
    """
    try:
        payload = await read_payload(request)
        submission = build_submission(payload)
        await use_case.execute(submission)
    except Exception as e:
        logger.error(
            f"Relay failed: {e.__class__.__name__} - {e} - "
            f"Request: {request.method} {request.url.path}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=RelayResponse(ok=False, error=SERVER_ERROR).body(),
        )

    return RelayResponse(ok=True)
