"""
Common API Schemas

Shared Pydantic models used across all API routers.
"""

from typing import Optional

from pydantic import BaseModel, Field

# Error codes returned in RelayResponse.error
METHOD_NOT_ALLOWED = "METHOD_NOT_ALLOWED"
MISSING_ENV = "MISSING_ENV"
SERVER_ERROR = "SERVER_ERROR"


class RelayResponse(BaseModel):
    """
    Standard response body for the relay endpoint and its error handlers.

    Attributes:
        ok: True when the submission flow completed
        error: Machine-readable error code when ok is False
            ("METHOD_NOT_ALLOWED", "MISSING_ENV", "SERVER_ERROR")

    Note:
        Attachment failures never set ok to False; the flow is best effort.
    """

    ok: bool = Field(description="Whether the submission flow completed")
    error: Optional[str] = Field(default=None, description="Machine-readable error code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"ok": True},
                {"ok": False, "error": "MISSING_ENV"},
            ]
        }
    }

    def body(self) -> dict:
        """JSON body with unset error omitted."""
        return self.model_dump(exclude_none=True)
