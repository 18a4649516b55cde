"""
API Schemas Package

Contains shared Pydantic models for API Layer.
"""

from src.api.schemas.common import RelayResponse

__all__ = ["RelayResponse"]
