"""
API Routers Package

Contains all FastAPI routers grouped by functionality.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Routers are thin wrappers around Application Layer use cases
    - All routers follow dependency injection pattern

Available Routers:
    - submissions_router: POST /telegram submission relay
"""

from .submissions import router as submissions_router

__all__ = ["submissions_router"]
