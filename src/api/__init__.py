"""
API Layer - FastAPI Presentation Layer

Responsibility:
    HTTP interface for the application. Handles requests and responses,
    delegates the relay flow to the Application Layer. No business logic.

Contains:
    - FastAPI routers (submissions)
    - Request/Response models (Pydantic)
    - Dependency injection setup
    - Middleware configuration (CORS, logging)

Does NOT contain:
    - Business logic (belongs to Domain layer)
    - Outbound HTTP calls (belongs to Infrastructure layer)
"""
