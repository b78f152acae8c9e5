"""
Common response models.

Error and health schemas shared by all routers.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema (FastAPI HTTPException body)."""

    detail: str = Field(description="Human-readable error message")


class HealthResponse(BaseModel):
    """Service liveness and database reachability."""

    status: str
    environment: str
    database: str
