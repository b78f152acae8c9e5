"""
Health check API endpoints.

Routes: GET /health

Dependencies: docchat.boundary.db, docchat.configs
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from docchat.boundary.db import get_async_db
from docchat.configs import get_settings
from docchat.models.common import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(db: AsyncSession = Depends(get_async_db)) -> HealthResponse:
    """Liveness plus a database round-trip."""
    try:
        await db.execute(text("SELECT 1"))
        database = "ok"
    except Exception as e:
        logger.warning(f"{__name__}:health_check - Database unreachable: {e}")
        database = "unavailable"
    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        environment=get_settings().environment,
        database=database,
    )
