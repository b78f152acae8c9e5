"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, docchat.configs
System role: Database schema initialization

Usage:
    python -m docchat.boundary.db.create_tables
"""

import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncEngine

from docchat.boundary.db.base import Base
from docchat.boundary.db.connection import get_async_engine

# Import all models to register them with Base.metadata
from docchat.boundary.db.models.document_model import DocumentModel  # noqa: F401
from docchat.boundary.db.models.chat_session_model import ChatSessionModel  # noqa: F401
from docchat.boundary.db.models.chat_message_model import ChatMessageModel  # noqa: F401

logger = logging.getLogger(__name__)


async def create_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run on every startup. Existing tables remain unchanged.

    Args:
        engine: Engine to use (defaults to the configured engine)

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured", extra={"tables": sorted(Base.metadata.tables)})


async def drop_all_tables(engine: AsyncEngine | None = None) -> None:
    """
    Drop all database tables and their data.

    WARNING: Irreversible data loss. Only use in development environments.
    """
    engine = engine or get_async_engine()
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("All tables dropped")


if __name__ == "__main__":
    asyncio.run(create_all_tables())
