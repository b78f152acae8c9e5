"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory SQLite session, provider client mocks, document/session factories
Dependencies: pytest, pytest-asyncio, sqlalchemy, aiosqlite
System role: Test infrastructure and fixture management
"""

import os
from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

# Provider settings are required; tests never reach the real services
os.environ.setdefault("STORAGE_BUCKET", "test-documents")
os.environ.setdefault("LLM_GOOGLE_API_KEY", "test-key")
os.environ.setdefault("SEARCH_VECTORS_BUCKET", "test-vectors")
os.environ.setdefault("SEARCH_INDEX_NAME", "test-index")


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup
    """
    from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
    from sqlalchemy.pool import StaticPool
    from docchat.boundary.db.base import Base
    import docchat.boundary.db.models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        autoflush=False,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def template_store():
    """Fresh template store with the built-in templates."""
    from docchat.core.prompts import PromptTemplateStore

    return PromptTemplateStore()


@pytest.fixture
def mock_storage():
    """S3 client mock; upload returns a fixed object location."""
    from docchat.boundary.aws.s3_client import StoredObject

    storage = MagicMock()
    storage.upload_document.return_value = StoredObject(
        bucket="test-documents", key="0000_hello.txt"
    )
    return storage


@pytest.fixture
def mock_analyzer():
    """OCR client mock reporting "Hello world" on one page."""
    from docchat.boundary.aws.textract_client import AnalysisResult

    analyzer = AsyncMock()
    analyzer.analyze.return_value = AnalysisResult(text="Hello world", page_count=1)
    return analyzer


@pytest.fixture
def mock_embeddings():
    embeddings = AsyncMock()
    embeddings.embed_document.return_value = [0.1, 0.2, 0.3]
    embeddings.embed_query.return_value = [0.3, 0.2, 0.1]
    return embeddings


@pytest.fixture
def mock_search_index():
    index = AsyncMock()
    index.search.return_value = []
    return index


@pytest.fixture
def mock_completion():
    completion = AsyncMock()
    completion.complete.return_value = "Assistant reply"
    return completion


@pytest.fixture
def make_document(test_async_db):
    """
    Factory persisting a DocumentModel.

    Returns:
        Callable: async (**overrides) -> DocumentModel
    """
    from docchat.boundary.db.CRUD.document_crud import document_crud
    from docchat.boundary.db.models.document_model import IndexStatus

    counter = {"n": 0}

    async def _make(**overrides):
        counter["n"] += 1
        content = overrides.pop("content", f"content of document {counter['n']}")
        values = {
            "file_name": f"doc{counter['n']}.pdf",
            "content": content,
            "blob_url": f"s3://test-documents/{counter['n']}_doc.pdf",
            "uploaded_at": datetime(2024, 1, 1, tzinfo=timezone.utc) + timedelta(days=counter["n"]),
            "content_type": "application/pdf",
            "file_size_bytes": 1024,
            "page_count": 1,
            "word_count": len(content.split()),
            "vector_embedding": [0.1, 0.2, 0.3],
            "index_status": IndexStatus.INDEXED,
        }
        values.update(overrides)
        document = await document_crud.create(test_async_db, **values)
        await test_async_db.commit()
        return document

    return _make
