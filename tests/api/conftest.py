"""
API test fixtures.

Provides: TestClient over a fresh app, attribute-bag document/session records
Dependencies: fastapi.testclient
System role: Router test infrastructure
"""

import uuid
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from docchat.api.main import create_app
from docchat.boundary.db.models.document_model import IndexStatus


@pytest.fixture
def client():
    # No context manager: lifespan (provider warm-up, table creation) is skipped
    app = create_app()
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def document_record():
    """Factory for objects shaped like DocumentModel rows."""

    def _make(**overrides):
        values = {
            "id": uuid.uuid4(),
            "file_name": "report.pdf",
            "content": "Quarterly revenue grew.",
            "blob_url": "s3://test-documents/0000_report.pdf",
            "uploaded_at": datetime(2024, 5, 1, tzinfo=timezone.utc),
            "content_type": "application/pdf",
            "file_size_bytes": 2048,
            "page_count": 2,
            "word_count": 3,
            "vector_embedding": [0.1, 0.2],
            "index_status": IndexStatus.INDEXED,
        }
        values.update(overrides)
        return SimpleNamespace(**values)

    return _make


@pytest.fixture
def session_record():
    """Factory for objects shaped like ChatSessionModel rows."""

    def _make(**overrides):
        now = datetime(2024, 5, 2, tzinfo=timezone.utc)
        values = {
            "id": uuid.uuid4(),
            "title": "Revenue questions",
            "created_at": now,
            "last_updated_at": now,
            "document_id": None,
            "document": None,
            "messages": [],
        }
        values.update(overrides)
        return SimpleNamespace(**values)

    return _make
