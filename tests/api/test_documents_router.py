"""
Test suite for the document endpoints.

System role: Verification of document HTTP contracts and error mapping
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from docchat.api.deps import get_document_service
from docchat.application.services.document_service import ReindexOutcome
from docchat.core.exceptions import DocumentNotFoundError, DocumentProcessingError


@pytest.fixture
def mock_document_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_document_service] = lambda: service
    return service


class TestUpload:
    def test_missing_file_rejected(self, client, mock_document_service):
        response = client.post("/api/v1/documents/upload")

        assert response.status_code == 400
        mock_document_service.process.assert_not_called()

    def test_empty_file_rejected(self, client, mock_document_service):
        response = client.post(
            "/api/v1/documents/upload",
            files={"file": ("empty.txt", b"", "text/plain")},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Uploaded file is empty"

    def test_upload_returns_document(self, client, mock_document_service, document_record):
        record = document_record(file_name="hello.txt", content_type="text/plain")
        mock_document_service.process.return_value = record

        response = client.post(
            "/api/v1/documents/upload",
            files={"file": ("hello.txt", b"hello world", "text/plain")},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == str(record.id)
        assert body["index_status"] == "indexed"
        assert body["has_embedding"] is True
        assert "vector_embedding" not in body

        incoming = mock_document_service.process.call_args.args[0]
        assert incoming.file_name == "hello.txt"
        assert incoming.content_type == "text/plain"
        assert incoming.size_bytes == 11
        assert incoming.data == b"hello world"

    def test_processing_failure_is_500(self, client, mock_document_service):
        mock_document_service.process.side_effect = DocumentProcessingError(
            "OCR timed out", file_name="scan.pdf"
        )

        response = client.post(
            "/api/v1/documents/upload",
            files={"file": ("scan.pdf", b"%PDF", "application/pdf")},
        )

        assert response.status_code == 500
        assert response.json()["detail"].startswith("Error processing document: OCR timed out")


class TestListAndGet:
    def test_list_documents(self, client, mock_document_service, document_record):
        mock_document_service.list_documents.return_value = [
            document_record(file_name="b.pdf"),
            document_record(file_name="a.pdf"),
        ]

        response = client.get("/api/v1/documents")

        assert response.status_code == 200
        body = response.json()
        assert [d["file_name"] for d in body] == ["b.pdf", "a.pdf"]
        assert "content" not in body[0]

    def test_get_document(self, client, mock_document_service, document_record):
        record = document_record(vector_embedding=None, index_status="failed")
        mock_document_service.get_document.return_value = record

        response = client.get(f"/api/v1/documents/{record.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["content"] == "Quarterly revenue grew."
        assert body["has_embedding"] is False
        assert body["index_status"] == "failed"

    def test_get_unknown_document_is_404(self, client, mock_document_service):
        document_id = uuid.uuid4()
        mock_document_service.get_document.side_effect = DocumentNotFoundError(str(document_id))

        response = client.get(f"/api/v1/documents/{document_id}")

        assert response.status_code == 404

    def test_malformed_id_is_422(self, client, mock_document_service):
        response = client.get("/api/v1/documents/not-a-uuid")

        assert response.status_code == 422


class TestSearch:
    def test_blank_query_rejected(self, client, mock_document_service):
        response = client.get("/api/v1/documents/search", params={"query": "   "})

        assert response.status_code == 400
        mock_document_service.search.assert_not_called()

    def test_results_carry_preview(self, client, mock_document_service, document_record):
        long_record = document_record(content="x" * 250)
        short_record = document_record(content="short")
        mock_document_service.search.return_value = [long_record, short_record]

        response = client.get(
            "/api/v1/documents/search",
            params={"query": "revenue", "maxResults": 2},
        )

        assert response.status_code == 200
        body = response.json()
        assert body[0]["content_preview"] == "x" * 200 + "..."
        assert body[1]["content_preview"] == "short"
        mock_document_service.search.assert_awaited_once_with("revenue", max_results=2)

    def test_default_max_results(self, client, mock_document_service):
        mock_document_service.search.return_value = []

        response = client.get("/api/v1/documents/search", params={"query": "revenue"})

        assert response.status_code == 200
        assert response.json() == []
        mock_document_service.search.assert_awaited_once_with("revenue", max_results=5)

    def test_max_results_upper_bound(self, client, mock_document_service):
        response = client.get(
            "/api/v1/documents/search", params={"query": "revenue", "maxResults": 51}
        )

        assert response.status_code == 422
        mock_document_service.search.assert_not_called()

    def test_search_failure_is_500(self, client, mock_document_service):
        mock_document_service.search.side_effect = RuntimeError("index down")

        response = client.get("/api/v1/documents/search", params={"query": "revenue"})

        assert response.status_code == 500


class TestDeleteAndReindex:
    def test_delete_document(self, client, mock_document_service):
        document_id = uuid.uuid4()

        response = client.delete(f"/api/v1/documents/{document_id}")

        assert response.status_code == 200
        assert response.json()["id"] == str(document_id)
        mock_document_service.delete_document.assert_awaited_once_with(document_id)

    def test_delete_unknown_document_is_404(self, client, mock_document_service):
        document_id = uuid.uuid4()
        mock_document_service.delete_document.side_effect = DocumentNotFoundError(
            str(document_id)
        )

        response = client.delete(f"/api/v1/documents/{document_id}")

        assert response.status_code == 404

    def test_reindex(self, client, mock_document_service):
        mock_document_service.reindex_failed.return_value = ReindexOutcome(reindexed=2, failed=1)

        response = client.post("/api/v1/documents/reindex")

        assert response.status_code == 200
        assert response.json() == {"reindexed": 2, "failed": 1}


def test_not_found_documented_in_openapi(client):
    schema = client.get("/openapi.json").json()

    responses = schema["paths"]["/api/v1/documents/{document_id}"]["get"]["responses"]
    assert responses["404"]["content"]["application/json"]["schema"]["$ref"].endswith(
        "/ErrorResponse"
    )
