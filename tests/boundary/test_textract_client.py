"""
Test suite for TextractDocumentClient with a mocked boto3 client.

System role: Verification of OCR job polling and text assembly
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from docchat.boundary.aws.s3_client import StoredObject
from docchat.boundary.aws.textract_client import TextractDocumentClient
from docchat.core.exceptions import DocumentAnalysisError

STORED = StoredObject(bucket="docs", key="abc_file.pdf")


def _lines(*texts: str) -> list[dict]:
    blocks = [{"BlockType": "PAGE"}]
    blocks += [{"BlockType": "LINE", "Text": text} for text in texts]
    blocks += [{"BlockType": "WORD", "Text": "ignored"}]
    return blocks


@pytest.fixture
def boto_textract() -> MagicMock:
    client = MagicMock()
    client.start_document_text_detection.return_value = {"JobId": "job-1"}
    return client


@pytest.fixture
def textract(boto_textract) -> TextractDocumentClient:
    return TextractDocumentClient(
        poll_interval_seconds=0.001,
        timeout_seconds=5,
        client=boto_textract,
    )


class TestAnalyze:
    async def test_polls_until_succeeded(self, textract, boto_textract):
        boto_textract.get_document_text_detection.side_effect = [
            {"JobStatus": "IN_PROGRESS"},
            {
                "JobStatus": "SUCCEEDED",
                "DocumentMetadata": {"Pages": 2},
                "Blocks": _lines("Hello", "world"),
            },
        ]

        result = await textract.analyze(STORED)

        assert result.text == "Hello\nworld"
        assert result.page_count == 2
        boto_textract.start_document_text_detection.assert_called_once_with(
            DocumentLocation={"S3Object": {"Bucket": "docs", "Name": "abc_file.pdf"}}
        )

    async def test_follows_pagination(self, textract, boto_textract):
        boto_textract.get_document_text_detection.side_effect = [
            {
                "JobStatus": "SUCCEEDED",
                "DocumentMetadata": {"Pages": 3},
                "Blocks": _lines("page one"),
                "NextToken": "t1",
            },
            {"JobStatus": "SUCCEEDED", "Blocks": _lines("page two")},
        ]

        result = await textract.analyze(STORED)

        assert result.text == "page one\npage two"
        assert result.page_count == 3
        second_call = boto_textract.get_document_text_detection.call_args_list[1]
        assert second_call.kwargs == {"JobId": "job-1", "NextToken": "t1"}

    async def test_failed_job_raises(self, textract, boto_textract):
        boto_textract.get_document_text_detection.return_value = {
            "JobStatus": "FAILED",
            "StatusMessage": "unsupported format",
        }

        with pytest.raises(DocumentAnalysisError, match="unsupported format"):
            await textract.analyze(STORED)

    async def test_timeout_raises(self, boto_textract):
        boto_textract.get_document_text_detection.return_value = {"JobStatus": "IN_PROGRESS"}
        textract = TextractDocumentClient(
            poll_interval_seconds=0.001, timeout_seconds=0.01, client=boto_textract
        )

        with pytest.raises(DocumentAnalysisError, match="timed out"):
            await textract.analyze(STORED)

    async def test_start_error_wrapped(self, textract, boto_textract):
        boto_textract.start_document_text_detection.side_effect = ClientError(
            {"Error": {"Code": "InvalidS3ObjectException", "Message": "bad"}},
            "StartDocumentTextDetection",
        )

        with pytest.raises(DocumentAnalysisError) as exc_info:
            await textract.analyze(STORED)

        assert exc_info.value.details["operation"] == "start_document_text_detection"
