"""
Test suite for S3DocumentClient with a mocked boto3 client.

System role: Verification of raw document storage
"""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from docchat.boundary.aws.s3_client import S3DocumentClient, build_object_key
from docchat.core.exceptions import StorageError


@pytest.fixture
def boto_s3() -> MagicMock:
    return MagicMock()


@pytest.fixture
def s3_client(boto_s3) -> S3DocumentClient:
    return S3DocumentClient(bucket="docs", client=boto_s3)


class TestBuildObjectKey:
    def test_unique_prefix(self):
        first = build_object_key("a.pdf")
        second = build_object_key("a.pdf")
        assert first.endswith("_a.pdf")
        assert first != second
        assert len(first.split("_", 1)[0]) == 36


class TestUploadDocument:
    def test_puts_object_and_returns_reference(self, s3_client, boto_s3):
        stored = s3_client.upload_document("a.pdf", b"bytes", "application/pdf")

        kwargs = boto_s3.put_object.call_args.kwargs
        assert kwargs["Bucket"] == "docs"
        assert kwargs["Key"] == stored.key
        assert kwargs["Body"] == b"bytes"
        assert kwargs["ContentType"] == "application/pdf"
        assert stored.url == f"s3://docs/{stored.key}"

    def test_failure_raises_storage_error(self, s3_client, boto_s3):
        boto_s3.put_object.side_effect = ClientError(
            {"Error": {"Code": "AccessDenied", "Message": "denied"}}, "PutObject"
        )

        with pytest.raises(StorageError):
            s3_client.upload_document("a.pdf", b"bytes")

