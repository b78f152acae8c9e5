"""
S3 client for raw document storage.

Uploads the bytes of an incoming file under a collision-free key and
returns a durable reference that OCR and later readers can resolve.

Dependencies: boto3
System role: Object storage boundary for document ingestion
"""

import logging
import uuid
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from docchat.core.exceptions import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredObject:
    """Location of an uploaded object."""

    bucket: str
    key: str

    @property
    def url(self) -> str:
        return f"s3://{self.bucket}/{self.key}"


def build_object_key(file_name: str) -> str:
    """Prefix the file name with a random UUID so uploads never collide."""
    return f"{uuid.uuid4()}_{file_name}"


class S3DocumentClient:
    """S3 client for document bucket operations."""

    def __init__(
        self,
        bucket: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        client=None,
    ) -> None:
        """
        Initialize S3 client for document bucket.

        Args:
            bucket: S3 bucket name for document storage
            region: AWS region for S3 bucket
            endpoint_url: Optional custom endpoint (LocalStack etc.)
            client: Pre-built boto3 S3 client (tests)
        """
        self._bucket = bucket
        self._region = region
        self._s3_client = client or boto3.client(
            "s3", region_name=region, endpoint_url=endpoint_url
        )

    def upload_document(
        self,
        file_name: str,
        data: bytes,
        content_type: str = "application/octet-stream",
    ) -> StoredObject:
        """
        Upload raw document bytes.

        Args:
            file_name: Original file name, used as the key suffix
            data: File contents
            content_type: MIME type of the file

        Returns:
            StoredObject: Bucket/key of the stored bytes

        Raises:
            StorageError: If the upload fails
        """
        key = build_object_key(file_name)
        try:
            self._s3_client.put_object(
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type or "application/octet-stream",
            )
        except (ClientError, BotoCoreError) as e:
            logger.error(
                f"{__name__}:upload_document - Upload failed: {e}",
                extra={"bucket": self._bucket, "key": key},
            )
            raise StorageError(
                f"Failed to upload {file_name}: {e}",
                operation="put_object",
                details={"bucket": self._bucket, "key": key},
            ) from e

        logger.info(
            f"{__name__}:upload_document - Stored {len(data)} bytes",
            extra={"bucket": self._bucket, "key": key},
        )
        return StoredObject(bucket=self._bucket, key=key)

