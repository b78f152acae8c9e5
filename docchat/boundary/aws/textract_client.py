"""
Amazon Textract client for OCR text extraction.

Runs an asynchronous text detection job against an object already stored
in S3, polls it to completion, and flattens LINE blocks into plain text.

Dependencies: boto3, fastapi (run_in_threadpool)
System role: Document analysis boundary for ingestion
"""

import asyncio
import logging
import time
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from docchat.boundary.aws.s3_client import StoredObject
from docchat.core.exceptions import DocumentAnalysisError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnalysisResult:
    """Text and page count extracted from one document."""

    text: str
    page_count: int


class TextractDocumentClient:
    """Text detection over S3 objects with job polling."""

    def __init__(
        self,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        poll_interval_seconds: float = 2.0,
        timeout_seconds: float = 300.0,
        client=None,
    ) -> None:
        """
        Initialize Textract client.

        Args:
            region: AWS region for Textract
            endpoint_url: Optional custom endpoint
            poll_interval_seconds: Delay between job status polls
            timeout_seconds: Deadline for a job to finish
            client: Pre-built boto3 Textract client (tests)
        """
        self._poll_interval = poll_interval_seconds
        self._timeout = timeout_seconds
        self._client = client or boto3.client(
            "textract", region_name=region, endpoint_url=endpoint_url
        )

    async def analyze(self, stored: StoredObject) -> AnalysisResult:
        """
        Extract text from a stored document.

        Args:
            stored: Location of the uploaded bytes

        Returns:
            AnalysisResult: Newline-joined LINE text and page count

        Raises:
            DocumentAnalysisError: If the job fails, times out, or the
                provider call errors
        """
        try:
            response = await run_in_threadpool(
                self._client.start_document_text_detection,
                DocumentLocation={
                    "S3Object": {"Bucket": stored.bucket, "Name": stored.key}
                },
            )
        except (ClientError, BotoCoreError) as e:
            raise DocumentAnalysisError(
                f"Failed to start text detection: {e}",
                operation="start_document_text_detection",
                details={"key": stored.key},
            ) from e

        job_id = response["JobId"]
        logger.info(
            f"{__name__}:analyze - Started text detection job",
            extra={"job_id": job_id, "key": stored.key},
        )

        first_page = await self._wait_for_job(job_id)
        lines, page_count = self._collect(first_page)

        next_token = first_page.get("NextToken")
        while next_token:
            page = await self._get_results(job_id, next_token)
            more_lines, _ = self._collect(page)
            lines.extend(more_lines)
            next_token = page.get("NextToken")

        logger.info(
            f"{__name__}:analyze - Extracted {len(lines)} lines from {page_count} pages",
            extra={"job_id": job_id},
        )
        return AnalysisResult(text="\n".join(lines), page_count=page_count)

    async def _wait_for_job(self, job_id: str) -> dict:
        deadline = time.monotonic() + self._timeout
        while True:
            result = await self._get_results(job_id)
            status = result.get("JobStatus")

            if status in ("SUCCEEDED", "PARTIAL_SUCCESS"):
                return result
            if status == "FAILED":
                raise DocumentAnalysisError(
                    f"Text detection job failed: {result.get('StatusMessage', 'unknown error')}",
                    operation="get_document_text_detection",
                    details={"job_id": job_id},
                )
            if time.monotonic() >= deadline:
                raise DocumentAnalysisError(
                    f"Text detection job timed out after {self._timeout}s",
                    operation="get_document_text_detection",
                    details={"job_id": job_id},
                )
            await asyncio.sleep(self._poll_interval)

    async def _get_results(self, job_id: str, next_token: str | None = None) -> dict:
        kwargs = {"JobId": job_id}
        if next_token:
            kwargs["NextToken"] = next_token
        try:
            return await run_in_threadpool(
                self._client.get_document_text_detection, **kwargs
            )
        except (ClientError, BotoCoreError) as e:
            raise DocumentAnalysisError(
                f"Failed to fetch text detection results: {e}",
                operation="get_document_text_detection",
                details={"job_id": job_id},
            ) from e

    @staticmethod
    def _collect(result: dict) -> tuple[list[str], int]:
        lines = [
            block.get("Text", "")
            for block in result.get("Blocks", [])
            if block.get("BlockType") == "LINE"
        ]
        page_count = result.get("DocumentMetadata", {}).get("Pages", 0)
        return lines, page_count
