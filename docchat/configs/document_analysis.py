"""
Document analysis (OCR) configuration.

Settings for Amazon Textract text detection jobs.

Dependencies: pydantic_settings
System role: OCR provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DocumentAnalysisSettings(BaseSettings):
    """Settings for the Textract document analysis client."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DOCUMENT_ANALYSIS_",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(default="us-east-1", description="AWS region for Textract")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom Textract endpoint; None uses the AWS default",
    )
    poll_interval_seconds: float = Field(
        default=2.0,
        gt=0,
        description="Delay between job status polls",
    )
    timeout_seconds: float = Field(
        default=300.0,
        gt=0,
        description="Give up waiting for a text detection job after this long",
    )
