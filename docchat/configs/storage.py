"""
Object storage configuration.

Settings for the S3 bucket that holds raw uploaded documents.

Dependencies: pydantic_settings
System role: Raw document storage configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):
    """Settings for S3 document storage."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="STORAGE_",
        case_sensitive=False,
        extra="ignore",
    )

    bucket: str = Field(description="S3 bucket (container) for raw document storage")
    region: str = Field(default="us-east-1", description="AWS region for the bucket")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 endpoint (e.g. LocalStack); None uses the AWS default",
    )
