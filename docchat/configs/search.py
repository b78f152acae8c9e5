"""
Search index configuration.

Manages S3 Vectors bucket and index settings for hybrid document retrieval.

Dependencies: pydantic, pydantic_settings
System role: Search index configuration for hybrid document retrieval
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class SearchSettings(BaseSettings):
    """S3 Vectors search index configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SEARCH_",
        case_sensitive=False,
        extra="ignore",
    )

    vectors_bucket: str = Field(description="S3 Vectors bucket name")
    index_name: str = Field(description="Index name within the vectors bucket")
    region: str = Field(default="us-east-1", description="AWS region for S3 Vectors")
    endpoint_url: str | None = Field(
        default=None,
        description="Custom S3 Vectors endpoint; None uses the AWS default",
    )

    # Filterable metadata is capped at 2048 bytes per vector. Create the index
    # with nonFilterableMetadataKeys=["content"] and set content_non_filterable
    # to store the longer prefix.
    max_metadata_content_bytes: int = Field(
        default=4000,
        gt=0,
        description="UTF-8 byte cap on content stored alongside each vector",
    )
    content_non_filterable: bool = Field(
        default=False,
        description="Index declares content in nonFilterableMetadataKeys",
    )
