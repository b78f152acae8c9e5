"""
LLM provider configuration.

Settings for Google Generative AI chat completion and embedding models.

Dependencies: pydantic_settings
System role: Chat/embedding provider configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """Google Generative AI configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    google_api_key: str = Field(description="API key for Google Generative AI")
    chat_model: str = Field(
        default="gemini-2.5-flash",
        description="Chat completion model ID",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature for chat completion",
    )
    embedding_model: str = Field(
        default="models/gemini-embedding-001",
        description="Embedding model ID (gemini-embedding-001 supports 1536-dim output)",
    )
    embedding_dimension: int = Field(
        default=1536,
        gt=0,
        description="Embedding vector dimension, must match the search index",
    )
