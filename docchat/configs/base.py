"""
Application-wide settings for the document chat API.

Unprefixed environment values shared by the app: deployment environment,
log level, and the browser origins allowed by CORS. DatabaseSettings
extends this class; the provider settings (storage, document analysis,
LLM, search) carry their own env prefixes.

Dependencies: pydantic_settings
System role: Common settings read by create_app() and the lifespan
"""

from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict
from pydantic import Field


class BaseSettings(PydanticBaseSettings):
    """Environment, logging, and CORS settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Application environment (development, staging, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Origins allowed to call the API from a browser",
    )
