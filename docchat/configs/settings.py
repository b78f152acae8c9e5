"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from docchat.configs.base import BaseSettings
from docchat.configs.database import DatabaseSettings
from docchat.configs.document_analysis import DocumentAnalysisSettings
from docchat.configs.llm import LLMSettings
from docchat.configs.search import SearchSettings
from docchat.configs.storage import StorageSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules.

    Provider sections without defaults for their required values raise a
    pydantic ValidationError on construction, so a missing endpoint or
    credential stops the application at startup.
    """

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    document_analysis: DocumentAnalysisSettings = Field(
        default_factory=DocumentAnalysisSettings
    )
    llm: LLMSettings = Field(default_factory=LLMSettings)
    search: SearchSettings = Field(default_factory=SearchSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Raises:
        pydantic.ValidationError: If a required provider setting is missing

    Usage:
        from docchat.configs import get_settings
        settings = get_settings()
    """
    return Settings()
