"""
Test suite for settings classes.

System role: Verification of environment-driven configuration
"""

from docchat.configs.base import BaseSettings
from docchat.configs.search import SearchSettings


class TestSearchSettings:
    def test_filterable_content_by_default(self, monkeypatch):
        monkeypatch.setenv("SEARCH_VECTORS_BUCKET", "vectors")
        monkeypatch.setenv("SEARCH_INDEX_NAME", "documents")

        settings = SearchSettings()

        assert settings.content_non_filterable is False
        assert settings.max_metadata_content_bytes == 4000
        assert not hasattr(settings, "default_max_results")

    def test_non_filterable_from_env(self, monkeypatch):
        monkeypatch.setenv("SEARCH_VECTORS_BUCKET", "vectors")
        monkeypatch.setenv("SEARCH_INDEX_NAME", "documents")
        monkeypatch.setenv("SEARCH_CONTENT_NON_FILTERABLE", "true")
        monkeypatch.setenv("SEARCH_MAX_METADATA_CONTENT_BYTES", "20000")

        settings = SearchSettings()

        assert settings.content_non_filterable is True
        assert settings.max_metadata_content_bytes == 20000


class TestCommonSettings:
    def test_debug_and_cors_from_env(self, monkeypatch):
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("CORS_ORIGINS", '["https://docs.example.com"]')

        settings = BaseSettings()

        assert settings.debug is True
        assert settings.cors_origins == ["https://docs.example.com"]
