"""
Unit Tests - Configuration
"""
import pytest
from pydantic import ValidationError

from storefront.config import PayloadSettings, get_settings
from storefront.main import create_app


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class TestPayloadSettings:
    """Tests for the collection store settings"""

    def test_missing_url_fails_fast(self, monkeypatch):
        monkeypatch.delenv("PAYLOAD_API_URL", raising=False)

        with pytest.raises(ValidationError):
            PayloadSettings()

    def test_blank_url_fails_fast(self, monkeypatch):
        monkeypatch.setenv("PAYLOAD_API_URL", "   ")

        with pytest.raises(ValidationError):
            PayloadSettings()

    def test_url_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAYLOAD_API_URL", "http://localhost:3001/api/")

        payload = PayloadSettings()

        assert payload.api_url == "http://localhost:3001/api"
        assert payload.recent_orders_limit == 10
        assert payload.list_page_size == 100
        assert payload.stats_page_size == 1000

    def test_page_sizes_from_environment(self, monkeypatch):
        monkeypatch.setenv("PAYLOAD_API_URL", "http://localhost:3001/api")
        monkeypatch.setenv("PAYLOAD_STATS_PAGE_SIZE", "500")

        assert PayloadSettings().stats_page_size == 500


def test_app_refuses_to_start_without_url(monkeypatch):
    monkeypatch.delenv("PAYLOAD_API_URL", raising=False)

    with pytest.raises(ValidationError):
        create_app()


def test_invalid_environment(monkeypatch):
    monkeypatch.setenv("PAYLOAD_API_URL", "http://localhost:3001/api")
    monkeypatch.setenv("APP_ENV", "moon")

    with pytest.raises(ValidationError):
        get_settings()
