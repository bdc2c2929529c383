# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest

from app.config import Settings, get_settings


@pytest.fixture
def settings():
    return get_settings()


class TestSettings:

    def test_fields(self):
        assert set(Settings.model_fields) == {
            "SUPABASE_URL",
            "SUPABASE_KEY",
            "SUPABASE_JWT_SECRET",
            "STORAGE_BUCKET",
            "IMAGE_CACHE_CONTROL",
            "ADMIN_USER_ID",
            "ENVIRONMENT",
            "DEBUG",
            "CORS_ORIGINS",
        }

    def test_loaded_from_environment(self, settings):
        assert settings.SUPABASE_URL == "https://test-project.supabase.co"
        assert settings.ADMIN_USER_ID == "user_admin"
        assert settings.STORAGE_BUCKET == "main-bucket"
        assert settings.IMAGE_CACHE_CONTROL == "3600"

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_cors_origins_list(self, settings):
        parsed = settings.model_copy(update={"CORS_ORIGINS": "http://localhost:3000, https://shop.com"})

        assert parsed.cors_origins_list == ["http://localhost:3000", "https://shop.com"]
