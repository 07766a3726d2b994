"""
Unit Tests for Configuration System
"""
import pytest

from ae_lingo.config.settings import (
    Config, ServerConfig, GeminiConfig, ImageConfig, HistoryConfig,
    _get_bool_env, _get_int_env, _get_float_env
)


class TestEnvHelpers:
    """Test environment variable helper functions."""

    def test_get_bool_env_true_values(self, monkeypatch):
        for val in ["true", "1", "yes", "on", "TRUE", "True"]:
            monkeypatch.setenv("TEST_BOOL", val)
            assert _get_bool_env("TEST_BOOL", False) is True

    def test_get_bool_env_false_values(self, monkeypatch):
        for val in ["false", "0", "no", "off", "FALSE", "False"]:
            monkeypatch.setenv("TEST_BOOL", val)
            assert _get_bool_env("TEST_BOOL", True) is False

    def test_get_bool_env_default(self, monkeypatch):
        monkeypatch.delenv("TEST_BOOL", raising=False)
        assert _get_bool_env("TEST_BOOL", True) is True
        assert _get_bool_env("TEST_BOOL", False) is False

    def test_get_int_env_invalid(self, monkeypatch):
        monkeypatch.setenv("TEST_INT", "not_a_number")
        assert _get_int_env("TEST_INT", 99) == 99

    def test_get_float_env(self, monkeypatch):
        monkeypatch.setenv("TEST_FLOAT", "0.65")
        assert _get_float_env("TEST_FLOAT", 0.0) == pytest.approx(0.65)


class TestServerConfig:
    """Test server configuration."""

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("AE_LINGO_HOST", "0.0.0.0")
        monkeypatch.setenv("AE_LINGO_PORT", "8080")
        config = ServerConfig()
        assert config.host == "0.0.0.0"
        assert config.port == 8080


class TestGeminiConfig:
    """Test Gemini API configuration."""

    def test_default_model(self, monkeypatch):
        monkeypatch.delenv("GEMINI_MODEL", raising=False)
        assert GeminiConfig().default_model == "gemini-2.5-flash"

    def test_api_key_read_on_access(self, monkeypatch):
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("API_KEY", raising=False)
        config = GeminiConfig()
        assert config.api_key == ""
        assert not config.has_api_key

        monkeypatch.setenv("API_KEY", "legacy")
        assert config.api_key == "legacy"

        monkeypatch.setenv("GEMINI_API_KEY", "primary")
        assert config.api_key == "primary"

    def test_blank_key_is_not_configured(self, monkeypatch):
        monkeypatch.setenv("GEMINI_API_KEY", "   ")
        assert not GeminiConfig().has_api_key


class TestImageConfig:
    """Test image preprocessing configuration."""

    def test_defaults(self, monkeypatch):
        for key in ("IMAGE_MAX_DIMENSION", "IMAGE_JPEG_QUALITY", "IMAGE_FALLBACK_MIME"):
            monkeypatch.delenv(key, raising=False)
        config = ImageConfig()
        assert config.max_dimension == 1024
        assert config.jpeg_quality == pytest.approx(0.8)
        assert config.fallback_mime_type == "image/png"

    def test_max_upload_bytes(self):
        config = ImageConfig()
        assert config.max_upload_bytes == config.max_upload_mb * 1024 * 1024


class TestAppConfig:
    """Test main application configuration."""

    def test_history_defaults(self, monkeypatch):
        monkeypatch.delenv("HISTORY_MAX_ITEMS", raising=False)
        assert HistoryConfig().max_items == 10

    def test_validation_max_dimension(self):
        with pytest.raises(ValueError, match="max_dimension"):
            config = Config()
            config.image.max_dimension = 0
            config._validate()

    def test_validation_jpeg_quality(self):
        with pytest.raises(ValueError, match="jpeg_quality"):
            config = Config()
            config.image.jpeg_quality = 1.5
            config._validate()

    def test_validation_history_cap(self):
        with pytest.raises(ValueError, match="max_items"):
            config = Config()
            config.history.max_items = 0
            config._validate()
