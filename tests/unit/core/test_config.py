"""Unit tests for mlang.core.config module."""

import pytest
from pydantic import ValidationError

from mlang.core.config import (
    DEFAULT_ASSETS_BASE_URL,
    MLangSettings,
    Settings,
    get_settings,
)


@pytest.mark.unit
class TestMLangSettings:
    """Test suite for MLangSettings configuration."""

    def test_defaults(self, monkeypatch):
        for name in (
            "MLANG_DATA_DIR",
            "MLANG_DEFAULT_LANGUAGE",
            "MLANG_DEFAULT_VERSION",
            "MLANG_ASSETS_BASE_URL",
        ):
            monkeypatch.delenv(name, raising=False)

        config = MLangSettings()

        assert config.data_dir == "./data"
        assert config.languages_subdir == "languages"
        assert config.default_language == "en_us"
        assert config.default_version == "1.20.4"
        assert config.assets_base_url == DEFAULT_ASSETS_BASE_URL
        assert config.connect_timeout_seconds == 10
        assert config.read_timeout_seconds == 30
        assert config.load_timeout_seconds == 60
        assert config.download_chunk_size == 8192
        assert config.executor_max_workers == 4

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("MLANG_DATA_DIR", "/srv/plugin")
        monkeypatch.setenv("MLANG_DEFAULT_LANGUAGE", "RU_RU")
        monkeypatch.setenv("MLANG_DEFAULT_VERSION", "1.19.4")
        monkeypatch.setenv("MLANG_ASSETS_BASE_URL", "https://mirror.example.com/")
        monkeypatch.setenv("MLANG_LOAD_TIMEOUT_SECONDS", "2.5")

        config = MLangSettings()

        assert config.data_dir == "/srv/plugin"
        assert config.default_language == "ru_ru"
        assert config.default_version == "1.19.4"
        assert config.assets_base_url == "https://mirror.example.com"
        assert config.load_timeout_seconds == 2.5

    @pytest.mark.parametrize(
        "name",
        [
            "MLANG_CONNECT_TIMEOUT_SECONDS",
            "MLANG_READ_TIMEOUT_SECONDS",
            "MLANG_LOAD_TIMEOUT_SECONDS",
            "MLANG_DOWNLOAD_CHUNK_SIZE",
            "MLANG_EXECUTOR_MAX_WORKERS",
        ],
    )
    def test_rejects_non_positive_values(self, monkeypatch, name):
        monkeypatch.setenv(name, "0")
        with pytest.raises(ValidationError):
            MLangSettings()

    def test_rejects_blank_default_language(self, monkeypatch):
        monkeypatch.setenv("MLANG_DEFAULT_LANGUAGE", "  ")
        with pytest.raises(ValidationError):
            MLangSettings()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_instantiates_subsettings(self):
        settings = Settings()
        assert isinstance(settings.mlang, MLangSettings)

    def test_accepts_subsettings_override(self):
        mlang = MLangSettings(MLANG_DEFAULT_LANGUAGE="de_de")
        settings = Settings(mlang=mlang)
        assert settings.mlang.default_language == "de_de"

    def test_is_production(self, monkeypatch):
        monkeypatch.setenv("PREFIX", "")
        assert Settings().is_production is True

        monkeypatch.setenv("PREFIX", "dev-")
        assert Settings().is_production is False

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()
