"""
Tests for settings and logging configuration
"""

import logging

import pytest

from bitmapkit.config import Settings, configure_logging, get_settings, load_settings
from bitmapkit.core.enums import BlurPrecision, SepiaMode
from bitmapkit.core.exceptions import ConfigurationError


class TestLoadSettings:
    """Test reading settings from environment variables"""

    def test_defaults(self):
        settings = load_settings({})

        assert settings.environment == "production"
        assert settings.system.log_level == "INFO"
        assert settings.codec.default_quality == 100
        assert settings.filters.sepia_mode is SepiaMode.CHAINED
        assert settings.blur.precision is BlurPrecision.EXACT

    def test_overrides(self):
        settings = load_settings(
            {
                "BITMAPKIT_ENVIRONMENT": "development",
                "BITMAPKIT_LOG_LEVEL": "debug",
                "BITMAPKIT_JPEG_QUALITY": "80",
                "BITMAPKIT_SEPIA_MODE": "Standard",
                "BITMAPKIT_BLUR_PRECISION": "FIXED_POINT",
            }
        )

        assert settings.environment == "development"
        assert settings.system.log_level == "DEBUG"
        assert settings.codec.default_quality == 80
        assert settings.filters.sepia_mode is SepiaMode.STANDARD
        assert settings.blur.precision is BlurPrecision.FIXED_POINT

    def test_unrelated_variables_ignored(self):
        settings = load_settings({"JPEG_QUALITY": "5", "BITMAPKIT_OTHER": "x"})
        assert settings.codec.default_quality == 100

    @pytest.mark.parametrize(
        "name,value",
        [
            ("BITMAPKIT_LOG_LEVEL", "verbose"),
            ("BITMAPKIT_JPEG_QUALITY", "101"),
            ("BITMAPKIT_JPEG_QUALITY", "high"),
            ("BITMAPKIT_SEPIA_MODE", "vintage"),
            ("BITMAPKIT_BLUR_PRECISION", "approximate"),
        ],
    )
    def test_invalid_values(self, name, value):
        with pytest.raises(ConfigurationError):
            load_settings({name: value})

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("BITMAPKIT_JPEG_QUALITY", "42")
        assert load_settings().codec.default_quality == 42

    def test_get_settings_is_cached(self):
        assert get_settings() is get_settings()


class TestConfigureLogging:
    """Test logging setup"""

    def test_sets_root_level(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

        settings = Settings(system={"log_level": "warning"})
        configure_logging(settings)

        assert calls == [{"level": logging.WARNING, "format": settings.system.log_format}]
