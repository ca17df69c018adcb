"""Unit tests for infrastructure.configuration module.

Tests cover:
- I18nSettings defaults, environment parsing and validation
- Settings class initialization
- get_settings provider singleton
"""

import pytest
from pydantic import ValidationError

from infrastructure.configuration import I18nSettings, Settings
from infrastructure.services.providers import get_settings


@pytest.mark.unit
class TestI18nSettings:
    """Test suite for I18nSettings configuration."""

    def test_defaults(self, clean_i18n_env):
        """I18nSettings uses correct default values."""
        settings = I18nSettings()

        assert settings.default_language == "en"
        assert settings.default_namespace == "translation"
        assert settings.fallback_languages == []
        assert settings.fallback_namespaces == []
        assert settings.locales_dir == "locales"
        assert settings.context_separator == "_"
        assert settings.plural_separator == "_"
        assert settings.json_format == 3
        assert settings.simple_plural_suffix is True
        assert settings.format_separator == ","
        assert settings.max_replaces == 1000
        assert settings.allow_interpolation is True
        assert settings.allow_nesting is True
        assert settings.allow_postprocessing is True

    def test_custom_values(self, clean_i18n_env):
        """I18nSettings reads its aliased environment variables."""
        clean_i18n_env.setenv("I18N_DEFAULT_LANGUAGE", "fr")
        clean_i18n_env.setenv("I18N_DEFAULT_NAMESPACE", "common")
        clean_i18n_env.setenv("I18N_JSON_FORMAT", "4")
        clean_i18n_env.setenv("I18N_MAX_REPLACES", "10")

        settings = I18nSettings()

        assert settings.default_language == "fr"
        assert settings.default_namespace == "common"
        assert settings.json_format == 4
        assert settings.max_replaces == 10

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("en", ["en"]),
            ("en, fr ,de", ["en", "fr", "de"]),
            ('["en", "fr"]', ["en", "fr"]),
            ("", []),
        ],
    )
    def test_fallback_lists(self, clean_i18n_env, raw, expected):
        """Fallback lists accept comma separated and JSON values."""
        clean_i18n_env.setenv("I18N_FALLBACK_LANGUAGES", raw)
        clean_i18n_env.setenv("I18N_FALLBACK_NAMESPACES", raw)

        settings = I18nSettings()

        assert settings.fallback_languages == expected
        assert settings.fallback_namespaces == expected

    @pytest.mark.parametrize("value", ["0", "5"])
    def test_unknown_json_format_rejected(self, clean_i18n_env, value):
        """Only json formats 1 to 4 are accepted."""
        clean_i18n_env.setenv("I18N_JSON_FORMAT", value)
        with pytest.raises(ValidationError):
            I18nSettings()

    @pytest.mark.parametrize("name", ["I18N_DEFAULT_NAMESPACE", "I18N_DEFAULT_LANGUAGE"])
    def test_blank_defaults_rejected(self, clean_i18n_env, name):
        """Blank default language and namespace are rejected."""
        clean_i18n_env.setenv(name, "  ")
        with pytest.raises(ValidationError):
            I18nSettings()


@pytest.mark.unit
class TestSettings:
    """Test suite for the Settings aggregator."""

    def test_settings_instantiates_sections(self, clean_i18n_env):
        """Settings creates the i18n section automatically."""
        settings = Settings()
        assert isinstance(settings.i18n, I18nSettings)

    def test_settings_accepts_section_override(self):
        """A section passed explicitly is used as is."""
        i18n = I18nSettings(I18N_DEFAULT_LANGUAGE="de")
        settings = Settings(i18n=i18n)
        assert settings.i18n.default_language == "de"

    @pytest.mark.parametrize(
        "environment,expected",
        [("production", True), ("PRODUCTION", True), ("development", False)],
    )
    def test_is_production(self, monkeypatch, environment, expected):
        """is_production reflects ENVIRONMENT."""
        monkeypatch.setenv("ENVIRONMENT", environment)
        assert Settings().is_production is expected

    def test_get_settings_singleton(self):
        """get_settings returns the same instance."""
        assert get_settings() is get_settings()
