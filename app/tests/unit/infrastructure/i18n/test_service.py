"""Tests for infrastructure.i18n.service and factory modules."""

# pylint: disable=protected-access

from pathlib import Path

import pytest

from infrastructure.configuration import I18nSettings
from infrastructure.i18n import (
    DateTokenFormatter,
    DefaultPluralResolver,
    I18NextService,
    InMemoryBackend,
    JsonFormat,
    Translator,
    YAMLFileBackend,
    create_service,
    create_translator,
)
from infrastructure.services.providers import get_translation_service

pytestmark = pytest.mark.unit


class TestI18NextService:
    """Tests for the I18NextService facade."""

    @pytest.fixture
    def service(self, backend):
        """Service on the in-memory backend with an en fallback."""
        return I18NextService(backend, fallback_languages=["en"])

    def test_defaults(self, backend):
        """The facade starts in the default language and namespace."""
        service = I18NextService(backend)
        assert service.language == "en"
        assert service.options.default_namespace == "translation"
        assert isinstance(service.translator, Translator)
        assert service.translator.backend is backend

    def test_blank_namespace_raises(self, backend):
        """A blank default namespace is rejected."""
        with pytest.raises(ValueError):
            I18NextService(backend, default_namespace=" ")

    def test_t(self, service):
        """t translates synchronously in the current language."""
        assert service.t("greeting", {"name": "Ada"}) == "Hello Ada"

    def test_language_switch(self, service):
        """Changing language changes subsequent translations."""
        service.language = "de"
        assert service.t("greeting", {"name": "Ada"}) == "Hallo Ada"
        assert service.t("errors.not_found") == "Not found"

    def test_language_override(self, service):
        """A per-call language overrides the current one."""
        assert service.t("greeting", {"name": "Ada"}, language="de") == "Hallo Ada"
        assert service.language == "en"

    @pytest.mark.asyncio
    async def test_t_async(self, service):
        """t_async translates inside a running loop."""
        assert await service.t_async("common:ok") == "OK"

    @pytest.mark.asyncio
    async def test_t_inside_event_loop_raises(self, service):
        """t refuses to run inside an event loop."""
        with pytest.raises(RuntimeError, match="t_async"):
            service.t("greeting")

    def test_explicit_translator(self, backend, translator):
        """A given translator is used as is."""
        service = I18NextService(backend, translator=translator)
        assert service.translator is translator


class TestFactory:
    """Tests for create_translator and create_service."""

    @pytest.fixture
    def settings(self, clean_i18n_env, locales_dir):
        """Settings pointing at the YAML fixtures."""
        clean_i18n_env.setenv("I18N_LOCALES_DIR", str(locales_dir))
        clean_i18n_env.setenv("I18N_FALLBACK_LANGUAGES", "en")
        return I18nSettings()

    def test_create_translator_defaults(self, settings):
        """The default translator reads YAML files with v3 plurals."""
        translator = create_translator(settings=settings)

        assert isinstance(translator.backend, YAMLFileBackend)
        assert translator.backend.base_path == Path(settings.locales_dir)
        assert isinstance(translator.plural_resolver, DefaultPluralResolver)
        assert translator.plural_resolver.json_format == JsonFormat.V3
        assert any(isinstance(f, DateTokenFormatter) for f in translator.interpolator.formatters)

    def test_create_translator_from_settings(self, clean_i18n_env):
        """Settings drive separators, limits and switches."""
        clean_i18n_env.setenv("I18N_JSON_FORMAT", "4")
        clean_i18n_env.setenv("I18N_MAX_REPLACES", "5")
        clean_i18n_env.setenv("I18N_CONTEXT_SEPARATOR", "#")
        clean_i18n_env.setenv("I18N_ALLOW_NESTING", "false")
        backend = InMemoryBackend()

        translator = create_translator(backend=backend, settings=I18nSettings())

        assert translator.backend is backend
        assert translator.plural_resolver.json_format == JsonFormat.V4
        assert translator.interpolator.maximum_replaces == 5
        assert translator.context_separator == "#"
        assert translator.allow_nesting is False

    def test_create_service(self, settings):
        """The service is bound to the settings' language and fallbacks."""
        service = create_service(settings=settings)

        assert service.language == "en"
        assert service.options.fallback_languages == ("en",)
        assert service.t("greeting", {"name": "Ada"}, language="fr") == "Bonjour Ada"
        assert service.t("errors.not_found", language="fr") == "Not found"

    def test_get_translation_service_is_singleton(self, clean_i18n_env, locales_dir):
        """The provider returns one service per process."""
        clean_i18n_env.setenv("I18N_LOCALES_DIR", str(locales_dir))

        service = get_translation_service()

        assert service is get_translation_service()
        assert service.t("common:ok") == "OK"
