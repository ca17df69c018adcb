"""Factory functions for creating i18n components.

Provides convenience functions for wiring a Translator and its facade from
the application's I18nSettings.
"""

from typing import Optional

from infrastructure.configuration import I18nSettings
from infrastructure.i18n.backends import TranslationBackend, YAMLFileBackend
from infrastructure.i18n.date_formatter import DateTokenFormatter
from infrastructure.i18n.interpolator import Interpolator
from infrastructure.i18n.models import JsonFormat
from infrastructure.i18n.plurals import DefaultPluralResolver
from infrastructure.i18n.service import I18NextService
from infrastructure.i18n.translator import Translator
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def create_translator(
    backend: Optional[TranslationBackend] = None,
    settings: Optional[I18nSettings] = None,
) -> Translator:
    """Create and configure a Translator instance.

    The Translator gets a DefaultPluralResolver, an Interpolator with the
    DateTokenFormatter registered, and the pipeline switches of settings.

    Args:
        backend: Translation source (default: YAMLFileBackend on settings.locales_dir)
        settings: Translation settings (default: loaded from the environment)

    Returns:
        Translator: Configured translator instance

    Usage:
        # Use defaults (YAML files under $I18N_LOCALES_DIR)
        translator = create_translator()

        # Custom backend
        backend = InMemoryBackend().add_translation("en", "translation", "hello", "Hello")
        translator = create_translator(backend=backend)
    """
    settings = settings or I18nSettings()
    backend = backend or YAMLFileBackend(settings.locales_dir)

    plural_resolver = DefaultPluralResolver(
        json_format=JsonFormat(settings.json_format),
        plural_separator=settings.plural_separator,
        use_simple_plural_suffix=settings.simple_plural_suffix,
    )
    interpolator = Interpolator(
        formatters=[DateTokenFormatter()],
        format_separator=settings.format_separator,
        maximum_replaces=settings.max_replaces,
    )
    translator = Translator(
        backend=backend,
        plural_resolver=plural_resolver,
        interpolator=interpolator,
        allow_interpolation=settings.allow_interpolation,
        allow_nesting=settings.allow_nesting,
        allow_postprocessing=settings.allow_postprocessing,
        context_separator=settings.context_separator,
    )

    logger.info(
        "translator_created",
        backend=type(backend).__name__,
        json_format=settings.json_format,
    )
    return translator


def create_service(
    backend: Optional[TranslationBackend] = None,
    settings: Optional[I18nSettings] = None,
) -> I18NextService:
    """Create a translation facade configured from settings.

    Args:
        backend: Translation source (default: YAMLFileBackend on settings.locales_dir)
        settings: Translation settings (default: loaded from the environment)

    Returns:
        I18NextService: Facade bound to the default language and namespace
    """
    settings = settings or I18nSettings()
    translator = create_translator(backend=backend, settings=settings)

    return I18NextService(
        backend=translator.backend,
        translator=translator,
        default_language=settings.default_language,
        default_namespace=settings.default_namespace,
        fallback_languages=settings.fallback_languages,
        fallback_namespaces=settings.fallback_namespaces,
    )
