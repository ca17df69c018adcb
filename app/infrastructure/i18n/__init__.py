"""i18n system - translation resolution engine.

Resolves namespaced keys to localized strings with fallback chains,
plural and context suffixes, {{...}} interpolation and $t(...) nesting.

Main components:
- models: TranslationKey, TranslationOptions, PluralCategory, JsonFormat
- tree: TranslationTree and TranslationTreeBuilder
- backends: TranslationBackend, InMemoryBackend and YAMLFileBackend
- plurals: PluralResolver and DefaultPluralResolver
- interpolator: Interpolator with pluggable formatters
- date_formatter: DateTokenFormatter for Moment.js style date patterns
- translator: Translator service running the resolution pipeline
- service: I18NextService facade bound to a current language
"""

from infrastructure.i18n.backends import InMemoryBackend, TranslationBackend, YAMLFileBackend
from infrastructure.i18n.cache import TranslationTreeCache
from infrastructure.i18n.date_formatter import DateTokenFormatter
from infrastructure.i18n.events import MissingKeyEvent
from infrastructure.i18n.exceptions import NestedArgumentsError, TranslationBackendError, TranslationError
from infrastructure.i18n.factory import create_service, create_translator
from infrastructure.i18n.formatters import DefaultFormatter, Formatter
from infrastructure.i18n.interpolator import Interpolator
from infrastructure.i18n.models import (
    JsonFormat,
    PluralCategory,
    TranslationKey,
    TranslationOptions,
)
from infrastructure.i18n.plugins import MissingKeyHandler, PostProcessor
from infrastructure.i18n.plurals import DefaultPluralResolver, PluralResolver
from infrastructure.i18n.service import I18NextService
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.tree import TranslationTree, TranslationTreeBuilder

__all__ = [
    "TranslationKey",
    "TranslationOptions",
    "PluralCategory",
    "JsonFormat",
    "TranslationTree",
    "TranslationTreeBuilder",
    "TranslationTreeCache",
    "TranslationBackend",
    "InMemoryBackend",
    "YAMLFileBackend",
    "PluralResolver",
    "DefaultPluralResolver",
    "Formatter",
    "DefaultFormatter",
    "DateTokenFormatter",
    "Interpolator",
    "PostProcessor",
    "MissingKeyHandler",
    "MissingKeyEvent",
    "Translator",
    "I18NextService",
    "create_translator",
    "create_service",
    "TranslationError",
    "TranslationBackendError",
    "NestedArgumentsError",
]
