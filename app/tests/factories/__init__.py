"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_backend,
    make_missing_key_event,
    make_translation_options,
    make_translator,
)

__all__ = [
    "make_backend",
    "make_missing_key_event",
    "make_translation_options",
    "make_translator",
]
