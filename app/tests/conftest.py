"""Global test fixtures.

Application-scoped providers are lru_cache singletons; they are reset around
every test so environment overrides made with monkeypatch take effect.
"""

import pytest

from infrastructure.services.providers import get_settings, get_translation_service


@pytest.fixture(autouse=True)
def reset_providers():
    """Clear the cached settings and translation service."""
    get_settings.cache_clear()
    get_translation_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_translation_service.cache_clear()


@pytest.fixture
def clean_i18n_env(monkeypatch):
    """Remove I18N_* variables inherited from the environment."""
    for name in (
        "I18N_DEFAULT_LANGUAGE",
        "I18N_DEFAULT_NAMESPACE",
        "I18N_FALLBACK_LANGUAGES",
        "I18N_FALLBACK_NAMESPACES",
        "I18N_LOCALES_DIR",
        "I18N_JSON_FORMAT",
        "I18N_MAX_REPLACES",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
