"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure services.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from infrastructure.i18n import I18NextService, create_service


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    This is the single source of truth for settings across the entire application.
    The @lru_cache decorator ensures only ONE instance is created per process.

    Usage:
        from infrastructure.services.providers import get_settings
        settings = get_settings()

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_translation_service() -> I18NextService:
    """
    Get application-scoped translation service singleton.

    The service reads YAML translations from I18N_LOCALES_DIR and keeps every
    loaded namespace for the lifetime of the process.

    Returns:
        I18NextService: Cached translation facade configured from settings.i18n.

    Usage:
        service = get_translation_service()
        service.t("common:welcome", {"name": "Ada"})
    """
    settings = get_settings()
    return create_service(settings=settings.i18n)
