"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the translation
engine using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation settings class (for testing)

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    fallback_languages = settings.i18n.fallback_languages

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure.i18n import I18nSettings

__all__ = ["Settings", "I18nSettings"]
