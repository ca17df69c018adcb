"""
Dependency injection services.

Provides the provider functions of the application-scoped singletons.
"""

from infrastructure.services.providers import (
    get_settings,
    get_translation_service,
)

__all__ = [
    "get_settings",
    "get_translation_service",
]
