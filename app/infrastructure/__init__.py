"""Infrastructure modules of the translation engine.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: Translation resolution engine
- services: Application-scoped providers (get_settings, get_translation_service)
"""
