"""Translation engine configuration settings - main aggregator."""

from pydantic_settings import BaseSettings, SettingsConfigDict

# Infrastructure settings
from infrastructure.configuration.infrastructure import I18nSettings


class Settings(BaseSettings):
    """Translation engine configuration settings - main aggregator.

    Aggregates all domain-specific settings into a single configuration object.

    Environment Variables:
        ENVIRONMENT: Deployment environment name (default: development)
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        # Access translation settings
        namespace = settings.i18n.default_namespace

        # Check environment
        if settings.is_production:
            # Production-specific logic...
        ```
    """

    # Application-level settings
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # Infrastructure settings
    i18n: I18nSettings

    @property
    def is_production(self) -> bool:
        """Check if the application is running in production.

        Returns:
            True if ENVIRONMENT is "production", False otherwise.
        """
        return self.ENVIRONMENT.lower() == "production"

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
