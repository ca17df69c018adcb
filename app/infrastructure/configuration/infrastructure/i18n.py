"""Translation engine infrastructure settings."""

import json
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import NoDecode

from infrastructure.configuration.base import InfrastructureSettings


class I18nSettings(InfrastructureSettings):
    """Translation resolution configuration.

    Controls the default language and namespace, the fallback chains, the
    key separators and the pipeline switches used by the Translator.

    Environment Variables:
        I18N_DEFAULT_LANGUAGE: Language used when the caller does not pass one (default: en)
        I18N_DEFAULT_NAMESPACE: Namespace used for keys without an "ns:" prefix (default: translation)
        I18N_FALLBACK_LANGUAGES: Ordered fallback languages, JSON list or comma separated
        I18N_FALLBACK_NAMESPACES: Ordered fallback namespaces, JSON list or comma separated
        I18N_LOCALES_DIR: Root directory of the YAML backend (default: locales)
        I18N_CONTEXT_SEPARATOR: Separator between a key and its context (default: _)
        I18N_PLURAL_SEPARATOR: Separator between a key and its plural suffix (default: _)
        I18N_JSON_FORMAT: Plural suffix compatibility version 1-4 (default: 3)
        I18N_SIMPLE_PLURAL_SUFFIX: Use "" / "plural" suffixes for two-form languages (default: True)
        I18N_FORMAT_SEPARATOR: Separator between a value and its format in {{value, format}}
        I18N_MAX_REPLACES: Upper bound on interpolation substitutions per string (default: 1000)
        I18N_ALLOW_INTERPOLATION: Enable {{...}} interpolation (default: True)
        I18N_ALLOW_NESTING: Enable $t(...) nesting (default: True)
        I18N_ALLOW_POSTPROCESSING: Enable post-processors (default: True)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        language = settings.i18n.default_language
        fallbacks = settings.i18n.fallback_languages
        ```
    """

    default_language: str = Field(
        default="en",
        alias="I18N_DEFAULT_LANGUAGE",
        description="Language used when no language is requested",
    )
    default_namespace: str = Field(
        default="translation",
        alias="I18N_DEFAULT_NAMESPACE",
        description="Namespace used for keys without a namespace prefix",
    )
    fallback_languages: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="I18N_FALLBACK_LANGUAGES",
        description="Languages tried in order when the requested one has no value",
    )
    fallback_namespaces: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        alias="I18N_FALLBACK_NAMESPACES",
        description="Namespaces tried in order when the requested one has no value",
    )
    locales_dir: str = Field(
        default="locales",
        alias="I18N_LOCALES_DIR",
        description="Root directory of <language>/<namespace>.yaml files",
    )
    context_separator: str = Field(
        default="_",
        alias="I18N_CONTEXT_SEPARATOR",
        description="Separator between a key and its context value",
    )
    plural_separator: str = Field(
        default="_",
        alias="I18N_PLURAL_SEPARATOR",
        description="Separator between a key and its plural suffix",
    )
    json_format: int = Field(
        default=3,
        alias="I18N_JSON_FORMAT",
        description="Plural suffix compatibility version (1, 2, 3 or 4)",
    )
    simple_plural_suffix: bool = Field(
        default=True,
        alias="I18N_SIMPLE_PLURAL_SUFFIX",
        description="Use '' and 'plural' suffixes for two-form languages",
    )
    format_separator: str = Field(
        default=",",
        alias="I18N_FORMAT_SEPARATOR",
        description="Separator between a value and its format specification",
    )
    max_replaces: int = Field(
        default=1000,
        alias="I18N_MAX_REPLACES",
        description="Maximum number of interpolation substitutions per string",
    )
    allow_interpolation: bool = Field(default=True, alias="I18N_ALLOW_INTERPOLATION")
    allow_nesting: bool = Field(default=True, alias="I18N_ALLOW_NESTING")
    allow_postprocessing: bool = Field(default=True, alias="I18N_ALLOW_POSTPROCESSING")

    @field_validator("fallback_languages", "fallback_namespaces", mode="before")
    @classmethod
    def split_list(cls, v: Any) -> Any:
        """Accept JSON lists as well as comma separated strings."""
        if v is None:
            return []
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return []
            if stripped.startswith("["):
                return json.loads(stripped)
            return [part.strip() for part in stripped.split(",") if part.strip()]
        return v

    @field_validator("default_namespace", "default_language")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject blank language and namespace defaults."""
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("json_format")
    @classmethod
    def known_json_format(cls, v: int) -> int:
        """Only the four known compatibility versions are accepted."""
        if v not in (1, 2, 3, 4):
            raise ValueError(f"Unsupported json format version: {v}")
        return v
