"""Translation facade.

Binds a Translator to a current language and a set of TranslationOptions so
callers only pass keys and arguments.
"""

import asyncio
from typing import Any, Dict, Optional, Sequence

from infrastructure.i18n.backends import TranslationBackend
from infrastructure.i18n.models import TranslationOptions
from infrastructure.i18n.translator import Translator


class I18NextService:
    """Class-based translation service.

    This is a thin facade - all actual work is delegated to the underlying
    Translator instance.

    Usage:
        service = create_service()
        service.language = "de"

        # Synchronous code
        title = service.t("common:title")

        # Inside a coroutine
        title = await service.t_async("items", {"count": 3})

    Attributes:
        language: Language used when a call does not pass one.
        options: Namespace and fallback configuration of every call.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        translator: Optional[Translator] = None,
        default_language: str = "en",
        default_namespace: str = "translation",
        fallback_languages: Sequence[str] = (),
        fallback_namespaces: Sequence[str] = (),
    ):
        """Initialize translation service.

        Args:
            backend: Translation source of the default Translator.
            translator: Translator doing the resolution (default: Translator on backend).
            default_language: Initial value of language.
            default_namespace: Namespace of keys without an "ns:" prefix.
            fallback_languages: Languages tried in order when a lookup misses.
            fallback_namespaces: Namespaces tried in order when a lookup misses.

        Raises:
            ValueError: If default_namespace is blank.
        """
        self._translator = translator or Translator(backend)
        self.language = default_language
        self.options = TranslationOptions(
            default_namespace=default_namespace,
            fallback_languages=tuple(fallback_languages),
            fallback_namespaces=tuple(fallback_namespaces),
        )

    async def t_async(
        self,
        key: str,
        args: Optional[Dict[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Translate a key in the current (or given) language.

        Args:
            key: Raw key, optionally namespaced ("common:title").
            args: Interpolation arguments.
            language: Overrides the current language for this call.

        Returns:
            Translated string, or the key if no translation exists.
        """
        return await self._translator.translate(language or self.language, key, args, self.options)

    def t(
        self,
        key: str,
        args: Optional[Dict[str, Any]] = None,
        language: Optional[str] = None,
    ) -> str:
        """Synchronous variant of t_async.

        Raises:
            RuntimeError: If called from a running event loop; use t_async there.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.t_async(key, args, language))
        raise RuntimeError("I18NextService.t() cannot run inside an event loop, await t_async() instead.")

    @property
    def translator(self) -> Translator:
        """Access underlying Translator instance.

        Provided for registering post-processors and missing-key handlers.

        Returns:
            The underlying Translator instance
        """
        return self._translator
