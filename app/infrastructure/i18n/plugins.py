"""Plugin interfaces of the Translator.

Plugins are plain objects implementing one of these interfaces, registered
as ordered lists on the Translator and invoked in registration order.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from infrastructure.i18n.events import MissingKeyEvent
    from infrastructure.i18n.translator import Translator


class PostProcessor(ABC):
    """Transforms a translated string after interpolation and nesting.

    Selected per call by listing its keyword in the "postProcess" argument.

    Example:
        class UpperCase(PostProcessor):
            keyword = "upper"

            def process(self, key, result, args, language, translator):
                return result.upper()

        await translator.translate("en", "greeting", {"postProcess": "upper"})
    """

    keyword: str = ""

    @abstractmethod
    def process(
        self,
        key: str,
        result: str,
        args: Dict[str, Any],
        language: str,
        translator: "Translator",
    ) -> str:
        """Transform result.

        Args:
            key: Key being translated, without namespace.
            result: Translation produced so far.
            args: Arguments of the translate call.
            language: Requested language.
            translator: Translator running the call.

        Returns:
            Transformed translation.
        """
        pass


class MissingKeyHandler(ABC):
    """Reacts to keys that resolve in no candidate form.

    Example:
        class SeedBackend(MissingKeyHandler):
            async def handle_missing_key(self, translator, event):
                translator.backend.add_translation(
                    event.language, event.namespace, event.key, event.key
                )
    """

    @abstractmethod
    async def handle_missing_key(self, translator: "Translator", event: "MissingKeyEvent") -> Any:
        """Handle a missing key.

        Args:
            translator: Translator that missed the key.
            event: The missing key and its candidate keys.

        Returns:
            Anything. The return value does not affect the translation.
        """
        pass
