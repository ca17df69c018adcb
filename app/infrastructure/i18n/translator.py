"""Translator: resolves a key and its arguments into the final string.

Resolution order for translate("de", "common:greeting", args, options):
    1. (de, common)
    2. (de, each fallback namespace)
    3. for each fallback language fl: (fl, common), then (fl, each fallback namespace)

Within one language and namespace the most specific candidate key wins:
key + context + plural suffix, then key + context, then key + plural suffix,
then key. A key found nowhere renders as itself.

A $t(...) reference to a translation already being expanded further up the
same call (same language, namespace, key, context and count) is left as is.
"""

from collections.abc import Mapping
from typing import Any, Dict, FrozenSet, List, Optional, Tuple

from infrastructure.i18n.backends import TranslationBackend
from infrastructure.i18n.cache import TranslationTreeCache
from infrastructure.i18n.events import MissingKeyEvent, MissingKeyListener, dispatch_missing_key
from infrastructure.i18n.interpolator import Interpolator
from infrastructure.i18n.models import TranslationKey, TranslationOptions
from infrastructure.i18n.plugins import MissingKeyHandler, PostProcessor
from infrastructure.i18n.plurals import DefaultPluralResolver, PluralResolver
from infrastructure.i18n.tree import TranslationTree
from infrastructure.logging import get_module_logger

logger = get_module_logger()

DEBUG_LANGUAGE = "cimode"

# (language, namespace, path, context, count)
NestingFrame = Tuple[str, str, str, Optional[str], Optional[int]]


def nesting_frame(
    language: str, translation_key: TranslationKey, args: Optional[Dict[str, Any]]
) -> NestingFrame:
    """Identify one translate call for recursion detection during nesting."""
    args = args or {}
    context = args.get("context")
    count = args.get("count")
    return (
        language,
        translation_key.namespace,
        translation_key.path,
        context if isinstance(context, str) else None,
        count if isinstance(count, int) and not isinstance(count, bool) else None,
    )


class Translator:
    """Translates keys through a backend, with fallbacks, plurals and nesting.

    The Translator owns its tree cache: every (language, namespace) pair is
    loaded from the backend at most once (barring concurrent first loads) and
    kept for the lifetime of the Translator.

    Attributes:
        backend: Source of translation trees.
        plural_resolver: Computes plural key suffixes.
        interpolator: Expands {{...}} expressions and $t(...) references.
        cache: Loaded translation trees.
        allow_interpolation: Run interpolation on resolved strings.
        allow_nesting: Expand $t(...) references in resolved strings.
        allow_postprocessing: Run post-processors named in "postProcess".
        context_separator: Separator between a key and its context.
        post_processors: Post-processors, in registration order.
        missing_key_listeners: Callables notified of missing keys.
        missing_key_handlers: Async handlers notified of missing keys.
    """

    def __init__(
        self,
        backend: TranslationBackend,
        plural_resolver: Optional[PluralResolver] = None,
        interpolator: Optional[Interpolator] = None,
        allow_interpolation: bool = True,
        allow_nesting: bool = True,
        allow_postprocessing: bool = True,
        context_separator: str = "_",
    ):
        self.backend = backend
        self.plural_resolver = plural_resolver or DefaultPluralResolver()
        self.interpolator = interpolator or Interpolator()
        self.cache = TranslationTreeCache()
        self.allow_interpolation = allow_interpolation
        self.allow_nesting = allow_nesting
        self.allow_postprocessing = allow_postprocessing
        self.context_separator = context_separator
        self.post_processors: List[PostProcessor] = []
        self.missing_key_listeners: List[MissingKeyListener] = []
        self.missing_key_handlers: List[MissingKeyHandler] = []

    async def translate(
        self,
        language: str,
        key: str,
        args: Optional[Dict[str, Any]],
        options: TranslationOptions,
    ) -> str:
        """Translate a key.

        Args:
            language: Requested language (e.g., "en-US"). "cimode" returns
                "namespace:key" without any lookup.
            key: Raw key, optionally prefixed by a namespace ("common:greeting").
            args: Interpolation arguments and the reserved keys count, context,
                replace, interpolate, nest and postProcess.
            options: Default namespace and fallback chains.

        Returns:
            The rendered translation, or the key (without namespace) if no
            translation exists.

        Raises:
            ValueError: If language or key is blank, or options is None.
            NestedArgumentsError: If a $t(...) reference has malformed arguments.
            TranslationBackendError: If the backend fails to load a namespace.
        """
        return await self._translate(language, key, args, options, frozenset())

    async def _translate(
        self,
        language: str,
        key: str,
        args: Optional[Dict[str, Any]],
        options: TranslationOptions,
        in_flight: FrozenSet[NestingFrame],
    ) -> str:
        if not isinstance(language, str) or not language.strip():
            raise ValueError("language cannot be blank.")
        if not isinstance(key, str) or not key.strip():
            raise ValueError("key cannot be blank.")
        if options is None:
            raise ValueError("options cannot be None.")

        translation_key = TranslationKey.from_string(key, options.default_namespace)

        if language.lower() == DEBUG_LANGUAGE:
            return str(translation_key)

        result = await self._resolve(language, translation_key.namespace, translation_key.path, args, options)
        if result is None:
            return translation_key.path

        in_flight = in_flight | {nesting_frame(language, translation_key, args)}
        return await self._extend(result, translation_key.path, language, args, options, in_flight)

    async def load_tree(self, language: str, namespace: str) -> Optional[TranslationTree]:
        """Get the tree of a language and namespace, loading it on first use.

        Raises:
            TranslationBackendError: If the backend fails. Nothing is cached then.
        """
        hit, tree = self.cache.lookup(language, namespace)
        if hit:
            return tree

        logger.debug("tree_cache_miss", language=language, namespace=namespace)
        tree = await self.backend.load_namespace(language, namespace)
        return self.cache.store(language, namespace, tree)

    async def _resolve(
        self,
        language: str,
        namespace: str,
        key: str,
        args: Optional[Dict[str, Any]],
        options: TranslationOptions,
    ) -> Optional[str]:
        result = await self._resolve_in(language, namespace, key, args)
        if result is not None:
            return result

        for fallback_namespace in options.fallback_namespaces:
            result = await self._resolve_in(language, fallback_namespace, key, args)
            if result is not None:
                return result

        for fallback_language in options.fallback_languages:
            result = await self._resolve_in(fallback_language, namespace, key, args)
            if result is not None:
                return result

            for fallback_namespace in options.fallback_namespaces:
                result = await self._resolve_in(fallback_language, fallback_namespace, key, args)
                if result is not None:
                    return result

        return None

    async def _resolve_in(
        self, language: str, namespace: str, key: str, args: Optional[Dict[str, Any]]
    ) -> Optional[str]:
        tree = await self.load_tree(language, namespace)
        if tree is None:
            logger.debug("translation_tree_unavailable", language=language, namespace=namespace)
            return None

        possible_keys = self.candidate_keys(language, key, args)

        for candidate in reversed(possible_keys):
            result = tree.get(candidate, args)
            if result is not None:
                logger.debug(
                    "translation_resolved",
                    language=language,
                    namespace=namespace,
                    key=key,
                    resolved_key=candidate,
                )
                return result

        event = MissingKeyEvent(
            language=language,
            namespace=namespace,
            key=key,
            possible_keys=tuple(possible_keys),
        )
        await dispatch_missing_key(self, event, self.missing_key_listeners, self.missing_key_handlers)
        return None

    def candidate_keys(self, language: str, key: str, args: Optional[Dict[str, Any]]) -> List[str]:
        """Build the candidate keys of a lookup, least specific first.

        Args:
            language: Language used for plural rules.
            key: Key without namespace.
            args: Call arguments; "count" (int) and "context" (str) add candidates.

        Returns:
            Candidate keys in build order; lookups try them in reverse.
        """
        args = args or {}
        count = args.get("count")
        context = args.get("context")

        needs_plural = (
            isinstance(count, int) and not isinstance(count, bool) and self.plural_resolver.needs_plural(language)
        )
        needs_context = isinstance(context, str)

        final_key = key
        possible_keys = [final_key]
        plural_suffix = ""

        if needs_plural:
            plural_suffix = self.plural_resolver.get_plural_suffix(language, count)
            # Plural form without context when the context variant is missing
            if needs_context:
                possible_keys.append(f"{final_key}{plural_suffix}")

        if needs_context:
            final_key = f"{final_key}{self.context_separator}{context}"
            possible_keys.append(final_key)

        if needs_plural:
            final_key = f"{final_key}{plural_suffix}"
            possible_keys.append(final_key)

        return possible_keys

    async def _extend(
        self,
        result: str,
        key: str,
        language: str,
        args: Optional[Dict[str, Any]],
        options: TranslationOptions,
        in_flight: FrozenSet[NestingFrame],
    ) -> str:
        args = args or {}
        replace_args = self._replace_args(args)

        if self.allow_interpolation and args.get("interpolate", True) is True:
            result = self.interpolator.interpolate(result, language, replace_args)

        async def translate_nested(
            nested_language: str, nested_key: str, nested_args: Dict[str, Any]
        ) -> Optional[str]:
            if nested_key.strip():
                nested_translation_key = TranslationKey.from_string(nested_key, options.default_namespace)
                frame = nesting_frame(nested_language, nested_translation_key, nested_args)
                if frame in in_flight:
                    logger.warning(
                        "recursive_nesting_skipped",
                        key=key,
                        nested_key=str(nested_translation_key),
                        language=nested_language,
                    )
                    return None
            return await self._translate(nested_language, nested_key, nested_args, options, in_flight)

        if (
            self.allow_nesting
            and args.get("nest", True) is True
            and self.interpolator.can_nest(result)
        ):
            result = await self.interpolator.nest(result, language, replace_args, translate_nested)

        if self.allow_postprocessing and self.post_processors:
            result = self._post_process(result, key, language, args)

        return result

    @staticmethod
    def _replace_args(args: Dict[str, Any]) -> Dict[str, Any]:
        replace = args.get("replace")
        if isinstance(replace, Mapping):
            return dict(replace)
        if replace is not None and hasattr(replace, "__dict__"):
            return vars(replace)
        return args

    @staticmethod
    def _post_processor_keys(args: Dict[str, Any]) -> List[str]:
        keys = args.get("postProcess")
        if isinstance(keys, str):
            return [part.strip() for part in keys.split(",")]
        if isinstance(keys, (list, tuple)):
            return [part for part in keys if isinstance(part, str)]
        return []

    def _post_process(self, result: str, key: str, language: str, args: Dict[str, Any]) -> str:
        for name in self._post_processor_keys(args):
            if not name.strip():
                continue
            for post_processor in self.post_processors:
                if post_processor.keyword == name:
                    result = post_processor.process(key, result, args, language, self)
        return result
