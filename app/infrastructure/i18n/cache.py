"""Cache of resolved translation trees.

One cache belongs to one Translator and lives as long as it does. Entries
are never invalidated or evicted.
"""

from typing import Dict, Optional, Tuple

from infrastructure.i18n.tree import TranslationTree

_MISSING = object()


class TranslationTreeCache:
    """Maps "language.namespace" to a TranslationTree or None.

    None is a valid cached value: the backend has no data for the pair.
    Concurrent writers may both load the same pair; the first stored value
    wins and later stores return it (insert-if-absent through dict.setdefault,
    which is atomic for a plain dict).
    """

    def __init__(self):
        self._trees: Dict[str, Optional[TranslationTree]] = {}

    @staticmethod
    def cache_key(language: str, namespace: str) -> str:
        """Build the cache key of a language and namespace."""
        return f"{language}.{namespace}"

    def lookup(self, language: str, namespace: str) -> Tuple[bool, Optional[TranslationTree]]:
        """Look up a cached tree.

        Returns:
            (hit, tree) where hit is False when the pair was never stored.
        """
        tree = self._trees.get(self.cache_key(language, namespace), _MISSING)
        if tree is _MISSING:
            return False, None
        return True, tree

    def store(
        self, language: str, namespace: str, tree: Optional[TranslationTree]
    ) -> Optional[TranslationTree]:
        """Store a tree unless one is already cached.

        Returns:
            The tree held by the cache after the call.
        """
        return self._trees.setdefault(self.cache_key(language, namespace), tree)

    def __contains__(self, cache_key: object) -> bool:
        return cache_key in self._trees

    def __len__(self) -> int:
        return len(self._trees)
