"""Translation tree: the immutable key -> string store of one language and namespace."""

from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from infrastructure.logging import get_module_logger

logger = get_module_logger()

PATH_SEPARATOR = "."


class TranslationTree:
    """Read-only mapping from dotted path to translated string.

    Built once from backend data and never mutated afterwards. A missing path
    yields None and never raises.

    Example:
        tree = TranslationTree.from_mapping({"errors": {"not_found": "Not found"}})
        tree.get("errors.not_found")  # "Not found"
        tree.get("errors.missing")    # None
    """

    def __init__(self, translations: Optional[Mapping[str, str]] = None):
        self._translations = MappingProxyType(dict(translations or {}))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "TranslationTree":
        """Flatten a nested mapping into a tree.

        Args:
            data: Nested mapping as produced by a backend parser.

        Returns:
            TranslationTree with one entry per string leaf.
        """
        builder = TranslationTreeBuilder()
        builder.add_mapping(data)
        return builder.build()

    def get(self, path: str, args: Optional[Dict[str, Any]] = None) -> Optional[str]:
        """Look up the value stored at a dotted path.

        Args:
            path: Dotted key path (e.g., "errors.not_found").
            args: Call arguments. Unused by the default tree, available to subclasses.

        Returns:
            The translated string, or None if no leaf exists at path.
        """
        return self._translations.get(path)

    def __contains__(self, path: object) -> bool:
        return path in self._translations

    def __iter__(self) -> Iterator[str]:
        return iter(self._translations)

    def __len__(self) -> int:
        return len(self._translations)

    def as_dict(self) -> Dict[str, str]:
        """Return a copy of the flattened translations."""
        return dict(self._translations)


class TranslationTreeBuilder:
    """Collects translations and builds an immutable TranslationTree."""

    def __init__(self):
        self._translations: Dict[str, str] = {}

    def add_translation(self, path: str, value: str) -> "TranslationTreeBuilder":
        """Register a single translation at a dotted path."""
        self._translations[path] = value
        return self

    def add_mapping(self, data: Mapping[str, Any], prefix: str = "") -> "TranslationTreeBuilder":
        """Flatten a nested mapping under prefix.

        Nested mappings recurse, string leaves register, other leaf types
        (numbers, lists, None) are dropped.

        Args:
            data: Nested mapping.
            prefix: Dotted path the mapping is mounted at.

        Returns:
            The builder, for chaining.
        """
        for key, value in data.items():
            path = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)
            if isinstance(value, Mapping):
                self.add_mapping(value, path)
            elif isinstance(value, str):
                self._translations[path] = value
            else:
                logger.debug(
                    "dropped_non_string_leaf",
                    path=path,
                    value_type=type(value).__name__,
                )
        return self

    def build(self) -> TranslationTree:
        """Freeze the collected translations into a TranslationTree."""
        return TranslationTree(self._translations)
