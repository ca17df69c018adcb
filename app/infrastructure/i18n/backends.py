"""Translation backends.

A backend supplies the translation tree of one language and namespace, or
None when it has no data for the pair.
"""

import asyncio
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from infrastructure.i18n.exceptions import TranslationBackendError
from infrastructure.i18n.models import language_part
from infrastructure.i18n.tree import PATH_SEPARATOR, TranslationTree
from infrastructure.logging import get_module_logger

logger = get_module_logger()

YAML_SUFFIXES = (".yaml", ".yml")


class TranslationBackend(ABC):
    """Abstract source of translation trees."""

    @abstractmethod
    async def load_namespace(self, language: str, namespace: str) -> Optional[TranslationTree]:
        """Load the translations of a language and namespace.

        Args:
            language: Language tag (e.g., "en-US").
            namespace: Namespace name (e.g., "translation").

        Returns:
            TranslationTree, or None if the backend has no data for the pair.

        Raises:
            TranslationBackendError: If the data exists but cannot be read.
        """
        pass


class InMemoryBackend(TranslationBackend):
    """Backend holding translations in process memory.

    Example:
        backend = InMemoryBackend()
        backend.add_translation("en", "translation", "errors.not_found", "Not found")
        backend.add_namespace("de", "translation", {"errors": {"not_found": "Nicht gefunden"}})
    """

    def __init__(self):
        self._namespaces: Dict[Tuple[str, str], Dict[str, Any]] = {}

    def add_translation(self, language: str, namespace: str, key: str, value: str) -> "InMemoryBackend":
        """Register one translation under a dotted key."""
        node = self._namespaces.setdefault((language, namespace), {})
        *parents, leaf = key.split(PATH_SEPARATOR)
        for part in parents:
            child = node.get(part)
            if not isinstance(child, dict):
                child = node[part] = {}
            node = child
        node[leaf] = value
        return self

    def add_namespace(
        self, language: str, namespace: str, translations: Mapping[str, Any]
    ) -> "InMemoryBackend":
        """Register a nested mapping of translations, replacing any previous data."""
        self._namespaces[(language, namespace)] = dict(translations)
        return self

    async def load_namespace(self, language: str, namespace: str) -> Optional[TranslationTree]:
        data = self._namespaces.get((language, namespace))
        if data is None:
            return None
        return TranslationTree.from_mapping(data)


class YAMLFileBackend(TranslationBackend):
    """Backend reading <base_path>/<language>/<namespace>.yaml files.

    A language without its own directory falls back to the base language
    directory (locales/en/ for "en-US"). ".yml" files are accepted as well.

    Attributes:
        base_path: Root directory of the language directories.
        encoding: Encoding of the YAML files.
    """

    def __init__(self, base_path: Union[str, Path] = "locales", encoding: str = "utf-8"):
        self.base_path = Path(base_path)
        self.encoding = encoding

        logger.info("initialized_yaml_backend", base_path=str(self.base_path), encoding=encoding)

    def find_file(self, language: str, namespace: str) -> Optional[Path]:
        """Locate the file of a language and namespace, or None."""
        for directory in (language, language_part(language)):
            for suffix in YAML_SUFFIXES:
                path = self.base_path / directory / f"{namespace}{suffix}"
                if path.is_file():
                    return path
        return None

    async def load_namespace(self, language: str, namespace: str) -> Optional[TranslationTree]:
        path = self.find_file(language, namespace)
        if path is None:
            logger.debug("translation_file_not_found", language=language, namespace=namespace)
            return None

        data = await asyncio.to_thread(self._read, path, language, namespace)
        if not isinstance(data, Mapping):
            logger.warning(
                "invalid_yaml_format",
                file=str(path),
                expected="mapping",
                found=type(data).__name__,
            )
            return TranslationTree()

        tree = TranslationTree.from_mapping(data)
        logger.info(
            "loaded_translations",
            language=language,
            namespace=namespace,
            file=str(path),
            key_count=len(tree),
        )
        return tree

    def _read(self, path: Path, language: str, namespace: str) -> Any:
        try:
            with open(path, "r", encoding=self.encoding) as f:
                return yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise TranslationBackendError(
                f"Failed to parse {path}: {e}", language=language, namespace=namespace
            ) from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error("translation_file_read_error", file=str(path), error=str(e))
            raise TranslationBackendError(
                f"Failed to read {path}: {e}", language=language, namespace=namespace
            ) from e
