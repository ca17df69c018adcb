"""Tests for infrastructure.i18n.backends module."""

import pytest

from infrastructure.i18n.backends import InMemoryBackend, YAMLFileBackend
from infrastructure.i18n.exceptions import TranslationBackendError
from infrastructure.i18n.tree import TranslationTree

pytestmark = pytest.mark.unit


class TestInMemoryBackend:
    """Tests for InMemoryBackend."""

    @pytest.mark.asyncio
    async def test_add_translation_dotted_key(self):
        """Dotted keys create nested entries."""
        backend = InMemoryBackend()
        backend.add_translation("en", "translation", "errors.not_found", "Not found")
        backend.add_translation("en", "translation", "errors.forbidden", "Forbidden")

        tree = await backend.load_namespace("en", "translation")

        assert tree.get("errors.not_found") == "Not found"
        assert tree.get("errors.forbidden") == "Forbidden"

    @pytest.mark.asyncio
    async def test_add_translation_replaces_leaf_with_branch(self):
        """A dotted key below an existing leaf replaces the leaf."""
        backend = InMemoryBackend()
        backend.add_translation("en", "translation", "a", "leaf")
        backend.add_translation("en", "translation", "a.b", "branch")

        tree = await backend.load_namespace("en", "translation")

        assert tree.get("a") is None
        assert tree.get("a.b") == "branch"

    @pytest.mark.asyncio
    async def test_add_namespace(self):
        """Nested mappings are registered as a whole."""
        backend = InMemoryBackend().add_namespace("de", "common", {"buttons": {"ok": "OK"}})
        tree = await backend.load_namespace("de", "common")
        assert isinstance(tree, TranslationTree)
        assert tree.get("buttons.ok") == "OK"

    @pytest.mark.asyncio
    async def test_unknown_pair_returns_none(self):
        """Pairs without data yield None."""
        backend = InMemoryBackend().add_translation("en", "translation", "key", "value")
        assert await backend.load_namespace("fr", "translation") is None
        assert await backend.load_namespace("en", "common") is None


class TestYAMLFileBackend:
    """Tests for YAMLFileBackend."""

    @pytest.mark.asyncio
    async def test_load_yaml(self, yaml_backend):
        """.yaml files load into a tree."""
        tree = await yaml_backend.load_namespace("en", "translation")
        assert tree.get("greeting") == "Hello {{name}}"
        assert tree.get("errors.not_found") == "Not found"

    @pytest.mark.asyncio
    async def test_load_yml(self, yaml_backend):
        """.yml files are accepted."""
        tree = await yaml_backend.load_namespace("en", "common")
        assert tree.get("ok") == "OK"

    @pytest.mark.asyncio
    async def test_non_string_leaves_dropped(self, yaml_backend):
        """Non-string YAML values are not registered."""
        tree = await yaml_backend.load_namespace("fr", "translation")
        assert tree.get("greeting") == "Bonjour {{name}}"
        assert "count" not in tree

    @pytest.mark.asyncio
    async def test_regional_language_uses_base_directory(self, yaml_backend):
        """en-US falls back to the en directory."""
        tree = await yaml_backend.load_namespace("en-US", "translation")
        assert tree.get("greeting") == "Hello {{name}}"

    @pytest.mark.asyncio
    async def test_regional_directory_preferred(self, locales_dir):
        """A regional directory wins over the base language."""
        (locales_dir / "en-GB").mkdir()
        (locales_dir / "en-GB" / "translation.yaml").write_text("greeting: Hiya\n", encoding="utf-8")
        backend = YAMLFileBackend(locales_dir)

        tree = await backend.load_namespace("en-GB", "translation")

        assert tree.get("greeting") == "Hiya"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("language,namespace", [("de", "translation"), ("en", "missing")])
    async def test_missing_file_returns_none(self, yaml_backend, language, namespace):
        """Missing files yield None."""
        assert await yaml_backend.load_namespace(language, namespace) is None

    @pytest.mark.asyncio
    async def test_invalid_yaml_raises(self, yaml_backend):
        """Unparseable files raise TranslationBackendError."""
        with pytest.raises(TranslationBackendError) as exc_info:
            await yaml_backend.load_namespace("fr", "broken")
        assert exc_info.value.language == "fr"
        assert exc_info.value.namespace == "broken"
        assert exc_info.value.__cause__ is not None

    @pytest.mark.asyncio
    async def test_invalid_encoding_raises(self, locales_dir):
        """Undecodable files raise TranslationBackendError."""
        (locales_dir / "fr" / "latin.yaml").write_bytes("clé: été\n".encode("latin-1"))
        backend = YAMLFileBackend(locales_dir)
        with pytest.raises(TranslationBackendError):
            await backend.load_namespace("fr", "latin")

    @pytest.mark.asyncio
    async def test_custom_encoding(self, locales_dir):
        """The file encoding is configurable."""
        (locales_dir / "fr" / "latin.yaml").write_bytes("greeting: été\n".encode("latin-1"))
        backend = YAMLFileBackend(locales_dir, encoding="latin-1")
        tree = await backend.load_namespace("fr", "latin")
        assert tree.get("greeting") == "été"

    @pytest.mark.asyncio
    async def test_non_mapping_document_is_empty(self, yaml_backend):
        """Documents that are not mappings yield an empty tree."""
        tree = await yaml_backend.load_namespace("fr", "scalar")
        assert tree is not None
        assert len(tree) == 0

    def test_find_file(self, yaml_backend, locales_dir):
        """find_file resolves the path of a pair."""
        assert yaml_backend.find_file("en", "common") == locales_dir / "en" / "common.yml"
        assert yaml_backend.find_file("de", "common") is None
