"""Feature-level fixtures for i18n system tests.

Provides translation data, backends and translators for resolution scenarios.
"""

import pytest
import yaml

from infrastructure.i18n import InMemoryBackend, YAMLFileBackend
from tests.factories.i18n import make_backend, make_translation_options, make_translator


@pytest.fixture
def translations():
    """Translation data keyed by language, then namespace."""
    return {
        "en": {
            "translation": {
                "greeting": "Hello {{name}}",
                "welcome": "Welcome {{- user.name}}",
                "item": "{{count}} item",
                "item_plural": "{{count}} items",
                "friend": "A friend",
                "friend_male": "A boyfriend",
                "friend_plural": "{{count}} friends",
                "friend_male_plural": "{{count}} boyfriends",
                "key_plural": "plural without context",
                "shared": "en translation",
                "nested": "$t(greeting) and $t(common:ok)",
                "nested_count": "You have $t(item, {'count': {{total}}})",
                "nested_missing": "Go $t(does.not.exist)",
                "self_loop": "again $t(self_loop)",
                "price": "Total: {{amount, .2f}}",
                "date": "Due {{due, MMMM Do YYYY}}",
                "errors": {"not_found": "Not found"},
            },
            "common": {"ok": "OK", "only_common": "from common"},
        },
        "de": {
            "translation": {"greeting": "Hallo {{name}}"},
            "common": {"shared": "de common"},
        },
    }


@pytest.fixture
def backend(translations) -> InMemoryBackend:
    """InMemoryBackend seeded with the translations fixture."""
    return make_backend(translations)


@pytest.fixture
def translator(backend):
    """Translator on the in-memory backend with json format v3."""
    return make_translator(backend)


@pytest.fixture
def options():
    """Options with the default namespace and no fallbacks."""
    return make_translation_options()


@pytest.fixture
def locales_dir(tmp_path):
    """Create a locales directory with YAML translation files.

    Returns a directory structure like:
    - en/translation.yaml
    - en/common.yml
    - fr/translation.yaml
    - fr/broken.yaml (invalid YAML)
    - fr/scalar.yaml (not a mapping)
    """
    (tmp_path / "en").mkdir()
    (tmp_path / "fr").mkdir()

    with open(tmp_path / "en" / "translation.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": "Hello {{name}}", "errors": {"not_found": "Not found"}}, f)
    with open(tmp_path / "en" / "common.yml", "w", encoding="utf-8") as f:
        yaml.dump({"ok": "OK"}, f)
    with open(tmp_path / "fr" / "translation.yaml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": "Bonjour {{name}}", "count": 3}, f, allow_unicode=True)

    (tmp_path / "fr" / "broken.yaml").write_text("greeting: [unclosed\n", encoding="utf-8")
    (tmp_path / "fr" / "scalar.yaml").write_text("just a string\n", encoding="utf-8")

    return tmp_path


@pytest.fixture
def yaml_backend(locales_dir) -> YAMLFileBackend:
    """YAMLFileBackend reading the locales_dir fixture."""
    return YAMLFileBackend(locales_dir)
