"""Plural resolution for translation keys.

Maps a language and a count to the key suffix selecting the plural form,
either through the legacy numeric families (json format v1 to v3) or through
the CLDR categories (json format v4).
"""

import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from infrastructure.i18n.models import (
    JsonFormat,
    Number,
    PluralCategory,
    PluralOperands,
    language_part,
)
from infrastructure.i18n.plural_rules import (
    CARDINAL_RULES,
    LEGACY_FAMILIES,
    LEGACY_FILTERS,
    ORDINAL_RULES,
    PluralRule,
)


class PluralResolver(ABC):
    """Abstract plural resolver consulted by the Translator."""

    @abstractmethod
    def get_plural_suffix(self, language: str, count: Number, ordinal: bool = False) -> str:
        """Get the key suffix of the plural form for count.

        Args:
            language: Language tag (e.g., "en", "pt-BR").
            count: Number driving the plural form.
            ordinal: Select ordinal rather than cardinal rules.

        Returns:
            Suffix appended to the translation key, empty if none applies.
        """
        pass

    @abstractmethod
    def needs_plural(self, language: str) -> bool:
        """Whether keys of this language are looked up with a plural suffix."""
        pass


@dataclass(frozen=True)
class _LegacyRule:
    numbers: Tuple[int, ...]
    filter: Callable[[int], int]

    @property
    def is_simple(self) -> bool:
        return len(self.numbers) == 2 and self.numbers[0] == 1


_legacy_rules: Optional[Dict[str, _LegacyRule]] = None
_legacy_rules_lock = threading.Lock()


def legacy_rules() -> Dict[str, _LegacyRule]:
    """Language to legacy rule map, built once on first use.

    Each language registers with the first family listing it.
    """
    global _legacy_rules
    if _legacy_rules is not None:
        return _legacy_rules

    with _legacy_rules_lock:
        if _legacy_rules is None:
            rules: Dict[str, _LegacyRule] = {}
            for family in LEGACY_FAMILIES:
                rule = _LegacyRule(numbers=family.numbers, filter=LEGACY_FILTERS[family.filter_id])
                for language in family.languages:
                    rules.setdefault(language, rule)
            _legacy_rules = rules
    return _legacy_rules


class DefaultPluralResolver(PluralResolver):
    """Plural resolver backed by the static rule tables.

    Attributes:
        json_format: Suffix scheme version.
        plural_separator: Separator placed before numeric suffixes.
        use_simple_plural_suffix: Use "" / "plural" for two-form languages.
    """

    def __init__(
        self,
        json_format: JsonFormat = JsonFormat.V3,
        plural_separator: str = "_",
        use_simple_plural_suffix: bool = True,
    ):
        self.json_format = JsonFormat(json_format)
        self.plural_separator = plural_separator
        self.use_simple_plural_suffix = use_simple_plural_suffix

    def get_plural_suffix(self, language: str, count: Number, ordinal: bool = False) -> str:
        if self.json_format == JsonFormat.V4:
            category = self.get_plural_category(language, count, ordinal)
            return category.suffix if category is not None else ""

        rule = self._get_legacy_rule(language)
        if rule is None:
            return ""

        number_index = rule.filter(int(count))
        if number_index >= len(rule.numbers):
            suffix_number = number_index
        else:
            suffix_number = rule.numbers[number_index]

        simple = self.use_simple_plural_suffix and rule.is_simple
        if simple:
            if suffix_number == 2:
                suffix = "plural"
            elif suffix_number == 1:
                suffix = None
            else:
                suffix = str(suffix_number)
        else:
            suffix = str(suffix_number)

        if self.json_format == JsonFormat.V1:
            if suffix_number == 1:
                return ""
            if suffix_number > 2:
                return f"_plural_{suffix_number}"
            return f"_{suffix}"

        if self.json_format == JsonFormat.V2:
            if len(rule.numbers) == 1 or suffix is None:
                return ""
            return f"{self.plural_separator}{suffix}"

        if simple:
            return "" if suffix is None else f"{self.plural_separator}{suffix}"
        return f"{self.plural_separator}{number_index}"

    def needs_plural(self, language: str) -> bool:
        if self.json_format in (JsonFormat.V3, JsonFormat.V4):
            return True

        rule = self._get_legacy_rule(language)
        return rule is not None and len(rule.numbers) > 1

    def get_plural_category(
        self, language: str, count: Number, ordinal: bool = False
    ) -> Optional[PluralCategory]:
        """Get the CLDR plural category of count.

        Args:
            language: Language tag.
            count: Number to categorize.
            ordinal: Use the ordinal table instead of the cardinal one.

        Returns:
            The category, or None when the language has no CLDR rules.
        """
        table = ORDINAL_RULES if ordinal else CARDINAL_RULES
        rules = self._get_cldr_rules(table, language)
        if rules is None:
            return None

        operands = PluralOperands.from_number(count)
        for category, predicate in rules:
            if predicate(operands):
                return category
        return PluralCategory.OTHER

    @staticmethod
    def _get_legacy_rule(language: str) -> Optional[_LegacyRule]:
        rules = legacy_rules()
        rule = rules.get(language)
        if rule is None:
            rule = rules.get(language_part(language))
        return rule

    @staticmethod
    def _get_cldr_rules(
        table: Dict[str, Tuple[PluralRule, ...]], language: str
    ) -> Optional[Tuple[PluralRule, ...]]:
        # Regional tables (pt-PT) take precedence over the base language
        rules = table.get(language.lower())
        if rules is None:
            rules = table.get(language_part(language).lower())
        return rules
