"""Interpolation and nesting of translated strings.

Grammar:
    {{name}}              value of args["name"], passed through escape_value
    {{- name}}            value of args["name"], unescaped
    {{user.name}}         dotted traversal into mappings and objects
    {{price, .2f}}        value formatted with the format spec ".2f"
    $t(key)               translation of key, with the parent args
    $t(key, {"n": 2})     translation of key, with parent args merged with {"n": 2}
"""

import json
import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any, Awaitable, Callable, Dict, List, Optional

from infrastructure.i18n.exceptions import NestedArgumentsError
from infrastructure.i18n.formatters import DefaultFormatter, Formatter
from infrastructure.logging import get_module_logger

logger = get_module_logger()

EXPRESSION_PREFIX = "{{"
NESTING_PREFIX = "$t("

EXPRESSION_PATTERN = re.compile(r"\{\{(.+?)\}\}")
UNESCAPED_EXPRESSION_PATTERN = re.compile(r"\{\{-(.+?)\}\}")
NESTING_PATTERN = re.compile(r"\$t\((.+?)\)")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}")

TranslateCallback = Callable[[str, str, Dict[str, Any]], Awaitable[Optional[str]]]
MissingValueHandler = Callable[[str, "re.Match[str]"], Optional[str]]

_MISSING = object()


def replace_first(source: str, old: str, new: str) -> str:
    """Replace the first occurrence of old in source."""
    return source.replace(old, new, 1)


def get_value(key: str, args: Optional[Mapping]) -> Any:
    """Resolve a dotted key against interpolation args.

    Mappings are traversed by key, other objects by attribute.

    Args:
        key: Plain or dotted key (e.g., "user.name").
        args: Interpolation arguments.

    Returns:
        The resolved value, or None if any segment is missing.
    """
    if args is None:
        return None
    if "." not in key:
        return args.get(key)

    current: Any = args
    for part in key.split("."):
        if current is None:
            return None
        if isinstance(current, Mapping):
            current = current.get(part, _MISSING)
        else:
            current = getattr(current, part, _MISSING)
        if current is _MISSING:
            return None
    return current


def infer_type(value: Any) -> Any:
    """Convert ISO 8601 date strings of parsed nested args to datetimes."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        return value
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        return value


class Interpolator:
    """Expands {{...}} expressions and $t(...) references.

    Attributes:
        formatters: Formatters tried in order before the default formatter.
        default_formatter: Formatter used when no registered formatter applies.
        escape_values: Pass plain {{...}} values through escape_value.
        format_separator: Separator between a key and its format spec.
        maximum_replaces: Cap on substitutions per interpolate call.
        missing_value_handler: Supplies a value for unresolved expressions.
    """

    def __init__(
        self,
        formatters: Optional[List[Formatter]] = None,
        default_formatter: Optional[Formatter] = None,
        escape_values: bool = True,
        format_separator: str = ",",
        maximum_replaces: int = 1000,
        missing_value_handler: Optional[MissingValueHandler] = None,
    ):
        self.formatters: List[Formatter] = list(formatters or [])
        self.default_formatter = default_formatter or DefaultFormatter()
        self.escape_values = escape_values
        self.format_separator = format_separator
        self.maximum_replaces = maximum_replaces
        self.missing_value_handler = missing_value_handler

    def add_formatter(self, formatter: Formatter) -> "Interpolator":
        """Register a formatter after the existing ones."""
        self.formatters.append(formatter)
        return self

    def can_nest(self, source: str) -> bool:
        """Whether source contains a $t(...) reference."""
        return NESTING_PREFIX in source

    def interpolate(self, source: str, language: str, args: Optional[Mapping]) -> str:
        """Substitute every {{...}} expression of source.

        Matches are computed once on the original string. Unescaped
        expressions are replaced first, then plain ones, each by replacing the
        first literal occurrence of the matched token.

        Args:
            source: Resolved translation.
            language: Language of the translation, passed to formatters.
            args: Interpolation arguments.

        Returns:
            The interpolated string, or source unchanged if it has no expression.
        """
        if EXPRESSION_PREFIX not in source:
            return source

        unescaped_matches = list(UNESCAPED_EXPRESSION_PATTERN.finditer(source))
        matches = list(EXPRESSION_PATTERN.finditer(source))

        result = source
        replaces = 0

        for match in unescaped_matches:
            value = self._resolve_match(result, match, language, args)
            result = replace_first(result, match.group(0), value)
            replaces += 1
            if replaces >= self.maximum_replaces:
                break

        for match in matches:
            if replaces >= self.maximum_replaces:
                logger.debug("interpolation_replace_cap_reached", maximum_replaces=self.maximum_replaces)
                break
            # Unescaped tokens also match the plain pattern and are gone by now
            if match.group(0) not in result:
                continue
            value = self._resolve_match(result, match, language, args)
            if self.escape_values:
                value = self.escape_value(value)
            result = replace_first(result, match.group(0), value)
            replaces += 1

        return result

    async def nest(
        self,
        source: str,
        language: str,
        args: Optional[Dict[str, Any]],
        translate: TranslateCallback,
    ) -> str:
        """Replace every $t(...) reference with its translation.

        Args:
            source: Interpolated translation.
            language: Language to translate nested keys in.
            args: Arguments of the enclosing translation.
            translate: Callback resolving (language, key, args) to a translation.

        Returns:
            The string with resolvable references expanded.

        Raises:
            NestedArgumentsError: If a reference carries malformed JSON arguments.
        """
        result = source
        for match in NESTING_PATTERN.finditer(source):
            expression = match.group(1)
            if self.format_separator in expression:
                key, _, payload = expression.partition(self.format_separator)
                key = key.strip()
                child_args = self.parse_nested_args(payload.strip(), language, args)
            else:
                key = expression.strip()
                child_args = dict(args or {})

            value = await translate(language, key, child_args)
            if value is None:
                continue
            if match.group(0) in value:
                logger.debug("nesting_self_reference_skipped", key=key, language=language)
                continue

            result = replace_first(result, match.group(0), value)

        return result

    def parse_nested_args(
        self, payload: str, language: str, parent_args: Optional[Mapping]
    ) -> Dict[str, Any]:
        """Parse the JSON-like arguments of a $t(key, {...}) reference.

        The payload is interpolated against the parent args first, single
        quotes become double quotes. Parsed values win over parent values.

        Args:
            payload: Text after the separator (e.g., "{'count': {{n}}}").
            language: Language of the enclosing translation.
            parent_args: Arguments of the enclosing translation.

        Returns:
            Merged arguments for the nested translation.

        Raises:
            NestedArgumentsError: If the payload is not a JSON object.
        """
        text = self.interpolate(payload, language, parent_args).replace("'", '"')
        try:
            parsed = json.loads(text)
        except json.JSONDecodeError as e:
            raise NestedArgumentsError(f"Invalid nested arguments '{payload}': {e}", payload=payload) from e

        if not isinstance(parsed, dict):
            raise NestedArgumentsError(
                f"Nested arguments must be an object, got {type(parsed).__name__}", payload=payload
            )

        nested = {name: infer_type(value) for name, value in parsed.items()}
        return {**dict(parent_args or {}), **nested}

    def escape_value(self, value: str) -> str:
        """Escape a plain {{...}} value. Identity by default, override to escape."""
        return value

    def format(self, value: Any, format: str, language: str) -> Optional[str]:
        """Format a value with the first formatter accepting it."""
        for formatter in self.formatters:
            if formatter.can_format(value, format, language):
                return formatter.format(value, format, language)
        return self.default_formatter.format(value, format, language)

    def _value_for_expression(self, expression: str, language: str, args: Optional[Mapping]) -> Optional[str]:
        expression = expression.strip()
        if self.format_separator not in expression:
            value = get_value(expression, args)
            return None if value is None else str(value)

        key, _, format_spec = expression.partition(self.format_separator)
        value = get_value(key.strip(), args)
        return self.format(value, format_spec.strip(), language)

    def _resolve_match(self, source: str, match: "re.Match[str]", language: str, args: Optional[Mapping]) -> str:
        value = self._value_for_expression(match.group(1), language, args)
        if value is None and self.missing_value_handler is not None:
            value = self.missing_value_handler(source, match)
        return value if value is not None else ""
