"""Translation models for the i18n engine.

Defines the core value types shared by the Translator, the plural resolver
and the interpolator.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

NAMESPACE_SEPARATOR = ":"

Number = Union[int, float, Decimal]


def language_part(language: str) -> str:
    """Get language part of a language tag (e.g., "en" from "en-US").

    Args:
        language: Language tag using "-" as region separator.

    Returns:
        Base language code.
    """
    index = language.find("-")
    if index == -1:
        return language
    return language[:index]


@dataclass(frozen=True)
class TranslationKey:
    """Represents a translation key for accessing translated messages.

    Paths are hierarchical (e.g., "errors.not_found") and may be prefixed by
    a namespace ("common:errors.not_found"). Frozen to ensure immutability
    and hashability.

    Attributes:
        namespace: Namespace the key lives in (e.g., "translation", "common").
        path: Dotted path of the message inside the namespace.
        context: Optional disambiguation context (e.g., "male").
        count: Optional count driving plural selection.
    """

    namespace: str
    path: str
    context: Optional[str] = None
    count: Optional[Number] = None

    def __str__(self) -> str:
        """Return the namespaced key.

        Returns:
            Full key (e.g., "common:errors.not_found").
        """
        return f"{self.namespace}{NAMESPACE_SEPARATOR}{self.path}"

    @classmethod
    def from_string(cls, key_string: str, default_namespace: str) -> "TranslationKey":
        """Create TranslationKey from a raw "ns:path" or "path" string.

        The namespace is everything before the first ":". Keys without a
        separator use the default namespace.

        Args:
            key_string: Raw key (e.g., "common:welcome" or "welcome").
            default_namespace: Namespace applied when key_string has none.

        Returns:
            TranslationKey instance.
        """
        namespace, separator, path = key_string.partition(NAMESPACE_SEPARATOR)
        if not separator:
            return cls(namespace=default_namespace, path=key_string)
        return cls(namespace=namespace, path=path)


@dataclass(frozen=True)
class TranslationOptions:
    """Options applied to a single translate call.

    Attributes:
        default_namespace: Namespace used for keys without a namespace prefix.
        fallback_languages: Languages tried in order when the requested one misses.
        fallback_namespaces: Namespaces tried in order when the requested one misses.

    Raises:
        ValueError: If default_namespace is blank.
    """

    default_namespace: str
    fallback_languages: Tuple[str, ...] = ()
    fallback_namespaces: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.default_namespace, str) or not self.default_namespace.strip():
            raise ValueError("default_namespace cannot be blank.")
        # Lists are accepted for convenience but stored as tuples
        object.__setattr__(self, "fallback_languages", tuple(self.fallback_languages or ()))
        object.__setattr__(self, "fallback_namespaces", tuple(self.fallback_namespaces or ()))


class PluralCategory(str, Enum):
    """CLDR plural categories."""

    ZERO = "zero"
    ONE = "one"
    TWO = "two"
    FEW = "few"
    MANY = "many"
    OTHER = "other"

    @property
    def suffix(self) -> str:
        """Key suffix used by the v4 json format (e.g., "_one")."""
        return f"_{self.value}"


class JsonFormat(IntEnum):
    """Compatibility versions of the plural key suffix scheme.

    V1 to V3 use the legacy numeric suffixes, V4 uses CLDR categories.
    """

    V1 = 1
    V2 = 2
    V3 = 3
    V4 = 4


@dataclass(frozen=True)
class PluralOperands:
    """CLDR plural operands of a number.

    See http://unicode.org/reports/tr35/tr35-numbers.html#Operands

    Attributes:
        n: Absolute value of the source number.
        i: Integer digits of n.
        v: Number of visible fraction digits in n, with trailing zeros.
        f: Visible fraction digits in n, with trailing zeros.
        t: Visible fraction digits in n, without trailing zeros.
        e: Compact decimal exponent, always 0 here.
    """

    n: Decimal
    i: int
    v: int = 0
    f: int = 0
    t: int = 0
    e: int = 0

    @classmethod
    def from_number(cls, number: Number) -> "PluralOperands":
        """Derive the operands of a number.

        Floats go through their shortest string form, so 1.5 has one
        visible fraction digit. Decimals keep their trailing zeros.

        Args:
            number: Count to decompose.

        Returns:
            PluralOperands for the number.
        """
        if isinstance(number, Decimal):
            value = abs(number)
        else:
            value = abs(Decimal(str(number)))

        text = format(value, "f")
        integer_digits, _, decimals = text.partition(".")
        if not decimals:
            return cls(n=value, i=int(integer_digits))

        trimmed = decimals.rstrip("0")
        return cls(
            n=value,
            i=int(integer_digits),
            v=len(decimals),
            f=int(decimals),
            t=int(trimmed) if trimmed else 0,
        )
