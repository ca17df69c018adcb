"""Plural rule tables.

Pure data consumed by DefaultPluralResolver:

* LEGACY_FILTERS and LEGACY_FAMILIES drive the numeric suffixes of the
  v1 to v3 json formats.
* CARDINAL_RULES and ORDINAL_RULES map a language to its CLDR predicates,
  evaluated in order over PluralOperands; the first match wins and a language
  with no matching predicate is "other". Languages absent from a table have
  no plural category at all.

See https://unicode.org/cldr/charts/latest/supplemental/language_plural_rules.html
"""

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from infrastructure.i18n.models import PluralCategory, PluralOperands

ZERO = PluralCategory.ZERO
ONE = PluralCategory.ONE
TWO = PluralCategory.TWO
FEW = PluralCategory.FEW
MANY = PluralCategory.MANY

PluralPredicate = Callable[[PluralOperands], bool]
PluralRule = Tuple[PluralCategory, PluralPredicate]


def within(value, low: int, high: int) -> bool:
    """CLDR range check: value is integral and low <= value <= high."""
    return value == int(value) and low <= value <= high


# Legacy families ------------------------------------------------------------

LEGACY_FILTERS: Dict[int, Callable[[int], int]] = {
    1: lambda n: 1 if n > 1 else 0,
    2: lambda n: 1 if n != 1 else 0,
    3: lambda n: 0,
    4: lambda n: (
        0
        if n % 10 == 1 and n % 100 != 11
        else 1 if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20) else 2
    ),
    5: lambda n: (
        0
        if n == 0
        else 1 if n == 1 else 2 if n == 2 else 3 if 3 <= n % 100 <= 10 else 4 if n % 100 >= 11 else 5
    ),
    6: lambda n: 0 if n == 1 else 1 if 2 <= n <= 4 else 2,
    7: lambda n: 0 if n == 1 else 1 if 2 <= n % 10 <= 4 and (n % 100 < 10 or n % 100 >= 20) else 2,
    8: lambda n: 0 if n == 1 else 1 if n == 2 else 2 if n != 8 and n != 11 else 3,
    9: lambda n: 1 if n >= 2 else 0,
    10: lambda n: 0 if n == 1 else 1 if n == 2 else 2 if n < 7 else 3 if n < 11 else 4,
    11: lambda n: 0 if n in (1, 11) else 1 if n in (2, 12) else 2 if 2 < n < 20 else 3,
    12: lambda n: 1 if n % 10 != 1 or n % 100 == 11 else 0,
    13: lambda n: 1 if n != 0 else 0,
    14: lambda n: 0 if n == 1 else 1 if n == 2 else 2 if n == 3 else 3,
    15: lambda n: (
        0
        if n % 10 == 1 and n % 100 != 11
        else 1 if n % 10 >= 2 and (n % 100 < 10 or n % 100 >= 20) else 2
    ),
    16: lambda n: 0 if n % 10 == 1 and n % 100 != 11 else 1 if n != 0 else 2,
    17: lambda n: 0 if n == 1 or n % 10 == 1 else 1,
    18: lambda n: 0 if n == 0 else 1 if n == 1 else 2,
    19: lambda n: (
        0
        if n == 1
        else 1 if n == 0 or 1 < n % 100 < 11 else 2 if 10 < n % 100 < 20 else 3
    ),
    20: lambda n: 0 if n == 1 else 1 if n == 0 or 0 < n % 100 < 20 else 2,
    21: lambda n: 1 if n % 100 == 1 else 2 if n % 100 == 2 else 3 if n % 100 in (3, 4) else 0,
}


@dataclass(frozen=True)
class PluralFamily:
    """Languages sharing one legacy plural rule.

    Attributes:
        languages: Language codes of the family.
        numbers: Suffix number of each plural form.
        filter_id: Key of the LEGACY_FILTERS entry picking the form index.
    """

    languages: Tuple[str, ...]
    numbers: Tuple[int, ...]
    filter_id: int


LEGACY_FAMILIES: Tuple[PluralFamily, ...] = (
    PluralFamily(
        languages=(
            "ach", "ak", "am", "arn", "br", "fil", "gun", "ln", "mfe", "mg", "mi", "oc",
            "pt", "pt-BR", "tg", "ti", "tr", "uz", "wa",
        ),
        numbers=(1, 2),
        filter_id=1,
    ),
    PluralFamily(
        languages=(
            "af", "an", "ast", "az", "bg", "bn", "ca", "da", "de", "dev", "el", "en",
            "eo", "es", "et", "eu", "fi", "fo", "fur", "fy", "gl", "gu", "ha", "he", "hi",
            "hu", "hy", "ia", "it", "kn", "ku", "lb", "mai", "ml", "mn", "mr", "nah", "nap",
            "nb", "ne", "nl", "nn", "no", "nso", "pa", "pap", "pms", "ps", "pt-PT", "rm",
            "sco", "se", "si", "so", "son", "sq", "sv", "sw", "ta", "te", "tk", "ur", "yo",
        ),
        numbers=(1, 2),
        filter_id=2,
    ),
    PluralFamily(
        languages=(
            "ay", "bo", "cgg", "fa", "id", "ja", "jbo", "ka", "kk", "km", "ko", "ky", "lo",
            "ms", "sah", "su", "th", "tt", "ug", "vi", "wo", "zh",
        ),
        numbers=(1,),
        filter_id=3,
    ),
    PluralFamily(languages=("be", "bs", "dz", "hr", "ru", "sr", "uk"), numbers=(1, 2, 5), filter_id=4),
    PluralFamily(languages=("ar",), numbers=(0, 1, 2, 3, 11, 100), filter_id=5),
    PluralFamily(languages=("cs", "sk"), numbers=(1, 2, 5), filter_id=6),
    PluralFamily(languages=("csb", "pl"), numbers=(1, 2, 5), filter_id=7),
    PluralFamily(languages=("cy",), numbers=(1, 2, 3, 8), filter_id=8),
    PluralFamily(languages=("fr",), numbers=(1, 2), filter_id=9),
    PluralFamily(languages=("ga",), numbers=(1, 2, 3, 7, 11), filter_id=10),
    PluralFamily(languages=("gd",), numbers=(1, 2, 3, 20), filter_id=11),
    PluralFamily(languages=("is",), numbers=(1, 2), filter_id=12),
    PluralFamily(languages=("jv",), numbers=(0, 1), filter_id=13),
    PluralFamily(languages=("kw",), numbers=(1, 2, 3, 4), filter_id=14),
    PluralFamily(languages=("lt",), numbers=(1, 2, 10), filter_id=15),
    PluralFamily(languages=("lv",), numbers=(1, 2, 0), filter_id=16),
    PluralFamily(languages=("mk",), numbers=(1, 2), filter_id=17),
    PluralFamily(languages=("mnk",), numbers=(0, 1, 2), filter_id=18),
    PluralFamily(languages=("mt",), numbers=(1, 2, 11, 20), filter_id=19),
    PluralFamily(languages=("or",), numbers=(2, 1), filter_id=2),
    PluralFamily(languages=("ro",), numbers=(1, 2, 20), filter_id=20),
    PluralFamily(languages=("sl",), numbers=(5, 1, 2, 3), filter_id=21),
)


# Shared CLDR rule lists -----------------------------------------------------

OTHER_ONLY: Tuple[PluralRule, ...] = ()
N_IS_ONE: Tuple[PluralRule, ...] = ((ONE, lambda o: o.n == 1),)
ONE_INTEGER_NO_FRACTION: Tuple[PluralRule, ...] = ((ONE, lambda o: o.i == 1 and o.v == 0),)
ZERO_INTEGER_OR_N_ONE: Tuple[PluralRule, ...] = ((ONE, lambda o: o.i == 0 or o.n == 1),)
ZERO_OR_ONE_INTEGER: Tuple[PluralRule, ...] = ((ONE, lambda o: o.i in (0, 1)),)
N_ZERO_TO_ONE: Tuple[PluralRule, ...] = ((ONE, lambda o: within(o.n, 0, 1)),)
ONE_TWO: Tuple[PluralRule, ...] = ((ONE, lambda o: o.n == 1), (TWO, lambda o: o.n == 2))

SOUTH_SLAVIC: Tuple[PluralRule, ...] = (
    (ONE, lambda o: (o.v == 0 and o.i % 10 == 1 and o.i % 100 != 11) or (o.f % 10 == 1 and o.f % 100 != 11)),
    (
        FEW,
        lambda o: (o.v == 0 and within(o.i % 10, 2, 4) and not within(o.i % 100, 12, 14))
        or (within(o.f % 10, 2, 4) and not within(o.f % 100, 12, 14)),
    ),
)
EAST_SLAVIC: Tuple[PluralRule, ...] = (
    (ONE, lambda o: o.v == 0 and o.i % 10 == 1 and o.i % 100 != 11),
    (FEW, lambda o: o.v == 0 and within(o.i % 10, 2, 4) and not within(o.i % 100, 12, 14)),
    (
        MANY,
        lambda o: o.v == 0 and (o.i % 10 == 0 or within(o.i % 10, 5, 9) or within(o.i % 100, 11, 14)),
    ),
)
WEST_SLAVIC: Tuple[PluralRule, ...] = (
    (ONE, lambda o: o.i == 1 and o.v == 0),
    (FEW, lambda o: within(o.i, 2, 4) and o.v == 0),
    (MANY, lambda o: o.v != 0),
)
SORBIAN: Tuple[PluralRule, ...] = (
    (ONE, lambda o: (o.v == 0 and o.i % 100 == 1) or o.f % 100 == 1),
    (TWO, lambda o: (o.v == 0 and o.i % 100 == 2) or o.f % 100 == 2),
    (FEW, lambda o: (o.v == 0 and within(o.i % 100, 3, 4)) or within(o.f % 100, 3, 4)),
)
BALTIC_LATVIAN: Tuple[PluralRule, ...] = (
    (ZERO, lambda o: o.n % 10 == 0 or within(o.n % 100, 11, 19) or (o.v == 2 and within(o.f % 100, 11, 19))),
    (
        ONE,
        lambda o: (o.n % 10 == 1 and o.n % 100 != 11)
        or (o.v == 2 and o.f % 10 == 1 and o.f % 100 != 11)
        or (o.v != 2 and o.f % 10 == 1),
    ),
)
FILIPINO: Tuple[PluralRule, ...] = (
    (
        ONE,
        lambda o: (o.v == 0 and o.i in (1, 2, 3))
        or (o.v == 0 and o.i % 10 not in (4, 6, 9))
        or (o.v != 0 and o.f % 10 not in (4, 6, 9)),
    ),
)
SAMI: Tuple[PluralRule, ...] = ONE_TWO

_KW_TWO_THOUSANDS = {40000, 60000, 80000} | set(range(1000, 20001))


CARDINAL_RULES: Dict[str, Tuple[PluralRule, ...]] = {
    "af": N_IS_ONE,
    "ak": N_ZERO_TO_ONE,
    "am": ZERO_INTEGER_OR_N_ONE,
    "ar": (
        (ZERO, lambda o: o.n == 0),
        (ONE, lambda o: o.n == 1),
        (TWO, lambda o: o.n == 2),
        (FEW, lambda o: within(o.n % 100, 3, 10)),
        (MANY, lambda o: within(o.n % 100, 11, 99)),
    ),
    "as": ZERO_INTEGER_OR_N_ONE,
    "asa": N_IS_ONE,
    "ast": ONE_INTEGER_NO_FRACTION,
    "az": N_IS_ONE,
    "be": (
        (ONE, lambda o: o.n % 10 == 1 and o.n % 100 != 11),
        (FEW, lambda o: within(o.n % 10, 2, 4) and not within(o.n % 100, 12, 14)),
        (MANY, lambda o: o.n % 10 == 0 or within(o.n % 10, 5, 9) or within(o.n % 100, 11, 14)),
    ),
    "bem": N_IS_ONE,
    "bez": N_IS_ONE,
    "bg": N_IS_ONE,
    "bm": OTHER_ONLY,
    "bn": ZERO_INTEGER_OR_N_ONE,
    "bo": OTHER_ONLY,
    "br": (
        (ONE, lambda o: o.n % 10 == 1 and o.n % 100 not in (11, 71, 91)),
        (TWO, lambda o: o.n % 10 == 2 and o.n % 100 not in (12, 72, 92)),
        (
            FEW,
            lambda o: o.n % 10 in (3, 4, 9)
            and not (within(o.n % 100, 10, 19) or within(o.n % 100, 70, 79) or within(o.n % 100, 90, 99)),
        ),
        (MANY, lambda o: o.n != 0 and o.n % 1000000 == 0),
    ),
    "brx": N_IS_ONE,
    "bs": SOUTH_SLAVIC,
    "ca": ONE_INTEGER_NO_FRACTION,
    "ce": N_IS_ONE,
    "ceb": FILIPINO,
    "cgg": N_IS_ONE,
    "chr": N_IS_ONE,
    "ku": N_IS_ONE,
    "cs": WEST_SLAVIC,
    "cy": (
        (ZERO, lambda o: o.n == 0),
        (ONE, lambda o: o.n == 1),
        (TWO, lambda o: o.n == 2),
        (FEW, lambda o: o.n == 3),
        (MANY, lambda o: o.n == 6),
    ),
    "da": ((ONE, lambda o: o.n == 1 or (o.t != 0 and o.i in (0, 1))),),
    "de": ONE_INTEGER_NO_FRACTION,
    "dsb": SORBIAN,
    "dv": N_IS_ONE,
    "dz": OTHER_ONLY,
    "ee": N_IS_ONE,
    "el": N_IS_ONE,
    "en": ONE_INTEGER_NO_FRACTION,
    "eo": N_IS_ONE,
    "es": N_IS_ONE,
    "et": ONE_INTEGER_NO_FRACTION,
    "eu": N_IS_ONE,
    "fa": ZERO_INTEGER_OR_N_ONE,
    "ff": ZERO_OR_ONE_INTEGER,
    "fi": ONE_INTEGER_NO_FRACTION,
    "fil": FILIPINO,
    "fo": N_IS_ONE,
    "fr": (
        (ONE, lambda o: o.i in (0, 1)),
        (MANY, lambda o: (o.e == 0 and o.i != 0 and o.i % 1000000 == 0 and o.v == 0) or not within(o.e, 0, 5)),
    ),
    "fur": N_IS_ONE,
    "fy": ONE_INTEGER_NO_FRACTION,
    "ga": (
        (ONE, lambda o: o.n == 1),
        (TWO, lambda o: o.n == 2),
        (FEW, lambda o: within(o.n, 3, 6)),
        (MANY, lambda o: within(o.n, 7, 10)),
    ),
    "gd": (
        (ONE, lambda o: o.n in (1, 11)),
        (TWO, lambda o: o.n in (2, 12)),
        (FEW, lambda o: within(o.n, 3, 10) or within(o.n, 13, 19)),
    ),
    "gl": ONE_INTEGER_NO_FRACTION,
    "gsw": N_IS_ONE,
    "gu": ZERO_INTEGER_OR_N_ONE,
    "gv": (
        (ONE, lambda o: o.v == 0 and o.i % 10 == 1),
        (TWO, lambda o: o.v == 0 and o.i % 10 == 2),
        (FEW, lambda o: o.v == 0 and o.i % 100 in (0, 20, 40, 60, 80)),
        (MANY, lambda o: o.v != 0),
    ),
    "ha": N_IS_ONE,
    "haw": N_IS_ONE,
    "he": (
        (ONE, lambda o: o.i == 1 and o.v == 0),
        (TWO, lambda o: o.i == 2 and o.v == 0),
        (MANY, lambda o: o.v == 0 and o.n == o.i and not within(o.n, 0, 10) and o.n % 10 == 0),
    ),
    "hi": ZERO_INTEGER_OR_N_ONE,
    "hr": SOUTH_SLAVIC,
    "hsb": SORBIAN,
    "hu": N_IS_ONE,
    "hy": ZERO_OR_ONE_INTEGER,
    "ia": ONE_INTEGER_NO_FRACTION,
    "id": OTHER_ONLY,
    "ig": OTHER_ONLY,
    "ii": OTHER_ONLY,
    "is": ((ONE, lambda o: (o.t == 0 and o.i % 10 == 1 and o.i % 100 != 11) or o.t != 0),),
    "it": ONE_INTEGER_NO_FRACTION,
    "iu": ONE_TWO,
    "ja": OTHER_ONLY,
    "jgo": N_IS_ONE,
    "jmc": N_IS_ONE,
    "jv": OTHER_ONLY,
    "ka": N_IS_ONE,
    "kab": ZERO_OR_ONE_INTEGER,
    "kde": OTHER_ONLY,
    "kea": OTHER_ONLY,
    "kk": N_IS_ONE,
    "kkj": N_IS_ONE,
    "kl": N_IS_ONE,
    "km": OTHER_ONLY,
    "kn": ZERO_INTEGER_OR_N_ONE,
    "ko": OTHER_ONLY,
    "ks": N_IS_ONE,
    "ksb": N_IS_ONE,
    "ksh": ((ZERO, lambda o: o.n == 0), (ONE, lambda o: o.n == 1)),
    "kw": (
        (ZERO, lambda o: o.n == 0),
        (ONE, lambda o: o.n == 1),
        (
            TWO,
            lambda o: o.n % 100 in (2, 22, 42, 62, 82)
            or (o.n % 1000 == 0 and o.n % 100000 in _KW_TWO_THOUSANDS)
            or (o.n != 0 and o.n % 1000000 == 100000),
        ),
        (FEW, lambda o: o.n % 100 in (3, 23, 43, 63, 83)),
        (MANY, lambda o: o.n != 1 and o.n % 100 in (1, 21, 41, 61, 81)),
    ),
    "ky": N_IS_ONE,
    "lag": ((ZERO, lambda o: o.n == 0), (ONE, lambda o: o.i in (0, 1) and o.n != 0)),
    "lb": N_IS_ONE,
    "lg": N_IS_ONE,
    "lkt": OTHER_ONLY,
    "ln": N_ZERO_TO_ONE,
    "lo": OTHER_ONLY,
    "lt": (
        (ONE, lambda o: o.n % 10 == 1 and not within(o.n % 100, 11, 19)),
        (FEW, lambda o: within(o.n % 10, 2, 9) and not within(o.n % 100, 11, 19)),
        (MANY, lambda o: o.f != 0),
    ),
    "lv": BALTIC_LATVIAN,
    "mas": N_IS_ONE,
    "mg": N_ZERO_TO_ONE,
    "mgo": N_IS_ONE,
    "mk": ((ONE, lambda o: (o.v == 0 and o.i % 10 == 1 and o.i % 100 != 11) or (o.f % 10 == 1 and o.f % 100 != 11)),),
    "ml": N_IS_ONE,
    "mn": N_IS_ONE,
    "mr": N_IS_ONE,
    "ms": OTHER_ONLY,
    "mt": (
        (ONE, lambda o: o.n == 1),
        (FEW, lambda o: o.n == 0 or within(o.n % 100, 2, 10)),
        (MANY, lambda o: within(o.n % 100, 11, 19)),
    ),
    "my": OTHER_ONLY,
    "naq": ONE_TWO,
    "nb": N_IS_ONE,
    "nd": N_IS_ONE,
    "ne": N_IS_ONE,
    "nl": ONE_INTEGER_NO_FRACTION,
    "nn": N_IS_ONE,
    "nnh": N_IS_ONE,
    "nqo": OTHER_ONLY,
    "nr": N_IS_ONE,
    "nso": N_ZERO_TO_ONE,
    "nyn": N_IS_ONE,
    "om": N_IS_ONE,
    "or": N_IS_ONE,
    "os": N_IS_ONE,
    "pa": N_ZERO_TO_ONE,
    "pl": (
        (ONE, lambda o: o.i == 1 and o.v == 0),
        (FEW, lambda o: o.v == 0 and within(o.i % 10, 2, 4) and not within(o.i % 100, 12, 14)),
        (
            MANY,
            lambda o: o.v == 0
            and ((o.i != 1 and within(o.i % 10, 0, 1)) or within(o.i % 10, 5, 9) or within(o.i % 100, 12, 14)),
        ),
    ),
    "prg": BALTIC_LATVIAN,
    "ps": N_IS_ONE,
    "pt": ((ONE, lambda o: within(o.i, 0, 1)),),
    "pt-pt": ONE_INTEGER_NO_FRACTION,
    "rm": N_IS_ONE,
    "ro": (
        (ONE, lambda o: o.i == 1 and o.v == 0),
        (FEW, lambda o: o.v != 0 or o.n == 0 or within(o.n % 100, 2, 19)),
    ),
    "rof": N_IS_ONE,
    "ru": EAST_SLAVIC,
    "rwk": N_IS_ONE,
    "sah": OTHER_ONLY,
    "saq": N_IS_ONE,
    "sd": N_IS_ONE,
    "se": SAMI,
    "seh": N_IS_ONE,
    "ses": OTHER_ONLY,
    "sg": OTHER_ONLY,
    "shi": (
        (ONE, lambda o: o.i == 0 or o.n == 1),
        (FEW, lambda o: within(o.n, 2, 10)),
    ),
    "si": ((ONE, lambda o: o.n in (0, 1) or (o.i == 0 and o.f == 1)),),
    "sk": WEST_SLAVIC,
    "sl": (
        (ONE, lambda o: o.v == 0 and o.i % 100 == 1),
        (TWO, lambda o: o.v == 0 and o.i % 100 == 2),
        (FEW, lambda o: (o.v == 0 and within(o.i % 100, 3, 4)) or o.v != 0),
    ),
    "sma": SAMI,
    "smj": SAMI,
    "smn": SAMI,
    "sms": SAMI,
    "sn": N_IS_ONE,
    "so": N_IS_ONE,
    "sq": N_IS_ONE,
    "sr": SOUTH_SLAVIC,
    "ss": N_IS_ONE,
    "ssy": N_IS_ONE,
    "st": N_IS_ONE,
    "sv": ONE_INTEGER_NO_FRACTION,
    "sw": ONE_INTEGER_NO_FRACTION,
    "syr": N_IS_ONE,
    "ta": N_IS_ONE,
    "te": N_IS_ONE,
    "teo": N_IS_ONE,
    "th": OTHER_ONLY,
    "ti": N_ZERO_TO_ONE,
    "tig": N_IS_ONE,
    "tk": N_IS_ONE,
    "tn": N_IS_ONE,
    "to": OTHER_ONLY,
    "tr": N_IS_ONE,
    "ts": N_IS_ONE,
    "tzm": ((ONE, lambda o: within(o.n, 0, 1) or within(o.n, 11, 99)),),
    "ug": N_IS_ONE,
    "uk": EAST_SLAVIC,
    "ur": ONE_INTEGER_NO_FRACTION,
    "uz": N_IS_ONE,
    "ve": N_IS_ONE,
    "vi": OTHER_ONLY,
    "vo": N_IS_ONE,
    "vun": N_IS_ONE,
    "wae": N_IS_ONE,
    "wo": OTHER_ONLY,
    "xh": N_IS_ONE,
    "xog": N_IS_ONE,
    "yi": ONE_INTEGER_NO_FRACTION,
    "yo": OTHER_ONLY,
    "zh": OTHER_ONLY,
    "zu": ZERO_INTEGER_OR_N_ONE,
}


BENGALI_ORDINALS: Tuple[PluralRule, ...] = (
    (ONE, lambda o: o.n in (1, 5, 7, 8, 9, 10)),
    (TWO, lambda o: o.n in (2, 3)),
    (FEW, lambda o: o.n == 4),
    (MANY, lambda o: o.n == 6),
)
HINDI_ORDINALS: Tuple[PluralRule, ...] = (
    (ONE, lambda o: o.n == 1),
    (TWO, lambda o: o.n in (2, 3)),
    (FEW, lambda o: o.n == 4),
    (MANY, lambda o: o.n == 6),
)
_KA_MANY = {40, 60, 80} | set(range(2, 21))
_KW_ONE = set(range(1, 5)) | set(range(21, 25)) | set(range(41, 45)) | set(range(61, 65)) | set(range(81, 85))


ORDINAL_RULES: Dict[str, Tuple[PluralRule, ...]] = {
    "af": OTHER_ONLY,
    "am": OTHER_ONLY,
    "ar": OTHER_ONLY,
    "as": BENGALI_ORDINALS,
    "az": (
        (ONE, lambda o: o.i % 10 in (1, 2, 5, 7, 8) or o.i % 100 in (20, 50, 70, 80)),
        (FEW, lambda o: o.i % 10 in (3, 4) or o.i % 1000 in (100, 200, 300, 400, 500, 600, 700, 800, 900)),
        (MANY, lambda o: o.i == 0 or o.i % 10 == 6 or o.i % 100 in (40, 60, 90)),
    ),
    "be": ((FEW, lambda o: o.n % 10 in (2, 3) and o.n % 100 not in (12, 13)),),
    "bg": OTHER_ONLY,
    "bn": BENGALI_ORDINALS,
    "bs": OTHER_ONLY,
    "ca": (
        (ONE, lambda o: o.n in (1, 3)),
        (TWO, lambda o: o.n == 2),
        (FEW, lambda o: o.n == 4),
    ),
    "ce": OTHER_ONLY,
    "cs": OTHER_ONLY,
    "cy": (
        (ZERO, lambda o: o.n in (0, 7, 8, 9)),
        (ONE, lambda o: o.n == 1),
        (TWO, lambda o: o.n == 2),
        (FEW, lambda o: o.n in (3, 4)),
        (MANY, lambda o: o.n in (5, 6)),
    ),
    "da": OTHER_ONLY,
    "de": OTHER_ONLY,
    "dsb": OTHER_ONLY,
    "el": OTHER_ONLY,
    "en": (
        (ONE, lambda o: o.n % 10 == 1 and o.n % 100 != 11),
        (TWO, lambda o: o.n % 10 == 2 and o.n % 100 != 12),
        (FEW, lambda o: o.n % 10 == 3 and o.n % 100 != 13),
    ),
    "es": OTHER_ONLY,
    "et": OTHER_ONLY,
    "eu": OTHER_ONLY,
    "fa": OTHER_ONLY,
    "fi": OTHER_ONLY,
    "fil": N_IS_ONE,
    "fr": N_IS_ONE,
    "fy": OTHER_ONLY,
    "ga": N_IS_ONE,
    "gd": (
        (ONE, lambda o: o.n in (1, 11)),
        (TWO, lambda o: o.n in (2, 12)),
        (FEW, lambda o: o.n in (3, 13)),
    ),
    "gl": OTHER_ONLY,
    "gsw": OTHER_ONLY,
    "gu": HINDI_ORDINALS,
    "he": OTHER_ONLY,
    "hi": HINDI_ORDINALS,
    "hr": OTHER_ONLY,
    "hsb": OTHER_ONLY,
    "hu": ((ONE, lambda o: o.n in (1, 5)),),
    "hy": N_IS_ONE,
    "ia": OTHER_ONLY,
    "id": OTHER_ONLY,
    "is": OTHER_ONLY,
    "it": ((MANY, lambda o: o.n in (11, 8, 80, 800)),),
    "ja": OTHER_ONLY,
    "ka": (
        (ONE, lambda o: o.i == 1),
        (MANY, lambda o: o.i == 0 or o.i % 100 in _KA_MANY),
    ),
    "kk": ((MANY, lambda o: o.n % 10 == 6 or o.n % 10 == 9 or (o.n % 10 == 0 and o.n != 0)),),
    "km": OTHER_ONLY,
    "kn": OTHER_ONLY,
    "ko": OTHER_ONLY,
    "kw": (
        (ONE, lambda o: within(o.n, 1, 4) or o.n % 100 in _KW_ONE),
        (MANY, lambda o: o.n == 5 or o.n % 100 == 5),
    ),
    "ky": OTHER_ONLY,
    "lo": N_IS_ONE,
    "lt": OTHER_ONLY,
    "lv": OTHER_ONLY,
    "mk": (
        (ONE, lambda o: o.i % 10 == 1 and o.i % 100 != 11),
        (TWO, lambda o: o.i % 10 == 2 and o.i % 100 != 12),
        (MANY, lambda o: o.i % 10 in (7, 8) and o.i % 100 not in (17, 18)),
    ),
    "ml": OTHER_ONLY,
    "mn": OTHER_ONLY,
    "mr": (
        (ONE, lambda o: o.n == 1),
        (TWO, lambda o: o.n in (2, 3)),
        (FEW, lambda o: o.n == 4),
    ),
    "ms": N_IS_ONE,
    "my": OTHER_ONLY,
    "nb": OTHER_ONLY,
    "ne": ((ONE, lambda o: within(o.n, 1, 4)),),
    "nl": OTHER_ONLY,
    "or": (
        (ONE, lambda o: o.n == o.i and o.n in (1, 5, 7, 8, 9)),
        (TWO, lambda o: o.n in (2, 3)),
        (FEW, lambda o: o.n == 4),
        (MANY, lambda o: o.n == 6),
    ),
    "pa": OTHER_ONLY,
    "pl": OTHER_ONLY,
    "prg": OTHER_ONLY,
    "ps": OTHER_ONLY,
    "pt": OTHER_ONLY,
    "ro": N_IS_ONE,
    "ru": OTHER_ONLY,
    "sd": OTHER_ONLY,
    "si": OTHER_ONLY,
    "sk": OTHER_ONLY,
    "sl": OTHER_ONLY,
    "sq": (
        (ONE, lambda o: o.n == 1),
        (MANY, lambda o: o.n % 10 == 4 and o.n % 100 != 14),
    ),
    "sr": OTHER_ONLY,
    "sv": ((ONE, lambda o: o.n % 10 in (1, 2) and o.n % 100 not in (11, 12)),),
    "sw": OTHER_ONLY,
    "ta": OTHER_ONLY,
    "te": OTHER_ONLY,
    "th": OTHER_ONLY,
    "tk": ((FEW, lambda o: o.n % 10 in (6, 9) or o.n == 10),),
    "tr": OTHER_ONLY,
    "uk": ((FEW, lambda o: o.n % 10 == 3 and o.n % 100 != 13),),
    "ur": OTHER_ONLY,
    "uz": OTHER_ONLY,
    "vi": N_IS_ONE,
    "zh": OTHER_ONLY,
    "zu": OTHER_ONLY,
}
