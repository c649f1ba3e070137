"""
kurdcal.culture
---------------
Month and weekday names for Sorani, Kurmanji and Hawrami in Latin and
Arabic script, plus digit rendering and text direction.

Sorani and Kurmanji share the Sorani month names; Hawrami has its own.
The four *-gregorian-* dialects carry the Kurdish names of the Gregorian
months (Kanûnî Duhem, Şubat, Adar, ...) and borrow the weekday names of
their base dialect.
Weekday tables start on Sunday (Weekday.SUNDAY == 0).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Literal, Tuple

from .core.errors import OutOfRangeError

Direction = Literal["ltr", "rtl"]


class Dialect(str, Enum):
    SORANI_LATIN = "sorani-latin"
    SORANI_ARABIC = "sorani-arabic"
    KURMANJI_LATIN = "kurmanji-latin"
    KURMANJI_ARABIC = "kurmanji-arabic"
    HAWRAMI_LATIN = "hawrami-latin"
    HAWRAMI_ARABIC = "hawrami-arabic"
    SORANI_GREGORIAN_LATIN = "sorani-gregorian-latin"
    SORANI_GREGORIAN_ARABIC = "sorani-gregorian-arabic"
    KURMANJI_GREGORIAN_LATIN = "kurmanji-gregorian-latin"
    KURMANJI_GREGORIAN_ARABIC = "kurmanji-gregorian-arabic"

    @property
    def is_arabic_script(self) -> bool:
        return self.value.endswith("-arabic")

    @property
    def is_gregorian(self) -> bool:
        """Month names are those of the Gregorian months."""
        return "-gregorian-" in self.value

    @property
    def direction(self) -> Direction:
        return "rtl" if self.is_arabic_script else "ltr"

    @classmethod
    def parse(cls, value: "Dialect | str") -> "Dialect":
        if isinstance(value, Dialect):
            return value
        key = value.strip().lower().replace("_", "-")
        for d in cls:
            if d.value == key:
                return d
        raise ValueError(f"Unknown dialect '{value}'. Available: {[d.value for d in cls]}")


DEFAULT_DIALECT = Dialect.SORANI_LATIN


@dataclass(frozen=True)
class NameTable:
    full: Tuple[str, ...]
    abbreviated: Tuple[str, ...]


_SORANI_MONTHS_LATIN = NameTable(
    ("Xakelêwe", "Gulan", "Cozerdan", "Pûşper", "Gelawêj", "Xermanan",
     "Rezber", "Gelarêzan", "Sermawez", "Befranbar", "Rêbendan", "Reşeme"),
    ("Xak", "Gul", "Coz", "Pûş", "Gel", "Xer", "Rez", "Gea", "Ser", "Bef", "Rêb", "Reş"),
)

_SORANI_MONTHS_ARABIC = NameTable(
    ("خاکەلێوە", "گوڵان", "جۆزەردان", "پووشپەڕ", "گەلاوێژ", "خەرمانان",
     "ڕەزبەر", "گەڵاڕێزان", "سەرماوەز", "بەفرانبار", "ڕێبەندان", "ڕەشەمە"),
    ("خاک", "گوڵ", "جۆز", "پوش", "گەل", "خەر", "ڕەز", "گەڵ", "سەر", "بەف", "ڕێب", "ڕەش"),
)

MONTH_NAMES: Dict[Dialect, NameTable] = {
    Dialect.SORANI_LATIN: _SORANI_MONTHS_LATIN,
    Dialect.SORANI_ARABIC: _SORANI_MONTHS_ARABIC,
    Dialect.KURMANJI_LATIN: _SORANI_MONTHS_LATIN,
    Dialect.KURMANJI_ARABIC: _SORANI_MONTHS_ARABIC,
    Dialect.HAWRAMI_LATIN: NameTable(
        ("Newroz", "Pajerej", "Çêlkirr", "Kopir", "Gelawêj", "Awewere",
         "Tarazî", "Gellaxezan", "Kelleherz", "Arga", "Rabrân", "Siyawkam"),
        ("New", "Paj", "Çêl", "Kop", "Gel1", "Awe", "Tar", "Gel2", "Kel", "Arg", "Rab", "Siy"),
    ),
    Dialect.HAWRAMI_ARABIC: NameTable(
        ("نەورۆز", "پاژەرەژ", "چێڵکڕ", "کۆپڕ", "گەلاوێژ", "ئاوەوەرە",
         "ترازیێ", "گەڵاخەزان", "کەڵەهەرز", "ئارگا", "ڕابڕان", "سیاوکام"),
        ("نەو", "پاژ", "چێڵ", "کۆپ", "گەل١", "ئاو", "ترا", "گەڵ٢", "کەڵ", "ئار", "ڕاب", "سیا"),
    ),
    # January .. December
    Dialect.SORANI_GREGORIAN_LATIN: NameTable(
        ("Kanûnî Duhem", "Şubat", "Adar", "Nîsan", "Ayar", "Hûzeyran",
         "Temmûz", "Ab", "Eylûl", "Tişrînî Yekem", "Tişrînî Duhem", "Kanûnî Yekem"),
        ("Kan2", "Şub", "Ada", "Nîs", "Aya", "Hûz", "Tem", "Ab", "Eyl", "Tiş1", "Tiş2", "Kan1"),
    ),
    Dialect.SORANI_GREGORIAN_ARABIC: NameTable(
        ("كانونى دووەم", "شوبات", "ئادار", "نيسان", "ئايار", "حوزەيران",
         "تەمووز", "ئاب", "ئەيلول", "تشرينى يەكەم", "تشرينى دووەم", "كانونى يەكەم"),
        ("كان٢", "شوب", "ئادا", "نيس", "ئاي", "حوز", "تەم", "ئاب", "ئەي", "تشر١", "تشر٢", "كان١"),
    ),
    Dialect.KURMANJI_GREGORIAN_LATIN: NameTable(
        ("Kanûna Duyê", "Şubat", "Adar", "Nîsan", "Gulan", "Hezîran",
         "Tîrmeh", "Tebax", "Eylûl", "Çiriya Êkê", "Çiriya Duyê", "Kanûna Êkê"),
        ("Kan Duy", "Şub", "Ada", "Nîs", "Gul", "Hez", "Tîr", "Teb", "Eyl", "Çir Êk", "Çir Duy", "Kan Êk"),
    ),
    Dialect.KURMANJI_GREGORIAN_ARABIC: NameTable(
        ("کانوونا دویێ", "شوبات", "ئادار", "نیسان", "گولان", "حەزیران",
         "تیرمەه", "تەباخ", "ئەیلوول", "چریا ێکێ", "چریا دویێ", "کانوونا ێکێ"),
        ("کان دوی", "شوب", "ئادا", "نیس", "گول", "حەز", "تیر", "تەب", "ئەیل", "چر ێک", "چر دوی", "کان ێک"),
    ),
}

# Sunday .. Saturday
DAY_NAMES: Dict[Dialect, NameTable] = {
    Dialect.SORANI_LATIN: NameTable(
        ("Yekşemme", "Duşemme", "Sêşemme", "Çwarşemme", "Pêncşemme", "Hênî", "Şemme"),
        ("Yek", "Du", "Sê", "Çwa", "Pên", "Hên", "Şem"),
    ),
    Dialect.SORANI_ARABIC: NameTable(
        ("یەکشەممە", "دووشەممە", "سێشەممە", "چوارشەممە", "پێنجشەممە", "هەینی", "شەممە"),
        ("یەک", "دوو", "سێ", "چوا", "پێن", "هەین", "شەم"),
    ),
    Dialect.KURMANJI_LATIN: NameTable(
        ("Yekşem", "Duşem", "Sêşem", "Çarşem", "Pêncşem", "În", "Şemî"),
        ("Yek", "Du", "Sê", "Çar", "Pên", "În", "Şem"),
    ),
    Dialect.KURMANJI_ARABIC: NameTable(
        ("یەکشەم", "دووشەم", "سێشەم", "چارشەم", "پێنجشەم", "ئین", "شەمی"),
        ("یەک", "دوو", "سێ", "چار", "پێن", "ئین", "شەم"),
    ),
    # MacKenzie, The Dialect of Awroman (1966), §13
    Dialect.HAWRAMI_LATIN: NameTable(
        ("Yekşem", "Duşem", "Sêşem", "Çwarşem", "Pêncşem", "Hellîne", "Şeme"),
        ("Yek", "Du", "Sê", "Çwa", "Pên", "Hel", "Şem"),
    ),
    Dialect.HAWRAMI_ARABIC: NameTable(
        ("یەکشەم", "دووشەم", "سێشەم", "چوارشەم", "پێنجشەم", "هەڵڵینە", "شەمی"),
        ("یەک", "دوو", "سێ", "چوا", "پێن", "ھەڵ", "شەم"),
    ),
}
DAY_NAMES[Dialect.SORANI_GREGORIAN_LATIN] = DAY_NAMES[Dialect.SORANI_LATIN]
DAY_NAMES[Dialect.SORANI_GREGORIAN_ARABIC] = DAY_NAMES[Dialect.SORANI_ARABIC]
DAY_NAMES[Dialect.KURMANJI_GREGORIAN_LATIN] = DAY_NAMES[Dialect.KURMANJI_LATIN]
DAY_NAMES[Dialect.KURMANJI_GREGORIAN_ARABIC] = DAY_NAMES[Dialect.KURMANJI_ARABIC]

_ARABIC_INDIC_ZERO = 0x0660
_TO_ARABIC_INDIC = {ord("0") + i: chr(_ARABIC_INDIC_ZERO + i) for i in range(10)}
# Arabic-Indic and Extended Arabic-Indic (Persian) digits
_FROM_EASTERN = {base + i: str(i) for base in (_ARABIC_INDIC_ZERO, 0x06F0) for i in range(10)}


def month_name(month: int, dialect: Dialect | str = DEFAULT_DIALECT, *, abbreviated: bool = False) -> str:
    if not (1 <= month <= 12):
        raise OutOfRangeError(f"month must be in 1..12, got {month}")
    table = MONTH_NAMES[Dialect.parse(dialect)]
    return (table.abbreviated if abbreviated else table.full)[month - 1]


def day_name(weekday: int, dialect: Dialect | str = DEFAULT_DIALECT, *, abbreviated: bool = False) -> str:
    """Weekday name; `weekday` counts from Sunday = 0."""
    if not (0 <= weekday <= 6):
        raise OutOfRangeError(f"weekday must be in 0..6, got {weekday}")
    table = DAY_NAMES[Dialect.parse(dialect)]
    return (table.abbreviated if abbreviated else table.full)[weekday]


def format_number(n: int, dialect: Dialect | str = DEFAULT_DIALECT, *, width: int = 0) -> str:
    """Decimal digits, Arabic-Indic (U+0660..U+0669) for Arabic-script dialects."""
    s = str(n).zfill(width) if n >= 0 else "-" + str(-n).zfill(width)
    if Dialect.parse(dialect).is_arabic_script:
        return s.translate(_TO_ARABIC_INDIC)
    return s


def normalize_digits(text: str) -> str:
    """Map Arabic-Indic and Persian digits to ASCII."""
    return text.translate(_FROM_EASTERN)
