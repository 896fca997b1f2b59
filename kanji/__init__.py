"""
Japanese Kanji taxonomy plus the column-file reader used to load it.

Official (Jouyou, Jinmei) Kanji are built first, then Linked Kanji are
built against them. Loaded kinds (Frequency, Extra, Kentei, Ucd) are
built directly from parsed values.
"""

from kanji.errors import DomainError
from kanji.base import (
    Grade,
    JinmeiReason,
    Kanji,
    KanjiType,
    Kyu,
    Level,
    Linked,
    Loaded,
    Numbered,
    Official,
    Other,
    Standard,
)
from kanji.models import (
    ExtraKanji,
    FrequencyKanji,
    JinmeiKanji,
    JouyouKanji,
    KenteiKanji,
    LinkedJinmeiKanji,
    LinkedOldKanji,
    UcdKanji,
)

__all__ = [
    "DomainError",
    "ExtraKanji",
    "FrequencyKanji",
    "Grade",
    "JinmeiKanji",
    "JinmeiReason",
    "JouyouKanji",
    "Kanji",
    "KanjiType",
    "KenteiKanji",
    "Kyu",
    "Level",
    "Linked",
    "LinkedJinmeiKanji",
    "LinkedOldKanji",
    "Loaded",
    "Numbered",
    "Official",
    "Other",
    "Standard",
    "UcdKanji",
]
