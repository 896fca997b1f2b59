"""
Kanji base class — the closed hierarchy of Kanji kinds.

Every kind exposes the full field set so any Kanji can be inspected
without knowing its concrete class. Fields that don't apply to a kind
return a sentinel: 0 for numbers, the NONE member for enums, an empty
tuple for old_names and None for new_name/link.

    Kanji
    ├── Loaded       meaning/reading stored on the instance
    │   ├── Numbered     kyu + number (from customized local files)
    │   │   ├── Official     level, frequency, year, old names
    │   │   │   ├── JouyouKanji
    │   │   │   └── JinmeiKanji
    │   │   └── ExtraKanji
    │   └── Other        old/new link names (mainly from 'ucd.txt')
    │       ├── Standard     kyu
    │       │   ├── FrequencyKanji
    │       │   └── KenteiKanji
    │       └── UcdKanji
    └── Linked       meaning/reading/new_name delegated to an Official link
        ├── LinkedJinmeiKanji
        └── LinkedOldKanji

Concrete kinds declare their KanjiType in the class statement:

    class JouyouKanji(Official, kanji_type=KanjiType.JOUYOU):
        ...

Each KanjiType can be claimed by exactly one class.
"""

import json
from abc import ABC, abstractmethod
from enum import Enum
from typing import Iterable, Optional

from kanji.errors import DomainError


class _NamedEnum(str, Enum):
    """Enum whose values are the names used in data files."""

    @classmethod
    def from_name(cls, name: str):
        """Parse *name* ('' maps to NONE when the enum has one)."""
        if name == "" and "NONE" in cls.__members__:
            return cls.NONE
        try:
            return cls(name)
        except ValueError:
            raise DomainError(
                f"unrecognized {cls.__name__} '{name}'") from None

    def __str__(self):
        return self.value


class KanjiType(_NamedEnum):
    """Which group a Kanji belongs to (unique for each concrete class)."""
    JOUYOU = "Jouyou"               # 2,136 official Jōyō (常用) Kanji
    JINMEI = "Jinmei"               # 633 official Jinmeiyō (人名用) Kanji
    LINKED_JINMEI = "LinkedJinmei"  # 230 old/variant forms of Jouyou/Jinmei
    LINKED_OLD = "LinkedOld"        # 163 old Jouyou forms not in LinkedJinmei
    FREQUENCY = "Frequency"         # top 2,501 list but none of the above
    EXTRA = "Extra"                 # 'extra.txt'
    KENTEI = "Kentei"               # 'kentei/*.txt' and none of the above
    UCD = "Ucd"                     # 'ucd.txt' and none of the above


class Grade(_NamedEnum):
    """Official school grade (S = secondary school)."""
    G1 = "G1"
    G2 = "G2"
    G3 = "G3"
    G4 = "G4"
    G5 = "G5"
    G6 = "G6"
    S = "S"
    NONE = "None"


class Level(_NamedEnum):
    """JLPT (Japanese Language Proficiency Test) level."""
    N5 = "N5"
    N4 = "N4"
    N3 = "N3"
    N2 = "N2"
    N1 = "N1"
    NONE = "None"


class Kyu(_NamedEnum):
    """Kanji Kentei (漢字検定) Kyū (級), KJ = Jun (準)."""
    K10 = "K10"
    K9 = "K9"
    K8 = "K8"
    K7 = "K7"
    K6 = "K6"
    K5 = "K5"
    K4 = "K4"
    K3 = "K3"
    KJ2 = "KJ2"
    K2 = "K2"
    KJ1 = "KJ1"
    K1 = "K1"
    NONE = "None"


class JinmeiReason(_NamedEnum):
    """Official reason a Kanji was added to the Jinmeiyō list."""
    NAMES = "Names"      # for use in names
    PRINT = "Print"      # for use in publications
    VARIANT = "Variant"  # allowed variant form (異体字)
    MOVED = "Moved"      # moved out of Jouyou into Jinmei
    SIMPLE = "Simple"    # simplified (表外漢字字体表の簡易慣用字体)
    OTHER = "Other"      # reason listed as その他
    NONE = "None"


class Kanji(ABC):
    """
    Abstract base for every Kanji kind.

    Instances are immutable: all fields are validated once in __init__
    and exposed through read-only properties.
    """

    __slots__ = ("_name", "_radical", "_strokes")

    _kanji_type: Optional[KanjiType] = None
    _kinds: dict = {}  # KanjiType → concrete class

    def __init_subclass__(cls, kanji_type: Optional[KanjiType] = None,
                          **kwargs):
        super().__init_subclass__(**kwargs)
        if kanji_type is None:
            return
        existing = Kanji._kinds.get(kanji_type)
        if existing is not None:
            raise TypeError(
                f"{cls.__name__}: type '{kanji_type}' is already used by "
                f"{existing.__name__}")
        cls._kanji_type = kanji_type
        Kanji._kinds[kanji_type] = cls

    @staticmethod
    def kind_for(kanji_type: KanjiType) -> type:
        """Return the concrete class for *kanji_type*."""
        return Kanji._kinds[kanji_type]

    def __init__(self, name: str, radical: str, strokes: int):
        if not name:
            raise self._error("name can't be empty")
        if not radical:
            raise self._error("radical can't be empty")
        if strokes <= 0:
            raise self._error("strokes must be greater than zero")
        self._name = name
        self._radical = radical
        self._strokes = strokes

    def _error(self, msg: str) -> DomainError:
        return DomainError(f"{type(self).__name__}: {msg}")

    # ── Fields every Kanji has ────────────────────────────────────

    @property
    def type(self) -> KanjiType:
        return self._kanji_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def radical(self) -> str:
        return self._radical

    @property
    def strokes(self) -> int:
        return self._strokes

    @property
    @abstractmethod
    def meaning(self) -> str:
        """Comma-separated English meanings (can be empty for 'Other')."""

    @property
    @abstractmethod
    def reading(self) -> str:
        """On readings in Katakana followed by Kun readings in Hiragana."""

    # ── Optional fields (defaults are 'not applicable' sentinels) ─

    @property
    def frequency(self) -> int:
        """1 is most frequent, 0 means not in the top 2,501 list."""
        return 0

    @property
    def year(self) -> int:
        """Year added to an official list, 0 means not specified."""
        return 0

    @property
    def grade(self) -> Grade:
        return Grade.NONE

    @property
    def level(self) -> Level:
        return Level.NONE

    @property
    def kyu(self) -> Kyu:
        return Kyu.NONE

    @property
    def reason(self) -> JinmeiReason:
        return JinmeiReason.NONE

    @property
    def number(self) -> int:
        return 0

    @property
    def old_names(self) -> tuple:
        return ()

    @property
    def new_name(self) -> Optional[str]:
        return None

    @property
    def link(self) -> Optional["Official"]:
        return None

    @property
    def has_linked_readings(self) -> bool:
        """True if the readings came from a link rather than the data."""
        return False

    # ── Inspection ────────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Return every field, enums as names and the link as its name."""
        return {
            "type": self.type.value,
            "name": self.name,
            "radical": self.radical,
            "strokes": self.strokes,
            "meaning": self.meaning,
            "reading": self.reading,
            "frequency": self.frequency,
            "year": self.year,
            "grade": self.grade.value,
            "level": self.level.value,
            "kyu": self.kyu.value,
            "reason": self.reason.value,
            "number": self.number,
            "old_names": list(self.old_names),
            "new_name": self.new_name,
            "link": self.link.name if self.link is not None else None,
            "linked_readings": self.has_linked_readings,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"{type(self).__name__}({self._name!r})"


# ── Abstract groups ───────────────────────────────────────────────


class Loaded(Kanji):
    """Has 'meaning' and 'reading' loaded directly from data."""

    __slots__ = ("_meaning", "_reading")

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str):
        super().__init__(name, radical, strokes)
        self._meaning = meaning
        self._reading = reading

    @property
    def meaning(self) -> str:
        return self._meaning

    @property
    def reading(self) -> str:
        return self._reading


class Linked(Kanji):
    """
    Official old/alternate form of an Official Kanji.

    meaning, reading and new_name come from the link. frequency and kyu
    belong to the variant itself since they usually differ from the link.
    """

    __slots__ = ("_link", "_frequency", "_kyu")

    def __init__(self, name: str, radical: str, strokes: int, link: Kanji,
                 frequency: int, kyu: Kyu):
        super().__init__(name, radical, strokes)
        self._link = link
        self._frequency = frequency
        self._kyu = kyu

    @property
    def meaning(self) -> str:
        return self._link.meaning

    @property
    def reading(self) -> str:
        return self._link.reading

    @property
    def new_name(self) -> Optional[str]:
        return self._link.name

    @property
    def link(self) -> "Official":
        return self._link

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def kyu(self) -> Kyu:
        return self._kyu

    @property
    def has_linked_readings(self) -> bool:
        return True


class Numbered(Loaded):
    """Has 'kyu' and a positive 'number' from a customized local file."""

    __slots__ = ("_kyu", "_number")

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, kyu: Kyu, number: int):
        super().__init__(name, radical, strokes, meaning, reading)
        if number <= 0:
            raise self._error("number must be greater than zero")
        self._kyu = kyu
        self._number = number

    @property
    def kyu(self) -> Kyu:
        return self._kyu

    @property
    def number(self) -> int:
        return self._number


class Official(Numbered):
    """Jouyou or Jinmei: adds level (can be NONE), frequency and year."""

    __slots__ = ("_level", "_frequency", "_year", "_old_names")

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, kyu: Kyu, number: int, level: Level,
                 frequency: int, year: int, old_names: Iterable[str] = ()):
        super().__init__(name, radical, strokes, meaning, reading, kyu, number)
        self._level = level
        self._frequency = frequency
        self._year = year
        self._old_names = tuple(old_names)

    @property
    def level(self) -> Level:
        return self._level

    @property
    def frequency(self) -> int:
        return self._frequency

    @property
    def year(self) -> int:
        return self._year

    @property
    def old_names(self) -> tuple:
        return self._old_names


class Other(Loaded):
    """
    Kanji mainly loaded from 'ucd.txt'.

    *link_names* are 'Traditional' links when *old_links* is set (exposed
    as old_names), otherwise 'Simplified' links where only the first one
    is used as new_name.
    """

    __slots__ = ("_old_links", "_link_names", "_linked_readings")

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, old_links: bool, link_names: Iterable[str],
                 linked_readings: bool):
        super().__init__(name, radical, strokes, meaning, reading)
        self._old_links = old_links
        self._link_names = tuple(link_names)
        self._linked_readings = linked_readings

    @property
    def old_names(self) -> tuple:
        return self._link_names if self._old_links else ()

    @property
    def new_name(self) -> Optional[str]:
        if self._old_links or not self._link_names:
            return None
        return self._link_names[0]

    @property
    def has_linked_readings(self) -> bool:
        return self._linked_readings


class Standard(Other):
    """Adds 'kyu' to Other (base of Frequency and Kentei Kanji)."""

    __slots__ = ("_kyu",)

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, old_links: bool, link_names: Iterable[str],
                 linked_readings: bool, kyu: Kyu):
        super().__init__(name, radical, strokes, meaning, reading, old_links,
                         link_names, linked_readings)
        self._kyu = kyu

    @property
    def kyu(self) -> Kyu:
        return self._kyu
