"""
Concrete Kanji kinds, one class per KanjiType.

Constructor arguments follow the field order of the base classes, see
kanji.base.Kanji properties for the meaning of each field.
"""

from typing import Iterable

from kanji.base import (
    Grade,
    JinmeiReason,
    Kanji,
    KanjiType,
    Kyu,
    Level,
    Linked,
    Numbered,
    Official,
    Other,
    Standard,
)


class JouyouKanji(Official, kanji_type=KanjiType.JOUYOU):
    """One of the 2,136 official Jōyō Kanji."""

    __slots__ = ("_grade",)

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, kyu: Kyu, number: int, level: Level,
                 frequency: int, year: int, grade: Grade,
                 old_names: Iterable[str] = ()):
        super().__init__(name, radical, strokes, meaning, reading, kyu, number,
                         level, frequency, year, old_names)
        if grade == Grade.NONE:
            raise self._error("must have a valid grade")
        self._grade = grade

    @property
    def grade(self) -> Grade:
        return self._grade


class JinmeiKanji(Official, kanji_type=KanjiType.JINMEI):
    """One of the 633 official Jinmeiyō Kanji."""

    __slots__ = ("_reason",)

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, kyu: Kyu, number: int, level: Level,
                 frequency: int, year: int, reason: JinmeiReason,
                 old_names: Iterable[str] = ()):
        super().__init__(name, radical, strokes, meaning, reading, kyu, number,
                         level, frequency, year, old_names)
        if reason == JinmeiReason.NONE:
            raise self._error("must have a valid reason")
        # Jinmei years start at 1951, only non-zero is enforced
        if year == 0:
            raise self._error("must have a valid year")
        self._reason = reason

    @property
    def reason(self) -> JinmeiReason:
        return self._reason


class LinkedJinmeiKanji(Linked, kanji_type=KanjiType.LINKED_JINMEI):
    """
    Official Jinmeiyō old/alternate form of a Jouyou or Jinmei Kanji.

    204 are Jouyou 'old names', 8 are other alternate forms of Jouyou Kanji
    and 18 are alternate forms of Jinmei Kanji.
    """

    __slots__ = ()

    def __init__(self, name: str, radical: str, strokes: int, link: Kanji,
                 frequency: int, kyu: Kyu):
        super().__init__(name, radical, strokes, link, frequency, kyu)
        if not isinstance(link, Official):
            raise self._error("link must be JouyouKanji or JinmeiKanji")


class LinkedOldKanji(Linked, kanji_type=KanjiType.LINKED_OLD):
    """Old Jōyō variant that isn't already a LinkedJinmeiKanji."""

    __slots__ = ()

    def __init__(self, name: str, radical: str, strokes: int, link: Kanji,
                 frequency: int, kyu: Kyu):
        super().__init__(name, radical, strokes, link, frequency, kyu)
        if not isinstance(link, JouyouKanji):
            raise self._error("link must be JouyouKanji")


class FrequencyKanji(Standard, kanji_type=KanjiType.FREQUENCY):
    """In the top 2,501 frequency list but not Jouyou or Jinmei."""

    __slots__ = ("_frequency",)

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, old_links: bool, link_names: Iterable[str],
                 linked_readings: bool, kyu: Kyu, frequency: int):
        super().__init__(name, radical, strokes, meaning, reading, old_links,
                         link_names, linked_readings, kyu)
        if frequency <= 0:
            raise self._error("frequency must be greater than zero")
        self._frequency = frequency

    @property
    def frequency(self) -> int:
        return self._frequency


class ExtraKanji(Numbered, kanji_type=KanjiType.EXTRA):
    """
    Manually selected 'fairly common' Kanji from 'extra.txt' that aren't
    in the official lists (or their variants) or the frequency list.
    """

    __slots__ = ("_new_name",)

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, kyu: Kyu, number: int, new_name: str = ""):
        super().__init__(name, radical, strokes, meaning, reading, kyu, number)
        self._new_name = new_name or None

    @property
    def new_name(self):
        return self._new_name


class KenteiKanji(Standard, kanji_type=KanjiType.KENTEI):
    """From 'kentei/*.txt' and not one of the types above."""

    __slots__ = ()

    def __init__(self, name: str, radical: str, strokes: int, meaning: str,
                 reading: str, old_links: bool, link_names: Iterable[str],
                 linked_readings: bool, kyu: Kyu):
        super().__init__(name, radical, strokes, meaning, reading, old_links,
                         link_names, linked_readings, kyu)
        if kyu == Kyu.NONE:
            raise self._error("must have a valid Kyu")


class UcdKanji(Other, kanji_type=KanjiType.UCD):
    """
    From 'ucd.txt' and not any other type. Many have a Morohashi ID, but
    some are only pulled in via links and may not have a Japanese reading.
    """

    __slots__ = ()
