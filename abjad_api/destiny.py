from __future__ import annotations

import logging
from dataclasses import dataclass

from .abjad import MAGHRIBI, LetterValue, breakdown
from .classification import Burj, Element, burj_from_total, element_from_total
from .errors import InvalidInput
from .normalize import NormalizationOptions, normalize
from .reducers import ELEMENT_BASE, SURAH_BASE, digital_root, mod_index
from .transliterate import to_arabic

logger = logging.getLogger(__name__)

QURAN_URL = "https://quran.com/{surah}"


@dataclass(frozen=True)
class QuranResonance:
    surah: int
    ayah_hint: int
    url: str


@dataclass(frozen=True)
class PersonalProfile:
    mother_name: str
    mother_arabic: str
    mother_total: int
    combined_total: int
    element: Element
    burj: Burj

    @property
    def blessed_day(self) -> str:
        return self.burj.blessed_day


@dataclass(frozen=True)
class NameDestiny:
    name: str
    arabic: str
    normalized: str
    letters: list[LetterValue]
    kabir: int
    saghir: int
    hadath: int
    element: Element
    burj: Burj
    quran: QuranResonance
    personal: PersonalProfile | None = None

    @property
    def divine_name_number(self) -> int:
        """Index of the Divine Name resonating with the name: its ṣaghīr."""
        return self.saghir


@dataclass(frozen=True)
class IstikharaProfile:
    name: str
    mother_name: str
    person_total: int
    mother_total: int
    combined_total: int
    burj: Burj
    repetition_count: int

    @property
    def element(self) -> Element:
        return self.burj.element

    @property
    def blessed_day(self) -> str:
        return self.burj.blessed_day


def _require(value: str | None, field_name: str, options: NormalizationOptions | None) -> str:
    if not value or not value.strip():
        raise InvalidInput(f"{field_name} is required", field=field_name)
    arabic = to_arabic(value.strip())
    if not normalize(arabic, options):
        raise InvalidInput(f"{field_name} has no letters with an abjad value", field=field_name)
    return arabic


def _sum(letters: list[LetterValue]) -> int:
    return sum(lv.value for lv in letters)


def analyze_name(
    name: str,
    mother_name: str | None = None,
    table=MAGHRIBI,
    options: NormalizationOptions | None = None,
) -> NameDestiny:
    """
    Name destiny: kabīr (total), ṣaghīr (digital root), ḥadath (element
    index), element, burj and a Quran surah resonance.

    With a mother's name, also the personal profile read from the combined
    total.
    """
    arabic = _require(name, "name", options)
    mother_arabic = _require(mother_name, "mother_name", options) if mother_name and mother_name.strip() else None

    letters = breakdown(arabic, table, options)
    kabir = _sum(letters)
    saghir = digital_root(kabir)

    personal = None
    if mother_arabic is not None:
        mother_total = _sum(breakdown(mother_arabic, table, options))
        combined = kabir + mother_total
        personal = PersonalProfile(
            mother_name=mother_name.strip(),
            mother_arabic=mother_arabic,
            mother_total=mother_total,
            combined_total=combined,
            element=element_from_total(combined),
            burj=burj_from_total(combined),
        )

    surah = mod_index(kabir, SURAH_BASE)
    result = NameDestiny(
        name=name.strip(),
        arabic=arabic,
        normalized=normalize(arabic, options),
        letters=letters,
        kabir=kabir,
        saghir=saghir,
        hadath=mod_index(kabir, ELEMENT_BASE),
        element=element_from_total(kabir),
        burj=burj_from_total(kabir),
        quran=QuranResonance(surah=surah, ayah_hint=saghir % 10 + 1, url=QURAN_URL.format(surah=surah)),
        personal=personal,
    )
    logger.debug("name destiny %r kabir=%s saghir=%s", result.normalized, kabir, saghir)
    return result


def istikhara(
    name: str,
    mother_name: str,
    table=MAGHRIBI,
    options: NormalizationOptions | None = None,
) -> IstikharaProfile:
    """Istikhara profile: the burj of the person's and mother's combined total."""
    arabic = _require(name, "name", options)
    mother_arabic = _require(mother_name, "mother_name", options)

    person_total = _sum(breakdown(arabic, table, options))
    mother_total = _sum(breakdown(mother_arabic, table, options))
    combined = person_total + mother_total
    return IstikharaProfile(
        name=name.strip(),
        mother_name=mother_name.strip(),
        person_total=person_total,
        mother_total=mother_total,
        combined_total=combined,
        burj=burj_from_total(combined),
        repetition_count=combined,
    )
