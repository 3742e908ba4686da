from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import InvalidIndex
from .reducers import BURUJ_BASE, ELEMENT_BASE, PLANET_BASE, mod_index


@dataclass(frozen=True)
class Element:
    index: int
    key: str
    name: str
    name_fr: str
    name_ar: str
    symbol: str
    qualities: str
    temperament: str


@dataclass(frozen=True)
class Verse:
    reference: str
    arabic: str
    transliteration: str


@dataclass(frozen=True)
class Burj:
    index: int
    name: str
    name_ar: str
    transliteration: str
    element: Element
    modality: str
    planet: str
    planet_ar: str
    blessed_day: str
    verse: Verse
    qualities: str


@dataclass(frozen=True)
class Planet:
    index: int
    name: str
    name_ar: str
    day: str
    element_key: str
    score: int
    flavor: str


ELEMENTS: Mapping[int, Element] = MappingProxyType({
    1: Element(
        1, "fire", "Fire", "Feu", "نار", "🔥",
        "Passionate, driven, courageous; leads with energy and initiative",
        "Hot & Dry (Choleric)",
    ),
    2: Element(
        2, "earth", "Earth", "Terre", "تراب", "🌍",
        "Grounded, patient, dependable; builds what lasts",
        "Cold & Dry (Melancholic)",
    ),
    3: Element(
        3, "air", "Air", "Air", "هواء", "💨",
        "Curious, communicative, adaptable; moves through ideas and people",
        "Hot & Moist (Sanguine)",
    ),
    4: Element(
        4, "water", "Water", "Eau", "ماء", "💧",
        "Intuitive, nurturing, deep; feels before it speaks",
        "Cold & Moist (Phlegmatic)",
    ),
})

ELEMENTS_BY_KEY: Mapping[str, Element] = MappingProxyType({e.key: e for e in ELEMENTS.values()})

DAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")

# One verse of al-Fatiha per day of the week.
DAY_VERSES: Mapping[str, Verse] = MappingProxyType({
    "Sunday": Verse("Al-Fatiha 1:2", "الْحَمْدُ لِلَّهِ رَبِّ الْعَالَمِينَ", "Al-hamdu lillahi rabbi l-'alamin"),
    "Monday": Verse("Al-Fatiha 1:3", "الرَّحْمَٰنِ الرَّحِيمِ", "Ar-Rahmani r-Rahim"),
    "Tuesday": Verse("Al-Fatiha 1:4", "مَالِكِ يَوْمِ الدِّينِ", "Maliki yawmi d-din"),
    "Wednesday": Verse("Al-Fatiha 1:5", "إِيَّاكَ نَعْبُدُ وَإِيَّاكَ نَسْتَعِينُ", "Iyyaka na'budu wa iyyaka nasta'in"),
    "Thursday": Verse("Al-Fatiha 1:6", "اهْدِنَا الصِّرَاطَ الْمُسْتَقِيمَ", "Ihdina s-sirata l-mustaqim"),
    "Friday": Verse("Al-Fatiha 1:7", "صِرَاطَ الَّذِينَ أَنْعَمْتَ عَلَيْهِمْ", "Sirata lladhina an'amta 'alayhim"),
    "Saturday": Verse(
        "Al-Fatiha 1:7",
        "غَيْرِ الْمَغْضُوبِ عَلَيْهِمْ وَلَا الضَّالِّينَ",
        "Ghayri l-maghdubi 'alayhim wa la d-dallin",
    ),
})


def _burj(
    index: int,
    name: str,
    name_ar: str,
    transliteration: str,
    modality: str,
    planet: str,
    planet_ar: str,
    blessed_day: str,
    qualities: str,
) -> Burj:
    return Burj(
        index=index,
        name=name,
        name_ar=name_ar,
        transliteration=transliteration,
        element=ELEMENTS[mod_index(index, ELEMENT_BASE)],
        modality=modality,
        planet=planet,
        planet_ar=planet_ar,
        blessed_day=blessed_day,
        verse=DAY_VERSES[blessed_day],
        qualities=qualities,
    )


# Blessed days are authored data: fire burūj take Sunday, earth Saturday,
# water Monday; the three air burūj each have their own day.
BURUJ: Mapping[int, Burj] = MappingProxyType({
    1: _burj(1, "Aries", "الحمل", "Al-Hamal", "Cardinal", "Mars", "المريخ", "Sunday",
             "Courage, pioneering spirit, leadership"),
    2: _burj(2, "Taurus", "الثور", "Al-Thawr", "Fixed", "Venus", "الزهرة", "Saturday",
             "Patience, perseverance, groundedness"),
    3: _burj(3, "Gemini", "الجوزاء", "Al-Jawza", "Mutable", "Mercury", "عطارد", "Wednesday",
             "Intellectual curiosity, adaptability, exchange"),
    4: _burj(4, "Cancer", "السرطان", "Al-Saratan", "Cardinal", "Moon", "القمر", "Monday",
             "Emotional depth, intuition, caring"),
    5: _burj(5, "Leo", "الأسد", "Al-Asad", "Fixed", "Sun", "الشمس", "Sunday",
             "Nobility, generosity, radiance"),
    6: _burj(6, "Virgo", "السنبلة", "Al-Sunbula", "Mutable", "Mercury", "عطارد", "Saturday",
             "Discernment, refinement, dedication"),
    7: _burj(7, "Libra", "الميزان", "Al-Mizan", "Cardinal", "Venus", "الزهرة", "Friday",
             "Justice, equilibrium, beauty"),
    8: _burj(8, "Scorpio", "العقرب", "Al-'Aqrab", "Fixed", "Mars", "المريخ", "Monday",
             "Intensity, regeneration, hidden wisdom"),
    9: _burj(9, "Sagittarius", "القوس", "Al-Qaws", "Mutable", "Jupiter", "المشتري", "Sunday",
             "Wisdom-seeking, optimism, faith"),
    10: _burj(10, "Capricorn", "الجدي", "Al-Jadi", "Cardinal", "Saturn", "زحل", "Saturday",
              "Mastery, responsibility, endurance"),
    11: _burj(11, "Aquarius", "الدلو", "Al-Dalw", "Fixed", "Saturn", "زحل", "Thursday",
              "Humanitarianism, vision, renewal"),
    12: _burj(12, "Pisces", "الحوت", "Al-Hut", "Mutable", "Jupiter", "المشتري", "Monday",
              "Mysticism, empathy, surrender of ego"),
})

# Planetary-hour order.
PLANETS: Mapping[int, Planet] = MappingProxyType({
    1: Planet(1, "Sun", "الشمس", "Sunday", "fire", 80,
              "A radiant bond: shared purpose and mutual encouragement, provided neither outshines the other."),
    2: Planet(2, "Moon", "القمر", "Monday", "water", 85,
              "A nurturing bond: emotional attunement and care, with moods that rise and fall together."),
    3: Planet(3, "Mars", "المريخ", "Tuesday", "fire", 55,
              "A spirited bond: strong drive and attraction, but quick tempers need patience."),
    4: Planet(4, "Mercury", "عطارد", "Wednesday", "air", 70,
              "A communicative bond: lively exchange of ideas; keep words kind and promises kept."),
    5: Planet(5, "Jupiter", "المشتري", "Thursday", "fire", 90,
              "An expansive bond: generosity, growth and blessing in shared endeavors."),
    6: Planet(6, "Venus", "الزهرة", "Friday", "earth", 95,
              "An affectionate bond: harmony, beauty and ease in each other's company."),
    7: Planet(7, "Saturn", "زحل", "Saturday", "earth", 50,
              "A testing bond: slow to warm, built on duty and endurance; strong if it weathers time."),
})

PLANETS_BY_NAME: Mapping[str, Planet] = MappingProxyType({p.name: p for p in PLANETS.values()})

# Natural planetary friendships and enmities.
PLANET_FRIENDS: Mapping[str, frozenset[str]] = MappingProxyType({
    "Sun": frozenset({"Moon", "Mars", "Jupiter"}),
    "Moon": frozenset({"Sun", "Mercury"}),
    "Mars": frozenset({"Sun", "Moon", "Jupiter"}),
    "Mercury": frozenset({"Sun", "Venus"}),
    "Jupiter": frozenset({"Sun", "Moon", "Mars"}),
    "Venus": frozenset({"Mercury", "Saturn"}),
    "Saturn": frozenset({"Mercury", "Venus"}),
})

PLANET_ENEMIES: Mapping[str, frozenset[str]] = MappingProxyType({
    "Sun": frozenset({"Venus", "Saturn"}),
    "Moon": frozenset(),
    "Mars": frozenset({"Mercury"}),
    "Mercury": frozenset({"Moon"}),
    "Jupiter": frozenset({"Mercury", "Venus"}),
    "Venus": frozenset({"Sun", "Moon"}),
    "Saturn": frozenset({"Sun", "Moon", "Mars"}),
})


def _lookup(table: Mapping[int, object], index: int, kind: str, base: int):
    if isinstance(index, bool) or not isinstance(index, int) or index not in table:
        raise InvalidIndex(f"{kind} index must be in 1..{base}, got {index!r}")
    return table[index]


def classify_element(index: int) -> Element:
    return _lookup(ELEMENTS, index, "element", ELEMENT_BASE)


def classify_buruj(index: int) -> Burj:
    return _lookup(BURUJ, index, "burj", BURUJ_BASE)


def classify_planet(index: int) -> Planet:
    return _lookup(PLANETS, index, "planet", PLANET_BASE)


def element_from_total(total: int) -> Element:
    return classify_element(mod_index(total, ELEMENT_BASE))


def burj_from_total(total: int) -> Burj:
    return classify_buruj(mod_index(total, BURUJ_BASE))


def planet_from_total(total: int) -> Planet:
    return classify_planet(mod_index(total, PLANET_BASE))


def buruj_by_element(element: Element) -> list[Burj]:
    return [b for b in BURUJ.values() if b.element == element]


def planet_relationship(a: str, b: str) -> str:
    """
    Relationship between two planets by natural friendship.

    "same", "friendly" (mutual), "one-sided", "tense" (either side hostile)
    or "neutral". Symmetric in its arguments.
    """
    if a == b:
        return "same"
    a_likes_b = b in PLANET_FRIENDS[a]
    b_likes_a = a in PLANET_FRIENDS[b]
    if a_likes_b and b_likes_a:
        return "friendly"
    if b in PLANET_ENEMIES[a] or a in PLANET_ENEMIES[b]:
        return "tense"
    if a_likes_b or b_likes_a:
        return "one-sided"
    return "neutral"
