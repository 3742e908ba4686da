"""
Relationship compatibility from two people's abjad totals.

Three base methods are always computed:

- spiritual/destiny: combined total reduced to one of 9 tiers
- elemental/temperament: each person's element compared in `ELEMENT_AFFINITY`
- planetary/cosmic: combined total reduced to one of 7 planetary rulers

When both mothers' names are given, the four-layer analysis adds four element
comparisons: daily life (each person's name + mother element), emotional
(mother vs mother) and a cross dynamic each way (one person's name vs the
other's mother). The overall score is a weighted sum whose weights live in
`CompatibilityWeights`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Mapping

from .abjad import AbjadSystem, get_table, total
from .classification import (
    ELEMENTS,
    Element,
    Planet,
    element_from_total,
    planet_from_total,
    planet_relationship,
)
from .errors import InvalidInput
from .normalize import NormalizationOptions, normalize
from .reducers import TIER_BASE, mod_index
from .transliterate import to_arabic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NameInput:
    name: str
    mother_name: str | None = None


@dataclass(frozen=True)
class CompatibilityWeights:
    """
    Weights of each method in the overall score.

    The base set applies when only the three base methods are available; the
    four-layer set applies when the four-layer analysis is available.
    Each set must be non-negative and sum to 1.
    """

    spiritual: float = 0.35
    elemental: float = 0.35
    planetary: float = 0.30

    four_layer_spiritual: float = 0.20
    four_layer_elemental: float = 0.15
    four_layer_planetary: float = 0.15
    four_layer_daily_life: float = 0.15
    four_layer_emotional: float = 0.15
    four_layer_cross_dynamic_a: float = 0.10
    four_layer_cross_dynamic_b: float = 0.10

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, (int, float)) or value < 0:
                raise InvalidInput(f"weight {f.name} must be a non-negative number", field=f.name)
        for label, weights in (("base", self.base()), ("four-layer", self.four_layer())):
            if not math.isclose(sum(weights.values()), 1.0, abs_tol=1e-9):
                raise InvalidInput(f"{label} weights must sum to 1, got {sum(weights.values())}", field="weights")

    def base(self) -> dict[str, float]:
        return {"spiritual": self.spiritual, "elemental": self.elemental, "planetary": self.planetary}

    def four_layer(self) -> dict[str, float]:
        return {
            "spiritual": self.four_layer_spiritual,
            "elemental": self.four_layer_elemental,
            "planetary": self.four_layer_planetary,
            "daily_life": self.four_layer_daily_life,
            "emotional": self.four_layer_emotional,
            "cross_dynamic_a": self.four_layer_cross_dynamic_a,
            "cross_dynamic_b": self.four_layer_cross_dynamic_b,
        }

    @classmethod
    def from_mapping(cls, data: Mapping[str, float]) -> "CompatibilityWeights":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise InvalidInput(f"unknown weight(s): {', '.join(sorted(unknown))}", field="weights")
        return cls(**{k: float(v) for k, v in data.items()})


DEFAULT_WEIGHTS = CompatibilityWeights()


@dataclass(frozen=True)
class CompatibilityOptions:
    system: AbjadSystem = AbjadSystem.MAGHRIBI
    normalization: NormalizationOptions | None = None
    weights: CompatibilityWeights = DEFAULT_WEIGHTS
    four_layer: bool = True


@dataclass(frozen=True)
class Affinity:
    relation: str
    score: int
    description: str


_AFFINITY_PAIRS: dict[frozenset[str], Affinity] = {
    frozenset({"fire"}): Affinity("harmonious", 90, "Both share enthusiasm, passion and drive."),
    frozenset({"earth"}): Affinity("harmonious", 90, "Both value stability, patience and tangible results."),
    frozenset({"air"}): Affinity("harmonious", 90, "A meeting of minds: easy conversation and shared ideas."),
    frozenset({"water"}): Affinity("harmonious", 90, "Deep emotional understanding and intuitive connection."),
    frozenset({"fire", "air"}): Affinity("complementary", 75, "Air feeds Fire with ideas; Fire gives Air direction."),
    frozenset({"earth", "water"}): Affinity("complementary", 75, "Earth offers security; Water brings nurture."),
    frozenset({"fire", "earth"}): Affinity("neutral", 60, "Fire energizes Earth and Earth grounds Fire, if neither overwhelms."),
    frozenset({"air", "water"}): Affinity("neutral", 60, "Air can feel detached while Water seeks depth; patience bridges them."),
    frozenset({"fire", "water"}): Affinity("opposing", 40, "Fire and Water clash: passion meets sensitivity, and each can quench the other."),
    frozenset({"air", "earth"}): Affinity("opposing", 40, "Air seeks freedom while Earth seeks form; expect friction over pace and plans."),
}

# Total over all 16 ordered pairs and symmetric by construction.
ELEMENT_AFFINITY: Mapping[tuple[str, str], Affinity] = MappingProxyType({
    (a.key, b.key): _AFFINITY_PAIRS[frozenset({a.key, b.key})]
    for a in ELEMENTS.values()
    for b in ELEMENTS.values()
})


def element_affinity(a: Element | str, b: Element | str) -> Affinity:
    a_key = a.key if isinstance(a, Element) else a
    b_key = b.key if isinstance(b, Element) else b
    try:
        return ELEMENT_AFFINITY[(a_key, b_key)]
    except KeyError:
        raise InvalidInput(f"unknown element pair ({a_key!r}, {b_key!r})") from None


@dataclass(frozen=True)
class DestinyTier:
    index: int
    name: str
    score: int
    description: str


SPIRITUAL_TIERS: Mapping[int, DestinyTier] = MappingProxyType({
    1: DestinyTier(1, "New beginnings", 75, "A bond that opens doors: each inspires the other to start afresh."),
    2: DestinyTier(2, "Harmonious partnership", 90, "Natural cooperation and balance; you complete each other's efforts."),
    3: DestinyTier(3, "Creative joy", 85, "Lightness and expression; laughter and shared creativity sustain you."),
    4: DestinyTier(4, "Steady foundation", 70, "Reliable and practical; love grows through routine and commitment."),
    5: DestinyTier(5, "Dynamic change", 60, "Restless and adventurous; keep a shared anchor amid constant movement."),
    6: DestinyTier(6, "Nurturing love", 95, "Care, family and devotion: a home-building bond."),
    7: DestinyTier(7, "Spiritual depth", 80, "A contemplative bond that grows through shared faith and reflection."),
    8: DestinyTier(8, "Worldly ambition", 55, "Strong in shared goals, but power and money need honest handling."),
    9: DestinyTier(9, "Completion and service", 65, "A giving bond, oriented to others; guard time for each other."),
})

LABELS: tuple[tuple[int, str, str], ...] = (
    (85, "highly compatible",
     "An exceptional match with strong compatibility across several dimensions, with excellent potential for harmony and mutual growth."),
    (70, "compatible",
     "A promising match with solid compatibility. Differences exist, but they can complement each other with mutual understanding."),
    (55, "workable with effort",
     "Moderate compatibility. Success will take effort, communication and a willingness to appreciate differences."),
    (0, "challenging",
     "Significant challenges. Not impossible, but it will take conscious effort, patience and deep commitment from both."),
)


@dataclass(frozen=True)
class PersonProfile:
    name: str
    arabic: str
    total: int
    element: Element
    planet: Planet
    mother_name: str | None = None
    mother_arabic: str | None = None
    mother_total: int | None = None
    mother_element: Element | None = None
    personal_element: Element | None = None


@dataclass(frozen=True)
class SpiritualDestiny:
    combined_total: int
    remainder: int
    tier: DestinyTier
    includes_mothers: bool

    @property
    def score(self) -> int:
        return self.tier.score


@dataclass(frozen=True)
class ElementalTemperament:
    elements: tuple[Element, Element]
    affinity: Affinity

    @property
    def score(self) -> int:
        return self.affinity.score


@dataclass(frozen=True)
class PlanetaryCosmic:
    combined_total: int
    ruler: Planet
    planets: tuple[Planet, Planet]
    relationship: str

    @property
    def score(self) -> int:
        return self.ruler.score


@dataclass(frozen=True)
class LayerComparison:
    """One element pairing of the four-layer analysis."""

    elements: tuple[Element, Element]
    affinity: Affinity

    @property
    def score(self) -> int:
        return self.affinity.score


def _compare(a: Element, b: Element) -> LayerComparison:
    return LayerComparison(elements=(a, b), affinity=element_affinity(a, b))


@dataclass(frozen=True)
class FourLayerAnalysis:
    available: bool
    reason: str | None = None
    daily_life: LayerComparison | None = None
    emotional: LayerComparison | None = None
    cross_dynamic_a: LayerComparison | None = None
    cross_dynamic_b: LayerComparison | None = None

    def scores(self) -> dict[str, int]:
        if not self.available:
            return {}
        return {
            "daily_life": self.daily_life.score,
            "emotional": self.emotional.score,
            "cross_dynamic_a": self.cross_dynamic_a.score,
            "cross_dynamic_b": self.cross_dynamic_b.score,
        }


@dataclass(frozen=True)
class CompatibilityResult:
    person_a: PersonProfile
    person_b: PersonProfile
    spiritual: SpiritualDestiny
    elemental: ElementalTemperament
    planetary: PlanetaryCosmic
    four_layer: FourLayerAnalysis
    weights: dict[str, float] = field(default_factory=dict)
    overall_score: int = 0
    label: str = ""
    recommendation: str = ""

    @property
    def four_layer_available(self) -> bool:
        return self.four_layer.available


def _present(value: str | None) -> bool:
    return bool(value and value.strip())


def _to_letters(value: str, field_name: str, options: CompatibilityOptions) -> str:
    arabic = to_arabic(value.strip())
    if not normalize(arabic, options.normalization):
        raise InvalidInput(f"{field_name} has no letters with an abjad value", field=field_name)
    return arabic


def _validate(person_a: NameInput, person_b: NameInput, options: CompatibilityOptions) -> dict[str, str]:
    """Resolve every name to Arabic script before anything is computed."""
    resolved: dict[str, str] = {}
    for label, person in (("person_a", person_a), ("person_b", person_b)):
        if person is None or not _present(person.name):
            raise InvalidInput(f"{label}.name is required", field=f"{label}.name")
        resolved[f"{label}.name"] = _to_letters(person.name, f"{label}.name", options)
        if _present(person.mother_name):
            field_name = f"{label}.mother_name"
            resolved[field_name] = _to_letters(person.mother_name, field_name, options)
    return resolved


def score_label(score: int) -> tuple[str, str]:
    for threshold, label, recommendation in LABELS:
        if score >= threshold:
            return label, recommendation
    raise InvalidInput(f"score must be in [0, 100], got {score}")


def weighted_score(scores: Mapping[str, int], weights: Mapping[str, float]) -> int:
    """Rounded weighted sum of per-method scores; every weighted method must be scored."""
    missing = set(weights) - set(scores)
    if missing:
        raise InvalidInput(f"missing score(s) for: {', '.join(sorted(missing))}")
    return int(round(sum(scores[k] * w for k, w in weights.items())))


def analyze_compatibility(
    person_a: NameInput,
    person_b: NameInput,
    options: CompatibilityOptions | None = None,
) -> CompatibilityResult:
    opts = options or CompatibilityOptions()
    resolved = _validate(person_a, person_b, opts)
    table = get_table(opts.system)

    def _total(key: str) -> int:
        return total(resolved[key], table, opts.normalization)

    has_mothers = "person_a.mother_name" in resolved and "person_b.mother_name" in resolved
    four_layer = opts.four_layer and has_mothers

    profiles: list[PersonProfile] = []
    for label, person in (("person_a", person_a), ("person_b", person_b)):
        name_total = _total(f"{label}.name")
        mother_key = f"{label}.mother_name"
        mother_total = _total(mother_key) if mother_key in resolved else None
        profiles.append(
            PersonProfile(
                name=person.name.strip(),
                arabic=resolved[f"{label}.name"],
                total=name_total,
                element=element_from_total(name_total),
                planet=planet_from_total(name_total),
                mother_name=person.mother_name.strip() if mother_key in resolved else None,
                mother_arabic=resolved.get(mother_key),
                mother_total=mother_total,
                mother_element=element_from_total(mother_total) if mother_total is not None else None,
                personal_element=(
                    element_from_total(name_total + mother_total) if mother_total is not None else None
                ),
            )
        )
    a, b = profiles

    combined = a.total + b.total
    if four_layer:
        combined += a.mother_total + b.mother_total

    remainder = mod_index(combined, TIER_BASE)
    spiritual = SpiritualDestiny(
        combined_total=combined,
        remainder=remainder,
        tier=SPIRITUAL_TIERS[remainder],
        includes_mothers=four_layer,
    )
    elemental = ElementalTemperament(
        elements=(a.element, b.element),
        affinity=element_affinity(a.element, b.element),
    )
    planetary = PlanetaryCosmic(
        combined_total=combined,
        ruler=planet_from_total(combined),
        planets=(a.planet, b.planet),
        relationship=planet_relationship(a.planet.name, b.planet.name),
    )

    if four_layer:
        layers = FourLayerAnalysis(
            available=True,
            daily_life=_compare(a.personal_element, b.personal_element),
            emotional=_compare(a.mother_element, b.mother_element),
            cross_dynamic_a=_compare(a.element, b.mother_element),
            cross_dynamic_b=_compare(b.element, a.mother_element),
        )
        weights = opts.weights.four_layer()
    else:
        reason = (
            "Four-layer analysis was not requested"
            if not opts.four_layer
            else "Both mothers' names are required for the four-layer analysis"
        )
        layers = FourLayerAnalysis(available=False, reason=reason)
        weights = opts.weights.base()

    scores = {"spiritual": spiritual.score, "elemental": elemental.score, "planetary": planetary.score}
    scores.update(layers.scores())
    overall = weighted_score(scores, weights)
    label, recommendation = score_label(overall)

    logger.debug(
        "compatibility totals=%s/%s combined=%s scores=%s overall=%s",
        a.total, b.total, combined, scores, overall,
    )
    return CompatibilityResult(
        person_a=a,
        person_b=b,
        spiritual=spiritual,
        elemental=elemental,
        planetary=planetary,
        four_layer=layers,
        weights=weights,
        overall_score=overall,
        label=label,
        recommendation=recommendation,
    )
