import pytest

from abjad_api.classification import (
    BURUJ,
    DAYS,
    ELEMENTS,
    ELEMENTS_BY_KEY,
    PLANETS,
    burj_from_total,
    buruj_by_element,
    classify_buruj,
    classify_element,
    classify_planet,
    element_from_total,
    planet_from_total,
    planet_relationship,
)
from abjad_api.errors import InvalidIndex


def test_element_order():
    assert [classify_element(i).key for i in range(1, 5)] == ["fire", "earth", "air", "water"]


def test_burj_elements_cycle():
    for i in range(1, 13):
        assert classify_buruj(i).element == classify_element((i - 1) % 4 + 1)


def test_buruj_by_element():
    fire = ELEMENTS_BY_KEY["fire"]
    assert [b.name for b in buruj_by_element(fire)] == ["Aries", "Leo", "Sagittarius"]


def test_blessed_days_and_verses():
    for burj in BURUJ.values():
        assert burj.blessed_day in DAYS
        assert burj.verse.reference.startswith("Al-Fatiha")
    assert classify_buruj(1).blessed_day == "Sunday"
    assert classify_buruj(2).blessed_day == "Saturday"
    assert classify_buruj(4).blessed_day == "Monday"


def test_planets_in_hour_order():
    assert [classify_planet(i).name for i in range(1, 8)] == [
        "Sun", "Moon", "Mars", "Mercury", "Jupiter", "Venus", "Saturn",
    ]
    for planet in PLANETS.values():
        assert 0 <= planet.score <= 100


@pytest.mark.parametrize("bad", [0, 5, -1, True, "1", 1.0, None])
def test_element_index_out_of_range(bad):
    with pytest.raises(InvalidIndex):
        classify_element(bad)


def test_burj_and_planet_index_out_of_range():
    with pytest.raises(InvalidIndex):
        classify_buruj(13)
    with pytest.raises(InvalidIndex):
        classify_planet(0)


def test_from_total_uses_one_indexed_reduction():
    assert element_from_total(376).key == "water"
    assert element_from_total(92).key == "water"
    assert element_from_total(110).key == "earth"
    assert burj_from_total(12).name == "Pisces"
    assert burj_from_total(92).name == "Scorpio"
    assert planet_from_total(7).name == "Saturn"


def test_every_total_classifies():
    for n in range(0, 300):
        assert element_from_total(n) in ELEMENTS.values()
        assert burj_from_total(n) in BURUJ.values()
        assert planet_from_total(n) in PLANETS.values()


def test_planet_relationship_symmetric():
    names = [p.name for p in PLANETS.values()]
    for a in names:
        assert planet_relationship(a, a) == "same"
        for b in names:
            assert planet_relationship(a, b) == planet_relationship(b, a)


def test_planet_relationship_values():
    assert planet_relationship("Sun", "Jupiter") == "friendly"
    assert planet_relationship("Sun", "Saturn") == "tense"
