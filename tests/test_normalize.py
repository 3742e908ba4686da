import pytest

from abjad_api.errors import InvalidInput
from abjad_api.normalize import (
    CANONICAL_LETTERS,
    TA_MARBUTA,
    NormalizationOptions,
    has_arabic,
    normalize,
)

SAMPLES = [
    "مُحَمَّد",
    "فاطمة",
    "أحمد",
    "إبراهيم",
    "مصطفى",
    "محـــمد",
    "  عبد   الله  ",
    "ﷲ",
    "لا إله إلا الله",
    "پرویز",
    "abc محمد 123",
    "عائشة",
    "ٱلرَّحْمَٰن",
]


def test_strips_diacritics():
    assert normalize("مُحَمَّد") == "محمد"


def test_empty_input():
    assert normalize(None) == ""
    assert normalize("") == ""
    assert normalize("   ") == ""


def test_ta_marbuta_policy():
    assert normalize("فاطمة") == "فاطمه"
    assert normalize("فاطمة", NormalizationOptions(ta_marbuta_as=TA_MARBUTA)) == "فاطمة"


def test_invalid_ta_marbuta_policy():
    with pytest.raises(InvalidInput):
        NormalizationOptions(ta_marbuta_as="x")


def test_alif_and_hamza_forms_fold():
    assert normalize("أحمد") == "احمد"
    assert normalize("إبراهيم") == "ابراهيم"
    assert normalize("مؤمن") == "مومن"


def test_alif_forms_kept_when_not_unified():
    assert normalize("أحمد", NormalizationOptions(unify_alif=False)) == "أحمد"


def test_alif_maqsura_reads_as_ya():
    assert normalize("مصطفى") == "مصطفي"


def test_tatweel():
    assert normalize("محـــمد") == "محمد"


def test_allah_ligature():
    assert normalize("ﷲ") == "الله"


def test_regional_letters():
    assert normalize("پ") == "ب"
    assert normalize("گ") == "ك"
    assert normalize("ڤ") == "ف"


def test_space_policy():
    assert normalize("  عبد   الله  ") == "عبد الله"
    assert normalize("  عبد   الله  ", NormalizationOptions(keep_spaces=False)) == "عبدالله"


def test_non_arabic_dropped():
    assert normalize("abc محمد 123") == "محمد"


def test_default_output_alphabet():
    for s in SAMPLES:
        assert set(normalize(s)) <= CANONICAL_LETTERS | {" "}


@pytest.mark.parametrize(
    "options",
    [
        NormalizationOptions(),
        NormalizationOptions(ta_marbuta_as=TA_MARBUTA),
        NormalizationOptions(unify_alif=False),
        NormalizationOptions(strip_diacritics=False),
        NormalizationOptions(strip_diacritics=False, unify_alif=False),
        NormalizationOptions(keep_spaces=False, strip_tatweel=False),
        NormalizationOptions(normalize_allah=False),
    ],
)
def test_idempotent(options):
    for s in SAMPLES:
        once = normalize(s, options)
        assert normalize(once, options) == once


def test_has_arabic():
    assert has_arabic("محمد")
    assert has_arabic("Ali علي")
    assert not has_arabic("Ali")
    assert not has_arabic(None)
