import pytest

from abjad_api.abjad import (
    MAGHRIBI,
    MASHRIQI,
    AbjadSystem,
    LetterValue,
    breakdown,
    get_table,
    total,
)
from abjad_api.errors import InvalidInput
from abjad_api.normalize import CANONICAL_LETTERS, TA_MARBUTA, NormalizationOptions


def test_muhammad():
    assert total("محمد", MAGHRIBI) == 92
    assert total("مُحَمَّد") == 92


def test_known_totals():
    assert total("علي") == 110
    assert total("الله") == 66
    assert total("ﷲ") == 66
    assert total("فاطمة") == 135


def test_ta_marbuta_counts_as_ta_when_kept():
    assert total("فاطمة", options=NormalizationOptions(ta_marbuta_as=TA_MARBUTA)) == 530


def test_empty_total_is_zero():
    assert total("") == 0
    assert total(None) == 0
    assert breakdown("") == []


def test_breakdown_skips_spaces():
    letters = breakdown("عبد الله")
    assert [lv.letter for lv in letters] == list("عبدالله")
    assert sum(lv.value for lv in letters) == total("عبد الله")
    assert letters[0] == LetterValue("ع", 70)


def test_tables_cover_all_letters():
    for table in (MAGHRIBI, MASHRIQI):
        assert CANONICAL_LETTERS <= set(table)


def test_tables_differ_only_on_three_letters():
    diff = {ch for ch in MAGHRIBI if MAGHRIBI[ch] != MASHRIQI[ch]}
    assert diff == {"ض", "ظ", "غ"}
    assert (MAGHRIBI["ض"], MAGHRIBI["ظ"], MAGHRIBI["غ"]) == (800, 900, 1000)
    assert (MASHRIQI["ض"], MASHRIQI["ظ"], MASHRIQI["غ"]) == (900, 1000, 800)


def test_convention_changes_total():
    assert total("غفور", MAGHRIBI) == 1286
    assert total("غفور", MASHRIQI) == 1086


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        MAGHRIBI["ا"] = 2


def test_get_table():
    assert get_table("maghribi") is MAGHRIBI
    assert get_table(" MASHRIQI ") is MASHRIQI
    assert get_table(AbjadSystem.MASHRIQI) is MASHRIQI


def test_get_table_unknown_system():
    with pytest.raises(InvalidInput) as exc:
        get_table("hebrew")
    assert exc.value.field == "system"
