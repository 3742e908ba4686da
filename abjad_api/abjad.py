from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .errors import InvalidInput
from .normalize import NormalizationOptions, normalize


class AbjadSystem(str, enum.Enum):
    MAGHRIBI = "maghribi"
    MASHRIQI = "mashriqi"


# Maghribi (North/West African) abjad values, in abjad order.
_MAGHRIBI_VALUES: dict[str, int] = {
    "ا": 1,
    "ب": 2,
    "ج": 3,
    "د": 4,
    "ه": 5,
    "و": 6,
    "ز": 7,
    "ح": 8,
    "ط": 9,
    "ي": 10,
    "ك": 20,
    "ل": 30,
    "م": 40,
    "ن": 50,
    "س": 60,
    "ع": 70,
    "ف": 80,
    "ص": 90,
    "ق": 100,
    "ر": 200,
    "ش": 300,
    "ت": 400,
    "ث": 500,
    "خ": 600,
    "ذ": 700,
    "ض": 800,
    "ظ": 900,
    "غ": 1000,

    # Special forms, so text normalized with non-default options still counts.
    "ة": 400,
    "أ": 1,
    "إ": 1,
    "آ": 1,
    "ؤ": 6,
    "ئ": 10,
}

# Mashriqi (Eastern) values differ from Maghribi only on these three letters.
_MASHRIQI_OVERRIDES: dict[str, int] = {
    "ض": 900,
    "ظ": 1000,
    "غ": 800,
}

MAGHRIBI: Mapping[str, int] = MappingProxyType(dict(_MAGHRIBI_VALUES))
MASHRIQI: Mapping[str, int] = MappingProxyType({**_MAGHRIBI_VALUES, **_MASHRIQI_OVERRIDES})

TABLES: Mapping[AbjadSystem, Mapping[str, int]] = MappingProxyType(
    {AbjadSystem.MAGHRIBI: MAGHRIBI, AbjadSystem.MASHRIQI: MASHRIQI}
)


@dataclass(frozen=True)
class LetterValue:
    letter: str
    value: int


def get_table(system: AbjadSystem | str) -> Mapping[str, int]:
    if isinstance(system, str) and not isinstance(system, AbjadSystem):
        system = system.strip().lower()
    try:
        return TABLES[AbjadSystem(system)]
    except ValueError:
        raise InvalidInput(
            f"Unknown abjad system {system!r}; expected one of: "
            + ", ".join(s.value for s in AbjadSystem),
            field="system",
        ) from None


def breakdown(
    name: str | None,
    table: Mapping[str, int] = MAGHRIBI,
    options: NormalizationOptions | None = None,
) -> list[LetterValue]:
    """Per-letter values of the normalized name (spaces skipped)."""
    normalized = normalize(name, options)
    return [LetterValue(ch, table.get(ch, 0)) for ch in normalized if not ch.isspace()]


def total(
    name: str | None,
    table: Mapping[str, int] = MAGHRIBI,
    options: NormalizationOptions | None = None,
) -> int:
    """
    Compute the abjad total (kabīr) of a name.

    Example:
      total("محمد", MAGHRIBI) == 92
    """
    return sum(lv.value for lv in breakdown(name, table, options))
