"""
Reduction primitives.

`mod_index` is the only reduction used for classification lookups: a total
divisible by the base lands on the last bucket, never on 0.
"""

from __future__ import annotations

from .errors import InvalidInput

ELEMENT_BASE = 4
BURUJ_BASE = 12
PLANET_BASE = 7
TIER_BASE = 9
SURAH_BASE = 114


def digital_root(n: int) -> int:
    """0 for 0, otherwise the repeated digit sum in 1..9."""
    if n < 0:
        raise InvalidInput(f"digital_root expects n >= 0, got {n}")
    if n == 0:
        return 0
    return 1 + (n - 1) % 9


def mod_index(n: int, base: int) -> int:
    """
    1-indexed modulo: returns a value in [1, base].

    Example:
      mod_index(376, 4) == 4   # Water, not 0
      mod_index(12, 12) == 12
    """
    if base < 1:
        raise InvalidInput(f"mod_index base must be >= 1, got {base}")
    r = n % base
    return base if r == 0 else r
