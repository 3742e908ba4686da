from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass
from typing import Callable

from .errors import InvalidInput

logger = logging.getLogger(__name__)

TA_MARBUTA = "\u0629"
HA = "\u0647"
TATWEEL = "\u0640"
ALLAH_LIGATURE = "\uFDF2"

# The 28 letters of the abjad order.
CANONICAL_LETTERS = frozenset("ابجدهوزحطيكلمنسعفصقرشتثخذضظغ")

# Hamza-bearing letters that survive normalization when `unify_alif` is off.
HAMZA_FORMS = frozenset("أإآؤئ")

LIGATURES: dict[str, str] = {
    ALLAH_LIGATURE: "الله",
    "ﻻ": "لا",
    "ﻼ": "لا",
    "ﻷ": "لأ",
    "ﻸ": "لأ",
    "ﻹ": "لإ",
    "ﻺ": "لإ",
    "ﻵ": "لآ",
    "ﻶ": "لآ",
}

# Hamza carriers and regional (Persian, Urdu, Maghrebi) letters folded onto
# their abjad base letter.
VARIANTS: dict[str, str] = {
    "أ": "ا",
    "إ": "ا",
    "آ": "ا",
    "ٱ": "ا",  # alif wasla
    "ٲ": "ا",
    "ٳ": "ا",
    "ؤ": "و",
    "ئ": "ي",
    "ء": "",
    "ک": "ك",  # keheh
    "ڪ": "ك",
    "گ": "ك",  # gaf
    "ڭ": "ك",
    "ی": "ي",  # farsi yeh
    "ې": "ي",
    "ۍ": "ي",
    "ێ": "ي",
    "پ": "ب",  # peh
    "چ": "ج",  # tcheh
    "ژ": "ز",  # jeh
    "ڤ": "ف",  # veh
    "ڢ": "ف",  # maghrebi feh
    "ڨ": "ق",
    "ڧ": "ق",  # maghrebi qaf
    "ہ": "ه",
    "ھ": "ه",
    "ۀ": "ه",
    "ۃ": TA_MARBUTA,
    # Combining hamza and madda marks; kept only when diacritics are kept and
    # alif unification is off.
    "\u0653": "",
    "\u0654": "",
    "\u0655": "",
}

_DIACRITICS = re.compile(r"[\u0610-\u061A\u064B-\u065F\u0670\u06D6-\u06ED]")
_WHITESPACE = re.compile(r"\s+")


@dataclass(frozen=True)
class NormalizationOptions:
    strip_diacritics: bool = True
    unify_alif: bool = True
    normalize_allah: bool = True
    ta_marbuta_as: str = HA
    strip_tatweel: bool = True
    keep_spaces: bool = True

    def __post_init__(self) -> None:
        if self.ta_marbuta_as not in (HA, TA_MARBUTA):
            raise InvalidInput(f"ta_marbuta_as must be '{HA}' or '{TA_MARBUTA}'", field="ta_marbuta_as")


DEFAULT_OPTIONS = NormalizationOptions()


def expand_ligatures(text: str, options: NormalizationOptions) -> str:
    for glyph, spelled in LIGATURES.items():
        if glyph == ALLAH_LIGATURE and not options.normalize_allah:
            continue
        text = text.replace(glyph, spelled)
    return text


def fold_variants(text: str, options: NormalizationOptions) -> str:
    if not options.unify_alif:
        return text
    # NFKC maps presentation forms (U+FB50..U+FEFF) back to their base letters;
    # the Allah ligature is left to `expand_ligatures`.
    text = "".join(
        unicodedata.normalize("NFKC", ch) if 0xFB50 <= ord(ch) <= 0xFEFF and ch != ALLAH_LIGATURE else ch
        for ch in text
    )
    return "".join(VARIANTS.get(ch, ch) for ch in text)


def strip_diacritics(text: str, options: NormalizationOptions) -> str:
    if not options.strip_diacritics:
        return text
    return _DIACRITICS.sub("", text)


def strip_tatweel(text: str, options: NormalizationOptions) -> str:
    if not options.strip_tatweel:
        return text
    return text.replace(TATWEEL, "")


def fold_endings(text: str, options: NormalizationOptions) -> str:
    """tāʾ marbūṭa per options; alif maqṣūra always reads as yāʾ."""
    return text.replace(TA_MARBUTA, options.ta_marbuta_as).replace("ى", "ي")


def _allowed(ch: str, options: NormalizationOptions) -> bool:
    if ch in CANONICAL_LETTERS or ch == options.ta_marbuta_as or ch.isspace():
        return True
    if not options.unify_alif and ch in HAMZA_FORMS:
        return True
    if not options.strip_diacritics and _DIACRITICS.match(ch):
        return True
    return not options.strip_tatweel and ch == TATWEEL


def keep_letters(text: str, options: NormalizationOptions) -> str:
    return "".join(ch for ch in text if _allowed(ch, options))


def apply_space_policy(text: str, options: NormalizationOptions) -> str:
    if options.keep_spaces:
        return _WHITESPACE.sub(" ", text).strip()
    return _WHITESPACE.sub("", text)


def recompose(text: str, options: NormalizationOptions) -> str:
    # Kept marks may combine with a folded letter (ي + U+0654 -> ئ).
    return unicodedata.normalize("NFC", text)


PASSES: tuple[Callable[[str, NormalizationOptions], str], ...] = (
    expand_ligatures,
    fold_variants,
    strip_diacritics,
    strip_tatweel,
    fold_endings,
    keep_letters,
    apply_space_policy,
    recompose,
)


def normalize(text: str | None, options: NormalizationOptions | None = None) -> str:
    """
    Normalize Arabic text for abjad computation.

    - Unicode-normalizes (NFC)
    - Runs each pass in `PASSES`, in order
    - With default options the result holds only the 28 canonical letters
      and single spaces

    Normalizing already-normalized text (with the same options) is a no-op.
    """
    if not text:
        return ""
    opts = options or DEFAULT_OPTIONS
    out = unicodedata.normalize("NFC", str(text))
    for step in PASSES:
        out = step(out, opts)
    logger.debug("normalized %r -> %r", text, out)
    return out


def has_arabic(text: str | None) -> bool:
    if not text:
        return False
    return any("\u0600" <= ch <= "\u06FF" or "\uFB50" <= ch <= "\uFEFC" for ch in text)
