"""
Best-effort Latin -> Arabic transliteration for names.

The canonical computation takes Arabic script; this module only offers a
starting point for users who type Latin. It never raises on odd input:
unknown sequences lower the confidence and add a warning.
"""

from __future__ import annotations

import logging
import re
import unicodedata
from dataclasses import dataclass, field

from .normalize import HA, TA_MARBUTA, NormalizationOptions, has_arabic, normalize

logger = logging.getLogger(__name__)

MAX_CANDIDATES = 6
MIN_CONFIDENCE = 20

# Known religious and proper names, checked before the generic rules.
LEXICON: dict[str, str] = {
    "allah": "الله",
    "rahman": "رحمن", "ar-rahman": "الرحمن", "al-rahman": "الرحمن",
    "rahim": "رحيم", "ar-rahim": "الرحيم", "al-rahim": "الرحيم",
    "latif": "لطيف", "al-latif": "اللطيف",
    "hayy": "حي", "al-hayy": "الحي",
    "qayyum": "قيوم", "al-qayyum": "القيوم",
    "qayyoom": "قيوم", "al-qayyoom": "القيوم",
    "malik": "ملك", "al-malik": "الملك",
    "nur": "نور", "an-nur": "النور", "al-nur": "النور",
    "karim": "كريم", "al-karim": "الكريم",
    "aziz": "عزيز", "al-aziz": "العزيز",
    "jabbar": "جبار", "al-jabbar": "الجبار",
    "salam": "سلام", "as-salam": "السلام", "al-salam": "السلام",
    "quddus": "قدوس", "al-quddus": "القدوس",
    "wahid": "واحد", "al-wahid": "الواحد",
    "ahad": "احد", "al-ahad": "الاحد",
    "samad": "صمد", "as-samad": "الصمد", "al-samad": "الصمد",
    "muhammad": "محمد", "mohammed": "محمد", "mohamed": "محمد",
    "ahmad": "احمد", "ahmed": "احمد",
    "ali": "علي",
    "fatima": "فاطمة", "fatimah": "فاطمة",
    "aisha": "عائشة", "aishah": "عائشة",
    "khadija": "خديجة", "khadijah": "خديجة",
    "maryam": "مريم", "mariam": "مريم",
    "ibrahim": "ابراهيم",
    "musa": "موسى",
    "isa": "عيسى",
    "yusuf": "يوسف",
    "umar": "عمر", "omar": "عمر",
    "uthman": "عثمان", "othman": "عثمان",
    "hasan": "حسن", "hassan": "حسن",
    "husayn": "حسين", "hussein": "حسين",
    "zaynab": "زينب", "zainab": "زينب",
    "abdullah": "عبد الله", "abdallah": "عبد الله",
}

DIGRAPHS: tuple[tuple[str, str], ...] = (
    ("kh", "خ"),
    ("gh", "غ"),
    ("sh", "ش"),
    ("ch", "ش"),
    ("th", "ث"),
    ("dh", "ذ"),
    ("ph", "ف"),
)

CONSONANTS: dict[str, str] = {
    "q": "ق", "k": "ك", "g": "ج", "j": "ج",
    "b": "ب", "t": "ت", "d": "د", "r": "ر",
    "z": "ز", "s": "س", "f": "ف", "v": "ف",
    "p": "ب", "m": "م", "n": "ن", "l": "ل",
    "h": "ه", "w": "و", "y": "ي", "x": "كس",
}

LONG_VOWELS: dict[str, str] = {"a": "ا", "e": "ي", "i": "ي", "o": "و", "u": "و"}

_ARTICLE = re.compile(r"^(al|el|ar|an|as|ad|at|az|ash)-")
_DOUBLED_LETTER = re.compile(r"([^اوي])\1+")
_SOFT_C_FOLLOWERS = frozenset("eiy")
_IGNORED = frozenset("'’`-")
_UNMAPPED = re.compile(r"[^a-z'’`\s-]")


@dataclass
class TransliterationResult:
    primary: str
    candidates: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    confidence: int = 0


def _fold_latin(text: str) -> str:
    """Lowercase and drop accents (é -> e, ç -> c)."""
    decomposed = unicodedata.normalize("NFKD", text.lower())
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _lexicon_key(text: str) -> str:
    key = re.sub(r"\s+", "-", _fold_latin(text).strip())
    return re.sub(r"[^a-z-]", "", key)


def _word_to_arabic(word: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(word):
        pair = word[i : i + 2]
        digraph = next((ar for lat, ar in DIGRAPHS if pair == lat), None)
        if digraph is not None:
            out.append(digraph)
            i += 2
            continue

        ch = word[i]
        nxt = word[i + 1] if i + 1 < len(word) else ""
        i += 1
        if ch in _IGNORED:
            continue
        if ch == "c":
            out.append("س" if nxt in _SOFT_C_FOLLOWERS else "ك")
        elif ch in CONSONANTS:
            out.append(CONSONANTS[ch])
        elif ch in LONG_VOWELS:
            # A doubled vowel is one long vowel.
            if out and out[-1] == LONG_VOWELS[ch] and word[i - 2 : i - 1] == ch:
                continue
            out.append(LONG_VOWELS[ch])
    return "".join(out)


def _swap_final(word: str, ending: str) -> str:
    return word[:-1] + ending if word else word


def transliterate(text: str | None, ta_marbuta_as: str = HA) -> TransliterationResult:
    """
    Convert Latin-script text to Arabic script.

    Returns the primary spelling, up to `MAX_CANDIDATES` ranked candidates
    (primary first), the warnings raised by ambiguous spellings and a
    confidence in [0, 100]. Lexicon hits are certain (100); heuristic output
    never exceeds 95.
    """
    options = NormalizationOptions(ta_marbuta_as=ta_marbuta_as)
    source = (text or "").strip()
    if not source:
        return TransliterationResult(primary="", confidence=0)

    if has_arabic(source):
        primary = normalize(source, options)
        return TransliterationResult(primary=primary, candidates=[primary], confidence=100 if primary else 0)

    key = _lexicon_key(source)
    if key in LEXICON:
        primary = normalize(LEXICON[key], options)
        return TransliterationResult(primary=primary, candidates=[primary], confidence=100)

    folded = _fold_latin(source)
    words = [w for w in re.split(r"\s+", re.sub(r"[^a-z'’` -]", " ", folded)) if w.strip("-'’`")]
    if not words:
        return TransliterationResult(
            primary="", warnings=["No transliterable characters"], confidence=0
        )

    warnings: list[str] = []
    if _UNMAPPED.search(folded):
        warnings.append("Characters outside the Latin alphabet were skipped")
    arabic_words: list[str] = []
    # (word position, alternate spelling of that word)
    alternates: list[tuple[int, str]] = []
    penalty = 0

    for pos, word in enumerate(words):
        prefix = ""
        m = _ARTICLE.match(word)
        if m:
            prefix = "ال"
            word = word[m.end():]

        if word in LEXICON:
            arabic_words.append(prefix + LEXICON[word])
            continue

        arabic = _word_to_arabic(word)
        if word.endswith("ah") and arabic:
            # "-ah" -> tā' marbūṭa, replacing the long vowel and final hā'
            stem = arabic[:-1] if arabic.endswith("ه") else arabic
            stem = stem[:-1] if stem.endswith("ا") else stem
            arabic = stem + ta_marbuta_as
            alternates.append((pos, prefix + stem + (TA_MARBUTA if ta_marbuta_as == HA else HA)))
            warnings.append(f"Final -ah mapped to ta marbuta ({ta_marbuta_as})")
            penalty += 10
        elif word.endswith("a") and arabic.endswith("ا"):
            for ending in ("ى", ta_marbuta_as):
                alternates.append((pos, prefix + _swap_final(arabic, ending)))
            warnings.append("Ambiguous final -a: offered ا/ى/ة")
            penalty += 10

        collapsed = _DOUBLED_LETTER.sub(r"\1", arabic)
        if collapsed != arabic:
            alternates.append((pos, prefix + collapsed))
            warnings.append("Doubled consonant detected: offered single letter (shadda) alternative")
            penalty += 10

        arabic_words.append(prefix + arabic)

    primary = normalize(" ".join(arabic_words), options)

    ranked: list[str] = [primary] if primary else []
    for pos, alt in alternates:
        spelled = " ".join(alt if i == pos else w for i, w in enumerate(arabic_words))
        if spelled and spelled not in ranked:
            ranked.append(spelled)

    confidence = 0
    if primary:
        confidence = 100 - min(30, 10 * len(warnings)) - min(penalty, 10) - 5
        confidence = max(MIN_CONFIDENCE, confidence)

    logger.debug("transliterated %r -> %r (confidence=%s)", source, primary, confidence)
    return TransliterationResult(
        primary=primary,
        candidates=ranked[:MAX_CANDIDATES],
        warnings=warnings,
        confidence=confidence,
    )


def to_arabic(text: str | None) -> str:
    """Arabic-script text passes through unchanged; Latin is transliterated."""
    if has_arabic(text):
        return text or ""
    return transliterate(text).primary
