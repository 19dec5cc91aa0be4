"""
Roman display styles.

Roman Pali/Sanskrit is written in several conventions. Internally every
converter works on one lossless "unique" form:

- ē and ō stand for the diphthongs ai and au
- ḻ is the retroflex lateral consonant, ḷ the vocalic l
- U+0315 is the avagraha, | ‖ · are danda, double danda, abbreviation

to_canonical() folds any display style into the unique form and
to_style() expands the unique form into one display style. Each direction
is a fixed sequence of replacement rules applied in order.
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from core.models import RomanStyle


AVAGRAHA = "\u0315"
DANDA = '|'
DOUBLE_DANDA = "\u2016"
ABBREVIATION = "\u00b7"


@dataclass(frozen=True)
class ReplacementRule:
    """A literal substring replacement with a name for logs and tests."""
    name: str
    old: str
    new: str

    def apply(self, text: str) -> str:
        return text.replace(self.old, self.new)


RuleSequence = Tuple[ReplacementRule, ...]


def apply_rules(text: str, rules: RuleSequence) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


# ============================================================================
# TO CANONICAL
# ============================================================================

_PALI_READING: RuleSequence = (
    ReplacementRule("pali_lla", "ḷ", "ḻ"),
)

_SANSKRIT_READING: RuleSequence = (
    ReplacementRule("long_e", "ē", "e"),
    ReplacementRule("long_o", "ō", "o"),
    ReplacementRule("diphthong_ai", "ai", "ē"),
    ReplacementRule("diphthong_au", "au", "ō"),
)

_CANONICAL_COMMON: RuleSequence = (
    ReplacementRule("least_vocalic_l", "ŀ", "ḷ"),
    ReplacementRule("separated_ai", "a'i", "ē"),
    ReplacementRule("separated_au", "a'u", "ō"),
    ReplacementRule("iso_anusvara", "ṁ", "ṃ"),
    # long forms first, the short ones are their prefixes
    ReplacementRule("iso_long_vocalic_r", "r\u0325\u0304", "ṝ"),
    ReplacementRule("iso_long_vocalic_l", "l\u0325\u0304", "ḹ"),
    ReplacementRule("iso_vocalic_r", "r\u0325", "ṛ"),
    ReplacementRule("iso_vocalic_l", "l\u0325", "ḷ"),
)

# ============================================================================
# TO STYLE
# ============================================================================

_PERIODS: RuleSequence = (
    ReplacementRule("danda_period", DANDA, "."),
    ReplacementRule("double_danda_period", DOUBLE_DANDA, "."),
    ReplacementRule("abbreviation_period", ABBREVIATION, "."),
)

_SEPARATE_DIPHTHONGS: RuleSequence = (
    ReplacementRule("separate_ai", "ai", "a'i"),
    ReplacementRule("separate_au", "au", "a'u"),
    ReplacementRule("write_ai", "ē", "ai"),
    ReplacementRule("write_au", "ō", "au"),
)

STYLE_RULES: Dict[RomanStyle, RuleSequence] = {
    RomanStyle.ISO: _SEPARATE_DIPHTHONGS + (
        ReplacementRule("iso_long_e", "e", "ē"),
        ReplacementRule("iso_long_o", "o", "ō"),
        ReplacementRule("iso_anusvara", "ṃ", "ṁ"),
        ReplacementRule("iso_vocalic_r", "ṛ", "r\u0325"),
        ReplacementRule("iso_vocalic_l", "ḷ", "l\u0325"),
        ReplacementRule("iso_long_vocalic_r", "ṝ", "r\u0325\u0304"),
        ReplacementRule("iso_long_vocalic_l", "ḹ", "l\u0325\u0304"),
        ReplacementRule("iso_lla", "ḻ", "ḷ"),
    ) + _PERIODS,
    RomanStyle.IAST: _SEPARATE_DIPHTHONGS + _PERIODS,
    RomanStyle.PALI_COMMON: (
        ReplacementRule("common_lla", "ḻ", "ḷ"),
    ) + _SEPARATE_DIPHTHONGS + (
        ReplacementRule("common_avagraha", AVAGRAHA, "’"),
    ) + _PERIODS,
    RomanStyle.LEAST_CONTAMINATION: (
        ReplacementRule("least_vocalic_l", "ḷ", "ŀ"),
        ReplacementRule("least_lla", "ḻ", "ḷ"),
    ),
    RomanStyle.UNIQUE: (),
}


def canonical_rules(as_pali: bool = True) -> RuleSequence:
    """Ordered rules that fold display styles into the unique form."""
    return (_PALI_READING if as_pali else _SANSKRIT_READING) + _CANONICAL_COMMON


def to_canonical(text: str, as_pali: bool = True) -> str:
    """
    Fold any Roman display style into the unique form.

    Args:
        text: Roman text in any supported style
        as_pali: Read ḷ as the consonant ḻ (Pali). With False the text is
            read as Sanskrit: ai/au become the diphthongs ē/ō and ḷ stays
            vocalic.

    Returns:
        Text in the unique form
    """
    if not text:
        return text
    return apply_rules(text, canonical_rules(as_pali))


def to_style(text: str, style: RomanStyle) -> str:
    """
    Expand unique-form text into a display style.

    PALI_COMMON and LEAST_CONTAMINATION cannot be folded back exactly:
    the consonant ḻ is written ḷ in both.
    """
    if not text:
        return text
    return apply_rules(text, STYLE_RULES[style])


def old_to_new_niggahita(text: str) -> str:
    """Replace the old niggahita ŋ with ṃ."""
    return text.replace("ŋ", "ṃ").replace("Ŋ", "Ṃ")


def new_to_old_niggahita(text: str) -> str:
    """Replace ṃ with the old niggahita ŋ."""
    return text.replace("ṃ", "ŋ").replace("Ṃ", "Ŋ")
