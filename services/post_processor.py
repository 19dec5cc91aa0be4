"""
Script-specific orthography corrections.

The raw table converters produce one letter per Devanagari letter in
logical order. Thai, Khmer and Myanmar spell some of those sequences
differently, so each conversion into one of them runs an ordered list of
corrections afterwards, and each conversion out of one runs the reverse
list before the table scan.

Every correction is a named PostProcessRule that can be tested on its own.
"""
import logging
import re
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from core.models import Script
from data.character_tables import (
    KHMER_VOCALIC_RL,
    MYANMAR_DEP_E,
    MYANMAR_SHORT_AA,
    MYANMAR_TALL_AA,
    THAI_LEADING_VOWELS,
    for_script,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PostProcessRule:
    """
    A regular-expression substitution with a name.

    Literal rules are built with PostProcessRule.literal().
    """
    name: str
    pattern: str
    replacement: str

    def __post_init__(self):
        object.__setattr__(self, '_compiled', re.compile(self.pattern))

    @classmethod
    def literal(cls, name: str, old: str, new: str) -> 'PostProcessRule':
        return cls(name, re.escape(old), new.replace('\\', '\\\\'))

    def apply(self, text: str) -> str:
        return self._compiled.sub(self.replacement, text)


def apply_rules(text: str, rules: Sequence[PostProcessRule]) -> str:
    for rule in rules:
        text = rule.apply(text)
    return text


# ============================================================================
# THAI
# ============================================================================

THAI_SARA_UE = 'ึ'
THAI_SARA_I = 'ิ'
THAI_NIKHAHIT = 'ํ'

# Leading vowels are written before the consonant they follow in speech
THAI_TO_RULES: Tuple[PostProcessRule, ...] = tuple(
    PostProcessRule(f"thai_lead_{vowel_name}", f"(.)({vowel})", r"\2\1")
    for vowel_name, vowel in zip(("e", "o", "ai"), THAI_LEADING_VOWELS)
)

THAI_FROM_RULES: Tuple[PostProcessRule, ...] = tuple(
    PostProcessRule(f"thai_unlead_{vowel_name}", f"({vowel})(.)", r"\2\1")
    for vowel_name, vowel in zip(("e", "o", "ai"), THAI_LEADING_VOWELS)
) + (
    PostProcessRule.literal("thai_ue_as_i_niggahita", THAI_SARA_UE, THAI_SARA_I + THAI_NIKHAHIT),
    # Legacy font glyphs of ญ and ฐ without the lower part
    PostProcessRule.literal("thai_legacy_nya", "\uf70f", 'ญ'),
    PostProcessRule.literal("thai_legacy_ttha", "\uf700", 'ฐ'),
)

# ============================================================================
# KHMER
# ============================================================================

_khmer = for_script(Script.KHMER)
_khmer_followers = re.escape(''.join(_khmer.consonants) + KHMER_VOCALIC_RL)

KHMER_TO_RULES: Tuple[PostProcessRule, ...] = (
    PostProcessRule("khmer_coeng_to_killer",
                    f"{re.escape(_khmer.virama)}(?![{_khmer_followers}])",
                    _khmer.killer),
)

# The killer is read as a virama by the table scan
KHMER_FROM_RULES: Tuple[PostProcessRule, ...] = ()

# ============================================================================
# MYANMAR
# ============================================================================

_myanmar = for_script(Script.MYANMAR)
_MY_VIRAMA = _myanmar.virama
_MY_ASAT = _myanmar.killer

MYANMAR_NGA = 'င'
MYANMAR_NYA = 'ဉ'
MYANMAR_NNYA = 'ည'
MYANMAR_SA = 'သ'
MYANMAR_GREAT_SA = 'ဿ'

MYANMAR_MEDIALS: Dict[str, str] = {
    'ယ': 'ျ',  # ya
    'ရ': 'ြ',  # ra
    'ဝ': 'ွ',  # va
    'ဟ': 'ှ',  # ha
}


def _tall_aa_bases() -> List[str]:
    """Letters and clusters written with the tall ā, as CST4 does."""
    clusters = [
        MYANMAR_NGA + _MY_VIRAMA + 'ခ',
        MYANMAR_NGA + _MY_VIRAMA + 'ဂ',
        MYANMAR_NGA + _MY_VIRAMA + MYANMAR_NGA,
        'ဒ' + _MY_VIRAMA + 'ဒ',
        'ဒ' + _MY_VIRAMA + 'ဓ',
        'ဒ' + _MY_VIRAMA + 'မ',
        'ဒ' + _MY_VIRAMA + 'ဝ',
    ]
    singles = ['ခ', 'ဂ', MYANMAR_NGA, 'ဒ', 'ပ', 'ဝ']
    return clusters + singles


MYANMAR_TALL_AA_SEQUENCES: Tuple[str, ...] = tuple(
    base + vowel
    for base in _tall_aa_bases()
    for vowel in (MYANMAR_SHORT_AA, MYANMAR_DEP_E + MYANMAR_SHORT_AA)
)

# Clusters whose last letter takes the tall ā alone but not in the cluster
MYANMAR_SHORT_AA_SEQUENCES: Tuple[str, ...] = (
    'က' + _MY_VIRAMA + 'ခ' + MYANMAR_TALL_AA,
    'ဂ' + _MY_VIRAMA + 'ဂ' + MYANMAR_TALL_AA,
    'ပ' + _MY_VIRAMA + 'ပ' + MYANMAR_TALL_AA,
    'မ' + _MY_VIRAMA + 'ပ' + MYANMAR_TALL_AA,
    _MY_VIRAMA + 'ဝ' + MYANMAR_TALL_AA,
)

_myanmar_consonants = re.escape(''.join(_myanmar.consonants))

MYANMAR_TO_RULES: Tuple[PostProcessRule, ...] = (
    PostProcessRule("myanmar_virama_to_asat",
                    f"{re.escape(_MY_VIRAMA)}(?![{_myanmar_consonants}])", _MY_ASAT),
) + tuple(
    PostProcessRule.literal(f"myanmar_tall_aa_{i}", seq, seq[:-1] + MYANMAR_TALL_AA)
    for i, seq in enumerate(MYANMAR_TALL_AA_SEQUENCES)
) + tuple(
    PostProcessRule.literal(f"myanmar_short_aa_{i}", seq, seq[:-1] + MYANMAR_SHORT_AA)
    for i, seq in enumerate(MYANMAR_SHORT_AA_SEQUENCES)
) + (
    PostProcessRule.literal("myanmar_kinzi", MYANMAR_NGA + _MY_VIRAMA, MYANMAR_NGA + _MY_ASAT + _MY_VIRAMA),
    PostProcessRule.literal("myanmar_double_nya", MYANMAR_NYA + _MY_VIRAMA + MYANMAR_NYA, MYANMAR_NNYA),
    PostProcessRule.literal("myanmar_great_sa", MYANMAR_SA + _MY_VIRAMA + MYANMAR_SA, MYANMAR_GREAT_SA),
) + tuple(
    PostProcessRule.literal(f"myanmar_medial_{medial}", _MY_VIRAMA + consonant, medial)
    for consonant, medial in MYANMAR_MEDIALS.items()
) + (
    PostProcessRule("myanmar_final_asat", rf"{re.escape(_MY_VIRAMA)}\Z", _MY_ASAT),
)

# Asat stays: the table scan reads it as a virama, and ော် needs it for au
MYANMAR_FROM_RULES: Tuple[PostProcessRule, ...] = (
    PostProcessRule.literal("myanmar_unkinzi", MYANMAR_NGA + _MY_ASAT + _MY_VIRAMA, MYANMAR_NGA + _MY_VIRAMA),
    PostProcessRule.literal("myanmar_split_nnya", MYANMAR_NNYA, MYANMAR_NYA + _MY_VIRAMA + MYANMAR_NYA),
    PostProcessRule.literal("myanmar_split_great_sa", MYANMAR_GREAT_SA, MYANMAR_SA + _MY_VIRAMA + MYANMAR_SA),
) + tuple(
    PostProcessRule.literal(f"myanmar_unmedial_{medial}", medial, _MY_VIRAMA + consonant)
    for consonant, medial in MYANMAR_MEDIALS.items()
) + (
    PostProcessRule.literal("myanmar_tall_to_short_aa", MYANMAR_TALL_AA, MYANMAR_SHORT_AA),
)


class ScriptPostProcessor:
    """Runs the ordered correction rules of each script."""

    TO_RULES: Dict[Script, Tuple[PostProcessRule, ...]] = {
        Script.THAI: THAI_TO_RULES,
        Script.KHMER: KHMER_TO_RULES,
        Script.MYANMAR: MYANMAR_TO_RULES,
    }

    FROM_RULES: Dict[Script, Tuple[PostProcessRule, ...]] = {
        Script.THAI: THAI_FROM_RULES,
        Script.KHMER: KHMER_FROM_RULES,
        Script.MYANMAR: MYANMAR_FROM_RULES,
    }

    def to_script(self, text: str, script: Script) -> str:
        """Apply the corrections after converting into a script."""
        rules = self.TO_RULES.get(script, ())
        if not text or not rules:
            return text
        logger.debug(f"Applying {len(rules)} {script.display_name} orthography rule(s)")
        return apply_rules(text, rules)

    def from_script(self, text: str, script: Script) -> str:
        """Undo the corrections before reading a script back."""
        rules = self.FROM_RULES.get(script, ())
        if not text or not rules:
            return text
        logger.debug(f"Reversing {len(rules)} {script.display_name} orthography rule(s)")
        return apply_rules(text, rules)


post_processor = ScriptPostProcessor()
