"""
Pivot conversion through Devanagari.

Every engine converts either between Devanagari and Roman, or between
Devanagari and one of Thai, Khmer, Myanmar and Sinhala. Any other pair of
scripts is converted in two hops with Devanagari in the middle.

This module provides:
1. Devanagari → Roman (unique form)
2. Roman (unique form) → Devanagari
3. Devanagari → Thai/Khmer/Myanmar/Sinhala raw table substitution
4. Thai/Khmer/Myanmar/Sinhala → Devanagari longest-match scan

The raw converters do not apply script-specific orthography (Thai vowel
order, Myanmar medials, ...); see services.post_processor.
"""
import logging
import unicodedata
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from core.models import Script
from data.character_tables import (
    APOSTROPHE,
    CharacterTable,
    DEVA_NUKTA,
    ZERO_WIDTH_JOINER,
    ROMAN_ASPIRABLE,
    NON_PALI_VOWEL_INDICES,
    for_script,
)

logger = logging.getLogger(__name__)

_SIGN_NAMES = ('anusvara', 'visarga', 'avagraha', 'virama', 'danda', 'double_danda', 'abbreviation')

# Vocalic ṛ ṝ ḷ ḹ: Khmer writes them after a consonant as coeng + letter
_VOCALIC_RL_INDICES = frozenset(i for i in NON_PALI_VOWEL_INDICES if i < 10)


# Character classes
CONSONANT = 'consonant'
INDEPENDENT = 'independent'
DEPENDENT = 'dependent'
EITHER_VOWEL = 'either'  # same spelling for both forms, decided by context
DIGIT = 'digit'
SIGN = 'sign'


def _strip_joiners(text: str) -> str:
    return text.replace(DEVA_NUKTA, '').replace(ZERO_WIDTH_JOINER, '')


def _classify(table: CharacterTable, char: str) -> Tuple[Optional[str], Optional[int]]:
    """Class and table index of a single character, (None, None) if unlisted."""
    index = table.consonant_index(char)
    if index is not None:
        return CONSONANT, index
    index = table.dependent_vowel_index(char)
    if index is not None:
        return DEPENDENT, index
    index = table.independent_vowel_index(char)
    if index is not None:
        return INDEPENDENT, index
    index = table.digit_index(char)
    if index is not None:
        return DIGIT, index
    return None, None


def _sign_map(source: CharacterTable, target: CharacterTable) -> Dict[str, str]:
    signs = {}
    for name in _SIGN_NAMES:
        key = getattr(source, name)
        if key and key not in signs:
            signs[key] = getattr(target, name)
    return signs


# ============================================================================
# DEVANAGARI ↔ ROMAN
# ============================================================================

def devanagari_to_roman(text: str, include_numerals: bool = True) -> str:
    """
    Transliterate Devanagari to Roman in the unique form.

    A consonant carries the inherent "a" unless a virama or a dependent
    vowel sign follows it.

    Args:
        text: Devanagari text
        include_numerals: Convert Devanagari digits to ASCII digits

    Returns:
        Roman text (see services.roman_styles for display styles)
    """
    if not text:
        return text

    deva = for_script(Script.DEVANAGARI)
    roman = for_script(Script.ROMAN)
    signs = _sign_map(deva, roman)
    chars = _strip_joiners(text)

    result: List[str] = []
    i = 0
    while i < len(chars):
        char = chars[i]
        next_char = chars[i + 1] if i + 1 < len(chars) else None

        index = deva.consonant_index(char)
        if index is not None:
            result.append(roman.consonants[index])
            if next_char == deva.virama:
                i += 1
            elif next_char is None or not deva.is_dependent_vowel(next_char):
                result.append('a')
            i += 1
            continue

        kind, index = _classify(deva, char)
        if kind == DEPENDENT:
            result.append(roman.dependent_vowels[index])
        elif kind == INDEPENDENT:
            result.append(roman.independent_vowels[index])
        elif kind == DIGIT:
            result.append(roman.digits[index] if include_numerals else char)
        else:
            result.append(signs.get(char, char))
        i += 1

    return ''.join(result)


def _roman_consonant_at(chars: str, i: int, roman: CharacterTable) -> Tuple[Optional[int], int]:
    """Consonant index and length at position i, preferring the aspirated digraph."""
    char = chars[i]
    if char in ROMAN_ASPIRABLE and i + 1 < len(chars) and chars[i + 1] == 'h':
        return roman.consonant_index(char + 'h'), 2
    return roman.consonant_index(char), 1


def roman_to_devanagari(text: str, include_numerals: bool = True) -> str:
    """
    Transliterate unique-form Roman to Devanagari.

    Vowels take the independent form at the start of the text or after a
    non-consonant, and the vowel sign after a consonant ("a" is inherent
    and writes nothing). A consonant gets a virama unless a vowel follows.

    Args:
        text: Roman text, already folded with roman_styles.to_canonical()
        include_numerals: Convert decimal digits of any script to
            Devanagari digits

    Returns:
        Devanagari text
    """
    if not text:
        return text

    deva = for_script(Script.DEVANAGARI)
    roman = for_script(Script.ROMAN)
    signs = _sign_map(roman, deva)
    chars = text.lower()

    def is_vowel(char: str) -> bool:
        return roman.independent_vowel_index(char) is not None

    result: List[str] = []
    i = 0
    while i < len(chars):
        char = chars[i]

        index = roman.independent_vowel_index(char)
        if index is not None:
            if not result or not roman.is_consonant(chars[i - 1]):
                result.append(deva.independent_vowels[index])
            else:
                result.append(deva.dependent_vowels[index])
            i += 1
            continue

        index, length = _roman_consonant_at(chars, i, roman)
        if index is not None:
            result.append(deva.consonants[index])
            following = i + length
            if following >= len(chars) or not is_vowel(chars[following]):
                result.append(deva.virama)
            i = following
            continue

        index = roman.digit_index(char)
        if index is None and char.isdecimal():
            index = unicodedata.decimal(char)
        if index is not None:
            result.append(deva.digits[index] if include_numerals else char)
        else:
            result.append(signs.get(char, char))
        i += 1

    return ''.join(result)


# ============================================================================
# DEVANAGARI ↔ THAI / KHMER / MYANMAR / SINHALA
# ============================================================================

class RawScriptConverter:
    """
    Table conversion between Devanagari and one Indic/Southeast Asian script.

    Both directions are character-table lookups. The reverse direction
    scans longest match first, so multi-character letters such as Thai
    อา or Myanmar ော် are read as one unit.
    """

    def __init__(self, script: Script):
        if script in (Script.DEVANAGARI, Script.ROMAN, Script.UNKNOWN):
            raise ValueError(f"No raw converter for {script.display_name}")
        self.script = script
        self.deva = for_script(Script.DEVANAGARI)
        self.table = for_script(script)
        self._forward_signs = _sign_map(self.deva, self.table)
        self._tokens = self._build_reverse_tokens()
        self._longest = max(len(token) for token in self._tokens)
        logger.debug(f"RawScriptConverter initialized for {script.display_name}")

    def _dependent_spelling(self, index: int) -> str:
        mark = self.table.dependent_vowels[index]
        if self.script is Script.KHMER and index in _VOCALIC_RL_INDICES:
            return self.table.virama + mark
        return mark

    def _build_reverse_tokens(self) -> Dict[str, Tuple[str, str, str]]:
        """Map each spelling in the script to (kind, devanagari, alternative)."""
        deva, table = self.deva, self.table
        tokens: Dict[str, Tuple[str, str, str]] = {}

        for i, consonant in enumerate(table.consonants):
            tokens[consonant] = (CONSONANT, deva.consonants[i], '')
        for i, vowel in enumerate(table.independent_vowels):
            tokens[vowel] = (INDEPENDENT, deva.independent_vowels[i], '')
        for i in range(1, len(table.dependent_vowels)):
            spelling = self._dependent_spelling(i)
            if spelling in tokens and tokens[spelling][0] == INDEPENDENT:
                tokens[spelling] = (EITHER_VOWEL, tokens[spelling][1], deva.dependent_vowels[i])
            else:
                tokens[spelling] = (DEPENDENT, deva.dependent_vowels[i], '')
        for i, digit in enumerate(table.digits):
            tokens.setdefault(digit, (DIGIT, deva.digits[i], ''))
        for name in _SIGN_NAMES:
            sign = getattr(table, name)
            # A period or an apostrophe is ordinary punctuation on the way back
            if sign and sign not in ('.', APOSTROPHE):
                tokens.setdefault(sign, (SIGN, getattr(deva, name), ''))
        if table.killer:
            tokens.setdefault(table.killer, (SIGN, deva.virama, ''))
        return tokens

    def from_devanagari(self, text: str, include_numerals: bool = True) -> str:
        """
        Substitute Devanagari letters and signs with this script's.

        The Devanagari virama becomes the script's cluster mark; the
        post-processor turns it into the final form where needed.
        """
        if not text:
            return text

        deva, table = self.deva, self.table
        result: List[str] = []
        for char in _strip_joiners(text):
            kind, index = _classify(deva, char)
            if kind == CONSONANT:
                result.append(table.consonants[index])
            elif kind == DEPENDENT:
                result.append(self._dependent_spelling(index))
            elif kind == INDEPENDENT:
                result.append(table.independent_vowels[index])
            elif kind == DIGIT:
                result.append(table.digits[index] if include_numerals else char)
            else:
                result.append(self._forward_signs.get(char, char))
        return ''.join(result)

    def to_devanagari(self, text: str, include_numerals: bool = True) -> str:
        """
        Read this script's letters back into Devanagari.

        Expects text that went through the script's reverse
        post-processing, so every cluster is spelled with the virama.
        """
        if not text:
            return text

        result: List[str] = []
        previous_kind: Optional[str] = None
        i = 0
        while i < len(text):
            for length in range(min(self._longest, len(text) - i), 0, -1):
                token = self._tokens.get(text[i:i + length])
                if token is not None:
                    break
            else:
                result.append(text[i])
                previous_kind = None
                i += 1
                continue

            kind, devanagari, alternative = token
            if kind == EITHER_VOWEL:
                devanagari = alternative if previous_kind == CONSONANT else devanagari
            elif kind == DIGIT and not include_numerals:
                devanagari = text[i:i + length]
            result.append(devanagari)
            previous_kind = kind
            i += length

        return ''.join(result)


@lru_cache(maxsize=None)
def raw_converter(script: Script) -> RawScriptConverter:
    """Shared converter instance for a script."""
    return RawScriptConverter(script)


def devanagari_to_script(text: str, script: Script, include_numerals: bool = True) -> str:
    return raw_converter(script).from_devanagari(text, include_numerals)


def script_to_devanagari(text: str, script: Script, include_numerals: bool = True) -> str:
    return raw_converter(script).to_devanagari(text, include_numerals)
