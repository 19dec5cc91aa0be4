"""
Unicode character tables for Pali/Sanskrit script conversion.

Every table lists its letters in the same order, so index i in one
script's consonant (or vowel) sequence is the same letter as index i in
any other script. Conversion between two scripts is therefore a lookup of
the index in the source table followed by a read of the target table.

Vowels: a ā i ī u ū, ṛ ṝ ḷ ḹ, e ai o au
Consonants: ka kha ga gha ṅa, ca cha ja jha ña, ṭa ṭha ḍa ḍha ṇa,
            ta tha da dha na, pa pha ba bha ma,
            ya ra la ḷa va śa ṣa sa ha

Unicode Ranges:
- Devanagari: U+0900 - U+097F
- Sinhala: U+0D80 - U+0DFF
- Thai: U+0E00 - U+0E7F
- Myanmar: U+1000 - U+109F
- Khmer: U+1780 - U+17FF
"""
from bisect import bisect_left
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Dict, List, Optional, Tuple

from core.models import Script

# Positions of the Sanskrit-only vowels (ṛ ṝ ḷ ḹ ai au) in the vowel sequences
NON_PALI_VOWEL_INDICES = frozenset({6, 7, 8, 9, 11, 13})

VOWEL_COUNT = 14
CONSONANT_COUNT = 34
DIGIT_COUNT = 10

# Consonant positions that matter to the converters
LLA_INDEX = 28  # retroflex lateral ḷa
VA_INDEX = 29
SA_INDEX = 32
HA_INDEX = 33

APOSTROPHE = '\u2019'  # ’ stands in for avagraha where a script has none


def _chars(*codepoints: int) -> Tuple[str, ...]:
    return tuple(chr(cp) for cp in codepoints)


class _ReverseIndex:
    """Sorted (key, index) pairs searched with bisect."""

    def __init__(self, entries: Tuple[str, ...]):
        pairs = sorted((entry, i) for i, entry in enumerate(entries) if entry)
        self._keys = [key for key, _ in pairs]
        self._indices = [i for _, i in pairs]
        self.longest = max((len(key) for key in self._keys), default=0)

    def lookup(self, key: str) -> Optional[int]:
        pos = bisect_left(self._keys, key)
        if pos < len(self._keys) and self._keys[pos] == key:
            return self._indices[pos]
        return None

    def __contains__(self, key: str) -> bool:
        return self.lookup(key) is not None


@dataclass(frozen=True)
class CharacterTable:
    """
    Immutable letter inventory of one script.

    dependent_vowels[0] is empty for scripts with an inherent vowel: a
    consonant with no vowel sign already reads as "a".
    """
    script: Script
    independent_vowels: Tuple[str, ...]
    dependent_vowels: Tuple[str, ...]
    consonants: Tuple[str, ...]
    digits: Tuple[str, ...]
    anusvara: str
    visarga: str
    avagraha: str
    virama: str
    danda: str
    double_danda: str
    abbreviation: str
    killer: Optional[str] = None  # Khmer killer / Myanmar asat
    _independent: _ReverseIndex = field(init=False, repr=False, compare=False)
    _dependent: _ReverseIndex = field(init=False, repr=False, compare=False)
    _consonant: _ReverseIndex = field(init=False, repr=False, compare=False)
    _digit: _ReverseIndex = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.independent_vowels) != VOWEL_COUNT or len(self.dependent_vowels) != VOWEL_COUNT:
            raise ValueError(f"{self.script.display_name} table must have {VOWEL_COUNT} vowels")
        if len(self.consonants) != CONSONANT_COUNT:
            raise ValueError(f"{self.script.display_name} table must have {CONSONANT_COUNT} consonants")
        if len(self.digits) != DIGIT_COUNT:
            raise ValueError(f"{self.script.display_name} table must have {DIGIT_COUNT} digits")
        object.__setattr__(self, '_independent', _ReverseIndex(self.independent_vowels))
        object.__setattr__(self, '_dependent', _ReverseIndex(self.dependent_vowels))
        object.__setattr__(self, '_consonant', _ReverseIndex(self.consonants))
        object.__setattr__(self, '_digit', _ReverseIndex(self.digits))

    def independent_vowel_index(self, s: str) -> Optional[int]:
        return self._independent.lookup(s)

    def dependent_vowel_index(self, s: str) -> Optional[int]:
        return self._dependent.lookup(s)

    def vowel_index(self, s: str) -> Optional[int]:
        """Index of s as an independent vowel, else as a dependent vowel sign."""
        index = self._independent.lookup(s)
        return index if index is not None else self._dependent.lookup(s)

    def consonant_index(self, s: str) -> Optional[int]:
        return self._consonant.lookup(s)

    def digit_index(self, s: str) -> Optional[int]:
        return self._digit.lookup(s)

    def is_consonant(self, s: str) -> bool:
        return s in self._consonant

    def is_dependent_vowel(self, s: str) -> bool:
        return s in self._dependent

    @property
    def longest_vowel(self) -> int:
        """Length of the longest vowel entry, for longest-match scanning."""
        return max(self._independent.longest, self._dependent.longest)

    def special(self, name: str) -> Optional[str]:
        """Named sign lookup: 'anusvara', 'visarga', 'virama', ..."""
        return getattr(self, name, None) if name in _SPECIAL_NAMES else None


_SPECIAL_NAMES = frozenset({
    'anusvara', 'visarga', 'avagraha', 'virama',
    'danda', 'double_danda', 'abbreviation', 'killer',
})

# ============================================================================
# DEVANAGARI
# ============================================================================

DEVA_NUKTA = '\u093c'
ZERO_WIDTH_JOINER = '\u200d'

_DEVANAGARI = dict(
    independent_vowels=_chars(
        0x0905, 0x0906, 0x0907, 0x0908, 0x0909, 0x090A,
        0x090B, 0x0960, 0x090C, 0x0961,
        0x090F, 0x0910, 0x0913, 0x0914),
    dependent_vowels=("",) + _chars(
        0x093E, 0x093F, 0x0940, 0x0941, 0x0942,
        0x0943, 0x0944, 0x0962, 0x0963,
        0x0947, 0x0948, 0x094B, 0x094C),
    consonants=_chars(
        0x0915, 0x0916, 0x0917, 0x0918, 0x0919,
        0x091A, 0x091B, 0x091C, 0x091D, 0x091E,
        0x091F, 0x0920, 0x0921, 0x0922, 0x0923,
        0x0924, 0x0925, 0x0926, 0x0927, 0x0928,
        0x092A, 0x092B, 0x092C, 0x092D, 0x092E,
        0x092F, 0x0930, 0x0932, 0x0933, 0x0935, 0x0936, 0x0937, 0x0938, 0x0939),
    digits=_chars(*range(0x0966, 0x0970)),
    anusvara='\u0902',
    visarga='\u0903',
    avagraha='\u093d',
    virama='\u094d',
    danda='\u0964',
    double_danda='\u0965',
    abbreviation='\u0970',
)

# ============================================================================
# ROMAN (canonical "unique" form)
# ============================================================================

# ē and ō stand for the diphthongs ai and au; ḻ is the consonant, ḷ the vowel
ROMAN_ASPIRABLE = "bcdgjkptḍṭ"

_ROMAN = dict(
    independent_vowels=tuple("aāiīuūṛṝḷḹeēoō"),
    dependent_vowels=tuple("aāiīuūṛṝḷḹeēoō"),
    consonants=(
        "k", "kh", "g", "gh", "ṅ",
        "c", "ch", "j", "jh", "ñ",
        "ṭ", "ṭh", "ḍ", "ḍh", "ṇ",
        "t", "th", "d", "dh", "n",
        "p", "ph", "b", "bh", "m",
        "y", "r", "l", "ḻ", "v", "ś", "ṣ", "s", "h"),
    digits=tuple("0123456789"),
    anusvara='\u1e43',
    visarga='\u1e25',
    avagraha='\u0315',
    virama='',
    danda='|',
    double_danda='\u2016',
    abbreviation='\u00b7',
)

# ============================================================================
# THAI
# ============================================================================

THAI_LEADING_VOWELS = '\u0e40\u0e42\u0e44'  # เ โ ไ are written before their consonant

_THAI = dict(
    independent_vowels=(
        "อ", "อา", "อิ", "อี", "อุ", "อู",
        "ฤ", "ฤๅ", "ฦ", "ฦๅ",
        "อเ", "อไ", "อโ", "อเา"),
    dependent_vowels=(
        "", "า", "ิ", "ี", "ุ", "ู",
        "ฤ", "ฤๅ", "ฦ", "ฦๅ",
        "เ", "ไ", "โ", "เา"),
    consonants=_chars(
        0x0E01, 0x0E02, 0x0E04, 0x0E06, 0x0E07,
        0x0E08, 0x0E09, 0x0E0A, 0x0E0C, 0x0E0D,
        0x0E0F, 0x0E10, 0x0E11, 0x0E12, 0x0E13,
        0x0E15, 0x0E16, 0x0E17, 0x0E18, 0x0E19,
        0x0E1B, 0x0E1C, 0x0E1E, 0x0E20, 0x0E21,
        0x0E22, 0x0E23, 0x0E25, 0x0E2C, 0x0E27, 0x0E28, 0x0E29, 0x0E2A, 0x0E2B),
    digits=_chars(*range(0x0E50, 0x0E5A)),
    anusvara='\u0e4d',
    visarga='\u0e30',
    avagraha=APOSTROPHE,
    virama='\u0e3a',
    danda='\u0e2f',
    double_danda='\u0e5a',
    abbreviation='.',
)

# ============================================================================
# KHMER
# ============================================================================

# Vocalic ṛ ṝ ḷ ḹ; after a consonant they are written subscript with coeng
KHMER_VOCALIC_RL = '\u17ab\u17ac\u17ad\u17ae'

_KHMER = dict(
    independent_vowels=(
        "អ", "អា", "ឥ", "ឦ", "ឧ", "ឩ",
        "ឫ", "ឬ", "ឭ", "ឮ",
        "ឯ", "ឰ", "ឱ", "ឳ"),
    dependent_vowels=("",) + _chars(
        0x17B6, 0x17B7, 0x17B8, 0x17BB, 0x17BC,
        0x17AB, 0x17AC, 0x17AD, 0x17AE,
        0x17C1, 0x17C3, 0x17C4, 0x17C5),
    consonants=_chars(
        0x1780, 0x1781, 0x1782, 0x1783, 0x1784,
        0x1785, 0x1786, 0x1787, 0x1788, 0x1789,
        0x178A, 0x178B, 0x178C, 0x178D, 0x178E,
        0x178F, 0x1790, 0x1791, 0x1792, 0x1793,
        0x1794, 0x1795, 0x1796, 0x1797, 0x1798,
        0x1799, 0x179A, 0x179B, 0x17A1, 0x179C, 0x179D, 0x179E, 0x179F, 0x17A0),
    digits=_chars(*range(0x17E0, 0x17EA)),
    anusvara='\u17c6',
    visarga='\u17c7',
    avagraha=APOSTROPHE,
    virama='\u17d2',  # coeng
    danda='\u17d4',
    double_danda='\u17d5',
    abbreviation='.',
    killer='\u17d1',
)

# ============================================================================
# SINHALA
# ============================================================================

# Sinhala Lith digits are astrological; ordinary text uses ASCII digits
_SINHALA = dict(
    independent_vowels=_chars(
        0x0D85, 0x0D86, 0x0D89, 0x0D8A, 0x0D8B, 0x0D8C,
        0x0D8D, 0x0D8E, 0x0D8F, 0x0D90,
        0x0D91, 0x0D93, 0x0D94, 0x0D96),
    dependent_vowels=("",) + _chars(
        0x0DCF, 0x0DD2, 0x0DD3, 0x0DD4, 0x0DD6,
        0x0DD8, 0x0DF2, 0x0DDF, 0x0DF3,
        0x0DD9, 0x0DDB, 0x0DDC, 0x0DDE),
    consonants=_chars(
        0x0D9A, 0x0D9B, 0x0D9C, 0x0D9D, 0x0D9E,
        0x0DA0, 0x0DA1, 0x0DA2, 0x0DA3, 0x0DA4,
        0x0DA7, 0x0DA8, 0x0DA9, 0x0DAA, 0x0DAB,
        0x0DAD, 0x0DAE, 0x0DAF, 0x0DB0, 0x0DB1,
        0x0DB4, 0x0DB5, 0x0DB6, 0x0DB7, 0x0DB8,
        0x0DBA, 0x0DBB, 0x0DBD, 0x0DC5, 0x0DC0, 0x0DC1, 0x0DC2, 0x0DC3, 0x0DC4),
    digits=tuple("0123456789"),
    anusvara='\u0d82',
    visarga='\u0d83',
    avagraha=APOSTROPHE,
    virama='\u0dca',
    danda='.',
    double_danda='.',
    abbreviation='.',
)

# ============================================================================
# MYANMAR
# ============================================================================

MYANMAR_SHORT_AA = '\u102c'
MYANMAR_TALL_AA = '\u102b'
MYANMAR_DEP_E = '\u1031'

_MYANMAR = dict(
    independent_vowels=(
        "အ", "အ" + MYANMAR_SHORT_AA, "ဣ", "ဤ", "ဥ", "ဦ",
        "ၒ", "ၓ", "ၔ", "ၕ",
        "ဧ", "အဲ", "ဩ", "ဪ"),
    dependent_vowels=(
        "", MYANMAR_SHORT_AA, "ိ", "ီ", "ု", "ူ",
        "ၖ", "ၗ", "ၘ", "ၙ",
        MYANMAR_DEP_E, "ဲ", MYANMAR_DEP_E + MYANMAR_SHORT_AA,
        MYANMAR_DEP_E + MYANMAR_SHORT_AA + "်"),
    consonants=_chars(
        0x1000, 0x1001, 0x1002, 0x1003, 0x1004,
        0x1005, 0x1006, 0x1007, 0x1008, 0x1009,
        0x100B, 0x100C, 0x100D, 0x100E, 0x100F,
        0x1010, 0x1011, 0x1012, 0x1013, 0x1014,
        0x1015, 0x1016, 0x1017, 0x1018, 0x1019,
        0x101A, 0x101B, 0x101C, 0x1020, 0x101D, 0x1050, 0x1051, 0x101E, 0x101F),
    digits=_chars(*range(0x1040, 0x104A)),
    anusvara='\u1036',
    visarga='\u1038',
    avagraha=APOSTROPHE,
    virama='\u1039',
    danda='\u104a',  # CST4 renders the single danda as the Myanmar comma
    double_danda='\u104b',
    abbreviation='.',
    killer='\u103a',  # asat
)

_TABLE_DATA: Dict[Script, dict] = {
    Script.ROMAN: _ROMAN,
    Script.DEVANAGARI: _DEVANAGARI,
    Script.THAI: _THAI,
    Script.KHMER: _KHMER,
    Script.SINHALA: _SINHALA,
    Script.MYANMAR: _MYANMAR,
}


@lru_cache(maxsize=None)
def for_script(script: Script) -> CharacterTable:
    """
    Get the character table of a script.

    Tables are built on first use and shared afterwards.

    Raises:
        KeyError: If the script has no table (Script.UNKNOWN)
    """
    return CharacterTable(script=script, **_TABLE_DATA[script])


def supported_scripts() -> List[Script]:
    """Scripts that have a character table."""
    return list(_TABLE_DATA)


def pali_vowels(script: Script) -> List[str]:
    """
    The eight Pali vowels (a ā i ī u ū e o) as written in a script.

    Thai e and o are shown in display order, vowel sign first.
    """
    table = for_script(script)
    vowels = []
    for i, vowel in enumerate(table.independent_vowels):
        if i in NON_PALI_VOWEL_INDICES:
            continue
        if script is Script.THAI and len(vowel) == 2 and vowel[1] in THAI_LEADING_VOWELS:
            vowel = vowel[1] + vowel[0]
        vowels.append(vowel)
    return vowels


def pali_consonants(script: Script) -> List[str]:
    """
    The 33 Pali letters in traditional order, niggahita last.

    ka ... la, then va sa ha ḷa ṃ. Sanskrit-only śa and ṣa are left out.
    """
    table = for_script(script)
    letters = list(table.consonants[:LLA_INDEX])
    lla = table.consonants[LLA_INDEX]
    if script is Script.ROMAN:
        lla = "ḷ"  # display form of the canonical ḻ
    letters.extend([
        table.consonants[VA_INDEX],
        table.consonants[SA_INDEX],
        table.consonants[HA_INDEX],
        lla,
        table.anusvara,
    ])
    return letters


def pali_digits(script: Script) -> List[str]:
    return list(for_script(script).digits)
