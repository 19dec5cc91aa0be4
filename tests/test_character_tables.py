"""
Character table tests.

Tests for:
- Table sizes and index alignment across scripts
- Reverse lookups
- Pali letter listings
"""
import sys
from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.models import Script
from data.character_tables import (
    CONSONANT_COUNT,
    DIGIT_COUNT,
    VOWEL_COUNT,
    CharacterTable,
    for_script,
    pali_consonants,
    pali_digits,
    pali_vowels,
    supported_scripts,
)


class TestTableShape:
    """Every table has the same letter inventory."""

    @pytest.mark.parametrize("script", supported_scripts())
    def test_sizes(self, script):
        table = for_script(script)
        assert len(table.independent_vowels) == VOWEL_COUNT
        assert len(table.dependent_vowels) == VOWEL_COUNT
        assert len(table.consonants) == CONSONANT_COUNT
        assert len(table.digits) == DIGIT_COUNT

    @pytest.mark.parametrize("script", supported_scripts())
    def test_consonants_are_distinct(self, script):
        table = for_script(script)
        assert len(set(table.consonants)) == CONSONANT_COUNT

    def test_six_scripts_supported(self):
        assert set(supported_scripts()) == {
            Script.ROMAN, Script.DEVANAGARI, Script.THAI,
            Script.KHMER, Script.MYANMAR, Script.SINHALA
        }

    def test_unknown_script_has_no_table(self):
        with pytest.raises(KeyError):
            for_script(Script.UNKNOWN)

    def test_tables_are_memoized(self):
        assert for_script(Script.THAI) is for_script(Script.THAI)

    def test_tables_are_immutable(self):
        table = for_script(Script.DEVANAGARI)
        with pytest.raises(FrozenInstanceError):
            table.virama = "x"

    def test_wrong_size_rejected(self):
        deva = for_script(Script.DEVANAGARI)
        with pytest.raises(ValueError):
            CharacterTable(
                script=Script.DEVANAGARI,
                independent_vowels=deva.independent_vowels,
                dependent_vowels=deva.dependent_vowels,
                consonants=deva.consonants[:-1],
                digits=deva.digits,
                anusvara=deva.anusvara,
                visarga=deva.visarga,
                avagraha=deva.avagraha,
                virama=deva.virama,
                danda=deva.danda,
                double_danda=deva.double_danda,
                abbreviation=deva.abbreviation,
            )


class TestIndexAlignment:
    """Index i is the same letter in every script."""

    def test_dha_across_scripts(self):
        expected = {
            Script.ROMAN: "dh",
            Script.DEVANAGARI: "ध",
            Script.THAI: "ธ",
            Script.KHMER: "ធ",
            Script.SINHALA: "ධ",
            Script.MYANMAR: "ဓ",
        }
        index = for_script(Script.ROMAN).consonant_index("dh")
        for script, letter in expected.items():
            assert for_script(script).consonants[index] == letter

    def test_lla_position(self):
        deva = for_script(Script.DEVANAGARI)
        assert deva.consonant_index("ळ") == 28
        assert for_script(Script.ROMAN).consonants[28] == "ḻ"
        assert for_script(Script.KHMER).consonants[28] == "ឡ"

    def test_vowel_e_across_scripts(self):
        index = for_script(Script.ROMAN).independent_vowel_index("e")
        assert index == 10
        assert for_script(Script.DEVANAGARI).independent_vowels[index] == "ए"
        assert for_script(Script.DEVANAGARI).dependent_vowels[index] == "े"
        assert for_script(Script.THAI).dependent_vowels[index] == "เ"


class TestLookups:
    """Reverse lookups return indices or None."""

    def setup_method(self):
        self.deva = for_script(Script.DEVANAGARI)
        self.thai = for_script(Script.THAI)

    def test_consonant_index(self):
        assert self.deva.consonant_index("क") == 0
        assert self.deva.consonant_index("ह") == 33

    def test_non_member_is_none(self):
        assert self.deva.consonant_index("a") is None
        assert self.deva.digit_index("क") is None

    def test_inherent_vowel_has_no_dependent_sign(self):
        assert self.deva.dependent_vowels[0] == ""
        assert self.deva.dependent_vowel_index("") is None
        assert self.deva.dependent_vowel_index("अ") is None

    def test_vowel_index_prefers_independent(self):
        assert self.deva.vowel_index("आ") == 1
        assert self.deva.vowel_index("ा") == 1

    def test_multi_character_entries(self):
        assert self.thai.independent_vowel_index("อา") == 1
        assert for_script(Script.MYANMAR).dependent_vowel_index("ော") == 12

    def test_digit_index(self):
        assert self.deva.digit_index("७") == 7
        assert for_script(Script.SINHALA).digit_index("7") == 7

    def test_special_signs(self):
        assert self.deva.special("virama") == "्"
        assert self.deva.special("anusvara") == "ं"
        assert for_script(Script.KHMER).special("killer") == "៑"
        assert self.deva.special("consonants") is None

    def test_longest_vowel(self):
        assert for_script(Script.MYANMAR).longest_vowel == 3
        assert self.deva.longest_vowel == 1


class TestPaliListings:
    """Letter listings for keyboards and charts."""

    @pytest.mark.parametrize("script", supported_scripts())
    def test_counts(self, script):
        assert len(pali_vowels(script)) == 8
        assert len(pali_consonants(script)) == 33
        assert len(pali_digits(script)) == 10

    def test_roman_consonants_order(self):
        letters = pali_consonants(Script.ROMAN)
        assert letters[:5] == ["k", "kh", "g", "gh", "ṅ"]
        assert letters[27:] == ["l", "v", "s", "h", "ḷ", "ṃ"]

    def test_roman_vowels(self):
        assert pali_vowels(Script.ROMAN) == ["a", "ā", "i", "ī", "u", "ū", "e", "o"]

    def test_thai_vowels_in_display_order(self):
        vowels = pali_vowels(Script.THAI)
        assert vowels[6] == "เอ"
        assert vowels[7] == "โอ"

    def test_devanagari_niggahita_last(self):
        assert pali_consonants(Script.DEVANAGARI)[-1] == "ं"
