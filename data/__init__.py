"""
Character tables of the supported scripts.
"""
from data.character_tables import (
    CharacterTable,
    for_script,
    supported_scripts,
    pali_vowels,
    pali_consonants,
    pali_digits,
)

__all__ = [
    'CharacterTable',
    'for_script',
    'supported_scripts',
    'pali_vowels',
    'pali_consonants',
    'pali_digits',
]
