"""
Shared test fixtures for the transliteration tests.

This module provides reusable sample texts and request builders.
"""
from pathlib import Path
import sys

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

from core.models import ConversionRequest, RomanStyle, Script


# The same Pali phrases in every script: "dhammo" and "buddha"
SAMPLE_DHAMMO = {
    Script.ROMAN: "dhammo",
    Script.DEVANAGARI: "धम्मो",
    Script.THAI: "ธมฺโม",
    Script.KHMER: "ធម្មោ",
    Script.SINHALA: "ධම්මො",
    Script.MYANMAR: "ဓမ္မော",
}

SAMPLE_BUDDHA = {
    Script.ROMAN: "buddha",
    Script.DEVANAGARI: "बुद्ध",
    Script.THAI: "พุทฺธ",
    Script.KHMER: "ពុទ្ធ",
    Script.SINHALA: "බුද්ධ",
    Script.MYANMAR: "ဗုဒ္ဓ",
}

# Pali words in the canonical Roman form
SAMPLE_PALI_WORDS = [
    "dhamma",
    "buddha",
    "saṅgha",
    "mettā",
    "nibbāna",
    "evaṃ",
    "ñāṇa",
    "paṭiccasamuppāda",
    "kāḻa",
    "bhikkhu",
]

SAMPLE_CST4_XML = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<?xml-stylesheet type="text/xsl" href="tipitaka-deva.xsl"?>\n'
    '<p rend="bodytext">धम्मो</p>\n'
)


def create_sample_request(
    source: Script = Script.ROMAN,
    target: Script = Script.DEVANAGARI,
    roman_style: RomanStyle = RomanStyle.IAST,
    include_numerals: bool = True,
    sanskrit_mode: bool = False,
    secondary_target: Script = None
) -> ConversionRequest:
    """Create a conversion request with explicit defaults."""
    return ConversionRequest(
        source=source,
        target=target,
        roman_style=roman_style,
        include_numerals=include_numerals,
        sanskrit_mode=sanskrit_mode,
        secondary_target=secondary_target
    )


def create_sample_file(directory: Path, name: str, content: str, encoding: str = "utf-8") -> Path:
    """Write a text file for CLI tests."""
    path = directory / name
    path.write_text(content, encoding=encoding)
    return path
