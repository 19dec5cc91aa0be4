"""
Data models for the transliteration service.

This module defines the core data structures used throughout the system.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Dict, Any, Optional

import config
from core.errors import UnknownScriptError, UnknownEngineError, UnknownRomanStyleError


class Script(Enum):
    """Writing systems handled by the transliterator."""
    UNKNOWN = ("Unknown", "")
    ROMAN = ("Roman", "latn")
    DEVANAGARI = ("Devanagari", "deva")
    KHMER = ("Khmer", "khmr")
    MYANMAR = ("Myanmar", "mymr")
    SINHALA = ("Sinhala", "sinh")
    THAI = ("Thai", "thai")

    def __init__(self, display_name: str, iso_code: str):
        self.display_name = display_name
        self.iso_code = iso_code  # ISO 15924, also used in CST4 XSL names

    @classmethod
    def from_name(cls, name: str) -> 'Script':
        """Resolve a script from its member name, display name or ISO code."""
        key = (name or "").strip().lower()
        for script in cls:
            if key in (script.name.lower(), script.iso_code) and key:
                return script
        raise UnknownScriptError(name)


class RomanStyle(Enum):
    """
    Roman display conventions.

    UNIQUE is the lossless internal form. PALI_COMMON and
    LEAST_CONTAMINATION are not invertible: both render the consonant
    ḻ as ḷ, so a vocalic ḷ in the same text can no longer be told apart.
    """
    ISO = "iso"
    IAST = "iast"
    PALI_COMMON = "pali_common"
    LEAST_CONTAMINATION = "least_contamination"
    UNIQUE = "unique"

    @classmethod
    def from_name(cls, name: str) -> 'RomanStyle':
        """Resolve a style from its value or member name."""
        key = (name or "").strip().lower().replace("-", "_").replace(" ", "_")
        for style in cls:
            if key in (style.value, style.name.lower()):
                return style
        raise UnknownRomanStyleError(name)


class EngineType(Enum):
    """Single-hop conversion engines, keyed by a two-letter code."""
    DEVA_ROMAN_ISO = ("di", "D-R: ISO 15919", Script.DEVANAGARI, Script.ROMAN)
    DEVA_ROMAN_IAST = ("da", "D-R: IAST", Script.DEVANAGARI, Script.ROMAN)
    DEVA_ROMAN_COMMON = ("dr", "D-R: Pali Common", Script.DEVANAGARI, Script.ROMAN)
    DEVA_ROMAN_LEAST = ("dl", "D-R: Least Contamination", Script.DEVANAGARI, Script.ROMAN)
    DEVA_ROMAN_UNIQUE = ("du", "D-R: Roman Unique", Script.DEVANAGARI, Script.ROMAN)
    DEVA_THAI = ("dt", "D-T: Thai Common", Script.DEVANAGARI, Script.THAI)
    DEVA_KHMER = ("dk", "D-K: Khmer Common", Script.DEVANAGARI, Script.KHMER)
    DEVA_SINHALA = ("ds", "D-S: Sinhala Common", Script.DEVANAGARI, Script.SINHALA)
    DEVA_MYANMAR = ("dm", "D-M: Myanmar Common", Script.DEVANAGARI, Script.MYANMAR)
    ROMAN_SKT_DEVA = ("cd", "R-D: Devanagari Common", Script.ROMAN, Script.DEVANAGARI)
    ROMAN_DEVA = ("rd", "R-D: Devanagari Common", Script.ROMAN, Script.DEVANAGARI)
    THAI_DEVA = ("td", "T-D: Devanagari Common", Script.THAI, Script.DEVANAGARI)
    KHMER_DEVA = ("kd", "K-D: Devanagari Common", Script.KHMER, Script.DEVANAGARI)
    SINHALA_DEVA = ("sd", "S-D: Devanagari Common", Script.SINHALA, Script.DEVANAGARI)
    MYANMAR_DEVA = ("md", "M-D: Devanagari Common", Script.MYANMAR, Script.DEVANAGARI)

    def __init__(self, code: str, display_name: str, source: Script, target: Script):
        self.code = code
        self.display_name = display_name
        self.source = source
        self.target = target

    @property
    def short_name(self) -> str:
        """Display name without the 'X-Y: ' prefix."""
        return self.display_name[self.display_name.index(":") + 2:]

    @classmethod
    def from_code(cls, code: str) -> 'EngineType':
        for engine in cls:
            if engine.code == code:
                return engine
        raise UnknownEngineError(code)

    @classmethod
    def for_roman_style(cls, style: RomanStyle) -> 'EngineType':
        """Devanagari → Roman engine rendering the given display style."""
        return _ROMAN_STYLE_ENGINES[style]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "name": self.display_name,
            "source": self.source.name.lower(),
            "target": self.target.name.lower()
        }


_ROMAN_STYLE_ENGINES = {
    RomanStyle.ISO: EngineType.DEVA_ROMAN_ISO,
    RomanStyle.IAST: EngineType.DEVA_ROMAN_IAST,
    RomanStyle.PALI_COMMON: EngineType.DEVA_ROMAN_COMMON,
    RomanStyle.LEAST_CONTAMINATION: EngineType.DEVA_ROMAN_LEAST,
    RomanStyle.UNIQUE: EngineType.DEVA_ROMAN_UNIQUE,
}


def _default_roman_style() -> RomanStyle:
    return RomanStyle.from_name(config.DEFAULT_ROMAN_STYLE)


@dataclass(frozen=True)
class ConversionRequest:
    """
    Everything one conversion call needs.

    Created fresh per call; nothing here survives between calls, so
    concurrent conversions never observe each other's settings.
    """
    source: Script
    target: Script
    roman_style: RomanStyle = field(default_factory=_default_roman_style)
    include_numerals: bool = config.INCLUDE_NUMERALS
    sanskrit_mode: bool = config.SANSKRIT_MODE
    secondary_target: Optional[Script] = None

    @property
    def final_target(self) -> Script:
        """Script the output ends up in."""
        return self.secondary_target or self.target


@dataclass
class TransliterationResult:
    """Result of one conversion, as reported by the CLI and the API."""
    original: str
    text: str
    source_script: Script
    target_script: Script
    engines: List[str] = field(default_factory=list)  # engine codes applied, in order

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "original": self.original,
            "text": self.text,
            "source_script": self.source_script.name.lower(),
            "target_script": self.target_script.name.lower(),
            "engines": self.engines
        }
