"""
Script detection tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from core.models import Script
from services.script_detector import ScriptDetector, detect_script
from tests.fixtures import SAMPLE_DHAMMO, SAMPLE_BUDDHA


class TestScriptDetector:
    """Tests for ScriptDetector."""

    def setup_method(self):
        self.detector = ScriptDetector(sample_length=50)

    @pytest.mark.parametrize("script", list(SAMPLE_DHAMMO))
    def test_detects_every_script(self, script):
        text = SAMPLE_DHAMMO[script] + " " + SAMPLE_BUDDHA[script]
        assert self.detector.detect_script(text) is script

    def test_empty_text_is_roman(self):
        assert self.detector.detect_script("") is Script.ROMAN
        assert self.detector.detect_script("   ") is Script.ROMAN

    def test_mixed_text_is_unknown(self):
        assert self.detector.detect_script("ab ธม") is Script.UNKNOWN

    def test_roman_with_diacritics(self):
        assert self.detector.detect_script("evaṃ me sutaṃ") is Script.ROMAN

    def test_only_head_is_sampled(self):
        detector = ScriptDetector(sample_length=6)
        assert detector.detect_script("dhamma धम्म धम्म धम्म") is Script.ROMAN

    def test_leading_whitespace_ignored(self):
        assert self.detector.detect_script("\n\n  धम्म") is Script.DEVANAGARI

    def test_module_function(self):
        assert detect_script("धम्मो") is Script.DEVANAGARI
