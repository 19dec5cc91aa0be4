"""
Script detection.

A best-effort guess used by the batch transformer and the API when the
caller does not name the source script. Only the head of the text is
inspected.
"""
import logging
from typing import Dict

import config
from core.models import Script

logger = logging.getLogger(__name__)


class ScriptDetector:
    """
    Detects the script of input text by counting characters per Unicode block.

    ASCII letters and digits count as Roman.
    """

    SCRIPT_RANGES: Dict[Script, range] = {
        Script.ROMAN: range(0x0030, 0x007B),  # 0-9 ... a-z
        Script.DEVANAGARI: range(0x0900, 0x0980),
        Script.SINHALA: range(0x0D80, 0x0E00),
        Script.THAI: range(0x0E00, 0x0E80),
        Script.MYANMAR: range(0x1000, 0x10A0),
        Script.KHMER: range(0x1780, 0x1800),
    }

    def __init__(self, sample_length: int = config.DETECTION_SAMPLE_LENGTH):
        self.sample_length = sample_length

    def detect_script(self, text: str) -> Script:
        """
        Detect the predominant script of text.

        Args:
            text: Input text

        Returns:
            The script holding more than half of the sampled characters,
            Script.ROMAN for empty text, otherwise Script.UNKNOWN
        """
        sample = (text or "").strip()[:self.sample_length]
        if not sample:
            return Script.ROMAN

        counts = {script: 0 for script in self.SCRIPT_RANGES}
        for char in sample:
            code = ord(char)
            for script, block in self.SCRIPT_RANGES.items():
                if code in block:
                    counts[script] += 1
                    break

        best = max(counts, key=counts.get)
        if counts[best] > len(sample) / 2:
            logger.debug(f"Detected {best.display_name} ({counts[best]}/{len(sample)} chars)")
            return best

        logger.debug(f"No predominant script in sample: {counts}")
        return Script.UNKNOWN


_detector = ScriptDetector()


def detect_script(text: str) -> Script:
    """Detect the script of text with the configured sample length."""
    return _detector.detect_script(text)
