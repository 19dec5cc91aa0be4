"""
Markup protection for transliteration.

Markup tags (<p rend="centre">) and literal "\\n" escapes in CST4/BJT data
must survive conversion untouched. Before conversion every such span is
swapped for a single placeholder codepoint from the supplementary
private-use planes; after conversion the placeholders are swapped back.
"""
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple

from core.errors import TagGuardError

logger = logging.getLogger(__name__)

# Tags and the two-character "\n" escape
PROTECTED_PATTERN = re.compile(r'<[^<>]*>|\\n')

# Planes 15 and 16: Supplementary Private Use Area-A and -B
SENTINEL_RANGES = (
    range(0xF0000, 0xFFFFE),
    range(0x100000, 0x10FFFE),
)


def _sentinel_codepoints() -> Iterator[int]:
    for block in SENTINEL_RANGES:
        yield from block


@dataclass
class SentinelRegistry:
    """
    Bijection between protected spans and their placeholders.

    Lives for one conversion call only.
    """
    span_to_sentinel: Dict[str, str] = field(default_factory=dict)
    sentinel_to_span: Dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.span_to_sentinel)

    def __bool__(self) -> bool:
        return bool(self.span_to_sentinel)

    def register(self, span: str, sentinel: str):
        self.span_to_sentinel[span] = sentinel
        self.sentinel_to_span[sentinel] = span


class TagGuard:
    """
    Shields markup from conversion stages.

    Codepoints that already occur in the input are never handed out as
    placeholders, so private-use characters in the text pass through.
    """

    def __init__(self, pattern: re.Pattern = PROTECTED_PATTERN):
        self.pattern = pattern

    def protect(self, text: str) -> Tuple[str, SentinelRegistry]:
        """
        Replace every protected span with a placeholder.

        Args:
            text: Input text

        Returns:
            Tuple of (protected_text, registry)

        Raises:
            TagGuardError: If the input holds more distinct spans than
                there are free placeholder codepoints
        """
        registry = SentinelRegistry()
        if not text:
            return text, registry

        present = set(text)
        candidates = _sentinel_codepoints()

        def allocate(match: re.Match) -> str:
            span = match.group(0)
            sentinel = registry.span_to_sentinel.get(span)
            if sentinel is not None:
                return sentinel
            for codepoint in candidates:
                sentinel = chr(codepoint)
                if sentinel not in present:
                    registry.register(span, sentinel)
                    return sentinel
            raise TagGuardError(f"more than {sum(len(r) for r in SENTINEL_RANGES)} distinct spans")

        protected = self.pattern.sub(allocate, text)
        if registry:
            logger.debug(f"Protected {len(registry)} distinct markup span(s)")
        return protected, registry

    def restore(self, text: str, registry: SentinelRegistry) -> str:
        """Put every protected span back in place of its placeholder."""
        if not registry:
            return text
        return ''.join(registry.sentinel_to_span.get(ch, ch) for ch in text)


_default_guard = TagGuard()


def protect(text: str) -> Tuple[str, SentinelRegistry]:
    return _default_guard.protect(text)


def restore(text: str, registry: SentinelRegistry) -> str:
    return _default_guard.restore(text, registry)
