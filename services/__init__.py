"""
Service modules for the Pali script transliterator.

Structure:
- tag_guard: Markup protection around conversion
- roman_styles: Roman display styles and the canonical unique form
- pivot_converter: Devanagari ↔ Roman and Devanagari ↔ Thai/Khmer/Myanmar/Sinhala
- post_processor: Script-specific orthography rules
- router: (source, target) → engine pipeline
- transliterator: Public conversion API
- script_detector: Best-effort script detection
"""

# Don't import here to avoid circular imports
# Users should import directly:
#   from services.transliterator import translit_pali_script, convert
#   from services.script_detector import detect_script

__all__ = []
