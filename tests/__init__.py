"""
Test suite for the Pali script transliterator.

Test Structure:
--------------
- test_character_tables.py : Script tables, index alignment, letter listings
- test_roman_styles.py     : Roman display styles (to_canonical / to_style)
- test_tag_guard.py        : Markup protection
- test_pivot_converter.py  : Devanagari ↔ Roman and raw table conversion
- test_post_processor.py   : Thai, Khmer and Myanmar orthography rules
- test_router.py           : Engine table and pipeline routing
- test_transliterator.py   : Public API (engine, JSON and script level)
- test_script_detector.py  : Script detection
- test_models.py           : Data models and errors
- test_cli.py              : Batch CLI
- test_api.py              : API endpoint tests
- fixtures/                : Shared sample texts and helpers

Running Tests:
-------------
Run all tests:
    python -m pytest tests/

Run a specific test file:
    python -m pytest tests/test_router.py -v
"""

from tests.fixtures import (
    SAMPLE_DHAMMO,
    SAMPLE_BUDDHA,
    SAMPLE_PALI_WORDS,
    SAMPLE_CST4_XML,
    create_sample_request,
    create_sample_file
)

__all__ = [
    'SAMPLE_DHAMMO',
    'SAMPLE_BUDDHA',
    'SAMPLE_PALI_WORDS',
    'SAMPLE_CST4_XML',
    'create_sample_request',
    'create_sample_file'
]
