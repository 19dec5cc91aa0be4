"""
Public transliteration API.

This module provides:
1. Engine-level conversion (transliterate, translit_quick)
2. JSON-embedded conversion for BJT and SuttaCentral data
   (translit_bjt, translit_sc)
3. Script-level conversion routed through Devanagari
   (translit_pali_script and its quick variants)
4. The request-object form used by the CLI and the HTTP API (convert)
5. CST4 stylesheet name fixing (fix_xsl_name)

The "quick" variants skip markup protection and are meant for short
strings known to hold no tags, such as dictionary headwords.
"""
import logging
import re
import unicodedata
from typing import Optional, Union

import config
from core.errors import ScriptConversionError
from core.models import (
    ConversionRequest,
    EngineType,
    RomanStyle,
    Script,
    TransliterationResult,
)
from services import tag_guard
from services.router import Pipeline, Stage, route

logger = logging.getLogger(__name__)

EngineLike = Union[EngineType, str]
ScriptLike = Union[Script, str]
StyleLike = Union[RomanStyle, str, None]

BJT_TEXT_PATTERN = re.compile(r'"text": "(.*?)"')
SC_PAIR_PATTERN = re.compile(r'"(.*?)": "(.*?)"')


def _engine(engine: EngineLike) -> EngineType:
    return engine if isinstance(engine, EngineType) else EngineType.from_code(engine)


def _script(script: ScriptLike) -> Script:
    return script if isinstance(script, Script) else Script.from_name(script)


def _style(style: StyleLike) -> RomanStyle:
    if style is None:
        return RomanStyle.from_name(config.DEFAULT_ROMAN_STYLE)
    return style if isinstance(style, RomanStyle) else RomanStyle.from_name(style)


def _engine_pipeline(engine: EngineLike, second_engine: Optional[EngineLike]) -> Pipeline:
    engines = [_engine(engine)]
    if second_engine is not None:
        engines.append(_engine(second_engine))
    return Pipeline(
        engines[0].source,
        engines[-1].target,
        [Stage.for_engine(e) for e in engines]
    )


def _run_protected(pipeline: Pipeline, text: str, request: ConversionRequest) -> str:
    protected, registry = tag_guard.protect(text)
    return tag_guard.restore(pipeline.run(protected, request), registry)


def _engine_request(pipeline: Pipeline, include_numerals: bool) -> ConversionRequest:
    return ConversionRequest(pipeline.source, pipeline.target, include_numerals=include_numerals)


# ============================================================================
# ENGINE LEVEL
# ============================================================================

def transliterate(
    text: str,
    engine: EngineLike,
    second_engine: Optional[EngineLike] = None,
    include_numerals: bool = True,
    fix_xsl: bool = False
) -> str:
    """
    Convert text with one engine, or two engines in sequence.

    Markup tags and literal "\\n" escapes are left untouched.

    Args:
        text: Input text
        engine: First engine (EngineType or its two-letter code)
        second_engine: Optional engine applied to the first one's output
        include_numerals: Convert digits to the target script's numerals
        fix_xsl: Also rewrite the CST4 stylesheet name for the target script

    Returns:
        Converted text

    Raises:
        UnknownEngineError: If an engine code is not recognized
    """
    if not text:
        return text
    pipeline = _engine_pipeline(engine, second_engine)
    result = _run_protected(pipeline, text, _engine_request(pipeline, include_numerals))
    if fix_xsl:
        result = fix_xsl_name(result, pipeline.source, pipeline.target)
    return result


def translit_quick(
    text: str,
    engine: EngineLike,
    second_engine: Optional[EngineLike] = None,
    include_numerals: bool = True
) -> str:
    """Like transliterate(), without markup protection."""
    if not text:
        return text
    pipeline = _engine_pipeline(engine, second_engine)
    return pipeline.run(text, _engine_request(pipeline, include_numerals))


def translit_bjt(text: str, engine: EngineLike, include_numerals: bool = True) -> str:
    """
    Convert the "text" values of BJT (Buddha Jayanti Tipitaka) JSON.

    Only values of "text": "..." pairs change; keys, other values, tags
    and literal "\\n" escapes stay as they are.
    """
    if not text:
        return text
    pipeline = _engine_pipeline(engine, None)
    request = _engine_request(pipeline, include_numerals)
    protected, registry = tag_guard.protect(text)
    converted = BJT_TEXT_PATTERN.sub(
        lambda m: '"text": "' + pipeline.run(m.group(1), request) + '"',
        protected
    )
    return tag_guard.restore(converted, registry)


def translit_sc(text: str, engine: EngineLike, include_numerals: bool = True) -> str:
    """
    Convert the values of SuttaCentral JSON.

    Every "key": "value" pair gets its value converted; keys (segment ids)
    stay as they are.
    """
    if not text:
        return text
    pipeline = _engine_pipeline(engine, None)
    request = _engine_request(pipeline, include_numerals)
    protected, registry = tag_guard.protect(text)
    converted = SC_PAIR_PATTERN.sub(
        lambda m: '"' + m.group(1) + '": "' + pipeline.run(m.group(2), request) + '"',
        protected
    )
    return tag_guard.restore(converted, registry)


# ============================================================================
# SCRIPT LEVEL
# ============================================================================

def _script_request(
    from_script: ScriptLike,
    to_script: ScriptLike,
    roman_style: StyleLike,
    include_numerals: bool,
    sanskrit_mode: bool
) -> ConversionRequest:
    return ConversionRequest(
        source=_script(from_script),
        target=_script(to_script),
        roman_style=_style(roman_style),
        include_numerals=include_numerals,
        sanskrit_mode=sanskrit_mode,
    )


def translit_pali_script(
    text: str,
    from_script: ScriptLike,
    to_script: ScriptLike,
    roman_style: StyleLike = None,
    include_numerals: bool = True,
    sanskrit_mode: bool = False
) -> str:
    """
    Convert text between any two supported scripts.

    Args:
        text: Input text
        from_script: Script of the input
        to_script: Script of the output
        roman_style: Display style when the output is Roman
            (default: config.DEFAULT_ROMAN_STYLE)
        include_numerals: Convert digits to the target script's numerals
        sanskrit_mode: Read Roman input as Sanskrit (ai/au diphthongs,
            vocalic ḷ)

    Returns:
        Converted text; the input unchanged for an unsupported or
        identical non-Roman pair

    Raises:
        UnknownScriptError: If a script name is not recognized
        UnknownRomanStyleError: If a style name is not recognized
        ScriptConversionError: If a conversion stage fails
    """
    if not text:
        return text
    request = _script_request(from_script, to_script, roman_style, include_numerals, sanskrit_mode)
    pipeline = route(request)
    if not pipeline:
        return text
    return _run_protected(pipeline, text, request)


def translit_quick_pali_script(
    text: str,
    from_script: ScriptLike,
    to_script: ScriptLike,
    roman_style: StyleLike = None,
    include_numerals: bool = True,
    sanskrit_mode: bool = False
) -> str:
    """Like translit_pali_script(), without markup protection."""
    if not text:
        return text
    request = _script_request(from_script, to_script, roman_style, include_numerals, sanskrit_mode)
    return route(request).run(text, request)


def translit_quick_pali(text, from_script, to_script, roman_style=None, include_numerals=True):
    return translit_quick_pali_script(text, from_script, to_script, roman_style, include_numerals, False)


def translit_quick_sanskrit(text, from_script, to_script, roman_style=None, include_numerals=True):
    return translit_quick_pali_script(text, from_script, to_script, roman_style, include_numerals, True)


def convert(request: ConversionRequest, text: str, quick: bool = False) -> TransliterationResult:
    """
    Convert text as described by a request.

    The input is first brought to config.UNICODE_NORMALIZATION_FORM, so
    decomposed Roman (a + combining macron) reads the same as ā.

    Args:
        request: Source, target and options
        text: Input text
        quick: Skip markup protection

    Returns:
        TransliterationResult with the converted text and the engines applied
    """
    normalized = unicodedata.normalize(config.UNICODE_NORMALIZATION_FORM, text or "")
    pipeline = route(request)
    logger.info(
        f"Converting {len(normalized)} chars: {request.source.display_name} → "
        f"{request.final_target.display_name}"
    )

    if not pipeline:
        converted = normalized
    elif quick:
        converted = pipeline.run(normalized, request)
    else:
        converted = _run_protected(pipeline, normalized, request)

    return TransliterationResult(
        original=text,
        text=converted,
        source_script=request.source,
        target_script=request.final_target,
        engines=pipeline.engine_codes,
    )


def fix_xsl_name(text: str, src_script: ScriptLike, tgt_script: ScriptLike) -> str:
    """
    Point a CST4 XML file at the stylesheet of its new script.

    Rewrites the first tipitaka-<src>.xsl to tipitaka-<tgt>.xsl, with
    ISO 15924 codes as used by CST4 (tipitaka-deva.xsl, tipitaka-latn.xsl).
    """
    source, target = _script(src_script), _script(tgt_script)
    if not source.iso_code or not target.iso_code:
        raise ScriptConversionError(
            source.display_name, target.display_name,
            "no CST4 stylesheet for an unknown script"
        )
    old_xsl = re.compile(f"tipitaka-{source.iso_code}\\.xsl")
    return old_xsl.sub(f"tipitaka-{target.iso_code}.xsl", text, count=1)
