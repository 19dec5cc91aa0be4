"""
Conversion routing.

Maps a (source, target) pair of scripts onto an ordered list of engine
stages. Devanagari is the pivot: a pair that has no direct engine is
converted source → Devanagari → target.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from core.errors import ScriptConversionError
from core.models import ConversionRequest, EngineType, RomanStyle, Script
from services import pivot_converter, roman_styles
from services.post_processor import post_processor

logger = logging.getLogger(__name__)

EngineFunction = Callable[[str, bool], str]


def _deva_to_roman(style: RomanStyle) -> EngineFunction:
    def convert(text: str, include_numerals: bool) -> str:
        roman = pivot_converter.devanagari_to_roman(text, include_numerals)
        return roman_styles.to_style(roman, style)
    return convert


def _roman_to_deva(as_pali: bool) -> EngineFunction:
    def convert(text: str, include_numerals: bool) -> str:
        canonical = roman_styles.to_canonical(text, as_pali=as_pali)
        return pivot_converter.roman_to_devanagari(canonical, include_numerals)
    return convert


def _deva_to_script(script: Script) -> EngineFunction:
    def convert(text: str, include_numerals: bool) -> str:
        raw = pivot_converter.devanagari_to_script(text, script, include_numerals)
        return post_processor.to_script(raw, script)
    return convert


def _script_to_deva(script: Script) -> EngineFunction:
    def convert(text: str, include_numerals: bool) -> str:
        prepared = post_processor.from_script(text, script)
        return pivot_converter.script_to_devanagari(prepared, script, include_numerals)
    return convert


ENGINE_FUNCTIONS: Dict[EngineType, EngineFunction] = {
    EngineType.DEVA_ROMAN_ISO: _deva_to_roman(RomanStyle.ISO),
    EngineType.DEVA_ROMAN_IAST: _deva_to_roman(RomanStyle.IAST),
    EngineType.DEVA_ROMAN_COMMON: _deva_to_roman(RomanStyle.PALI_COMMON),
    EngineType.DEVA_ROMAN_LEAST: _deva_to_roman(RomanStyle.LEAST_CONTAMINATION),
    EngineType.DEVA_ROMAN_UNIQUE: _deva_to_roman(RomanStyle.UNIQUE),
    EngineType.DEVA_THAI: _deva_to_script(Script.THAI),
    EngineType.DEVA_KHMER: _deva_to_script(Script.KHMER),
    EngineType.DEVA_SINHALA: _deva_to_script(Script.SINHALA),
    EngineType.DEVA_MYANMAR: _deva_to_script(Script.MYANMAR),
    EngineType.ROMAN_SKT_DEVA: _roman_to_deva(as_pali=False),
    EngineType.ROMAN_DEVA: _roman_to_deva(as_pali=True),
    EngineType.THAI_DEVA: _script_to_deva(Script.THAI),
    EngineType.KHMER_DEVA: _script_to_deva(Script.KHMER),
    EngineType.SINHALA_DEVA: _script_to_deva(Script.SINHALA),
    EngineType.MYANMAR_DEVA: _script_to_deva(Script.MYANMAR),
}

# Devanagari → script engines; Roman is chosen by display style
_FROM_DEVANAGARI: Dict[Script, EngineType] = {
    Script.THAI: EngineType.DEVA_THAI,
    Script.KHMER: EngineType.DEVA_KHMER,
    Script.SINHALA: EngineType.DEVA_SINHALA,
    Script.MYANMAR: EngineType.DEVA_MYANMAR,
}

# Script → Devanagari engines; Roman is chosen by Pali/Sanskrit reading
_TO_DEVANAGARI: Dict[Script, EngineType] = {
    Script.THAI: EngineType.THAI_DEVA,
    Script.KHMER: EngineType.KHMER_DEVA,
    Script.SINHALA: EngineType.SINHALA_DEVA,
    Script.MYANMAR: EngineType.MYANMAR_DEVA,
}


def run_engine(engine: EngineType, text: str, include_numerals: bool = True) -> str:
    """Apply a single engine to text."""
    return ENGINE_FUNCTIONS[engine](text, include_numerals)


@dataclass(frozen=True)
class Stage:
    """One step of a pipeline: a named engine or the Roman restyling step."""
    name: str
    function: Callable[[str, ConversionRequest], str]
    engine: Optional[EngineType] = None

    @classmethod
    def for_engine(cls, engine: EngineType) -> 'Stage':
        function = ENGINE_FUNCTIONS[engine]
        return cls(engine.code, lambda text, request: function(text, request.include_numerals), engine)

    def apply(self, text: str, request: ConversionRequest) -> str:
        return self.function(text, request)


def _restyle_roman(text: str, request: ConversionRequest) -> str:
    canonical = roman_styles.to_canonical(text, as_pali=not request.sanskrit_mode)
    return roman_styles.to_style(canonical, request.roman_style)


ROMAN_RESTYLE = Stage("roman_style", _restyle_roman)


@dataclass
class Pipeline:
    """Ordered stages for one request; an empty pipeline returns its input."""
    source: Script
    target: Script
    stages: List[Stage] = field(default_factory=list)

    def __bool__(self) -> bool:
        return bool(self.stages)

    @property
    def engine_codes(self) -> List[str]:
        return [stage.name for stage in self.stages]

    def run(self, text: str, request: ConversionRequest) -> str:
        """
        Push text through every stage in order.

        Raises:
            ScriptConversionError: If a stage fails unexpectedly
        """
        for stage in self.stages:
            try:
                text = stage.apply(text, request)
            except Exception as e:
                logger.error(f"Stage '{stage.name}' failed: {e}", exc_info=True)
                raise ScriptConversionError(
                    self.source.display_name,
                    self.target.display_name,
                    f"stage '{stage.name}': {e}"
                ) from e
            logger.debug(f"Stage '{stage.name}' done ({len(text)} chars)")
        return text


def _hop_stages(source: Script, target: Script, request: ConversionRequest) -> List[Stage]:
    if Script.UNKNOWN in (source, target):
        return []

    if source is Script.ROMAN and target is Script.ROMAN:
        return [ROMAN_RESTYLE]
    if source is target:
        return []

    if source is Script.ROMAN:
        first = EngineType.ROMAN_SKT_DEVA if request.sanskrit_mode else EngineType.ROMAN_DEVA
    elif source is Script.DEVANAGARI:
        first = None
    else:
        first = _TO_DEVANAGARI.get(source)

    if target is Script.ROMAN:
        second = EngineType.for_roman_style(request.roman_style)
    elif target is Script.DEVANAGARI:
        second = None
    else:
        second = _FROM_DEVANAGARI.get(target)

    return [Stage.for_engine(engine) for engine in (first, second) if engine is not None]


def route(request: ConversionRequest) -> Pipeline:
    """
    Resolve a request into its pipeline.

    Unsupported or identical non-Roman pairs give an empty pipeline.
    A secondary target adds one more hop from the primary target. A Roman
    primary target is styled only when it is the output, so a Roman
    intermediate is skipped and the route pivots through Devanagari.
    """
    secondary = request.secondary_target
    if secondary is not None and request.target is Script.ROMAN:
        stages = _hop_stages(request.source, secondary, request)
    else:
        stages = _hop_stages(request.source, request.target, request)
        if secondary is not None and Script.UNKNOWN not in (request.source, request.target):
            stages = stages + _hop_stages(request.target, secondary, request)

    pipeline = Pipeline(request.source, request.final_target, stages)
    logger.debug(
        f"Routed {request.source.display_name} → {request.final_target.display_name}: "
        f"{pipeline.engine_codes or 'passthrough'}"
    )
    return pipeline
