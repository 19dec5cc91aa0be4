"""
Flask backend server for the Pali script transliterator.
"""
import logging

from flask import Flask, request, jsonify

import config
from core.errors import ScriptConversionError, TransliterationError
from core.models import ConversionRequest, EngineType, RomanStyle, Script
from data.character_tables import pali_consonants, pali_digits, pali_vowels, supported_scripts
from services.script_detector import detect_script
from services.transliterator import convert

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _bool_field(data: dict, name: str, default: bool) -> bool:
    value = data.get(name, default)
    if not isinstance(value, bool):
        raise ValueError(f"'{name}' must be true or false")
    return value


def _text_field(data: dict):
    """Return (text, error_response) for the request's "text" field."""
    text = data.get("text")
    if not isinstance(text, str):
        return None, (jsonify({"error": "'text' (string) required"}), 400)
    if len(text) > config.MAX_TEXT_LENGTH:
        return None, (jsonify({
            "error": f"Text too long. Maximum length: {config.MAX_TEXT_LENGTH} characters"
        }), 413)
    return text, None


@app.route('/status', methods=['GET'])
def status():
    """Health check and status endpoint."""
    return jsonify({
        "status": "ok",
        "engines": len(EngineType),
        "default_roman_style": config.DEFAULT_ROMAN_STYLE,
        "include_numerals": config.INCLUDE_NUMERALS
    })


@app.route('/engines', methods=['GET'])
def engines():
    """List the single-hop conversion engines."""
    return jsonify({"engines": [engine.to_dict() for engine in EngineType]})


@app.route('/scripts', methods=['GET'])
def scripts():
    """List supported scripts with their Pali letter charts."""
    return jsonify({
        "scripts": [
            {
                "name": script.name.lower(),
                "display_name": script.display_name,
                "iso_code": script.iso_code,
                "vowels": pali_vowels(script),
                "consonants": pali_consonants(script),
                "digits": pali_digits(script)
            }
            for script in supported_scripts()
        ],
        "roman_styles": [style.value for style in RomanStyle]
    })


@app.route('/transliterate', methods=['POST'])
def transliterate_text():
    """
    Convert text between scripts.

    Body: {text, target, source?, style?, include_numerals?,
    sanskrit_mode?, quick?}. Without a source the script is detected.
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400

    text, error = _text_field(data)
    if error:
        return error
    if not data.get("target"):
        return jsonify({"error": "'target' required"}), 400

    try:
        source_name = data.get("source") or "auto"
        source = detect_script(text) if source_name == "auto" else Script.from_name(source_name)
        if source is Script.UNKNOWN:
            return jsonify({"error": "Could not detect the source script; pass 'source'"}), 400

        conversion = ConversionRequest(
            source=source,
            target=Script.from_name(data["target"]),
            roman_style=RomanStyle.from_name(data.get("style") or config.DEFAULT_ROMAN_STYLE),
            include_numerals=_bool_field(data, "include_numerals", config.INCLUDE_NUMERALS),
            sanskrit_mode=_bool_field(data, "sanskrit_mode", config.SANSKRIT_MODE),
        )
        quick = _bool_field(data, "quick", False)
    except (TransliterationError, ValueError) as e:
        return jsonify({"error": str(e)}), 400

    try:
        result = convert(conversion, text, quick=quick)
    except ScriptConversionError as e:
        logger.error(f"Conversion failed: {e}")
        return jsonify({"error": str(e)}), 500

    return jsonify(result.to_dict())


@app.route('/detect', methods=['POST'])
def detect():
    """Guess the script of the posted text."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "JSON body required"}), 400

    text, error = _text_field(data)
    if error:
        return error

    script = detect_script(text)
    return jsonify({
        "script": script.name.lower(),
        "display_name": script.display_name
    })


@app.errorhandler(404)
def handle_not_found(e):
    """Handle 404 errors."""
    return jsonify({"error": "Endpoint not found"}), 404


@app.errorhandler(500)
def handle_server_error(e):
    """Handle 500 errors."""
    return jsonify({"error": "Internal server error"}), 500


if __name__ == '__main__':
    print(f"Starting server on http://{config.HOST}:{config.PORT}")
    app.run(host=config.HOST, port=config.PORT, debug=config.DEBUG)
