"""
Configuration settings for the Pali script transliteration service.

Organized into logical sections:
1. Core Settings (paths, directories)
2. Transliteration Defaults
3. Script Detection
4. Server & Logging
"""
import os
from pathlib import Path

# ============================================
# CORE SETTINGS
# ============================================

# Base directory
BASE_DIR = Path(__file__).parent

# Log file location (LOG_FILE_ENABLED)
LOGS_DIR = BASE_DIR / "logs"

# Text files accepted by the batch transformer
SUPPORTED_FORMATS = {".txt", ".xml", ".htm", ".html", ".json", ".md", ".csv"}

# ============================================
# TRANSLITERATION DEFAULTS
# ============================================

# Roman display style used when a caller does not name one
# Options: "iso", "iast", "pali_common", "least_contamination", "unique"
DEFAULT_ROMAN_STYLE = os.getenv("DEFAULT_ROMAN_STYLE", "iast")

# Convert digits to the target script's numerals
INCLUDE_NUMERALS = os.getenv("INCLUDE_NUMERALS", "true").lower() == "true"

# Read Roman input as Sanskrit (ai/au diphthongs, ḷ as vocalic l)
SANSKRIT_MODE = os.getenv("SANSKRIT_MODE", "false").lower() == "true"

UNICODE_NORMALIZATION_FORM = os.getenv("UNICODE_NORMALIZATION_FORM", "NFC")
# Options: "NFC", "NFD", "NFKC", "NFKD"

# ============================================
# SCRIPT DETECTION
# ============================================

# Only the head of a text is inspected when guessing its script
DETECTION_SAMPLE_LENGTH = int(os.getenv("DETECTION_SAMPLE_LENGTH", "100"))

# ============================================
# SERVER & LOGGING
# ============================================

# Server configuration
HOST = os.getenv("FLASK_HOST", "0.0.0.0")  # Use 0.0.0.0 for Docker, 127.0.0.1 for local
PORT = int(os.getenv("FLASK_PORT", "5000"))
DEBUG = os.getenv("FLASK_DEBUG", "False").lower() == "true"

# Largest request body text accepted by the API (characters)
MAX_TEXT_LENGTH = int(os.getenv("MAX_TEXT_LENGTH", "1000000"))

# Logging configuration
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()  # DEBUG, INFO, WARNING, ERROR
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILE_ENABLED = os.getenv("LOG_FILE_ENABLED", "false").lower() == "true"

# ============================================
# INITIALIZATION
# ============================================

if LOG_FILE_ENABLED:
    LOGS_DIR.mkdir(parents=True, exist_ok=True)

# Setup logging
import logging
logging.basicConfig(
    level=getattr(logging, LOG_LEVEL, logging.INFO),
    format=LOG_FORMAT,
    handlers=[
        logging.StreamHandler(),
        *([logging.FileHandler(LOGS_DIR / "transliteration.log")] if LOG_FILE_ENABLED else [])
    ]
)
