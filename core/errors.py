"""
Custom exceptions for the transliteration service.

All exceptions must be explicit and provide clear error messages
explaining how to fix the issue.

The conversion engine itself never raises for unsupported script pairs
or unmapped characters (those pass through unchanged); these exceptions
cover bad names coming in from the CLI and the API, and genuine failures
inside a pipeline stage.
"""


class TransliterationError(Exception):
    """Base exception for all transliteration errors."""
    pass


class UnknownScriptError(TransliterationError):
    """Raised when a script name cannot be resolved."""

    def __init__(self, name: str):
        message = f"Unknown script: '{name}'"
        message += "\nFix: Use one of roman, devanagari, thai, khmer, myanmar, sinhala"
        super().__init__(message)
        self.name = name


class UnknownEngineError(TransliterationError):
    """Raised when an engine code cannot be resolved."""

    def __init__(self, code: str):
        message = f"Unknown transliteration engine: '{code}'"
        message += "\nFix: Run with --list-engines to see the available engine codes"
        super().__init__(message)
        self.code = code


class UnknownRomanStyleError(TransliterationError):
    """Raised when a Roman display style cannot be resolved."""

    def __init__(self, name: str):
        message = f"Unknown Roman display style: '{name}'"
        message += "\nFix: Use one of iso, iast, pali_common, least_contamination, unique"
        super().__init__(message)
        self.name = name


class TagGuardError(TransliterationError):
    """Raised when protected spans cannot be given unique placeholders."""

    def __init__(self, reason: str = ""):
        message = "Markup protection failed"
        if reason:
            message += f": {reason}"
        message += "\nFix: Split the input into smaller pieces before converting"
        super().__init__(message)
        self.reason = reason


class ScriptConversionError(TransliterationError):
    """Raised when script conversion fails."""

    def __init__(self, source_script: str, target_script: str, reason: str = ""):
        message = f"Script conversion failed: {source_script} → {target_script}"
        if reason:
            message += f". Reason: {reason}"
        message += "\nFix: Check input text for unsupported characters or invalid script"
        super().__init__(message)
        self.source_script = source_script
        self.target_script = target_script
        self.reason = reason
