# trein/exceptions.py
from typing import Optional


class TreinError(Exception):
    """Base exception for trein. Every fatal failure of a run is one of these."""
    stage = "run"

    def __init__(self, message: str, *, stage: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if stage:
            self.stage = stage


class PreconditionError(TreinError):
    """Raised when the session is not running under Wayland."""
    stage = "precondition"


class ConfigurationError(TreinError):
    """Raised when no DeepL key can be resolved."""
    stage = "configuration"


class LanguageCodeError(TreinError):
    """Raised when a language code is not accepted."""
    stage = "validation"


class UnsupportedLanguageError(LanguageCodeError):
    pass


class TargetOnlyLanguageError(LanguageCodeError):
    """A regional variant (EN-GB, PT-BR, ...) was given as source language."""
    pass


class ExternalToolError(TreinError):
    """Raised when slurp, grim or tesseract is missing, fails, or returns junk."""

    def __init__(self, message: str, *, tool: str, stage: Optional[str] = None):
        super().__init__(message, stage=stage or tool)
        self.tool = tool


class SelectionCancelledError(ExternalToolError):
    pass


class NoTextRecognizedError(TreinError):
    stage = "ocr"


class TranslationError(TreinError):
    """Raised when the DeepL request fails or its response is unusable."""
    stage = "translation"


class TranslationAPIError(TranslationError):
    """DeepL answered with a non-2xx status."""

    def __init__(self, message: str, *, status_code: int):
        super().__init__(message)
        self.status_code = status_code
