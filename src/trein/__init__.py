# src/trein/__init__.py
"""trein: select a Wayland screen region, OCR it with Tesseract, translate it with DeepL."""

__version__ = "0.1.0"

from .exceptions import TreinError
from .languages import ocr_pack_for, validate_source, validate_target
from .models import CapturedImage, TranslationResult
from .postprocess import tidy_ocr_text
from .translate import DeepLTranslator, translate_text

__all__ = [
    "__version__",
    "TreinError",
    "validate_source",
    "validate_target",
    "ocr_pack_for",
    "tidy_ocr_text",
    "CapturedImage",
    "TranslationResult",
    "DeepLTranslator",
    "translate_text",
]
