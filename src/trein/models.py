# trein/models.py
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class CapturedImage:
    """A screenshot living inside a temporary directory owned by capture_region()."""
    path: Path
    width: int = 0
    height: int = 0


@dataclass
class TranslationResult:
    """First translation returned by DeepL."""
    text: str
    # Only present when DeepL ran its own detection
    detected_source_language: Optional[str] = None
