# src/trein/output.py
import sys
from typing import Optional, TextIO


def ocr_label(source: str, pack: str) -> str:
    """DeepL source code plus the Tesseract pack actually used, e.g. "ZH / chi_sim"."""
    return f"{source} / {pack}"


def render_result(
    ocr_lang: str,
    ocr_text: str,
    target: str,
    translation: str,
    detected_src: Optional[str] = None,
) -> str:
    parts = [f"=== OCR (lang: {ocr_lang}) ===\n{ocr_text.strip()}\n\n"]
    if detected_src:
        parts.append(f"=== Translation → {target} (detected: {detected_src}) ===\n{translation}\n\n")
    else:
        parts.append(f"=== Translation → {target} ===\n{translation}\n\n")
    return "".join(parts)


def print_result(
    ocr_lang: str,
    ocr_text: str,
    target: str,
    translation: str,
    detected_src: Optional[str] = None,
    file: Optional[TextIO] = None,
) -> None:
    print(render_result(ocr_lang, ocr_text, target, translation, detected_src),
          file=file or sys.stdout)
