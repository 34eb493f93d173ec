# src/trein/postprocess.py
from __future__ import annotations

SOFT_HYPHEN = "\u00ad"


def tidy_ocr_text(raw: str) -> str:
    """
    Light cleanup to make Tesseract output nicer for translation.

    Steps, in order:
      1. drop soft hyphens
      2. join words hyphenated across a line break ("trans-\\nlate" -> "translate")
      3. drop carriage returns, turn the remaining line breaks into spaces
      4. collapse whitespace runs and trim

    Applying it to its own output returns the same string.
    """
    if not raw:
        return ""
    s = raw.replace(SOFT_HYPHEN, "")
    s = s.replace("-\n", "")
    s = s.replace("\r", "").replace("\n", " ")
    return " ".join(s.split())
