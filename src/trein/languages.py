# src/trein/languages.py
"""
DeepL language codes and their Tesseract traineddata packs.

DeepL accepts a smaller set of codes as source than as target: regional
variants such as EN-GB or PT-BR exist only on the target side. Codes are
normalized (uppercase, "_" -> "-") before any lookup, so "en_gb", "En-Gb" and
"EN-GB" are the same code.
"""
from __future__ import annotations

from typing import Dict, FrozenSet

from .exceptions import (
    LanguageCodeError,
    TargetOnlyLanguageError,
    UnsupportedLanguageError,
)

__all__ = [
    "SOURCE_LANGS",
    "TARGET_ONLY_LANGS",
    "TARGET_LANGS",
    "TESSERACT_PACKS",
    "normalize_code",
    "validate_source",
    "validate_target",
    "ocr_pack_for",
]

# DeepL source list (exact)
SOURCE_LANGS: FrozenSet[str] = frozenset({
    "AR", "BG", "CS", "DA", "DE", "EL", "EN", "ES", "ET", "FI", "FR",
    "HE", "HU", "ID", "IT", "JA", "KO", "LT", "LV", "NB", "NL", "PL",
    "PT", "RO", "RU", "SK", "SL", "SV", "TH", "TR", "UK", "VI", "ZH",
})

TARGET_ONLY_LANGS: FrozenSet[str] = frozenset({
    "EN-GB", "EN-US", "ES-419", "PT-BR", "PT-PT", "ZH-HANS", "ZH-HANT",
})

TARGET_LANGS: FrozenSet[str] = SOURCE_LANGS | TARGET_ONLY_LANGS

# DeepL source code -> Tesseract traineddata name
TESSERACT_PACKS: Dict[str, str] = {
    "AR": "ara",
    "BG": "bul",
    "CS": "ces",
    "DA": "dan",
    "DE": "deu",
    "EL": "ell",
    "EN": "eng",
    "ES": "spa",
    "ET": "est",
    "FI": "fin",
    "FR": "fra",
    "HE": "heb",
    "HU": "hun",
    "ID": "ind",
    "IT": "ita",
    "JA": "jpn",
    "KO": "kor",
    "LT": "lit",
    "LV": "lav",
    "NB": "nor",
    "NL": "nld",
    "PL": "pol",
    "PT": "por",
    "RO": "ron",
    "RU": "rus",
    "SK": "slk",
    "SL": "slv",
    "SV": "swe",
    "TH": "tha",
    "TR": "tur",
    "UK": "ukr",
    "VI": "vie",
    "ZH": "chi_sim",
}

if set(TESSERACT_PACKS) != SOURCE_LANGS:  # pragma: no cover
    raise RuntimeError("TESSERACT_PACKS must cover exactly the DeepL source languages")


def normalize_code(code: str) -> str:
    return (code or "").strip().upper().replace("_", "-")


def validate_source(code: str) -> str:
    """
    Return the normalized DeepL source code, or raise LanguageCodeError.

    A target-only regional variant raises TargetOnlyLanguageError so the user
    is told to drop the region rather than that the language is unknown.
    """
    s = normalize_code(code)
    if s in SOURCE_LANGS:
        return s
    if s in TARGET_ONLY_LANGS:
        base = s.split("-", 1)[0]
        raise TargetOnlyLanguageError(
            f"'{s}' is a target-only DeepL code. Use the source variant "
            f"(e.g. {base}) for --source-lang."
        )
    raise UnsupportedLanguageError(f"Unsupported DeepL source code: {s or code!r}")


def validate_target(code: str) -> str:
    """Return the normalized DeepL target code, or raise UnsupportedLanguageError."""
    s = normalize_code(code)
    if s in TARGET_LANGS:
        return s
    raise UnsupportedLanguageError(f"Unsupported DeepL target code: {s or code!r}")


def ocr_pack_for(source_code: str) -> str:
    """Map a validated DeepL source code to its Tesseract pack (EN -> eng, ZH -> chi_sim)."""
    try:
        return TESSERACT_PACKS[source_code]
    except KeyError:
        raise LanguageCodeError(
            f"No Tesseract pack mapping for DeepL source {source_code!r}"
        ) from None
