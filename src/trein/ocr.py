# src/trein/ocr.py
from __future__ import annotations

import logging
import os
import platform
import shutil
from pathlib import Path
from typing import Optional, Union

import pytesseract as pt
from PIL import Image

from .exceptions import ExternalToolError, NoTextRecognizedError
from .postprocess import tidy_ocr_text

__all__ = ["resolve_tesseract_cmd", "TesseractOCREngine", "recognize"]

logger = logging.getLogger("trein")


def resolve_tesseract_cmd() -> Optional[str]:
    # 1) explicit env override
    cmd = os.getenv("TESSERACT_CMD")
    if cmd and Path(cmd).exists():
        return cmd

    # 2) look on PATH
    cmd = shutil.which("tesseract")
    if cmd:
        return cmd

    # 3) common install locations
    if platform.system() == "Darwin":
        candidates = [
            "/opt/homebrew/bin/tesseract",   # Apple Silicon Homebrew
            "/usr/local/bin/tesseract",
        ]
    else:
        candidates = [
            "/usr/bin/tesseract",
            "/usr/local/bin/tesseract",
            "/snap/bin/tesseract",
        ]

    for p in candidates:
        if Path(p).exists():
            return p
    return None


class TesseractOCREngine:
    """
    Pytesseract-based OCR for a single captured image.

    Args:
      - lang: Tesseract pack name ("eng", "chi_sim", "jpn+eng", ...)
      - tesseract_cmd: full path to the tesseract binary; resolved from
        $TESSERACT_CMD / PATH when omitted
      - oem, psm: passed through as --oem / --psm when set
      - extra_config: appended verbatim to the config string
    """

    def __init__(
        self,
        lang: str,
        *,
        tesseract_cmd: Optional[str] = None,
        oem: Optional[int] = None,
        psm: Optional[int] = None,
        extra_config: str = "",
    ):
        self.lang = lang

        cmd = tesseract_cmd or resolve_tesseract_cmd()
        if cmd:
            pt.pytesseract.tesseract_cmd = str(cmd)

        cfg_parts = []
        if oem is not None:
            cfg_parts.append(f"--oem {int(oem)}")
        if psm is not None:
            cfg_parts.append(f"--psm {int(psm)}")
        if extra_config.strip():
            cfg_parts.append(extra_config.strip())
        self._config = " ".join(cfg_parts)

    def read(self, image_path: Union[str, Path]) -> str:
        """Return Tesseract's raw stdout for the image."""
        try:
            with Image.open(image_path) as im:
                return pt.image_to_string(im, lang=self.lang, config=self._config)
        except pt.TesseractNotFoundError as e:
            raise ExternalToolError(
                "Failed to run `tesseract` (is it installed, with language data?)",
                tool="tesseract",
            ) from e
        except pt.TesseractError as e:
            raise ExternalToolError(f"Tesseract failed: {e.message}", tool="tesseract") from e
        except OSError as e:
            raise ExternalToolError(
                f"Could not open screenshot {image_path}: {e}", tool="tesseract"
            ) from e


def recognize(
    image_path: Union[str, Path],
    pack: str,
    engine: Optional[TesseractOCREngine] = None,
) -> str:
    """OCR the image with the given pack and return tidied, non-empty text."""
    engine = engine or TesseractOCREngine(pack)
    raw = engine.read(image_path)
    logger.debug("Tesseract returned %d characters", len(raw))

    text = tidy_ocr_text(raw)
    if not text:
        raise NoTextRecognizedError(
            "OCR returned no text. Try a larger or clearer selection, or adjust --ocr-lang."
        )
    return text
