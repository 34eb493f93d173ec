# src/trein/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Mapping, Optional, TextIO

from . import __version__
from .capture import capture_region, select_region
from .clipboard import maybe_copy_to_clipboard
from .config import TreinConfig, deepl_base_url, resolve_deepl_api_key
from .exceptions import TreinError
from .languages import ocr_pack_for, validate_source, validate_target
from .logger import setup_logging
from .models import TranslationResult
from .ocr import recognize
from .output import ocr_label, print_result
from .translate import DeepLTranslator
from .wayland import require_wayland

__all__ = ["run_pipeline", "main"]

logger = logging.getLogger("trein")


def run_pipeline(
    config: TreinConfig,
    *,
    environ: Optional[Mapping[str, str]] = None,
    out: Optional[TextIO] = None,
) -> TranslationResult:
    """
    select region -> screenshot -> OCR -> DeepL -> print -> (copy).

    Raises TreinError on the first failing stage; nothing is retried.
    """
    require_wayland(environ)

    # Validate DeepL codes (strict) and decide the Tesseract pack
    src = validate_source(config.source_lang)
    tgt = validate_target(config.target_lang)
    pack = config.ocr_pack_override or ocr_pack_for(src)

    # Resolved before the interactive selection so a missing key fails early
    api_key = resolve_deepl_api_key(config.deepl_api_key, environ)

    logger.progress("Selecting region")
    geometry = select_region()

    logger.progress("Capturing %s", geometry)
    with capture_region(geometry) as image:
        logger.progress("Running OCR with pack %s", pack)
        ocr_text = recognize(image.path, pack)

    logger.progress("Translating %s -> %s", src, tgt)
    translator = DeepLTranslator(api_key, config.deepl_base_url)
    result = translator.translate(ocr_text, tgt, src)

    print_result(
        ocr_label(src, pack),
        ocr_text,
        tgt,
        result.text,
        result.detected_source_language,
        file=out,
    )
    maybe_copy_to_clipboard(config.copy, result.text)
    return result


# -------------------------------
# CLI parsing
# -------------------------------

def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="trein",
        description="Select a screen area -> OCR -> DeepL translate (Wayland).",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    lang_group = p.add_argument_group("Languages")
    lang_group.add_argument(
        "-s", "--source-lang", default="EN",
        help="DeepL source code: AR BG CS DA DE EL EN ES ET FI FR HE HU ID IT JA KO LT "
             "LV NB NL PL PT RO RU SK SL SV TH TR UK VI ZH (default: EN)",
    )
    lang_group.add_argument(
        "-t", "--target-lang", default="EN",
        help="DeepL target code: any source code, or EN-GB EN-US ES-419 PT-BR PT-PT "
             "ZH-HANS ZH-HANT (default: EN)",
    )
    lang_group.add_argument(
        "--ocr-lang", "--ocr-pack", dest="ocr_pack_override",
        help="Force the Tesseract pack (e.g. chi_tra). Normally derived from --source-lang.",
    )

    p.add_argument(
        "-c", "--copy", action="store_true",
        help="Also copy the translation to the Wayland clipboard using wl-copy (if available).",
    )
    p.add_argument(
        "--deepl-api-key",
        help="DeepL API key. If omitted, falls back to $DEEPL_API_KEY, then the config file.",
    )

    log_group = p.add_argument_group("Logging")
    log_group.add_argument("-v", "--verbose", action="store_true", help="Show each stage on stderr")
    log_group.add_argument("--log-file", type=Path, help="Also write a debug log to this file")
    return p


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


# -------------------------------
# Entry point
# -------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    config = TreinConfig.from_dict({
        "source_lang": args.source_lang,
        "target_lang": args.target_lang,
        "copy": args.copy,
        "ocr_pack_override": args.ocr_pack_override,
        "deepl_api_key": args.deepl_api_key,
        "deepl_base_url": deepl_base_url(),
        "verbose": args.verbose,
        "log_file": args.log_file,
    })

    try:
        setup_logging(
            level=logging.DEBUG if config.verbose else logging.WARNING,
            file_path=config.log_file,
        )
    except OSError as e:
        print(f"Error (logging): cannot open log file {config.log_file}: {e}", file=sys.stderr)
        return 1

    try:
        run_pipeline(config)
    except TreinError as e:
        logger.debug("Run aborted at stage %s", e.stage, exc_info=True)
        print(f"Error ({e.stage}): {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
