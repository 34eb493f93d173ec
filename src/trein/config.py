# trein/config.py
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Mapping, Optional
import logging
import os

from .exceptions import ConfigurationError
from .translate import DEFAULT_DEEPL_BASE

logger = logging.getLogger("trein")

API_KEY_ENV = "DEEPL_API_KEY"
BASE_URL_ENV = "DEEPL_API_BASE"
CONFIG_RELPATH = Path("trein") / "config.toml"


@dataclass
class TreinConfig:
    """Configuration for a single select -> OCR -> translate run."""
    source_lang: str = "EN"
    target_lang: str = "EN"
    copy: bool = False

    ocr_pack_override: Optional[str] = None     # e.g. chi_tra; normally derived from source_lang
    deepl_api_key: Optional[str] = None         # CLI value only; see resolve_deepl_api_key()
    deepl_base_url: str = DEFAULT_DEEPL_BASE

    verbose: bool = False
    log_file: Optional[Path] = None

    @classmethod
    def from_dict(cls, config_dict: dict):
        d = dict(config_dict)

        if isinstance(d.get("log_file"), str):
            d["log_file"] = Path(d["log_file"])

        # allow explicit None to mean use default
        for key in ["source_lang", "target_lang", "deepl_base_url"]:
            if d.get(key) is None:
                d.pop(key, None)

        return cls(**d)


def config_candidates(environ: Optional[Mapping[str, str]] = None) -> List[Path]:
    env = os.environ if environ is None else environ
    candidates: List[Path] = []
    if env.get("XDG_CONFIG_HOME"):
        candidates.append(Path(env["XDG_CONFIG_HOME"]) / CONFIG_RELPATH)
    if env.get("HOME"):
        candidates.append(Path(env["HOME"]) / ".config" / CONFIG_RELPATH)
    return candidates


def _read_key_file(path: Path) -> Optional[str]:
    """First non-blank line of `path`, as either `DEEPL_API_KEY=...` or the bare key."""
    try:
        content = path.read_text(encoding="utf-8")
    except OSError:
        return None

    for line in content.splitlines():
        line = line.strip()
        if not line:
            continue
        if line.startswith(f"{API_KEY_ENV}="):
            line = line[len(API_KEY_ENV) + 1:].strip()
        value = line.strip("\"'").strip()
        return value or None
    return None


def resolve_deepl_api_key(
    cli_value: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
    config_paths: Optional[Iterable[Path]] = None,
) -> str:
    """
    Find the DeepL key: --deepl-api-key, then $DEEPL_API_KEY, then the config file.
    """
    # 1) CLI flag
    if cli_value and cli_value.strip():
        logger.debug("Using DeepL key from --deepl-api-key")
        return cli_value.strip()

    # 2) Env var
    env = os.environ if environ is None else environ
    value = env.get(API_KEY_ENV, "")
    if value.strip():
        logger.debug("Using DeepL key from $%s", API_KEY_ENV)
        return value.strip()

    # 3) Config files
    paths = list(config_paths) if config_paths is not None else config_candidates(env)
    for p in paths:
        value = _read_key_file(Path(p))
        if value:
            logger.debug("Using DeepL key from %s", p)
            return value

    raise ConfigurationError(
        f"Set your DeepL key via --deepl-api-key, ${API_KEY_ENV}, or a config file at "
        f"$XDG_CONFIG_HOME/{CONFIG_RELPATH.as_posix()} (or $HOME/.config/{CONFIG_RELPATH.as_posix()}) "
        f"with a single line: {API_KEY_ENV}=..."
    )


def deepl_base_url(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    return env.get(BASE_URL_ENV) or DEFAULT_DEEPL_BASE
