# src/trein/logger.py

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

# --- Custom Log Level for Progress ---
PROGRESS = 25
logging.addLevelName(PROGRESS, "PROGRESS")

def progress(self, msg, *args, **kwargs):
    if self.isEnabledFor(PROGRESS):
        self._log(PROGRESS, msg, args, **kwargs)

logging.Logger.progress = progress

LOGGER_NAME = "trein"


class _TreinHandlerMixin:
    """Marks handlers installed by setup_logging so a second call can replace them."""
    trein_managed = True


class ConsoleHandler(_TreinHandlerMixin, logging.StreamHandler):
    pass


class FileHandler(_TreinHandlerMixin, RotatingFileHandler):
    pass


# --- Main Configuration Function ---
def setup_logging(
    *,
    level: int = logging.WARNING,
    file_path: Optional[Union[str, Path]] = None,
    file_level: Optional[int] = None,
    stream=None,
) -> logging.Logger:
    """
    Configure the "trein" logger for a CLI run.

    Args:
        level: Console level. WARNING keeps stdout/stderr quiet apart from the
            result and real problems; DEBUG shows every stage.
        file_path: Optional path to a persistent log file.
        file_level: Level for the file handler (defaults to DEBUG).
        stream: Console stream, stderr by default so stdout carries only the result.

    Returns:
        The configured logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    for h in list(logger.handlers):
        if getattr(h, "trein_managed", False):
            logger.removeHandler(h)
            h.close()

    ch = ConsoleHandler(stream or sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    logger.addHandler(ch)

    if file_path:
        fp = Path(file_path)
        fp.parent.mkdir(parents=True, exist_ok=True)
        fh = FileHandler(fp, maxBytes=5*1024*1024, backupCount=2, encoding="utf-8")
        fh.setLevel(file_level if file_level is not None else logging.DEBUG)
        fh.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(message)s"))
        logger.addHandler(fh)

    return logger
