# src/trein/clipboard.py
import logging
import shutil
import subprocess

import pyperclip

logger = logging.getLogger("trein")

WL_COPY = "wl-copy"


def copy_to_clipboard(text: str) -> bool:
    """
    Put `text` on the Wayland clipboard through pyperclip's wl-clipboard backend.

    Best effort: returns False and logs a hint instead of raising.
    """
    if shutil.which(WL_COPY) is None:
        logger.warning("(Tip) %s not found, skipping clipboard copy.", WL_COPY)
        return False
    try:
        pyperclip.set_clipboard("wl-clipboard")
        pyperclip.copy(text)
    except (pyperclip.PyperclipException, subprocess.CalledProcessError, OSError) as e:
        logger.warning("(Tip) Could not copy to clipboard with %s: %s", WL_COPY, e)
        return False
    logger.debug("Copied %d characters to the clipboard", len(text))
    return True


def maybe_copy_to_clipboard(copy: bool, text: str) -> bool:
    if not copy:
        return False
    return copy_to_clipboard(text)
