# src/trein/capture.py
from __future__ import annotations

import logging
import subprocess
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from PIL import Image, UnidentifiedImageError

from .exceptions import ExternalToolError, SelectionCancelledError
from .models import CapturedImage

__all__ = ["SLURP_FORMAT", "select_region", "capture_region"]

logger = logging.getLogger("trein")

# "x,y wxh", the geometry syntax grim -g expects
SLURP_FORMAT = "%x,%y %wx%h"
CAPTURE_FILENAME = "capture.png"


def select_region(slurp_cmd: str = "slurp") -> str:
    """Let the user draw a rectangle with slurp and return its geometry string."""
    try:
        out = subprocess.run(
            [slurp_cmd, "-f", SLURP_FORMAT],
            capture_output=True,
            text=True,
        )
    except OSError as e:
        raise ExternalToolError(
            f"Failed to run `{slurp_cmd}` (is it installed?): {e}", tool="slurp"
        ) from e

    if out.returncode != 0:
        raise SelectionCancelledError(
            f"Selection cancelled or `{slurp_cmd}` failed.", tool="slurp"
        )

    geometry = (out.stdout or "").strip()
    if not geometry:
        raise ExternalToolError(
            f"No selection geometry received from `{slurp_cmd}`.", tool="slurp"
        )
    logger.debug("Selected geometry %s", geometry)
    return geometry


def _probe_image(path: Path) -> CapturedImage:
    try:
        with Image.open(path) as im:
            width, height = im.size
            im.verify()
    except (OSError, UnidentifiedImageError) as e:
        raise ExternalToolError(
            f"`grim` did not produce a readable image at {path}: {e}", tool="grim"
        ) from e
    return CapturedImage(path=path, width=width, height=height)


@contextmanager
def capture_region(geometry: str, grim_cmd: str = "grim") -> Iterator[CapturedImage]:
    """
    Screenshot `geometry` with grim into a fresh temporary directory.

    The directory, and the PNG in it, are removed when the with-block exits,
    whether it exits normally or through an exception. Consumers of the
    yielded path must finish inside the block.
    """
    with tempfile.TemporaryDirectory(prefix="trein-") as tmp:
        png_path = Path(tmp) / CAPTURE_FILENAME
        try:
            proc = subprocess.run(
                [grim_cmd, "-g", geometry, str(png_path)],
                capture_output=True,
                text=True,
            )
        except OSError as e:
            raise ExternalToolError(
                f"Failed to run `{grim_cmd}` (is it installed?): {e}", tool="grim"
            ) from e

        if proc.returncode != 0:
            detail = (proc.stderr or "").strip()
            msg = f"`{grim_cmd}` failed to capture the region."
            if detail:
                msg = f"{msg} {detail}"
            raise ExternalToolError(msg, tool="grim")

        image = _probe_image(png_path)
        logger.debug("Captured %dx%d image at %s", image.width, image.height, image.path)
        yield image
