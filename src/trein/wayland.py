# src/trein/wayland.py
import os
from typing import Mapping, Optional

from .exceptions import PreconditionError


def require_wayland(environ: Optional[Mapping[str, str]] = None) -> None:
    env = os.environ if environ is None else environ
    if not env.get("WAYLAND_DISPLAY"):
        raise PreconditionError(
            "This tool must run under Wayland (e.g. Hyprland, Sway). $WAYLAND_DISPLAY is not set."
        )
