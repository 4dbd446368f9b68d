"""Main-window layout helpers: window sizing, centering and the user manual."""

from __future__ import annotations

import logging
import os
from typing import Union

log = logging.getLogger(__name__)

WINDOW_TITLE = "3D Flight Simulation"
MANUAL_FILE = "user_manual.txt"
COPYRIGHT_FILE = "copyright.txt"
MISSING_MANUAL_TEXT = "cannot add user note"

MAX_WIDTH = 2700
MAX_HEIGHT = 1500
MIN_WIDTH = 800
MIN_HEIGHT = 600

_SCREEN_FRACTION = 0.8


def _trunc_half(value: int) -> int:
    """Halve an integer, rounding toward zero."""
    half = abs(value) // 2
    return half if value >= 0 else -half


def window_size(
    screen_width: int,
    screen_height: int,
    max_width: int = MAX_WIDTH,
    max_height: int = MAX_HEIGHT,
    min_width: int = MIN_WIDTH,
    min_height: int = MIN_HEIGHT,
) -> tuple[int, int]:
    """Return a window size of 80% of the screen, clamped to the given limits.

    The upper limits are applied first, then the lower ones, so the minimum
    wins when the two conflict.
    """
    width = min(max_width, int(screen_width * _SCREEN_FRACTION))
    height = min(max_height, int(screen_height * _SCREEN_FRACTION))
    return max(min_width, width), max(min_height, height)


def window_position(
    screen_width: int, screen_height: int, width: int, height: int
) -> tuple[int, int]:
    """Return the top-left corner that centers a window on the screen."""
    return (
        _trunc_half(screen_width - width),
        _trunc_half(screen_height - height),
    )


def _read_text(path: str) -> str:
    with open(path, encoding="utf-8") as stream:
        return stream.read()


def read_user_manual(directory: Union[str, os.PathLike] = "resources") -> str:
    """Return the user manual text followed by the copyright notice.

    Both files are read from ``directory``. A missing manual is replaced by a
    short notice; a missing copyright file is simply left out.
    """
    log.info("show user manual")
    try:
        content = _read_text(os.path.join(directory, MANUAL_FILE))
    except OSError:
        content = MISSING_MANUAL_TEXT
        log.warning("Failed to load user manual file")
    try:
        content += "\n\n" + _read_text(os.path.join(directory, COPYRIGHT_FILE))
    except OSError:
        log.warning("cannot add developer note")
    return content