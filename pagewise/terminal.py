from __future__ import annotations

import io
import os
from typing import Mapping, TextIO

DEFAULT_WIDTH = 120
DEFAULT_HEIGHT = 40


def detect_terminal_size(
    env: Mapping[str, str], stream: TextIO | None = None
) -> tuple[int, int] | None:
    """
    Returns the (width, height) of the terminal behind `stream`, or None when
    it cannot be determined. COLUMNS and LINES in `env` take priority.
    """
    columns, lines = env.get("COLUMNS", ""), env.get("LINES", "")
    if columns.isdigit() and lines.isdigit() and int(columns) and int(lines):
        return int(columns), int(lines)

    if stream is None:
        return None

    try:
        size = os.get_terminal_size(stream.fileno())
    except (AttributeError, ValueError, OSError, io.UnsupportedOperation):
        return None

    if not size.columns or not size.lines:
        return None

    return size.columns, size.lines


def determine_terminal_size(
    width: int | None,
    height: int | None,
    detected: tuple[int, int] | None = None,
) -> tuple[int, int]:
    detected_width, detected_height = detected or (None, None)
    return (
        _pick(detected_width, width, DEFAULT_WIDTH),
        _pick(detected_height, height, DEFAULT_HEIGHT),
    )


def _pick(detected: int | None, requested: int | None, default: int) -> int:
    if detected:
        return detected
    if requested is not None:
        return max(requested, 0)
    return default
