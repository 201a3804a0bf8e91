"""Persisting the best score to a small text file."""

from __future__ import annotations

import os
import re

HIGHSCORE_FILE = "highscore.dat"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def load_highscore(path: str | os.PathLike = HIGHSCORE_FILE) -> int:
    """Read the saved record; 0 when the file is missing or unreadable."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except FileNotFoundError:
        return 0
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def save_highscore(score: int, path: str | os.PathLike = HIGHSCORE_FILE) -> None:
    """Overwrite the saved record with score."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.write(str(score))