"""Locating and loading the nearest ``.env`` file."""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

__all__ = ["load", "find_dotenv"]


def find_dotenv(directory: str | os.PathLike[str]) -> Path | None:
    """Return the first ``.env`` found in ``directory`` or its ancestors."""
    current = Path(os.path.abspath(directory))
    for folder in (current, *current.parents):
        candidate = folder / ".env"
        try:
            os.stat(candidate)
        except FileNotFoundError:
            continue
        return candidate
    return None


def load() -> Path | None:
    """Load the nearest ``.env`` file over the environment and return its path."""
    found = find_dotenv(os.getcwd())
    if found is not None:
        load_dotenv(found, override=True)
    return found