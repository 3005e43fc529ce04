"""Locating the home directory of the world."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Union

from .info_reader import InfoError, read_info

__all__ = ["find_home"]

_MAX_DEPTH = 10


def _home_among_children(directory: Path) -> Optional[Path]:
    try:
        children = sorted(directory.iterdir())
    except OSError:
        return None
    for child in children:
        if not child.is_dir():
            continue
        try:
            info = read_info(child / "info.json")
        except InfoError:
            continue
        if info.location == "home":
            return child
    return None


def find_home(start: Union[str, "PathLike[str]", None] = None) -> Optional[Path]:
    """Search ``start`` (default: the working directory) and up to nine of its
    ancestors for a child directory whose info file marks it as home."""
    try:
        current = Path(start).absolute() if start is not None else Path.cwd()
    except OSError:
        return None

    for _ in range(_MAX_DEPTH):
        found = _home_among_children(current)
        if found is not None:
            return found
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None