"""Reading of the ``info.json`` files that describe places in the world."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Union

__all__ = [
    "Info",
    "InfoError",
    "InfoNotFoundError",
    "InfoReadError",
    "InfoParseError",
    "read_info",
]

StrPath = Union[str, "PathLike[str]"]


@dataclass(frozen=True)
class Info:
    """Description of a place: its location tag and a short text about it."""

    location: str
    about: str


class InfoError(Exception):
    """Base class for every failure to obtain an ``Info``."""


class InfoNotFoundError(InfoError):
    """The info file does not exist."""

    def __init__(self) -> None:
        super().__init__("Info file not found")


class InfoReadError(InfoError):
    """The info file exists but could not be read."""

    def __init__(self, cause: OSError) -> None:
        super().__init__(f"Failed to read info file: {cause}")
        self.cause = cause


class InfoParseError(InfoError):
    """The info file is not valid JSON of the expected shape."""

    def __init__(self, detail: str) -> None:
        super().__init__(f"Failed to parse info file: {detail}")
        self.detail = detail


def _require_str(data: dict, field: str) -> str:
    if field not in data:
        raise InfoParseError(f"missing field `{field}`")
    value = data[field]
    if not isinstance(value, str):
        raise InfoParseError(f"invalid type for `{field}`: expected a string")
    return value


def read_info(info_path: StrPath) -> Info:
    """Load and validate the info file at ``info_path``.

    Surrounding double quotes are removed from the ``about`` text.
    """
    path = Path(info_path)
    if not path.exists():
        raise InfoNotFoundError()

    try:
        with open(path, encoding="utf-8") as handle:
            contents = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        if isinstance(exc, UnicodeDecodeError):
            raise InfoReadError(OSError(str(exc))) from exc
        raise InfoReadError(exc) from exc

    try:
        data = json.loads(contents)
    except json.JSONDecodeError as exc:
        raise InfoParseError(str(exc)) from exc

    if not isinstance(data, dict):
        raise InfoParseError("expected a JSON object")

    location = _require_str(data, "location")
    about = _require_str(data, "about").strip('"')
    return Info(location=location, about=about)