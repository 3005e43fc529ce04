"""The shell's commands and their dispatcher."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum, auto
from os import PathLike
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .info_reader import InfoError, read_info

__all__ = [
    "CommandKind",
    "CommandResult",
    "cmd_manager",
    "echo",
    "whoami",
    "go",
    "ls",
    "read",
    "display_relative_path",
    "whereami",
    "help",
]

StrPath = Union[str, "PathLike[str]"]

_HELP_TEXT = """
Welcome to DBD Deemak Help. You can use the following commands:

- echo <message>: Echoes the message back to you.
- whoami: Displays who you are.
- go <directory>: Changes the current directory to the specified directory.
- ls: Lists the objects and places you can go to in the current directory.
- read <file>: Reads the specified file.
- whereami: Displays where you are.
- help: Displays this help message.
- exit: Exits the program.
- clear: Clears the screen.
"""


class CommandKind(Enum):
    """What the caller should do with a command's result."""

    OUTPUT = auto()
    CHANGE_DIRECTORY = auto()
    CLEAR = auto()
    EXIT = auto()
    NOT_FOUND = auto()


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command: its kind, text to show and, for moves, the new directory."""

    kind: CommandKind
    text: str = ""
    new_dir: Optional[Path] = None


def _is_within(path: Path, root: Path) -> bool:
    return path == root or root in path.parents


def _describe_os_error(exc: OSError) -> str:
    if exc.errno is not None and exc.strerror:
        return f"{exc.strerror} (os error {exc.errno})"
    return str(exc)


def display_relative_path(path: StrPath, root_dir: StrPath) -> str:
    """Show ``path`` relative to ``root_dir`` with a ``HOME`` prefix."""
    path = Path(path)
    try:
        relative = path.relative_to(Path(root_dir))
    except ValueError:
        return str(path)
    if not relative.parts:
        return "HOME"
    return f"HOME/{relative}"


def whereami(current_dir: StrPath, root_dir: StrPath) -> str:
    """Where the player currently is, like ``pwd``."""
    return display_relative_path(current_dir, root_dir)


def echo(args: Sequence[str]) -> str:
    """Join the arguments with single spaces."""
    return " ".join(args)


def whoami() -> str:
    """The player's identity."""
    return "Databased Deemak User."


def help() -> str:  # noqa: A001 - the command is called help
    """Text describing every command."""
    return _HELP_TEXT


def go(args: Sequence[str], current_dir: StrPath, root_dir: StrPath) -> Tuple[Path, str]:
    """Move to another directory; return the resulting directory and a message."""
    current = Path(current_dir)
    root = Path(root_dir)

    if not args:
        return current, "go: missing directory operand"

    target = args[0]
    if target in ("HOME", "home"):
        new_path = root
    elif target in ("..", "back", "up"):
        if current == root:
            return current, "You are at the root. Cannot go back further"
        new_path = current.parent
    else:
        new_path = current / target

    try:
        canonical = new_path.resolve(strict=True)
    except (OSError, RuntimeError):
        return current, f"go: {target}: No such directory"

    if not _is_within(canonical, root):
        return current, "Access denied: Cannot go outside root"

    if not canonical.is_dir():
        if canonical.is_file():
            return current, f"go: {target}: Is a file (try 'read {target}')"
        return current, f"go: {target}: Not a directory"

    shown = display_relative_path(canonical, root)
    try:
        info = read_info(canonical / "info.json")
    except InfoError:
        message = f"Entered {shown}"
    else:
        message = f"You have entered {shown}\n\nAbout:\n{info.about.strip(chr(34))}"
    return canonical, message


def ls(args: Sequence[str], current_dir: StrPath, root_dir: StrPath) -> str:
    """List the objects and the places reachable from a directory."""
    current = Path(current_dir)
    root = Path(root_dir)

    if args:
        target = current / args[0]
        if not _is_within(target, root):
            return "ls: Access denied outside root directory"
    else:
        target = current

    try:
        with os.scandir(target) as scanner:
            entries = sorted(scanner, key=lambda entry: entry.name)
    except OSError as exc:
        return (
            f"ls: cannot access '{display_relative_path(target, root)}': "
            f"{_describe_os_error(exc)}"
        )

    files = []
    directories = []
    for entry in entries:
        if entry.name == "info.json":
            continue
        if Path(entry.path).is_dir():
            directories.append(f"   {entry.name}/\n")
        else:
            files.append(f"   {entry.name}\n")

    file_text = "".join(files)
    directory_text = "".join(directories) or "   (none)\n"
    return f"\nObjects:\n{file_text}\nYou can go to:\n{directory_text}"


def read(args: Sequence[str], current_dir: StrPath, root_dir: StrPath) -> str:
    """Return a file's contents, or a message explaining why it cannot be read."""
    if not args:
        return "read: missing file operand"

    root = Path(root_dir)
    file_path = Path(current_dir) / args[0]

    if not _is_within(file_path, root):
        return "read: Access denied outside root directory"

    shown = display_relative_path(file_path, root)
    if file_path.is_dir():
        return f"read: {shown}: Is a directory"
    if file_path.name == "info.json":
        return f"read: {shown}: Access denied to read info.json"

    try:
        with open(file_path, encoding="utf-8", newline="") as handle:
            return handle.read()
    except FileNotFoundError:
        reason = "No such file"
    except PermissionError:
        reason = "Permission denied"
    except (OSError, UnicodeDecodeError):
        reason = "Could not read file"
    return f"read: {shown}: {reason}"


def cmd_manager(
    parts: Sequence[str], current_dir: StrPath, root_dir: StrPath
) -> CommandResult:
    """Dispatch a split command line to the matching command."""
    if not parts:
        return CommandResult(CommandKind.NOT_FOUND)

    name, args = parts[0], list(parts[1:])
    if name == "echo":
        return CommandResult(CommandKind.OUTPUT, echo(args))
    if name == "whoami":
        return CommandResult(CommandKind.OUTPUT, whoami())
    if name == "go":
        new_dir, message = go(args, current_dir, root_dir)
        return CommandResult(CommandKind.CHANGE_DIRECTORY, message, new_dir)
    if name == "ls":
        return CommandResult(CommandKind.OUTPUT, ls(args, current_dir, root_dir))
    if name == "read":
        return CommandResult(CommandKind.OUTPUT, read(args, current_dir, root_dir))
    if name == "whereami":
        return CommandResult(CommandKind.OUTPUT, whereami(current_dir, root_dir))
    if name == "help":
        return CommandResult(CommandKind.OUTPUT, help())
    if name == "clear":
        return CommandResult(CommandKind.CLEAR)
    if name == "exit":
        return CommandResult(CommandKind.EXIT)
    return CommandResult(CommandKind.NOT_FOUND)