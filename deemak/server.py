"""A small web front end that runs shell commands over HTTP."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Union

from flask import Flask, abort, jsonify, request, send_from_directory

from .commands import CommandKind, cmd_manager

__all__ = ["find_sekai_root", "run_command", "create_app", "launch_web"]

StrPath = Union[str, "PathLike[str]"]

NOT_FOUND_MSG = "Command not found. Try `help`."
CLEAR_MARKER = "__CLEAR__"
EXIT_MARKER = "__EXIT__"

HOST = "127.0.0.1"
PORT = 8000


def find_sekai_root(start: Optional[StrPath] = None) -> Optional[Path]:
    """Walk up from ``start`` (default: the working directory) to the first
    directory holding ``sekai/info.json`` and return its ``sekai`` folder."""
    try:
        current = Path(start).absolute() if start is not None else Path.cwd()
    except OSError:
        return None
    for directory in (current, *current.parents):
        if (directory / "sekai" / "info.json").exists():
            return directory / "sekai"
    return None


def run_command(command: str, current_dir: str, root_dir: StrPath) -> dict:
    """Run one command line and describe the outcome as a JSON-ready dict."""
    root = Path(root_dir)
    current = Path(current_dir) if current_dir else root
    result = cmd_manager(command.split(), current, root)

    new_dir = None
    if result.kind is CommandKind.OUTPUT:
        output = result.text
    elif result.kind is CommandKind.CHANGE_DIRECTORY:
        output = result.text
        new_dir = str(result.new_dir)
    elif result.kind is CommandKind.CLEAR:
        output = CLEAR_MARKER
    elif result.kind is CommandKind.EXIT:
        output = EXIT_MARKER
    else:
        output = NOT_FOUND_MSG
    return {"output": output, "new_current_dir": new_dir}


def create_app(
    static_dir: Optional[StrPath] = None, root_dir: Optional[StrPath] = None
) -> Flask:
    """Build the application: static files at ``/`` and commands at ``/backend/run``.

    Without ``root_dir`` the world root is looked up on each request.
    """
    static_root = Path(static_dir) if static_dir is not None else Path.cwd() / "static"
    app = Flask(__name__, static_folder=None)

    @app.get("/backend/run")
    def run():
        command = request.args.get("command")
        current_dir = request.args.get("current_dir")
        if command is None or current_dir is None:
            abort(404)
        root = Path(root_dir) if root_dir is not None else find_sekai_root()
        if root is None:
            abort(500, description="Sekai root directory not found")
        return jsonify(run_command(command, current_dir, root))

    @app.get("/", defaults={"filename": ""})
    @app.get("/<path:filename>")
    def static_files(filename: str):
        if filename == "" or filename.endswith("/"):
            filename += "index.html"
        elif (static_root / filename).is_dir():
            filename += "/index.html"
        return send_from_directory(str(static_root), filename)

    return app


def launch_web() -> None:
    """Serve the web front end until interrupted."""
    create_app().run(host=HOST, port=PORT)