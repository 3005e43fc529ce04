"""Command-line entry point: the graphical shell, or the web server with ``web``."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .screen import ShellScreen
from .server import launch_web

__all__ = ["main"]


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the web server when the first argument is ``web``, else the shell window."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args and args[0] == "web":
        launch_web()
        return 0

    with ShellScreen() as shell:
        while not shell.window_should_close():
            shell.update()
            shell.draw()
    return 0


if __name__ == "__main__":
    sys.exit(main())