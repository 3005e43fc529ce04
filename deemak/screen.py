"""The graphical shell window."""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Optional, Union

import pygame

from .commands import CommandKind, cmd_manager
from .find_root import find_home
from .keys import key_to_char

__all__ = ["ShellScreen", "INITIAL_MSG", "NOT_FOUND_MSG"]

INITIAL_MSG = "Type commands and press Enter. Try `help` for more info."
NOT_FOUND_MSG = "Command not found. Try `help`."

WINDOW_SIZE = (800, 600)
WINDOW_TITLE = "DBD Deemak Shell"

_FONT_SIZE = 20
_LINE_HEIGHT = 20
_MARGIN = 10
_INPUT_X = 30
_FPS = 60

_BLACK = (0, 0, 0)
_WHITE = (255, 255, 255)
_GREEN = (0, 228, 48)


class ShellScreen:
    """A window showing the command history with an input prompt below it.

    The window is opened on first use, so the shell state can be driven
    without a display. Use as a context manager to close the window.
    """

    def __init__(self, root_dir: Union[str, "PathLike[str]", None] = None) -> None:
        if root_dir is None:
            root_dir = find_home()
            if root_dir is None:
                raise FileNotFoundError("Sekai root directory not found")
        self.root_dir = Path(root_dir)
        self.current_dir = self.root_dir
        self.input_buffer = ""
        self.output_lines = [INITIAL_MSG]
        self._surface: Optional[pygame.Surface] = None
        self._font: Optional[pygame.font.Font] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._should_close = False

    def __enter__(self) -> "ShellScreen":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._surface is not None:
            pygame.quit()
            self._surface = None
            self._font = None
            self._clock = None

    def _ensure_window(self) -> pygame.Surface:
        if self._surface is None:
            pygame.init()
            self._surface = pygame.display.set_mode(WINDOW_SIZE)
            pygame.display.set_caption(WINDOW_TITLE)
            self._font = pygame.font.Font(None, _FONT_SIZE)
            self._clock = pygame.time.Clock()
        return self._surface

    def window_should_close(self) -> bool:
        """Whether the user asked to close the window."""
        self._ensure_window()
        return self._should_close

    def update(self) -> None:
        """Process pending window events."""
        self._ensure_window()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._should_close = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self._should_close = True
                    continue
                shift = bool(getattr(event, "mod", 0) & pygame.KMOD_SHIFT)
                self.handle_key(event.key, shift)

    def handle_key(self, key: int, shift: bool) -> None:
        """Apply one key press to the input line."""
        if key == pygame.K_RETURN:
            text, self.input_buffer = self.input_buffer, ""
            self.process_input(text)
        elif key == pygame.K_BACKSPACE:
            self.input_buffer = self.input_buffer[:-1]
        else:
            char = key_to_char(key, shift)
            if char is not None:
                self.input_buffer += char

    def _blit(self, text: str, x: int, y: int, color) -> None:
        if not text:
            return
        rendered = self._font.render(text.replace("\x00", ""), True, color)
        self._surface.blit(rendered, (x, y))

    def draw(self) -> None:
        """Render the history and the prompt."""
        surface = self._ensure_window()
        surface.fill(_BLACK)
        for index, line in enumerate(self.output_lines):
            self._blit(line, _MARGIN, _MARGIN + index * _LINE_HEIGHT, _WHITE)
        prompt_y = _MARGIN + len(self.output_lines) * _LINE_HEIGHT
        self._blit("> ", _MARGIN, prompt_y, _GREEN)
        self._blit(self.input_buffer, _INPUT_X, prompt_y, _WHITE)
        pygame.display.flip()
        self._clock.tick(_FPS)

    def process_input(self, input_text: str) -> None:
        """Run a command line and append its output to the history.

        Raises ``SystemExit`` with status 1 on the ``exit`` command.
        """
        if not input_text:
            return
        self.output_lines.append(f"> {input_text}")

        result = cmd_manager(input_text.split(), self.current_dir, self.root_dir)
        if result.kind is CommandKind.CHANGE_DIRECTORY:
            self.current_dir = result.new_dir
            self.output_lines.extend(result.text.split("\n"))
        elif result.kind is CommandKind.OUTPUT:
            self.output_lines.extend(result.text.split("\n"))
        elif result.kind is CommandKind.CLEAR:
            self.output_lines = [INITIAL_MSG]
        elif result.kind is CommandKind.EXIT:
            raise SystemExit(1)
        else:
            self.output_lines.append(NOT_FOUND_MSG)