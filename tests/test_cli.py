import json
from unittest.mock import patch

import flask
import pygame
import pytest

from deemak.cli import main


@pytest.fixture
def world_dir(tmp_path, monkeypatch):
    root = tmp_path / "world"
    root.mkdir()
    (root / "info.json").write_text(json.dumps({"location": "home", "about": "start"}))
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    return root


def test_web_argument_starts_server():
    with patch.object(flask.Flask, "run") as run:
        assert main(["web"]) == 0
    run.assert_called_once_with(host="127.0.0.1", port=8000)


def test_shell_runs_until_quit(world_dir):
    quit_event = pygame.event.Event(pygame.QUIT)
    with patch("pygame.event.get", return_value=[quit_event]) as get_events:
        assert main([]) == 0
    assert get_events.call_count == 1


def test_other_argument_starts_shell(world_dir):
    quit_event = pygame.event.Event(pygame.QUIT)
    with patch("pygame.event.get", return_value=[quit_event]), patch.object(flask.Flask, "run") as run:
        assert main(["shell"]) == 0
    assert run.call_count == 0


def test_shell_without_home_fails(tmp_path, monkeypatch):
    empty = tmp_path / "empty"
    empty.mkdir()
    monkeypatch.chdir(empty)
    with pytest.raises(FileNotFoundError):
        main([])