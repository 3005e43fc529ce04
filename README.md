# deemak

A small exploration game played through a shell. The world is an ordinary
directory tree: each place is a directory, each object is a file, and a place
can describe itself in an `info.json` file holding the string fields
`location` and `about`. The directory whose `info.json` says
`"location": "home"` is the root of the world, shown as `HOME`.

## Installing

```
pip install .
```

## Playing in a window

Run from the directory that holds your world, or from somewhere below it:

```
deemak
```

The home directory is found by looking at the subdirectories of the working
directory and of up to nine of its ancestors for one whose `info.json` has
`"location": "home"`. If none is found, the program stops with
`FileNotFoundError`.

A pygame window opens with a prompt. Type a command and press Enter;
Backspace deletes a character. Closing the window or pressing Escape ends the
game, and the `exit` command ends it with exit status 1.

## Playing over HTTP

```
deemak web
```

This starts a Flask server on `127.0.0.1:8000`.

- `GET /backend/run?command=...&current_dir=...` runs one command and answers
  with a JSON object holding `output` and `new_current_dir`. Both query
  parameters must be present; an empty `current_dir` means `HOME`.
  `new_current_dir` is set only after `go`. The special outputs `__CLEAR__`
  and `__EXIT__` ask the client to clear its screen or end the session.
- For this server the world root is the `sekai` directory: the working
  directory and its ancestors are searched for `sekai/info.json`.
- Every other path is served as a static file from the `static` directory
  under the working directory, with `index.html` for directory paths.

## Commands

| Command            | What it does                                              |
|--------------------|-----------------------------------------------------------|
| `echo <message>`   | Echoes the message back.                                  |
| `whoami`           | Tells you who you are.                                    |
| `go <directory>`   | Moves to a place; `home`/`HOME`, `back`, `up` and `..` work. |
| `ls [directory]`   | Lists the objects here and the places you can go.         |
| `read <file>`      | Reads an object.                                          |
| `whereami`         | Shows where you are, relative to `HOME`.                  |
| `help`             | Shows the list of commands.                               |
| `clear`            | Clears the screen.                                        |
| `exit`             | Leaves the game.                                          |

You can never leave `HOME`, and `info.json` files cannot be read directly;
a place's `about` text is shown when you enter it.

## Using it as a library

```python
from pathlib import Path

from deemak.commands import CommandKind, cmd_manager
from deemak.find_root import find_home

root = find_home(Path.cwd())
result = cmd_manager(["go", "forest"], root, root)
if result.kind is CommandKind.CHANGE_DIRECTORY:
    print(result.new_dir)
print(result.text)
```

Modules:

- `deemak.commands` — the commands (`echo`, `whoami`, `go`, `ls`, `read`,
  `whereami`, `help`, `display_relative_path`) and the dispatcher
  `cmd_manager`, which returns a `CommandResult` with a `CommandKind`.
- `deemak.info_reader` — `read_info` loads an `info.json` into an `Info`,
  raising `InfoNotFoundError`, `InfoReadError` or `InfoParseError` (all
  subclasses of `InfoError`).
- `deemak.find_root` — `find_home` locates the home directory.
- `deemak.keys` — `key_to_char` turns a pygame key code into the character it
  types on a US layout.
- `deemak.screen` — `ShellScreen`, the pygame window; `process_input` and
  `handle_key` can be driven without opening a window.
- `deemak.server` — `create_app`, `run_command`, `find_sekai_root` and
  `launch_web` for the HTTP backend.
- `deemak.cli` — `main`, the `deemak` command.

## What it does not do

The package ships no web page: `deemak web` serves only what you place in
`./static`, so a browser client has to be provided separately.

## Running the tests

```
pip install .[test]
pytest
```