"""Core game loop orchestrator."""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from . import integrity
from .commands import CommandInterpreter, CommandResult
from .config import SessionConfig, load_messages
from .interfaces import KeySource, OutputSink
from .line_editor import EditAction, LineEditor
from .world import DEFAULT_WORLD_PATH, World
from .world_model import Player


def load_world(path: str | Path | None = None, debug: bool = False) -> World:
    """Load and validate a world file, reporting problems before exiting."""
    path = Path(path) if path is not None else DEFAULT_WORLD_PATH
    try:
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except FileNotFoundError as exc:
        print(f"ERROR: Missing world file: {exc}")
        raise SystemExit(1) from exc
    except yaml.YAMLError as exc:
        print(f"ERROR: Invalid world file: {exc}")
        raise SystemExit(1) from exc

    errors = integrity.validate_world_structure(data)
    if errors:
        for msg in errors:
            print(f"ERROR: {msg}")
        raise SystemExit("Integrity check failed")
    for msg in integrity.check_placeholder_exits(data):
        print(f"WARNING: {msg}")

    try:
        return World(data, debug=debug)
    except ValidationError as exc:
        print(f"ERROR: Invalid world file: {exc}")
        raise SystemExit(1) from exc


class Game:
    def __init__(
        self,
        world: World,
        keys: KeySource,
        screen: OutputSink,
        config: SessionConfig | None = None,
        messages: dict[str, str] | None = None,
    ) -> None:
        self.world = world
        self.keys = keys
        self.screen = screen
        self.config = config or SessionConfig()
        self.interpreter = CommandInterpreter(world, messages or load_messages())
        self.editor = LineEditor(cursor_limit=self.config.cursor_limit, max_length=self.config.max_length)
        self.player = Player()
        self.player.location = world.start
        self.running = True
        self.world.debug(f"game_init location {world.start.value}")
        self.redraw_room()
        self.prompt()

    def stop(self) -> None:
        self.running = False

    def redraw_room(self) -> None:
        room = self.world.room(self.player.location)
        self.screen.write_header(self.config.title, room.name, self.player.score, self.player.moves)
        self.screen.append_narrative(room.description + "\n")

    def prompt(self) -> None:
        self.screen.append_narrative("\n" + self.config.prompt)

    def read_line(self) -> str:
        """Feed keys to the editor until a line is submitted."""
        while True:
            result = self.editor.feed(self.keys.next_key())
            if result.action is EditAction.SUBMIT:
                return result.line or ""
            if result.action in (EditAction.INSERT, EditAction.ERASE_BACKWARD, EditAction.ERASE_FORWARD):
                self.screen.edit_line(self.editor.text, self.editor.cursor)
            elif result.action is EditAction.CURSOR_MOVED:
                self.screen.set_cursor(self.editor.cursor)

    def handle_line(self, line: str) -> CommandResult:
        self.world.debug(f"input={line}")
        self.screen.append_narrative("\n")
        result = self.interpreter.interpret(self.player, line)
        self.player = result.player
        if result.terminate:
            self.stop()
            return result
        if result.response:
            self.screen.append_narrative(result.response)
        if result.redraw_room:
            self.redraw_room()
        self.prompt()
        return result

    def run(self) -> None:
        try:
            while self.running:
                self.handle_line(self.read_line())
        except (EOFError, KeyboardInterrupt):
            self.editor.abort_escape()
            self.world.debug("input closed")
            self.stop()


def run(
    world: World,
    keys: KeySource,
    screen: OutputSink,
    config: SessionConfig | None = None,
    messages: dict[str, str] | None = None,
) -> None:
    Game(world, keys, screen, config=config, messages=messages).run()


__all__ = ["Game", "load_world", "run"]
