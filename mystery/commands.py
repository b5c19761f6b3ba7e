"""Command handling for the game."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from .integrity import PLACEHOLDER_DIRECTIONS
from .world import World
from .world_model import Direction, Player, RoomId


@dataclass
class CommandResult:
    player: Player
    response: str = ""
    redraw_room: bool = False
    terminate: bool = False


MOVEMENT_COMMANDS: dict[str, Direction] = {
    "west": Direction.WEST,
    "east": Direction.EAST,
}

PLACEHOLDER_COMMANDS: dict[str, Direction] = {direction.value: direction for direction in PLACEHOLDER_DIRECTIONS}


class CommandInterpreter:
    """Match submitted lines against the verb table and compute the outcome.

    ``interpret`` never mutates the player it is given; the updated player
    is part of the returned ``CommandResult``.
    """

    def __init__(self, world: World, messages: dict[str, str]) -> None:
        self.world = world
        self.messages = messages
        self.handlers: dict[str, Callable[[Player], CommandResult]] = {
            "quit": self.cmd_quit,
            "look": self.cmd_look,
        }
        for verb, direction in MOVEMENT_COMMANDS.items():
            self.handlers[verb] = self._mover(direction)
        for verb in PLACEHOLDER_COMMANDS:
            self.handlers[verb] = self.cmd_blocked

    def interpret(self, player: Player, line: str) -> CommandResult:
        handler = self.handlers.get(line)
        if handler is None:
            self.world.debug(f"command unknown {line!r}")
            return self.cmd_unknown(player)
        self.world.debug(f"command {line}")
        return handler(player)

    def cmd_quit(self, player: Player) -> CommandResult:
        return CommandResult(player, terminate=True)

    def cmd_look(self, player: Player) -> CommandResult:
        return CommandResult(player, redraw_room=True)

    def cmd_blocked(self, player: Player) -> CommandResult:
        return CommandResult(player, self.messages["cannot_go"])

    def cmd_unknown(self, player: Player) -> CommandResult:
        return CommandResult(player, self.messages["unknown_command"])

    def cmd_go(self, player: Player, direction: Direction) -> CommandResult:
        room = self.world.room(player.location)
        target = self.world.exit(room, direction)
        if target is RoomId.VOID:
            return self.cmd_blocked(player)
        moved = player.model_copy(update={"location": target, "moves": player.moves + 1}, deep=True)
        self.world.debug(f"location {target.value} moves {moved.moves}")
        response = self.messages["heading"].format(direction=direction.value)
        return CommandResult(moved, response, redraw_room=True)

    def _mover(self, direction: Direction) -> Callable[[Player], CommandResult]:
        def handler(player: Player) -> CommandResult:
            return self.cmd_go(player, direction)

        return handler


__all__ = ["CommandInterpreter", "CommandResult", "MOVEMENT_COMMANDS", "PLACEHOLDER_COMMANDS"]
