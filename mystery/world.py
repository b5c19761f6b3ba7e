"""World representation loaded from data files."""

from __future__ import annotations

import inspect
import os
import sys
from pathlib import Path
from types import MappingProxyType
from typing import Any

import yaml

from .world_model import VOID_ROOM, Direction, Item, ItemId, Room, RoomId

DEFAULT_WORLD_PATH = Path(__file__).resolve().parent / "data" / "world.yaml"


class World:
    """Immutable room and item registries.

    The void room is always present. It is what ``room`` falls back to and
    what ``exit`` returns when a room has no neighbour in a direction.
    """

    def __init__(self, data: dict[str, Any], debug: bool = False):
        self._debug_enabled = debug
        rooms: dict[RoomId, Room] = {RoomId.VOID: VOID_ROOM}
        for room_id, cfg in (data.get("rooms") or {}).items():
            cfg = dict(cfg)
            exits = cfg.pop("exits", None) or {}
            room = Room(id=RoomId(room_id), **cfg, **exits)
            rooms[room.id] = room
        items: dict[ItemId, Item] = {}
        for item_id, cfg in (data.get("items") or {}).items():
            item = Item(id=ItemId(item_id), **(cfg or {}))
            items[item.id] = item
        self.rooms = MappingProxyType(rooms)
        self.items = MappingProxyType(items)
        self.start = RoomId(data["start"])

    def debug(self, message: str) -> None:
        if self._debug_enabled:
            frame = inspect.stack()[1]
            filename = os.path.basename(frame.filename)
            lineno = frame.lineno
            print(f"{filename}:{lineno} -- {message}", file=sys.stderr)

    @classmethod
    def from_file(cls, path: str | Path, debug: bool = False) -> "World":
        with open(path, encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
        return cls(data, debug=debug)

    @classmethod
    def default(cls, debug: bool = False) -> "World":
        return cls.from_file(DEFAULT_WORLD_PATH, debug=debug)

    def room(self, room_id: RoomId | None) -> Room:
        """Return the room for ``room_id`` or the void room if it is unknown."""
        if room_id is None:
            return VOID_ROOM
        return self.rooms.get(room_id, VOID_ROOM)

    def exit(self, room: Room, direction: Direction) -> RoomId:
        """Return the neighbour of ``room`` in ``direction`` or ``RoomId.VOID``."""
        target = room.exit(direction)
        if target not in self.rooms:
            return RoomId.VOID
        return target

    def item(self, item_id: ItemId) -> Item | None:
        return self.items.get(item_id)


__all__ = ["World", "DEFAULT_WORLD_PATH"]
