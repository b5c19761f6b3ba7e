"""Data models for world elements."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RoomId(Enum):
    """Known rooms.

    ``VOID`` is both the "no exit" marker on a room and the room returned
    when a lookup fails.
    """

    VOID = "void"
    GRIMY_HOTEL_ROOM = "grimy_hotel_room"
    HOTEL_HALLWAY = "hotel_hallway"
    HOTEL_LOBBY = "hotel_lobby"


class ItemId(Enum):
    MOTEL_KEY = "motel_key"
    MATCHBOOK = "matchbook"


class Direction(Enum):
    UP = "up"
    DOWN = "down"
    WEST = "west"
    EAST = "east"
    NORTH = "north"
    SOUTH = "south"


class Room(BaseModel):
    id: RoomId
    name: str
    description: str
    up: RoomId = RoomId.VOID
    down: RoomId = RoomId.VOID
    west: RoomId = RoomId.VOID
    east: RoomId = RoomId.VOID
    north: RoomId = RoomId.VOID
    south: RoomId = RoomId.VOID

    model_config = ConfigDict(extra="forbid", frozen=True)

    def exit(self, direction: Direction) -> RoomId:
        return getattr(self, direction.value)


class Item(BaseModel):
    id: ItemId
    description: str

    model_config = ConfigDict(extra="forbid", frozen=True)


class Player(BaseModel):
    location: RoomId | None = None
    score: int = Field(default=0, ge=0)
    moves: int = Field(default=0, ge=0)
    inventory: list[ItemId] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


VOID_ROOM = Room(
    id=RoomId.VOID,
    name="The Void",
    description="There is nothing here. Nothing at all.",
)


__all__ = [
    "RoomId",
    "ItemId",
    "Direction",
    "Room",
    "Item",
    "Player",
    "VOID_ROOM",
]
