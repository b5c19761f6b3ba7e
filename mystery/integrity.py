"""Integrity checks for world data files."""

from __future__ import annotations

from typing import Any

from .world_model import Direction, ItemId, RoomId

PLACEHOLDER_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.NORTH, Direction.SOUTH)

_ROOM_IDS = {room_id.value for room_id in RoomId}
_ITEM_IDS = {item_id.value for item_id in ItemId}
_DIRECTIONS = {direction.value for direction in Direction}
_ROOM_KEYS = {"name", "description", "exits"}
_ITEM_KEYS = {"description"}


def validate_world_structure(data: dict[str, Any]) -> list[str]:
    """Validate cross references inside raw world data and return error messages."""

    errors: list[str] = []
    if not isinstance(data, dict):
        return ["World data must be a mapping"]

    rooms = data.get("rooms") or {}
    if not isinstance(rooms, dict):
        errors.append("'rooms' must be a mapping")
        rooms = {}
    for room_id, room in rooms.items():
        if room_id not in _ROOM_IDS:
            errors.append(f"Unknown room '{room_id}'")
            continue
        if room_id == RoomId.VOID.value:
            errors.append(f"Room '{room_id}' is reserved and cannot be defined")
            continue
        if not isinstance(room, dict):
            errors.append(f"Room '{room_id}' must be a mapping")
            continue
        for key in room:
            if key not in _ROOM_KEYS:
                errors.append(f"Room '{room_id}' has unknown field '{key}'")
        exits = room.get("exits") or {}
        if not isinstance(exits, dict):
            errors.append(f"Room '{room_id}' exits must be a mapping")
            continue
        for direction, target in exits.items():
            if direction not in _DIRECTIONS:
                errors.append(f"Room '{room_id}' has exit in unknown direction '{direction}'")
            if not isinstance(target, str) or target not in _ROOM_IDS:
                errors.append(f"Room '{room_id}' has exit to missing room '{target}'")
            elif target != RoomId.VOID.value and target not in rooms:
                errors.append(f"Room '{room_id}' has exit to undefined room '{target}'")

    items = data.get("items") or {}
    if not isinstance(items, dict):
        errors.append("'items' must be a mapping")
        items = {}
    for item_id, item in items.items():
        if item_id not in _ITEM_IDS:
            errors.append(f"Unknown item '{item_id}'")
            continue
        if not isinstance(item, dict):
            errors.append(f"Item '{item_id}' must be a mapping")
            continue
        for key in item:
            if key not in _ITEM_KEYS:
                errors.append(f"Item '{item_id}' has unknown field '{key}'")

    start = data.get("start")
    if start is None:
        errors.append("Start room is missing")
    elif start == RoomId.VOID.value:
        errors.append(f"Start room '{start}' is the void")
    elif not isinstance(start, str) or start not in rooms:
        errors.append(f"Start room '{start}' does not exist")

    return errors


def check_placeholder_exits(data: dict[str, Any]) -> list[str]:
    """Report exits the command interpreter will never follow.

    Returns a list of warning messages."""

    warnings: list[str] = []
    for room_id, room in (data.get("rooms") or {}).items():
        exits = (room.get("exits") or {}) if isinstance(room, dict) else {}
        if not isinstance(exits, dict):
            continue
        for direction in PLACEHOLDER_DIRECTIONS:
            target = exits.get(direction.value)
            if target and target != RoomId.VOID.value:
                warnings.append(f"Room '{room_id}' exit '{direction.value}' to '{target}' is never followed")
    return warnings


__all__ = ["PLACEHOLDER_DIRECTIONS", "validate_world_structure", "check_placeholder_exits"]
