import sys
from pathlib import Path

import pytest
import yaml

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.append(str(ROOT_DIR))

from mystery.config import load_messages  # noqa: E402
from mystery.interfaces import KeySource, OutputSink  # noqa: E402
from mystery.world import World  # noqa: E402

ESC = 27
RIGHT = [ESC, ord("["), ord("C")]
LEFT = [ESC, ord("["), ord("D")]


def keys_for(*lines: str) -> list[int]:
    """Return the key codes for typing each line followed by Enter."""
    codes: list[int] = []
    for line in lines:
        codes.extend(ord(ch) for ch in line)
        codes.append(10)
    return codes


class DummyKeys(KeySource):
    def __init__(self, keys: list[int] | None = None) -> None:
        self.keys = list(keys or [])

    def next_key(self) -> int:
        if not self.keys:
            raise EOFError
        return self.keys.pop(0)


class DummyScreen(OutputSink):
    def __init__(self) -> None:
        self.headers: list[tuple[str, str, int, int]] = []
        self.narrative: list[str] = []
        self.edits: list[tuple[str, int]] = []
        self.cursors: list[int] = []

    def write_header(self, title: str, room_name: str, score: int, moves: int) -> None:
        self.headers.append((title, room_name, score, moves))

    def append_narrative(self, text: str) -> None:
        self.narrative.append(text)

    def edit_line(self, text: str, cursor: int) -> None:
        self.edits.append((text, cursor))

    def set_cursor(self, cursor: int) -> None:
        self.cursors.append(cursor)

    @property
    def transcript(self) -> str:
        return "".join(self.narrative)


@pytest.fixture
def keys() -> DummyKeys:
    return DummyKeys()


@pytest.fixture
def screen() -> DummyScreen:
    return DummyScreen()


@pytest.fixture
def world() -> World:
    return World.default()


@pytest.fixture
def messages() -> dict[str, str]:
    return load_messages()


@pytest.fixture
def world_data() -> dict:
    return {
        "start": "grimy_hotel_room",
        "rooms": {
            "grimy_hotel_room": {
                "name": "Room",
                "description": "A room.",
                "exits": {"west": "hotel_hallway"},
            },
            "hotel_hallway": {
                "name": "Hallway",
                "description": "A hallway.",
                "exits": {"east": "grimy_hotel_room"},
            },
        },
        "items": {"motel_key": {"description": "A key."}},
    }


@pytest.fixture
def world_file(tmp_path, world_data) -> Path:
    path = tmp_path / "world.yaml"
    with open(path, "w", encoding="utf-8") as fh:
        yaml.safe_dump(world_data, fh)
    return path
