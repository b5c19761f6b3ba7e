import curses
import io

import pytest

from mystery.io import ConsoleIO, CursesIO, format_header, wrap_text


def test_format_header_layout():
    header = format_header("Mystery", "Dark & Grimy Motel Room", 0, 0, 80)
    assert len(header) == 80
    assert header.startswith(" Mystery | Dark & Grimy Motel Room ")
    assert header.endswith(" Score: 000000 | Moves: 000 ")


def test_format_header_counters():
    header = format_header("Mystery", "Hall", 42, 7, 60)
    assert header.endswith("Score: 000042 | Moves: 007 ")


@pytest.mark.parametrize("width", [0, 10, 30])
def test_format_header_narrow(width):
    header = format_header("Mystery", "Dark & Grimy Motel Room", 1, 2, width)
    assert len(header) == width


def test_wrap_text_keeps_breaks():
    text = "one two three four\n\nfive"
    assert wrap_text(text, 9) == "one two\nthree\nfour\n\nfive"


def test_console_reads_bytes_until_eof():
    console = ConsoleIO(stream=io.BytesIO(b"w\x1b"), out=io.StringIO())
    assert console.next_key() == ord("w")
    assert console.next_key() == 27
    with pytest.raises(EOFError):
        console.next_key()


def test_console_output():
    out = io.StringIO()
    console = ConsoleIO(stream=io.BytesIO(), out=out, wrap_width=40)
    console.write_header("Mystery", "Hall", 0, 1)
    console.append_narrative("OK, heading west.\n")
    console.edit_line("west", 4)
    console.set_cursor(2)
    lines = out.getvalue().split("\n")
    assert lines[0] == format_header("Mystery", "Hall", 0, 1, 40)
    assert lines[1] == "OK, heading west."


def test_console_plays_a_session(world):
    from mystery.game import run

    out = io.StringIO()
    console = ConsoleIO(stream=io.BytesIO(b"west\nlook\nquit\n"), out=out)
    run(world, console, console)
    text = out.getvalue()
    assert "OK, heading west." in text
    assert "Motel Hallway" in text
    assert "Moves: 001" in text


def test_console_crlf_session(world):
    from mystery.game import run

    out = io.StringIO()
    console = ConsoleIO(stream=io.BytesIO(b"west\r\nquit\r\n"), out=out)
    run(world, console, console)
    text = out.getvalue()
    assert "OK, heading west." in text
    assert "I don't understand you, friend." not in text


def test_wrap_text_keeps_prompt_spacing():
    assert wrap_text("\n> ", 80) == "\n> "


class StubWindow:
    """Minimal stand-in for a curses window that tracks the cursor."""

    def __init__(self, height: int = 24, width: int = 80, keys: list[int] | None = None) -> None:
        self.height = height
        self.width = width
        self.keys = list(keys or [])
        self.y = 0
        self.x = 0
        self.text = ""
        self.moves: list[tuple[int, int]] = []
        self.inserted: list[tuple[str, int]] = []

    def getmaxyx(self) -> tuple[int, int]:
        return self.height, self.width

    def getyx(self) -> tuple[int, int]:
        return self.y, self.x

    def move(self, y: int, x: int) -> None:
        self.moves.append((y, x))
        self.y, self.x = y, x

    def addstr(self, text: str) -> None:
        self.text += text
        for ch in text:
            if ch == "\n":
                self.y, self.x = self.y + 1, 0
            else:
                self.x += 1

    def insstr(self, y: int, x: int, text: str, attr: int) -> None:
        self.inserted.append((text, attr))

    def getch(self) -> int:
        return self.keys.pop(0)

    def keypad(self, flag: bool) -> None:
        return None

    def leaveok(self, flag: bool) -> None:
        return None

    def scrollok(self, flag: bool) -> None:
        return None

    def clrtoeol(self) -> None:
        return None

    def erase(self) -> None:
        return None

    def refresh(self) -> None:
        return None


@pytest.fixture
def curses_io(monkeypatch):
    windows: list[StubWindow] = []

    def newwin(height: int, width: int, y: int, x: int) -> StubWindow:
        win = StubWindow(height, width)
        windows.append(win)
        return win

    monkeypatch.setattr(curses, "raw", lambda: None)
    monkeypatch.setattr(curses, "noecho", lambda: None)
    monkeypatch.setattr(curses, "newwin", newwin)

    def make(width: int = 80) -> CursesIO:
        return CursesIO(StubWindow(24, width))

    return make


def test_curses_origin_follows_prompt(curses_io):
    screen = curses_io()
    screen.append_narrative("You slowly awake.\n")
    screen.append_narrative("\n> ")
    assert screen._origin == (2, 2)


def test_curses_edit_and_submit(curses_io):
    screen = curses_io()
    screen.append_narrative("\n> ")
    screen.edit_line("west", 4)
    story = screen.story_win
    assert story.getyx() == (1, 6)
    screen.set_cursor(1)
    assert story.getyx() == (1, 3)
    screen.edit_line("wst", 1)
    assert story.moves[-2:] == [(1, 2), (1, 3)]
    screen.append_narrative("\n")
    assert (1, 5) in story.moves
    assert story.getyx() == (2, 0)
    assert screen._input_text is None


def test_curses_header(curses_io):
    screen = curses_io(width=60)
    screen.write_header("Mystery", "Hall", 3, 4)
    text, attr = screen.title_win.inserted[-1]
    assert text == format_header("Mystery", "Hall", 3, 4, 60)
    assert attr == curses.A_BOLD | curses.A_REVERSE


@pytest.mark.parametrize("key", [-1, 4])
def test_curses_end_of_input(curses_io, key):
    screen = curses_io()
    screen.story_win.keys = [ord("w"), key]
    assert screen.next_key() == ord("w")
    with pytest.raises(EOFError):
        screen.next_key()


def test_curses_narrow_terminal(curses_io):
    screen = curses_io(width=1)
    screen.append_narrative("A narrow hallway lit by a single flickering tube.\n")
    assert "".join(screen.story_win.text.split()) == "Anarrowhallwaylitbyasingleflickeringtube."


def test_wrap_text_clamps_width():
    assert wrap_text("ab cd", 0) == "a\nb\nc\nd"
