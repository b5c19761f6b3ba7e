"""Input and output backends for the terminal."""

from __future__ import annotations

import contextlib
import curses
import sys
import textwrap
from collections.abc import Callable
from typing import BinaryIO, TextIO

from .interfaces import KeySource, OutputSink

END_OF_TRANSMISSION = 4


def format_header(title: str, room_name: str, score: int, moves: int, width: int) -> str:
    """Return the header bar text padded or clipped to ``width`` columns."""
    left = f" {title} | {room_name}"
    right = f" Score: {score:06} | Moves: {moves:03} "
    space = max(width - len(right), 0)
    return (left[:space].ljust(space) + right)[:width]


def wrap_text(text: str, width: int) -> str:
    """Wrap each line of ``text`` to ``width`` keeping explicit line breaks."""
    width = max(width, 1)
    return "\n".join(textwrap.fill(line, width) if len(line) > width else line for line in text.split("\n"))


class ConsoleIO(KeySource, OutputSink):
    """Read raw bytes from a binary stream and write plain text.

    Used for piped input and terminals without curses support. The
    terminal echoes what is typed, so input edits are not redrawn.
    """

    def __init__(
        self,
        stream: BinaryIO | None = None,
        out: TextIO | None = None,
        wrap_width: int = 80,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdin.buffer
        self.out = out if out is not None else sys.stdout
        self.wrap_width = wrap_width

    def next_key(self) -> int:
        data = self.stream.read(1)
        if not data:
            raise EOFError
        return data[0]

    def write_header(self, title: str, room_name: str, score: int, moves: int) -> None:
        self.out.write(format_header(title, room_name, score, moves, self.wrap_width) + "\n")
        self.out.flush()

    def append_narrative(self, text: str) -> None:
        self.out.write(wrap_text(text, self.wrap_width))
        self.out.flush()

    def edit_line(self, text: str, cursor: int) -> None:
        """The terminal already echoes typed input."""

    def set_cursor(self, cursor: int) -> None:
        """The terminal already echoes cursor movement."""


class CursesIO(KeySource, OutputSink):
    """Title bar plus scrolling story window drawn with curses."""

    def __init__(self, stdscr: curses.window) -> None:
        curses.raw()
        curses.noecho()
        stdscr.keypad(False)
        max_y, max_x = stdscr.getmaxyx()
        self.width = max_x
        self.title_win = curses.newwin(1, max_x, 0, 0)
        self.title_win.leaveok(True)
        self.story_win = curses.newwin(max_y - 1, max_x, 1, 0)
        self.story_win.scrollok(True)
        self.story_win.keypad(False)
        self._origin = (0, 0)
        self._input_text: str | None = None

    def next_key(self) -> int:
        key = self.story_win.getch()
        if key in (-1, END_OF_TRANSMISSION):
            raise EOFError
        return key

    def write_header(self, title: str, room_name: str, score: int, moves: int) -> None:
        header = format_header(title, room_name, score, moves, self.width)
        self.title_win.erase()
        self.title_win.insstr(0, 0, header, curses.A_BOLD | curses.A_REVERSE)
        self.title_win.refresh()

    def append_narrative(self, text: str) -> None:
        if self._input_text is not None:
            y, x = self._origin
            with contextlib.suppress(curses.error):
                self.story_win.move(y, x + len(self._input_text))
            self._input_text = None
        # The last column is left free so curses never wraps on its own.
        with contextlib.suppress(curses.error):
            self.story_win.addstr(wrap_text(text, self.width - 1))
        self._origin = self.story_win.getyx()
        self.story_win.refresh()

    def edit_line(self, text: str, cursor: int) -> None:
        y, x = self._origin
        with contextlib.suppress(curses.error):
            self.story_win.move(y, x)
            self.story_win.clrtoeol()
            self.story_win.addstr(text)
            self.story_win.move(y, x + cursor)
        self._input_text = text
        self.story_win.refresh()

    def set_cursor(self, cursor: int) -> None:
        y, x = self._origin
        with contextlib.suppress(curses.error):
            self.story_win.move(y, x + cursor)
        self.story_win.refresh()


def run_curses(main: Callable[[CursesIO], None]) -> None:
    """Run ``main`` with a ``CursesIO`` and restore the terminal afterwards."""

    def _wrapped(stdscr: curses.window) -> None:
        main(CursesIO(stdscr))

    curses.wrapper(_wrapped)


__all__ = ["ConsoleIO", "CursesIO", "format_header", "wrap_text", "run_curses"]
