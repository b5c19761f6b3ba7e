"""Keystroke-level line editing with arrow-key decoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

NEWLINE = 10
BACKSPACE = 8
DELETE = 127
ERASE_FORWARD = ord("~")
ESCAPE = 27

ERASE_BACKWARD = frozenset({DELETE, BACKSPACE})

ESCAPE_TAIL_LENGTH = 2
CURSOR_RIGHT = "[C"
CURSOR_LEFT = "[D"


class EditAction(Enum):
    SUBMIT = "submit"
    INSERT = "insert"
    ERASE_BACKWARD = "erase_backward"
    ERASE_FORWARD = "erase_forward"
    CURSOR_MOVED = "cursor_moved"
    ESCAPE_PENDING = "escape_pending"
    IGNORED = "ignored"


@dataclass
class EditResult:
    action: EditAction
    line: str | None = None


@dataclass
class EditableLine:
    """Characters typed so far plus the cursor offset into them."""

    chars: list[str] = field(default_factory=list)
    cursor: int = 0

    @property
    def text(self) -> str:
        return "".join(self.chars)

    def __len__(self) -> int:
        return len(self.chars)

    def clear(self) -> None:
        self.chars.clear()
        self.cursor = 0


@dataclass
class EscapeState:
    """Raw codes collected after an escape trigger."""

    active: bool = False
    codes: list[int] = field(default_factory=list)

    def start(self) -> None:
        self.active = True
        self.codes.clear()

    def clear(self) -> None:
        self.active = False
        self.codes.clear()

    @property
    def complete(self) -> bool:
        return len(self.codes) >= ESCAPE_TAIL_LENGTH

    def tail(self) -> str:
        return "".join(chr(code) if 0 <= code < 0x110000 else "�" for code in self.codes)


def is_printable(key: int) -> bool:
    return 32 <= key < 127 and key != ERASE_FORWARD


class LineEditor:
    """Feed raw key codes one at a time and collect a submitted line.

    ``cursor_limit`` bounds how far right the cursor may travel and
    ``max_length`` bounds how many characters the buffer may hold. Both
    are enforced on every insert.
    """

    def __init__(self, cursor_limit: int = 62, max_length: int = 62) -> None:
        self.cursor_limit = cursor_limit
        self.max_length = max_length
        self.line = EditableLine()
        self.escape = EscapeState()

    @property
    def text(self) -> str:
        return self.line.text

    @property
    def cursor(self) -> int:
        return self.line.cursor

    def feed(self, key: int) -> EditResult:
        if self.escape.active:
            return self._feed_escape(key)
        if key == NEWLINE:
            return self._submit()
        if key in ERASE_BACKWARD:
            return self._erase_backward()
        if key == ERASE_FORWARD:
            return self._erase_forward()
        if key == ESCAPE:
            self.escape.start()
            return EditResult(EditAction.ESCAPE_PENDING)
        if is_printable(key):
            return self._insert(chr(key))
        return EditResult(EditAction.IGNORED)

    def abort_escape(self) -> None:
        """Discard a partially read escape sequence."""
        self.escape.clear()

    def _submit(self) -> EditResult:
        text = self.line.text
        self.line.clear()
        return EditResult(EditAction.SUBMIT, line=text)

    def _erase_backward(self) -> EditResult:
        if self.line.cursor <= 0:
            return EditResult(EditAction.IGNORED)
        self.line.cursor -= 1
        del self.line.chars[self.line.cursor]
        return EditResult(EditAction.ERASE_BACKWARD)

    def _erase_forward(self) -> EditResult:
        if self.line.cursor >= len(self.line):
            return EditResult(EditAction.IGNORED)
        del self.line.chars[self.line.cursor]
        return EditResult(EditAction.ERASE_FORWARD)

    def _insert(self, char: str) -> EditResult:
        if self.line.cursor >= self.cursor_limit or len(self.line) >= self.max_length:
            return EditResult(EditAction.IGNORED)
        self.line.chars.insert(self.line.cursor, char)
        self.line.cursor += 1
        return EditResult(EditAction.INSERT)

    def _feed_escape(self, key: int) -> EditResult:
        self.escape.codes.append(key)
        if not self.escape.complete:
            return EditResult(EditAction.ESCAPE_PENDING)
        tail = self.escape.tail()
        self.escape.clear()
        if tail == CURSOR_RIGHT:
            if self.line.cursor < min(len(self.line), self.cursor_limit):
                self.line.cursor += 1
                return EditResult(EditAction.CURSOR_MOVED)
        elif tail == CURSOR_LEFT:
            if self.line.cursor > 0:
                self.line.cursor -= 1
                return EditResult(EditAction.CURSOR_MOVED)
        return EditResult(EditAction.IGNORED)


__all__ = [
    "EditAction",
    "EditResult",
    "EditableLine",
    "EscapeState",
    "LineEditor",
    "is_printable",
    "NEWLINE",
    "BACKSPACE",
    "DELETE",
    "ERASE_FORWARD",
    "ESCAPE",
]
