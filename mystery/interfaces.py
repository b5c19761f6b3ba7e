"""Protocol interfaces for presentation backends."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeySource(Protocol):
    """Interface for raw keystroke input."""

    def next_key(self) -> int:  # pragma: no cover - interface
        """Block until a key is available and return its code.

        Raises ``EOFError`` once the input is exhausted.
        """
        ...


@runtime_checkable
class OutputSink(Protocol):
    """Interface for the header bar, narrative pane and input line."""

    def write_header(self, title: str, room_name: str, score: int, moves: int) -> None:  # pragma: no cover - interface
        """Replace the header contents."""
        ...

    def append_narrative(self, text: str) -> None:  # pragma: no cover - interface
        """Append ``text`` to the narrative, wrapping it to the viewport."""
        ...

    def edit_line(self, text: str, cursor: int) -> None:  # pragma: no cover - interface
        """Show ``text`` as the current input and place the cursor at ``cursor``."""
        ...

    def set_cursor(self, cursor: int) -> None:  # pragma: no cover - interface
        """Move the cursor to column ``cursor`` of the current input."""
        ...


__all__ = ["KeySource", "OutputSink"]
