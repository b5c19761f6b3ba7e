"""Session configuration and message catalogue loading."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_MESSAGES_PATH = DATA_DIR / "messages.yaml"

REQUIRED_MESSAGES = ("cannot_go", "unknown_command", "heading")


class SessionConfig(BaseModel):
    """Presentation and editing limits owned by a single session."""

    title: str = "Mystery"
    prompt: str = "> "
    # Cursor travel and buffer length are bounded separately.
    cursor_limit: int = Field(default=62, ge=0)
    max_length: int = Field(default=62, ge=0)
    wrap_width: int = Field(default=80, ge=10)

    model_config = ConfigDict(extra="forbid", frozen=True)


def _load_yaml(path: Path) -> Any:
    try:
        with open(path, encoding="utf-8") as fh:
            return yaml.safe_load(fh)
    except FileNotFoundError as exc:
        print(f"ERROR: Missing file '{path.name}'")
        raise SystemExit(1) from exc
    except yaml.YAMLError as exc:
        print(f"ERROR: Invalid YAML in '{path.name}': {exc}")
        raise SystemExit(1) from exc


def load_config(path: str | Path | None = None) -> SessionConfig:
    """Load session settings from ``path`` or return the defaults."""
    if path is None:
        return SessionConfig()
    path = Path(path)
    data = _load_yaml(path) or {}
    try:
        return SessionConfig(**data)
    except (TypeError, ValidationError) as exc:
        print(f"ERROR: Invalid settings in '{path.name}': {exc}")
        raise SystemExit(1) from exc


def load_messages(path: str | Path | None = None) -> dict[str, str]:
    """Load response messages, checking that every required key is present."""
    path = Path(path) if path is not None else DEFAULT_MESSAGES_PATH
    data = _load_yaml(path) or {}
    if not isinstance(data, dict):
        print(f"ERROR: Messages in '{path.name}' must be a mapping")
        raise SystemExit(1)
    missing = [key for key in REQUIRED_MESSAGES if not data.get(key)]
    if missing:
        print(f"ERROR: Missing or empty messages {missing} in '{path.name}'")
        raise SystemExit(1)
    return {str(key): str(value) for key, value in data.items()}


__all__ = ["SessionConfig", "load_config", "load_messages", "REQUIRED_MESSAGES", "DATA_DIR"]
