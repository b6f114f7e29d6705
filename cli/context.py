"""Persistent state for the scrapesync CLI.

Tracks the "active project" that ``submit`` targets when no
``--project-id`` is given.  Stored in ``<cli_config_dir>/context.json``.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from pathlib import Path

from scrapesync.config import settings


@dataclass
class CliContext:
    active_project_id: int | None = None

    def to_json(self) -> str:
        return json.dumps(asdict(self), indent=2)

    @classmethod
    def from_json(cls, data: str) -> CliContext:
        try:
            raw = json.loads(data)
            project_id = raw.get("active_project_id")
            if project_id is not None and not isinstance(project_id, int):
                return cls()
            return cls(active_project_id=project_id)
        except (json.JSONDecodeError, AttributeError, TypeError):
            return cls()


def _get_context_path() -> Path:
    """Return the path to the context JSON file."""
    return settings.cli_config_dir / "context.json"


def load_context() -> CliContext:
    """Load the CLI context from disk. Returns defaults if missing/corrupt."""
    path = _get_context_path()
    if not path.exists():
        return CliContext()
    try:
        return CliContext.from_json(path.read_text(encoding="utf-8"))
    except OSError:
        return CliContext()


def save_context(ctx: CliContext) -> None:
    """Save the CLI context to disk."""
    settings.cli_config_dir.mkdir(parents=True, exist_ok=True)
    _get_context_path().write_text(ctx.to_json(), encoding="utf-8")
