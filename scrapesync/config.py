"""Centralised settings for scrapesync.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


def _optional_int(name: str) -> int | None:
    value = os.environ.get(name, "").strip()
    return int(value) if value else None


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Persistence backend
    # ------------------------------------------------------------------
    submit_url: str = field(
        default_factory=lambda: os.environ.get(
            "SCRAPESYNC_SUBMIT_URL", "http://localhost:3000/articles"
        )
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("REQUEST_TIMEOUT", "30.0"))
    )
    api_token: str = field(
        default_factory=lambda: os.environ.get("SCRAPESYNC_API_TOKEN", "")
    )
    default_project_id: int | None = field(
        default_factory=lambda: _optional_int("SCRAPESYNC_PROJECT_ID")
    )

    # ------------------------------------------------------------------
    # Normalization
    # ------------------------------------------------------------------
    max_heading_depth: int = field(
        default_factory=lambda: int(os.environ.get("MAX_HEADING_DEPTH", "32"))
    )

    # ------------------------------------------------------------------
    # CLI
    # ------------------------------------------------------------------
    cli_config_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("SCRAPESYNC_CLI_DIR", Path.home() / ".scrapesync")
        )
    )


# Module-level singleton - import this everywhere:
#   from scrapesync.config import settings
settings = Settings()
