"""Runtime configuration read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

# Default data directory
DATA_DIR = Path(__file__).parent.parent.parent / "data"


@dataclass(frozen=True)
class Settings:
    """Configuration values shared by the CLI and the database layer."""

    db_path: str = field(default_factory=lambda: os.getenv("FITCOACH_DB_PATH", ""))
    owner_id: str = field(default_factory=lambda: os.getenv("FITCOACH_OWNER_ID", ""))
    canonical_spec_path: str = field(default_factory=lambda: os.getenv("FITCOACH_CANONICAL_SPEC", ""))
    log_level: str = field(default_factory=lambda: os.getenv("FITCOACH_LOG_LEVEL", "WARNING").upper())

    @property
    def canonical_spec(self) -> Path | None:
        return Path(self.canonical_spec_path) if self.canonical_spec_path else None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the cached Settings instance for the running process."""
    return Settings()


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path.

    ``FITCOACH_DB_PATH`` wins over the data directory when no directory is
    given explicitly.
    """
    if data_dir is None:
        configured = get_settings().db_path
        if configured:
            path = Path(configured)
            path.parent.mkdir(parents=True, exist_ok=True)
            return path
        data_dir = DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "fitcoach_catalog.db"
