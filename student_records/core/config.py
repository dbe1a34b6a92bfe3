"""
Configuration helpers for the student records manager.

Settings are read from environment variables once and cached, so that
backends and the shell do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    data_dir: Path
    file_name: str
    database_url: str
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    data_dir = Path(os.getenv("STUDENTS_DATA_DIR") or ".").expanduser()
    database_url = (os.getenv("DATABASE_URL") or "").strip()
    if not database_url:
        database_url = f"sqlite:///{data_dir / 'students.db'}"

    return Settings(
        data_dir=data_dir,
        file_name=(os.getenv("STUDENTS_FILE_NAME") or "students").strip(),
        database_url=database_url,
        log_level=(os.getenv("LOG_LEVEL") or "WARNING").upper(),
    )
