"""
Command-line entry point.

Usage:
  python -m student_records [--data-dir DIR] [--name students] [--database-url URL] [--debug]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from student_records.core.config import get_settings
from student_records.repositories.file_storage import FileBackend
from student_records.repositories.sql_repository import DatabaseBackend
from student_records.shell import Shell

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    ap = argparse.ArgumentParser(prog="student-records", description="Manage student records in a CSV file and a database")
    ap.add_argument("--data-dir", default=str(settings.data_dir), help="Directory holding the CSV and snapshot files")
    ap.add_argument("--name", default=settings.file_name, help="Base name of the CSV/snapshot files (default: students)")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy database URL")
    ap.add_argument("--debug", action="store_true", help="Enable verbose debug logging")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.debug else getattr(logging, get_settings().log_level, logging.WARNING)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")

    data_dir = Path(args.data_dir).expanduser()
    try:
        data_dir.mkdir(parents=True, exist_ok=True)
        file_backend = FileBackend(data_dir / args.name)
        db_backend = DatabaseBackend(args.database_url)
        shell = Shell(file_backend, db_backend)
    except OSError as exc:
        logger.debug("startup failed", exc_info=True)
        sys.stderr.write(f"Error starting shell: {exc}\n")
        return 1

    shell.run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
