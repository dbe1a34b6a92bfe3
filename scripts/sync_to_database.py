#!/usr/bin/env python3
"""
One-shot sync: load the CSV (or snapshot) and replace the database contents with it.

Usage:
  python scripts/sync_to_database.py [--data-dir DIR] [--name students] [--database-url URL]
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make the student_records package importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from student_records.core.config import get_settings
from student_records.repositories.file_storage import FileBackend
from student_records.repositories.sql_repository import DatabaseBackend
from student_records.services.sync_service import sync_file_to_database


def sync(data_dir: Path, name: str, database_url: str) -> int:
    file_backend = FileBackend(data_dir / name)
    db_backend = DatabaseBackend(database_url)
    try:
        db_backend.initialize()
        file_backend.load()
        return sync_file_to_database(file_backend, db_backend)
    finally:
        db_backend.close()


def main() -> None:
    settings = get_settings()
    ap = argparse.ArgumentParser(description="Copy file-backed student records into the database")
    ap.add_argument("--data-dir", default=str(settings.data_dir), help="Directory holding the CSV and snapshot files")
    ap.add_argument("--name", default=settings.file_name, help="Base name of the CSV/snapshot files")
    ap.add_argument("--database-url", default=settings.database_url, help="SQLAlchemy database URL")
    args = ap.parse_args()

    count = sync(Path(args.data_dir), args.name, args.database_url)
    print(f"OK: {count} students synchronized to the database.")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
