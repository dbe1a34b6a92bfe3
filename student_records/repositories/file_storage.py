"""
File-based persistence adapter.

Records are written to ``<name>.csv`` (header plus one comma-joined line per
student) and to a pickle snapshot ``<name>.dat``. Loading prefers the CSV and
falls back to the snapshot when the CSV is missing.
"""

from __future__ import annotations

import logging
import pickle
from pathlib import Path
from typing import TextIO

from student_records.core.errors import FileStorageError
from student_records.domain.student import CSV_HEADER, Student
from student_records.services.display import print_records

from .record_store import RecordStore

logger = logging.getLogger(__name__)


class FileBackend:
    """CSV + snapshot persistence over its own RecordStore."""

    def __init__(self, base_path: str | Path) -> None:
        base = Path(base_path).expanduser()
        self.text_path = Path(f"{base}.csv")
        self.snapshot_path = Path(f"{base}.dat")
        self.store = RecordStore()

    # -------------------------- text --------------------------
    def save_text(self) -> None:
        try:
            self.text_path.parent.mkdir(parents=True, exist_ok=True)
            with self.text_path.open("w", encoding="utf-8") as f:
                f.write(CSV_HEADER + "\n")
                for student in self.store:
                    f.write(student.to_csv() + "\n")
        except OSError as exc:
            raise FileStorageError(f"Could not write {self.text_path}: {exc}") from exc
        logger.info("Data saved to %s", self.text_path)

    def load_text(self) -> None:
        """
        Replace the store with the CSV contents. Lines that do not parse are
        skipped. A missing file raises FileNotFoundError unchanged.
        """
        self.store.clear()
        records: list[Student] = []
        try:
            with self.text_path.open("r", encoding="utf-8") as f:
                f.readline()  # header
                for lineno, line in enumerate(f, start=2):
                    student = Student.from_csv(line)
                    if student is None:
                        logger.debug("Skipping malformed line %d in %s", lineno, self.text_path)
                        continue
                    records.append(student)
        except FileNotFoundError:
            raise
        except (OSError, UnicodeDecodeError) as exc:
            raise FileStorageError(f"Could not read {self.text_path}: {exc}") from exc
        self.store.replace_all(records)
        logger.info("Data loaded from %s", self.text_path)

    # -------------------------- snapshot --------------------------
    def save_snapshot(self) -> None:
        try:
            self.snapshot_path.parent.mkdir(parents=True, exist_ok=True)
            with self.snapshot_path.open("wb") as f:
                pickle.dump(self.store.list_all(), f)
        except OSError as exc:
            raise FileStorageError(f"Could not write {self.snapshot_path}: {exc}") from exc
        logger.info("Data saved to %s", self.snapshot_path)

    def load_snapshot(self) -> None:
        """Replace the store with the snapshot contents. A missing file raises FileNotFoundError."""
        try:
            with self.snapshot_path.open("rb") as f:
                records = pickle.load(f)
        except FileNotFoundError:
            raise
        except (OSError, EOFError, pickle.UnpicklingError, AttributeError, ImportError) as exc:
            raise FileStorageError(f"Could not read {self.snapshot_path}: {exc}") from exc
        if not isinstance(records, list) or not all(isinstance(r, Student) for r in records):
            raise FileStorageError(f"{self.snapshot_path} does not hold a list of students")
        self.store.replace_all(records)
        logger.info("Data loaded from %s", self.snapshot_path)

    # -------------------------- backend contract --------------------------
    def save(self) -> None:
        """Write both the CSV and the snapshot; one failing does not stop the other."""
        errors: list[FileStorageError] = []
        for write in (self.save_text, self.save_snapshot):
            try:
                write()
            except FileStorageError as exc:
                errors.append(exc)
        if errors:
            raise errors[0]

    def load(self) -> None:
        self.store.clear()
        try:
            self.load_text()
        except FileNotFoundError:
            try:
                self.load_snapshot()
            except FileNotFoundError:
                logger.info("No existing data files found. Starting with empty list.")

    def display_all(self, out: TextIO) -> None:
        print_records(
            self.store.list_all(),
            out,
            title="Student Records",
            empty_message="No students found.",
        )
