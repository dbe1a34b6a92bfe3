"""In-memory ordered collection of student records."""
from __future__ import annotations

from typing import Iterable, Iterator, Optional

from student_records.domain.student import Student


class RecordStore:
    """
    Ordered list of students. Insertion order is kept and duplicate ids are
    allowed; nothing here enforces uniqueness.
    """

    def __init__(self, records: Iterable[Student] = ()) -> None:
        self._records: list[Student] = list(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Student]:
        return iter(list(self._records))

    def add(self, record: Student) -> None:
        self._records.append(record)

    def find_by_id(self, student_id: int) -> Optional[Student]:
        return next((s for s in self._records if s.id == student_id), None)

    def remove_by_id(self, student_id: int) -> bool:
        """Drop every record with *student_id*. Returns True if any was removed."""
        kept = [s for s in self._records if s.id != student_id]
        removed = len(kept) != len(self._records)
        self._records = kept
        return removed

    def list_all(self) -> list[Student]:
        return list(self._records)

    def replace_all(self, records: Iterable[Student]) -> None:
        self._records = list(records)

    def clear(self) -> None:
        self._records.clear()
