"""Fixed-width table rendering for student listings."""
from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from student_records.domain.student import Student

_ROW_FORMAT = "{:<5} {:<15} {:<25} {:<5} {:<15}"
RULE = "-" * 70


def render_table(records: Iterable[Student], title: str) -> Iterator[str]:
    """Yield the heading, column header, rule and one line per student."""
    yield ""
    yield f"--- {title} ---"
    yield _ROW_FORMAT.format("ID", "Name", "Email", "Age", "Course")
    yield RULE
    for student in records:
        yield _ROW_FORMAT.format(student.id, student.name, student.email, student.age, student.course)


def print_records(records: list[Student], out: TextIO, *, title: str, empty_message: str) -> None:
    if not records:
        print(empty_message, file=out)
        return
    for line in render_table(records, title):
        print(line, file=out)
