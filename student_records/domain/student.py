"""Student record and its CSV line format."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

CSV_HEADER = "ID,Name,Email,Age,Course"
CSV_FIELD_COUNT = 5


@dataclass
class Student:
    id: int
    name: str
    email: str
    age: int
    course: str

    def __str__(self) -> str:
        return (
            f"Student{{id={self.id}, name='{self.name}', email='{self.email}', "
            f"age={self.age}, course='{self.course}'}}"
        )

    def to_csv(self) -> str:
        """Comma-joined fields. Values are written as-is, commas included."""
        return f"{self.id},{self.name},{self.email},{self.age},{self.course}"

    @classmethod
    def from_csv(cls, line: str) -> Optional["Student"]:
        """
        Parse one CSV data line. Returns None for lines with fewer than five
        fields or a non-integer id/age; fields past the fifth are ignored.
        """
        parts = line.rstrip("\r\n").split(",")
        if len(parts) < CSV_FIELD_COUNT:
            return None
        try:
            student_id = int(parts[0])
            age = int(parts[3])
        except ValueError:
            return None
        return cls(id=student_id, name=parts[1], email=parts[2], age=age, course=parts[4])
