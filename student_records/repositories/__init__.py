"""
Persistence adapters.

Each backend owns an independent RecordStore and knows how to save, load and
display it. Callers compose backends through the StudentBackend protocol
rather than a shared base class.
"""
from __future__ import annotations

from typing import Protocol, TextIO

from .record_store import RecordStore


class StudentBackend(Protocol):
    store: RecordStore

    def save(self) -> None: ...

    def load(self) -> None: ...

    def display_all(self, out: TextIO) -> None: ...


__all__ = ["RecordStore", "StudentBackend"]
