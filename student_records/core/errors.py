"""
Exception hierarchy for the student records manager.

Backends raise subclasses of StorageError; the shell reports them and keeps
running.
"""

__all__ = [
    "StudentRecordsError",
    "StorageError",
    "FileStorageError",
    "DatabaseStorageError",
]


class StudentRecordsError(Exception):
    """Root exception for all student records errors."""


class StorageError(StudentRecordsError):
    """Raised when a backend cannot read or write its persisted records."""


class FileStorageError(StorageError):
    """Raised on CSV / snapshot I/O failures other than a missing file."""


class DatabaseStorageError(StorageError):
    """Raised when a database operation fails."""
