"""One-directional copy of file-backed records into the database."""
from __future__ import annotations

import logging

from student_records.repositories import StudentBackend

logger = logging.getLogger(__name__)


def sync_file_to_database(file_backend: StudentBackend, db_backend: StudentBackend) -> int:
    """
    Replace the database store with the file store's records and save it.

    Last writer wins; nothing is merged. Returns the number of records synced.
    """
    records = file_backend.store.list_all()
    db_backend.store.replace_all(records)
    db_backend.save()
    logger.info("Synchronized %d students from file to database.", len(records))
    return len(records)
