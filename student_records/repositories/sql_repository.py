"""Database persistence adapter backed by SQLAlchemy."""
from __future__ import annotations

import logging
from typing import Optional, TextIO

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from student_records.core.config import get_settings
from student_records.core.errors import DatabaseStorageError
from student_records.db.create_tables import create_all
from student_records.db.models import StudentRow
from student_records.db.session import open_session
from student_records.domain.student import Student
from student_records.services.display import print_records

from .record_store import RecordStore

logger = logging.getLogger(__name__)

# Rendered only on SQLite; other dialects get a plain INSERT.
_UPSERT = StudentRow.__table__.insert().prefix_with("OR REPLACE", dialect="sqlite")


def _row_to_student(row: StudentRow) -> Student:
    return Student(id=row.id, name=row.name, email=row.email, age=row.age, course=row.course)


def _student_params(student: Student) -> dict:
    return {
        "id": student.id,
        "name": student.name,
        "email": student.email,
        "age": student.age,
        "course": student.course,
    }


class DatabaseBackend:
    """
    Table-backed persistence over its own RecordStore.

    The session is opened on first use and kept until close().
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_url = database_url or get_settings().database_url
        self.store = RecordStore()
        self._session: Optional[Session] = None

    # -------------------------- connection --------------------------
    def _connect(self) -> Session:
        if self._session is None:
            try:
                self._session = open_session(self.database_url)
            except (SQLAlchemyError, OSError, ImportError) as exc:
                raise DatabaseStorageError(f"Could not connect to {self.database_url}: {exc}") from exc
            logger.debug("Opened database session for %s", self.database_url)
        return self._session

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None
            logger.debug("Closed database session for %s", self.database_url)

    # -------------------------- schema --------------------------
    def initialize(self) -> None:
        """Create the students table if it does not exist."""
        try:
            create_all(self.database_url)
        except (SQLAlchemyError, OSError, ImportError) as exc:
            raise DatabaseStorageError(f"Could not initialize database: {exc}") from exc
        logger.info("Database initialized successfully.")

    # -------------------------- backend contract --------------------------
    def save(self) -> None:
        """
        Replace the table contents with the store: delete all rows, then
        insert-or-replace each student. Runs as one transaction; on failure the
        previous contents are kept.
        """
        session = self._connect()
        params = [_student_params(s) for s in self.store]
        try:
            session.execute(delete(StudentRow))
            if params:
                session.execute(_UPSERT, params)
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise DatabaseStorageError(f"Could not save students to database: {exc}") from exc
        logger.info("Saved %d students to database.", len(params))

    def load(self) -> None:
        self.store.clear()
        session = self._connect()
        try:
            rows = session.execute(select(StudentRow).order_by(StudentRow.id)).scalars().all()
            records = [_row_to_student(r) for r in rows]
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise DatabaseStorageError(f"Could not load students from database: {exc}") from exc
        self.store.replace_all(records)
        logger.info("Loaded %d students from database.", len(records))

    def display_all(self, out: TextIO) -> None:
        print_records(
            self.store.list_all(),
            out,
            title="Student Records (Database)",
            empty_message="No students found in database.",
        )

    # -------------------------- queries --------------------------
    def find_by_age(self, age: int) -> list[Student]:
        session = self._connect()
        try:
            stmt = select(StudentRow).where(StudentRow.age == age).order_by(StudentRow.id)
            rows = session.execute(stmt).scalars().all()
            result = [_row_to_student(r) for r in rows]
            session.commit()
        except SQLAlchemyError as exc:
            session.rollback()
            raise DatabaseStorageError(f"Could not query students by age: {exc}") from exc
        return result
