from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the student_records package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from student_records.core import config as core_config  # noqa: E402
from student_records.db import models  # noqa: E402
from student_records.db import session as db_session  # noqa: E402
from student_records.domain.student import Student  # noqa: E402
from student_records.repositories.file_storage import FileBackend  # noqa: E402
from student_records.repositories.sql_repository import DatabaseBackend  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Temporary SQLite database with fresh settings/engine caches."""
    db_file = tmp_path / "test.db"
    url = f"sqlite:///{db_file}"
    monkeypatch.setenv("DATABASE_URL", url)
    monkeypatch.setenv("STUDENTS_DATA_DIR", str(tmp_path))
    _clear_caches()

    engine = db_session.get_engine(url)
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield url

    try:
        engine.dispose()
    except Exception:
        pass
    _clear_caches()


@pytest.fixture()
def db_backend(temp_db):
    backend = DatabaseBackend(temp_db)
    yield backend
    backend.close()


@pytest.fixture()
def file_backend(tmp_path):
    return FileBackend(tmp_path / "students")


@pytest.fixture()
def sample_students():
    return [
        Student(1, "Ann", "a@x.com", 20, "CS"),
        Student(2, "Bo", "b@x.com", 21, "EE"),
    ]
