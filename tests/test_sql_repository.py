"""
Database backend tests against a temporary SQLite database.
"""
from __future__ import annotations

import io

import pytest

from student_records.core.errors import DatabaseStorageError
from student_records.domain.student import Student
from student_records.repositories.sql_repository import DatabaseBackend


def test_initialize_is_idempotent(db_backend):
    db_backend.initialize()
    db_backend.initialize()
    db_backend.load()
    assert db_backend.store.list_all() == []


def test_save_and_load_round_trip_ordered_by_id(temp_db):
    writer = DatabaseBackend(temp_db)
    writer.store.add(Student(2, "Bo", "b@x.com", 21, "EE"))
    writer.store.add(Student(1, "Ann", "a@x.com", 20, "CS"))
    writer.save()
    writer.close()

    reader = DatabaseBackend(temp_db)
    reader.load()
    reader.close()

    assert reader.store.list_all() == [
        Student(1, "Ann", "a@x.com", 20, "CS"),
        Student(2, "Bo", "b@x.com", 21, "EE"),
    ]


def test_save_replaces_previous_contents(db_backend, sample_students):
    db_backend.store.replace_all(sample_students)
    db_backend.save()

    db_backend.store.replace_all([Student(3, "Cy", "c@x.com", 19, "Bio")])
    db_backend.save()
    db_backend.load()

    assert [s.id for s in db_backend.store.list_all()] == [3]


def test_save_empty_store_clears_table(db_backend, sample_students):
    db_backend.store.replace_all(sample_students)
    db_backend.save()

    db_backend.store.clear()
    db_backend.save()
    db_backend.load()

    assert db_backend.store.list_all() == []


def test_duplicate_ids_keep_last_record(db_backend):
    db_backend.store.add(Student(1, "Ann", "a@x.com", 20, "CS"))
    db_backend.store.add(Student(1, "Ann B", "ab@x.com", 22, "Math"))
    db_backend.save()
    db_backend.load()

    assert db_backend.store.list_all() == [Student(1, "Ann B", "ab@x.com", 22, "Math")]


def test_duplicate_email_replaces_earlier_row(db_backend):
    db_backend.store.add(Student(1, "Ann", "same@x.com", 20, "CS"))
    db_backend.store.add(Student(2, "Bo", "same@x.com", 21, "EE"))
    db_backend.save()
    db_backend.load()

    assert [s.id for s in db_backend.store.list_all()] == [2]


def test_failed_save_keeps_previous_rows(db_backend, sample_students):
    db_backend.store.replace_all(sample_students)
    db_backend.save()

    db_backend.store.replace_all([
        Student(3, "Cy", "c@x.com", 19, "Bio"),
        Student(4, None, "d@x.com", 18, "Art"),  # type: ignore[arg-type]
    ])
    with pytest.raises(DatabaseStorageError):
        db_backend.save()

    db_backend.load()
    assert db_backend.store.list_all() == sample_students


def test_find_by_age(db_backend):
    db_backend.store.replace_all([
        Student(1, "Ann", "a@x.com", 20, "CS"),
        Student(2, "Bo", "b@x.com", 21, "EE"),
        Student(3, "Cy", "c@x.com", 20, "Bio"),
    ])
    db_backend.save()

    assert [s.id for s in db_backend.find_by_age(20)] == [1, 3]
    assert db_backend.find_by_age(99) == []


def test_close_is_idempotent_and_reopens_lazily(db_backend, sample_students):
    db_backend.store.replace_all(sample_students)
    db_backend.save()
    db_backend.close()
    db_backend.close()

    db_backend.load()
    assert len(db_backend.store) == 2


def test_display_all_messages(db_backend, sample_students):
    out = io.StringIO()
    db_backend.display_all(out)
    assert out.getvalue() == "No students found in database.\n"

    db_backend.store.replace_all(sample_students)
    out = io.StringIO()
    db_backend.display_all(out)
    assert "--- Student Records (Database) ---" in out.getvalue()


def test_defaults_to_settings_url(temp_db):
    backend = DatabaseBackend()
    assert backend.database_url == temp_db


def test_initialize_wraps_unusable_database_path(tmp_path):
    blocker = tmp_path / "notadir"
    blocker.write_text("plain file", encoding="utf-8")
    backend = DatabaseBackend(f"sqlite:///{blocker / 'students.db'}")

    with pytest.raises(DatabaseStorageError):
        backend.initialize()
    with pytest.raises(DatabaseStorageError):
        backend.load()
    backend.close()
