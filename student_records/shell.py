"""
Interactive menu over the file and database backends.

Input and output handles are passed in, so the shell can be driven by a
script of answers in tests.
"""

from __future__ import annotations

import logging
import sys
from typing import Callable, Optional, TextIO

from student_records.core.errors import StorageError
from student_records.domain.student import Student
from student_records.repositories.file_storage import FileBackend
from student_records.repositories.sql_repository import DatabaseBackend
from student_records.services.sync_service import sync_file_to_database

logger = logging.getLogger(__name__)

MENU = (
    "",
    "=== Student Management System ===",
    "1. Add Student",
    "2. Display All Students (File)",
    "3. Display All Students (Database)",
    "4. Find Student by ID",
    "5. Remove Student",
    "6. Save to File",
    "7. Save to Database",
    "8. Load from File",
    "9. Load from Database",
    "10. Sync File to Database",
    "11. Exit",
)
EXIT_CHOICE = 11


class Shell:
    def __init__(
        self,
        file_backend: FileBackend,
        db_backend: DatabaseBackend,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self.file_backend = file_backend
        self.db_backend = db_backend
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_student,
            2: lambda: self.file_backend.display_all(self.stdout),
            3: lambda: self.db_backend.display_all(self.stdout),
            4: self.find_student,
            5: self.remove_student,
            6: self.save_file,
            7: self.save_database,
            8: self.load_file,
            9: self.load_database,
            10: self.sync,
        }

    # -------------------------------------- io --------------------------------------
    def _print(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def _read_line(self, prompt: str) -> str:
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError
        return line.rstrip("\r\n")

    def _read_int(self, prompt: str) -> int:
        while True:
            raw = self._read_line(prompt).strip()
            try:
                return int(raw)
            except ValueError:
                self._print("Invalid input. Please enter a number.")

    # -------------------------------------- lifecycle --------------------------------------
    def initialize(self) -> bool:
        """Prepare the table and load both backends. Returns False if anything failed."""
        try:
            self.db_backend.initialize()
            self.file_backend.load()
            self.db_backend.load()
        except Exception as exc:
            logger.debug("initialization failed", exc_info=True)
            self._print(f"Error initializing system: {exc}")
            return False
        self._print("System initialized successfully!")
        return True

    def run(self) -> None:
        self.initialize()
        try:
            while self._step():
                pass
        finally:
            self.db_backend.close()

    def _step(self) -> bool:
        """Show the menu and run one choice. Returns False when the shell should stop."""
        for line in MENU:
            self._print(line)
        try:
            raw = self._read_line("Choose an option: ").strip()
        except EOFError:
            self._print()
            self._print("Goodbye!")
            return False

        try:
            choice = int(raw)
        except ValueError:
            self._print("Invalid input. Please enter a number.")
            return True

        if choice == EXIT_CHOICE:
            self._print("Goodbye!")
            return False
        action = self._actions.get(choice)
        if action is None:
            self._print("Invalid option. Please try again.")
            return True

        try:
            action()
        except EOFError:
            self._print()
            self._print("Goodbye!")
            return False
        except StorageError as exc:
            self._print(f"Error: {exc}")
        except Exception as exc:
            logger.debug("menu action %s failed", choice, exc_info=True)
            self._print(f"Error: {exc}")
        return True

    # -------------------------------------- actions --------------------------------------
    def add_student(self) -> None:
        student_id = self._read_int("Enter Student ID: ")
        name = self._read_line("Enter Name: ")
        email = self._read_line("Enter Email: ")
        age = self._read_int("Enter Age: ")
        course = self._read_line("Enter Course: ")

        student = Student(id=student_id, name=name, email=email, age=age, course=course)
        self.file_backend.store.add(student)
        self.db_backend.store.add(student)
        self._print("Student added successfully!")

    def find_student(self) -> None:
        student_id = self._read_int("Enter Student ID to find: ")
        student = self.file_backend.store.find_by_id(student_id)
        if student is not None:
            self._print(f"Student found: {student}")
        else:
            self._print("Student not found.")

    def remove_student(self) -> None:
        student_id = self._read_int("Enter Student ID to remove: ")
        if self.file_backend.store.remove_by_id(student_id):
            self.db_backend.store.remove_by_id(student_id)
            self._print("Student removed successfully.")
        else:
            self._print("Student not found.")

    def save_file(self) -> None:
        self.file_backend.save()
        self._print(f"Data saved to {self.file_backend.text_path} and {self.file_backend.snapshot_path}")

    def save_database(self) -> None:
        self.db_backend.save()
        self._print("Data saved to database successfully.")

    def load_file(self) -> None:
        self.file_backend.load()
        self._print(f"Loaded {len(self.file_backend.store)} students from file.")

    def load_database(self) -> None:
        self.db_backend.load()
        self._print("Data loaded from database successfully.")

    def sync(self) -> None:
        try:
            count = sync_file_to_database(self.file_backend, self.db_backend)
        except StorageError as exc:
            self._print(f"Error syncing to database: {exc}")
            return
        self._print(f"File data synchronized to database ({count} students).")
