"""Domain types shared by the storage backends and the shell."""

from .student import Student

__all__ = ["Student"]
