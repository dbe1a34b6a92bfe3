"""
Core utilities shared across the student records package.

This package hosts configuration helpers (env vars, paths) and the exception
hierarchy used by the storage backends and the shell.
"""
