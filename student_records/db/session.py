"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from student_records.core.config import get_settings

Base = declarative_base()


def _resolve_url(url: Optional[str]) -> str:
    value = (url or get_settings().database_url or "").strip()
    if not value:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return value


@lru_cache
def get_engine(url: Optional[str] = None) -> Engine:
    resolved = _resolve_url(url)
    parsed = make_url(resolved)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(resolved, future=True, pool_pre_ping=True)


@lru_cache
def _get_sessionmaker(url: Optional[str] = None):
    return sessionmaker(bind=get_engine(url), autoflush=False, autocommit=False, future=True)


def open_session(url: Optional[str] = None) -> Session:
    """Return a new session the caller is responsible for closing."""
    return _get_sessionmaker(url)()

