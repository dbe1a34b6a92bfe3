"""SQLAlchemy models mirroring the student record."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class StudentRow(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False)
    age = Column(Integer, nullable=False)
    course = Column(String(100), nullable=False)
