"""
SQLAlchemy declarative base for models.
"""

import enum
from datetime import datetime, timezone
from typing import Type

from sqlalchemy import Column, DateTime, Enum as SQLEnum, func
from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


def utcnow() -> datetime:
    """Current UTC time as a naive datetime, the form every timestamp column stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class TimestampMixin:
    """created_at / updated_at columns, filled from Python so SQLite keeps one text format."""

    created_at = Column(DateTime, nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(
        DateTime, nullable=False, default=utcnow, server_default=func.now(), onupdate=utcnow
    )


def enum_column(enum_cls: Type[enum.Enum], name: str) -> SQLEnum:
    """
    Column type for a closed set of string values.

    Stores the enum *values* (``round-r1``, ``in_progress``) rather than member
    names, as a named enum type on PostgreSQL and a CHECK constraint elsewhere.
    """
    return SQLEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [member.value for member in members],
        create_constraint=True,
        validate_strings=True,
    )
