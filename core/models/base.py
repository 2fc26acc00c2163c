"""Base model and mixins for all SQLAlchemy models.

Provides:
- Base: Declarative base class for all models
- RecordMixin: Adds an autoincrement primary key and an insert timestamp

The autoincrement id doubles as insertion order, which is how carts
replay their lines.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all retail models."""
    pass


class RecordMixin:
    """Mixin providing a surrogate key and audit column.

    Adds:
    - id: Integer primary key (autoincrement, monotonic per table)
    - created_at: Timestamp set on insert
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
