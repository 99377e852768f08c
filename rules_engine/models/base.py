"""SQLAlchemy declarative base and shared mixins.

Every table gets `id`, `created_at`, and `updated_at` via the TimestampMixin.
Policy tables also get their effective-dating columns from EffectiveDatedMixin.
"""

from __future__ import annotations

import uuid
from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, String, Text, func, text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


def _new_id() -> str:
    return str(uuid.uuid4())


class TimestampMixin:
    """Mixin adding id (string UUID), created_at, and updated_at to every model.

    Ids are strings because they are copied verbatim into rules snapshots.
    """

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_id,
        server_default=text("gen_random_uuid()::text"),
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class EffectiveDatedMixin:
    """Versioning columns shared by every policy parameter table."""

    benefit_program_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    effective_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, comment="Inclusive; NULL means open-ended")
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    notes: Mapped[str | None] = mapped_column(Text)
