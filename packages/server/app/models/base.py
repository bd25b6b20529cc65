"""Base mixins for SQLModel tables."""

from datetime import datetime, timedelta, timezone
from typing import Optional

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

# Smallest step the stored timestamps can resolve
TICK = timedelta(microseconds=1)


def _utcnow() -> datetime:
    # Naive UTC: SQLite drops tzinfo on the way back out
    return datetime.now(timezone.utc).replace(tzinfo=None)


def next_timestamp(previous: Optional[datetime] = None) -> datetime:
    """Current UTC time, nudged forward so it is strictly after ``previous``."""
    now = _utcnow()
    if previous is not None and now <= previous:
        return previous + TICK
    return now


class TimestampMixin(SQLModel):
    created_at: datetime = Field(
        default_factory=_utcnow,
        nullable=False,
        sa_type=sa.DateTime(),
    )
    updated_at: datetime = Field(
        default_factory=_utcnow,
        nullable=False,
        sa_type=sa.DateTime(),
    )
