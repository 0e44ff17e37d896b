"""
Notice Board — Notice SQLAlchemy Model
========================================

What:  ORM model representing the `notices` table.
How:   Inherits from the declarative Base; `Database.connect()` creates the
       table on startup via `Base.metadata.create_all`.
Who:   Used by NoticeCollection for every persistence operation.

Table Design:
    - id: UUID assigned on insert, immutable, the only lookup key
    - title / content: trimmed, non-empty text (enforced by the schemas and
      by CHECK constraints)
    - created_at / updated_at: UTC with timezone; created_at never changes,
      updated_at moves forward on every update

    Index on created_at DESC serves the only list query (newest first).
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import CheckConstraint, DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from noticeboard.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """
    Attach UTC to naive datetimes.

    SQLite hands back naive values for DateTime(timezone=True) columns;
    everything stored by this model is UTC, so the zone is re-attached.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Notice(Base):
    """
    A short text notice pinned to the board.

    Lifecycle:
        1. Created by NoticeCollection.insert (id and both timestamps assigned)
        2. Title/content replaced by update_by_id (updated_at refreshed)
        3. Removed by delete_by_id; no soft delete, no history
    """

    __tablename__ = "notices"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )

    title: Mapped[str] = mapped_column(Text, nullable=False)

    content: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    __table_args__ = (
        CheckConstraint("length(title) > 0", name="ck_notices_title_not_empty"),
        CheckConstraint("length(content) > 0", name="ck_notices_content_not_empty"),
        CheckConstraint("created_at <= updated_at", name="ck_notices_timestamps_ordered"),
        Index("idx_notices_created_at", created_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Notice(id={self.id}, title={self.title!r}, created_at='{self.created_at}')>"
