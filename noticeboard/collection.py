"""
Notice Board — Notice Collection (Persistence)
================================================

What:  Whole-document operations over the `notices` table.
How:   Wraps one AsyncSession. Every mutation is flushed so that generated
       values (id, timestamps) are available immediately; NoticeService
       commits once the operation has succeeded.
Who:   Used by NoticeService; never by routes directly.

Operations:
    insert(title, content)            → Notice with id and timestamps
    find_all()                        → every Notice, newest created_at first
    find_by_id(id)                    → Notice | None
    update_by_id(id, title, content)  → updated Notice | None
    delete_by_id(id)                  → removed Notice | None
"""

import logging
from datetime import timedelta
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.models.notice import Notice, as_utc, utcnow

logger = logging.getLogger(__name__)


class NoticeCollection:
    """Key-value-like access to stored notices, keyed by UUID."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def insert(self, title: str, content: str) -> Notice:
        now = utcnow()
        notice = Notice(id=uuid4(), title=title, content=content, created_at=now, updated_at=now)
        self.session.add(notice)
        await self.session.flush()
        logger.debug("Inserted notice %s", notice.id)
        return notice

    async def find_all(self) -> List[Notice]:
        # id breaks ties between identical timestamps so the order is stable
        result = await self.session.execute(
            select(Notice).order_by(desc(Notice.created_at), desc(Notice.id))
        )
        return list(result.scalars().all())

    async def find_by_id(self, notice_id: UUID) -> Optional[Notice]:
        result = await self.session.execute(select(Notice).where(Notice.id == notice_id))
        return result.scalar_one_or_none()

    async def update_by_id(self, notice_id: UUID, title: str, content: str) -> Optional[Notice]:
        """
        Replace title and content, refreshing updated_at.

        updated_at always moves strictly forward: if the clock has not
        advanced past the stored value, it is bumped by one microsecond.
        """
        notice = await self.find_by_id(notice_id)
        if notice is None:
            return None

        previous = as_utc(notice.updated_at)
        now = utcnow()
        if now <= previous:
            now = previous + timedelta(microseconds=1)

        notice.title = title
        notice.content = content
        notice.updated_at = now
        await self.session.flush()
        logger.debug("Updated notice %s", notice.id)
        return notice

    async def delete_by_id(self, notice_id: UUID) -> Optional[Notice]:
        """Remove the notice and return it as it was before deletion."""
        notice = await self.find_by_id(notice_id)
        if notice is None:
            return None

        await self.session.delete(notice)
        await self.session.flush()
        logger.debug("Deleted notice %s", notice_id)
        return notice
