"""
Notice Board — Notice Service (Business Logic)
================================================

What:  The five notice operations: list, get, create, update, delete.
How:   Each call wraps the request's session in a NoticeCollection, runs one
       collection operation, commits writes before anything is returned,
       and converts the result into response schemas.
Who:   Called by the route handlers in routes/notices.py.

Error Handling Strategy:
    - Collection returns None       → NotFoundError   (404)
    - Malformed id (not a UUID)     → NotFoundError   (404); it cannot match
    - Anything else from the store  → DatabaseError   (500), details logged
      (a failed commit included, so no write is reported before it is durable)
    Our own exceptions propagate unchanged.

NoticeService is stateless: the session arrives with every call, so one
singleton instance serves all requests.
"""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.collection import NoticeCollection
from noticeboard.exceptions import DatabaseError, NoticeBoardError, NotFoundError
from noticeboard.models.notice import Notice, as_utc
from noticeboard.schemas.notice import (
    NoticeCreateRequest,
    NoticeMutationResponse,
    NoticeResponse,
    NoticeUpdateRequest,
)

logger = logging.getLogger(__name__)


def to_response(notice: Notice) -> NoticeResponse:
    return NoticeResponse(
        id=notice.id,
        title=notice.title,
        content=notice.content,
        created_at=as_utc(notice.created_at),
        updated_at=as_utc(notice.updated_at),
    )


def parse_notice_id(notice_id: str) -> UUID:
    """Parse a path id; ids that are not UUIDs can never match a notice."""
    try:
        return UUID(str(notice_id))
    except ValueError:
        raise NotFoundError(resource="Note", resource_id=str(notice_id))


class NoticeService:
    """
    Business logic layer for notice operations.

    Every public method either returns a response schema or raises one of
    NotFoundError / DatabaseError. Validation of title/content has already
    happened in the request schema by the time these methods run.
    """

    def _store_failure(self, operation: str, e: Exception, **context) -> DatabaseError:
        logger.error("Database error during %s: %s", operation, str(e), exc_info=True)
        return DatabaseError(
            error=f"{type(e).__name__} during {operation}",
            context={"operation": operation, "error_type": type(e).__name__, **context},
        )

    async def list_notices(self, db: AsyncSession) -> List[NoticeResponse]:
        """All notices, newest first."""
        try:
            notices = await NoticeCollection(db).find_all()
        except NoticeBoardError:
            raise
        except Exception as e:
            raise self._store_failure("list", e)
        return [to_response(n) for n in notices]

    async def get_notice(self, db: AsyncSession, notice_id: str) -> NoticeResponse:
        key = parse_notice_id(notice_id)
        try:
            notice = await NoticeCollection(db).find_by_id(key)
        except NoticeBoardError:
            raise
        except Exception as e:
            raise self._store_failure("get", e, notice_id=str(key))

        if notice is None:
            raise NotFoundError(resource="Note", resource_id=str(key))
        return to_response(notice)

    async def create_notice(
        self, db: AsyncSession, payload: NoticeCreateRequest
    ) -> NoticeMutationResponse:
        try:
            notice = await NoticeCollection(db).insert(payload.title, payload.content)
            await db.commit()
        except NoticeBoardError:
            raise
        except Exception as e:
            raise self._store_failure("create", e)

        logger.info("Notice created: %s", notice.id)
        return NoticeMutationResponse(
            message="Note created successfully",
            note=to_response(notice),
        )

    async def update_notice(
        self, db: AsyncSession, notice_id: str, payload: NoticeUpdateRequest
    ) -> NoticeMutationResponse:
        key = parse_notice_id(notice_id)
        try:
            notice = await NoticeCollection(db).update_by_id(key, payload.title, payload.content)
            if notice is not None:
                await db.commit()
        except NoticeBoardError:
            raise
        except Exception as e:
            raise self._store_failure("update", e, notice_id=str(key))

        if notice is None:
            raise NotFoundError(resource="Note", resource_id=str(key))

        logger.info("Notice updated: %s", notice.id)
        return NoticeMutationResponse(
            message="Note updated successfully",
            note=to_response(notice),
        )

    async def delete_notice(self, db: AsyncSession, notice_id: str) -> NoticeMutationResponse:
        key = parse_notice_id(notice_id)
        try:
            notice = await NoticeCollection(db).delete_by_id(key)
            if notice is not None:
                await db.commit()
        except NoticeBoardError:
            raise
        except Exception as e:
            raise self._store_failure("delete", e, notice_id=str(key))

        if notice is None:
            raise NotFoundError(resource="Note", resource_id=str(key))

        logger.info("Notice deleted: %s", key)
        return NoticeMutationResponse(
            message="Note deleted successfully",
            note=to_response(notice),
        )


# ── Singleton Instance ────────────────────────────────────────────────────
notice_service = NoticeService()
