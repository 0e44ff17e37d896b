"""
Notice Board — Notice Route Handlers
======================================

What:  The five REST operations over notices.
How:   Extracts path/body data, delegates to NoticeService, returns JSON.
Who:   Called by the terminal board through NoticeApiClient.

Route Inventory (relative to settings.api_prefix, default /api/notes):
    GET    /       → 200, array of notices (newest first)
    GET    /{id}   → 200, notice                  | 404
    POST   /       → 201, {message, note}         | 400
    PUT    /{id}   → 200, {message, note}         | 400 | 404
    DELETE /{id}   → 200, {message, note}         | 404
    Any store failure → 500 {message, error}
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from noticeboard.database import get_db_session
from noticeboard.schemas.notice import (
    ErrorResponse,
    NoticeCreateRequest,
    NoticeMutationResponse,
    NoticeResponse,
    NoticeUpdateRequest,
)
from noticeboard.services.notice_service import notice_service

logger = logging.getLogger(__name__)


def build_router(prefix: str) -> APIRouter:
    """
    Build the notice router mounted under `prefix`.

    A factory rather than a module-level router so that the prefix comes
    from the Settings instance the application was created with.
    """
    router = APIRouter(prefix=prefix, tags=["Notices"])

    # Collection routes answer both with and without the trailing slash
    @router.get("/", response_model=List[NoticeResponse], include_in_schema=False)
    @router.get(
        "",
        response_model=List[NoticeResponse],
        responses={500: {"description": "Store failure", "model": ErrorResponse}},
        summary="List all notices, newest first",
    )
    async def list_notices(db: AsyncSession = Depends(get_db_session)) -> List[NoticeResponse]:
        return await notice_service.list_notices(db)

    @router.get(
        "/{notice_id}",
        response_model=NoticeResponse,
        responses={
            404: {"description": "Notice not found", "model": ErrorResponse},
            500: {"description": "Store failure", "model": ErrorResponse},
        },
        summary="Get a single notice by ID",
    )
    async def get_notice(
        notice_id: str,
        db: AsyncSession = Depends(get_db_session),
    ) -> NoticeResponse:
        return await notice_service.get_notice(db, notice_id)

    @router.post(
        "/",
        status_code=status.HTTP_201_CREATED,
        response_model=NoticeMutationResponse,
        include_in_schema=False,
    )
    @router.post(
        "",
        status_code=status.HTTP_201_CREATED,
        response_model=NoticeMutationResponse,
        responses={
            400: {"description": "Missing or empty title/content", "model": ErrorResponse},
            500: {"description": "Store failure", "model": ErrorResponse},
        },
        summary="Create a notice",
    )
    async def create_notice(
        payload: NoticeCreateRequest,
        db: AsyncSession = Depends(get_db_session),
    ) -> NoticeMutationResponse:
        return await notice_service.create_notice(db, payload)

    @router.put(
        "/{notice_id}",
        response_model=NoticeMutationResponse,
        responses={
            400: {"description": "Missing or empty title/content", "model": ErrorResponse},
            404: {"description": "Notice not found", "model": ErrorResponse},
            500: {"description": "Store failure", "model": ErrorResponse},
        },
        summary="Replace a notice's title and content",
    )
    async def update_notice(
        notice_id: str,
        payload: NoticeUpdateRequest,
        db: AsyncSession = Depends(get_db_session),
    ) -> NoticeMutationResponse:
        return await notice_service.update_notice(db, notice_id, payload)

    @router.delete(
        "/{notice_id}",
        response_model=NoticeMutationResponse,
        responses={
            404: {"description": "Notice not found", "model": ErrorResponse},
            500: {"description": "Store failure", "model": ErrorResponse},
        },
        summary="Delete a notice",
    )
    async def delete_notice(
        notice_id: str,
        db: AsyncSession = Depends(get_db_session),
    ) -> NoticeMutationResponse:
        return await notice_service.delete_notice(db, notice_id)

    return router
