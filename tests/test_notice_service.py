"""
Notice Board — Notice Service Unit Tests
==========================================

What:  Tests for NoticeService result and error translation.
How:   Uses mock DB sessions (no real DB).

What we test:
    ✅ Found / listed notices become response schemas
    ✅ Missing notices and malformed ids raise NotFoundError
    ✅ Store failures are wrapped in DatabaseError
    ✅ Success messages of the mutation envelope
    ✅ Writes are committed; a failed commit is a DatabaseError
"""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest
from sqlalchemy.exc import OperationalError

from noticeboard.exceptions import DatabaseError, NotFoundError
from noticeboard.schemas.notice import NoticeCreateRequest, NoticeUpdateRequest
from noticeboard.services.notice_service import NoticeService, parse_notice_id


def _result(one=None, many=None):
    result = MagicMock()
    result.scalar_one_or_none.return_value = one
    result.scalars.return_value.all.return_value = many or []
    return result


class TestParseNoticeId:

    def test_valid_uuid(self):
        key = uuid4()
        assert parse_notice_id(str(key)) == key

    def test_malformed_id_is_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            parse_notice_id("not-a-uuid")
        assert exc_info.value.message == "Note not found"
        assert "not-a-uuid" in exc_info.value.error


class TestNoticeServiceRead:

    def setup_method(self):
        self.service = NoticeService()

    @pytest.mark.asyncio
    async def test_get_notice_found(self, mock_db_session, sample_notice):
        mock_db_session.execute.return_value = _result(one=sample_notice)

        result = await self.service.get_notice(mock_db_session, str(sample_notice.id))

        assert result.id == sample_notice.id
        assert result.title == "Meeting"
        assert result.created_at == result.updated_at

    @pytest.mark.asyncio
    async def test_get_notice_not_found(self, mock_db_session):
        mock_db_session.execute.return_value = _result(one=None)

        with pytest.raises(NotFoundError):
            await self.service.get_notice(mock_db_session, str(uuid4()))

    @pytest.mark.asyncio
    async def test_get_malformed_id_never_queries(self, mock_db_session):
        with pytest.raises(NotFoundError):
            await self.service.get_notice(mock_db_session, "12345")
        mock_db_session.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_notices_empty(self, mock_db_session):
        mock_db_session.execute.return_value = _result(many=[])

        assert await self.service.list_notices(mock_db_session) == []

    @pytest.mark.asyncio
    async def test_list_notices(self, mock_db_session, sample_notice):
        mock_db_session.execute.return_value = _result(many=[sample_notice])

        result = await self.service.list_notices(mock_db_session)

        assert [n.id for n in result] == [sample_notice.id]

    @pytest.mark.asyncio
    async def test_list_store_failure_becomes_database_error(self, mock_db_session):
        mock_db_session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused"))
        )

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.list_notices(mock_db_session)

        assert exc_info.value.message == "Internal Server Error"
        assert exc_info.value.error == "OperationalError during list"
        assert exc_info.value.context["operation"] == "list"


class TestNoticeServiceWrite:

    def setup_method(self):
        self.service = NoticeService()

    @pytest.mark.asyncio
    async def test_create_notice(self, mock_db_session):
        payload = NoticeCreateRequest(title="  Meeting ", content="10am standup")

        result = await self.service.create_notice(mock_db_session, payload)

        assert result.message == "Note created successfully"
        assert result.note.title == "Meeting"
        assert result.note.created_at == result.note.updated_at
        mock_db_session.add.assert_called_once()
        mock_db_session.flush.assert_awaited_once()
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_flush_failure(self, mock_db_session):
        mock_db_session.flush = AsyncMock(side_effect=RuntimeError("boom"))
        payload = NoticeCreateRequest(title="Meeting", content="10am standup")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_notice(mock_db_session, payload)
        assert exc_info.value.error == "RuntimeError during create"

    @pytest.mark.asyncio
    async def test_create_commit_failure(self, mock_db_session):
        mock_db_session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))
        )
        payload = NoticeCreateRequest(title="Meeting", content="10am standup")

        with pytest.raises(DatabaseError) as exc_info:
            await self.service.create_notice(mock_db_session, payload)
        assert exc_info.value.error == "OperationalError during create"

    @pytest.mark.asyncio
    async def test_update_notice(self, mock_db_session, sample_notice):
        mock_db_session.execute.return_value = _result(one=sample_notice)
        previous = sample_notice.updated_at
        payload = NoticeUpdateRequest(title="Meeting", content="10am standup (moved to 11)")

        result = await self.service.update_notice(mock_db_session, str(sample_notice.id), payload)

        assert result.message == "Note updated successfully"
        assert result.note.content == "10am standup (moved to 11)"
        assert result.note.updated_at > previous
        assert result.note.created_at == previous

    @pytest.mark.asyncio
    async def test_update_missing_notice(self, mock_db_session):
        mock_db_session.execute.return_value = _result(one=None)
        payload = NoticeUpdateRequest(title="a", content="b")

        with pytest.raises(NotFoundError):
            await self.service.update_notice(mock_db_session, str(uuid4()), payload)
        mock_db_session.flush.assert_not_awaited()
        mock_db_session.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_notice_returns_removed(self, mock_db_session, sample_notice):
        mock_db_session.execute.return_value = _result(one=sample_notice)

        result = await self.service.delete_notice(mock_db_session, str(sample_notice.id))

        assert result.message == "Note deleted successfully"
        assert result.note.id == sample_notice.id
        mock_db_session.delete.assert_awaited_once_with(sample_notice)
        mock_db_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_notice(self, mock_db_session):
        mock_db_session.execute.return_value = _result(one=None)

        with pytest.raises(NotFoundError):
            await self.service.delete_notice(mock_db_session, str(uuid4()))
        mock_db_session.delete.assert_not_awaited()
        mock_db_session.commit.assert_not_awaited()
