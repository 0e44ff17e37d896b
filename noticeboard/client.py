"""
Notice Board — API Client
===========================

What:  Thin async HTTP client the terminal board uses to reach the API.
How:   One httpx.AsyncClient with a fixed base URL. Four verbs (get, post,
       put, delete) send and receive JSON; typed wrappers turn the JSON into
       the same response schemas the API serializes.
Who:   noticeboard.ui views, through `python -m noticeboard board`.

Every call is a fresh round trip: no retry, no caching, no deduplication,
and the transport's default timeout.

Usage:
    async with NoticeApiClient("http://localhost:5000/api/notes") as api:
        notices = await api.list_notices()
"""

import logging
from typing import Any, List, Optional

import httpx
from pydantic import ValidationError as SchemaError

from noticeboard.schemas.notice import NoticeMutationResponse, NoticeResponse

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    A call to the notice API failed.

    Attributes:
        status_code: HTTP status, or None when no usable response came back
        message:     The `message` field of the error body
        error:       The `error` field of the error body
    """

    def __init__(self, status_code: Optional[int], message: str, error: Optional[str] = None):
        self.status_code = status_code
        self.message = message
        self.error = error or message
        super().__init__(message)

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, message={self.message!r})"


class NoticeApiClient:
    """Async client for the notice REST API."""

    def __init__(self, base_url: str, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url
        self._client = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            headers={"accept": "application/json"},
        )

    async def __aenter__(self) -> "NoticeApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    # ── Verbs ─────────────────────────────────────────────────────────────

    async def get(self, path: str = "") -> Any:
        """Without a path: the whole list. With an id: one notice."""
        return await self._request("GET", path)

    async def post(self, payload: dict) -> Any:
        return await self._request("POST", "", json=payload)

    async def put(self, path: str, payload: dict) -> Any:
        return await self._request("PUT", path, json=payload)

    async def delete(self, path: str) -> Any:
        return await self._request("DELETE", path)

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> Any:
        logger.debug("%s %s/%s", method, self.base_url, path)
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, path or "/", type(e).__name__)
            raise ApiError(None, "Could not reach the notice service", str(e) or type(e).__name__) from e

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            message = body.get("message") or response.reason_phrase
            raise ApiError(response.status_code, message, body.get("error"))

        try:
            return response.json()
        except ValueError as e:
            raise ApiError(None, "Invalid response from the notice service", str(e)) from e

    # ── Typed wrappers ────────────────────────────────────────────────────

    async def list_notices(self) -> List[NoticeResponse]:
        data = await self.get()
        if not isinstance(data, list):
            raise ApiError(None, "Invalid response from the notice service", "expected a list")
        return [_parse(NoticeResponse, item) for item in data]

    async def get_notice(self, notice_id: str) -> NoticeResponse:
        return _parse(NoticeResponse, await self.get(str(notice_id)))

    async def create_notice(self, title: str, content: str) -> NoticeResponse:
        data = await self.post({"title": title, "content": content})
        return _parse(NoticeMutationResponse, data).note

    async def update_notice(self, notice_id: str, title: str, content: str) -> NoticeResponse:
        data = await self.put(str(notice_id), {"title": title, "content": content})
        return _parse(NoticeMutationResponse, data).note

    async def delete_notice(self, notice_id: str) -> NoticeResponse:
        """Returns the notice as it was just before deletion."""
        return _parse(NoticeMutationResponse, await self.delete(str(notice_id))).note


def _parse(model, data):
    try:
        return model.model_validate(data)
    except SchemaError as e:
        raise ApiError(None, "Invalid response from the notice service", str(e)) from e
