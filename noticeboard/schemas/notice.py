"""
Notice Board — Pydantic Request/Response Schemas
==================================================

What:  Pydantic models defining the API contract between client and service.
How:   FastAPI validates request bodies against the *Request models and
       serializes responses through the *Response models. The terminal
       client parses the same response models, so both sides share one
       contract.

Wire format:
    Field names are camelCase on the wire (createdAt, updatedAt) and
    snake_case in Python. Responses are serialized by alias.
"""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model: camelCase aliases, population by either name."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# ══════════════════════════════════════════════════════════════════════════
# Request Models: what the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoticeWrite(CamelModel):
    """
    Body of POST / and PUT /{id}.

    Both fields are required and trimmed; a value that is empty after
    trimming is rejected. Create and Update share this check.
    """

    title: str = Field(description="Notice title (non-empty after trimming)")
    content: str = Field(description="Notice body (non-empty after trimming)")

    @field_validator("title", "content", mode="before")
    @classmethod
    def strip_and_require(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} is required")
        if not isinstance(v, str):
            raise ValueError(f"{info.field_name} must be a string")
        v = v.strip()
        if not v:
            raise ValueError(f"{info.field_name} must not be empty")
        return v


class NoticeCreateRequest(NoticeWrite):
    """Body of POST /."""


class NoticeUpdateRequest(NoticeWrite):
    """Body of PUT /{id}."""


# ══════════════════════════════════════════════════════════════════════════
# Response Models: what the API returns
# ══════════════════════════════════════════════════════════════════════════


class NoticeResponse(CamelModel):
    """Full representation of a stored notice."""

    id: uuid.UUID = Field(description="Unique notice identifier (UUID)")
    title: str = Field(description="Notice title")
    content: str = Field(description="Notice body")
    created_at: datetime = Field(description="When the notice was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the notice was last updated (UTC ISO 8601)")


class NoticeMutationResponse(BaseModel):
    """
    Envelope returned by Create, Update and Delete.

    `note` is the notice after the change (or, for Delete, as it was just
    before removal).
    """

    message: str = Field(description="Human-readable success message")
    note: NoticeResponse = Field(description="The affected notice")


# ══════════════════════════════════════════════════════════════════════════
# Error / Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Standardized error body for every failed request.

    Example:
        {
            "message": "Note not found",
            "error": "Note with ID '3f0c…' was not found",
            "request_id": "a1b2c3d4"
        }
    """

    message: str = Field(description="Human-readable error description")
    error: str = Field(description="Description of the underlying failure")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response showing service and store status."""

    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
