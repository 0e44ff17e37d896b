"""
Notice Board — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the three failure kinds of the API.
How:   Each exception carries a user-facing message, a short `error`
       description, and an optional context dict. Global exception handlers
       (registered in main.py) turn them into `{message, error}` JSON bodies
       with the matching HTTP status code.
Who:   Raised by the service layer and the database handle.

Exception Hierarchy:
    NoticeBoardError (base)
    ├── ValidationError        → 400 Bad Request
    ├── NotFoundError          → 404 Not Found
    ├── DatabaseError          → 500 Internal Server Error
    └── StoreUnavailableError  → startup failure, process exits
"""

from typing import Any, Dict, Optional


class NoticeBoardError(Exception):
    """
    Base exception for all Notice Board application errors.

    Attributes:
        message:  User-facing description (safe to return in API responses)
        error:    Short description of the underlying failure
        context:  Debug info that is logged but never returned to the client
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        error: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.error = error or message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NoticeBoardError):
    """
    Raised when client input fails validation.

    When:    Missing or blank `title`/`content` on Create or Update.
    HTTP:    400 Bad Request
    """

    def __init__(
        self,
        message: str = "Validation failed",
        error: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, error=error, context=context)


class NotFoundError(NoticeBoardError):
    """
    Raised when a requested notice does not exist.

    When:    GET/PUT/DELETE on an id with no matching document.
    HTTP:    404 Not Found

    The collection returns None for missing documents; the service layer
    converts that None into this exception.
    """

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        error = message
        if resource_id:
            error = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, error=error, context=ctx)


class DatabaseError(NoticeBoardError):
    """
    Raised when a store operation fails unexpectedly.

    When:    Connection lost mid-query, constraint violation, driver errors.
    HTTP:    500 Internal Server Error

    The `error` field carries the failure type name only; SQL text and driver
    messages stay in the server log.
    """

    def __init__(
        self,
        message: str = "Internal Server Error",
        error: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, error=error, context=context)


class StoreUnavailableError(NoticeBoardError):
    """
    Raised at startup when the notice store cannot be reached.

    The lifespan handler lets this propagate so that uvicorn aborts startup
    and the process exits with a non-zero status.
    """

    def __init__(
        self,
        message: str = "Could not connect to the notice store",
        error: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, error=error, context=context)
