"""
Portfolio Backend — Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for the error scenarios of the
       resource endpoints.
How:   Each exception carries a user-facing message and an optional
       context dict. Global exception handlers (registered in main.py)
       translate them into the failure envelope
       {"success": false, "message": ...} with a matching HTTP status.
Who:   Raised by services and routers; caught by global handlers.

Exception Hierarchy:
    PortfolioError (base)
    ├── ValidationError        → 400 Bad Request
    ├── InvalidActionError     → 400 Bad Request (unknown ?action=)
    ├── MethodNotAllowedError  → 405 Method Not Allowed
    ├── NotFoundError          → 404 Not Found
    └── DatabaseError          → 500 Internal Server Error
"""

from typing import Any, Dict, Iterable, Optional


class PortfolioError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (returned in the envelope)
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(PortfolioError):
    """
    Raised when client input fails validation.

    When:    Missing required fields, proficiency out of range, malformed
             email, unknown contact status or hobby category.
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidActionError(PortfolioError):
    """
    Raised when the `action` query parameter names no known operation.

    The message lists every action the resource accepts, e.g.
    "Invalid action. Use: read, by_type, high_proficiency, add, update, delete".
    """

    status_code = 400
    error_code = "invalid_action"

    def __init__(self, action: str, allowed: Iterable[str]):
        allowed = list(allowed)
        super().__init__(
            message=f"Invalid action. Use: {', '.join(allowed)}",
            context={"action": action, "allowed": allowed},
        )
        self.action = action


class MethodNotAllowedError(PortfolioError):
    """Raised when a write action arrives with the wrong HTTP method."""

    status_code = 405
    error_code = "method_not_allowed"

    def __init__(self, method: str, allowed: Iterable[str]):
        allowed = sorted(allowed)
        super().__init__(
            message="Invalid request method",
            context={"method": method, "allowed": allowed},
        )
        self.allowed = allowed


class NotFoundError(PortfolioError):
    """
    Raised when a requested row does not exist.

    SQLAlchemy returns None (or a zero rowcount) for missing rows; the
    service layer converts that into this exception.
    Message format: "<Resource> not found", e.g. "Education record not found".
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)


class DatabaseError(PortfolioError):
    """
    Raised when a statement fails in the database.

    The message returned to the client names the operation only
    ("Error fetching skills"); driver errors, SQL text and constraint
    names stay in the server log.
    """

    status_code = 500
    error_code = "database_error"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
