"""
Portfolio Backend — Action Dispatch Helpers
=============================================

What:  Shared plumbing for the resource routers, each of which serves one
       URL and picks the operation from the `action` query parameter:

           GET  /api/skills?action=read&profile_id=1
           POST /api/skills?action=add              (JSON or form body)
           PUT  /api/skills?action=update&id=4
           DELETE /api/skills?action=delete&id=4

How:   require_method() guards write actions, require_param() guards
       mandatory query parameters and read_payload() turns the request
       body into a validated payload model.
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError
from starlette.requests import Request

from app.exceptions import MethodNotAllowedError, ValidationError
# Upper bound for the routers' integer query parameters
from app.schemas.common import DB_INT_MAX  # noqa: F401

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BaseModel)

# Methods accepted by every resource URL
ROUTE_METHODS = ["GET", "POST", "PUT", "DELETE"]

# Methods accepted per write action
ADD_METHODS = frozenset({"POST"})
UPDATE_METHODS = frozenset({"POST", "PUT"})
DELETE_METHODS = frozenset({"POST", "DELETE"})


def require_method(request: Request, allowed: Iterable[str]) -> None:
    allowed = frozenset(allowed)
    if request.method not in allowed:
        raise MethodNotAllowedError(method=request.method, allowed=allowed)


def require_param(value: Any, message: str, field: Optional[str] = None) -> None:
    """Falsy query parameters (missing, 0) count as absent."""
    if not value:
        raise ValidationError(message=message, field=field)


async def _body_fields(request: Request) -> Dict[str, Any]:
    """
    Request body as a dict: a JSON object first, form fields as fallback.

    An empty, non-JSON or non-object body falls through to the form
    parser, which returns nothing for content types it does not handle.
    """
    body = await request.body()
    if body:
        try:
            data = json.loads(body)
        except ValueError:
            data = None
        if isinstance(data, dict) and data:
            return data

    form = await request.form()
    return {key: value for key, value in form.items() if isinstance(value, str)}


async def read_payload(request: Request, schema: Type[P]) -> P:
    """
    Parse the request body into `schema`.

    Type errors (e.g. "abc" for an integer field) become a ValidationError
    naming the offending fields.
    """
    fields = await _body_fields(request)
    try:
        return schema.model_validate(fields)
    except PydanticValidationError as e:
        invalid = sorted({str(err["loc"][0]) for err in e.errors() if err.get("loc")})
        logger.info("Rejected %s payload: invalid fields %s", schema.__name__, invalid)
        raise ValidationError(
            message=f"Invalid value for: {', '.join(invalid)}",
            field=invalid[0] if invalid else None,
            context={"fields": invalid},
        ) from e
