"""
Portfolio Backend — Profile Route Handler
===========================================

What:  /api/profile, dispatched by ?action=
       read      GET   ?id=  (all profiles when omitted)
       complete  GET   ?id=  (required): profile with joined counts
       add       POST  body: name (required), bio, role, ...
       update    POST/PUT    ?id=
       delete    POST/DELETE ?id=  (cascades to the profile's child rows)
Who:   The front-end loads ?action=read&id=<PROFILE_ID> to fill the hero,
       about and contact sections.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.database import get_db_session
from app.exceptions import InvalidActionError
from app.routes.dispatch import (
    ADD_METHODS,
    DB_INT_MAX,
    DELETE_METHODS,
    ROUTE_METHODS,
    UPDATE_METHODS,
    read_payload,
    require_method,
    require_param,
)
from app.schemas.common import Envelope, ErrorResponse
from app.schemas.profile import ProfileCreate, ProfileUpdate
from app.services.profile_service import profile_service

router = APIRouter(prefix=settings.api_prefix, tags=["Profile"])

PROFILE_ACTIONS = ("read", "add", "update", "delete", "complete")


@router.api_route(
    "/profile",
    methods=ROUTE_METHODS,
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Invalid input or action", "model": ErrorResponse},
        404: {"description": "Profile not found", "model": ErrorResponse},
        405: {"description": "Wrong method for action", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Profile: " + ", ".join(PROFILE_ACTIONS),
)
async def profile(
    request: Request,
    response: Response,
    action: str = Query(default="read", description="Operation to perform"),
    item_id: Optional[int] = Query(
        default=None, alias="id", ge=0, le=DB_INT_MAX, description="Profile ID"
    ),
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    if action == "read":
        if item_id:
            return await profile_service.get(db, item_id)
        return await profile_service.list_all(db)

    if action == "complete":
        require_param(item_id, "Profile ID is required", "id")
        return await profile_service.get_complete(db, item_id)

    if action == "add":
        require_method(request, ADD_METHODS)
        payload = await read_payload(request, ProfileCreate)
        result = await profile_service.create(db, payload)
        response.status_code = 201
        return result

    if action == "update":
        require_method(request, UPDATE_METHODS)
        require_param(item_id, "Profile ID is required", "id")
        payload = await read_payload(request, ProfileUpdate)
        return await profile_service.update(db, item_id, payload)

    if action == "delete":
        require_method(request, DELETE_METHODS)
        require_param(item_id, "Profile ID is required", "id")
        return await profile_service.delete(db, item_id)

    raise InvalidActionError(action, PROFILE_ACTIONS)
