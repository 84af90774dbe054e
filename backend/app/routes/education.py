"""
Portfolio Backend — Education Route Handler
=============================================

What:  /api/education, dispatched by ?action=
       read    GET   ?id=  | ?profile_id=
       add     POST  body: profile_id, institution, degree, field,
                           start_year, end_year, description, display_order
       update  POST/PUT    ?id=
       delete  POST/DELETE ?id=
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
from app.schemas.education import EducationCreate, EducationUpdate
from app.services.education_service import education_service

router = APIRouter(prefix=settings.api_prefix, tags=["Education"])

EDUCATION_ACTIONS = ("read", "add", "update", "delete")


@router.api_route(
    "/education",
    methods=ROUTE_METHODS,
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Invalid input or action", "model": ErrorResponse},
        404: {"description": "Education record not found", "model": ErrorResponse},
        405: {"description": "Wrong method for action", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Education: " + ", ".join(EDUCATION_ACTIONS),
)
async def education(
    request: Request,
    response: Response,
    action: str = Query(default="read", description="Operation to perform"),
    item_id: Optional[int] = Query(
        default=None, alias="id", ge=0, le=DB_INT_MAX, description="Education record ID"
    ),
    profile_id: Optional[int] = Query(
        default=None, ge=0, le=DB_INT_MAX, description="Owning profile"
    ),
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    if action == "read":
        if item_id:
            return await education_service.get(db, item_id)
        return await education_service.list_all(db, profile_id=profile_id)

    if action == "add":
        require_method(request, ADD_METHODS)
        payload = await read_payload(request, EducationCreate)
        result = await education_service.create(db, payload)
        response.status_code = 201
        return result

    if action == "update":
        require_method(request, UPDATE_METHODS)
        require_param(item_id, "Education ID is required", "id")
        payload = await read_payload(request, EducationUpdate)
        return await education_service.update(db, item_id, payload)

    if action == "delete":
        require_method(request, DELETE_METHODS)
        require_param(item_id, "Education ID is required", "id")
        return await education_service.delete(db, item_id)

    raise InvalidActionError(action, EDUCATION_ACTIONS)
