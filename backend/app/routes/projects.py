"""
Portfolio Backend — Projects Route Handler
============================================

What:  /api/projects, dispatched by ?action=
       read    GET   ?id=  | ?profile_id=
       search  GET   ?profile_id=&tag=   (both required)
       add     POST  body: profile_id, title, description, link, image, tags, display_order
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
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services.project_service import project_service

router = APIRouter(prefix=settings.api_prefix, tags=["Projects"])

PROJECT_ACTIONS = ("read", "search", "add", "update", "delete")


@router.api_route(
    "/projects",
    methods=ROUTE_METHODS,
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Invalid input or action", "model": ErrorResponse},
        404: {"description": "Project not found", "model": ErrorResponse},
        405: {"description": "Wrong method for action", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Projects: " + ", ".join(PROJECT_ACTIONS),
)
async def projects(
    request: Request,
    response: Response,
    action: str = Query(default="read", description="Operation to perform"),
    item_id: Optional[int] = Query(
        default=None, alias="id", ge=0, le=DB_INT_MAX, description="Project ID"
    ),
    profile_id: Optional[int] = Query(
        default=None, ge=0, le=DB_INT_MAX, description="Owning profile"
    ),
    tag: Optional[str] = Query(default=None, description="Tag to search for (action=search)"),
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    if action == "read":
        if item_id:
            return await project_service.get(db, item_id)
        return await project_service.list_all(db, profile_id=profile_id)

    if action == "search":
        require_param(profile_id and tag, "Profile ID and tag are required for search")
        return await project_service.search_by_tag(db, profile_id, tag)

    if action == "add":
        require_method(request, ADD_METHODS)
        payload = await read_payload(request, ProjectCreate)
        result = await project_service.create(db, payload)
        response.status_code = 201
        return result

    if action == "update":
        require_method(request, UPDATE_METHODS)
        require_param(item_id, "Project ID is required", "id")
        payload = await read_payload(request, ProjectUpdate)
        return await project_service.update(db, item_id, payload)

    if action == "delete":
        require_method(request, DELETE_METHODS)
        require_param(item_id, "Project ID is required", "id")
        return await project_service.delete(db, item_id)

    raise InvalidActionError(action, PROJECT_ACTIONS)
