"""
Portfolio Backend — Skills Route Handler
==========================================

What:  /api/skills, dispatched by ?action=
       read              GET   ?id=  | ?profile_id=
       by_type           GET   ?profile_id=         (required)
       high_proficiency  GET   ?profile_id=&min=70  (profile_id required)
       add               POST  body: profile_id, name, proficiency, type, icon
       update            POST/PUT    ?id=
       delete            POST/DELETE ?id=
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
from app.schemas.skill import SkillCreate, SkillUpdate
from app.services.skill_service import skill_service

router = APIRouter(prefix=settings.api_prefix, tags=["Skills"])

SKILL_ACTIONS = ("read", "by_type", "high_proficiency", "add", "update", "delete")


@router.api_route(
    "/skills",
    methods=ROUTE_METHODS,
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Invalid input or action", "model": ErrorResponse},
        404: {"description": "Skill not found", "model": ErrorResponse},
        405: {"description": "Wrong method for action", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Skills: " + ", ".join(SKILL_ACTIONS),
)
async def skills(
    request: Request,
    response: Response,
    action: str = Query(default="read", description="Operation to perform"),
    item_id: Optional[int] = Query(
        default=None, alias="id", ge=0, le=DB_INT_MAX, description="Skill ID"
    ),
    profile_id: Optional[int] = Query(
        default=None, ge=0, le=DB_INT_MAX, description="Owning profile"
    ),
    min_proficiency: Optional[int] = Query(
        default=None,
        alias="min",
        ge=0,
        le=DB_INT_MAX,
        description="Lower bound for action=high_proficiency (default 70)",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    if action == "read":
        if item_id:
            return await skill_service.get(db, item_id)
        return await skill_service.list_all(db, profile_id=profile_id)

    if action == "by_type":
        require_param(profile_id, "Profile ID is required", "profile_id")
        return await skill_service.by_type(db, profile_id)

    if action == "high_proficiency":
        require_param(profile_id, "Profile ID is required", "profile_id")
        return await skill_service.high_proficiency(db, profile_id, min_proficiency)

    if action == "add":
        require_method(request, ADD_METHODS)
        payload = await read_payload(request, SkillCreate)
        result = await skill_service.create(db, payload)
        response.status_code = 201
        return result

    if action == "update":
        require_method(request, UPDATE_METHODS)
        require_param(item_id, "Skill ID is required", "id")
        payload = await read_payload(request, SkillUpdate)
        return await skill_service.update(db, item_id, payload)

    if action == "delete":
        require_method(request, DELETE_METHODS)
        require_param(item_id, "Skill ID is required", "id")
        return await skill_service.delete(db, item_id)

    raise InvalidActionError(action, SKILL_ACTIONS)
