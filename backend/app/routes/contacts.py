"""
Portfolio Backend — Contacts Route Handler
============================================

What:  /api/contacts, dispatched by ?action=
       read           GET   ?id=  | ?status=new|read|replied
       stats          GET   message counts per status
       add / submit   POST  body: name, email, subject, message
       update_status  POST/PUT    ?id=  body: status
       delete         POST/DELETE ?id=
Who:   The public contact form posts action=submit; the rest is for the
       site owner.
"""

import logging
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
from app.schemas.contact import ContactCreate, ContactStatusUpdate
from app.services.contact_service import contact_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.api_prefix, tags=["Contacts"])

CONTACT_ACTIONS = ("read", "stats", "add", "submit", "update_status", "delete")


@router.api_route(
    "/contacts",
    methods=ROUTE_METHODS,
    response_model=Envelope,
    response_model_exclude_unset=True,
    responses={
        400: {"description": "Invalid input or action", "model": ErrorResponse},
        404: {"description": "Contact not found", "model": ErrorResponse},
        405: {"description": "Wrong method for action", "model": ErrorResponse},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Contact messages: " + ", ".join(CONTACT_ACTIONS),
)
async def contacts(
    request: Request,
    response: Response,
    action: str = Query(default="read", description="Operation to perform"),
    item_id: Optional[int] = Query(
        default=None, alias="id", ge=0, le=DB_INT_MAX, description="Contact ID"
    ),
    status: Optional[str] = Query(default=None, description="Filter for action=read"),
    db: AsyncSession = Depends(get_db_session),
) -> Envelope:
    if action == "read":
        if item_id:
            return await contact_service.get(db, item_id)
        return await contact_service.list_all(db, status=status)

    if action == "stats":
        return await contact_service.stats(db)

    if action in ("add", "submit"):
        require_method(request, ADD_METHODS)
        payload = await read_payload(request, ContactCreate)
        result = await contact_service.create(db, payload)
        logger.info("Contact form submission stored (id=%s)", result.id)
        response.status_code = 201
        return result

    if action == "update_status":
        require_method(request, UPDATE_METHODS)
        require_param(item_id, "Contact ID is required", "id")
        payload = await read_payload(request, ContactStatusUpdate)
        return await contact_service.update_status(db, item_id, payload)

    if action == "delete":
        require_method(request, DELETE_METHODS)
        require_param(item_id, "Contact ID is required", "id")
        return await contact_service.delete(db, item_id)

    raise InvalidActionError(action, CONTACT_ACTIONS)
