"""
Portfolio Backend — Contact Schemas
=====================================

ContactCreate:        body of action=add / action=submit (the public form)
ContactStatusUpdate:  body of action=update_status
ContactStats:         action=stats: message counts per status
"""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import Payload


class ContactCreate(Payload):
    name: Optional[str] = None
    email: Optional[str] = None
    subject: Optional[str] = None
    message: Optional[str] = None


class ContactStatusUpdate(Payload):
    status: Optional[str] = None


class ContactRead(BaseModel):
    id: int
    name: str
    email: str
    subject: Optional[str] = None
    message: str
    status: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ContactStats(BaseModel):
    total_messages: int = 0
    new_messages: int = 0
    read_messages: int = 0
    replied_messages: int = 0
    last_message_date: Optional[date] = None
