"""
Portfolio Backend — Project Schemas
=====================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import Payload


class ProjectUpdate(Payload):
    title: Optional[str] = None
    description: Optional[str] = None
    link: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[str] = None
    display_order: Optional[int] = None


class ProjectCreate(ProjectUpdate):
    profile_id: Optional[int] = None


class ProjectRead(BaseModel):
    id: int
    profile_id: int
    title: str
    description: Optional[str] = None
    link: Optional[str] = None
    image: Optional[str] = None
    tags: Optional[str] = None
    display_order: int = 0
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
