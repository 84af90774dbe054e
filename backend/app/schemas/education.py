"""
Portfolio Backend — Education Schemas
=======================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import Payload


class EducationUpdate(Payload):
    institution: Optional[str] = None
    degree: Optional[str] = None
    field: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    description: Optional[str] = None
    display_order: Optional[int] = None


class EducationCreate(EducationUpdate):
    profile_id: Optional[int] = None


class EducationRead(BaseModel):
    id: int
    profile_id: int
    institution: str
    degree: Optional[str] = None
    field: Optional[str] = None
    start_year: Optional[int] = None
    end_year: Optional[int] = None
    description: Optional[str] = None
    display_order: int = 0
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
