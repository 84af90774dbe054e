"""
Portfolio Backend — Hobby Schemas
===================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import Payload


class HobbyUpdate(Payload):
    name: Optional[str] = None
    description: Optional[str] = None
    icon: Optional[str] = None
    category: Optional[str] = None


class HobbyCreate(HobbyUpdate):
    profile_id: Optional[int] = None


class HobbyRead(BaseModel):
    id: int
    profile_id: int
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    category: str
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
