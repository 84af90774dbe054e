"""
Portfolio Backend — Skill Schemas
===================================
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import Payload


class SkillUpdate(Payload):
    name: Optional[str] = None
    proficiency: Optional[int] = None
    type: Optional[str] = None
    icon: Optional[str] = None


class SkillCreate(SkillUpdate):
    profile_id: Optional[int] = None


class SkillRead(BaseModel):
    id: int
    profile_id: int
    name: str
    proficiency: int
    type: Optional[str] = None
    icon: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SkillTypeStats(BaseModel):
    """One row of action=by_type: proficiency statistics for a skill type."""

    type: Optional[str] = None
    skill_count: int
    avg_proficiency: Optional[float] = None
    max_proficiency: Optional[int] = None
    min_proficiency: Optional[int] = None
