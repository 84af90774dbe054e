"""
Portfolio Backend — Profile Schemas
=====================================

ProfileCreate / ProfileUpdate:  request bodies for action=add / action=update
ProfileRead:                    one row of the profile table
ProfileSummary:                 action=complete: the row plus joined counts
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from app.schemas.common import Payload


class ProfileUpdate(Payload):
    name: Optional[str] = None
    bio: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    facebook: Optional[str] = None
    photo: Optional[str] = None
    years_experience: Optional[int] = None
    projects_completed: Optional[int] = None


class ProfileCreate(ProfileUpdate):
    """Same fields as an update; `name` is enforced by the service."""


class ProfileRead(BaseModel):
    id: int
    name: str
    bio: Optional[str] = None
    role: Optional[str] = None
    location: Optional[str] = None
    contact_email: Optional[str] = None
    phone: Optional[str] = None
    linkedin: Optional[str] = None
    github: Optional[str] = None
    facebook: Optional[str] = None
    photo: Optional[str] = None
    years_experience: int = 0
    projects_completed: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class ProfileSummary(ProfileRead):
    """
    Profile completion summary.

    avg_skill_proficiency is null when the profile has no skills.
    """

    total_skills: int = 0
    total_projects: int = 0
    total_education: int = 0
    total_hobbies: int = 0
    avg_skill_proficiency: Optional[float] = None
