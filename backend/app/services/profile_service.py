"""
Portfolio Backend — Profile Service
=====================================

What:  CRUD for the `profile` table plus the profile completion summary.
Who:   Called by the /api/profile router.

Completion summary (action=complete):
    SELECT p.*,
           COUNT(DISTINCT s.id)  AS total_skills,
           COUNT(DISTINCT pr.id) AS total_projects,
           COUNT(DISTINCT e.id)  AS total_education,
           COUNT(DISTINCT h.id)  AS total_hobbies,
           ROUND(AVG(s.proficiency), 2) AS avg_skill_proficiency
    FROM profile p
    LEFT JOIN skills s     ON p.id = s.profile_id
    LEFT JOIN projects pr  ON p.id = pr.profile_id
    LEFT JOIN education e  ON p.id = e.profile_id
    LEFT JOIN hobbies h    ON p.id = h.profile_id
    WHERE p.id = :id
    GROUP BY p.id

    The joins multiply rows, which COUNT(DISTINCT ...) absorbs. Every skill
    is repeated the same number of times, so the average is unaffected.
"""

import logging

from sqlalchemy import distinct, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import NotFoundError
from app.models.education import Education
from app.models.hobby import Hobby
from app.models.profile import Profile
from app.models.project import Project
from app.models.skill import Skill
from app.schemas.common import Envelope
from app.schemas.profile import ProfileRead, ProfileSummary
from app.services.base import ResourceService

logger = logging.getLogger(__name__)


class ProfileService(ResourceService):
    model = Profile
    read_schema = ProfileRead
    label = "Profile"
    noun = "profile"
    plural = "profiles"
    required_fields = ("name",)
    required_message = "Name is required"

    def default_order(self):
        return (Profile.id.desc(),)

    async def get_complete(self, db: AsyncSession, profile_id: int) -> Envelope:
        """
        Profile row with joined counts and the average skill proficiency.

        Raises:
            NotFoundError: No profile with this id (→ 404)
            DatabaseError: Query execution failed (→ 500)
        """
        stmt = (
            select(
                Profile,
                func.count(distinct(Skill.id)).label("total_skills"),
                func.count(distinct(Project.id)).label("total_projects"),
                func.count(distinct(Education.id)).label("total_education"),
                func.count(distinct(Hobby.id)).label("total_hobbies"),
                func.round(func.avg(Skill.proficiency), 2).label("avg_skill_proficiency"),
            )
            .outerjoin(Skill, Skill.profile_id == Profile.id)
            .outerjoin(Project, Project.profile_id == Profile.id)
            .outerjoin(Education, Education.profile_id == Profile.id)
            .outerjoin(Hobby, Hobby.profile_id == Profile.id)
            .where(Profile.id == profile_id)
            .group_by(Profile.id)
        )
        result = await self._execute(db, stmt, "Error fetching complete profile")
        row = result.one_or_none()
        if row is None:
            raise NotFoundError(resource=self.label, resource_id=profile_id)

        summary = ProfileSummary.model_validate(
            {
                **ProfileRead.model_validate(row[0]).model_dump(),
                "total_skills": row.total_skills,
                "total_projects": row.total_projects,
                "total_education": row.total_education,
                "total_hobbies": row.total_hobbies,
                "avg_skill_proficiency": row.avg_skill_proficiency,
            }
        )
        return Envelope(success=True, data=summary.model_dump(mode="json"))


profile_service = ProfileService()
