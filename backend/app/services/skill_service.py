"""
Portfolio Backend — Skill Service
===================================

What:  CRUD for the `skills` table plus two profile-scoped reads:
       per-type proficiency statistics and the high-proficiency filter.
Who:   Called by the /api/skills router.
"""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import settings
from app.exceptions import ValidationError
from app.models.skill import PROFICIENCY_MAX, PROFICIENCY_MIN, Skill
from app.schemas.common import Envelope
from app.schemas.skill import SkillRead, SkillTypeStats
from app.services.base import ResourceService

logger = logging.getLogger(__name__)


class SkillService(ResourceService):
    model = Skill
    read_schema = SkillRead
    label = "Skill"
    noun = "skill"
    plural = "skills"
    required_fields = ("name", "profile_id")
    required_message = "Name and profile_id are required"

    def default_order(self):
        return (Skill.proficiency.desc(),)

    # ── Validation ────────────────────────────────────────────────────────
    @staticmethod
    def _check_proficiency(value: Optional[int]) -> None:
        if value is not None and not PROFICIENCY_MIN <= value <= PROFICIENCY_MAX:
            raise ValidationError(
                message=f"Proficiency must be between {PROFICIENCY_MIN} and {PROFICIENCY_MAX}",
                field="proficiency",
                context={"value": value},
            )

    def validate_create(self, payload) -> None:
        self._check_proficiency(payload.proficiency)

    def validate_update(self, payload) -> None:
        self._check_proficiency(payload.proficiency)

    # ── Aggregate Reads ───────────────────────────────────────────────────
    async def by_type(self, db: AsyncSession, profile_id: int) -> Envelope:
        """
        Proficiency statistics per skill type.

        SELECT type, COUNT(*), ROUND(AVG(proficiency), 2), MAX(...), MIN(...)
        FROM skills WHERE profile_id = :profile_id
        GROUP BY type ORDER BY avg_proficiency DESC
        """
        avg_proficiency = func.round(func.avg(Skill.proficiency), 2).label("avg_proficiency")
        stmt = (
            select(
                Skill.type,
                func.count().label("skill_count"),
                avg_proficiency,
                func.max(Skill.proficiency).label("max_proficiency"),
                func.min(Skill.proficiency).label("min_proficiency"),
            )
            .where(Skill.profile_id == profile_id)
            .group_by(Skill.type)
            .order_by(avg_proficiency.desc())
        )
        result = await self._execute(db, stmt, "Error fetching skills by type")
        rows = [
            SkillTypeStats.model_validate(dict(row._mapping)).model_dump(mode="json")
            for row in result.all()
        ]
        return Envelope(success=True, data=rows)

    async def high_proficiency(
        self,
        db: AsyncSession,
        profile_id: int,
        min_proficiency: Optional[int] = None,
    ) -> Envelope:
        """Skills of a profile at or above `min_proficiency` (default from settings)."""
        if min_proficiency is None:
            min_proficiency = settings.high_proficiency_default
        stmt = (
            select(Skill)
            .where(Skill.profile_id == profile_id, Skill.proficiency >= min_proficiency)
            .order_by(Skill.proficiency.desc())
        )
        rows = await self._fetch_all(db, stmt, "Error fetching high proficiency skills")
        return Envelope(success=True, data=rows)


skill_service = SkillService()
