"""
Portfolio Backend — Hobby Service
===================================

What:  CRUD for the `hobbies` table. Listing accepts both a profile and a
       category filter ('hobby' or 'tool'); the WHERE clause is built from
       whichever filters are present.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.hobby import HOBBY_CATEGORIES, Hobby
from app.schemas.common import Envelope
from app.schemas.hobby import HobbyRead
from app.services.base import ResourceService, require_choice


class HobbyService(ResourceService):
    model = Hobby
    read_schema = HobbyRead
    label = "Hobby"
    noun = "hobby"
    plural = "hobbies"
    required_fields = ("name", "profile_id")
    required_message = "Name and profile_id are required"

    def default_order(self):
        return (Hobby.name.asc(),)

    def validate_create(self, payload) -> None:
        require_choice(payload.category, HOBBY_CATEGORIES, "category")

    def validate_update(self, payload) -> None:
        require_choice(payload.category, HOBBY_CATEGORIES, "category")

    async def list_all(
        self,
        db: AsyncSession,
        profile_id: Optional[int] = None,
        category: Optional[str] = None,
    ) -> Envelope:
        stmt = select(Hobby)
        if profile_id:
            stmt = stmt.where(Hobby.profile_id == profile_id)
        if category:
            stmt = stmt.where(Hobby.category == category)
        stmt = stmt.order_by(*self.default_order())
        rows = await self._fetch_all(db, stmt, "Error fetching hobbies")
        return Envelope(success=True, data=rows)


hobby_service = HobbyService()
