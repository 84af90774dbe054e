"""
Portfolio Backend — Project Service
=====================================

What:  CRUD for the `projects` table plus tag search.
Who:   Called by the /api/projects router.

Ordering:
    Listings use display_order ASC, then created_at DESC, so manually
    ordered cards come first and unordered ones show newest first.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.project import Project
from app.schemas.common import Envelope
from app.schemas.project import ProjectRead
from app.services.base import ResourceService


class ProjectService(ResourceService):
    model = Project
    read_schema = ProjectRead
    label = "Project"
    noun = "project"
    plural = "projects"
    required_fields = ("title", "profile_id")
    required_message = "Title and profile_id are required"

    def default_order(self):
        return (Project.display_order.asc(), Project.created_at.desc())

    async def search_by_tag(self, db: AsyncSession, profile_id: int, tag: str) -> Envelope:
        """
        Projects of a profile whose tag string contains `tag`.

        Renders as `tags LIKE '%' || :tag || '%'`; LIKE wildcards typed by
        the client are escaped and match literally.
        """
        stmt = (
            select(Project)
            .where(
                Project.profile_id == profile_id,
                Project.tags.contains(tag, autoescape=True),
            )
            .order_by(Project.display_order.asc())
        )
        rows = await self._fetch_all(db, stmt, "Error searching projects")
        return Envelope(success=True, data=rows)


project_service = ProjectService()
