"""
Portfolio Backend — Education Service
=======================================

What:  CRUD for the `education` table, ordered for the timeline view
       (display_order ASC, then most recent start_year first).
"""

from app.exceptions import ValidationError
from app.models.education import Education
from app.schemas.education import EducationRead
from app.services.base import ResourceService


class EducationService(ResourceService):
    model = Education
    read_schema = EducationRead
    label = "Education record"
    noun = "education"
    plural = "education"
    required_fields = ("institution", "profile_id")
    required_message = "Institution and profile_id are required"

    def default_order(self):
        return (Education.display_order.asc(), Education.start_year.desc())

    def validate_create(self, payload) -> None:
        self._check_years(payload.start_year, payload.end_year)

    def validate_update(self, payload) -> None:
        self._check_years(payload.start_year, payload.end_year)

    @staticmethod
    def _check_years(start_year, end_year) -> None:
        if start_year is not None and end_year is not None and end_year < start_year:
            raise ValidationError(
                message="end_year cannot be earlier than start_year",
                field="end_year",
            )


education_service = EducationService()
