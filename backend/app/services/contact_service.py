"""
Portfolio Backend — Contact Service
=====================================

What:  Contact form submissions: listing (optionally by status), the
       public submit, status transitions and message statistics.
Who:   Called by the /api/contacts router.

Statistics (action=stats), one statement over the whole table:
    SELECT COUNT(*)                                      AS total_messages,
           COUNT(CASE WHEN status = 'new' THEN 1 END)     AS new_messages,
           COUNT(CASE WHEN status = 'read' THEN 1 END)    AS read_messages,
           COUNT(CASE WHEN status = 'replied' THEN 1 END) AS replied_messages,
           DATE(MAX(created_at))                          AS last_message_date
    FROM contacts
"""

import logging
from typing import Optional

from pydantic import EmailStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ValidationError
from app.models.contact import CONTACT_STATUSES, Contact
from app.schemas.common import Envelope
from app.schemas.contact import ContactCreate, ContactRead, ContactStats, ContactStatusUpdate
from app.services.base import ResourceService, require_choice

logger = logging.getLogger(__name__)

_email_adapter = TypeAdapter(EmailStr)


class ContactService(ResourceService):
    model = Contact
    read_schema = ContactRead
    label = "Contact"
    noun = "contact"
    plural = "contacts"
    required_fields = ("name", "email", "message")
    required_message = "Name, email, and message are required"

    def default_order(self):
        return (Contact.created_at.desc(),)

    async def list_all(self, db: AsyncSession, status: Optional[str] = None) -> Envelope:
        stmt = select(Contact)
        if status:
            stmt = stmt.where(Contact.status == status)
        stmt = stmt.order_by(*self.default_order())
        rows = await self._fetch_all(db, stmt, "Error fetching contacts")
        return Envelope(success=True, data=rows)

    def validate_create(self, payload: ContactCreate) -> None:
        try:
            _email_adapter.validate_python(payload.email)
        except PydanticValidationError as e:
            raise ValidationError(message="Invalid email address", field="email") from e

    async def create(self, db: AsyncSession, payload: ContactCreate) -> Envelope:
        """Store a submitted message. New messages always start as 'new'."""
        envelope = await super().create(db, payload)
        envelope.message = "Contact message sent successfully"
        return envelope

    def _insert_values(self, payload: ContactCreate):
        values = super()._insert_values(payload)
        values["status"] = "new"
        return values

    async def update_status(
        self, db: AsyncSession, contact_id: int, payload: ContactStatusUpdate
    ) -> Envelope:
        """Move a message to 'new', 'read' or 'replied'."""
        if not payload.status:
            raise ValidationError(message="Status is required", field="status")
        require_choice(payload.status, CONTACT_STATUSES, "status")
        envelope = await self.update(db, contact_id, payload)
        envelope.message = "Contact status updated successfully"
        return envelope

    async def stats(self, db: AsyncSession) -> Envelope:
        stmt = select(
            func.count().label("total_messages"),
            *(
                func.count(case((Contact.status == status, 1))).label(f"{status}_messages")
                for status in CONTACT_STATUSES
            ),
            func.date(func.max(Contact.created_at)).label("last_message_date"),
        ).select_from(Contact)
        result = await self._execute(db, stmt, "Error fetching contact stats")
        row = result.one()
        stats = ContactStats.model_validate(dict(row._mapping))
        return Envelope(success=True, data=stats.model_dump(mode="json"))


contact_service = ContactService()
