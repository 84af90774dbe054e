"""
Portfolio Backend — Contact SQLAlchemy Model
==============================================

What:  ORM model representing the `contacts` table: messages submitted
       through the contact form.

Lifecycle:
    new → read → replied
    Visitors can only create rows with status 'new'; the owner moves them
    along with action=update_status.

Contacts are not tied to a profile: the form posts to the site, not to a
specific profile row.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Index, Integer, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

CONTACT_STATUSES = ("new", "read", "replied")


class Contact(Base):
    """A message left by a visitor."""

    __tablename__ = "contacts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    subject: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default="new", server_default=text("'new'")
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            "status IN ('new', 'read', 'replied')",
            name="ck_contacts_status",
        ),
        Index("idx_contacts_created_at", "created_at"),
        Index("idx_contacts_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Contact(id={self.id}, email='{self.email}', status='{self.status}')>"
