"""
Portfolio Backend — Profile SQLAlchemy Model
==============================================

What:  ORM model representing the `profile` table.
Who:   Used by ProfileService for CRUD and the completion summary;
       referenced by every child table except contacts.

Table Design:
    - Integer auto-increment primary key: the front-end addresses profiles
      by small numeric ids (PROFILE_ID = 1)
    - Social links and photo are plain URL strings; no validation beyond length
    - years_experience / projects_completed feed the "stats" counters on the page
    - updated_at is refreshed by the database on every UPDATE
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, Integer, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Profile(Base):
    """
    The root entity of the portfolio.

    Skills, projects, education entries and hobbies reference a profile
    through `profile_id`; deleting the profile cascades to all of them.
    """

    __tablename__ = "profile"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    bio: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    role: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # ── Contact & Social ──────────────────────────────────────────────────
    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    linkedin: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    github: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    facebook: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    photo: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    # ── Headline Counters ─────────────────────────────────────────────────
    years_experience: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    projects_completed: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, name='{self.name}')>"
