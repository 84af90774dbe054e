"""
Portfolio Backend — Skill SQLAlchemy Model
============================================

What:  ORM model representing the `skills` table.

Query Patterns:
    - Skills of a profile:  WHERE profile_id = :id ORDER BY proficiency DESC
    - Grouped by type:      GROUP BY type with COUNT/AVG/MAX/MIN(proficiency)
    - High proficiency:     WHERE profile_id = :id AND proficiency >= :min
    All three are served by idx_skills_profile_proficiency.
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    func,
    text,
)
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# Inclusive bounds for Skill.proficiency (a percentage)
PROFICIENCY_MIN = 0
PROFICIENCY_MAX = 100


class Skill(Base):
    """A language, framework or competence with a 0-100 proficiency score."""

    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    proficiency: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )
    # Free-form grouping label, e.g. "language", "framework", "database"
    type: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            f"proficiency BETWEEN {PROFICIENCY_MIN} AND {PROFICIENCY_MAX}",
            name="ck_skills_proficiency_range",
        ),
        Index("idx_skills_profile_proficiency", "profile_id", "proficiency"),
    )

    def __repr__(self) -> str:
        return f"<Skill(id={self.id}, name='{self.name}', proficiency={self.proficiency})>"
