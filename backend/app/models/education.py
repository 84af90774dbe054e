"""
Portfolio Backend — Education SQLAlchemy Model
================================================

What:  ORM model representing the `education` table.

end_year is NULL while the programme is ongoing; the front-end renders
that as "Present".
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Education(Base):
    """A degree, course or certification attended at an institution."""

    __tablename__ = "education"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
    )
    institution: Mapped[str] = mapped_column(String(200), nullable=False)
    degree: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    field: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    start_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    end_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    display_order: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default=text("0")
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        Index("idx_education_profile_order", "profile_id", "display_order"),
    )

    def __repr__(self) -> str:
        return f"<Education(id={self.id}, institution='{self.institution}')>"
