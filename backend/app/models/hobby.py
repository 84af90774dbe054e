"""
Portfolio Backend — Hobby SQLAlchemy Model
============================================

What:  ORM model representing the `hobbies` table.

One table holds two kinds of rows, told apart by `category`:
    hobby → pastimes shown in the "About" section
    tool  → everyday software/hardware shown in the "Tools" strip
"""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Index, Integer, String, Text, func, text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

HOBBY_CATEGORIES = ("hobby", "tool")


class Hobby(Base):
    """A hobby or a tool, distinguished by `category`."""

    __tablename__ = "hobbies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    profile_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    category: Mapped[str] = mapped_column(
        String(20), nullable=False, default="hobby", server_default=text("'hobby'")
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
    )

    __table_args__ = (
        CheckConstraint(
            "category IN ('hobby', 'tool')",
            name="ck_hobbies_category",
        ),
        Index("idx_hobbies_profile_category", "profile_id", "category"),
    )

    def __repr__(self) -> str:
        return f"<Hobby(id={self.id}, name='{self.name}', category='{self.category}')>"
