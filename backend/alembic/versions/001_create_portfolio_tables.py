"""Create portfolio tables

Revision ID: 001
Revises: None
Create Date: 2026-10-18 00:00:00.000000+00:00

What:  Creates profile plus its four child tables (skills, projects,
       education, hobbies) and the standalone contacts table.
       Child rows reference profile.id with ON DELETE CASCADE.

Rollback: downgrade() drops all six tables (children first).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False)


def _profile_fk() -> sa.Column:
    return sa.Column(
        "profile_id",
        sa.Integer(),
        sa.ForeignKey("profile.id", ondelete="CASCADE"),
        nullable=False,
    )


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.DateTime(timezone=True),
        server_default=sa.text("CURRENT_TIMESTAMP"),
        nullable=False,
    )


def upgrade() -> None:
    op.create_table(
        "profile",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("role", sa.String(100), nullable=True),
        sa.Column("location", sa.String(100), nullable=True),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("linkedin", sa.String(255), nullable=True),
        sa.Column("github", sa.String(255), nullable=True),
        sa.Column("facebook", sa.String(255), nullable=True),
        sa.Column("photo", sa.String(255), nullable=True),
        sa.Column("years_experience", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("projects_completed", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "skills",
        _id(),
        _profile_fk(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("proficiency", sa.Integer(), nullable=False, server_default=sa.text("0")),
        sa.Column("type", sa.String(50), nullable=True),
        sa.Column("icon", sa.String(255), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "proficiency BETWEEN 0 AND 100", name="ck_skills_proficiency_range"
        ),
    )
    op.create_index(
        "idx_skills_profile_proficiency", "skills", ["profile_id", "proficiency"]
    )

    op.create_table(
        "projects",
        _id(),
        _profile_fk(),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("link", sa.String(255), nullable=True),
        sa.Column("image", sa.String(255), nullable=True),
        sa.Column("tags", sa.String(255), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_projects_profile_order", "projects", ["profile_id", "display_order"]
    )

    op.create_table(
        "education",
        _id(),
        _profile_fk(),
        sa.Column("institution", sa.String(200), nullable=False),
        sa.Column("degree", sa.String(200), nullable=True),
        sa.Column("field", sa.String(200), nullable=True),
        sa.Column("start_year", sa.Integer(), nullable=True),
        # NULL while ongoing
        sa.Column("end_year", sa.Integer(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False, server_default=sa.text("0")),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_education_profile_order", "education", ["profile_id", "display_order"]
    )

    op.create_table(
        "hobbies",
        _id(),
        _profile_fk(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(255), nullable=True),
        sa.Column("category", sa.String(20), nullable=False, server_default=sa.text("'hobby'")),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("category IN ('hobby', 'tool')", name="ck_hobbies_category"),
    )
    op.create_index(
        "idx_hobbies_profile_category", "hobbies", ["profile_id", "category"]
    )

    op.create_table(
        "contacts",
        _id(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("subject", sa.String(200), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default=sa.text("'new'")),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "status IN ('new', 'read', 'replied')", name="ck_contacts_status"
        ),
    )
    op.create_index("idx_contacts_created_at", "contacts", ["created_at"])
    op.create_index("idx_contacts_status", "contacts", ["status"])


def downgrade() -> None:
    """Drop every table; all portfolio content is lost."""
    op.drop_index("idx_contacts_status", table_name="contacts")
    op.drop_index("idx_contacts_created_at", table_name="contacts")
    op.drop_table("contacts")
    op.drop_index("idx_hobbies_profile_category", table_name="hobbies")
    op.drop_table("hobbies")
    op.drop_index("idx_education_profile_order", table_name="education")
    op.drop_table("education")
    op.drop_index("idx_projects_profile_order", table_name="projects")
    op.drop_table("projects")
    op.drop_index("idx_skills_profile_proficiency", table_name="skills")
    op.drop_table("skills")
    op.drop_table("profile")
