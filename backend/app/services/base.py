"""
Portfolio Backend — Resource Service Base
===========================================

What:  Shared CRUD behaviour for the six resource services.
How:   Each operation runs exactly one parameterized statement through
       the request's AsyncSession and normalizes the outcome into an
       Envelope. Subclasses declare their model, schemas, labels,
       required fields and default ordering, and add their own filtered
       or aggregate reads.

Operation → statement:
    get(id)       SELECT * FROM <table> WHERE id = :id
    create(data)  INSERT INTO <table> (...) VALUES (...)
    update(id)    UPDATE <table> SET ... WHERE id = :id
    delete(id)    DELETE FROM <table> WHERE id = :id

Error Handling Strategy:
    - Missing rows (None / rowcount 0) → NotFoundError("<Label> not found")
    - Constraint violations (IntegrityError) → ValidationError
    - Any other SQLAlchemyError → DatabaseError("Error <verb> <noun>"),
      with the driver message kept in the server log only
"""

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Type

from pydantic import BaseModel
from sqlalchemy import Select, delete, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base
from app.exceptions import DatabaseError, NotFoundError, ValidationError
from app.schemas.common import Envelope

logger = logging.getLogger(__name__)


class ResourceService:
    """
    Generic single-table service.

    Class attributes configured by subclasses:
        model:            SQLAlchemy model class
        read_schema:      Pydantic model used to serialize rows
        label:            Capitalized singular used in messages ("Skill")
        noun:             Lowercase noun used in failure messages ("skill")
        plural:           Lowercase plural used in failure messages ("skills")
        required_fields:  Fields that must be non-empty on create
        required_message: Validation message when one of them is missing
    """

    model: Type[Base]
    read_schema: Type[BaseModel]
    label: str = "Resource"
    noun: str = "resource"
    plural: str = "resources"
    required_fields: Tuple[str, ...] = ()
    required_message: str = "Required fields are missing"

    # ── Ordering ──────────────────────────────────────────────────────────
    def default_order(self) -> Sequence[Any]:
        """ORDER BY clause used when listing rows. Override per resource."""
        return (self.model.id.desc(),)

    # ── Statement Execution ───────────────────────────────────────────────
    @contextmanager
    def _guard(self, failure: str) -> Iterator[None]:
        """
        Translate driver failures raised inside the block.

        Args:
            failure: Client-facing description, e.g. "Error fetching skills"
        """
        try:
            yield
        except IntegrityError as e:
            logger.warning("%s: integrity error: %s", failure, e.orig)
            raise ValidationError(
                message=f"{failure}: a referenced row does not exist or a constraint was violated",
                context={"table": self.model.__tablename__},
            ) from e
        except SQLAlchemyError as e:
            logger.error("%s: %s", failure, str(e), exc_info=True)
            raise DatabaseError(
                message=failure,
                context={"table": self.model.__tablename__, "error_type": type(e).__name__},
            ) from e

    async def _execute(self, db: AsyncSession, stmt: Any, failure: str):
        """Run one statement under _guard."""
        with self._guard(failure):
            return await db.execute(stmt)

    async def _fetch_all(self, db: AsyncSession, stmt: Select, failure: str) -> List[Dict[str, Any]]:
        """Execute an ORM SELECT and serialize every returned entity."""
        result = await self._execute(db, stmt, failure)
        return [self.serialize(row) for row in result.scalars().all()]

    # ── Serialization ─────────────────────────────────────────────────────
    def serialize(self, obj: Any) -> Dict[str, Any]:
        """ORM row → JSON-ready dict shaped by read_schema."""
        return self.read_schema.model_validate(obj).model_dump(mode="json")

    # ── Validation ────────────────────────────────────────────────────────
    def check_required(self, payload: BaseModel) -> None:
        """Mirror of an empty() check: None, "" and 0 all count as missing."""
        for field in self.required_fields:
            if not getattr(payload, field, None):
                raise ValidationError(message=self.required_message, field=field)

    def validate_create(self, payload: BaseModel) -> None:
        """Hook for resource-specific rules on insert."""

    def validate_update(self, payload: BaseModel) -> None:
        """Hook for resource-specific rules on update."""

    def _update_values(self, payload: BaseModel) -> Dict[str, Any]:
        values = payload.model_dump(exclude_unset=True)
        if not values:
            raise ValidationError(message="No fields provided to update")
        columns = self.model.__table__.columns
        for field, value in values.items():
            if value is None and field in columns and not columns[field].nullable:
                raise ValidationError(message=f"{field} cannot be empty", field=field)
        return values

    # ── CRUD ──────────────────────────────────────────────────────────────
    async def list_all(self, db: AsyncSession, profile_id: Optional[int] = None) -> Envelope:
        """All rows, optionally restricted to one profile."""
        stmt = select(self.model)
        if profile_id and hasattr(self.model, "profile_id"):
            stmt = stmt.where(self.model.profile_id == profile_id)
        stmt = stmt.order_by(*self.default_order())
        rows = await self._fetch_all(db, stmt, f"Error fetching {self.plural}")
        return Envelope(success=True, data=rows)

    async def get(self, db: AsyncSession, item_id: int) -> Envelope:
        """Single row by primary key."""
        result = await self._execute(
            db,
            select(self.model).where(self.model.id == item_id),
            f"Error fetching {self.noun}",
        )
        obj = result.scalar_one_or_none()
        if obj is None:
            raise NotFoundError(resource=self.label, resource_id=item_id)
        return Envelope(success=True, data=self.serialize(obj))

    async def create(self, db: AsyncSession, payload: BaseModel) -> Envelope:
        """Insert a row and report its new id."""
        self.check_required(payload)
        self.validate_create(payload)

        obj = self.model(**self._insert_values(payload))
        with self._guard(f"Error adding {self.noun}"):
            db.add(obj)
            # flush emits the INSERT and assigns obj.id; commit happens in get_db_session
            await db.flush()

        logger.info("%s %s created", self.label, obj.id)
        return Envelope(success=True, message=f"{self.label} added successfully", id=obj.id)

    def _insert_values(self, payload: BaseModel) -> Dict[str, Any]:
        # Unset or blank fields fall back to the column defaults
        return {k: v for k, v in payload.model_dump(exclude_unset=True).items() if v is not None}

    async def update(self, db: AsyncSession, item_id: int, payload: BaseModel) -> Envelope:
        """
        Update only the fields present in the payload.

        A field sent as blank is written as NULL; a field not sent at all
        keeps its current value.
        """
        self.validate_update(payload)
        values = self._update_values(payload)
        stmt = (
            update(self.model)
            .where(self.model.id == item_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute(db, stmt, f"Error updating {self.noun}")
        if result.rowcount == 0:
            raise NotFoundError(resource=self.label, resource_id=item_id)
        logger.info("%s %s updated: %s", self.label, item_id, sorted(values))
        return Envelope(success=True, message=f"{self.label} updated successfully")

    async def delete(self, db: AsyncSession, item_id: int) -> Envelope:
        stmt = (
            delete(self.model)
            .where(self.model.id == item_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._execute(db, stmt, f"Error deleting {self.noun}")
        if result.rowcount == 0:
            raise NotFoundError(resource=self.label, resource_id=item_id)
        logger.info("%s %s deleted", self.label, item_id)
        return Envelope(success=True, message=f"{self.label} deleted successfully")


def require_choice(value: Optional[str], choices: Iterable[str], field: str) -> None:
    """Raise ValidationError unless value is one of choices (None is allowed)."""
    choices = tuple(choices)
    if value is not None and value not in choices:
        raise ValidationError(
            message=f"Invalid {field} '{value}'. Must be one of: {', '.join(choices)}",
            field=field,
        )
