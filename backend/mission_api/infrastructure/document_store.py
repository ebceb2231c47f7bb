"""SQL Document Store: the persistence adapter behind every controller.

Invariants:
    - Identifiers are validated before any query; malformed ids raise MalformedIdError
    - Unknown but well-formed ids return None from find_by_id/update/delete
    - Required fields must be present and non-empty; choice fields must match
    - update() writes only the keys whose value is not None and validates just those
    - Integrity errors raise DuplicateKeyError on collections with unique fields,
      StoreError elsewhere; the session is rolled back
    - Documents come back in insertion order

Design Decisions:
    - Collections map to ORM models (models.COLLECTIONS); model class attributes
      (__required_fields__, __unique_fields__, __reference_fields__,
      __field_choices__) describe the schema the adapter enforces
"""

import logging
import uuid
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Mapping

from sqlalchemy import select
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import AsyncSession

from mission_api.core.domain_types import Collection
from mission_api.core.errors import (
    DocumentValidationError, DuplicateKeyError, MalformedIdError,
    StoreError, StoreUnavailableError,
)
from mission_api.core.repository_protocols import Document
from mission_api.db.base import Base
from mission_api.models import COLLECTIONS

logger = logging.getLogger(__name__)


def parse_document_id(collection: str, value: object) -> uuid.UUID:
    """Parse a store identifier or raise MalformedIdError."""
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except (ValueError, TypeError, AttributeError):
        raise MalformedIdError(collection, value) from None


def validate_fields(
    collection: str, model: type[Base], fields: Document, partial: bool = False,
) -> None:
    """Check required and choice constraints the way a document schema would."""
    problems = []
    for name in model.__required_fields__:
        if partial and name not in fields:
            continue
        value = fields.get(name)
        if value is None or (isinstance(value, str) and not value):
            problems.append(f"{name} is required")
    for name, choices in model.__field_choices__.items():
        value = fields.get(name)
        if value is not None and value not in choices:
            problems.append(f"{name} must be one of {', '.join(choices)}")
    if problems:
        raise DocumentValidationError(collection, problems)


class SqlDocumentStore:
    """DocumentStore implementation over an async SQLAlchemy session."""

    def __init__(
        self,
        session: AsyncSession,
        collections: Mapping[Collection, type[Base]] = COLLECTIONS,
    ):
        self._session = session
        self._collections = collections

    async def create(self, collection: Collection, fields: Document) -> Document:
        model = self._model(collection)
        values = {k: v for k, v in fields.items() if v is not None}
        values.pop("id", None)
        validate_fields(collection.value, model, values)
        values = self._coerce_references(collection, model, values)
        async with self._translate(collection, model, "create"):
            obj = model(**values)
            self._session.add(obj)
            await self._session.commit()
            await self._session.refresh(obj)
        logger.debug(
            "Created document",
            extra={"collection": collection.value, "document_id": str(obj.id)},
        )
        return obj.to_document()

    async def find(
        self, collection: Collection, filters: Document | None = None,
    ) -> list[Document]:
        model = self._model(collection)
        filters = self._coerce_references(collection, model, dict(filters or {}))
        query = select(model)
        for name, value in filters.items():
            query = query.where(getattr(model, name) == value)
        query = query.order_by(model.created_at)
        async with self._translate(collection, model, "find"):
            result = await self._session.execute(query)
            rows = result.scalars().all()
        return [row.to_document() for row in rows]

    async def find_by_id(
        self, collection: Collection, document_id: str,
    ) -> Document | None:
        obj = await self._get(collection, document_id)
        return obj.to_document() if obj is not None else None

    async def update(
        self, collection: Collection, document_id: str, fields: Document,
    ) -> Document | None:
        model = self._model(collection)
        obj = await self._get(collection, document_id)
        if obj is None:
            return None
        values = {
            k: v for k, v in fields.items() if v is not None and k != "id"
        }
        validate_fields(collection.value, model, values, partial=True)
        values = self._coerce_references(collection, model, values)
        async with self._translate(collection, model, "update"):
            for name, value in values.items():
                setattr(obj, name, value)
            await self._session.commit()
            await self._session.refresh(obj)
        return obj.to_document()

    async def delete(
        self, collection: Collection, document_id: str,
    ) -> Document | None:
        model = self._model(collection)
        obj = await self._get(collection, document_id)
        if obj is None:
            return None
        document = obj.to_document()
        async with self._translate(collection, model, "delete"):
            await self._session.delete(obj)
            await self._session.commit()
        return document

    # ─── Internals ───────────────────────────────────────────────

    def _model(self, collection: Collection) -> type[Base]:
        try:
            return self._collections[collection]
        except KeyError:
            raise StoreError(f"Unknown collection: {collection!r}") from None

    async def _get(self, collection: Collection, document_id: str) -> Base | None:
        model = self._model(collection)
        key = parse_document_id(collection.value, document_id)
        async with self._translate(collection, model, "find_by_id"):
            return await self._session.get(model, key)

    def _coerce_references(
        self, collection: Collection, model: type[Base], values: Document,
    ) -> Document:
        for name in model.__reference_fields__:
            if values.get(name) is not None:
                values[name] = parse_document_id(collection.value, values[name])
        return values

    @asynccontextmanager
    async def _translate(
        self, collection: Collection, model: type[Base], operation: str,
    ) -> AsyncGenerator[None, None]:
        """Roll back and re-raise SQLAlchemy failures as tagged store errors."""
        try:
            yield
        except IntegrityError as e:
            await self._session.rollback()
            if not model.__unique_fields__:
                logger.error(
                    f"Integrity error during {operation}: {e.orig}",
                    extra={"collection": collection.value, "operation": operation},
                )
                raise StoreError(
                    f"Database {operation} failed", collection.value,
                ) from e
            field = ", ".join(model.__unique_fields__)
            logger.info(
                f"Duplicate key on {collection.value}.{field}: {e.orig}",
                extra={"collection": collection.value, "operation": operation},
            )
            raise DuplicateKeyError(collection.value, field) from e
        except (OperationalError, DBAPIError) as e:
            await self._session.rollback()
            logger.error(
                f"Store unavailable during {operation}: {e}",
                extra={"collection": collection.value, "operation": operation},
            )
            raise StoreUnavailableError(operation, collection.value) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                f"Store failure during {operation}: {e}",
                extra={"collection": collection.value, "operation": operation},
            )
            raise StoreError(
                f"Database {operation} failed", collection.value,
            ) from e
