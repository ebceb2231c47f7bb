"""Boundary Protocols: the persistence adapter contract used by controllers.

Invariants:
    - Controllers depend on DocumentStore only, never on SQLAlchemy
    - Documents are plain dicts whose "id" key holds the DocumentId string
    - Every failure surfaces as a StoreError subclass (core/errors.py)
    - Lookups by a well-formed but unknown id return None, they do not raise

Design Decisions:
    - Protocol over ABC: the SQLAlchemy adapter and test doubles share no base class
"""

from typing import Any, Protocol

from mission_api.core.domain_types import Collection, DocumentId

Document = dict[str, Any]


class DocumentStore(Protocol):
    """Contract for document persistence: implemented by infrastructure/."""

    async def create(
        self, collection: Collection, fields: Document,
    ) -> Document: ...

    async def find(
        self, collection: Collection, filters: Document | None = None,
    ) -> list[Document]: ...

    async def find_by_id(
        self, collection: Collection, document_id: DocumentId,
    ) -> Document | None: ...

    async def update(
        self, collection: Collection, document_id: DocumentId, fields: Document,
    ) -> Document | None: ...

    async def delete(
        self, collection: Collection, document_id: DocumentId,
    ) -> Document | None: ...
