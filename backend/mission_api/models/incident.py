"""Incident ORM: an event reported against exactly one mission.

Invariants:
    - mission always holds a mission id; it is set on create and never updated
    - status is free-form text, default "pending"
    - No foreign key: deleting a mission leaves its incidents in place
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mission_api.core.domain_types import DEFAULT_INCIDENT_STATUS
from mission_api.db.base import Base


class Incident(Base):
    """Incident entity."""
    __tablename__ = "incidents"

    __required_fields__ = ("title", "description", "mission")
    __unique_fields__ = ()
    __reference_fields__ = ("mission",)
    __field_choices__ = {}

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default=DEFAULT_INCIDENT_STATUS,
    )
    mission: Mapped[uuid.UUID] = mapped_column(
        "mission_id", UUID(as_uuid=True), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "description": self.description,
            "status": self.status,
            "mission": str(self.mission),
        }
