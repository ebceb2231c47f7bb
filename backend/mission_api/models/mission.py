"""Mission ORM: a named operation led by a commander.

Invariants:
    - name is unique across all missions (unique index, first writer wins)
    - status is one of MissionStatus, default "pending"
    - incidents is an ordered list of incident id strings, never maintained
      automatically when incidents are created or deleted
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mission_api.core.domain_types import MissionStatus, DEFAULT_MISSION_STATUS
from mission_api.db.base import Base


class Mission(Base):
    """Mission entity."""
    __tablename__ = "missions"

    __required_fields__ = ("name", "description", "commander")
    __unique_fields__ = ("name",)
    __reference_fields__ = ()
    __field_choices__ = {"status": tuple(s.value for s in MissionStatus)}

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    description: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=DEFAULT_MISSION_STATUS.value,
    )
    commander: Mapped[str] = mapped_column(String(255), nullable=False)
    incidents: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "description": self.description,
            "status": self.status,
            "commander": self.commander,
            "incidents": [str(i) for i in self.incidents or []],
        }
