"""User ORM.

Invariants:
    - email carries no unique constraint
    - password is stored exactly as received (no hashing)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from mission_api.db.base import Base


class User(Base):
    """User account."""
    __tablename__ = "users"

    __required_fields__ = ("name", "email", "password")
    __unique_fields__ = ()
    __reference_fields__ = ()
    __field_choices__ = {}

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    def to_document(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "password": self.password,
        }
