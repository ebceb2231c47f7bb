"""Mission Schemas: create, full-field update and response shapes.

Invariants:
    - status is restricted to MissionStatus and defaults to "pending" on create
    - MissionUpdate carries all four writable fields; incidents is read-only
"""

from pydantic import BaseModel, Field

from mission_api.core.domain_types import MissionStatus, DEFAULT_MISSION_STATUS


class MissionCreate(BaseModel):
    """Mission creation payload."""
    name: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    status: MissionStatus = DEFAULT_MISSION_STATUS
    commander: str = Field(min_length=1, max_length=255)


class MissionUpdate(BaseModel):
    """Mission update payload. Fields left out keep their stored value."""
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    status: MissionStatus | None = None
    commander: str | None = Field(None, min_length=1, max_length=255)


class MissionResponse(BaseModel):
    """Mission as returned to clients."""
    id: str
    name: str
    description: str
    status: MissionStatus
    commander: str
    incidents: list[str] = Field(default_factory=list)
