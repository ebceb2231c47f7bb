"""Incident Schemas.

Invariants:
    - The owning mission comes from the URL, never from the body
    - IncidentUpdate has no mission field: the reference cannot be changed
"""

from pydantic import BaseModel, Field

from mission_api.core.domain_types import DEFAULT_INCIDENT_STATUS


class IncidentCreate(BaseModel):
    """Incident creation payload (mission id taken from the path)."""
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    status: str = Field(DEFAULT_INCIDENT_STATUS, min_length=1, max_length=50)


class IncidentUpdate(BaseModel):
    """Partial incident update."""
    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    status: str | None = Field(None, min_length=1, max_length=50)


class IncidentResponse(BaseModel):
    id: str
    title: str
    description: str
    status: str
    mission: str
