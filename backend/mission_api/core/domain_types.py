"""Domain Types: identifiers, collection names and status values.

Invariants:
    - DocumentId is the opaque string form of a store identifier (canonical UUID text)
    - Collection names are the only keys the document store accepts
    - MissionStatus holds exactly three values; incident status is free-form
"""

from enum import Enum
from typing import NewType


DocumentId = NewType("DocumentId", str)


class Collection(str, Enum):
    """Document collections served by the store."""
    MISSIONS = "missions"
    INCIDENTS = "incidents"
    USERS = "users"


class Resource(str, Enum):
    """Resource names as they appear in user-facing error messages."""
    MISSION = "Mission"
    INCIDENT = "Incident"
    USER = "User"


class MissionStatus(str, Enum):
    """Allowed mission states. Any transition between them is accepted."""
    PENDING = "pending"
    IN_PROGRESS = "in progress"
    COMPLETED = "completed"


DEFAULT_MISSION_STATUS = MissionStatus.PENDING
DEFAULT_INCIDENT_STATUS = "pending"
