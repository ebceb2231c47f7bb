"""ORM Models: SQLAlchemy declarative models for missions, incidents and users.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model renders itself as a document via to_document()
    - COLLECTIONS maps each store collection name to its model

Design Decisions:
    - No foreign keys between tables: incidents outlive their mission and
      missions list incident ids in a JSON column, as a document store would
"""

from mission_api.core.domain_types import Collection
from mission_api.models.mission import Mission
from mission_api.models.incident import Incident
from mission_api.models.user import User

COLLECTIONS = {
    Collection.MISSIONS: Mission,
    Collection.INCIDENTS: Incident,
    Collection.USERS: User,
}

__all__ = ["COLLECTIONS", "Incident", "Mission", "User"]
