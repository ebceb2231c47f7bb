"""Request Dependencies: build the store and controllers per request.

Invariants:
    - One database session, one store and one controller per request
    - Controllers get the store injected; nothing is shared across requests
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from mission_api.core.repository_protocols import DocumentStore
from mission_api.infrastructure.database import get_db
from mission_api.infrastructure.document_store import SqlDocumentStore
from mission_api.services.incident_controller import IncidentController
from mission_api.services.mission_controller import MissionController
from mission_api.services.user_controller import UserController


async def get_store(db: AsyncSession = Depends(get_db)) -> DocumentStore:
    return SqlDocumentStore(db)


async def get_mission_controller(
    store: DocumentStore = Depends(get_store),
) -> MissionController:
    return MissionController(store)


async def get_incident_controller(
    store: DocumentStore = Depends(get_store),
) -> IncidentController:
    return IncidentController(store)


async def get_user_controller(
    store: DocumentStore = Depends(get_store),
) -> UserController:
    return UserController(store)
