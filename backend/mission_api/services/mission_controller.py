"""Mission Controller: CRUD over the missions collection.

Invariants:
    - create defaults status to "pending" (schema default)
    - update writes name, description, status and commander; incidents untouched
    - delete does not cascade to incidents
"""

import logging

from mission_api.core.domain_types import Collection, Resource
from mission_api.core.repository_protocols import Document
from mission_api.schemas.mission import MissionCreate, MissionUpdate
from mission_api.services.resource_controller import (
    ResourceController, handle_store_errors,
)

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"name", "description", "status", "commander"}


class MissionController(ResourceController):
    resource = Resource.MISSION
    collection = Collection.MISSIONS

    @handle_store_errors("create")
    async def create(self, body: MissionCreate) -> Document:
        mission = await self._store.create(
            self.collection, body.model_dump(mode="json"),
        )
        logger.info(
            f"Mission {mission['name']!r} created",
            extra={"document_id": mission["id"]},
        )
        return mission

    @handle_store_errors("list")
    async def list_all(self) -> list[Document]:
        return await self._store.find(self.collection)

    @handle_store_errors("get")
    async def get(self, mission_id: str) -> Document:
        return self._require(
            await self._store.find_by_id(self.collection, mission_id), mission_id,
        )

    @handle_store_errors("update")
    async def update(self, mission_id: str, body: MissionUpdate) -> Document:
        mission = await self._store.update(
            self.collection,
            mission_id,
            body.model_dump(mode="json", include=UPDATABLE_FIELDS),
        )
        return self._require(mission, mission_id)

    @handle_store_errors("delete")
    async def delete(self, mission_id: str) -> dict:
        self._require(
            await self._store.delete(self.collection, mission_id), mission_id,
        )
        logger.info("Mission deleted", extra={"document_id": mission_id})
        return self._deleted_message()
