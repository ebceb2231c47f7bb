"""Incident Controller: CRUD over incidents, scoped to a mission on create/list.

Invariants:
    - create binds the incident to the mission id from the path without
      looking the mission up; a malformed mission id fails with "Mission not found"
    - list_by_mission with a well-formed id that owns nothing returns []
    - update never touches the mission reference
    - The mission's incidents list is not maintained on create or delete
"""

from mission_api.core.classify_error import classify_failure
from mission_api.core.domain_types import Collection, Resource
from mission_api.core.errors import MalformedIdError
from mission_api.core.repository_protocols import Document
from mission_api.schemas.incident import IncidentCreate, IncidentUpdate
from mission_api.services.resource_controller import (
    ResourceController, handle_store_errors,
)

UPDATABLE_FIELDS = {"title", "description", "status"}


class IncidentController(ResourceController):
    resource = Resource.INCIDENT
    collection = Collection.INCIDENTS

    @handle_store_errors("create")
    async def create(self, mission_id: str, body: IncidentCreate) -> Document:
        fields = body.model_dump(mode="json")
        fields["mission"] = mission_id
        try:
            return await self._store.create(self.collection, fields)
        except MalformedIdError as exc:
            raise classify_failure(Resource.MISSION.value, exc) from exc

    @handle_store_errors("list")
    async def list_by_mission(self, mission_id: str) -> list[Document]:
        try:
            return await self._store.find(
                self.collection, {"mission": mission_id},
            )
        except MalformedIdError as exc:
            raise classify_failure(Resource.MISSION.value, exc) from exc

    @handle_store_errors("get")
    async def get(self, incident_id: str) -> Document:
        return self._require(
            await self._store.find_by_id(self.collection, incident_id),
            incident_id,
        )

    @handle_store_errors("update")
    async def update(self, incident_id: str, body: IncidentUpdate) -> Document:
        incident = await self._store.update(
            self.collection,
            incident_id,
            body.model_dump(mode="json", include=UPDATABLE_FIELDS),
        )
        return self._require(incident, incident_id)

    @handle_store_errors("delete")
    async def delete(self, incident_id: str) -> dict:
        self._require(
            await self._store.delete(self.collection, incident_id), incident_id,
        )
        return self._deleted_message()
