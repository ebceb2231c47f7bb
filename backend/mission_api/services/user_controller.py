"""User Controller: CRUD over the users collection.

Passwords are stored and returned as given and duplicate emails are accepted.
"""

from mission_api.core.domain_types import Collection, Resource
from mission_api.core.repository_protocols import Document
from mission_api.schemas.user import UserCreate, UserUpdate
from mission_api.services.resource_controller import (
    ResourceController, handle_store_errors,
)

UPDATABLE_FIELDS = {"name", "email", "password"}


class UserController(ResourceController):
    resource = Resource.USER
    collection = Collection.USERS

    @handle_store_errors("create")
    async def create(self, body: UserCreate) -> Document:
        return await self._store.create(self.collection, body.model_dump())

    @handle_store_errors("list")
    async def list_all(self) -> list[Document]:
        return await self._store.find(self.collection)

    @handle_store_errors("get")
    async def get(self, user_id: str) -> Document:
        return self._require(
            await self._store.find_by_id(self.collection, user_id), user_id,
        )

    @handle_store_errors("update")
    async def update(self, user_id: str, body: UserUpdate) -> Document:
        user = await self._store.update(
            self.collection, user_id, body.model_dump(include=UPDATABLE_FIELDS),
        )
        return self._require(user, user_id)

    @handle_store_errors("delete")
    async def delete(self, user_id: str) -> dict:
        self._require(await self._store.delete(self.collection, user_id), user_id)
        return self._deleted_message()
