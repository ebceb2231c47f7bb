"""Controller test fixtures: controllers wired to an in-memory store double."""

import pytest

from mission_api.services.incident_controller import IncidentController
from mission_api.services.mission_controller import MissionController
from mission_api.services.user_controller import UserController
from tests.services.fake_document_store import InMemoryDocumentStore


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def missions(store):
    return MissionController(store)


@pytest.fixture
def incidents(store):
    return IncidentController(store)


@pytest.fixture
def users(store):
    return UserController(store)
