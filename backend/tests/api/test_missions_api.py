"""Mission routes: end-to-end over HTTP with a SQLite-backed store.

Invariants checked:
    - The create / duplicate / update / delete / 404 scenario
    - Malformed ids yield 404 with {"error": "Mission not found"}, never 500
    - Invalid bodies yield 500 with an "error" key naming the field
"""

from uuid import uuid4

import pytest


async def test_list_missions_returns_array(client):
    res = await client.get("/api/missions")
    assert res.status_code == 200
    assert res.json() == []


async def test_mission_lifecycle_scenario(client, mission_payload):
    res = await client.post("/api/missions", json=mission_payload)
    assert res.status_code == 201
    assert res.json()["name"] == "Rescue Princess Leia"
    mission_id = res.json()["id"]

    res = await client.post("/api/missions", json=mission_payload)
    assert res.status_code == 400
    assert res.json() == {"error": "Mission with this name already exists"}

    res = await client.put(f"/api/missions/{mission_id}", json={
        "name": "Destroy the Death Star", "status": "in progress",
    })
    assert res.status_code == 200
    assert res.json()["name"] == "Destroy the Death Star"
    assert res.json()["status"] == "in progress"

    res = await client.get(f"/api/missions/{mission_id}")
    assert res.status_code == 200
    assert res.json()["name"] == "Destroy the Death Star"

    res = await client.delete(f"/api/missions/{mission_id}")
    assert res.status_code == 200
    assert res.json() == {"message": "Mission deleted successfully"}

    res = await client.get(f"/api/missions/{mission_id}")
    assert res.status_code == 404
    assert res.json() == {"error": "Mission not found"}


async def test_duplicate_create_does_not_add_record(client, created_mission, mission_payload):
    await client.post("/api/missions", json=mission_payload)
    res = await client.get("/api/missions")
    assert [m["id"] for m in res.json()] == [created_mission["id"]]


async def test_create_then_get_is_structurally_equal(client, created_mission):
    res = await client.get(f"/api/missions/{created_mission['id']}")
    assert res.json() == created_mission


async def test_create_defaults_status_to_pending(client, mission_payload):
    del mission_payload["status"]
    res = await client.post("/api/missions", json=mission_payload)
    assert res.status_code == 201
    assert res.json()["status"] == "pending"
    assert res.json()["incidents"] == []


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize("mission_id", ["not-a-valid-id", "507f1f77bcf86cd799439011"])
async def test_malformed_id_is_not_found(client, method, mission_id):
    kwargs = {"json": {"name": "x"}} if method == "put" else {}
    res = await client.request(method.upper(), f"/api/missions/{mission_id}", **kwargs)
    assert res.status_code == 404
    assert res.json() == {"error": "Mission not found"}


@pytest.mark.parametrize("method", ["get", "put", "delete"])
async def test_unknown_id_is_not_found(client, method):
    kwargs = {"json": {"name": "x"}} if method == "put" else {}
    res = await client.request(method.upper(), f"/api/missions/{uuid4()}", **kwargs)
    assert res.status_code == 404


async def test_update_to_existing_name_is_conflict(client, created_mission, mission_payload):
    res = await client.post("/api/missions", json={**mission_payload, "name": "Hoth"})
    other_id = res.json()["id"]

    res = await client.put(
        f"/api/missions/{other_id}", json={"name": mission_payload["name"]},
    )

    assert res.status_code == 400
    assert res.json() == {"error": "Mission with this name already exists"}


async def test_missing_required_field_is_internal_error(client, mission_payload):
    del mission_payload["commander"]
    res = await client.post("/api/missions", json=mission_payload)
    assert res.status_code == 500
    assert "commander" in res.json()["error"]


async def test_unknown_status_is_internal_error(client, mission_payload):
    res = await client.post(
        "/api/missions", json={**mission_payload, "status": "abandoned"},
    )
    assert res.status_code == 500
    assert "status" in res.json()["error"]


async def test_list_is_idempotent(client, created_mission):
    first = (await client.get("/api/missions")).json()
    second = (await client.get("/api/missions")).json()
    assert first == second == [created_mission]
