"""Incident routes: nested create/list under a mission, flat get/update/delete."""

from uuid import uuid4

import pytest

INCIDENT = {"title": "Tractor beam", "description": "Ship caught in a tractor beam."}


@pytest.fixture
async def created_incident(client, created_mission):
    res = await client.post(
        f"/api/missions/{created_mission['id']}/incidents", json=INCIDENT,
    )
    assert res.status_code == 201
    return res.json()


async def test_create_incident_under_mission(client, created_mission, created_incident):
    assert created_incident["mission"] == created_mission["id"]
    assert created_incident["status"] == "pending"
    assert created_incident["title"] == "Tractor beam"


async def test_mission_id_in_body_is_ignored(client, created_mission):
    res = await client.post(
        f"/api/missions/{created_mission['id']}/incidents",
        json={**INCIDENT, "mission": str(uuid4())},
    )
    assert res.json()["mission"] == created_mission["id"]


async def test_create_under_unknown_mission_is_created(client):
    mission_id = str(uuid4())
    res = await client.post(f"/api/missions/{mission_id}/incidents", json=INCIDENT)
    assert res.status_code == 201
    assert res.json()["mission"] == mission_id

    res = await client.get(f"/api/missions/{mission_id}/incidents")
    assert [i["title"] for i in res.json()] == [INCIDENT["title"]]


async def test_create_under_malformed_mission_is_not_found(client):
    res = await client.post("/api/missions/bogus/incidents", json=INCIDENT)
    assert res.status_code == 404
    assert res.json() == {"error": "Mission not found"}


async def test_list_incidents_for_mission(client, created_mission, created_incident, mission_payload):
    res = await client.post("/api/missions", json={**mission_payload, "name": "Other"})
    other_id = res.json()["id"]
    await client.post(f"/api/missions/{other_id}/incidents", json=INCIDENT)

    res = await client.get(f"/api/missions/{created_mission['id']}/incidents")

    assert res.status_code == 200
    assert res.json() == [created_incident]


async def test_list_incidents_for_unknown_mission_is_empty(client):
    res = await client.get(f"/api/missions/{uuid4()}/incidents")
    assert res.status_code == 200
    assert res.json() == []


async def test_list_incidents_for_malformed_mission_is_not_found(client):
    res = await client.get("/api/missions/bogus/incidents")
    assert res.status_code == 404


async def test_update_incident_keeps_mission(client, created_mission, created_incident):
    res = await client.put(
        f"/api/incidents/{created_incident['id']}",
        json={"status": "resolved", "mission": str(uuid4())},
    )
    assert res.status_code == 200
    assert res.json()["status"] == "resolved"
    assert res.json()["mission"] == created_mission["id"]


async def test_delete_incident_then_get_is_not_found(client, created_incident):
    res = await client.delete(f"/api/incidents/{created_incident['id']}")
    assert res.status_code == 200
    assert res.json() == {"message": "Incident deleted successfully"}

    res = await client.get(f"/api/incidents/{created_incident['id']}")
    assert res.status_code == 404
    assert res.json() == {"error": "Incident not found"}


@pytest.mark.parametrize("incident_id", [str(uuid4()), "bogus"])
async def test_missing_incident_is_not_found(client, incident_id):
    for method in ("GET", "PUT", "DELETE"):
        kwargs = {"json": {"title": "x"}} if method == "PUT" else {}
        res = await client.request(method, f"/api/incidents/{incident_id}", **kwargs)
        assert res.status_code == 404


async def test_deleting_mission_does_not_cascade(client, created_mission, created_incident):
    await client.delete(f"/api/missions/{created_mission['id']}")

    res = await client.get(f"/api/incidents/{created_incident['id']}")

    assert res.status_code == 200


async def test_mission_incident_list_is_not_maintained(client, created_mission, created_incident):
    res = await client.get(f"/api/missions/{created_mission['id']}")
    assert res.json()["incidents"] == []
