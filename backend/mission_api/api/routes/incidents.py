"""Incident Routes: nested under missions for create/list, flat otherwise."""

from fastapi import APIRouter, Depends, status

from mission_api.api.dependencies import get_incident_controller
from mission_api.schemas.incident import (
    IncidentCreate, IncidentResponse, IncidentUpdate,
)
from mission_api.services.incident_controller import IncidentController

router = APIRouter(prefix="/api", tags=["incidents"])


@router.post(
    "/missions/{mission_id}/incidents",
    response_model=IncidentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_incident(
    mission_id: str,
    body: IncidentCreate,
    controller: IncidentController = Depends(get_incident_controller),
):
    """Report an incident against the mission id in the path."""
    return await controller.create(mission_id, body)


@router.get(
    "/missions/{mission_id}/incidents",
    response_model=list[IncidentResponse],
)
async def list_incidents(
    mission_id: str,
    controller: IncidentController = Depends(get_incident_controller),
):
    return await controller.list_by_mission(mission_id)


@router.get("/incidents/{incident_id}", response_model=IncidentResponse)
async def get_incident(
    incident_id: str,
    controller: IncidentController = Depends(get_incident_controller),
):
    return await controller.get(incident_id)


@router.put("/incidents/{incident_id}", response_model=IncidentResponse)
async def update_incident(
    incident_id: str,
    body: IncidentUpdate,
    controller: IncidentController = Depends(get_incident_controller),
):
    """Update title, description and/or status. The mission is fixed."""
    return await controller.update(incident_id, body)


@router.delete("/incidents/{incident_id}")
async def delete_incident(
    incident_id: str,
    controller: IncidentController = Depends(get_incident_controller),
):
    return await controller.delete(incident_id)
