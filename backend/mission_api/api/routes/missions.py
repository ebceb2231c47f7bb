"""Mission Routes: /api/missions."""

from fastapi import APIRouter, Depends, status

from mission_api.api.dependencies import get_mission_controller
from mission_api.schemas.mission import (
    MissionCreate, MissionResponse, MissionUpdate,
)
from mission_api.services.mission_controller import MissionController

router = APIRouter(prefix="/api/missions", tags=["missions"])


@router.post(
    "", response_model=MissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_mission(
    body: MissionCreate,
    controller: MissionController = Depends(get_mission_controller),
):
    """Create a mission. Duplicate names are rejected with 400."""
    return await controller.create(body)


@router.get("", response_model=list[MissionResponse])
async def list_missions(
    controller: MissionController = Depends(get_mission_controller),
):
    return await controller.list_all()


@router.get("/{mission_id}", response_model=MissionResponse)
async def get_mission(
    mission_id: str,
    controller: MissionController = Depends(get_mission_controller),
):
    return await controller.get(mission_id)


@router.put("/{mission_id}", response_model=MissionResponse)
async def update_mission(
    mission_id: str,
    body: MissionUpdate,
    controller: MissionController = Depends(get_mission_controller),
):
    """Overwrite name, description, status and commander."""
    return await controller.update(mission_id, body)


@router.delete("/{mission_id}")
async def delete_mission(
    mission_id: str,
    controller: MissionController = Depends(get_mission_controller),
):
    return await controller.delete(mission_id)
