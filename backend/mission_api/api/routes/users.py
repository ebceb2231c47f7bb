"""User Routes: /api/users."""

from fastapi import APIRouter, Depends, status

from mission_api.api.dependencies import get_user_controller
from mission_api.schemas.user import UserCreate, UserResponse, UserUpdate
from mission_api.services.user_controller import UserController

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post(
    "", response_model=UserResponse, status_code=status.HTTP_201_CREATED,
)
async def create_user(
    body: UserCreate,
    controller: UserController = Depends(get_user_controller),
):
    return await controller.create(body)


@router.get("", response_model=list[UserResponse])
async def list_users(controller: UserController = Depends(get_user_controller)):
    return await controller.list_all()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    controller: UserController = Depends(get_user_controller),
):
    return await controller.get(user_id)


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    body: UserUpdate,
    controller: UserController = Depends(get_user_controller),
):
    return await controller.update(user_id, body)


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    controller: UserController = Depends(get_user_controller),
):
    return await controller.delete(user_id)
