from fastapi import APIRouter, Depends

from shared.config import settings
from shared.dependencies import get_user_repository
from users.application.services import delete_user, list_users, register_user, update_user
from users.domain.repository import UserRepository
from users.interfaces.schemas import (
    MessageResponse,
    SuccessResponse,
    UserPayload,
    UserResponse,
)

router = APIRouter(prefix="/api/users", tags=["users"])

PUBLIC = {"x-access": "public"}
PRIVATE = {"x-access": "private"}


@router.get("/", response_model=list[UserResponse], openapi_extra=PUBLIC)
async def list_all(repo: UserRepository = Depends(get_user_repository)):
    """Get registered users."""
    return await list_users(repo, empty_is_error=settings.EMPTY_LIST_IS_ERROR)


@router.post("/", response_model=SuccessResponse, status_code=201, openapi_extra=PUBLIC)
async def register(body: UserPayload, repo: UserRepository = Depends(get_user_repository)):
    """Register a user."""
    await register_user(
        repo,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
    )
    return SuccessResponse(success="User added successfully")


@router.put("/{user_id}", response_model=UserResponse, openapi_extra=PRIVATE)
async def update(
    user_id: str,
    body: UserPayload,
    repo: UserRepository = Depends(get_user_repository),
):
    """Update a user; only the supplied fields change."""
    return await update_user(
        repo,
        user_id=user_id,
        first_name=body.first_name,
        last_name=body.last_name,
        email=body.email,
        password=body.password,
    )


@router.delete("/{user_id}", response_model=MessageResponse, openapi_extra=PRIVATE)
async def delete(user_id: str, repo: UserRepository = Depends(get_user_repository)):
    """Delete a user."""
    await delete_user(repo, user_id=user_id)
    return MessageResponse(msg="User removed")
