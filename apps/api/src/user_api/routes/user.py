"""User API routes."""

from fastapi import APIRouter, Depends, Query, Response, status
from usercore.models.dto import CreateUserRequest, UpdateUserRequest, UserResponse
from usercore.services.user_service import UserService

from user_api.models.user import UserPatch
from user_api.services import get_user_service

router = APIRouter(prefix="/users", tags=["users"], redirect_slashes=False)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    request: CreateUserRequest, service: UserService = Depends(get_user_service)
) -> UserResponse:
    return await service.create(request)


@router.get("", response_model=list[UserResponse])
@router.get("/", response_model=list[UserResponse])
async def list_users(
    q: str | None = Query(None, description="Case-insensitive name or email fragment"),
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    if q is not None:
        return await service.search(q)
    return await service.list_users()


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserResponse:
    return await service.get_by_id(user_id)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str, patch: UserPatch, service: UserService = Depends(get_user_service)
) -> UserResponse:
    return await service.update(UpdateUserRequest(user_id=user_id, name=patch.name, email=patch.email))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> Response:
    await service.delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
