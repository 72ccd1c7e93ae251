"""User endpoints - users of the calling tenant."""

from fastapi import APIRouter, HTTPException, status

from src.hrdesk.api.dependencies import PageParams, UserManagerDep
from src.hrdesk.schemas.pagination import QueryPage
from src.hrdesk.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=QueryPage[UserRead], summary="List users")
async def list_users(manager: UserManagerDep, params: PageParams) -> QueryPage[UserRead]:
    page = await manager.list(params.search, page=params.page, page_limit=params.page_limit)
    return page.map(UserRead.model_validate)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create user",
    responses={409: {"description": "Email already registered in this tenant"}},
)
async def create_user(request: UserCreate, manager: UserManagerDep) -> UserRead:
    user = await manager.add(request)
    return UserRead.model_validate(user)


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get user",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: int, manager: UserManagerDep) -> UserRead:
    user = await manager.get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_id} not found",
        )
    return UserRead.model_validate(user)


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update user",
    responses={
        404: {"description": "User not found"},
        409: {"description": "Email already registered in this tenant"},
    },
)
async def update_user(user_id: int, request: UserUpdate, manager: UserManagerDep) -> UserRead:
    user = await manager.update(user_id, request)
    return UserRead.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete user")
async def delete_user(user_id: int, manager: UserManagerDep) -> None:
    await manager.delete(user_id)
