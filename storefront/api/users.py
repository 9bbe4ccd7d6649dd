from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from storefront.api.deps import get_store
from storefront.api.responses import success
from storefront.db.store import Store
from storefront.models.schemas import Email, UserIn, UserPatch
from storefront.services import users_service
from storefront.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter()


@router.get("")
async def list_users(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    name: Optional[str] = Query(None, min_length=1, description="Case-insensitive substring of the name"),
    email: Optional[Email] = Query(None, description="Exact email match"),
    store: Store = Depends(get_store),
):
    users, pagination = users_service.list_users(store, name=name, email=email, page=page, limit=limit)
    return success(users, pagination=pagination)


@router.get("/{user_id}")
async def get_user(user_id: UUID, store: Store = Depends(get_store)):
    return success(users_service.get_user(store, str(user_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserIn, store: Store = Depends(get_store)):
    user = users_service.create_user(store, payload)
    return success(user, message="User created successfully")


@router.put("/{user_id}")
async def replace_user(user_id: UUID, payload: UserIn, store: Store = Depends(get_store)):
    user = users_service.replace_user(store, str(user_id), payload)
    return success(user, message="User updated successfully")


@router.patch("/{user_id}")
async def update_user(user_id: UUID, patch: UserPatch, store: Store = Depends(get_store)):
    user = users_service.update_user(store, str(user_id), patch)
    return success(user, message="User updated successfully")


@router.delete("/{user_id}")
async def delete_user(user_id: UUID, store: Store = Depends(get_store)):
    users_service.delete_user(store, str(user_id))
    return success(message="User deleted successfully")
