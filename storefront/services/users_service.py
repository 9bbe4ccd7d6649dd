from typing import List, Optional, Tuple

from storefront.core.exceptions import ConflictException, NotFoundException
from storefront.db.store import Store
from storefront.models.schemas import Pagination, User, UserIn, UserPatch
from storefront.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, paginate

DUPLICATE_EMAIL = "User with this email already exists"


def list_users(
    store: Store,
    name: Optional[str] = None,
    email: Optional[str] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> Tuple[List[User], Pagination]:
    users = store.users.get_all()
    if name:
        needle = name.lower()
        users = [u for u in users if needle in u.name.lower()]
    if email:
        users = [u for u in users if u.email == email]
    return paginate(users, page, limit)


def get_user(store: Store, user_id: str) -> User:
    user = store.users.get_by_id(user_id)
    if user is None:
        raise NotFoundException("User not found")
    return user


def ensure_email_available(store: Store, email: str, exclude_id: Optional[str] = None) -> None:
    # exact, case-sensitive match
    for user in store.users.get_all():
        if user.email == email and user.id != exclude_id:
            raise ConflictException(DUPLICATE_EMAIL)


def create_user(store: Store, payload: UserIn) -> User:
    ensure_email_available(store, payload.email)
    return store.users.create(payload.model_dump(mode="json"))


def replace_user(store: Store, user_id: str, payload: UserIn) -> User:
    existing = get_user(store, user_id)
    if payload.email != existing.email:
        ensure_email_available(store, payload.email, exclude_id=user_id)
    return store.users.update(user_id, payload.model_dump(mode="json"))


def update_user(store: Store, user_id: str, patch: UserPatch) -> User:
    existing = get_user(store, user_id)
    changes = patch.changes()
    if "email" in changes and changes["email"] != existing.email:
        ensure_email_available(store, changes["email"], exclude_id=user_id)
    return store.users.update(user_id, changes)


def delete_user(store: Store, user_id: str) -> None:
    # orders keep their userId; line data is a snapshot, not a join
    if not store.users.delete(user_id):
        raise NotFoundException("User not found")
