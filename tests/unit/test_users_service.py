import uuid

import pytest

from storefront.core.exceptions import ConflictException, NotFoundException
from storefront.db import seed
from storefront.models.schemas import UserIn, UserPatch
from storefront.services import users_service


def user_in(name="Test User", email="test.user@example.com", age=25) -> UserIn:
    return UserIn(name=name, email=email, age=age)


def test_create_then_get(store):
    user = users_service.create_user(store, user_in())

    fetched = users_service.get_user(store, user.id)
    assert fetched == user
    assert (fetched.name, fetched.email, fetched.age) == ("Test User", "test.user@example.com", 25)


def test_duplicate_email_is_a_conflict(store):
    with pytest.raises(ConflictException) as exc:
        users_service.create_user(store, user_in(name="Someone Else", email="john.doe@example.com", age=60))

    assert exc.value.message == "User with this email already exists"
    assert store.users.count() == 2


def test_email_uniqueness_is_case_sensitive(store):
    user = users_service.create_user(store, user_in(email="John.Doe@example.com"))
    assert user.email == "John.Doe@example.com"


def test_get_unknown_user(store):
    with pytest.raises(NotFoundException):
        users_service.get_user(store, str(uuid.uuid4()))


def test_replace_keeps_own_email(store):
    user = users_service.replace_user(store, seed.JOHN_ID, user_in(name="John Q", email="john.doe@example.com", age=31))
    assert (user.name, user.age) == ("John Q", 31)


def test_replace_to_taken_email_conflicts(store):
    with pytest.raises(ConflictException):
        users_service.replace_user(store, seed.JOHN_ID, user_in(email="jane.smith@example.com"))


def test_replace_unknown_user(store):
    with pytest.raises(NotFoundException):
        users_service.replace_user(store, str(uuid.uuid4()), user_in())


def test_patch_updates_only_given_fields(store):
    before = users_service.get_user(store, seed.JANE_ID)
    user = users_service.update_user(store, seed.JANE_ID, UserPatch(age=26))

    assert user.age == 26
    assert (user.name, user.email) == (before.name, before.email)


def test_patch_to_taken_email_conflicts(store):
    with pytest.raises(ConflictException):
        users_service.update_user(store, seed.JANE_ID, UserPatch(email="john.doe@example.com"))


def test_list_filters_by_name_and_email(store):
    users, pagination = users_service.list_users(store, name="JOHN")
    assert [u.id for u in users] == [seed.JOHN_ID]
    assert pagination.total == 1

    users, _ = users_service.list_users(store, email="jane.smith@example.com")
    assert [u.id for u in users] == [seed.JANE_ID]


def test_delete_user(store):
    users_service.delete_user(store, seed.JANE_ID)

    with pytest.raises(NotFoundException):
        users_service.delete_user(store, seed.JANE_ID)


def test_deleting_user_leaves_their_orders(store):
    users_service.delete_user(store, seed.JOHN_ID)

    assert store.orders.get_by_id(seed.DELIVERED_ORDER_ID).user_id == seed.JOHN_ID
