import uuid

from storefront.db import seed
from storefront.db.store import EntityStore, Store
from storefront.models.schemas import User


def make_users() -> EntityStore:
    return EntityStore(User, "user")


def test_create_generates_uuid_and_equal_timestamps():
    users = make_users()
    user = users.create({"name": "John Doe", "email": "j@x.com", "age": 30})

    assert uuid.UUID(user.id)
    assert user.created_at == user.updated_at
    assert users.get_by_id(user.id) == user
    assert users.count() == 1


def test_get_all_returns_copy_in_insertion_order():
    users = make_users()
    first = users.create({"name": "First", "email": "first@x.com", "age": 20})
    second = users.create({"name": "Second", "email": "second@x.com", "age": 21})

    snapshot = users.get_all()
    snapshot.clear()

    assert [u.id for u in users.get_all()] == [first.id, second.id]


def test_get_by_id_unknown_is_none():
    assert make_users().get_by_id(str(uuid.uuid4())) is None


def test_update_merges_fields_and_refreshes_updated_at():
    users = make_users()
    user = users.create({"name": "John Doe", "email": "j@x.com", "age": 30})

    updated = users.update(user.id, {"age": 31})

    assert updated.age == 31
    assert updated.name == "John Doe"
    assert updated.email == "j@x.com"
    assert updated.id == user.id
    assert updated.created_at == user.created_at
    assert updated.updated_at >= user.updated_at
    assert users.get_by_id(user.id).age == 31


def test_update_cannot_replace_identity_fields():
    users = make_users()
    user = users.create({"name": "John Doe", "email": "j@x.com", "age": 30})

    updated = users.update(user.id, {"id": "other", "created_at": "2000-01-01T00:00:00Z"})

    assert updated.id == user.id
    assert updated.created_at == user.created_at


def test_update_unknown_is_none():
    assert make_users().update(str(uuid.uuid4()), {"age": 40}) is None


def test_delete_reports_whether_found():
    users = make_users()
    user = users.create({"name": "John Doe", "email": "j@x.com", "age": 30})

    assert users.delete(user.id) is True
    assert users.delete(user.id) is False
    assert users.get_by_id(user.id) is None


def test_seeded_store_holds_demo_data():
    store = Store.seeded()

    assert store.users.count() == 2
    assert store.products.count() == 3
    assert store.orders.count() == 1
    order = store.orders.get_by_id(seed.DELIVERED_ORDER_ID)
    assert order.user_id == seed.JOHN_ID
    assert order.status == "delivered"
    assert order.products[0].product_id == seed.IPHONE_ID


def test_reset_clears_every_collection():
    store = Store.seeded()
    store.reset()

    assert (store.users.count(), store.products.count(), store.orders.count()) == (0, 0, 0)
