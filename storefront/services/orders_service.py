"""Order rules: composing a new order from the user and product stores,
replacing and patching existing ones, and the optional status transition table.
"""

import logging
from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from storefront.core.exceptions import NotFoundException, ValidationException
from storefront.db.store import Store
from storefront.models.schemas import (
    Order,
    OrderIn,
    OrderPatch,
    OrderReplace,
    OrderStatus,
    Pagination,
    Product,
)
from storefront.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, paginate

logger = logging.getLogger(__name__)

# Forward-only flow, enforced only when STRICT_ORDER_STATUS is on.
ALLOWED_TRANSITIONS: Dict[str, frozenset] = {
    OrderStatus.PENDING.value: frozenset({OrderStatus.PROCESSING.value, OrderStatus.CANCELLED.value}),
    OrderStatus.PROCESSING.value: frozenset({OrderStatus.SHIPPED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.SHIPPED.value: frozenset({OrderStatus.DELIVERED.value, OrderStatus.CANCELLED.value}),
    OrderStatus.DELIVERED.value: frozenset(),
    OrderStatus.CANCELLED.value: frozenset(),
}


def list_orders(
    store: Store,
    user_id: Optional[str] = None,
    status: Optional[str] = None,
    min_amount: Optional[float] = None,
    max_amount: Optional[float] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> Tuple[List[Order], Pagination]:
    orders = store.orders.get_all()
    if user_id is not None:
        orders = [o for o in orders if o.user_id == user_id]
    if status is not None:
        orders = [o for o in orders if o.status == status]
    if min_amount is not None:
        orders = [o for o in orders if o.total_amount >= min_amount]
    if max_amount is not None:
        orders = [o for o in orders if o.total_amount <= max_amount]
    return paginate(orders, page, limit)


def get_order(store: Store, order_id: str) -> Order:
    order = store.orders.get_by_id(order_id)
    if order is None:
        raise NotFoundException("Order not found")
    return order


def require_user(store: Store, user_id: str) -> None:
    if not store.users.exists(user_id):
        raise NotFoundException("User not found")


def require_product(store: Store, product_id: str) -> Product:
    product = store.products.get_by_id(product_id)
    if product is None:
        raise NotFoundException(f"Product with ID {product_id} not found")
    return product


def line_total(price: float, quantity: int) -> Decimal:
    return Decimal(str(price)) * quantity


def create_order(store: Store, payload: OrderIn) -> Order:
    """Validate the user and every product line, snapshot prices, then persist once.

    Nothing is written unless every check passes.
    """
    user_id = str(payload.user_id)
    require_user(store, user_id)

    total = Decimal(0)
    lines = []
    for index, item in enumerate(payload.products):
        product = require_product(store, str(item.product_id))
        if not product.in_stock:
            message = f"Product {product.name} is out of stock"
            raise ValidationException(
                message,
                errors=[{"field": f"products.{index}.productId", "message": message, "value": product.id}],
            )
        total += line_total(product.price, item.quantity)
        lines.append({"product_id": product.id, "quantity": item.quantity, "price": product.price})

    order = store.orders.create({
        "user_id": user_id,
        "products": lines,
        "total_amount": float(total),
        "status": OrderStatus.PENDING.value,
    })
    logger.info(f"Order {order.id} placed by user {user_id}: {len(lines)} line(s), total {order.total_amount}")
    return order


def check_status_transition(current: str, new: str) -> None:
    if new == current or new in ALLOWED_TRANSITIONS.get(current, frozenset()):
        return
    message = f"Cannot change order status from {current} to {new}"
    raise ValidationException(message, errors=[{"field": "status", "message": message, "value": new}])


def replace_order(store: Store, order_id: str, payload: OrderReplace, strict_status: bool = False) -> Order:
    """Full update. References are re-checked; stock, line prices and the total are taken as sent."""
    existing = get_order(store, order_id)
    require_user(store, str(payload.user_id))
    for item in payload.products:
        require_product(store, str(item.product_id))
    if strict_status and payload.status is not None:
        check_status_transition(existing.status, payload.status)
    return store.orders.update(order_id, payload.model_dump(mode="json", exclude_unset=True, exclude_none=True))


def update_order(store: Store, order_id: str, patch: OrderPatch, strict_status: bool = False) -> Order:
    """Apply the sent fields as they are. The total is never re-derived here."""
    existing = get_order(store, order_id)
    changes = patch.changes()
    if strict_status and "status" in changes:
        check_status_transition(existing.status, changes["status"])
    return store.orders.update(order_id, changes)


def delete_order(store: Store, order_id: str) -> None:
    if not store.orders.delete(order_id):
        raise NotFoundException("Order not found")
