from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from storefront.api.deps import get_store, strict_order_status
from storefront.api.responses import success
from storefront.db.store import Store
from storefront.models.schemas import OrderIn, OrderPatch, OrderReplace, OrderStatus
from storefront.services import orders_service
from storefront.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter()


@router.get("")
async def list_orders(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    user_id: Optional[UUID] = Query(None, alias="userId"),
    order_status: Optional[OrderStatus] = Query(None, alias="status"),
    min_amount: Optional[float] = Query(None, alias="minAmount", ge=0),
    max_amount: Optional[float] = Query(None, alias="maxAmount", ge=0),
    store: Store = Depends(get_store),
):
    orders, pagination = orders_service.list_orders(
        store,
        user_id=str(user_id) if user_id else None,
        status=order_status.value if order_status else None,
        min_amount=min_amount,
        max_amount=max_amount,
        page=page,
        limit=limit,
    )
    return success(orders, pagination=pagination)


@router.get("/{order_id}")
async def get_order(order_id: UUID, store: Store = Depends(get_store)):
    return success(orders_service.get_order(store, str(order_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_order(payload: OrderIn, store: Store = Depends(get_store)):
    order = orders_service.create_order(store, payload)
    return success(order, message="Order created successfully")


@router.put("/{order_id}")
async def replace_order(
    order_id: UUID,
    payload: OrderReplace,
    store: Store = Depends(get_store),
    strict: bool = Depends(strict_order_status),
):
    order = orders_service.replace_order(store, str(order_id), payload, strict_status=strict)
    return success(order, message="Order updated successfully")


@router.patch("/{order_id}")
async def update_order(
    order_id: UUID,
    patch: OrderPatch,
    store: Store = Depends(get_store),
    strict: bool = Depends(strict_order_status),
):
    order = orders_service.update_order(store, str(order_id), patch, strict_status=strict)
    return success(order, message="Order updated successfully")


@router.delete("/{order_id}")
async def delete_order(order_id: UUID, store: Store = Depends(get_store)):
    orders_service.delete_order(store, str(order_id))
    return success(message="Order deleted successfully")
