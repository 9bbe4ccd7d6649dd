from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from storefront.api.deps import get_store
from storefront.api.responses import success
from storefront.db.store import Store
from storefront.models.schemas import Category, ProductIn, ProductPatch
from storefront.services import products_service
from storefront.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT

router = APIRouter()


@router.get("")
async def list_products(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
    name: Optional[str] = Query(None, min_length=1),
    category: Optional[Category] = Query(None),
    min_price: Optional[float] = Query(None, alias="minPrice", ge=0),
    max_price: Optional[float] = Query(None, alias="maxPrice", ge=0),
    in_stock: Optional[bool] = Query(None, alias="inStock"),
    store: Store = Depends(get_store),
):
    products, pagination = products_service.list_products(
        store,
        name=name,
        category=category,
        min_price=min_price,
        max_price=max_price,
        in_stock=in_stock,
        page=page,
        limit=limit,
    )
    return success(products, pagination=pagination)


@router.get("/{product_id}")
async def get_product(product_id: UUID, store: Store = Depends(get_store)):
    return success(products_service.get_product(store, str(product_id)))


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(payload: ProductIn, store: Store = Depends(get_store)):
    product = products_service.create_product(store, payload)
    return success(product, message="Product created successfully")


@router.put("/{product_id}")
async def replace_product(product_id: UUID, payload: ProductIn, store: Store = Depends(get_store)):
    product = products_service.replace_product(store, str(product_id), payload)
    return success(product, message="Product updated successfully")


@router.patch("/{product_id}")
async def update_product(product_id: UUID, patch: ProductPatch, store: Store = Depends(get_store)):
    product = products_service.update_product(store, str(product_id), patch)
    return success(product, message="Product updated successfully")


@router.delete("/{product_id}")
async def delete_product(product_id: UUID, store: Store = Depends(get_store)):
    products_service.delete_product(store, str(product_id))
    return success(message="Product deleted successfully")
