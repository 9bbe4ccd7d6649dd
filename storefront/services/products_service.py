from typing import List, Optional, Tuple

from storefront.core.exceptions import NotFoundException
from storefront.db.store import Store
from storefront.models.schemas import Pagination, Product, ProductIn, ProductPatch
from storefront.services.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, paginate


def list_products(
    store: Store,
    name: Optional[str] = None,
    category: Optional[str] = None,
    min_price: Optional[float] = None,
    max_price: Optional[float] = None,
    in_stock: Optional[bool] = None,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> Tuple[List[Product], Pagination]:
    products = store.products.get_all()
    if name:
        needle = name.lower()
        products = [p for p in products if needle in p.name.lower()]
    if category is not None:
        products = [p for p in products if p.category == category]
    if min_price is not None:
        products = [p for p in products if p.price >= min_price]
    if max_price is not None:
        products = [p for p in products if p.price <= max_price]
    if in_stock is not None:
        products = [p for p in products if p.in_stock is in_stock]
    return paginate(products, page, limit)


def get_product(store: Store, product_id: str) -> Product:
    product = store.products.get_by_id(product_id)
    if product is None:
        raise NotFoundException("Product not found")
    return product


def create_product(store: Store, payload: ProductIn) -> Product:
    return store.products.create(payload.model_dump(mode="json"))


def replace_product(store: Store, product_id: str, payload: ProductIn) -> Product:
    get_product(store, product_id)
    # optional fields left out of the body keep their stored value
    return store.products.update(product_id, payload.model_dump(mode="json", exclude_unset=True))


def update_product(store: Store, product_id: str, patch: ProductPatch) -> Product:
    get_product(store, product_id)
    return store.products.update(product_id, patch.changes())


def delete_product(store: Store, product_id: str) -> None:
    if not store.products.delete(product_id):
        raise NotFoundException("Product not found")
