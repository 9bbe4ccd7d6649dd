from fastapi import Request

from storefront.core.config import Settings
from storefront.db.store import Store


def get_store(request: Request) -> Store:
    return request.app.state.store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def strict_order_status(request: Request) -> bool:
    return get_settings(request).STRICT_ORDER_STATUS
