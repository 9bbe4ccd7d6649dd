# Demo data set loaded at startup when SEED_DATA is on.
import logging

from storefront.models.schemas import Order, Product, User

logger = logging.getLogger(__name__)

JOHN_ID = "550e8400-e29b-41d4-a716-446655440000"
JANE_ID = "550e8400-e29b-41d4-a716-446655440001"
IPHONE_ID = "660e8400-e29b-41d4-a716-446655440000"
MACBOOK_ID = "660e8400-e29b-41d4-a716-446655440001"
TSHIRT_ID = "660e8400-e29b-41d4-a716-446655440002"
DELIVERED_ORDER_ID = "770e8400-e29b-41d4-a716-446655440000"

USERS = [
    {"id": JOHN_ID, "name": "John Doe", "email": "john.doe@example.com", "age": 30,
     "createdAt": "2024-01-15T10:00:00Z", "updatedAt": "2024-01-15T10:00:00Z"},
    {"id": JANE_ID, "name": "Jane Smith", "email": "jane.smith@example.com", "age": 25,
     "createdAt": "2024-01-15T11:00:00Z", "updatedAt": "2024-01-15T11:00:00Z"},
]

PRODUCTS = [
    {"id": IPHONE_ID, "name": "iPhone 15 Pro", "description": "Latest iPhone with advanced features",
     "price": 999.99, "category": "electronics", "inStock": True,
     "createdAt": "2024-01-15T10:00:00Z", "updatedAt": "2024-01-15T10:00:00Z"},
    {"id": MACBOOK_ID, "name": "MacBook Air M2", "description": "Powerful laptop with M2 chip",
     "price": 1199.99, "category": "electronics", "inStock": True,
     "createdAt": "2024-01-15T10:00:00Z", "updatedAt": "2024-01-15T10:00:00Z"},
    {"id": TSHIRT_ID, "name": "Cotton T-Shirt", "description": "Comfortable cotton t-shirt",
     "price": 29.99, "category": "clothing", "inStock": True,
     "createdAt": "2024-01-15T10:00:00Z", "updatedAt": "2024-01-15T10:00:00Z"},
]

ORDERS = [
    {"id": DELIVERED_ORDER_ID, "userId": JOHN_ID,
     "products": [{"productId": IPHONE_ID, "quantity": 1, "price": 999.99}],
     "totalAmount": 999.99, "status": "delivered",
     "createdAt": "2024-01-15T12:00:00Z", "updatedAt": "2024-01-15T12:00:00Z"},
]


def load_demo_data(store) -> None:
    for data in USERS:
        store.users.insert(User.model_validate(data))
    for data in PRODUCTS:
        store.products.insert(Product.model_validate(data))
    for data in ORDERS:
        store.orders.insert(Order.model_validate(data))
    logger.info(
        f"Loaded demo data: {store.users.count()} users, "
        f"{store.products.count()} products, {store.orders.count()} orders"
    )
