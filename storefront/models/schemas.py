from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Dict, FrozenSet, List, Optional
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class Category(str, Enum):
    ELECTRONICS = "electronics"
    CLOTHING = "clothing"
    BOOKS = "books"
    HOME = "home"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


def check_email(value: str) -> str:
    """Validate the address format but keep the string exactly as submitted."""
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as exc:
        raise ValueError(f"value is not a valid email address: {exc}") from exc
    return value


Email = Annotated[str, AfterValidator(check_email)]


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python. Both spellings are accepted on input."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
        use_enum_values=True,
    )


class PatchModel(CamelModel):
    """Partial update body: every field optional, only fields actually sent are applied.

    An explicit ``null`` is refused unless the field is listed in ``nullable_fields``.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_nulls(self):
        for name in self.model_fields_set:
            if getattr(self, name) is None and name not in self.nullable_fields:
                raise ValueError(f"{to_camel(name)} cannot be null")
        return self

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_unset=True)


# --- Stored records ---

class Record(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    created_at: datetime
    updated_at: datetime


class User(Record):
    name: str
    email: str
    age: int


class Product(Record):
    name: str
    description: Optional[str] = None
    price: float
    category: Category
    in_stock: bool = True


class OrderLine(CamelModel):
    """Snapshot of one product line taken when the order was written."""

    model_config = ConfigDict(frozen=True)

    product_id: str
    quantity: int
    price: float


class Order(Record):
    user_id: str
    products: List[OrderLine]
    total_amount: float
    status: OrderStatus = OrderStatus.PENDING


# --- Users ---

class UserIn(CamelModel):
    name: str = Field(..., min_length=2, max_length=50)
    email: Email
    age: int = Field(..., ge=18, le=120)


class UserPatch(PatchModel):
    name: Optional[str] = Field(None, min_length=2, max_length=50)
    email: Optional[Email] = None
    age: Optional[int] = Field(None, ge=18, le=120)


# --- Products ---

class ProductIn(CamelModel):
    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: float = Field(..., ge=0)
    category: Category
    in_stock: bool = True


class ProductPatch(PatchModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"description"})

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, max_length=500)
    price: Optional[float] = Field(None, ge=0)
    category: Optional[Category] = None
    in_stock: Optional[bool] = None


# --- Orders ---

class OrderLineIn(CamelModel):
    product_id: UUID
    quantity: int = Field(..., ge=1)


class PricedOrderLineIn(OrderLineIn):
    price: float = Field(..., ge=0)


class OrderIn(CamelModel):
    user_id: UUID
    products: List[OrderLineIn] = Field(..., min_length=1)


class OrderReplace(CamelModel):
    user_id: UUID
    products: List[PricedOrderLineIn] = Field(..., min_length=1)
    total_amount: float = Field(..., ge=0)
    status: Optional[OrderStatus] = None


class OrderPatch(PatchModel):
    user_id: Optional[UUID] = None
    products: Optional[List[PricedOrderLineIn]] = Field(None, min_length=1)
    total_amount: Optional[float] = Field(None, ge=0)
    status: Optional[OrderStatus] = None


# --- Envelopes ---

class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
