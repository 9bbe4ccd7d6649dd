import math
from typing import List, Sequence, Tuple, TypeVar

from storefront.models.schemas import Pagination

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

T = TypeVar("T")


def paginate(items: Sequence[T], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT) -> Tuple[List[T], Pagination]:
    """Slice an already filtered sequence; the totals describe the whole sequence."""
    total = len(items)
    start = (page - 1) * limit
    pagination = Pagination(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )
    return list(items[start:start + limit]), pagination
