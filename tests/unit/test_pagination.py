import math

import pytest

from storefront.services.pagination import paginate


def test_defaults_to_first_page_of_ten():
    items, pagination = paginate(list(range(25)))

    assert items == list(range(10))
    assert (pagination.page, pagination.limit, pagination.total, pagination.total_pages) == (1, 10, 25, 3)


def test_page_past_the_end_is_empty():
    items, pagination = paginate(list(range(5)), page=3, limit=5)

    assert items == []
    assert pagination.total == 5
    assert pagination.total_pages == 1


def test_empty_sequence_has_zero_pages():
    items, pagination = paginate([], page=1, limit=10)

    assert items == []
    assert pagination.total_pages == 0


@pytest.mark.parametrize("total", [0, 1, 7, 10, 23])
@pytest.mark.parametrize("limit", [1, 3, 10, 100])
def test_pages_cover_everything_once(total, limit):
    items = list(range(total))
    _, first = paginate(items, 1, limit)
    assert first.total_pages == math.ceil(total / limit)

    collected = []
    for page in range(1, first.total_pages + 1):
        chunk, _ = paginate(items, page, limit)
        assert len(chunk) <= limit
        collected.extend(chunk)

    assert collected == items
