"""
Derived view of the product mirror.

The view is a pure projection of client state: filter by the search
query, sort by the selected key, then cut one page. It is recomputed
from scratch on every state change and never mutates its input.
"""

import math
from dataclasses import dataclass
from datetime import datetime, timezone as dt_timezone
from enum import Enum
from typing import Tuple

from .records import ProductRecord, iso_timestamp

ITEMS_PER_PAGE = 5

_OLDEST = datetime.min.replace(tzinfo=dt_timezone.utc)


class SortKey(str, Enum):
    NEWEST = 'createdAt'
    PRICE = 'price'
    WEIGHT = 'weight'

    @classmethod
    def parse(cls, value):
        """Accept an enum member, its value, or its lower-case name"""
        if isinstance(value, cls):
            return value
        text = str(value).strip()
        for member in cls:
            if text == member.value or text.lower() == member.name.lower():
                return member
        raise ValueError(f"Unknown sort key: {value!r}")


@dataclass(frozen=True)
class CatalogView:
    items: Tuple[ProductRecord, ...]
    page: int
    total_pages: int
    total_count: int

    @property
    def has_previous(self):
        return self.page > 1

    @property
    def has_next(self):
        return self.page < self.total_pages

    @property
    def is_empty(self):
        return self.total_count == 0


def matches_query(record, query):
    """
    True when the trimmed, lower-cased query occurs in the record name
    or in its creation timestamp rendered as ISO-8601.
    """
    needle = query.strip().lower()
    if not needle:
        return True
    if needle in (record.name or '').lower():
        return True
    return needle in iso_timestamp(record.created_at).lower()


def filter_products(products, query):
    return [record for record in products if matches_query(record, query)]


def sort_products(products, sort_by):
    """Stable sort: price or weight ascending, otherwise newest first"""
    sort_by = SortKey.parse(sort_by)
    if sort_by is SortKey.PRICE:
        return sorted(products, key=lambda record: record.price)
    if sort_by is SortKey.WEIGHT:
        return sorted(products, key=lambda record: record.weight)
    return sorted(
        products,
        key=lambda record: record.created_at or _OLDEST,
        reverse=True,
    )


def count_pages(total_count, items_per_page=ITEMS_PER_PAGE):
    """Number of pages for total_count items; at least one, even when empty"""
    return max(1, math.ceil(total_count / items_per_page))


def clamp_page(page, total_pages):
    return min(max(1, page), total_pages)


def paginate(products, page, items_per_page=ITEMS_PER_PAGE):
    total_pages = count_pages(len(products), items_per_page)
    page = clamp_page(page, total_pages)
    start = (page - 1) * items_per_page
    return CatalogView(
        items=tuple(products[start:start + items_per_page]),
        page=page,
        total_pages=total_pages,
        total_count=len(products),
    )


def visible_products(products, query, sort_by):
    """Filtered and sorted products, before pagination"""
    return sort_products(filter_products(products, query), sort_by)


def derive_view(state, page=None):
    """Project a CatalogState onto the page the user sees"""
    visible = visible_products(state.products, state.query, state.sort_by)
    return paginate(
        visible,
        state.current_page if page is None else page,
        state.items_per_page,
    )
