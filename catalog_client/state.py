"""
Client state and the reducer that evolves it.

CatalogState is immutable. Every change goes through reduce(state, action),
which is pure: no I/O, no clock, no globals. Network effects live in
CatalogSession, which dispatches the actions below.

The current page is clamped to the available pages whenever products,
query or sort order change, so a stale page number never shows an
empty page.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

from .forms import FORM_FIELDS, ProductForm, form_from_record
from .records import ProductRecord
from .view import (
    ITEMS_PER_PAGE,
    SortKey,
    clamp_page,
    count_pages,
    filter_products,
)


@dataclass(frozen=True)
class CatalogState:
    products: Tuple[ProductRecord, ...] = ()
    query: str = ''
    sort_by: SortKey = SortKey.NEWEST
    current_page: int = 1
    items_per_page: int = ITEMS_PER_PAGE
    loading: bool = False
    error: Optional[str] = None
    form_open: bool = False
    editing: Optional[ProductRecord] = None
    form: ProductForm = field(default_factory=ProductForm)

    @property
    def is_editing(self):
        return self.editing is not None

    def find(self, product_id):
        """Mirrored record with the given id, or None"""
        for record in self.products:
            if record.id == product_id:
                return record
        return None


# Actions

@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class LoadSucceeded:
    products: Tuple[ProductRecord, ...]


@dataclass(frozen=True)
class LoadFailed:
    message: str


@dataclass(frozen=True)
class SetQuery:
    query: str


@dataclass(frozen=True)
class SetSortBy:
    sort_by: SortKey


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PreviousPage:
    pass


@dataclass(frozen=True)
class GoToPage:
    page: int


@dataclass(frozen=True)
class OpenAdd:
    pass


@dataclass(frozen=True)
class OpenEdit:
    record: ProductRecord


@dataclass(frozen=True)
class EditField:
    field: str
    value: str


@dataclass(frozen=True)
class CloseForm:
    pass


@dataclass(frozen=True)
class MutationStarted:
    pass


@dataclass(frozen=True)
class ProductCreated:
    record: ProductRecord


@dataclass(frozen=True)
class ProductUpdated:
    record: ProductRecord


@dataclass(frozen=True)
class ProductDeleted:
    product_id: str


@dataclass(frozen=True)
class MutationFailed:
    message: str


def total_pages(state):
    visible = filter_products(state.products, state.query)
    return count_pages(len(visible), state.items_per_page)


def _with_page_clamped(state):
    page = clamp_page(state.current_page, total_pages(state))
    if page == state.current_page:
        return state
    return replace(state, current_page=page)


def _closed_form(state):
    return replace(state, form_open=False, editing=None)


def reduce(state, action):
    """Return the state that results from applying action to state"""
    if isinstance(action, LoadStarted):
        return replace(state, loading=True, error=None)

    if isinstance(action, LoadSucceeded):
        return _with_page_clamped(
            replace(state, products=tuple(action.products), loading=False)
        )

    if isinstance(action, LoadFailed):
        return replace(state, loading=False, error=action.message)

    if isinstance(action, SetQuery):
        return _with_page_clamped(replace(state, query=action.query))

    if isinstance(action, SetSortBy):
        return _with_page_clamped(replace(state, sort_by=SortKey.parse(action.sort_by)))

    if isinstance(action, NextPage):
        return replace(
            state, current_page=clamp_page(state.current_page + 1, total_pages(state))
        )

    if isinstance(action, PreviousPage):
        return replace(
            state, current_page=clamp_page(state.current_page - 1, total_pages(state))
        )

    if isinstance(action, GoToPage):
        return replace(
            state, current_page=clamp_page(action.page, total_pages(state))
        )

    if isinstance(action, OpenAdd):
        return replace(state, form_open=True, editing=None, form=ProductForm())

    if isinstance(action, OpenEdit):
        return replace(
            state,
            form_open=True,
            editing=action.record,
            form=form_from_record(action.record),
        )

    if isinstance(action, EditField):
        if action.field not in FORM_FIELDS:
            raise ValueError(f"Unknown form field: {action.field!r}")
        return replace(state, form=replace(state.form, **{action.field: action.value}))

    if isinstance(action, CloseForm):
        return _closed_form(state)

    if isinstance(action, MutationStarted):
        return replace(state, error=None)

    if isinstance(action, ProductCreated):
        return _with_page_clamped(_closed_form(
            replace(state, products=(action.record,) + state.products)
        ))

    if isinstance(action, ProductUpdated):
        products = tuple(
            action.record if record.id == action.record.id else record
            for record in state.products
        )
        return _with_page_clamped(_closed_form(replace(state, products=products)))

    if isinstance(action, ProductDeleted):
        products = tuple(
            record for record in state.products if record.id != action.product_id
        )
        return _with_page_clamped(replace(state, products=products))

    if isinstance(action, MutationFailed):
        return replace(state, error=action.message)

    raise TypeError(f"Unknown action: {action!r}")
