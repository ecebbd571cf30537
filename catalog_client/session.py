"""
CatalogSession ties the pure state layer to the network.

It owns the current CatalogState, dispatches actions through reduce(),
and performs the gateway calls each user operation needs. Every failure
collapses into the single error slot of the state; nothing is retried.
"""

import logging

from django.conf import settings

from .exceptions import FormValidationError, GatewayError
from .formatting import format_record
from .forms import parse_form
from .state import (
    CatalogState,
    CloseForm,
    EditField,
    GoToPage,
    LoadFailed,
    LoadStarted,
    LoadSucceeded,
    MutationFailed,
    MutationStarted,
    NextPage,
    OpenAdd,
    OpenEdit,
    PreviousPage,
    ProductCreated,
    ProductDeleted,
    ProductUpdated,
    SetQuery,
    SetSortBy,
    reduce,
)
from .view import ITEMS_PER_PAGE, derive_view

logger = logging.getLogger(__name__)

LOAD_FAILED = 'Failed to load products'
CREATE_FAILED = 'Failed to create product'
UPDATE_FAILED = 'Failed to update product'
DELETE_FAILED = 'Failed to delete product'
DELETE_CONFIRMATION = 'Delete this product?'


class CatalogSession:
    """
    Interactive catalog state plus its effects.

    Args:
        gateway: ProductGateway used for every network call
        confirm: callable(message) -> bool, asked before deleting
        alert: callable(message), shows local validation problems
        state: optional starting CatalogState
    """

    def __init__(self, gateway, confirm, alert, state=None):
        self.gateway = gateway
        self.confirm = confirm
        self.alert = alert
        self.state = state or CatalogState(
            items_per_page=settings.CATALOG_CLIENT.get('ITEMS_PER_PAGE', ITEMS_PER_PAGE)
        )

    def dispatch(self, action):
        self.state = reduce(self.state, action)
        return self.state

    @property
    def view(self):
        return derive_view(self.state)

    def get(self, product_id):
        record = self.state.find(product_id)
        if record is None:
            raise KeyError(product_id)
        return record

    # Loading

    def load(self):
        """Replace the mirror with the server's full product list"""
        self.dispatch(LoadStarted())
        try:
            products = self.gateway.list_products()
        except GatewayError as exc:
            logger.error("Loading products failed: %s", exc)
            self.dispatch(LoadFailed(LOAD_FAILED))
            return False
        self.dispatch(LoadSucceeded(tuple(products)))
        return True

    # Derived view controls

    def search(self, query):
        return self.dispatch(SetQuery(query))

    def sort_by(self, key):
        return self.dispatch(SetSortBy(key))

    def next_page(self):
        return self.dispatch(NextPage())

    def previous_page(self):
        return self.dispatch(PreviousPage())

    def go_to_page(self, page):
        return self.dispatch(GoToPage(page))

    # Form

    def open_add(self):
        return self.dispatch(OpenAdd())

    def open_edit(self, product_id):
        return self.dispatch(OpenEdit(self.get(product_id)))

    def edit_field(self, field, value):
        return self.dispatch(EditField(field, value))

    def close_form(self):
        return self.dispatch(CloseForm())

    def save(self):
        """
        Submit the open form as a create or an update.

        Returns True when the server accepted it. Local validation
        failures alert the user and never reach the server; server
        failures set the error and leave the form open.
        """
        state = self.state
        if not state.form_open:
            return False

        try:
            payload = parse_form(state.form)
        except FormValidationError as exc:
            self.alert(str(exc))
            return False

        self.dispatch(MutationStarted())
        editing = state.editing
        try:
            if editing is not None:
                record = self.gateway.update_product(editing.id, payload)
            else:
                record = self.gateway.create_product(payload)
        except GatewayError as exc:
            logger.error("Saving product failed: %s", exc)
            self.dispatch(MutationFailed(UPDATE_FAILED if editing is not None else CREATE_FAILED))
            return False

        if editing is not None:
            self.dispatch(ProductUpdated(record))
        else:
            self.dispatch(ProductCreated(record))
        return True

    # Delete / show

    def delete(self, product_id):
        """Delete after explicit confirmation; returns True when deleted"""
        if not self.confirm(DELETE_CONFIRMATION):
            return False

        self.dispatch(MutationStarted())
        try:
            self.gateway.delete_product(product_id)
        except GatewayError as exc:
            logger.error("Deleting product %s failed: %s", product_id, exc)
            self.dispatch(MutationFailed(DELETE_FAILED))
            return False

        self.dispatch(ProductDeleted(product_id))
        return True

    def show(self, product_id):
        return format_record(self.get(product_id))
