from django.test import SimpleTestCase

from catalog_client.forms import ProductForm
from catalog_client.state import (
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
from catalog_client.view import SortKey

from .fakes import make_record


class LoadingReducerTestCase(SimpleTestCase):
    """Test cases for load actions"""

    def test_load_started_sets_loading_and_clears_error(self):
        state = reduce(CatalogState(error='old'), LoadStarted())
        self.assertTrue(state.loading)
        self.assertIsNone(state.error)

    def test_load_succeeded_populates_products(self):
        products = (make_record('Rice'), make_record('Sugar'))
        state = reduce(CatalogState(loading=True), LoadSucceeded(products))
        self.assertFalse(state.loading)
        self.assertEqual(state.products, products)

    def test_load_failed_sets_error_and_leaves_products_empty(self):
        state = reduce(CatalogState(loading=True), LoadFailed('Failed to load products'))
        self.assertFalse(state.loading)
        self.assertEqual(state.error, 'Failed to load products')
        self.assertEqual(state.products, ())

    def test_reducer_does_not_mutate_input(self):
        original = CatalogState()
        reduce(original, SetQuery('tea'))
        self.assertEqual(original.query, '')

    def test_unknown_action(self):
        with self.assertRaises(TypeError):
            reduce(CatalogState(), object())


class NavigationReducerTestCase(SimpleTestCase):
    """Test cases for search, sort and page actions"""

    def setUp(self):
        products = tuple(make_record(f'Item {index}', minutes=index) for index in range(12))
        self.state = CatalogState(products=products)

    def test_next_and_previous_stay_in_range(self):
        state = reduce(self.state, PreviousPage())
        self.assertEqual(state.current_page, 1)
        for _ in range(5):
            state = reduce(state, NextPage())
        self.assertEqual(state.current_page, 3)
        state = reduce(state, PreviousPage())
        self.assertEqual(state.current_page, 2)

    def test_go_to_page_is_clamped(self):
        self.assertEqual(reduce(self.state, GoToPage(2)).current_page, 2)
        self.assertEqual(reduce(self.state, GoToPage(10)).current_page, 3)
        self.assertEqual(reduce(self.state, GoToPage(-1)).current_page, 1)

    def test_query_clamps_stale_page(self):
        """Test narrowing the search pulls the page back into range"""
        state = reduce(self.state, GoToPage(3))
        state = reduce(state, SetQuery('item 1'))
        # Item 1, Item 10, Item 11
        self.assertEqual(state.current_page, 1)

    def test_query_keeps_page_in_range(self):
        """Test the page is not reset when still valid"""
        state = reduce(self.state, GoToPage(2))
        state = reduce(state, SetQuery('item'))
        self.assertEqual(state.current_page, 2)

    def test_set_sort_by(self):
        state = reduce(self.state, SetSortBy('price'))
        self.assertIs(state.sort_by, SortKey.PRICE)
        with self.assertRaises(ValueError):
            reduce(self.state, SetSortBy('colour'))


class FormReducerTestCase(SimpleTestCase):
    """Test cases for the create/edit form actions"""

    def test_open_add_clears_form(self):
        state = CatalogState(form=ProductForm(name='stale', weight='1', price='2'))
        state = reduce(state, OpenAdd())
        self.assertTrue(state.form_open)
        self.assertIsNone(state.editing)
        self.assertEqual(state.form, ProductForm())

    def test_open_edit_prepopulates_form(self):
        record = make_record('Tea', weight=1.0, price=500.0)
        state = reduce(CatalogState(products=(record,)), OpenEdit(record))
        self.assertTrue(state.is_editing)
        self.assertEqual(state.form, ProductForm(name='Tea', weight='1', price='500'))

    def test_edit_field(self):
        state = reduce(reduce(CatalogState(), OpenAdd()), EditField('price', '12.5'))
        self.assertEqual(state.form.price, '12.5')
        with self.assertRaises(ValueError):
            reduce(state, EditField('colour', 'red'))

    def test_close_form(self):
        record = make_record('Tea')
        state = reduce(CatalogState(products=(record,)), OpenEdit(record))
        state = reduce(state, CloseForm())
        self.assertFalse(state.form_open)
        self.assertIsNone(state.editing)


class MutationReducerTestCase(SimpleTestCase):
    """Test cases for incremental mirror updates"""

    def setUp(self):
        self.rice = make_record('Rice', minutes=0)
        self.sugar = make_record('Sugar', minutes=1)
        self.state = CatalogState(products=(self.rice, self.sugar))

    def test_created_is_prepended_and_form_closed(self):
        tea = make_record('Tea', minutes=2)
        state = reduce(reduce(self.state, OpenAdd()), ProductCreated(tea))
        self.assertEqual(state.products, (tea, self.rice, self.sugar))
        self.assertFalse(state.form_open)

    def test_updated_replaces_by_id(self):
        renamed = make_record('Brown Rice', product_id=self.rice.id)
        state = reduce(reduce(self.state, OpenEdit(self.rice)), ProductUpdated(renamed))
        self.assertEqual(state.products, (renamed, self.sugar))
        self.assertFalse(state.form_open)

    def test_deleted_removes_by_id(self):
        state = reduce(self.state, ProductDeleted(self.rice.id))
        self.assertEqual(state.products, (self.sugar,))

    def test_deleting_last_item_of_last_page_moves_back(self):
        products = tuple(make_record(f'Item {index}') for index in range(6))
        state = reduce(CatalogState(products=products), GoToPage(2))
        state = reduce(state, ProductDeleted(products[-1].id))
        self.assertEqual(state.current_page, 1)

    def test_failure_sets_error_and_keeps_form_open(self):
        state = reduce(self.state, OpenAdd())
        state = reduce(state, MutationFailed('Failed to create product'))
        self.assertEqual(state.error, 'Failed to create product')
        self.assertTrue(state.form_open)

    def test_mutation_started_clears_error(self):
        state = reduce(CatalogState(error='Failed to delete product'), MutationStarted())
        self.assertIsNone(state.error)
