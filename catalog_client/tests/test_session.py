import json

from django.test import SimpleTestCase

from catalog_client.session import (
    CREATE_FAILED,
    DELETE_CONFIRMATION,
    DELETE_FAILED,
    LOAD_FAILED,
    UPDATE_FAILED,
    CatalogSession,
)
from catalog_client.forms import INVALID_FORM_MESSAGE

from .fakes import InMemoryProductGateway, make_record


class CatalogSessionTestCase(SimpleTestCase):
    """Test cases for CatalogSession effects against a fake gateway"""

    def setUp(self):
        self.rice = make_record('Rice', weight=5, price=1450, minutes=0)
        self.sugar = make_record('Sugar', weight=1, price=320, minutes=1)
        self.gateway = InMemoryProductGateway([self.rice, self.sugar])
        self.alerts = []
        self.confirmations = []
        self.answer = True
        self.session = CatalogSession(self.gateway, confirm=self._confirm, alert=self.alerts.append)

    def _confirm(self, message):
        self.confirmations.append(message)
        return self.answer

    def _fill(self, name, weight, price):
        self.session.edit_field('name', name)
        self.session.edit_field('weight', weight)
        self.session.edit_field('price', price)

    def test_load(self):
        self.assertTrue(self.session.load())
        self.assertFalse(self.session.state.loading)
        self.assertEqual(len(self.session.state.products), 2)
        self.assertEqual([r.name for r in self.session.view.items], ['Sugar', 'Rice'])

    def test_load_failure(self):
        self.gateway.fail = True
        self.assertFalse(self.session.load())
        self.assertEqual(self.session.state.error, LOAD_FAILED)
        self.assertEqual(self.session.state.products, ())
        self.assertFalse(self.session.state.loading)

    def test_create_appears_first_in_newest_view(self):
        """Test a created product shows at the top of page 1"""
        self.session.load()
        self.session.open_add()
        self._fill('Tea', '1', '500')

        self.assertTrue(self.session.save())

        view = self.session.view
        self.assertEqual(view.page, 1)
        self.assertEqual(view.items[0].name, 'Tea')
        self.assertEqual(view.items[0].price, 500)
        self.assertEqual(self.session.state.products[0].name, 'Tea')
        self.assertFalse(self.session.state.form_open)
        # The mirror is patched, not re-fetched
        self.assertEqual(self.gateway.calls, ['list', 'create'])

    def test_invalid_form_alerts_without_request(self):
        self.session.load()
        self.session.open_add()
        self._fill('  ', '1', '500')

        self.assertFalse(self.session.save())

        self.assertEqual(self.alerts, [INVALID_FORM_MESSAGE])
        self.assertEqual(self.gateway.calls, ['list'])
        self.assertTrue(self.session.state.form_open)

    def test_save_without_open_form(self):
        self.assertFalse(self.session.save())
        self.assertEqual(self.gateway.calls, [])

    def test_update_replaces_record(self):
        self.session.load()
        self.session.open_edit(self.rice.id)
        self.assertEqual(self.session.state.form.price, '1450')
        self.session.edit_field('price', '1500')

        self.assertTrue(self.session.save())

        updated = self.session.get(self.rice.id)
        self.assertEqual(updated.price, 1500)
        self.assertEqual(updated.created_at, self.rice.created_at)
        self.assertEqual(len(self.session.state.products), 2)

    def test_create_failure_keeps_form_open(self):
        self.session.load()
        self.session.open_add()
        self._fill('Tea', '1', '500')
        self.gateway.fail = True

        self.assertFalse(self.session.save())

        self.assertEqual(self.session.state.error, CREATE_FAILED)
        self.assertTrue(self.session.state.form_open)
        self.assertEqual(len(self.session.state.products), 2)

    def test_update_failure_message(self):
        self.session.load()
        self.session.open_edit(self.rice.id)
        self.gateway.fail = True
        self.assertFalse(self.session.save())
        self.assertEqual(self.session.state.error, UPDATE_FAILED)

    def test_error_cleared_when_next_operation_starts(self):
        self.gateway.fail = True
        self.session.load()
        self.gateway.fail = False
        self.session.open_add()
        self._fill('Tea', '1', '500')
        self.session.save()
        self.assertIsNone(self.session.state.error)

    def test_delete_requires_confirmation(self):
        self.session.load()
        self.answer = False

        self.assertFalse(self.session.delete(self.rice.id))

        self.assertEqual(self.confirmations, [DELETE_CONFIRMATION])
        self.assertNotIn('delete', self.gateway.calls)
        self.assertEqual(len(self.session.state.products), 2)

    def test_delete_removes_record(self):
        self.session.load()
        self.assertTrue(self.session.delete(self.rice.id))
        self.assertIsNone(self.session.state.find(self.rice.id))
        self.assertNotIn(self.rice.id, self.gateway.products)

    def test_delete_failure(self):
        self.session.load()
        self.gateway.fail = True
        self.assertFalse(self.session.delete(self.rice.id))
        self.assertEqual(self.session.state.error, DELETE_FAILED)
        self.assertIsNotNone(self.session.state.find(self.rice.id))

    def test_show(self):
        self.session.load()
        data = json.loads(self.session.show(self.sugar.id))
        self.assertEqual(data['id'], self.sugar.id)
        self.assertEqual(data['name'], 'Sugar')

    def test_show_unknown_record(self):
        self.session.load()
        with self.assertRaises(KeyError):
            self.session.show('missing')

    def test_search_sort_and_paging(self):
        self.session.load()
        self.session.search('ri')
        self.assertEqual([r.name for r in self.session.view.items], ['Rice'])
        self.session.search('')
        self.session.sort_by('price')
        self.assertEqual([r.name for r in self.session.view.items], ['Sugar', 'Rice'])
        self.session.next_page()
        self.assertEqual(self.session.state.current_page, 1)
