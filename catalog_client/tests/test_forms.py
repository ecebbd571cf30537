from django.test import SimpleTestCase

from catalog_client.exceptions import FormValidationError
from catalog_client.forms import (
    INVALID_FORM_MESSAGE,
    ProductForm,
    ProductPayload,
    form_from_record,
    number_to_text,
    parse_form,
)

from .fakes import make_record


class ParseFormTestCase(SimpleTestCase):
    """Test cases for turning form text into a payload"""

    def test_valid_form(self):
        payload = parse_form(ProductForm(name='  Tea ', weight='1', price=' 500.5 '))
        self.assertEqual(payload, ProductPayload(name='Tea', weight=1.0, price=500.5))
        self.assertEqual(payload.to_json(), {'name': 'Tea', 'weight': 1.0, 'price': 500.5})

    def test_blank_name_rejected(self):
        with self.assertRaisesMessage(FormValidationError, INVALID_FORM_MESSAGE):
            parse_form(ProductForm(name='   ', weight='1', price='1'))

    def test_non_numeric_rejected(self):
        invalid = [
            ('heavy', '1'), ('1', 'cheap'), ('', '1'), ('1', 'inf'), ('nan', '1'),
            ('1_000', '1'), ('1', '\u0661\u0662'), ('1e999', '1'),
        ]
        for weight, price in invalid:
            with self.subTest(weight=weight, price=price):
                with self.assertRaises(FormValidationError):
                    parse_form(ProductForm(name='Tea', weight=weight, price=price))

    def test_decimal_and_exponent_notation(self):
        payload = parse_form(ProductForm(name='Tea', weight='.5', price='1.5e3'))
        self.assertEqual(payload.weight, 0.5)
        self.assertEqual(payload.price, 1500.0)

    def test_negative_numbers_left_to_server(self):
        payload = parse_form(ProductForm(name='Tea', weight='-1', price='5'))
        self.assertEqual(payload.weight, -1.0)


class FormFromRecordTestCase(SimpleTestCase):
    """Test cases for pre-populating the edit form"""

    def test_numbers_become_text(self):
        form = form_from_record(make_record('Tea', weight=2.5, price=500.0))
        self.assertEqual(form, ProductForm(name='Tea', weight='2.5', price='500'))

    def test_number_to_text(self):
        self.assertEqual(number_to_text(1.0), '1')
        self.assertEqual(number_to_text(0.25), '0.25')
        self.assertEqual(number_to_text(7), '7')
        self.assertEqual(number_to_text(None), '')
