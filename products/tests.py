import uuid
from datetime import timedelta
from io import StringIO
from unittest import mock

from django.core.management import call_command
from django.core.management.base import CommandError
from django.db import DatabaseError
from django.test import TestCase
from django.utils import timezone
from rest_framework.test import APITestCase, APIClient
from rest_framework import status

from .exceptions import ProductNotFound
from .models import Product
from .store import ProductStore


class ProductModelTest(TestCase):
    """Test cases for Product model"""

    def setUp(self):
        self.product = Product.objects.create(name="Rice", weight=5, price=1450)

    def test_product_creation(self):
        """Test store assigns identifier and timestamps"""
        self.assertIsInstance(self.product.id, uuid.UUID)
        self.assertIsNotNone(self.product.created_at)
        self.assertIsNotNone(self.product.updated_at)

    def test_product_str(self):
        """Test product string representation"""
        self.assertEqual(str(self.product), "Rice")


class ProductStoreTest(TestCase):
    """Test cases for the ProductStore capability"""

    def setUp(self):
        self.store = ProductStore()

    def test_create_assigns_id_and_timestamps(self):
        product = self.store.create({'name': 'Tea', 'weight': 1, 'price': 500})
        self.assertEqual(product.name, 'Tea')
        self.assertEqual(product.weight, 1)
        self.assertEqual(product.price, 500)
        self.assertIsNotNone(product.id)
        self.assertIsNotNone(product.created_at)

    def test_create_assigns_unique_ids(self):
        first = self.store.create({'name': 'Tea', 'weight': 1, 'price': 500})
        second = self.store.create({'name': 'Tea', 'weight': 1, 'price': 500})
        self.assertNotEqual(first.id, second.id)

    def test_update_replaces_fields_and_keeps_identity(self):
        product = self.store.create({'name': 'Tea', 'weight': 1, 'price': 500})
        past = timezone.now() - timedelta(days=1)
        Product.objects.filter(pk=product.pk).update(updated_at=past)
        created_at = product.created_at

        updated = self.store.update(product.pk, {'name': 'Green Tea', 'weight': 2, 'price': 750})

        self.assertEqual(updated.id, product.id)
        self.assertEqual(updated.name, 'Green Tea')
        self.assertEqual(updated.weight, 2)
        self.assertEqual(updated.price, 750)
        updated.refresh_from_db()
        self.assertEqual(updated.created_at, created_at)
        self.assertGreater(updated.updated_at, past)

    def test_update_missing_product_raises(self):
        with self.assertRaises(ProductNotFound):
            self.store.update(uuid.uuid4(), {'name': 'X', 'weight': 1, 'price': 1})
        self.assertEqual(Product.objects.count(), 0)

    def test_get_malformed_id_raises_not_found(self):
        with self.assertRaises(ProductNotFound):
            self.store.get('not-a-uuid')

    def test_delete_is_idempotent(self):
        product = self.store.create({'name': 'Tea', 'weight': 1, 'price': 500})
        self.assertTrue(self.store.delete(product.pk))
        self.assertFalse(self.store.delete(product.pk))
        self.assertFalse(self.store.delete('not-a-uuid'))
        self.assertEqual(Product.objects.count(), 0)


class ProductAPITest(APITestCase):
    """Test cases for Product API endpoints"""

    def setUp(self):
        self.client = APIClient()
        self.product = Product.objects.create(name="Rice", weight=5, price=1450)

    def test_health_check(self):
        """Test the API health check"""
        response = self.client.get('/api')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('message', response.data)

    def test_schema_document(self):
        """Test the OpenAPI document is served"""
        response = self.client.get('/api/schema/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_list_products(self):
        """Test listing products returns a plain array"""
        Product.objects.create(name="Sugar", weight=1, price=320)
        response = self.client.get('/api/products')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIsInstance(response.data, list)
        self.assertEqual(len(response.data), 2)

    def test_list_products_trailing_slash(self):
        """Test both route spellings are served"""
        response = self.client.get('/api/products/')
        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_product_json_shape(self):
        """Test wire representation of a product"""
        response = self.client.get(f'/api/products/{self.product.id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            set(response.json().keys()),
            {'id', 'name', 'weight', 'price', 'createdAt', 'updatedAt'}
        )
        self.assertEqual(response.json()['name'], 'Rice')
        self.assertTrue(response.json()['createdAt'].endswith('Z'))

    def test_create_product(self):
        """Test creating product returns the stored document"""
        data = {'name': '  Tea  ', 'weight': 1, 'price': 500}
        response = self.client.post('/api/products', data)
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        body = response.json()
        self.assertEqual(body['name'], 'Tea')
        self.assertEqual(body['weight'], 1)
        self.assertEqual(body['price'], 500)
        self.assertTrue(body['id'])
        self.assertTrue(body['createdAt'])
        self.assertEqual(Product.objects.count(), 2)

    def test_create_product_zero_values(self):
        """Test zero weight and price are valid"""
        response = self.client.post('/api/products', {'name': 'Sample', 'weight': 0, 'price': 0})
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_create_product_empty_name(self):
        """Test blank name is rejected"""
        response = self.client.post('/api/products', {'name': '   ', 'weight': 1, 'price': 1})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('name', response.data)
        self.assertEqual(Product.objects.count(), 1)

    def test_create_product_negative_weight(self):
        """Test negative weight is rejected"""
        response = self.client.post('/api/products', {'name': 'Tea', 'weight': -1, 'price': 1})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['weight'][0], 'Weight cannot be negative')
        self.assertEqual(Product.objects.count(), 1)

    def test_create_product_negative_price(self):
        """Test negative price is rejected"""
        response = self.client.post('/api/products', {'name': 'Tea', 'weight': 1, 'price': -5})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['price'][0], 'Price cannot be negative')
        self.assertEqual(Product.objects.count(), 1)

    def test_create_product_missing_fields(self):
        """Test every field is required"""
        response = self.client.post('/api/products', {})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['name'][0], 'Name is required')
        self.assertEqual(response.data['weight'][0], 'Weight is required')
        self.assertEqual(response.data['price'][0], 'Price is required')

    def test_create_product_non_numeric(self):
        """Test non-numeric weight is rejected"""
        response = self.client.post('/api/products', {'name': 'Tea', 'weight': 'heavy', 'price': 1})
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('weight', response.data)

    def test_update_product(self):
        """Test updating product replaces fields and keeps identity"""
        created_at = self.client.get(f'/api/products/{self.product.id}').json()['createdAt']
        data = {'name': 'Basmati Rice', 'weight': 2, 'price': 1800}
        response = self.client.put(f'/api/products/{self.product.id}', data)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        body = response.json()
        self.assertEqual(body['id'], str(self.product.id))
        self.assertEqual(body['name'], 'Basmati Rice')
        self.assertEqual(body['createdAt'], created_at)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, 1800)

    def test_update_missing_product(self):
        """Test updating a missing product is a 404"""
        response = self.client.put(
            f'/api/products/{uuid.uuid4()}',
            {'name': 'Ghost', 'weight': 1, 'price': 1}
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data, {'error': 'Product not found'})
        self.assertFalse(Product.objects.filter(name='Ghost').exists())

    def test_update_product_validation(self):
        """Test update rejects invalid values and keeps the record"""
        response = self.client.put(
            f'/api/products/{self.product.id}',
            {'name': 'Rice', 'weight': 1, 'price': -1}
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.product.refresh_from_db()
        self.assertEqual(self.product.price, 1450)

    def test_partial_update_not_allowed(self):
        """Test PATCH is not exposed"""
        response = self.client.patch(f'/api/products/{self.product.id}', {'price': 1})
        self.assertEqual(response.status_code, status.HTTP_405_METHOD_NOT_ALLOWED)

    def test_delete_product(self):
        """Test deleting product"""
        response = self.client.delete(f'/api/products/{self.product.id}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['deleted'])
        listing = self.client.get('/api/products').json()
        self.assertNotIn(str(self.product.id), [p['id'] for p in listing])

    def test_delete_missing_product(self):
        """Test deleting a missing product still acknowledges"""
        response = self.client.delete(f'/api/products/{uuid.uuid4()}')
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertFalse(response.data['deleted'])
        self.assertEqual(Product.objects.count(), 1)

    def test_retrieve_malformed_id(self):
        """Test malformed identifiers are 404"""
        response = self.client.get('/api/products/not-a-uuid')
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_store_fault_is_503(self):
        """Test store faults surface as a generic 5xx"""
        with mock.patch.object(ProductStore, 'list', side_effect=DatabaseError('down')):
            response = self.client.get('/api/products')
        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data, {'error': 'Product store unavailable'})


class ProductCommandTest(TestCase):
    """Test cases for product management commands"""

    def test_seed_products(self):
        out = StringIO()
        call_command('seed_products', '--count', '3', stdout=out)
        self.assertEqual(Product.objects.count(), 3)
        self.assertIn('Seeded 3 products.', out.getvalue())

    def test_seed_products_clear(self):
        Product.objects.create(name="Old", weight=1, price=1)
        call_command('seed_products', '--clear', '--count', '2', stdout=StringIO())
        self.assertEqual(Product.objects.count(), 2)
        self.assertFalse(Product.objects.filter(name="Old").exists())

    def test_serve_fails_fast_without_store(self):
        with mock.patch('products.management.commands.serve.connections') as conns:
            conns.__getitem__.return_value.ensure_connection.side_effect = DatabaseError('refused')
            with self.assertRaises(CommandError):
                call_command('serve', stdout=StringIO())

    def test_serve_runs_server_on_port(self):
        with mock.patch('products.management.commands.serve.call_command') as run:
            call_command('serve', '--port', '6001', '--noreload', stdout=StringIO())
        run.assert_called_once_with('runserver', '0.0.0.0:6001', use_reloader=False)
