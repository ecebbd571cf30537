from django.core.management.base import BaseCommand

from products.models import Product
from products.store import ProductStore


SAMPLE_PRODUCTS = [
    {'name': 'Rice', 'weight': 5, 'price': 1450},
    {'name': 'Sugar', 'weight': 1, 'price': 320},
    {'name': 'Tea', 'weight': 0.4, 'price': 980},
    {'name': 'Dhal', 'weight': 1, 'price': 390},
    {'name': 'Coconut Oil', 'weight': 0.75, 'price': 1150},
    {'name': 'Wheat Flour', 'weight': 2, 'price': 520},
    {'name': 'Milk Powder', 'weight': 0.4, 'price': 1200},
    {'name': 'Salt', 'weight': 0.4, 'price': 90},
    {'name': 'Chilli Powder', 'weight': 0.1, 'price': 260},
    {'name': 'Sardines', 'weight': 0.425, 'price': 480},
    {'name': 'Green Gram', 'weight': 0.5, 'price': 410},
    {'name': 'Biscuits', 'weight': 0.2, 'price': 240},
]


class Command(BaseCommand):
    help = 'Seeds the product store with sample products'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Delete all existing products before seeding',
        )
        parser.add_argument(
            '--count',
            type=int,
            default=len(SAMPLE_PRODUCTS),
            help=f'Number of products to create (default: {len(SAMPLE_PRODUCTS)})',
        )

    def handle(self, *args, **options):
        if options['clear']:
            self.stdout.write(self.style.WARNING('Clearing existing products...'))
            Product.objects.all().delete()
            self.stdout.write(self.style.SUCCESS('Products cleared!'))

        count = max(options['count'], 0)
        store = ProductStore()

        for index in range(count):
            sample = SAMPLE_PRODUCTS[index % len(SAMPLE_PRODUCTS)]
            fields = dict(sample)
            # Repeat names get a batch suffix so rows stay distinguishable
            if index >= len(SAMPLE_PRODUCTS):
                fields['name'] = f"{sample['name']} #{index // len(SAMPLE_PRODUCTS) + 1}"
            product = store.create(fields)
            self.stdout.write(f'  Created product: {product.name}')

        self.stdout.write(self.style.SUCCESS(f'Seeded {count} products.'))
