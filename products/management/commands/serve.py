import logging

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, connections

logger = logging.getLogger('products')


class Command(BaseCommand):
    help = 'Verifies the product store connection, then serves the API on PORT'

    def add_arguments(self, parser):
        parser.add_argument(
            '--addr',
            default='0.0.0.0',
            help='Interface to bind (default: 0.0.0.0)',
        )
        parser.add_argument(
            '--port',
            type=int,
            default=settings.PORT,
            help='Port to listen on (default: the PORT setting)',
        )
        parser.add_argument(
            '--noreload',
            action='store_true',
            help='Disable the auto-reloader',
        )

    def handle(self, *args, **options):
        try:
            connections['default'].ensure_connection()
        except DatabaseError as exc:
            logger.critical("Product store connection failed: %s", exc)
            raise CommandError(f'Product store connection failed: {exc}', returncode=1)

        self.stdout.write(self.style.SUCCESS('Product store connected'))

        address = f"{options['addr']}:{options['port']}"
        logger.info("Serving product API on %s", address)
        call_command(
            'runserver',
            address,
            use_reloader=not options['noreload'],
        )
