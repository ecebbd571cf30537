from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from catalog_client.exceptions import GatewayError
from catalog_client.gateway import HttpProductGateway
from catalog_client.terminal import CatalogTerminal


class Command(BaseCommand):
    help = 'Browse and edit the product catalog through the REST API'

    def add_arguments(self, parser):
        parser.add_argument(
            '--api-url',
            default=settings.CATALOG_CLIENT['API_URL'],
            help='Products collection URL (default: CATALOG_API_URL)',
        )
        parser.add_argument(
            '--timeout',
            type=float,
            default=settings.CATALOG_CLIENT['TIMEOUT'],
            help='Per-request timeout in seconds',
        )
        parser.add_argument(
            '--check',
            action='store_true',
            help='Only call the health check and exit',
        )

    def handle(self, *args, **options):
        gateway = HttpProductGateway(options['api_url'], timeout=options['timeout'])

        if options['check']:
            try:
                message = gateway.health()
            except GatewayError as exc:
                raise CommandError(f'Catalog API unreachable: {exc}')
            self.stdout.write(self.style.SUCCESS(message))
            return

        self.stdout.write(f"Catalog at {options['api_url']} - type help for commands")
        CatalogTerminal(gateway, self.stdout).run()
