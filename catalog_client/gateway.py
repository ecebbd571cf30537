"""
Network access for the catalog client.

ProductGateway is the interface the session calls for every effect;
HttpProductGateway implements it over the product REST API with requests.
One attempt per call, no retries.
"""

import logging
from abc import ABC, abstractmethod

import requests
from django.conf import settings

from .exceptions import GatewayError
from .records import ProductRecord

logger = logging.getLogger(__name__)


class ProductGateway(ABC):
    """Operations the client needs from the product service"""

    @abstractmethod
    def list_products(self):
        """Return every product as a list of ProductRecord"""

    @abstractmethod
    def create_product(self, payload):
        """Create a product from a ProductPayload and return the stored record"""

    @abstractmethod
    def update_product(self, product_id, payload):
        """Replace name, weight and price and return the stored record"""

    @abstractmethod
    def delete_product(self, product_id):
        """Delete a product; succeeds whether or not it existed"""

    @abstractmethod
    def health(self):
        """Return the service health message"""


class HttpProductGateway(ProductGateway):
    """
    ProductGateway over HTTP.

    Args:
        base_url: products collection URL, e.g. http://localhost:5001/api/products
        timeout: per-request timeout in seconds
        session: optional requests.Session to reuse
    """

    def __init__(self, base_url=None, timeout=None, session=None):
        config = settings.CATALOG_CLIENT
        self.base_url = (base_url or config['API_URL']).rstrip('/')
        self.timeout = timeout if timeout is not None else config['TIMEOUT']
        self.session = session or requests.Session()

    @property
    def health_url(self):
        return self.base_url.rsplit('/', 1)[0]

    def _request(self, method, url, payload=None):
        try:
            response = self.session.request(
                method,
                url,
                json=payload,
                headers={'Accept': 'application/json'},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            logger.error("%s %s failed: %s", method, url, exc)
            raise GatewayError(f'{method} {url} failed: {exc}') from exc

        if not response.ok:
            logger.error("%s %s returned %s: %s", method, url, response.status_code, response.text[:200])
            raise GatewayError(
                f'{method} {url} returned {response.status_code}',
                status_code=response.status_code,
            )

        try:
            return response.json() if response.content else None
        except ValueError as exc:
            logger.error("%s %s returned a non-JSON body", method, url)
            raise GatewayError(f'{method} {url} returned a non-JSON body') from exc

    def _item_url(self, product_id):
        return f'{self.base_url}/{product_id}'

    def _record(self, data, url):
        try:
            return ProductRecord.from_json(data)
        except (KeyError, TypeError, AttributeError) as exc:
            raise GatewayError(f'{url} returned a malformed product') from exc

    def list_products(self):
        data = self._request('GET', self.base_url)
        if not isinstance(data, list):
            raise GatewayError(f'GET {self.base_url} did not return a list')
        return [self._record(item, self.base_url) for item in data]

    def create_product(self, payload):
        data = self._request('POST', self.base_url, payload.to_json())
        return self._record(data, self.base_url)

    def update_product(self, product_id, payload):
        url = self._item_url(product_id)
        data = self._request('PUT', url, payload.to_json())
        return self._record(data, url)

    def delete_product(self, product_id):
        self._request('DELETE', self._item_url(product_id))

    def health(self):
        data = self._request('GET', self.health_url)
        if not isinstance(data, dict):
            raise GatewayError(f'GET {self.health_url} did not return an object')
        return data.get('message', '')
