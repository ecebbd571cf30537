"""
Record store for products.

ProductStore is the only code that writes Product rows. It exposes the
store's capabilities explicitly: identifiers and timestamps are assigned
here (through the model), never by callers.
"""

import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from .exceptions import ProductNotFound
from .models import Product

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ('name', 'weight', 'price')


class ProductStore:
    """
    Store operations for Product records.

    - list():             all products, store-default order
    - get(id):            one product or ProductNotFound
    - create(fields):     new product with assigned id and timestamps
    - update(id, fields): replace name/weight/price, refresh updated_at
    - delete(id):         remove-if-present, always succeeds
    """

    def list(self):
        return Product.objects.all()

    def get(self, product_id):
        try:
            return Product.objects.get(pk=product_id)
        except (Product.DoesNotExist, ValidationError, ValueError, TypeError):
            logger.warning("Product %s not found", product_id)
            raise ProductNotFound()

    def create(self, fields):
        product = Product.objects.create(
            **{name: fields[name] for name in MUTABLE_FIELDS}
        )
        logger.info("Created product %s (%s)", product.pk, product.name)
        return product

    @transaction.atomic
    def update(self, product_id, fields):
        """
        Replace the mutable fields of an existing product.
        id and created_at are never touched; updated_at is refreshed by save().
        """
        try:
            product = Product.objects.select_for_update().get(pk=product_id)
        except (Product.DoesNotExist, ValidationError, ValueError, TypeError):
            logger.warning("Update skipped, product %s not found", product_id)
            raise ProductNotFound()

        for name in MUTABLE_FIELDS:
            setattr(product, name, fields[name])
        product.save(update_fields=[*MUTABLE_FIELDS, 'updated_at'])
        logger.info("Updated product %s", product.pk)
        return product

    def delete(self, product_id):
        """
        Remove the product if present.

        Returns True when a record was removed, False when nothing matched
        (including malformed identifiers).
        """
        try:
            deleted, _ = Product.objects.filter(pk=product_id).delete()
        except (ValidationError, ValueError, TypeError):
            deleted = 0
        if deleted:
            logger.info("Deleted product %s", product_id)
        else:
            logger.debug("Delete of missing product %s ignored", product_id)
        return bool(deleted)
