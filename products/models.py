import uuid

from django.db import models
from django.core.validators import MinValueValidator


class Product(models.Model):
    """
    A catalog product.
    Identifier and timestamps are assigned by the store; only name,
    weight and price are ever written by callers.
    """
    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Opaque identifier assigned at creation"
    )
    name = models.CharField(
        max_length=200,
        help_text="Product name"
    )
    weight = models.FloatField(
        validators=[MinValueValidator(0)],
        help_text="Product weight in kg"
    )
    price = models.FloatField(
        validators=[MinValueValidator(0)],
        help_text="Product price"
    )

    # Timestamps
    created_at = models.DateTimeField(
        auto_now_add=True,
        help_text="Timestamp when product was created"
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when product was last updated"
    )

    class Meta:
        verbose_name = "Product"
        verbose_name_plural = "Products"
        indexes = [
            models.Index(fields=['-created_at'], name='product_created_at_idx'),
        ]

    def __str__(self):
        return self.name
