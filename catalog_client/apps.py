from django.apps import AppConfig


class CatalogClientConfig(AppConfig):
    """
    Configuration for the Catalog Client app.
    Holds the interactive client for the product API; it has no models.
    """
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'catalog_client'
    verbose_name = 'Catalog Client'
