from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import ProductViewSet

# Create a router and register our viewsets
router = SimpleRouter()
# Accept routes with or without a trailing slash
router.trailing_slash = '/?'
router.register(r'products', ProductViewSet, basename='product')

# The API URLs are determined automatically by the router
urlpatterns = [
    path('', include(router.urls)),
]

"""
Available endpoints:

PRODUCTS:
- GET    /api/products         - List all products
- POST   /api/products         - Create a new product
- GET    /api/products/{id}    - Get product details
- PUT    /api/products/{id}    - Replace name, weight and price
- DELETE /api/products/{id}    - Delete product (idempotent)

No query parameters: search, sorting and pagination happen in the client.
"""
