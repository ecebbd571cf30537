from rest_framework import viewsets, status, serializers
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema, extend_schema_view, inline_serializer, OpenApiExample

from .serializers import ProductSerializer
from .store import ProductStore


@extend_schema_view(
    list=extend_schema(
        tags=['Products'],
        summary='List all products',
        description='Retrieve every product in store order. Filtering, sorting and pagination are done by the client.',
    ),
    retrieve=extend_schema(
        tags=['Products'],
        summary='Get product details',
        description='Retrieve a single product by identifier.',
    ),
    create=extend_schema(
        tags=['Products'],
        summary='Create a new product',
        description='Create a product. The store assigns the identifier and timestamps.',
        examples=[
            OpenApiExample(
                'Tea',
                value={'name': 'Tea', 'weight': 1, 'price': 500},
                request_only=True,
            ),
        ],
    ),
    update=extend_schema(
        tags=['Products'],
        summary='Update product',
        description='Replace name, weight and price of an existing product. All three fields are required.',
    ),
    destroy=extend_schema(
        tags=['Products'],
        summary='Delete product',
        description='Delete a product. Deleting a missing product is a successful no-op.',
        responses=inline_serializer(
            name='ProductDeleteResponse',
            fields={
                'message': serializers.CharField(),
                'id': serializers.CharField(),
                'deleted': serializers.BooleanField(),
            },
        ),
    ),
)
class ProductViewSet(viewsets.GenericViewSet):
    """
    ViewSet for Product CRUD operations.

    Provides:
    - list: GET /api/products
    - retrieve: GET /api/products/{id}
    - create: POST /api/products
    - update: PUT /api/products/{id}
    - destroy: DELETE /api/products/{id}

    Every write goes through ProductStore.
    """
    serializer_class = ProductSerializer
    store_class = ProductStore
    http_method_names = ['get', 'post', 'put', 'delete', 'head', 'options']

    def get_store(self):
        return self.store_class()

    def get_queryset(self):
        return self.get_store().list()

    def list(self, request, *args, **kwargs):
        serializer = self.get_serializer(self.get_queryset(), many=True)
        return Response(serializer.data)

    def retrieve(self, request, pk=None):
        product = self.get_store().get(pk)
        return Response(self.get_serializer(product).data)

    def create(self, request, *args, **kwargs):
        """
        Validate and create a product, returning the stored document.
        """
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        product = self.get_store().create(serializer.validated_data)

        return Response(
            self.get_serializer(product).data,
            status=status.HTTP_201_CREATED
        )

    def update(self, request, pk=None):
        """
        Replace the mutable fields of a product.
        A missing product is reported before the body is validated.
        """
        store = self.get_store()
        instance = store.get(pk)
        serializer = self.get_serializer(instance, data=request.data)
        serializer.is_valid(raise_exception=True)
        product = store.update(pk, serializer.validated_data)

        return Response(self.get_serializer(product).data)

    def destroy(self, request, pk=None):
        """
        Delete product with custom response.
        Always succeeds; `deleted` tells whether a record was removed.
        """
        deleted = self.get_store().delete(pk)

        return Response(
            {
                'message': 'Product deleted successfully.',
                'id': pk,
                'deleted': deleted
            },
            status=status.HTTP_200_OK
        )
