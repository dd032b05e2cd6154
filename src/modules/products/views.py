"""Product API views.

Reads are public; create/update/delete require a bearer token and are
restricted to the product owner by ``ProductService``.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response

from modules.core.api import ResourceViewSet
from modules.products.dtos import CreateProductDTO, UpdateProductDTO
from modules.products.filters import ProductFilter
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductInputSerializer, ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(ResourceViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    """

    serializer_class = ProductSerializer
    filterset_class = ProductFilter
    ordering_fields = ["name", "price", "created_at"]
    error_messages = {
        "list": "Error fetching products",
        "retrieve": "Error fetching product",
        "create": "Error creating product",
        "update": "Error updating product",
        "partial_update": "Error updating product",
        "destroy": "Error deleting product",
    }

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def get_permissions(self):
        if self.action in {"list", "retrieve"}:
            return [AllowAny()]
        return [IsAuthenticated()]

    def get_queryset(self):
        if self.is_schema_request():
            return Product.objects.none()
        return self._service.list_products()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/product"""
        products = self.filter_queryset(self.get_queryset())
        return self.envelope(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/product/{pk}"""
        product = self._service.get_product(pk)
        return self.envelope(ProductSerializer(product).data)

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/product"""
        data = self.validated(ProductInputSerializer, request.data)
        product = self._service.create_product(self.identity, CreateProductDTO(**data))
        return self.envelope(
            ProductSerializer(product).data, status_code=status.HTTP_201_CREATED
        )

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/product/{pk}"""
        return self._update(request, pk, partial=False)

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/product/{pk}"""
        return self._update(request, pk, partial=True)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/product/{pk}"""
        product_id = self._service.delete_product(self.identity, pk)
        return self.deleted(product_id, "Product deleted successfully")

    def _update(self, request: Request, pk: str | None, partial: bool) -> Response:
        data = self.validated(ProductInputSerializer, request.data, partial=partial)
        product = self._service.update_product(
            self.identity, pk, UpdateProductDTO(**data)
        )
        return self.envelope(ProductSerializer(product).data)
