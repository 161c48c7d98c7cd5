"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.  Mutating
actions sit behind ``handle_input_errors`` and receive a validated DTO.
``retrieve`` is not gated: a malformed id reaches the
store and comes back as ``InvalidProductReference``.

Domain exceptions are caught and translated into HTTP responses here;
anything else propagates to ``modules.core.exceptions``.
"""

from __future__ import annotations

from drf_spectacular.utils import (
    OpenApiParameter,
    OpenApiResponse,
    OpenApiTypes,
    extend_schema,
    extend_schema_view,
    inline_serializer,
)
from rest_framework import serializers, status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.validation import handle_input_errors
from modules.products.dtos import CreateProductDTO, ProductIdDTO, UpdateProductDTO
from modules.products.exceptions import InvalidProductReference, ProductNotFound
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService
from modules.products.validators import (
    CREATE_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
)

INVALID_URL_MESSAGE = "URL No válido"


def not_found_message(pk: str | int) -> str:
    return f"El id:{pk} no generó ninguna respuesta"


def deleted_message(pk: str | int) -> str:
    return f"El producto id: {pk} se eliminó correctamente"


_PRODUCT_ENVELOPE = inline_serializer(
    name="ProductEnvelope", fields={"data": ProductSerializer()}
)
_PRODUCT_LIST_ENVELOPE = inline_serializer(
    name="ProductListEnvelope", fields={"data": ProductSerializer(many=True)}
)
_ERROR = inline_serializer(name="ProductError", fields={"error": serializers.CharField()})
_VALIDATION_ERRORS = inline_serializer(
    name="ValidationErrors",
    fields={
        "errors": serializers.ListField(
            child=serializers.DictField(child=serializers.JSONField())
        )
    },
)
_PRODUCT_INPUT = inline_serializer(
    name="ProductInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
    },
)
_PRODUCT_UPDATE_INPUT = inline_serializer(
    name="ProductUpdateInput",
    fields={
        "name": serializers.CharField(),
        "price": serializers.DecimalField(max_digits=10, decimal_places=2),
        "available": serializers.BooleanField(),
    },
)
_ID_PARAMETER = OpenApiParameter(
    "id",
    OpenApiTypes.INT,
    OpenApiParameter.PATH,
    description="The ID of the product selected",
)


@extend_schema_view(
    list=extend_schema(
        summary="Get all the products",
        description="Get a list of the products in the database.",
        responses={200: _PRODUCT_LIST_ENVELOPE},
    ),
    retrieve=extend_schema(
        summary="Get an especific product",
        description="Return a product by an especific ID (unique key).",
        parameters=[_ID_PARAMETER],
        responses={200: _PRODUCT_ENVELOPE, 404: _ERROR},
    ),
    create=extend_schema(
        summary="Create a new Product",
        description="Create a new record in the database, returns the new register.",
        request=_PRODUCT_INPUT,
        responses={200: _PRODUCT_ENVELOPE, 400: _VALIDATION_ERRORS},
    ),
    update=extend_schema(
        summary="Update an especific product",
        description="Update and return the updated product.",
        parameters=[_ID_PARAMETER],
        request=_PRODUCT_UPDATE_INPUT,
        responses={200: _PRODUCT_ENVELOPE, 400: _VALIDATION_ERRORS, 404: _ERROR},
    ),
    partial_update=extend_schema(
        summary="Toggle the availability",
        description="Flip the availability of the product and return it.",
        parameters=[_ID_PARAMETER],
        request=None,
        responses={200: _PRODUCT_ENVELOPE, 400: _VALIDATION_ERRORS, 404: _ERROR},
    ),
    destroy=extend_schema(
        summary="Delete an especific Product",
        description="Delete a product by their specific id.",
        parameters=[_ID_PARAMETER],
        responses={
            200: OpenApiResponse(OpenApiTypes.STR, description="Producto eliminado"),
            400: _VALIDATION_ERRORS,
            404: _ERROR,
        },
    ),
)
class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    Uses ``ProductService`` over ``repository_class`` (DIP); swap the
    attribute to run the same handlers against another store.
    """

    lookup_value_regex = "[^/]+"
    repository_class = ProductDjangoRepository

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=self.repository_class())

    def _not_found(self, pk: str | int) -> Response:
        return Response(
            {"error": not_found_message(pk)},
            status=status.HTTP_404_NOT_FOUND,
        )

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/products"""
        products = self._service.list_products()
        return Response({"data": ProductSerializer(products, many=True).data})

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return self._not_found(pk)
        except InvalidProductReference:
            return Response(
                {"error": INVALID_URL_MESSAGE},
                status=status.HTTP_404_NOT_FOUND,
            )
        return Response({"data": ProductSerializer(product).data})

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    @handle_input_errors(CREATE_PRODUCT_RULES, CreateProductDTO)
    def create(self, request: Request, dto: CreateProductDTO) -> Response:
        """POST /api/products"""
        product = self._service.create_product(dto)
        return Response({"data": ProductSerializer(product).data})

    @handle_input_errors(UPDATE_PRODUCT_RULES, UpdateProductDTO)
    def update(
        self, request: Request, dto: UpdateProductDTO, pk: str | None = None
    ) -> Response:
        """PUT /api/products/{pk}"""
        try:
            product = self._service.update_product(dto.id, dto)
        except ProductNotFound:
            return self._not_found(pk)
        return Response({"data": ProductSerializer(product).data})

    @handle_input_errors(PRODUCT_ID_RULES, ProductIdDTO)
    def partial_update(
        self, request: Request, dto: ProductIdDTO, pk: str | None = None
    ) -> Response:
        """PATCH /api/products/{pk}"""
        try:
            product = self._service.toggle_availability(dto.id)
        except ProductNotFound:
            return self._not_found(pk)
        return Response({"data": ProductSerializer(product).data})

    @handle_input_errors(PRODUCT_ID_RULES, ProductIdDTO)
    def destroy(
        self, request: Request, dto: ProductIdDTO, pk: str | None = None
    ) -> Response:
        """DELETE /api/products/{pk}"""
        try:
            self._service.delete_product(dto.id)
        except ProductNotFound:
            return self._not_found(pk)
        return Response(deleted_message(pk))
