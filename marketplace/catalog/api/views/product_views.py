import logging

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.parsers import FormParser, JSONParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, MessageResponseSerializer, ProductFormRequestSerializer
from marketplace.catalog.api.serializers.product_serializers import (
    ProductDetailSerializer,
    ProductSerializer,
    ProductWriteSerializer,
)
from marketplace.services import CatalogService
from utils.api_responses import error_response

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ViewSet):
    """Product catalog endpoints; create/update accept multipart with an optional ``image``."""

    permission_classes = [AllowAny]
    parser_classes = [MultiPartParser, FormParser, JSONParser]

    def get_service(self) -> CatalogService:
        return container.catalog_service()

    def _list_response(self, result):
        if not result.ok:
            return error_response(result)
        return Response(ProductSerializer(result.value, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="product_list",
        summary="List every product",
        responses={200: ProductSerializer(many=True)},
        tags=["Catalog"],
    )
    def list(self, request):
        return self._list_response(self.get_service().list_products())

    @extend_schema(
        operation_id="product_by_seller",
        summary="List a seller's products",
        responses={
            200: ProductSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid seller id"),
        },
        tags=["Catalog"],
    )
    def by_seller(self, request, sellerId=None):
        return self._list_response(self.get_service().list_by_seller(sellerId))

    @extend_schema(
        operation_id="product_by_category",
        summary="List products of a category",
        responses={200: ProductSerializer(many=True)},
        tags=["Catalog"],
    )
    def by_category(self, request, category=None):
        return self._list_response(self.get_service().list_by_category(category))

    @extend_schema(
        operation_id="product_retrieve",
        summary="Get one product",
        responses={
            200: ProductDetailSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Catalog"],
    )
    def retrieve(self, request, productId=None):
        result = self.get_service().get_product(productId)
        if not result.ok:
            return error_response(result)
        return Response(ProductDetailSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="product_create",
        summary="Add a product for a seller",
        request={"multipart/form-data": ProductFormRequestSerializer},
        responses={
            201: ProductDetailSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid product data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not found"),
            502: OpenApiResponse(response=ErrorResponseSerializer, description="Image upload failed"),
        },
        tags=["Catalog"],
    )
    def create(self, request):
        serializer = ProductWriteSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        image = data.pop("image", None)
        result = self.get_service().add_product(request.data.get("sellerId"), data, image_file=image)
        if not result.ok:
            return error_response(result)
        return Response(ProductDetailSerializer(result.value).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        operation_id="product_update",
        summary="Update a product",
        description="Only the fields sent change. A new `image` replaces the stored one.",
        request={"multipart/form-data": ProductFormRequestSerializer},
        responses={
            200: ProductDetailSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid product data"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Catalog"],
    )
    def update(self, request, productId=None):
        serializer = ProductWriteSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = dict(serializer.validated_data)
        image = data.pop("image", None)
        result = self.get_service().update_product(productId, data, image_file=image)
        if not result.ok:
            return error_response(result)
        return Response(ProductDetailSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="product_delete",
        summary="Delete a product",
        responses={
            200: MessageResponseSerializer,
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Product not found"),
        },
        tags=["Catalog"],
    )
    def destroy(self, request, productId=None):
        result = self.get_service().delete_product(productId)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Product deleted"}, status=status.HTTP_200_OK)
