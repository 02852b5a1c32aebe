from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from infrastructure.container import container  # For DI
from marketplace.api.serializers import (
    AddToCartRequestSerializer,
    ErrorResponseSerializer,
    MessageResponseSerializer,
    UpdateCartRequestSerializer,
)
from marketplace.cart.api.serializers.cart_serializers import CartLineSerializer
from marketplace.services import CartService
from utils.api_responses import error_response


def request_params(request):
    """Query string parameters overlaid with form/JSON body parameters."""
    params = {key: request.query_params.get(key) for key in request.query_params}
    if hasattr(request.data, "items"):
        for key, value in request.data.items():
            params[key] = value
    return params


class CartViewSet(viewsets.ViewSet):
    """Shopping cart endpoints. Parameters may come from the query string or the body."""

    permission_classes = [AllowAny]

    def get_service(self) -> CartService:
        # Inject CartService via DI container
        return container.cart_service()

    @extend_schema(
        operation_id="cart_add",
        summary="Add a product to a buyer's cart",
        description="""
        **What it receives:**
        - `buyerId` (UUID): Buyer owning the cart
        - `productId` (UUID): Product to add
        - `quantity` (integer, optional): Units to add (default: 1)

        **What it returns:**
        - The resulting cart line; adding a product already in the cart adds to its quantity
        """,
        request=AddToCartRequestSerializer,
        responses={
            200: OpenApiResponse(response=CartLineSerializer, description="Item added"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid id or quantity"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Buyer or product not found"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Internal server error"),
        },
        tags=["Cart"],
    )
    def add(self, request):
        params = request_params(request)
        result = self.get_service().add_to_cart(
            params.get("buyerId"), params.get("productId"), params.get("quantity", 1)
        )
        if not result.ok:
            return error_response(result)
        return Response(CartLineSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="cart_list",
        summary="List a buyer's cart lines",
        responses={
            200: OpenApiResponse(response=CartLineSerializer(many=True), description="Cart lines (possibly empty)"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Cart could not be produced"),
        },
        tags=["Cart"],
    )
    def list_for_buyer(self, request, buyerId=None):
        result = self.get_service().get_cart_items(buyerId)
        if not result.ok:
            # Any failure here means no list could be produced
            return Response({"detail": result.error_detail}, status=status.HTTP_404_NOT_FOUND)
        return Response(CartLineSerializer(result.value, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="cart_count",
        summary="Number of lines in a buyer's cart",
        responses={
            200: OpenApiResponse(description="Integer line count"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid buyer id"),
        },
        tags=["Cart"],
    )
    def count(self, request, buyerId=None):
        result = self.get_service().get_cart_count(buyerId)
        if not result.ok:
            return error_response(result)
        return Response(result.value, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="cart_remove",
        summary="Remove a cart line",
        description="Removing a line that does not exist succeeds.",
        responses={
            200: OpenApiResponse(response=MessageResponseSerializer, description="Line removed"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid cart line id"),
        },
        tags=["Cart"],
    )
    def remove(self, request, cartId=None):
        result = self.get_service().remove_cart_item(cartId)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Item removed from cart"}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="cart_clear",
        summary="Remove every line of a buyer's cart",
        responses={
            200: OpenApiResponse(response=MessageResponseSerializer, description="Cart cleared"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid buyer id"),
        },
        tags=["Cart"],
    )
    def clear(self, request, buyerId=None):
        result = self.get_service().clear_cart(buyerId)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Cart cleared"}, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="cart_update",
        summary="Set the quantity of a cart line",
        description="""
        **What it receives:**
        - `buyerId` (UUID), `productId` (UUID): identify the line
        - `quantity` (integer): New quantity (must be positive)

        **What it returns:**
        - The updated cart line
        """,
        request=UpdateCartRequestSerializer,
        responses={
            200: OpenApiResponse(response=CartLineSerializer, description="Quantity updated"),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid id or quantity"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Item not in cart"),
            500: OpenApiResponse(response=ErrorResponseSerializer, description="Internal server error"),
        },
        tags=["Cart"],
    )
    def update_quantity(self, request):
        params = request_params(request)
        result = self.get_service().update_quantity(
            params.get("buyerId"), params.get("productId"), params.get("quantity")
        )
        if not result.ok:
            return error_response(result)
        return Response(CartLineSerializer(result.value).data, status=status.HTTP_200_OK)
