from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from infrastructure.container import container
from marketplace.api.serializers import ErrorResponseSerializer, PlaceOrderRequestSerializer
from marketplace.ordering.api.serializers.order_serializers import OrderSerializer
from marketplace.services import OrderService
from utils.api_responses import error_response


class OrderViewSet(viewsets.ViewSet):
    """Checkout and order history. Orders are read-only once placed."""

    permission_classes = [AllowAny]

    def get_service(self) -> OrderService:
        return container.order_service()

    def _list_response(self, result):
        if not result.ok:
            return error_response(result)
        return Response(OrderSerializer(result.value, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="order_place",
        summary="Turn a buyer's cart into orders",
        description="""
        **What it receives:**
        - `buyerId` (UUID): Buyer checking out
        - `paymentReference` (string): Reference of the settled payment

        **What it returns:**
        - One order per cart line; the cart is emptied
        """,
        request=PlaceOrderRequestSerializer,
        responses={
            201: OrderSerializer(many=True),
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Empty cart or invalid input"),
            404: OpenApiResponse(response=ErrorResponseSerializer, description="Buyer not found"),
        },
        tags=["Orders"],
    )
    def place(self, request):
        result = self.get_service().place_order(request.data.get("buyerId"), request.data.get("paymentReference"))
        if not result.ok:
            return error_response(result)
        return Response(OrderSerializer(result.value, many=True).data, status=status.HTTP_201_CREATED)

    @extend_schema(operation_id="order_retrieve", responses={200: OrderSerializer}, tags=["Orders"])
    def retrieve(self, request, orderId=None):
        result = self.get_service().get_order(orderId)
        if not result.ok:
            return error_response(result)
        return Response(OrderSerializer(result.value).data, status=status.HTTP_200_OK)

    @extend_schema(operation_id="order_by_buyer", responses={200: OrderSerializer(many=True)}, tags=["Orders"])
    def by_buyer(self, request, buyerId=None):
        return self._list_response(self.get_service().list_by_buyer(buyerId))

    @extend_schema(operation_id="order_by_seller", responses={200: OrderSerializer(many=True)}, tags=["Orders"])
    def by_seller(self, request, sellerId=None):
        return self._list_response(self.get_service().list_by_seller(sellerId))

    @extend_schema(
        operation_id="order_by_payment",
        summary="Every order of one checkout",
        responses={200: OrderSerializer(many=True)},
        tags=["Orders"],
    )
    def by_payment(self, request, reference=None):
        return self._list_response(self.get_service().list_by_payment_reference(reference))
