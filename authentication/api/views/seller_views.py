from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import CredentialsSerializer, SellerInputSerializer, SellerSerializer
from authentication.api.serializers.response_serializers import (
    ErrorResponseSerializer,
    SellerDashboardResponseSerializer,
)
from marketplace.api.serializers import SalesBucketSerializer
from utils.api_responses import error_response

from .common import AccountServiceMixin

PERIOD_PARAMETER = OpenApiParameter(
    name="period", type=str, enum=["daily", "monthly"], description="Rollup granularity (default: daily)"
)


class SellerView(AccountServiceMixin, APIView):
    permission_classes = [permissions.AllowAny]
    service_name = "seller_service"


class SellerRegisterView(SellerView):
    @extend_schema(
        operation_id="seller_register",
        summary="Register a seller account (pending approval)",
        request=SellerInputSerializer,
        responses={
            201: SellerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Username or email taken"),
        },
        tags=["Sellers"],
    )
    def post(self, request):
        serializer = SellerInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().register(serializer.validated_data)
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_201_CREATED)


class SellerLoginView(SellerView):
    @extend_schema(
        operation_id="seller_login",
        summary="Check seller credentials",
        description="Only approved sellers can log in.",
        request=CredentialsSerializer,
        responses={
            200: SellerSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials"),
            403: OpenApiResponse(response=ErrorResponseSerializer, description="Seller not approved"),
        },
        tags=["Sellers"],
    )
    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        credentials = serializer.validated_data
        result = self.get_service().login(credentials.get("username"), credentials["password"])
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_200_OK)


class SellerDetailView(SellerView):
    @extend_schema(operation_id="seller_retrieve", responses={200: SellerSerializer}, tags=["Sellers"])
    def get(self, request, sellerId):
        result = self.get_service().get_seller(sellerId)
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_200_OK)


class SellerUpdateView(SellerView):
    @extend_schema(
        operation_id="seller_update",
        request=SellerInputSerializer,
        responses={200: SellerSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=["Sellers"],
    )
    def put(self, request, sellerId):
        serializer = SellerInputSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().update_profile(sellerId, serializer.validated_data)
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_200_OK)


class SellerDashboardView(SellerView):
    @extend_schema(
        operation_id="seller_dashboard",
        summary="Product, order and revenue totals of a seller",
        responses={200: SellerDashboardResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Sellers - Dashboard"],
    )
    def get(self, request, sellerId):
        service = self.get_service()
        totals = {}
        for key, query in (
            ("totalProducts", service.total_products),
            ("totalOrders", service.total_orders),
            ("totalRevenue", service.total_revenue),
        ):
            result = query(sellerId)
            if not result.ok:
                return error_response(result)
            totals[key] = result.value
        return Response(totals, status=status.HTTP_200_OK)


class SellerSalesDataView(SellerView):
    @extend_schema(
        operation_id="seller_sales_data",
        summary="Daily or monthly sales of a seller",
        parameters=[PERIOD_PARAMETER],
        responses={200: SalesBucketSerializer(many=True), 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Sellers - Dashboard"],
    )
    def get(self, request, sellerId):
        result = self.get_service().sales_data(sellerId, request.query_params.get("period", "daily"))
        if not result.ok:
            return error_response(result)
        return Response(result.value, status=status.HTTP_200_OK)
