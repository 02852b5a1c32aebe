from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import (
    AdminSerializer,
    BuyerSerializer,
    CredentialsSerializer,
    SellerInputSerializer,
    SellerSerializer,
)
from authentication.api.serializers.response_serializers import (
    AdminDashboardResponseSerializer,
    BuyerDeletedResponseSerializer,
    ErrorResponseSerializer,
    MessageResponseSerializer,
)
from marketplace.api.serializers import SalesBucketSerializer
from utils.api_responses import error_response

from .common import AccountServiceMixin
from .seller_views import PERIOD_PARAMETER


class AdminView(AccountServiceMixin, APIView):
    permission_classes = [permissions.AllowAny]
    service_name = "admin_service"


class AdminRegisterView(AdminView):
    @extend_schema(
        operation_id="admin_register",
        request=CredentialsSerializer,
        responses={201: AdminSerializer, 409: ErrorResponseSerializer},
        tags=["Admin"],
    )
    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        credentials = serializer.validated_data
        result = self.get_service().register(credentials.get("username"), credentials["password"])
        if not result.ok:
            return error_response(result)
        return Response(AdminSerializer(result.value).data, status=status.HTTP_201_CREATED)


class AdminLoginView(AdminView):
    @extend_schema(
        operation_id="admin_login",
        request=CredentialsSerializer,
        responses={
            200: AdminSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials"),
        },
        tags=["Admin"],
    )
    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        credentials = serializer.validated_data
        result = self.get_service().login(credentials.get("username"), credentials["password"])
        if not result.ok:
            return error_response(result)
        return Response(AdminSerializer(result.value).data, status=status.HTTP_200_OK)


class AdminSellerListView(AdminView):
    @extend_schema(operation_id="admin_sellers", responses={200: SellerSerializer(many=True)}, tags=["Admin"])
    def get(self, request):
        result = self.get_service().list_sellers()
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value, many=True).data, status=status.HTTP_200_OK)


class AdminPendingSellerListView(AdminView):
    @extend_schema(operation_id="admin_pending_sellers", responses={200: SellerSerializer(many=True)}, tags=["Admin"])
    def get(self, request):
        result = self.get_service().list_pending_sellers()
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value, many=True).data, status=status.HTTP_200_OK)


class AdminAddSellerView(AdminView):
    @extend_schema(
        operation_id="admin_add_seller",
        summary="Create an approved seller account",
        request=SellerInputSerializer,
        responses={201: SellerSerializer, 400: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=["Admin"],
    )
    def post(self, request):
        serializer = SellerInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().add_seller(serializer.validated_data)
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_201_CREATED)


class AdminSellerApproveView(AdminView):
    @extend_schema(operation_id="admin_approve_seller", request=None, responses={200: SellerSerializer}, tags=["Admin"])
    def put(self, request, sellerId):
        result = self.get_service().approve_seller(sellerId)
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_200_OK)


class AdminSellerRejectView(AdminView):
    @extend_schema(operation_id="admin_reject_seller", request=None, responses={200: SellerSerializer}, tags=["Admin"])
    def put(self, request, sellerId):
        result = self.get_service().reject_seller(sellerId)
        if not result.ok:
            return error_response(result)
        return Response(SellerSerializer(result.value).data, status=status.HTTP_200_OK)

class AdminSellerDeleteView(AdminView):
    @extend_schema(operation_id="admin_delete_seller", responses={200: MessageResponseSerializer}, tags=["Admin"])
    def delete(self, request, sellerId):
        result = self.get_service().delete_seller(sellerId)
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "Seller deleted", "productsRemoved": result.value["products"]}, status=status.HTTP_200_OK
        )


class AdminBuyerListView(AdminView):
    @extend_schema(operation_id="admin_buyers", responses={200: BuyerSerializer(many=True)}, tags=["Admin"])
    def get(self, request):
        result = self.get_service().list_buyers()
        if not result.ok:
            return error_response(result)
        return Response(BuyerSerializer(result.value, many=True).data, status=status.HTTP_200_OK)


class AdminBuyerDeleteView(AdminView):
    @extend_schema(
        operation_id="admin_delete_buyer",
        summary="Delete a buyer with their cart and addresses",
        responses={200: BuyerDeletedResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Admin"],
    )
    def delete(self, request, buyerId):
        result = self.get_service().delete_buyer(buyerId)
        if not result.ok:
            return error_response(result)
        return Response(
            {
                "message": "Buyer deleted",
                "cartLinesRemoved": result.value["cart_lines"],
                "addressesRemoved": result.value["addresses"],
            },
            status=status.HTTP_200_OK,
        )


class AdminDashboardView(AdminView):
    @extend_schema(
        operation_id="admin_dashboard",
        summary="Platform totals",
        responses={200: AdminDashboardResponseSerializer},
        tags=["Admin - Dashboard"],
    )
    def get(self, request):
        service = self.get_service()
        totals = {}
        for key, query in (
            ("totalSellers", service.total_sellers),
            ("totalBuyers", service.total_buyers),
            ("totalProducts", service.total_products),
            ("totalOrders", service.total_orders),
            ("totalRevenue", service.total_revenue),
        ):
            result = query()
            if not result.ok:
                return error_response(result)
            totals[key] = result.value
        return Response(totals, status=status.HTTP_200_OK)


class AdminSalesDataView(AdminView):
    @extend_schema(
        operation_id="admin_sales_data",
        parameters=[PERIOD_PARAMETER],
        responses={200: SalesBucketSerializer(many=True), 400: ErrorResponseSerializer},
        tags=["Admin - Dashboard"],
    )
    def get(self, request):
        result = self.get_service().sales_data(request.query_params.get("period", "daily"))
        if not result.ok:
            return error_response(result)
        return Response(result.value, status=status.HTTP_200_OK)
