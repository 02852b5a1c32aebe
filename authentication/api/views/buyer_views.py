from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import BuyerInputSerializer, BuyerSerializer, CredentialsSerializer
from authentication.api.serializers.response_serializers import ErrorResponseSerializer
from utils.api_responses import error_response

from .common import AccountServiceMixin


class BuyerView(AccountServiceMixin, APIView):
    permission_classes = [permissions.AllowAny]
    service_name = "buyer_service"


class BuyerRegisterView(BuyerView):
    @extend_schema(
        operation_id="buyer_register",
        summary="Register a buyer account",
        request=BuyerInputSerializer,
        responses={
            201: BuyerSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid data"),
            409: OpenApiResponse(response=ErrorResponseSerializer, description="Email already registered"),
        },
        tags=["Buyers"],
    )
    def post(self, request):
        serializer = BuyerInputSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().register(serializer.validated_data)
        if not result.ok:
            return error_response(result)
        return Response(BuyerSerializer(result.value).data, status=status.HTTP_201_CREATED)


class BuyerLoginView(BuyerView):
    @extend_schema(
        operation_id="buyer_login",
        summary="Check buyer credentials",
        request=CredentialsSerializer,
        responses={
            200: BuyerSerializer,
            401: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid credentials"),
        },
        tags=["Buyers"],
    )
    def post(self, request):
        serializer = CredentialsSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        credentials = serializer.validated_data
        result = self.get_service().login(credentials.get("email"), credentials["password"])
        if not result.ok:
            return error_response(result)
        return Response(BuyerSerializer(result.value).data, status=status.HTTP_200_OK)


class BuyerDetailView(BuyerView):
    @extend_schema(operation_id="buyer_retrieve", responses={200: BuyerSerializer}, tags=["Buyers"])
    def get(self, request, buyerId):
        result = self.get_service().get_buyer(buyerId)
        if not result.ok:
            return error_response(result)
        return Response(BuyerSerializer(result.value).data, status=status.HTTP_200_OK)


class BuyerUpdateView(BuyerView):
    @extend_schema(
        operation_id="buyer_update",
        summary="Update a buyer profile",
        description="Only the fields sent change; `password` sets a new password.",
        request=BuyerInputSerializer,
        responses={200: BuyerSerializer, 404: ErrorResponseSerializer, 409: ErrorResponseSerializer},
        tags=["Buyers"],
    )
    def put(self, request, buyerId):
        serializer = BuyerInputSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().update_profile(buyerId, serializer.validated_data)
        if not result.ok:
            return error_response(result)
        return Response(BuyerSerializer(result.value).data, status=status.HTTP_200_OK)
