from drf_spectacular.utils import extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import AddressSerializer
from authentication.api.serializers.response_serializers import ErrorResponseSerializer, MessageResponseSerializer
from utils.api_responses import error_response

from .common import AccountServiceMixin


class AddressView(AccountServiceMixin, APIView):
    permission_classes = [permissions.AllowAny]
    service_name = "address_service"


class AddressAddView(AddressView):
    @extend_schema(
        operation_id="address_add",
        request=AddressSerializer,
        responses={201: AddressSerializer, 400: ErrorResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Addresses"],
    )
    def post(self, request, buyerId):
        serializer = AddressSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().add_address(buyerId, serializer.validated_data)
        if not result.ok:
            return error_response(result)
        return Response(AddressSerializer(result.value).data, status=status.HTTP_201_CREATED)


class AddressDeleteView(AddressView):
    @extend_schema(
        operation_id="address_delete",
        responses={200: MessageResponseSerializer, 404: ErrorResponseSerializer},
        tags=["Addresses"],
    )
    def delete(self, request, addressId):
        result = self.get_service().delete_address(addressId)
        if not result.ok:
            return error_response(result)
        return Response({"message": "Address deleted"}, status=status.HTTP_200_OK)


class BuyerAddressListView(AddressView):
    @extend_schema(operation_id="address_list", responses={200: AddressSerializer(many=True)}, tags=["Addresses"])
    def get(self, request, buyerId):
        result = self.get_service().list_addresses(buyerId)
        if not result.ok:
            return error_response(result)
        return Response(AddressSerializer(result.value, many=True).data, status=status.HTTP_200_OK)
