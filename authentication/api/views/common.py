from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import permissions, status
from rest_framework.response import Response
from rest_framework.views import APIView

from authentication.api.serializers import PasswordResetConfirmSerializer, PasswordResetRequestSerializer
from authentication.api.serializers.response_serializers import ErrorResponseSerializer, MessageResponseSerializer
from utils.api_responses import error_response


class AccountServiceMixin:
    """Resolves the account service from the DI container by name."""

    service_name = None

    def get_service(self):
        from infrastructure.container import container

        return getattr(container, self.service_name)()


class PasswordResetRequestView(AccountServiceMixin, APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="Email a password reset link",
        description="Always answers 200 so the endpoint cannot be used to discover accounts.",
        request=PasswordResetRequestSerializer,
        responses={200: MessageResponseSerializer, 400: ErrorResponseSerializer},
        tags=["Accounts - Password"],
    )
    def post(self, request):
        serializer = PasswordResetRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        result = self.get_service().request_password_reset(serializer.validated_data["email"])
        if not result.ok:
            return error_response(result)
        return Response(
            {"message": "If an account exists for this email, a reset link has been sent"},
            status=status.HTTP_200_OK,
        )


class PasswordResetConfirmView(AccountServiceMixin, APIView):
    permission_classes = [permissions.AllowAny]

    @extend_schema(
        summary="Set a new password with a reset token",
        request=PasswordResetConfirmSerializer,
        responses={
            200: MessageResponseSerializer,
            400: OpenApiResponse(response=ErrorResponseSerializer, description="Invalid or expired token"),
        },
        tags=["Accounts - Password"],
    )
    def post(self, request):
        serializer = PasswordResetConfirmSerializer(data=request.data)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        result = self.get_service().reset_password(data["token"], data["new_password"])
        if not result.ok:
            return error_response(result)
        return Response({"message": "Password updated"}, status=status.HTTP_200_OK)
