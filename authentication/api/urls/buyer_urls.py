from django.urls import path

from authentication.api.views import buyer_views
from authentication.api.views.common import PasswordResetConfirmView, PasswordResetRequestView

urlpatterns = [
    path("register", buyer_views.BuyerRegisterView.as_view(), name="buyer-register"),
    path("login", buyer_views.BuyerLoginView.as_view(), name="buyer-login"),
    path(
        "forgot-password",
        PasswordResetRequestView.as_view(service_name="buyer_service"),
        name="buyer-forgot-password",
    ),
    path(
        "reset-password",
        PasswordResetConfirmView.as_view(service_name="buyer_service"),
        name="buyer-reset-password",
    ),
    path("update/<str:buyerId>", buyer_views.BuyerUpdateView.as_view(), name="buyer-update"),
    path("<str:buyerId>", buyer_views.BuyerDetailView.as_view(), name="buyer-detail"),
]
