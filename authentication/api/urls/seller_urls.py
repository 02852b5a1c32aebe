from django.urls import path

from authentication.api.views import seller_views
from authentication.api.views.common import PasswordResetConfirmView, PasswordResetRequestView

urlpatterns = [
    path("register", seller_views.SellerRegisterView.as_view(), name="seller-register"),
    path("login", seller_views.SellerLoginView.as_view(), name="seller-login"),
    path(
        "forgot-password",
        PasswordResetRequestView.as_view(service_name="seller_service"),
        name="seller-forgot-password",
    ),
    path(
        "reset-password",
        PasswordResetConfirmView.as_view(service_name="seller_service"),
        name="seller-reset-password",
    ),
    path("update/<str:sellerId>", seller_views.SellerUpdateView.as_view(), name="seller-update"),
    path("<str:sellerId>/dashboard", seller_views.SellerDashboardView.as_view(), name="seller-dashboard"),
    path("<str:sellerId>/sales-data", seller_views.SellerSalesDataView.as_view(), name="seller-sales-data"),
    path("<str:sellerId>", seller_views.SellerDetailView.as_view(), name="seller-detail"),
]
