from django.urls import path

from authentication.api.views import admin_views

urlpatterns = [
    path("register", admin_views.AdminRegisterView.as_view(), name="admin-register"),
    path("login", admin_views.AdminLoginView.as_view(), name="admin-login"),
    # Sellers
    path("sellers", admin_views.AdminSellerListView.as_view(), name="admin-sellers"),
    path("sellers/pending", admin_views.AdminPendingSellerListView.as_view(), name="admin-pending-sellers"),
    path("sellers/add", admin_views.AdminAddSellerView.as_view(), name="admin-add-seller"),
    path(
        "sellers/<str:sellerId>/approve",
        admin_views.AdminSellerApproveView.as_view(),
        name="admin-approve-seller",
    ),
    path(
        "sellers/<str:sellerId>/reject",
        admin_views.AdminSellerRejectView.as_view(),
        name="admin-reject-seller",
    ),
    path("sellers/<str:sellerId>", admin_views.AdminSellerDeleteView.as_view(), name="admin-delete-seller"),
    # Buyers
    path("buyers", admin_views.AdminBuyerListView.as_view(), name="admin-buyers"),
    path("buyers/<str:buyerId>", admin_views.AdminBuyerDeleteView.as_view(), name="admin-delete-buyer"),
    # Dashboard
    path("dashboard", admin_views.AdminDashboardView.as_view(), name="admin-dashboard"),
    path("sales-data", admin_views.AdminSalesDataView.as_view(), name="admin-sales-data"),
]
