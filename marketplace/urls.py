from django.urls import path

from marketplace.cart.api.views.cart_views import CartViewSet
from marketplace.catalog.api.views.product_views import ProductViewSet
from marketplace.ordering.api.views.order_views import OrderViewSet

app_name = "marketplace"

# Ids are captured as plain strings so malformed values reach the services (400, not 404).
urlpatterns = [
    # Cart
    path("cart/add", CartViewSet.as_view({"post": "add"}), name="cart-add"),
    path("cart/buyer/<str:buyerId>", CartViewSet.as_view({"get": "list_for_buyer"}), name="cart-list"),
    path("cart/count/<str:buyerId>", CartViewSet.as_view({"get": "count"}), name="cart-count"),
    path("cart/remove/<str:cartId>", CartViewSet.as_view({"delete": "remove"}), name="cart-remove"),
    path("cart/clear/<str:buyerId>", CartViewSet.as_view({"delete": "clear"}), name="cart-clear"),
    path("cart/update", CartViewSet.as_view({"put": "update_quantity"}), name="cart-update"),
    # Catalog
    path("product/all", ProductViewSet.as_view({"get": "list"}), name="product-list"),
    path("product/add", ProductViewSet.as_view({"post": "create"}), name="product-add"),
    path("product/update/<str:productId>", ProductViewSet.as_view({"put": "update"}), name="product-update"),
    path("product/delete/<str:productId>", ProductViewSet.as_view({"delete": "destroy"}), name="product-delete"),
    path("product/seller/<str:sellerId>", ProductViewSet.as_view({"get": "by_seller"}), name="product-by-seller"),
    path("product/category/<str:category>", ProductViewSet.as_view({"get": "by_category"}), name="product-by-category"),
    path("product/<str:productId>", ProductViewSet.as_view({"get": "retrieve"}), name="product-detail"),
    # Orders
    path("order/place", OrderViewSet.as_view({"post": "place"}), name="order-place"),
    path("order/buyer/<str:buyerId>", OrderViewSet.as_view({"get": "by_buyer"}), name="order-by-buyer"),
    path("order/seller/<str:sellerId>", OrderViewSet.as_view({"get": "by_seller"}), name="order-by-seller"),
    path("order/payment/<str:reference>", OrderViewSet.as_view({"get": "by_payment"}), name="order-by-payment"),
    path("order/<str:orderId>", OrderViewSet.as_view({"get": "retrieve"}), name="order-detail"),
]
