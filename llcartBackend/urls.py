"""
URL configuration for llcartBackend project.

Marketplace routes (cart, product, order) and account routes (buyer, seller,
admin, address) are mounted at the root; Django's own admin lives under
/django-admin/ so /admin/ stays free for the platform admin API.
"""

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import include, path
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

urlpatterns = [
    path("django-admin/", admin.site.urls),
    # API Documentation
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("api/docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    # Accounts
    path("buyer/", include("authentication.api.urls.buyer_urls")),
    path("seller/", include("authentication.api.urls.seller_urls")),
    path("admin/", include("authentication.api.urls.admin_urls")),
    path("address/", include("authentication.api.urls.address_urls")),
    # Marketplace (cart/, product/, order/)
    path("", include("marketplace.urls")),
]

# Serve media files during development
urlpatterns += static(settings.STATIC_URL, document_root=settings.STATIC_ROOT)
urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
