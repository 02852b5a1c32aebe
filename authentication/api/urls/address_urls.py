from django.urls import path

from authentication.api.views import address_views

urlpatterns = [
    path("add/<str:buyerId>", address_views.AddressAddView.as_view(), name="address-add"),
    path("delete/<str:addressId>", address_views.AddressDeleteView.as_view(), name="address-delete"),
    path("buyer/<str:buyerId>", address_views.BuyerAddressListView.as_view(), name="address-list"),
]
