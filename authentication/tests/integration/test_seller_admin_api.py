import uuid
from decimal import Decimal

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import Admin, Seller
from infrastructure.container import container
from marketplace.models import CartLine, Order, Product
from marketplace.tests.factories import (
    AdminFactory,
    BuyerFactory,
    CartLineFactory,
    OrderFactory,
    PendingSellerFactory,
    ProductFactory,
    SellerFactory,
)


class SellerAccountIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.payload = {
            "name": "Kiran Crafts",
            "username": "kiran",
            "email": "kiran@example.com",
            "password": "handmade1",
            "nationalId": "ABCDE1234F",
        }

    def test_register_seller_is_pending(self):
        response = self.client.post(reverse("seller-register"), self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], Seller.STATUS_PENDING)
        self.assertEqual(response.data["nationalId"], "ABCDE1234F")

    def test_register_duplicate_username(self):
        SellerFactory(username="kiran")

        response = self.client.post(reverse("seller-register"), self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_pending_seller_cannot_log_in(self):
        PendingSellerFactory(username="waiting")

        response = self.client.post(
            reverse("seller-login"), {"username": "waiting", "password": "defaultpassword"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_403_FORBIDDEN)

    def test_pending_seller_wrong_password_is_unauthorized(self):
        PendingSellerFactory(username="waiting")

        response = self.client.post(reverse("seller-login"), {"username": "waiting", "password": "bad"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_non_string_username(self):
        response = self.client.post(
            reverse("seller-login"), {"username": ["ready"], "password": "defaultpassword"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_approved_seller_logs_in(self):
        seller = SellerFactory(username="ready")

        response = self.client.post(
            reverse("seller-login"), {"username": "ready", "password": "defaultpassword"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], str(seller.id))

    def test_update_seller_profile(self):
        seller = SellerFactory()

        response = self.client.put(
            reverse("seller-update", kwargs={"sellerId": str(seller.id)}), {"location": "Jaipur"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["location"], "Jaipur")

    def test_seller_dashboard(self):
        seller = SellerFactory()
        product = ProductFactory(seller=seller, cost=Decimal("8.00"))
        ProductFactory(seller=seller)
        OrderFactory(product=product, quantity=3)
        OrderFactory(product=ProductFactory())

        response = self.client.get(reverse("seller-dashboard", kwargs={"sellerId": str(seller.id)}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["totalProducts"], 2)
        self.assertEqual(response.data["totalOrders"], 1)
        self.assertEqual(response.data["totalRevenue"], Decimal("24.00"))

    def test_dashboard_unknown_seller(self):
        response = self.client.get(reverse("seller-dashboard", kwargs={"sellerId": str(uuid.uuid4())}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_seller_sales_data(self):
        seller = SellerFactory()
        OrderFactory(product=ProductFactory(seller=seller, cost=Decimal("3.00")), quantity=2)

        daily = self.client.get(reverse("seller-sales-data", kwargs={"sellerId": str(seller.id)}))
        monthly = self.client.get(
            reverse("seller-sales-data", kwargs={"sellerId": str(seller.id)}), {"period": "monthly"}
        )
        weekly = self.client.get(reverse("seller-sales-data", kwargs={"sellerId": str(seller.id)}), {"period": "weekly"})

        self.assertEqual(daily.status_code, status.HTTP_200_OK)
        self.assertEqual(daily.data[0]["orderCount"], 1)
        self.assertEqual(daily.data[0]["revenue"], Decimal("6.00"))
        self.assertIn("month", monthly.data[0])
        self.assertEqual(weekly.status_code, status.HTTP_400_BAD_REQUEST)


class AdminIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.mail = container.email()

    def test_register_and_login_admin(self):
        register = self.client.post(
            reverse("admin-register"), {"username": "root", "password": "toor-toor"}, format="json"
        )
        login = self.client.post(reverse("admin-login"), {"username": "root", "password": "toor-toor"}, format="json")
        wrong = self.client.post(reverse("admin-login"), {"username": "root", "password": "nope"}, format="json")

        self.assertEqual(register.status_code, status.HTTP_201_CREATED)
        self.assertNotEqual(Admin.objects.get(username="root").password, "toor-toor")
        self.assertEqual(login.status_code, status.HTTP_200_OK)
        self.assertEqual(wrong.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_non_string_username(self):
        response = self.client.post(
            reverse("admin-login"), {"username": {"name": "root"}, "password": "x"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_register_duplicate_admin(self):
        AdminFactory(username="root")

        response = self.client.post(reverse("admin-register"), {"username": "root", "password": "x1"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_approve_pending_seller(self):
        seller = PendingSellerFactory()

        pending = self.client.get(reverse("admin-pending-sellers"))
        response = self.client.put(reverse("admin-approve-seller", kwargs={"sellerId": str(seller.id)}))

        self.assertEqual([s["id"] for s in pending.data], [str(seller.id)])
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], Seller.STATUS_APPROVED)
        self.assertEqual(self.mail.get_last_message().to, [seller.email])
        login = self.client.post(
            reverse("seller-login"), {"username": seller.username, "password": "defaultpassword"}, format="json"
        )
        self.assertEqual(login.status_code, status.HTTP_200_OK)

    def test_reject_seller(self):
        seller = PendingSellerFactory()

        response = self.client.put(reverse("admin-reject-seller", kwargs={"sellerId": str(seller.id)}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        seller.refresh_from_db()
        self.assertEqual(seller.status, Seller.STATUS_REJECTED)

    def test_add_seller_is_approved(self):
        payload = {"name": "Direct", "username": "direct", "email": "direct@example.com", "password": "direct1"}

        response = self.client.post(reverse("admin-add-seller"), payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], Seller.STATUS_APPROVED)

    def test_delete_seller_removes_products(self):
        seller = SellerFactory()
        product = ProductFactory(seller=seller)
        ProductFactory(seller=seller)
        line = CartLineFactory(product=product)
        order = OrderFactory(product=product)

        response = self.client.delete(reverse("admin-delete-seller", kwargs={"sellerId": str(seller.id)}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["productsRemoved"], 2)
        self.assertFalse(Product.objects.filter(seller_id=seller.id).exists())
        self.assertFalse(CartLine.objects.filter(id=line.id).exists())
        order = Order.objects.get(id=order.id)
        self.assertIsNone(order.seller_id)
        self.assertIsNone(order.product_id)

    def test_list_sellers_and_buyers(self):
        SellerFactory.create_batch(2)
        PendingSellerFactory()
        BuyerFactory.create_batch(3)

        sellers = self.client.get(reverse("admin-sellers"))
        buyers = self.client.get(reverse("admin-buyers"))

        self.assertEqual(len(sellers.data), 3)
        self.assertEqual(len(buyers.data), 3)

    def test_dashboard_totals(self):
        seller = SellerFactory()
        BuyerFactory()
        OrderFactory(product=ProductFactory(seller=seller, cost=Decimal("50.00")), quantity=2)

        response = self.client.get(reverse("admin-dashboard"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["totalSellers"], 1)
        self.assertEqual(response.data["totalBuyers"], 2)
        self.assertEqual(response.data["totalProducts"], 1)
        self.assertEqual(response.data["totalOrders"], 1)
        self.assertEqual(response.data["totalRevenue"], Decimal("100.00"))

    def test_sales_data(self):
        OrderFactory()

        response = self.client.get(reverse("admin-sales-data"), {"period": "monthly"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data[0]["orderCount"], 1)
