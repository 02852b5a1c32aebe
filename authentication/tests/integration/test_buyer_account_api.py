import uuid
from datetime import timedelta

from django.test import TestCase
from django.urls import reverse
from django.utils import timezone
from rest_framework import status
from rest_framework.test import APIClient

from authentication.models import Address, Buyer, EmailDetails
from infrastructure.container import container
from marketplace.models import CartLine, Order
from marketplace.tests.factories import AddressFactory, BuyerFactory, CartLineFactory, OrderFactory


class BuyerAccountIntegrationTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.mail = container.email()

        self.register_url = reverse("buyer-register")
        self.login_url = reverse("buyer-login")
        self.payload = {
            "name": "Asha Rao",
            "email": "asha@example.com",
            "password": "s3cret-pass",
            "gender": "female",
            "dateOfBirth": "1995-04-12",
            "mobileNumber": "9876543210",
            "location": "Pune",
        }

    def test_register_buyer(self):
        response = self.client.post(self.register_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["email"], "asha@example.com")
        self.assertEqual(response.data["mobileNumber"], "9876543210")
        self.assertNotIn("password", response.data)

        buyer = Buyer.objects.get(email="asha@example.com")
        self.assertNotEqual(buyer.password, "s3cret-pass")
        self.assertTrue(buyer.check_password("s3cret-pass"))

    def test_register_duplicate_email(self):
        BuyerFactory(email="asha@example.com")

        response = self.client.post(self.register_url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_register_invalid_payload(self):
        response = self.client.post(self.register_url, {"name": "No Email", "password": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(Buyer.objects.exists())

    def test_login(self):
        buyer = BuyerFactory(email="login@example.com")

        response = self.client.post(
            self.login_url, {"email": "LOGIN@example.com", "password": "defaultpassword"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["id"], str(buyer.id))

    def test_login_wrong_password(self):
        BuyerFactory(email="login@example.com")

        response = self.client.post(self.login_url, {"email": "login@example.com", "password": "nope"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_unknown_email(self):
        response = self.client.post(self.login_url, {"email": "ghost@example.com", "password": "x"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_login_malformed_payload(self):
        for payload in (
            {"email": {"address": "login@example.com"}, "password": "defaultpassword"},
            {"email": ["login@example.com"], "password": "defaultpassword"},
            {"password": "defaultpassword"},
            {"email": "login@example.com"},
        ):
            response = self.client.post(self.login_url, payload, format="json")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_get_buyer(self):
        buyer = BuyerFactory()

        response = self.client.get(reverse("buyer-detail", kwargs={"buyerId": str(buyer.id)}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["name"], buyer.name)

    def test_get_unknown_buyer(self):
        response = self.client.get(reverse("buyer-detail", kwargs={"buyerId": str(uuid.uuid4())}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_get_malformed_buyer_id(self):
        response = self.client.get(reverse("buyer-detail", kwargs={"buyerId": "123"}))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_profile(self):
        buyer = BuyerFactory(location="Delhi")

        response = self.client.put(
            reverse("buyer-update", kwargs={"buyerId": str(buyer.id)}),
            {"location": "Chennai", "password": "changed-pass"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        buyer.refresh_from_db()
        self.assertEqual(buyer.location, "Chennai")
        self.assertTrue(buyer.check_password("changed-pass"))

    def test_update_to_taken_email(self):
        BuyerFactory(email="taken@example.com")
        buyer = BuyerFactory()

        response = self.client.put(
            reverse("buyer-update", kwargs={"buyerId": str(buyer.id)}), {"email": "taken@example.com"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_409_CONFLICT)

    def test_password_reset_flow(self):
        buyer = BuyerFactory(email="reset@example.com")

        response = self.client.post(reverse("buyer-forgot-password"), {"email": "reset@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        buyer.refresh_from_db()
        self.assertTrue(buyer.reset_token)
        self.assertIn(buyer.reset_token, self.mail.get_last_message().body)
        self.assertTrue(EmailDetails.objects.filter(recipient="reset@example.com", sent=True).exists())

        response = self.client.post(
            reverse("buyer-reset-password"),
            {"token": buyer.reset_token, "newPassword": "brand-new-pass"},
            format="json",
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        buyer.refresh_from_db()
        self.assertTrue(buyer.check_password("brand-new-pass"))
        self.assertIsNone(buyer.reset_token)

    def test_password_reset_unknown_email_does_not_leak(self):
        response = self.client.post(reverse("buyer-forgot-password"), {"email": "ghost@example.com"}, format="json")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(self.mail.sent_messages, [])
        self.assertFalse(EmailDetails.objects.exists())

    def test_password_reset_token_single_use(self):
        buyer = BuyerFactory()
        buyer.reset_token = "tok" * 10
        buyer.reset_token_created_at = timezone.now()
        buyer.save()
        url = reverse("buyer-reset-password")

        first = self.client.post(url, {"token": buyer.reset_token, "newPassword": "first-pass"}, format="json")
        second = self.client.post(url, {"token": buyer.reset_token, "newPassword": "second-pass"}, format="json")

        self.assertEqual(first.status_code, status.HTTP_200_OK)
        self.assertEqual(second.status_code, status.HTTP_400_BAD_REQUEST)

    def test_password_reset_token_expires(self):
        buyer = BuyerFactory()
        buyer.reset_token = "expired-token"
        buyer.reset_token_created_at = timezone.now() - timedelta(hours=2)
        buyer.save()

        response = self.client.post(
            reverse("buyer-reset-password"), {"token": "expired-token", "newPassword": "whatever1"}, format="json"
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        buyer.refresh_from_db()
        self.assertTrue(buyer.check_password("defaultpassword"))


class BuyerDeletionTest(TestCase):
    def setUp(self):
        self.client = APIClient()
        self.buyer = BuyerFactory()

    def test_delete_buyer_removes_cart_and_addresses(self):
        CartLineFactory(buyer=self.buyer)
        CartLineFactory(buyer=self.buyer)
        AddressFactory(buyer=self.buyer)
        order = OrderFactory(buyer=self.buyer)
        untouched = CartLineFactory()

        response = self.client.delete(reverse("admin-delete-buyer", kwargs={"buyerId": str(self.buyer.id)}))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["cartLinesRemoved"], 2)
        self.assertEqual(response.data["addressesRemoved"], 1)
        self.assertFalse(Buyer.objects.filter(id=self.buyer.id).exists())
        self.assertFalse(Address.objects.exists())
        self.assertEqual(list(CartLine.objects.values_list("id", flat=True)), [untouched.id])
        self.assertIsNone(Order.objects.get(id=order.id).buyer_id)

    def test_delete_unknown_buyer(self):
        response = self.client.delete(reverse("admin-delete-buyer", kwargs={"buyerId": str(uuid.uuid4())}))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
