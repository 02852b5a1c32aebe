from io import StringIO

from django.core.management import CommandError, call_command
from django.test import TestCase

from authentication.models import Admin
from marketplace.tests.factories import AdminFactory


class CreatePlatformAdminCommandTest(TestCase):
    def test_creates_admin_with_hashed_password(self):
        out = StringIO()

        call_command("create_platform_admin", "--username", "ops", "--password", "change-me", stdout=out)

        admin = Admin.objects.get(username="ops")
        self.assertTrue(admin.check_password("change-me"))
        self.assertNotEqual(admin.password, "change-me")
        self.assertIn("Created platform admin", out.getvalue())

    def test_existing_admin_fails_without_force(self):
        AdminFactory(username="ops")

        with self.assertRaises(CommandError):
            call_command("create_platform_admin", "--username", "ops", "--password", "change-me")

    def test_existing_admin_skipped_with_force(self):
        AdminFactory(username="ops")
        out = StringIO()

        call_command("create_platform_admin", "--username", "ops", "--password", "change-me", "--force", stdout=out)

        self.assertEqual(Admin.objects.filter(username="ops").count(), 1)
        self.assertIn("Skipping", out.getvalue())

    def test_short_password_rejected(self):
        with self.assertRaises(CommandError):
            call_command("create_platform_admin", "--username", "ops", "--password", "123")
