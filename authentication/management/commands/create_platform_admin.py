"""
Django management command to create a platform admin account.

Usage:
    python manage.py create_platform_admin --username "ops" --password "change-me"
    python manage.py create_platform_admin --username "ops" --password "change-me" --force

Admins cannot register through a seller or buyer flow; this command (or the
/admin/register endpoint) is how the first one gets in.
"""

from django.core.management.base import BaseCommand, CommandError

from authentication.models import Admin
from infrastructure.container import container
from utils.service_base import ErrorCodes


class Command(BaseCommand):
    help = "Create a platform admin account with a hashed password"

    def add_arguments(self, parser):
        parser.add_argument("--username", type=str, required=True, help="Admin username (must be unique)")
        parser.add_argument("--password", type=str, required=True, help="Initial password (min. 6 characters)")
        parser.add_argument(
            "--force", action="store_true", help="Do not fail when the admin exists (the account is left untouched)"
        )

    def handle(self, *args, **options):
        username = options["username"].strip()
        password = options["password"]
        force = options["force"]

        if len(username) < 3:
            raise CommandError("Username must be at least 3 characters long")
        if len(password) < 6:
            raise CommandError("Password must be at least 6 characters long")

        if Admin.objects.filter(username=username).exists():
            if force:
                self.stdout.write(self.style.WARNING(f'Admin "{username}" already exists. Skipping due to --force flag.'))
                return
            raise CommandError(f'Admin "{username}" already exists. Use --force to skip existing admins.')

        result = container.admin_service().register(username, password)
        if not result.ok:
            if result.error == ErrorCodes.ACCOUNT_EXISTS and force:
                self.stdout.write(self.style.WARNING(result.error_detail))
                return
            raise CommandError(result.error_detail)

        self.stdout.write(self.style.SUCCESS(f'Created platform admin "{username}" ({result.value.id})'))
