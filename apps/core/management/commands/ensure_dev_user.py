# PATH: apps/core/management/commands/ensure_dev_user.py
"""
Local admin account for the Django admin.

- creates the user when missing, otherwise resets its password
- always staff + superuser

  python manage.py ensure_dev_user --email=admin@localhost --password=secret123
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction


class Command(BaseCommand):
    help = "Ensure a local superuser exists (email / password login for the admin)."

    def add_arguments(self, parser):
        parser.add_argument("--email", type=str, default="admin@localhost")
        parser.add_argument("--password", type=str, default=None)
        parser.add_argument("--username", type=str, default="admin")
        parser.add_argument("--name", type=str, default="Administrator")

    def handle(self, *args, **options):
        email = (options["email"] or "").strip().lower()
        password = (options["password"] or "").strip()
        if not email or not password:
            raise CommandError("--email and --password are required")

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(email__iexact=email).first()
            created = user is None
            if created:
                user = User(email=email, username=options["username"].strip(), name=options["name"].strip())
            user.set_password(password)
            user.is_active = True
            user.is_staff = True
            user.is_superuser = True
            user.save()

        verb = "Created" if created else "Updated"
        self.stdout.write(self.style.SUCCESS(f"{verb} superuser: {user.username} <{user.email}>"))
