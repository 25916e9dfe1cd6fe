"""
release_staff.py
----------------
Mark staff members available again once their installation job is finished.

Usage:
    python manage.py release_staff 2
    python manage.py release_staff 2 5 8
"""

from django.core.management.base import BaseCommand, CommandError

from installations.exceptions import NotFoundError
from installations.services.availability_guard import AvailabilityGuard


class Command(BaseCommand):
    help = "Set is_available=True for the given staff ids."

    def add_arguments(self, parser):
        parser.add_argument("staff_ids", nargs="+", type=int, help="Staff id(s) to release.")

    def handle(self, *args, **options):
        guard = AvailabilityGuard()
        count = 0

        for staff_id in options["staff_ids"]:
            try:
                staff = guard.release_staff(staff_id)
            except NotFoundError as e:
                raise CommandError(str(e))
            self.stdout.write(f"{staff.pk}: {staff.full_name} is available")
            count += 1

        self.stdout.write(self.style.SUCCESS(f"Released {count} staff member(s)."))
