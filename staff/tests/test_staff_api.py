from io import StringIO

from django.contrib.auth.models import User
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase
from rest_framework.test import APIClient

from installations.services.availability_guard import AvailabilityGuard
from staff.models import Staff


class StaffApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        call_command("seed_smarthome", stdout=StringIO())
        cls.admin_user = User.objects.create_user(username="planner", password="testpass123", is_staff=True)

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=self.admin_user)

    def test_available_staff(self):
        resp = self.client.get("/api/staff/available/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual([s["id"] for s in resp.data], [1, 2, 8])
        self.assertTrue(all(s["is_available"] for s in resp.data))

    def test_available_staff_excludes_booked(self):
        AvailabilityGuard().request_assignment(61, installation_id=1, staff_id=2, sensor_id="S001", quantity=1)

        resp = self.client.get("/api/staff/available/")
        self.assertEqual([s["id"] for s in resp.data], [1, 8])

    def test_release(self):
        resp = self.client.post("/api/staff/3/release/")
        self.assertEqual(resp.status_code, 200)
        self.assertTrue(resp.data["is_available"])
        self.assertTrue(Staff.objects.get(pk=3).is_available)

    def test_release_unknown_staff(self):
        resp = self.client.post("/api/staff/999/release/")
        self.assertEqual(resp.status_code, 404)

    def test_staff_only(self):
        resp = APIClient().get("/api/staff/available/")
        self.assertEqual(resp.status_code, 403)


class ReleaseStaffCommandTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        call_command("seed_smarthome", stdout=StringIO())

    def test_release_several(self):
        out = StringIO()
        call_command("release_staff", "3", "4", stdout=out)

        self.assertIn("Released 2 staff member(s).", out.getvalue())
        self.assertTrue(Staff.objects.get(pk=3).is_available)
        self.assertTrue(Staff.objects.get(pk=4).is_available)

    def test_release_unknown(self):
        with self.assertRaises(CommandError):
            call_command("release_staff", "999", stdout=StringIO())
