# installations/tests/test_assignment_api.py

from io import StringIO

from django.contrib.auth.models import User
from django.core.management import call_command
from django.test import TestCase
from rest_framework.test import APIClient

from installations.models import Assignment
from staff.models import Staff


class AssignmentApiTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        call_command("seed_smarthome", stdout=StringIO())
        cls.admin_user = User.objects.create_user(username="planner", password="testpass123", is_staff=True)

    def setUp(self):
        self.client = APIClient()
        self.client.force_authenticate(user=self.admin_user)

    def test_create_assignment(self):
        resp = self.client.post(
            "/api/assignments/",
            data={"id": 61, "installation": 1, "staff": 2, "sensor_id": "S001", "quantity": 1},
            format="json",
        )
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.data["id"], 61)
        self.assertEqual(resp.data["component_kind"], "sensor")
        self.assertEqual(resp.data["component_id"], "S001")
        self.assertFalse(Staff.objects.get(pk=2).is_available)

    def test_double_booking_returns_conflict(self):
        payload = {"installation": 1, "staff": 2, "sensor_id": "S001", "quantity": 1}
        first = self.client.post("/api/assignments/", data={"id": 61, **payload}, format="json")
        second = self.client.post("/api/assignments/", data={"id": 62, **payload}, format="json")

        self.assertEqual(first.status_code, 201)
        self.assertEqual(second.status_code, 409)
        self.assertFalse(Assignment.objects.filter(pk=62).exists())

    def test_bad_component_reference_is_400(self):
        resp = self.client.post(
            "/api/assignments/",
            data={"installation": 1, "staff": 2, "sensor_id": "S001", "equipment_id": "E001"},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertIn("Exactly one", resp.data["detail"])

    def test_non_positive_quantity_is_400(self):
        resp = self.client.post(
            "/api/assignments/",
            data={"installation": 1, "staff": 2, "sensor_id": "S001", "quantity": 0},
            format="json",
        )
        self.assertEqual(resp.status_code, 400)
        self.assertTrue(Staff.objects.get(pk=2).is_available)

    def test_unknown_staff_is_404(self):
        resp = self.client.post(
            "/api/assignments/",
            data={"installation": 1, "staff": 999, "sensor_id": "S001"},
            format="json",
        )
        self.assertEqual(resp.status_code, 404)

    def test_anonymous_cannot_book(self):
        anonymous = APIClient()
        resp = anonymous.post(
            "/api/assignments/",
            data={"installation": 1, "staff": 2, "sensor_id": "S001"},
            format="json",
        )
        self.assertEqual(resp.status_code, 403)
        self.assertTrue(Staff.objects.get(pk=2).is_available)

    def test_list_assignments(self):
        resp = APIClient().get("/api/assignments/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(len(resp.data), 60)

    def test_assignments_are_immutable(self):
        resp = self.client.delete("/api/assignments/1/")
        self.assertEqual(resp.status_code, 405)
