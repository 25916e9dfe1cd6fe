# reports/tests/test_reports_seeded.py
#
# Cost report and summaries against the seeded sample dataset.

from datetime import date
from decimal import Decimal
from io import StringIO

from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import TestCase

from installations.exceptions import InvalidRangeError
from installations.models import InstallationSensor, SupplierInventory
from installations.services.availability_guard import AvailabilityGuard
from reports.services.cost_report import CostReportGenerator, installation_totals
from reports.services.summaries import client_value_extremes, wifi_order_status_by_supplier


class SeededReportTestCase(TestCase):
    @classmethod
    def setUpTestData(cls):
        call_command("seed_smarthome", stdout=StringIO())

    def setUp(self):
        self.generator = CostReportGenerator()


class CostReportGeneratorTests(SeededReportTestCase):

    def test_sample_quarter_window(self):
        rows = self.generator.generate("2024-01-01", "2024-03-07")

        # Only installations 1 (2024-01-15) and 7 (2024-02-14) are dated inside the window.
        self.assertEqual({r["installation_id"] for r in rows}, {1, 7})
        for r in rows:
            self.assertTrue(date(2024, 1, 1) <= r["installation_date"] <= date(2024, 3, 7))

        first = rows[0]
        self.assertEqual(first["installation_id"], 1)
        self.assertEqual(first["client_name"], "James Carter")
        self.assertEqual(first["property_address"], "14 Oakwood Lane, Leeds, LS7 2PX")
        self.assertEqual(first["design_name"], "Smart Leeds Home")
        self.assertEqual(first["component_name"], "Temperature")

        totals = {t["installation_id"]: t["total_device_cost"] for t in installation_totals(rows)}
        self.assertEqual(totals, {1: Decimal("440.97"), 7: Decimal("207.99")})

    def test_total_equals_sum_of_lines(self):
        rows = self.generator.generate("2024-01-01", "2024-12-31")
        by_installation = {}
        for r in rows:
            by_installation.setdefault(r["installation_id"], []).append(r)

        for inst_rows in by_installation.values():
            self.assertEqual(len(inst_rows), 3)
            expected = sum((r["line_total"] for r in inst_rows), Decimal("0"))
            for r in inst_rows:
                self.assertEqual(r["line_total"], r["unit_price"] * r["quantity"])
                self.assertEqual(r["total_device_cost"], expected)

    def test_ordering(self):
        rows = self.generator.generate("2024-01-01", "2024-12-31")
        keys = [(r["installation_date"], r["client_id"], r["installation_id"]) for r in rows]
        self.assertEqual(keys, sorted(keys))

    def test_missing_price_degrades_to_zero(self):
        SupplierInventory.objects.filter(equipment_id="E001").delete()

        rows = self.generator.generate("2024-01-15", "2024-01-15")

        equipment = [r for r in rows if r["component_kind"] == "equipment"]
        self.assertEqual(len(equipment), 1)
        self.assertEqual(equipment[0]["unit_price"], Decimal("0.00"))
        self.assertEqual(equipment[0]["line_total"], Decimal("0.00"))
        self.assertEqual(rows[0]["total_device_cost"], Decimal("141.97"))

    def test_newest_inventory_row_sets_price(self):
        SupplierInventory.objects.create(supplier_id=2, sensor_id="S001", stock_level=5, unit_price=Decimal("30.00"))

        rows = self.generator.generate("2024-01-15", "2024-01-15")

        sensor = [r for r in rows if r["component_kind"] == "sensor"][0]
        self.assertEqual(sensor["unit_price"], Decimal("30.00"))
        self.assertEqual(sensor["line_total"], Decimal("60.00"))

    def test_installation_with_partial_devices_still_reported(self):
        InstallationSensor.objects.filter(installation_id=7).delete()

        rows = self.generator.generate("2024-02-14", "2024-02-14")

        self.assertEqual([r["component_kind"] for r in rows], ["equipment", "controller"])
        self.assertEqual(rows[0]["total_device_cost"], Decimal("164.49"))

    def test_invalid_range(self):
        with self.assertRaises(InvalidRangeError):
            self.generator.generate("2024-03-07", "2024-01-01")

    def test_idempotent_and_unaffected_by_assignments(self):
        first = self.generator.generate("2024-01-01", "2024-03-07")
        AvailabilityGuard().request_assignment(61, installation_id=1, staff_id=2, sensor_id="S001", quantity=1)
        second = self.generator.generate("2024-01-01", "2024-03-07")
        self.assertEqual(first, second)

    def test_empty_window(self):
        self.assertEqual(self.generator.generate("2023-01-01", "2023-12-31"), [])


class SummaryTests(SeededReportTestCase):

    def test_client_value_extremes(self):
        rows = client_value_extremes()

        self.assertEqual([r["client_id"] for r in rows], [16, 3])
        self.assertEqual(rows[0]["property_location"], "56 Birchfield Drive, Southampton, SO15 4DX")
        self.assertEqual(rows[0]["total_installation_value"], Decimal("4000.00"))
        self.assertEqual(rows[1]["total_installation_value"], Decimal("900.75"))
        self.assertEqual(rows[1]["property_location"], "5 Birch Road, Manchester, M20 4AN")

    def test_wifi_order_status(self):
        rows = wifi_order_status_by_supplier()

        self.assertEqual([r["supplier_id"] for r in rows], [2, 5, 6, 11, 12])
        counts = {r["supplier_id"]: (r["total_complete"], r["total_incomplete"], r["total_cancelled"]) for r in rows}
        self.assertEqual(counts[2], (1, 0, 0))
        self.assertEqual(counts[5], (0, 0, 1))
        self.assertEqual(counts[12], (0, 0, 1))


class CostReportCommandTests(SeededReportTestCase):

    def test_range(self):
        out = StringIO()
        call_command("cost_report", "--start", "2024-01-01", "--end", "2024-03-07", stdout=out)
        output = out.getvalue()

        self.assertIn("total device cost 440.97", output)
        self.assertIn("total device cost 207.99", output)
        self.assertIn("6 device line(s).", output)

    def test_period(self):
        out = StringIO()
        call_command("cost_report", "--period", "month", "--date", "2024-02-10", stdout=out)
        self.assertIn("Device cost report 2024-02-01 to 2024-02-29", out.getvalue())
        self.assertIn("3 device line(s).", out.getvalue())

    def test_bad_range(self):
        with self.assertRaises(CommandError):
            call_command("cost_report", "--start", "2024-03-07", "--end", "2024-01-01", stdout=StringIO())

    def test_missing_arguments(self):
        with self.assertRaises(CommandError):
            call_command("cost_report", stdout=StringIO())


class SeedCommandTests(TestCase):

    def test_seed_is_idempotent(self):
        out = StringIO()
        call_command("seed_smarthome", stdout=out)
        call_command("seed_smarthome", stdout=out)

        self.assertIn("Created=0", out.getvalue().splitlines()[-1])
        self.assertEqual(SupplierInventory.objects.count(), 60)
