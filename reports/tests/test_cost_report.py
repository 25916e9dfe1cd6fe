# reports/tests/test_cost_report.py
#
# compile_cost_report() with hand-built fixture records (no database).

from datetime import date
from decimal import Decimal

from django.test import SimpleTestCase

from installations.exceptions import InvalidRangeError
from reports.services.cost_report import compile_cost_report, installation_totals


def installation(pk, client_id, day, name="Client"):
    return {
        "installation_id": pk,
        "client_id": client_id,
        "client_name": name,
        "property_address": f"{pk} Test Street",
        "design_name": f"Design {pk}",
        "installation_date": day,
    }


def line(installation_id, kind, component_id, quantity, name=None):
    return {
        "installation_id": installation_id,
        "kind": kind,
        "component_id": component_id,
        "component_name": name or component_id,
        "quantity": quantity,
    }


class CompileCostReportTests(SimpleTestCase):
    def setUp(self):
        self.installations = [
            installation(1, 1, date(2024, 1, 15), "James Carter"),
            installation(7, 7, date(2024, 2, 14), "Ethan Mitchell"),
            installation(3, 3, date(2024, 5, 7), "Liam Patel"),
        ]
        self.lines = [
            line(1, "controller", "C001", 1),
            line(1, "sensor", "S001", 2),
            line(1, "equipment", "E001", 2),
            line(7, "sensor", "S007", 2),
            line(3, "sensor", "S003", 3),
        ]
        self.prices = {
            ("sensor", "S001"): Decimal("25.99"),
            ("equipment", "E001"): Decimal("149.50"),
            ("controller", "C001"): Decimal("89.99"),
            ("sensor", "S007"): Decimal("21.75"),
            ("sensor", "S003"): Decimal("15.50"),
        }

    def test_rows_in_range_with_line_totals(self):
        rows = compile_cost_report(self.installations, self.lines, self.prices, "2024-01-01", "2024-03-07")

        self.assertEqual([r["installation_id"] for r in rows], [1, 1, 1, 7])
        self.assertEqual([r["component_kind"] for r in rows[:3]], ["sensor", "equipment", "controller"])
        self.assertEqual(rows[0]["line_total"], Decimal("51.98"))
        self.assertEqual(rows[1]["line_total"], Decimal("299.00"))
        self.assertEqual(rows[2]["line_total"], Decimal("89.99"))
        self.assertEqual(rows[3]["line_total"], Decimal("43.50"))

    def test_total_device_cost_is_sum_of_line_totals(self):
        rows = compile_cost_report(self.installations, self.lines, self.prices, date(2024, 1, 1), date(2024, 12, 31))

        for inst_id in (1, 3, 7):
            inst_rows = [r for r in rows if r["installation_id"] == inst_id]
            expected = sum((r["line_total"] for r in inst_rows), Decimal("0"))
            for r in inst_rows:
                self.assertEqual(r["total_device_cost"], expected)
        self.assertEqual(rows[0]["total_device_cost"], Decimal("440.97"))

    def test_range_is_inclusive(self):
        rows = compile_cost_report(self.installations, self.lines, self.prices, "2024-02-14", "2024-02-14")
        self.assertEqual({r["installation_id"] for r in rows}, {7})

    def test_missing_price_costs_zero(self):
        del self.prices[("equipment", "E001")]

        rows = compile_cost_report(self.installations, self.lines, self.prices, "2024-01-15", "2024-01-15")

        equipment = [r for r in rows if r["component_kind"] == "equipment"][0]
        self.assertEqual(equipment["unit_price"], Decimal("0.00"))
        self.assertEqual(equipment["line_total"], Decimal("0.00"))
        self.assertEqual(rows[0]["total_device_cost"], Decimal("141.97"))

    def test_installation_without_devices_is_left_out(self):
        installations = self.installations + [installation(9, 9, date(2024, 1, 20))]
        rows = compile_cost_report(installations, self.lines, self.prices, "2024-01-01", "2024-03-07")
        self.assertNotIn(9, {r["installation_id"] for r in rows})

    def test_ordering_by_date_then_client_then_installation(self):
        installations = [
            installation(5, 2, date(2024, 1, 10)),
            installation(4, 1, date(2024, 1, 10)),
            installation(2, 1, date(2024, 1, 10)),
            installation(6, 1, date(2024, 1, 9)),
        ]
        lines = [line(pk, "sensor", "S001", 1) for pk in (2, 4, 5, 6)]
        rows = compile_cost_report(installations, lines, self.prices, "2024-01-01", "2024-01-31")
        self.assertEqual([r["installation_id"] for r in rows], [6, 2, 4, 5])

    def test_start_after_end(self):
        with self.assertRaises(InvalidRangeError):
            compile_cost_report(self.installations, self.lines, self.prices, "2024-03-07", "2024-01-01")

    def test_idempotent(self):
        first = compile_cost_report(self.installations, self.lines, self.prices, "2024-01-01", "2024-12-31")
        second = compile_cost_report(self.installations, self.lines, self.prices, "2024-01-01", "2024-12-31")
        self.assertEqual(first, second)

    def test_installation_totals(self):
        rows = compile_cost_report(self.installations, self.lines, self.prices, "2024-01-01", "2024-03-07")
        totals = installation_totals(rows)
        self.assertEqual(
            [(t["installation_id"], t["total_device_cost"]) for t in totals],
            [(1, Decimal("440.97")), (7, Decimal("43.50"))],
        )
