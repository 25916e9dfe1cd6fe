from datetime import date, datetime

from django.test import SimpleTestCase

from installations.exceptions import InvalidRangeError
from reports.services.periods import parse_report_date, period_range, validate_range


class PeriodRangeTests(SimpleTestCase):

    def test_week_runs_monday_to_sunday(self):
        self.assertEqual(period_range("week", "2024-02-14"), (date(2024, 2, 12), date(2024, 2, 18)))
        self.assertEqual(period_range("week", date(2024, 2, 12)), (date(2024, 2, 12), date(2024, 2, 18)))

    def test_month_handles_leap_year(self):
        self.assertEqual(period_range("month", "2024-02-14"), (date(2024, 2, 1), date(2024, 2, 29)))
        self.assertEqual(period_range("Month", "2023-02-01"), (date(2023, 2, 1), date(2023, 2, 28)))

    def test_quarter(self):
        self.assertEqual(period_range("quarter", "2024-02-14"), (date(2024, 1, 1), date(2024, 3, 31)))
        self.assertEqual(period_range("quarter", "2024-11-05"), (date(2024, 10, 1), date(2024, 12, 31)))

    def test_default_anchor_is_today(self):
        start, end = period_range("week")
        self.assertLessEqual(start, end)
        self.assertEqual(start.weekday(), 0)

    def test_unknown_period(self):
        with self.assertRaises(InvalidRangeError):
            period_range("fortnight", "2024-02-14")


class ValidateRangeTests(SimpleTestCase):

    def test_parses_strings_and_dates(self):
        self.assertEqual(
            validate_range("2024-01-01", date(2024, 3, 7)),
            (date(2024, 1, 1), date(2024, 3, 7)),
        )
        self.assertEqual(parse_report_date(datetime(2024, 1, 1, 10, 30)), date(2024, 1, 1))

    def test_single_day_range_is_valid(self):
        self.assertEqual(validate_range("2024-01-01", "2024-01-01"), (date(2024, 1, 1), date(2024, 1, 1)))

    def test_start_after_end(self):
        with self.assertRaises(InvalidRangeError):
            validate_range("2024-03-07", "2024-01-01")

    def test_malformed_dates(self):
        for bad in ("", "01/01/2024", "2024-02-30", None, 20240101):
            with self.assertRaises(InvalidRangeError):
                validate_range(bad, "2024-12-31")
