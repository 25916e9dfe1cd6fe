"""
cost_report.py
--------------
Print the costed device list for a date range.

Usage:
    python manage.py cost_report --start 2024-01-01 --end 2024-03-07
    python manage.py cost_report --period quarter --date 2024-02-10
    python manage.py cost_report --period month            (current month)
"""

from django.core.management.base import BaseCommand, CommandError

from installations.exceptions import InvalidRangeError
from reports.services.cost_report import CostReportGenerator, installation_totals
from reports.services.periods import PERIODS, period_range, validate_range


class Command(BaseCommand):
    help = "Print the installation device cost report for a date range or period."

    def add_arguments(self, parser):
        parser.add_argument("--start", help="Range start, YYYY-MM-DD (inclusive).")
        parser.add_argument("--end", help="Range end, YYYY-MM-DD (inclusive).")
        parser.add_argument("--period", choices=PERIODS, help="Derive the range from a week, month or quarter.")
        parser.add_argument("--date", help="Anchor date for --period (default: today).")

    def handle(self, *args, **options):
        try:
            if options["period"]:
                start, end = period_range(options["period"], options["date"])
            elif options["start"] and options["end"]:
                start, end = validate_range(options["start"], options["end"])
            else:
                raise CommandError("Provide --start and --end, or --period.")
            rows = CostReportGenerator().generate(start, end)
        except InvalidRangeError as e:
            raise CommandError(str(e))

        self.stdout.write(f"Device cost report {start} to {end}")
        for row in rows:
            self.stdout.write(
                f"#{row['installation_id']} {row['installation_date']} {row['client_name']} | "
                f"{row['component_kind']} {row['component_id']} ({row['component_name']}) "
                f"{row['quantity']} x {row['unit_price']} = {row['line_total']}"
            )
        for total in installation_totals(rows):
            self.stdout.write(
                f"Installation #{total['installation_id']} ({total['client_name']}): "
                f"total device cost {total['total_device_cost']}"
            )

        self.stdout.write(self.style.SUCCESS(f"{len(rows)} device line(s)."))
