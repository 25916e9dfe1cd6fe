"""
cost_report.py
--------------
Costed device list per installation for an inclusive date range.

Two layers:
- compile_cost_report(): pure function over plain dict records. No database
  access, so it can be tested with hand-built fixtures.
- CostReportGenerator: loads those records from the ORM and calls it.

Row shape (one row per device line):
    installation_id, client_id, client_name, property_address, design_name,
    installation_date, component_kind, component_id, component_name,
    quantity, unit_price, line_total, total_device_cost

Rules:
- A device with no supplier price is costed at 0.00 instead of failing.
- total_device_cost is the sum of every line total of the installation.
- Installations without device lines produce no rows.
- Ordered by installation date, client id, installation id, then
  sensor/equipment/controller and component id.
"""

import logging
from collections import defaultdict
from decimal import Decimal

from installations.models import (
    Installation,
    InstallationController,
    InstallationEquipment,
    InstallationSensor,
    SupplierInventory,
)

from .periods import validate_range

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")
CENT = Decimal("0.01")
KIND_ORDER = {"sensor": 0, "equipment": 1, "controller": 2}


def compile_cost_report(installations, device_lines, prices, start_date, end_date):
    """
    Build report rows.

    Args:
        installations: iterable of dicts with installation_id, client_id,
            client_name, property_address, design_name, installation_date.
            One record per (installation, owning client).
        device_lines: iterable of dicts with installation_id, kind,
            component_id, component_name, quantity.
        prices: mapping (kind, component_id) -> Decimal unit price.
        start_date, end_date: inclusive range (date or 'YYYY-MM-DD').

    Returns:
        list of row dicts.

    Raises:
        InvalidRangeError: if the range is malformed.
    """
    start_date, end_date = validate_range(start_date, end_date)

    lines_by_installation = defaultdict(list)
    for line in device_lines:
        lines_by_installation[line["installation_id"]].append(line)

    in_range = [
        inst for inst in installations
        if start_date <= inst["installation_date"] <= end_date
    ]
    in_range.sort(key=lambda i: (i["installation_date"], i["client_id"], i["installation_id"]))

    rows = []
    for inst in in_range:
        lines = sorted(
            lines_by_installation.get(inst["installation_id"], []),
            key=lambda line: (KIND_ORDER[line["kind"]], line["component_id"]),
        )
        if not lines:
            continue

        priced = []
        for line in lines:
            unit_price = prices.get((line["kind"], line["component_id"]))
            if unit_price is None:
                logger.debug(
                    "No supplier price for %s %s (installation %s); costing at 0",
                    line["kind"], line["component_id"], inst["installation_id"],
                )
                unit_price = ZERO
            unit_price = Decimal(unit_price)
            line_total = (unit_price * line["quantity"]).quantize(CENT)
            priced.append((line, unit_price, line_total))

        total_device_cost = sum((line_total for _, _, line_total in priced), ZERO)

        for line, unit_price, line_total in priced:
            rows.append({
                "installation_id": inst["installation_id"],
                "client_id": inst["client_id"],
                "client_name": inst["client_name"],
                "property_address": inst["property_address"],
                "design_name": inst["design_name"],
                "installation_date": inst["installation_date"],
                "component_kind": line["kind"],
                "component_id": line["component_id"],
                "component_name": line["component_name"],
                "quantity": line["quantity"],
                "unit_price": unit_price,
                "line_total": line_total,
                "total_device_cost": total_device_cost,
            })

    return rows


class CostReportGenerator:
    """
    Read-only: safe to run alongside assignment writes and other reports.
    """

    def _installation_records(self, start_date, end_date):
        qs = (
            Installation.objects.filter(installation_date__range=(start_date, end_date))
            .select_related("design", "building")
            .prefetch_related("building__clientbuilding_set__client")
        )
        records = []
        for inst in qs:
            for link in inst.building.clientbuilding_set.all():
                records.append({
                    "installation_id": inst.pk,
                    "client_id": link.client.pk,
                    "client_name": link.client.full_name,
                    "property_address": inst.building.address,
                    "design_name": inst.design.design_name,
                    "installation_date": inst.installation_date,
                })
        return records

    def _device_lines(self, installation_ids):
        lines = []
        for line in InstallationSensor.objects.filter(installation_id__in=installation_ids).select_related("sensor"):
            lines.append({
                "installation_id": line.installation_id,
                "kind": "sensor",
                "component_id": line.sensor_id,
                "component_name": line.sensor.sensor_type,
                "quantity": line.quantity,
            })
        for line in InstallationEquipment.objects.filter(installation_id__in=installation_ids).select_related("equipment"):
            lines.append({
                "installation_id": line.installation_id,
                "kind": "equipment",
                "component_id": line.equipment_id,
                "component_name": line.equipment.equipment_type,
                "quantity": line.quantity,
            })
        for line in InstallationController.objects.filter(installation_id__in=installation_ids).select_related("controller"):
            lines.append({
                "installation_id": line.installation_id,
                "kind": "controller",
                "component_id": line.controller_id,
                "component_name": line.controller.controller_name,
                "quantity": line.quantity,
            })
        return lines

    def current_prices(self):
        """
        (kind, component_id) -> unit price. Newest inventory row wins.
        """
        prices = {}
        for row in SupplierInventory.objects.order_by("id"):
            if row.sensor_id:
                prices[("sensor", row.sensor_id)] = row.unit_price
            elif row.equipment_id:
                prices[("equipment", row.equipment_id)] = row.unit_price
            elif row.controller_id:
                prices[("controller", row.controller_id)] = row.unit_price
        return prices

    def generate(self, start_date, end_date):
        start_date, end_date = validate_range(start_date, end_date)

        installations = self._installation_records(start_date, end_date)
        installation_ids = {i["installation_id"] for i in installations}
        rows = compile_cost_report(
            installations,
            self._device_lines(installation_ids),
            self.current_prices(),
            start_date,
            end_date,
        )
        logger.info("Cost report %s..%s: %d row(s)", start_date, end_date, len(rows))
        return rows


def installation_totals(rows):
    """
    Collapse report rows to one {installation_id, client_id, total_device_cost} per installation/client.
    """
    seen = {}
    for row in rows:
        key = (row["installation_id"], row["client_id"])
        if key not in seen:
            seen[key] = {
                "installation_id": row["installation_id"],
                "client_id": row["client_id"],
                "client_name": row["client_name"],
                "installation_date": row["installation_date"],
                "total_device_cost": row["total_device_cost"],
            }
    return list(seen.values())
