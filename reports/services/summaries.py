# reports/services/summaries.py
#
# Purpose:
# - Sales and procurement summaries that sit next to the cost report.
#   • client_value_extremes: clients with the highest and lowest total invoiced
#     design value, one row per property they own.
#   • wifi_order_status_by_supplier: Complete / Incomplete / Cancelled counts
#     of WiFi product orders per supplier.

from collections import defaultdict
from decimal import Decimal

from django.db.models import Count, F, Q, Sum

from installations.models import Invoice, Supplier


def client_value_extremes():
    # Only invoices for designs on buildings the invoiced client owns count.
    per_property = (
        Invoice.objects.filter(design__building__clientbuilding__client=F("client"))
        .values(
            "client_id",
            "client__first_name",
            "client__last_name",
            "client__email",
            "design__building__address",
        )
        .annotate(total=Sum("amount"))
    )
    per_property = list(per_property)
    if not per_property:
        return []

    client_totals = defaultdict(lambda: Decimal("0"))
    for row in per_property:
        client_totals[row["client_id"]] += row["total"]

    lowest = min(client_totals.values())
    highest = max(client_totals.values())

    result = [
        {
            "client_id": row["client_id"],
            "first_name": row["client__first_name"],
            "last_name": row["client__last_name"],
            "email": row["client__email"],
            "property_location": row["design__building__address"],
            "total_installation_value": row["total"],
            "client_total": client_totals[row["client_id"]],
        }
        for row in per_property
        if client_totals[row["client_id"]] in (lowest, highest)
    ]
    result.sort(key=lambda r: (-r["client_total"], r["client_id"], r["property_location"]))
    return result


def wifi_order_status_by_supplier():
    rows = (
        Supplier.objects.filter(orders__is_wifi=True)
        .annotate(
            total_complete=Count("orders", filter=Q(orders__status="Complete")),
            total_incomplete=Count("orders", filter=Q(orders__status="Incomplete")),
            total_cancelled=Count("orders", filter=Q(orders__status="Cancelled")),
        )
        .order_by("id")
        .values("id", "supplier_name", "total_complete", "total_incomplete", "total_cancelled")
    )
    return [
        {
            "supplier_id": row["id"],
            "supplier_name": row["supplier_name"],
            "total_complete": row["total_complete"],
            "total_incomplete": row["total_incomplete"],
            "total_cancelled": row["total_cancelled"],
        }
        for row in rows
    ]
