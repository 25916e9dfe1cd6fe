# reports/views.py

from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework.permissions import BasePermission
from rest_framework import status

from installations.exceptions import InvalidRangeError

from .services.cost_report import CostReportGenerator, installation_totals
from .services.periods import period_range, validate_range
from .services.summaries import client_value_extremes, wifi_order_status_by_supplier


class IsStaffOnly(BasePermission):
    """
    Only allow requests from logged-in staff users.
    """
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_staff)


class CostReportView(APIView):
    """
    GET /api/reports/cost?start=YYYY-MM-DD&end=YYYY-MM-DD
    GET /api/reports/cost?period=week|month|quarter&date=YYYY-MM-DD

    Returns JSON with:
    - start, end: the inclusive range used
    - rows: one costed device line per row
    - installations: [{ installation_id, client_id, client_name, installation_date, total_device_cost }, ...]

    Only accessible by staff users.
    """
    permission_classes = [IsStaffOnly]
    generator = CostReportGenerator()

    def get(self, request):
        period = (request.query_params.get("period") or "").strip()
        try:
            if period:
                anchor = (request.query_params.get("date") or "").strip() or None
                start, end = period_range(period, anchor)
            else:
                start_raw = (request.query_params.get("start") or "").strip()
                end_raw = (request.query_params.get("end") or "").strip()
                if not start_raw or not end_raw:
                    return Response(
                        {"detail": "Provide 'start' and 'end', or 'period'."},
                        status=status.HTTP_400_BAD_REQUEST,
                    )
                start, end = validate_range(start_raw, end_raw)
            rows = self.generator.generate(start, end)
        except InvalidRangeError as e:
            return Response({"detail": str(e)}, status=status.HTTP_400_BAD_REQUEST)

        data = {
            "start": start,
            "end": end,
            "rows": rows,
            "installations": installation_totals(rows),
        }
        return Response(data)


class ClientValueExtremesView(APIView):
    """
    GET /api/reports/client-extremes

    Clients with the most and least valuable installed designs, per property.
    """
    permission_classes = [IsStaffOnly]

    def get(self, request):
        return Response({"clients": client_value_extremes()})


class WifiOrderStatusView(APIView):
    """
    GET /api/reports/wifi-orders

    Complete / incomplete / cancelled WiFi product orders per supplier.
    """
    permission_classes = [IsStaffOnly]

    def get(self, request):
        return Response({"suppliers": wifi_order_status_by_supplier()})
