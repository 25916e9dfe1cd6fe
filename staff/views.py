# staff/views.py
#
# - GET  /api/staff/                  all staff
# - GET  /api/staff/available/        staff free for booking
# - POST /api/staff/{id}/release/     mark a staff member available again
#
# is_available is read-only here; only AvailabilityGuard changes it.
from rest_framework import status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import BasePermission
from rest_framework.response import Response

from installations.exceptions import NotFoundError
from installations.services.availability_guard import AvailabilityGuard

from .models import Staff
from .serializers import StaffSerializer


class IsStaffOnly(BasePermission):
    def has_permission(self, request, view):
        return bool(request.user and request.user.is_staff)


class StaffViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Staff.objects.all().order_by("id")
    serializer_class = StaffSerializer
    permission_classes = [IsStaffOnly]
    guard = AvailabilityGuard()

    @action(detail=False, methods=["get"], url_path="available")
    def available(self, request):
        serializer = self.get_serializer(self.guard.available_staff(), many=True)
        return Response(serializer.data)

    @action(detail=True, methods=["post"])
    def release(self, request, pk=None):
        try:
            staff = self.guard.release_staff(pk)
        except NotFoundError as e:
            return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)
        return Response(self.get_serializer(staff).data, status=status.HTTP_200_OK)
