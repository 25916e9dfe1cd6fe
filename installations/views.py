# installations/views.py
#
# Purpose:
# - Read APIs for installations and assignments.
# - POST /api/assignments/ books a staff member through AvailabilityGuard.
#
# Error mapping:
#   ValidationError -> 400, NotFoundError -> 404, ConflictError -> 409
#
from rest_framework import mixins, status, viewsets
from rest_framework.permissions import BasePermission
from rest_framework.response import Response

from .exceptions import ConflictError, NotFoundError, ValidationError
from .models import Assignment, Installation
from .serializers import AssignmentRequestSerializer, AssignmentSerializer, InstallationSerializer
from .services.availability_guard import AvailabilityGuard


# -------------------- Permissions --------------------
class IsStaffOrReadOnly(BasePermission):
    """
    Read: anyone
    Write: staff only
    """
    def has_permission(self, request, view):
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return True
        return bool(request.user and request.user.is_staff)


# -------------------- ViewSets --------------------
class InstallationViewSet(viewsets.ReadOnlyModelViewSet):
    queryset = Installation.objects.all().order_by("installation_date", "id")
    serializer_class = InstallationSerializer


class AssignmentViewSet(mixins.CreateModelMixin, viewsets.ReadOnlyModelViewSet):
    """
    Endpoints:
    - GET    /api/assignments/        list
    - GET    /api/assignments/{id}/   detail
    - POST   /api/assignments/        book staff (double-booking prevention)

    Assignments are immutable: no update or delete routes.
    """
    queryset = Assignment.objects.all().order_by("id")
    serializer_class = AssignmentSerializer
    permission_classes = [IsStaffOrReadOnly]
    guard = AvailabilityGuard()

    def create(self, request, *args, **kwargs):
        payload = AssignmentRequestSerializer(data=request.data)
        payload.is_valid(raise_exception=True)
        data = payload.validated_data

        try:
            assignment = self.guard.request_assignment(
                assignment_id=data.get("id"),
                installation_id=data["installation"],
                staff_id=data["staff"],
                sensor_id=data.get("sensor_id"),
                equipment_id=data.get("equipment_id"),
                controller_id=data.get("controller_id"),
                quantity=data["quantity"],
                starts_at=data.get("starts_at"),
                ends_at=data.get("ends_at"),
            )
        except ValidationError as e:
            return Response({"detail": "; ".join(e.messages)}, status=status.HTTP_400_BAD_REQUEST)
        except NotFoundError as e:
            return Response({"detail": str(e)}, status=status.HTTP_404_NOT_FOUND)
        except ConflictError as e:
            return Response({"detail": str(e)}, status=status.HTTP_409_CONFLICT)

        out = AssignmentSerializer(assignment)
        headers = self.get_success_headers(out.data)
        return Response(out.data, status=status.HTTP_201_CREATED, headers=headers)
