from rest_framework import serializers
from .models import Assignment, Installation


class InstallationSerializer(serializers.ModelSerializer):
    class Meta:
        model = Installation
        fields = ["id", "design", "building", "team", "installation_date", "total_installation_cost"]


class AssignmentSerializer(serializers.ModelSerializer):
    component_kind = serializers.CharField(read_only=True)
    component_id = serializers.CharField(read_only=True)

    class Meta:
        model = Assignment
        fields = [
            "id",
            "installation",
            "staff",
            "component_kind",
            "component_id",
            "quantity_installed",
            "starts_at",
            "ends_at",
            "created_at",
        ]
        read_only_fields = fields


class AssignmentRequestSerializer(serializers.Serializer):
    """
    Payload for POST /api/assignments/.
    Shape checks only; business rules (exactly one component, availability)
    are enforced by AvailabilityGuard.
    """
    id = serializers.IntegerField(required=False, allow_null=True, min_value=1)
    installation = serializers.IntegerField()
    staff = serializers.IntegerField()
    sensor_id = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=10)
    equipment_id = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=10)
    controller_id = serializers.CharField(required=False, allow_null=True, allow_blank=True, max_length=10)
    quantity = serializers.IntegerField(required=False, default=1)
    starts_at = serializers.DateTimeField(required=False, allow_null=True)
    ends_at = serializers.DateTimeField(required=False, allow_null=True)
