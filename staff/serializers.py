from rest_framework import serializers
from .models import Staff

class StaffSerializer(serializers.ModelSerializer):
    class Meta:
        model = Staff
        fields = ["id", "first_name", "last_name", "expertise", "mobile_number", "email", "is_available"]
        read_only_fields = ["is_available"]
