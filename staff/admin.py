# staff/admin.py
from django.contrib import admin
from .models import Staff, Team

@admin.register(Staff)
class StaffAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "expertise", "email", "is_available")
    list_filter = ("is_available",)
    search_fields = ("first_name", "last_name", "email")

@admin.register(Team)
class TeamAdmin(admin.ModelAdmin):
    list_display = ("id", "team_name")
    search_fields = ("team_name",)
