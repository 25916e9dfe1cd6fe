# installations/apps.py
from django.apps import AppConfig


class InstallationsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "installations"
