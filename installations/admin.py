from django.contrib import admin
from .models import (
    Assignment,
    Building,
    Client,
    Controller,
    Design,
    Installation,
    Invoice,
    IoTSensor,
    SpecialistEquipment,
    Supplier,
    SupplierInventory,
    SupplierOrder,
)

@admin.register(Client)
class ClientAdmin(admin.ModelAdmin):
    list_display = ("id", "first_name", "last_name", "email")
    search_fields = ("first_name", "last_name", "email")

@admin.register(Building)
class BuildingAdmin(admin.ModelAdmin):
    list_display = ("id", "address", "building_type")
    list_filter = ("building_type",)

@admin.register(Design)
class DesignAdmin(admin.ModelAdmin):
    list_display = ("id", "design_name", "building", "design_date", "is_lsbu_installed")
    list_filter = ("is_lsbu_installed",)

@admin.register(IoTSensor)
class IoTSensorAdmin(admin.ModelAdmin):
    list_display = ("id", "sensor_type")

@admin.register(SpecialistEquipment)
class SpecialistEquipmentAdmin(admin.ModelAdmin):
    list_display = ("id", "equipment_type")

@admin.register(Controller)
class ControllerAdmin(admin.ModelAdmin):
    list_display = ("id", "controller_name", "building", "protocol")
    list_filter = ("protocol",)

@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ("id", "supplier_name", "contact_email")

@admin.register(SupplierInventory)
class SupplierInventoryAdmin(admin.ModelAdmin):
    list_display = ("id", "supplier", "sensor", "equipment", "controller", "stock_level", "unit_price")
    list_filter = ("supplier",)

@admin.register(SupplierOrder)
class SupplierOrderAdmin(admin.ModelAdmin):
    list_display = ("id", "supplier", "order_date", "quantity_ordered", "status", "is_wifi")
    list_filter = ("status", "is_wifi")

@admin.register(Installation)
class InstallationAdmin(admin.ModelAdmin):
    list_display = ("id", "design", "building", "team", "installation_date", "total_installation_cost")
    list_filter = ("installation_date",)

@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    # Assignments are created through AvailabilityGuard so the staff flag stays in sync.
    list_display = ("id", "installation", "staff", "sensor", "equipment", "controller", "quantity_installed")
    list_filter = ("staff",)

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

@admin.register(Invoice)
class InvoiceAdmin(admin.ModelAdmin):
    list_display = ("id", "client", "design", "invoice_date", "amount", "due_date", "payment_method")
    list_filter = ("payment_method",)
