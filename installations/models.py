# installations/models.py
#
# Purpose:
# - Core domain models for the smart-home installation business.
#
# Design highlights:
# - Client / Building / ClientBuilding: many-to-many ownership with a percentage.
# - Design: one named smart-home design per building.
# - IoTSensor / SpecialistEquipment / Controller: device catalog, string ids ("S001").
# - Supplier / SupplierInventory / SupplierOrder: where devices come from and at what price.
#   • SupplierInventory and SupplierOrder reference exactly ONE device kind.
# - Installation: a design installed in a building by a team on a date.
#   • InstallationSensor / InstallationEquipment / InstallationController hold quantities.
# - Assignment: which staff member installed which component for an installation.
#   • Created only through AvailabilityGuard (installations/services/availability_guard.py).
#   • Optional starts_at/ends_at window for overlap checks.
# - Invoice: billing per client and design.
#
# Notes for developers:
# - "Exactly one component" rules are enforced twice: CheckConstraint at DB level
#   and validate_component_ref() in the guard, so callers get a readable error.
# - Staff and Team live in the staff app (referenced as "staff.Staff", "staff.Team").
#

from datetime import timedelta

from django.core.exceptions import ValidationError
from django.core.validators import MaxValueValidator, MinValueValidator
from django.db import models
from django.db.models import Q

COMPONENT_KINDS = ("sensor", "equipment", "controller")


def exactly_one_component(prefix=""):
    """
    Q condition: exactly one of sensor/equipment/controller is set.
    Shared by every table that points at a single device kind.
    """
    sensor = Q(**{f"{prefix}sensor__isnull": False})
    equipment = Q(**{f"{prefix}equipment__isnull": False})
    controller = Q(**{f"{prefix}controller__isnull": False})
    return (
        (sensor & ~equipment & ~controller)
        | (~sensor & equipment & ~controller)
        | (~sensor & ~equipment & controller)
    )


# -------------------------
# Clients and their property
# -------------------------
class Client(models.Model):
    first_name = models.CharField(max_length=50)
    last_name = models.CharField(max_length=50)
    email = models.EmailField(max_length=100, unique=True)
    phone_number = models.CharField(max_length=20, blank=True)
    address = models.CharField(max_length=255, blank=True)

    class Meta:
        ordering = ["id"]

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"

    def __str__(self):
        return self.full_name


class Building(models.Model):
    address = models.CharField(max_length=255, unique=True)
    building_type = models.CharField(max_length=50, blank=True)
    owners = models.ManyToManyField(Client, through="ClientBuilding", related_name="buildings")

    def __str__(self):
        return self.address


class ClientBuilding(models.Model):
    """
    Ownership link between a client and a building.
    """
    client = models.ForeignKey(Client, on_delete=models.CASCADE)
    building = models.ForeignKey(Building, on_delete=models.CASCADE)
    ownership_percentage = models.DecimalField(
        max_digits=5,
        decimal_places=2,
        null=True,
        blank=True,
        validators=[MinValueValidator(0), MaxValueValidator(100)],
    )

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["client", "building"], name="uniq_client_building"),
            models.CheckConstraint(
                condition=Q(ownership_percentage__gte=0) & Q(ownership_percentage__lte=100),
                name="chk_ownership_percentage",
            ),
        ]


class Design(models.Model):
    building = models.ForeignKey(Building, on_delete=models.PROTECT, related_name="designs")
    design_name = models.CharField(max_length=100)
    design_date = models.DateField()
    description = models.CharField(max_length=255, blank=True)
    is_lsbu_installed = models.BooleanField(default=False)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["building", "design_name"], name="uniq_design_building"),
        ]

    def __str__(self):
        return self.design_name


# -------------------------
# Device catalog
# -------------------------
class IoTSensor(models.Model):
    id = models.CharField(max_length=10, primary_key=True)
    sensor_type = models.CharField(max_length=50, unique=True)
    description = models.CharField(max_length=255, blank=True)

    def __str__(self):
        return f"{self.id} ({self.sensor_type})"


class SpecialistEquipment(models.Model):
    id = models.CharField(max_length=10, primary_key=True)
    equipment_type = models.CharField(max_length=50, unique=True)
    description = models.CharField(max_length=255, blank=True)

    class Meta:
        verbose_name_plural = "specialist equipment"

    def __str__(self):
        return f"{self.id} ({self.equipment_type})"


class Controller(models.Model):
    id = models.CharField(max_length=10, primary_key=True)
    building = models.ForeignKey(Building, on_delete=models.PROTECT, related_name="controllers")
    controller_name = models.CharField(max_length=50)
    protocol = models.CharField(max_length=50, default="ZigBee")

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["building", "controller_name"], name="uniq_controller_building"),
        ]

    def __str__(self):
        return f"{self.id} ({self.controller_name})"


class SensorControllerCompatibility(models.Model):
    sensor = models.ForeignKey(IoTSensor, on_delete=models.CASCADE)
    controller = models.ForeignKey(Controller, on_delete=models.CASCADE)
    compatibility_notes = models.CharField(max_length=255, blank=True)

    class Meta:
        verbose_name_plural = "sensor/controller compatibility"
        constraints = [
            models.UniqueConstraint(fields=["sensor", "controller"], name="uniq_sensor_controller"),
        ]


class DesignSensor(models.Model):
    design = models.ForeignKey(Design, on_delete=models.CASCADE, related_name="sensor_lines")
    sensor = models.ForeignKey(IoTSensor, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["design", "sensor"], name="uniq_design_sensor"),
            models.CheckConstraint(condition=Q(quantity__gt=0), name="chk_design_sensor_quantity"),
        ]


class DesignEquipment(models.Model):
    design = models.ForeignKey(Design, on_delete=models.CASCADE, related_name="equipment_lines")
    equipment = models.ForeignKey(SpecialistEquipment, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["design", "equipment"], name="uniq_design_equipment"),
            models.CheckConstraint(condition=Q(quantity__gt=0), name="chk_design_equipment_quantity"),
        ]


class DesignController(models.Model):
    design = models.ForeignKey(Design, on_delete=models.CASCADE, related_name="controller_lines")
    controller = models.ForeignKey(Controller, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["design", "controller"], name="uniq_design_controller"),
            models.CheckConstraint(condition=Q(quantity__gt=0), name="chk_design_controller_quantity"),
        ]


# -------------------------
# Suppliers
# -------------------------
class Supplier(models.Model):
    supplier_name = models.CharField(max_length=100, unique=True)
    contact_email = models.EmailField(max_length=100, blank=True)
    contact_phone = models.CharField(max_length=20, blank=True)
    website = models.CharField(max_length=255, blank=True)

    def __str__(self):
        return self.supplier_name


class SupplierInventory(models.Model):
    """
    Stock and unit price of ONE device kind at one supplier.
    The report treats the newest row (highest id) for a device as its current price.
    """
    supplier = models.ForeignKey(Supplier, on_delete=models.CASCADE, related_name="inventory")
    sensor = models.ForeignKey(IoTSensor, on_delete=models.PROTECT, null=True, blank=True)
    equipment = models.ForeignKey(SpecialistEquipment, on_delete=models.PROTECT, null=True, blank=True)
    controller = models.ForeignKey(Controller, on_delete=models.PROTECT, null=True, blank=True)
    stock_level = models.PositiveIntegerField(default=0)
    unit_price = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0)])

    class Meta:
        verbose_name_plural = "supplier inventory"
        constraints = [
            models.CheckConstraint(condition=exactly_one_component(), name="chk_inventory_one_item_type"),
            models.CheckConstraint(condition=Q(unit_price__gte=0), name="chk_inventory_unit_price"),
        ]


class SupplierOrder(models.Model):
    STATUS_CHOICES = [
        ("Complete", "Complete"),
        ("Incomplete", "Incomplete"),
        ("Cancelled", "Cancelled"),
    ]

    supplier = models.ForeignKey(Supplier, on_delete=models.PROTECT, related_name="orders")
    sensor = models.ForeignKey(IoTSensor, on_delete=models.PROTECT, null=True, blank=True)
    equipment = models.ForeignKey(SpecialistEquipment, on_delete=models.PROTECT, null=True, blank=True)
    controller = models.ForeignKey(Controller, on_delete=models.PROTECT, null=True, blank=True)
    order_date = models.DateField()
    quantity_ordered = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    status = models.CharField(max_length=20, choices=STATUS_CHOICES)
    is_wifi = models.BooleanField(default=False)

    class Meta:
        constraints = [
            models.CheckConstraint(condition=exactly_one_component(), name="chk_order_one_product"),
            models.CheckConstraint(condition=Q(quantity_ordered__gt=0), name="chk_order_quantity"),
            models.CheckConstraint(
                condition=Q(status__in=["Complete", "Incomplete", "Cancelled"]),
                name="chk_order_status",
            ),
        ]


# -------------------------
# Installation events
# -------------------------
class Installation(models.Model):
    design = models.ForeignKey(Design, on_delete=models.PROTECT, related_name="installations")
    building = models.ForeignKey(Building, on_delete=models.PROTECT, related_name="installations")
    team = models.ForeignKey("staff.Team", on_delete=models.PROTECT, related_name="installations")
    installation_date = models.DateField(db_index=True)
    total_installation_cost = models.DecimalField(max_digits=10, decimal_places=2)

    def __str__(self):
        return f"Installation #{self.pk} ({self.design.design_name} on {self.installation_date})"


class InstallationSensor(models.Model):
    installation = models.ForeignKey(Installation, on_delete=models.CASCADE, related_name="sensor_lines")
    sensor = models.ForeignKey(IoTSensor, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["installation", "sensor"], name="uniq_installation_sensor"),
            models.CheckConstraint(condition=Q(quantity__gt=0), name="chk_installation_sensor_quantity"),
        ]


class InstallationEquipment(models.Model):
    installation = models.ForeignKey(Installation, on_delete=models.CASCADE, related_name="equipment_lines")
    equipment = models.ForeignKey(SpecialistEquipment, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["installation", "equipment"], name="uniq_installation_equipment"),
            models.CheckConstraint(condition=Q(quantity__gt=0), name="chk_installation_equipment_quantity"),
        ]


class InstallationController(models.Model):
    installation = models.ForeignKey(Installation, on_delete=models.CASCADE, related_name="controller_lines")
    controller = models.ForeignKey(Controller, on_delete=models.PROTECT)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["installation", "controller"], name="uniq_installation_controller"),
            models.CheckConstraint(condition=Q(quantity__gt=0), name="chk_installation_controller_quantity"),
        ]


# -------------------------
# Staff assignment (who installed what)
# -------------------------
class Assignment(models.Model):
    """
    A staff member booked onto an installation for exactly one component.

    Rules:
    - exactly one of sensor / equipment / controller
    - quantity_installed must be > 0
    - starts_at/ends_at are optional; when present, ends_at must be after starts_at
    - never updated or deleted by the application once created
    """
    installation = models.ForeignKey(Installation, on_delete=models.CASCADE, related_name="assignments")
    staff = models.ForeignKey("staff.Staff", on_delete=models.PROTECT, related_name="assignments")
    sensor = models.ForeignKey(IoTSensor, on_delete=models.PROTECT, null=True, blank=True)
    equipment = models.ForeignKey(SpecialistEquipment, on_delete=models.PROTECT, null=True, blank=True)
    controller = models.ForeignKey(Controller, on_delete=models.PROTECT, null=True, blank=True)
    quantity_installed = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    starts_at = models.DateTimeField(null=True, blank=True)
    ends_at = models.DateTimeField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["id"]
        constraints = [
            models.CheckConstraint(condition=exactly_one_component(), name="chk_assignment_one_component"),
            models.CheckConstraint(condition=Q(quantity_installed__gt=0), name="chk_assignment_quantity"),
        ]

    @property
    def component_kind(self):
        for kind in COMPONENT_KINDS:
            if getattr(self, f"{kind}_id") is not None:
                return kind
        return None

    @property
    def component_id(self):
        kind = self.component_kind
        return getattr(self, f"{kind}_id") if kind else None

    def clean(self):
        if (self.starts_at is None) != (self.ends_at is None):
            raise ValidationError("Both starts_at and ends_at are required for a reservation window.")
        if self.starts_at and self.ends_at and self.ends_at <= self.starts_at:
            raise ValidationError("ends_at must be after starts_at.")

    def __str__(self):
        return f"Assignment #{self.pk}: staff {self.staff_id} → {self.component_kind} {self.component_id}"


# -------------------------
# Billing
# -------------------------
class Invoice(models.Model):
    client = models.ForeignKey(Client, on_delete=models.PROTECT, related_name="invoices")
    design = models.ForeignKey(Design, on_delete=models.PROTECT, null=True, blank=True, related_name="invoices")
    invoice_date = models.DateField()
    amount = models.DecimalField(max_digits=10, decimal_places=2, validators=[MinValueValidator(0.01)])
    due_date = models.DateField()
    payment_method = models.CharField(max_length=50, blank=True)

    class Meta:
        constraints = [
            models.CheckConstraint(condition=Q(amount__gt=0), name="chk_invoice_amount"),
        ]

    def clean(self):
        """
        Due date must fall within 28 days of the invoice date.
        """
        if self.invoice_date and self.due_date:
            if self.due_date < self.invoice_date or self.due_date > self.invoice_date + timedelta(days=28):
                raise ValidationError("Due date must be within 28 days of the invoice date.")

    def __str__(self):
        return f"Invoice #{self.pk} ({self.client} {self.amount})"
