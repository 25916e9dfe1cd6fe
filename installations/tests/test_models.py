from datetime import date, datetime, timezone as dt_timezone
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction
from django.test import TestCase

from installations.models import (
    Assignment,
    Building,
    Client,
    ClientBuilding,
    Design,
    Installation,
    Invoice,
    IoTSensor,
    SpecialistEquipment,
    Supplier,
    SupplierInventory,
)
from staff.models import Staff, Team


class ModelConstraintTests(TestCase):
    def setUp(self):
        self.client_obj = Client.objects.create(
            first_name="James", last_name="Carter", email="james@example.com"
        )
        self.building = Building.objects.create(address="14 Oakwood Lane, Leeds", building_type="House")
        ClientBuilding.objects.create(
            client=self.client_obj, building=self.building, ownership_percentage=Decimal("100.00")
        )
        self.design = Design.objects.create(
            building=self.building, design_name="Smart Leeds Home", design_date=date(2023, 5, 12)
        )
        self.team = Team.objects.create(team_name="Alpha Installers")
        self.staff = Staff.objects.create(
            first_name="Rachel", last_name="Evans", mobile_number="07983 901234", email="rachel@example.com"
        )
        self.installation = Installation.objects.create(
            design=self.design,
            building=self.building,
            team=self.team,
            installation_date=date(2024, 1, 15),
            total_installation_cost=Decimal("1500.00"),
        )
        self.sensor = IoTSensor.objects.create(id="S001", sensor_type="Temperature")
        self.equipment = SpecialistEquipment.objects.create(id="E001", equipment_type="HD CCTV")

    def test_staff_defaults_to_available(self):
        self.assertTrue(self.staff.is_available)
        self.assertEqual(str(self.staff), "Rachel Evans")

    def test_assignment_needs_exactly_one_component(self):
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Assignment.objects.create(
                    installation=self.installation,
                    staff=self.staff,
                    sensor=self.sensor,
                    equipment=self.equipment,
                    quantity_installed=1,
                )
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                Assignment.objects.create(installation=self.installation, staff=self.staff, quantity_installed=1)

    def test_inventory_row_holds_one_item_type(self):
        supplier = Supplier.objects.create(supplier_name="TechTrend Innovations")
        with self.assertRaises(IntegrityError):
            with transaction.atomic():
                SupplierInventory.objects.create(
                    supplier=supplier, sensor=self.sensor, equipment=self.equipment, unit_price=Decimal("1.00")
                )

    def test_assignment_window_validation(self):
        assignment = Assignment(
            installation=self.installation,
            staff=self.staff,
            sensor=self.sensor,
            starts_at=datetime(2024, 6, 1, 12, tzinfo=dt_timezone.utc),
            ends_at=datetime(2024, 6, 1, 9, tzinfo=dt_timezone.utc),
        )
        with self.assertRaises(ValidationError):
            assignment.clean()

    def test_invoice_due_date_within_28_days(self):
        invoice = Invoice(
            client=self.client_obj,
            design=self.design,
            invoice_date=date(2024, 1, 15),
            due_date=date(2024, 2, 13),
            amount=Decimal("1500.00"),
        )
        with self.assertRaises(ValidationError):
            invoice.clean()

        invoice.due_date = date(2024, 2, 12)
        invoice.clean()
