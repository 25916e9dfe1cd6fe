"""
seed_smarthome.py
-----------------
Seeds (creates or updates) the sample smart-home dataset: clients, buildings,
designs, device catalog, suppliers and prices, staff and teams, installations
and the staff assignments already on record. You can run this any time; rows
are upserted by id (or by their natural key for link tables).

Re-running restores the sample staff availability flags.

Usage:
    python manage.py seed_smarthome
"""

from datetime import date
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.db import transaction

from installations.models import (
    Assignment,
    Building,
    Client,
    ClientBuilding,
    Controller,
    Design,
    DesignController,
    DesignEquipment,
    DesignSensor,
    Installation,
    InstallationController,
    InstallationEquipment,
    InstallationSensor,
    Invoice,
    IoTSensor,
    SensorControllerCompatibility,
    SpecialistEquipment,
    Supplier,
    SupplierInventory,
    SupplierOrder,
)
from staff.models import Staff, Team, TeamMember


# (id, first, last, email, phone, address)
CLIENTS = [
    (1, "James", "Carter", "james.carter84@gmail.com", "07712 345678", "14 Oakwood Lane, Leeds, LS7 2PX"),
    (2, "Sophie", "Harrington", "sophie.harrington@outlook.com", "07983 901234", "27 Elm Grove, Bristol, BS8 1TL"),
    (3, "Liam", "Patel", "liam.patel92@yahoo.co.uk", "07850 567890", "5 Birch Road, Manchester, M20 4AN"),
    (4, "Emma", "Thompson", "emma.t.work@gmail.com", "07496 123456", "42 Willow Crescent, London, SW9 0EY"),
    (5, "Noah", "Bennett", "noah.bennett1980@hotmail.com", "07789 234567", "19 Maple Avenue, Birmingham, B15 2UG"),
    (6, "Olivia", "Nguyen", "olivia.n@icloud.com", "07912 678901", "33 Cedar Close, Edinburgh, EH12 7QD"),
    (7, "Ethan", "Mitchell", "e.mitchell73@gmail.com", "07834 890123", "8 Pine Street, Cardiff, CF24 3HL"),
    (8, "Ava", "Rodriguez", "ava.rodriguez.art@yahoo.com", "07701 345890", "61 Ashwood Drive, Glasgow, G12 0PJ"),
    (9, "William", "Hughes", "will.hughes@live.co.uk", "07458 901234", "12 Chestnut Way, Sheffield, S3 7BX"),
    (10, "Isabella", "Walker", "isabella.walker99@outlook.com", "07967 123456", "25 Sycamore Road, Nottingham, NG7 6HF"),
    (11, "Mason", "Khan", "mason.khan.work@gmail.com", "07823 567890", "3 Laurel Gardens, Liverpool, L17 8QP"),
    (12, "Mia", "Fleming", "mia.fleming88@yahoo.com", "07745 678901", "47 Hazel Lane, Newcastle upon Tyne, NE4 9YU"),
    (13, "Jacob", "O’Connor", "jacob.oconnor@icloud.com", "07412 234567", "9 Spruce Terrace, Brighton, BN1 5RT"),
    (14, "Charlotte", "Ellis", "charlotte.ellis21@hotmail.com", "07989 345678", "38 Poplar Avenue, Oxford, OX4 2LP"),
    (15, "Logan", "Stewart", "logan.stewart.pro@gmail.com", "07867 890123", "22 Acacia Road, Cambridge, CB5 8PY"),
    (16, "Amelia", "Morales", "amelia.morales@outlook.com", "07723 901234", "56 Birchfield Drive, Southampton, SO15 4DX"),
    (17, "Lucas", "Pearson", "lucas.pearson77@yahoo.co.uk", "07489 123456", "17 Elmwood Crescent, York, YO31 9LJ"),
    (18, "Harper", "Jensen", "harper.jensen.art@gmail.com", "07901 567890", "31 Oakfield Road, Exeter, EX4 1BA"),
    (19, "Elijah", "Brooks", "elijah.brooks@live.com", "07812 678901", "4 Willowbank Close, Belfast, BT5 6JN"),
    (20, "Grace", "Dixon", "grace.dixon1995@icloud.com", "07756 234567", "50 Cedarwood Lane, Norwich, NR2 3TF"),
]

# Building i is the client i's address.
BUILDING_TYPES = [
    "House", "House", "Apartment", "Apartment", "House", "House", "Apartment", "House", "Office", "House",
    "Apartment", "Mixed-Use", "House", "Office", "House", "Warehouse", "Apartment", "Retail", "House", "Mixed-Use",
]

OWNERSHIP = [
    "100.00", "100.00", "75.00", "100.00", "100.00", "50.00", "100.00", "100.00", "100.00", "80.00",
    "100.00", "60.00", "100.00", "100.00", "100.00", "25.00", "100.00", "100.00", "90.00", "70.00",
]

# (id, name, design date, description, installed by LSBU); design i is for building i
DESIGNS = [
    (1, "Smart Leeds Home", "2023-05-12", "Energy-efficient home setup", True),
    (2, "Bristol Eco Flat", "2023-07-19", "Sustainable living design", False),
    (3, "Manchester Urban", "2023-09-25", "Compact smart apartment", True),
    (4, "London Modern", "2023-11-03", "High-tech urban living", True),
    (5, "Birmingham Family", "2024-01-15", "Family-oriented smart home", False),
    (6, "Edinburgh Classic", "2024-03-22", "Traditional with smart upgrades", True),
    (7, "Cardiff Studio", "2024-04-10", "Minimalist smart design", False),
    (8, "Glasgow Retreat", "2024-05-18", "Cozy smart home layout", True),
    (9, "Sheffield Workspace", "2024-06-01", "Smart office solution", True),
    (10, "Nottingham Green", "2024-07-07", "Eco-friendly home design", False),
    (11, "Liverpool Compact", "2024-08-14", "Small apartment automation", True),
    (12, "Newcastle Hybrid", "2024-09-20", "Mixed-use smart setup", False),
    (13, "Brighton Coastal", "2024-10-05", "Seaside smart home", True),
    (14, "Oxford Business", "2024-11-12", "Office automation design", True),
    (15, "Cambridge Scholar", "2024-12-01", "Academic home setup", False),
    (16, "Southampton Storage", "2025-01-09", "Smart warehouse system", True),
    (17, "York Heritage", "2025-02-15", "Historical home with tech", False),
    (18, "Exeter Retail", "2025-03-03", "Smart shop layout", True),
    (19, "Belfast Cosy", "2025-03-20", "Warm smart home design", False),
    (20, "Norwich Blend", "2025-03-27", "Mixed-use modern design", True),
]

SENSORS = [
    ("S001", "Temperature", "Measures room temperature"),
    ("S002", "Humidity", "Tracks moisture levels"),
    ("S003", "Motion", "Detects movement in area"),
    ("S004", "Smoke", "Alerts for smoke detection"),
    ("S005", "CO2", "Monitors carbon dioxide levels"),
    ("S006", "Light", "Measures ambient light intensity"),
    ("S007", "Door", "Detects door open/close"),
    ("S008", "Window", "Monitors window status"),
    ("S009", "Pressure", "Measures air pressure"),
    ("S010", "Water Leak", "Detects water leaks"),
    ("S011", "Noise", "Records sound levels"),
    ("S012", "Gas", "Detects gas leaks"),
    ("S013", "Vibration", "Senses structural vibrations"),
    ("S014", "Occupancy", "Tracks room occupancy"),
    ("S015", "Air Quality", "Monitors pollutants"),
    ("S016", "Heat", "Detects high temperatures"),
    ("S017", "Flood", "Alerts for flooding"),
    ("S018", "Proximity", "Detects nearby objects"),
    ("S019", "Energy", "Measures power consumption"),
    ("S020", "Tilt", "Detects angle changes"),
]

EQUIPMENT = [
    ("E001", "HD CCTV", "High-definition security camera"),
    ("E002", "Smart Lock", "Keyless entry system"),
    ("E003", "Thermostat", "Programmable temperature control"),
    ("E004", "Doorbell Cam", "Video-enabled doorbell"),
    ("E005", "Floodlight", "Motion-activated outdoor light"),
    ("E006", "Speaker", "Smart audio system"),
    ("E007", "Smoke Alarm", "Connected smoke detector"),
    ("E008", "Window Lock", "Automated window security"),
    ("E009", "Motion Light", "Indoor motion-sensing light"),
    ("E010", "Air Purifier", "Smart air quality device"),
    ("E011", "IP Camera", "Internet protocol surveillance"),
    ("E012", "Smart Plug", "Remote power control"),
    ("E013", "Heat Pump", "Efficient heating system"),
    ("E014", "Blinds", "Automated window blinds"),
    ("E015", "Leak Detector", "Water leak alert system"),
    ("E016", "Garage Opener", "Smart garage door control"),
    ("E017", "Video Monitor", "Indoor video display"),
    ("E018", "Alarm Panel", "Central security control"),
    ("E019", "Solar Panel", "Energy generation unit"),
    ("E020", "Fan", "Smart ventilation device"),
]

# Controller i sits in building i.
CONTROLLERS = [
    ("C001", "Leeds Hub", "ZigBee"),
    ("C002", "Bristol Core", "WiFi"),
    ("C003", "Manchester Link", "ZigBee"),
    ("C004", "London Node", "WiFi"),
    ("C005", "Birmingham Base", "ZigBee"),
    ("C006", "Edinburgh Control", "ZigBee"),
    ("C007", "Cardiff Unit", "WiFi"),
    ("C008", "Glasgow Gateway", "ZigBee"),
    ("C009", "Sheffield Station", "WiFi"),
    ("C010", "Nottingham Hub", "ZigBee"),
    ("C011", "Liverpool Core", "WiFi"),
    ("C012", "Newcastle Link", "ZigBee"),
    ("C013", "Brighton Node", "WiFi"),
    ("C014", "Oxford Base", "ZigBee"),
    ("C015", "Cambridge Control", "WiFi"),
    ("C016", "Southampton Unit", "ZigBee"),
    ("C017", "York Gateway", "WiFi"),
    ("C018", "Exeter Station", "ZigBee"),
    ("C019", "Belfast Hub", "WiFi"),
    ("C020", "Norwich Core", "ZigBee"),
]

# Sensor i is paired with controller i.
COMPATIBILITY_NOTES = [
    "Stable with ZigBee v3.0", "WiFi requires firmware 2.1", "Optimized for ZigBee range",
    "WiFi pairing tested", "ZigBee low latency", "Supports ZigBee mesh",
    "WiFi signal strength verified", "ZigBee reliable in multi-room", "WiFi needs strong signal",
    "ZigBee water detection compatible", "WiFi audio sync confirmed", "ZigBee gas alert tested",
    "WiFi vibration range limited", "ZigBee occupancy precise", "WiFi air quality stable",
    "ZigBee heat threshold set", "WiFi flood alert functional", "ZigBee proximity accurate",
    "WiFi energy data smooth", "ZigBee tilt detection reliable",
]

# Design i / installation i uses sensor i, equipment i and controller i (controller qty is always 1).
SENSOR_QTY = [2, 1, 3, 1, 2, 1, 2, 1, 1, 2, 1, 3, 1, 2, 1, 2, 1, 1, 2, 1]
EQUIPMENT_QTY = [2, 1, 1, 1, 2, 1, 1, 2, 1, 1, 2, 1, 1, 2, 1, 1, 1, 1, 2, 1]

# (id, name, email, phone, website)
SUPPLIERS = [
    (1, "TechTrend Innovations", "sales@techtrend.co.uk", "020 7946 0123", "www.techtrend.co.uk"),
    (2, "SmartHome Solutions", "info@smarthomesol.co.uk", "0161 234 5678", "www.smarthomesol.co.uk"),
    (3, "EcoTech Supplies", "contact@ecotechsupplies.com", "0113 456 7890", "www.ecotechsupplies.com"),
    (4, "SecureSys Ltd", "support@securesys.co.uk", "029 2087 6543", "www.securesys.co.uk"),
    (5, "BrightFuture Tech", "enquiries@brightfuturetech.co.uk", "0131 555 1234", "www.brightfuturetech.co.uk"),
    (6, "GreenWave Systems", "sales@greenwavesystems.com", "0141 332 9988", "www.greenwavesystems.com"),
    (7, "IoT Dynamics", "info@iotdynamics.co.uk", "0191 487 3210", "www.iotdynamics.co.uk"),
    (8, "HomeGuard Innovations", "contact@homeguard.co.uk", "0115 987 6543", "www.homeguard.co.uk"),
    (9, "UrbanTech Distributors", "orders@urbantechdist.co.uk", "0151 345 6789", "www.urbantechdist.co.uk"),
    (10, "NexGen Supplies", "support@nexgensupplies.co.uk", "0121 555 4321", "www.nexgensupplies.co.uk"),
    (11, "SafeZone Tech", "sales@safezonetech.com", "020 8123 4567", "www.safezonetech.com"),
    (12, "SmartLink Providers", "info@smartlinkprov.co.uk", "023 8076 5432", "www.smartlinkprov.co.uk"),
    (13, "EcoLiving Systems", "enquiries@ecolivingsys.co.uk", "01865 123 987", "www.ecolivingsys.co.uk"),
    (14, "CitySmart Solutions", "contact@citysmartsol.co.uk", "01223 456 789", "www.citysmartsol.co.uk"),
    (15, "TechSafe Supplies", "orders@techsafe.co.uk", "028 9045 6789", "www.techsafe.co.uk"),
    (16, "FutureProof Tech", "sales@futureprooftech.co.uk", "01603 234 567", "www.futureprooftech.co.uk"),
    (17, "HomeSync Distributors", "info@homesyncdist.co.uk", "01392 876 543", "www.homesyncdist.co.uk"),
    (18, "GreenTech Partners", "support@greentechpartners.co.uk", "01904 321 987", "www.greentechpartners.co.uk"),
    (19, "SmartCore Systems", "enquiries@smartcoresys.co.uk", "0114 567 8901", "www.smartcoresys.co.uk"),
    (20, "VitalTech Ltd", "contact@vitaltech.co.uk", "01752 123 456", "www.vitaltech.co.uk"),
]

# Supplier i stocks sensor i (inventory id i), equipment i (20 + i) and controller i (40 + i).
# (stock, unit price)
SENSOR_STOCK = [
    (50, "25.99"), (40, "19.75"), (60, "15.50"), (45, "22.00"), (55, "29.95"),
    (38, "18.50"), (42, "21.75"), (35, "17.25"), (48, "23.50"), (30, "26.00"),
    (25, "19.00"), (50, "28.75"), (40, "16.50"), (45, "24.99"), (55, "27.50"),
    (32, "20.25"), (38, "22.75"), (44, "18.99"), (50, "29.00"), (36, "21.50"),
]
EQUIPMENT_STOCK = [
    (30, "149.50"), (25, "79.00"), (20, "65.25"), (35, "99.99"), (28, "120.00"),
    (22, "55.00"), (33, "69.99"), (18, "85.50"), (26, "45.75"), (40, "110.00"),
    (15, "130.25"), (30, "39.99"), (25, "95.00"), (20, "75.50"), (35, "89.75"),
    (28, "105.00"), (22, "115.50"), (18, "125.00"), (30, "199.99"), (25, "59.50"),
]
CONTROLLER_STOCK = [
    (15, "89.99"), (10, "95.00"), (12, "87.50"), (18, "92.75"), (14, "85.00"),
    (16, "90.25"), (20, "94.50"), (13, "88.75"), (17, "93.00"), (11, "86.50"),
    (19, "91.25"), (15, "89.00"), (12, "94.75"), (18, "87.99"), (14, "92.50"),
    (16, "90.00"), (20, "93.25"), (13, "88.50"), (17, "91.75"), (11, "86.25"),
]

# (id, supplier, kind, component, order date, quantity, status, is_wifi)
SUPPLIER_ORDERS = [
    (1, 1, "sensor", "S001", "2025-03-01", 30, "Complete", False),
    (2, 2, "equipment", "E001", "2025-03-02", 15, "Complete", True),
    (3, 3, "controller", "C001", "2025-03-03", 10, "Complete", False),
    (4, 4, "sensor", "S002", "2025-03-04", 25, "Complete", False),
    (5, 5, "equipment", "E002", "2025-03-05", 20, "Cancelled", True),
    (6, 6, "controller", "C002", "2025-03-06", 12, "Complete", True),
    (7, 7, "sensor", "S003", "2025-03-07", 35, "Complete", False),
    (8, 8, "equipment", "E003", "2025-03-08", 18, "Complete", False),
    (9, 9, "controller", "C003", "2025-03-09", 15, "Incomplete", False),
    (10, 10, "sensor", "S004", "2025-03-10", 40, "Complete", False),
    (11, 11, "equipment", "E004", "2025-03-11", 22, "Complete", True),
    (12, 12, "controller", "C004", "2025-03-12", 14, "Cancelled", True),
    (13, 13, "sensor", "S005", "2025-03-13", 28, "Complete", False),
    (14, 14, "equipment", "E005", "2025-03-14", 25, "Complete", False),
    (15, 15, "controller", "C005", "2025-03-15", 16, "Complete", False),
    (16, 16, "sensor", "S006", "2025-03-16", 32, "Incomplete", False),
    (17, 17, "equipment", "E006", "2025-03-17", 20, "Complete", False),
    (18, 18, "controller", "C006", "2025-03-18", 13, "Complete", False),
    (19, 19, "sensor", "S007", "2025-03-19", 45, "Cancelled", False),
    (20, 20, "equipment", "E007", "2025-03-20", 17, "Incomplete", False),
]

# (id, first, last, expertise, mobile, email, is_available)
STAFF = [
    (1, "Thomas", "Wright", "IoT Installation", "07712 345678", "thomas.wright@lsbu.co.uk", True),
    (2, "Rachel", "Evans", "Smart Home Design", "07983 901234", "rachel.evans@lsbu.co.uk", True),
    (3, "Amit", "Sharma", "Network Setup", "07850 567890", "amit.sharma@lsbu.co.uk", False),
    (4, "Clare", "Taylor", "Security Systems", "07496 123456", "clare.taylor@lsbu.co.uk", False),
    (5, "David", "Murray", "Electrical Wiring", "07789 234567", "david.murray@lsbu.co.uk", False),
    (6, "Priya", "Singh", "Sensor Calibration", "07912 678901", "priya.singh@lsbu.co.uk", False),
    (7, "Mark", "Jenkins", "Controller Config", "07834 890123", "mark.jenkins@lsbu.co.uk", False),
    (8, "Laura", "Campbell", "Customer Support", "07701 345890", "laura.campbell@lsbu.co.uk", True),
    (9, "Gareth", "Lloyd", "Smart Lighting", "07458 901234", "gareth.lloyd@lsbu.co.uk", False),
    (10, "Sophie", "Baxter", "HVAC Systems", "07967 123456", "sophie.baxter@lsbu.co.uk", False),
    (11, "Hassan", "Ali", "WiFi Optimization", "07823 567890", "hassan.ali@lsbu.co.uk", False),
    (12, "Emily", "Ford", "Data Analysis", "07745 678901", "emily.ford@lsbu.co.uk", False),
    (13, "Sean", "Kelly", "Installation Lead", "07412 234567", "sean.kelly@lsbu.co.uk", False),
    (14, "Nina", "Patel", "Tech Support", "07989 345678", "nina.patel@lsbu.co.uk", False),
    (15, "Peter", "Gordon", "Equipment Testing", "07867 890123", "peter.gordon@lsbu.co.uk", False),
    (16, "Kirsty", "Reid", "Project Management", "07723 901234", "kirsty.reid@lsbu.co.uk", False),
    (17, "Jack", "Turner", "Smart Locks", "07489 123456", "jack.turner@lsbu.co.uk", False),
    (18, "Fiona", "Grant", "Energy Systems", "07901 567890", "fiona.grant@lsbu.co.uk", False),
    (19, "Ryan", "Hughes", "CCTV Setup", "07812 678901", "ryan.hughes@lsbu.co.uk", False),
    (20, "Leah", "Morgan", "Software Integration", "07756 234567", "leah.morgan@lsbu.co.uk", False),
    (21, "Omar", "Khan", "Network Security", "07423 567890", "omar.khan@lsbu.co.uk", False),
    (22, "Holly", "White", "Sensor Deployment", "07934 678901", "holly.white@lsbu.co.uk", False),
    (23, "Chris", "Doyle", "Maintenance", "07845 890123", "chris.doyle@lsbu.co.uk", False),
    (24, "Sara", "Bennett", "Customer Training", "07767 901234", "sara.bennett@lsbu.co.uk", False),
    (25, "Neil", "Fraser", "Controller Setup", "07478 123456", "neil.fraser@lsbu.co.uk", False),
    (26, "Anita", "Chopra", "Quality Assurance", "07989 567890", "anita.chopra@lsbu.co.uk", False),
    (27, "Luke", "Pearson", "Field Technician", "07890 678901", "luke.pearson@lsbu.co.uk", False),
    (28, "Megan", "Lawson", "Design Consultant", "07701 234567", "megan.lawson@lsbu.co.uk", False),
    (29, "Ben", "Wallace", "Installation Support", "07412 345678", "ben.wallace@lsbu.co.uk", False),
    (30, "Zoe", "Hamilton", "Tech Trainer", "07923 456789", "zoe.hamilton@lsbu.co.uk", False),
]

TEAMS = [
    "Alpha Installers", "Beta Tech Crew", "Gamma Smart Squad", "Delta Wiring Team", "Epsilon Security",
    "Zeta Home Tech", "Eta Sensor Group", "Theta Networkers", "Iota Control Unit", "Kappa Eco Team",
    "Lambda Support", "Mu Design Force", "Nu Maintenance", "Xi Energy Crew", "Omicron Field Techs",
    "Pi Smart Systems", "Rho Installation", "Sigma Tech Pioneers", "Tau Connect Team", "Upsilon Home Crew",
]

# team id -> staff ids
TEAM_MEMBERS = {
    1: [1, 2], 2: [3, 4, 5], 3: [6, 7], 4: [8, 9, 10], 5: [11, 12],
    6: [13, 14, 15], 7: [16, 17], 8: [18, 19, 20], 9: [21, 22], 10: [23, 24, 25],
    11: [26, 27], 12: [28, 29, 30], 13: [1, 3], 14: [4, 6], 15: [7, 8],
    16: [9, 10], 17: [11, 12], 18: [13, 14], 19: [15, 16], 20: [17, 18],
}

# Installation i: design i, building i, team i. (date, total cost)
INSTALLATIONS = [
    ("2024-01-15", "1500.00"), ("2024-03-22", "2200.50"), ("2024-05-07", "900.75"), ("2024-07-19", "1800.00"),
    ("2024-09-03", "2500.00"), ("2024-10-28", "3200.25"), ("2024-02-14", "1100.00"), ("2024-06-11", "1750.80"),
    ("2024-08-25", "2800.00"), ("2024-11-09", "1300.50"), ("2025-01-17", "2000.00"), ("2024-04-30", "3500.00"),
    ("2024-12-05", "1600.75"), ("2025-02-12", "2900.00"), ("2024-03-08", "1450.25"), ("2025-03-20", "4000.00"),
    ("2024-07-02", "950.00"), ("2025-01-29", "2700.50"), ("2024-10-14", "1850.00"), ("2024-12-23", "3100.75"),
]

# Assignments on record. Installation i has three: sensor i (id i), equipment i (id 20 + i),
# controller i (id 40 + i). Staff for each, in installation order:
SENSOR_STAFF = list(range(1, 21))
EQUIPMENT_STAFF = list(range(2, 21)) + [1]
CONTROLLER_STAFF = list(range(3, 21)) + [1, 2]
SENSOR_INSTALLED_QTY = [1, 1, 2, 1, 2, 1, 2, 1, 1, 2, 1, 3, 1, 2, 1, 2, 1, 1, 2, 1]
EQUIPMENT_INSTALLED_QTY = [1, 1, 1, 1, 2, 1, 1, 2, 1, 1, 2, 1, 1, 2, 1, 1, 1, 1, 2, 1]

# Invoice i: client i, design i, invoiced on installation i's date. (due date, payment method)
INVOICES = [
    ("2024-02-12", "Credit Card"), ("2024-04-19", "Debit Card"), ("2024-06-04", "PayPal"),
    ("2024-08-16", "Credit Card"), ("2024-10-01", "Google Pay"), ("2024-11-25", "Debit Card"),
    ("2024-03-13", "Credit Card"), ("2024-07-09", "PayPal"), ("2024-09-22", "Google Pay"),
    ("2024-12-07", "Debit Card"), ("2025-02-14", "Credit Card"), ("2024-05-28", "Google Pay"),
    ("2025-01-02", "PayPal"), ("2025-03-12", "Debit Card"), ("2024-04-05", "Credit Card"),
    ("2025-04-17", "Google Pay"), ("2024-07-30", "PayPal"), ("2025-02-26", "Credit Card"),
    ("2024-11-11", "Debit Card"), ("2025-01-20", "PayPal"),
]


def _d(value):
    return date.fromisoformat(value)


class Command(BaseCommand):
    help = "Seed or update the sample smart-home dataset."

    def _upsert(self, model, lookup, defaults):
        _obj, is_created = model.objects.update_or_create(defaults=defaults, **lookup)
        if is_created:
            self.created += 1
        else:
            self.updated += 1

    @transaction.atomic
    def handle(self, *args, **options):
        self.created = 0
        self.updated = 0

        for pk, first, last, email, phone, address in CLIENTS:
            self._upsert(Client, {"pk": pk}, {
                "first_name": first, "last_name": last, "email": email,
                "phone_number": phone, "address": address,
            })
            self._upsert(Building, {"pk": pk}, {"address": address, "building_type": BUILDING_TYPES[pk - 1]})
            self._upsert(
                ClientBuilding,
                {"client_id": pk, "building_id": pk},
                {"ownership_percentage": Decimal(OWNERSHIP[pk - 1])},
            )

        for pk, name, design_date, description, lsbu in DESIGNS:
            self._upsert(Design, {"pk": pk}, {
                "building_id": pk, "design_name": name, "design_date": _d(design_date),
                "description": description, "is_lsbu_installed": lsbu,
            })

        for pk, sensor_type, description in SENSORS:
            self._upsert(IoTSensor, {"pk": pk}, {"sensor_type": sensor_type, "description": description})
        for pk, equipment_type, description in EQUIPMENT:
            self._upsert(SpecialistEquipment, {"pk": pk}, {"equipment_type": equipment_type, "description": description})
        for n, (pk, name, protocol) in enumerate(CONTROLLERS, start=1):
            self._upsert(Controller, {"pk": pk}, {"building_id": n, "controller_name": name, "protocol": protocol})

        for n in range(1, 21):
            sensor, equipment, controller = f"S{n:03d}", f"E{n:03d}", f"C{n:03d}"
            self._upsert(
                SensorControllerCompatibility,
                {"sensor_id": sensor, "controller_id": controller},
                {"compatibility_notes": COMPATIBILITY_NOTES[n - 1]},
            )
            self._upsert(DesignSensor, {"design_id": n, "sensor_id": sensor}, {"quantity": SENSOR_QTY[n - 1]})
            self._upsert(DesignEquipment, {"design_id": n, "equipment_id": equipment}, {"quantity": EQUIPMENT_QTY[n - 1]})
            self._upsert(DesignController, {"design_id": n, "controller_id": controller}, {"quantity": 1})

        for pk, name, email, phone, website in SUPPLIERS:
            self._upsert(Supplier, {"pk": pk}, {
                "supplier_name": name, "contact_email": email,
                "contact_phone": phone, "website": website,
            })

        for n in range(1, 21):
            for offset, kind, stock in (
                (0, "sensor", SENSOR_STOCK),
                (20, "equipment", EQUIPMENT_STOCK),
                (40, "controller", CONTROLLER_STOCK),
            ):
                level, price = stock[n - 1]
                self._upsert(SupplierInventory, {"pk": offset + n}, {
                    "supplier_id": n,
                    f"{kind}_id": f"{kind[0].upper()}{n:03d}",
                    "stock_level": level,
                    "unit_price": Decimal(price),
                })

        for pk, supplier, kind, component, order_date, qty, status, wifi in SUPPLIER_ORDERS:
            self._upsert(SupplierOrder, {"pk": pk}, {
                "supplier_id": supplier, f"{kind}_id": component, "order_date": _d(order_date),
                "quantity_ordered": qty, "status": status, "is_wifi": wifi,
            })

        for pk, first, last, expertise, mobile, email, available in STAFF:
            self._upsert(Staff, {"pk": pk}, {
                "first_name": first, "last_name": last, "expertise": expertise,
                "mobile_number": mobile, "email": email, "is_available": available,
            })

        for pk, name in enumerate(TEAMS, start=1):
            self._upsert(Team, {"pk": pk}, {"team_name": name})
        for team_id, staff_ids in TEAM_MEMBERS.items():
            for staff_id in staff_ids:
                self._upsert(TeamMember, {"team_id": team_id, "staff_id": staff_id}, {})

        for n, (installed_on, cost) in enumerate(INSTALLATIONS, start=1):
            self._upsert(Installation, {"pk": n}, {
                "design_id": n, "building_id": n, "team_id": n,
                "installation_date": _d(installed_on), "total_installation_cost": Decimal(cost),
            })
            self._upsert(InstallationSensor, {"installation_id": n, "sensor_id": f"S{n:03d}"}, {"quantity": SENSOR_QTY[n - 1]})
            self._upsert(InstallationEquipment, {"installation_id": n, "equipment_id": f"E{n:03d}"}, {"quantity": EQUIPMENT_QTY[n - 1]})
            self._upsert(InstallationController, {"installation_id": n, "controller_id": f"C{n:03d}"}, {"quantity": 1})

            # Historic assignments are loaded as-is; they bypass AvailabilityGuard.
            self._upsert(Assignment, {"pk": n}, {
                "installation_id": n, "staff_id": SENSOR_STAFF[n - 1],
                "sensor_id": f"S{n:03d}", "quantity_installed": SENSOR_INSTALLED_QTY[n - 1],
            })
            self._upsert(Assignment, {"pk": 20 + n}, {
                "installation_id": n, "staff_id": EQUIPMENT_STAFF[n - 1],
                "equipment_id": f"E{n:03d}", "quantity_installed": EQUIPMENT_INSTALLED_QTY[n - 1],
            })
            self._upsert(Assignment, {"pk": 40 + n}, {
                "installation_id": n, "staff_id": CONTROLLER_STAFF[n - 1],
                "controller_id": f"C{n:03d}", "quantity_installed": 1,
            })

            due, method = INVOICES[n - 1]
            self._upsert(Invoice, {"pk": n}, {
                "client_id": n, "design_id": n, "invoice_date": _d(installed_on),
                "amount": Decimal(cost), "due_date": _d(due), "payment_method": method,
            })

        self.stdout.write(self.style.SUCCESS(f"Seed complete. Created={self.created}, Updated={self.updated}"))
