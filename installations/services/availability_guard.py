"""
availability_guard.py
---------------------
Staff double-booking prevention for installation jobs.

Rule:
- A staff member can only be assigned while Staff.is_available is True.
- Creating the Assignment and flipping is_available to False happen in one
  transaction; a rejected request leaves no Assignment and no flag change.
- If the request carries a reservation window (starts_at/ends_at), it is also
  rejected when it overlaps another window already booked for that staff member:
      existing_start < new_end AND existing_end > new_start
- The flag only comes back via release_staff(); nothing resets it implicitly.

Concurrency:
- The staff row is read with select_for_update() (row lock on PostgreSQL/MySQL).
- The flag is claimed with a conditional UPDATE ... WHERE is_available, so two
  racing requests cannot both succeed even where row locks are a no-op (SQLite).
"""

import logging

from django.db import transaction
from django.utils import timezone

from staff.models import Staff

from ..exceptions import ConflictError, NotFoundError, ValidationError
from ..models import Assignment, Controller, Installation, IoTSensor, SpecialistEquipment

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Staff member is currently unavailable and cannot be booked."

COMPONENT_MODELS = {
    "sensor": IoTSensor,
    "equipment": SpecialistEquipment,
    "controller": Controller,
}


def validate_component_ref(sensor_id=None, equipment_id=None, controller_id=None):
    """
    Return (kind, component_id) for the single component given.

    Raises:
        ValidationError: if zero or more than one component id is set.
    """
    given = [
        (kind, value)
        for kind, value in (
            ("sensor", sensor_id),
            ("equipment", equipment_id),
            ("controller", controller_id),
        )
        if value not in (None, "")
    ]
    if len(given) != 1:
        raise ValidationError(
            "Exactly one of sensor_id, equipment_id or controller_id must be provided."
        )
    return given[0]


def validate_quantity(quantity) -> int:
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
        raise ValidationError(f"Quantity must be a positive integer. Received: {quantity!r}")
    return quantity


def _aware(value):
    if value is not None and timezone.is_naive(value):
        return timezone.make_aware(value, timezone.get_current_timezone())
    return value


def validate_window(starts_at, ends_at):
    """
    Both bounds or neither; when given, ends_at must be after starts_at.
    Returns the bounds as timezone-aware datetimes.
    """
    if starts_at is None and ends_at is None:
        return None, None
    if starts_at is None or ends_at is None:
        raise ValidationError("Both starts_at and ends_at are required for a reservation window.")
    starts_at, ends_at = _aware(starts_at), _aware(ends_at)
    if ends_at <= starts_at:
        raise ValidationError("ends_at must be after starts_at.")
    return starts_at, ends_at


class AvailabilityGuard:
    def _has_window_conflict(self, staff, starts_at, ends_at) -> bool:
        """
        Overlap check against the staff member's booked windows.
        Assignments without a window never overlap anything.
        """
        return Assignment.objects.filter(
            staff=staff,
            starts_at__lt=ends_at,
            ends_at__gt=starts_at,
        ).exists()

    def _claim_staff(self, staff_id) -> bool:
        """
        Compare-and-set on the availability flag.
        Returns False if someone else flipped it first.
        """
        updated = Staff.objects.filter(pk=staff_id, is_available=True).update(is_available=False)
        return updated == 1

    def is_staff_available(self, staff, starts_at=None, ends_at=None) -> bool:
        if not staff.is_available:
            return False
        starts_at, ends_at = validate_window(starts_at, ends_at)
        if starts_at is not None and self._has_window_conflict(staff, starts_at, ends_at):
            return False
        return True

    def available_staff(self):
        """
        Staff currently free for booking, ordered by id.
        """
        return Staff.objects.filter(is_available=True).order_by("id")

    @transaction.atomic
    def request_assignment(
        self,
        assignment_id,
        installation_id,
        staff_id,
        sensor_id=None,
        equipment_id=None,
        controller_id=None,
        quantity=1,
        starts_at=None,
        ends_at=None,
    ):
        """
        Book a staff member onto an installation for one component.

        Args:
            assignment_id: id for the new Assignment (None lets the database pick one)
            installation_id: Installation PK
            staff_id: Staff PK
            sensor_id / equipment_id / controller_id: exactly one must be set
            quantity: positive int
            starts_at, ends_at: optional reservation window

        Returns:
            The created Assignment.

        Raises:
            ValidationError: malformed component reference, quantity or window.
            NotFoundError: staff, installation or component does not exist.
            ConflictError: staff unavailable, window overlaps, or id already used.
        """
        kind, component_id = validate_component_ref(sensor_id, equipment_id, controller_id)
        quantity = validate_quantity(quantity)
        starts_at, ends_at = validate_window(starts_at, ends_at)

        try:
            staff = Staff.objects.select_for_update().get(pk=staff_id)
        except (Staff.DoesNotExist, ValueError):
            raise NotFoundError(f"Staff member {staff_id} does not exist.")

        try:
            installation_exists = Installation.objects.filter(pk=installation_id).exists()
        except ValueError:
            installation_exists = False
        if not installation_exists:
            raise NotFoundError(f"Installation {installation_id} does not exist.")

        if not COMPONENT_MODELS[kind].objects.filter(pk=component_id).exists():
            raise NotFoundError(f"{kind.capitalize()} {component_id} does not exist.")

        if not staff.is_available:
            logger.warning("Rejected assignment %s: staff %s unavailable", assignment_id, staff_id)
            raise ConflictError(UNAVAILABLE_MESSAGE)

        if starts_at is not None and self._has_window_conflict(staff, starts_at, ends_at):
            logger.warning("Rejected assignment %s: staff %s window overlap", assignment_id, staff_id)
            raise ConflictError("Requested window overlaps an existing booking for this staff member.")

        if assignment_id is not None and Assignment.objects.filter(pk=assignment_id).exists():
            raise ConflictError(f"Assignment {assignment_id} already exists.")

        if not self._claim_staff(staff.pk):
            logger.warning("Rejected assignment %s: staff %s claimed concurrently", assignment_id, staff_id)
            raise ConflictError(UNAVAILABLE_MESSAGE)

        assignment = Assignment.objects.create(
            id=assignment_id,
            installation_id=installation_id,
            staff=staff,
            quantity_installed=quantity,
            starts_at=starts_at,
            ends_at=ends_at,
            **{f"{kind}_id": component_id},
        )
        staff.is_available = False

        logger.info(
            "Assignment %s created: staff %s on installation %s (%s %s x%s)",
            assignment.pk, staff.pk, installation_id, kind, component_id, quantity,
        )
        return assignment

    @transaction.atomic
    def release_staff(self, staff_id):
        """
        Mark a staff member available again (job finished).
        Calling it for an already available staff member is a no-op.
        """
        try:
            staff = Staff.objects.select_for_update().get(pk=staff_id)
        except (Staff.DoesNotExist, ValueError):
            # ValueError: non-numeric id from a URL
            raise NotFoundError(f"Staff member {staff_id} does not exist.")

        if not staff.is_available:
            staff.is_available = True
            staff.save(update_fields=["is_available"])
            logger.info("Staff %s released and available for booking", staff.pk)
        return staff
