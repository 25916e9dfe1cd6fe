"""
exceptions.py
-------------
Errors raised by the installation business rules.

Views map them to HTTP status codes:
- ValidationError, InvalidRangeError -> 400
- NotFoundError                      -> 404
- ConflictError                      -> 409
"""

from django.core.exceptions import ObjectDoesNotExist
from django.core.exceptions import ValidationError as DjangoValidationError


class NotFoundError(ObjectDoesNotExist):
    """A referenced staff member, installation or component does not exist."""


class ConflictError(ValueError):
    """The staff availability rule would be violated."""


class InvalidRangeError(ValueError):
    """A report date range is malformed (start after end, unparseable, unknown period)."""


class ValidationError(DjangoValidationError):
    """Malformed assignment request (component reference, quantity, window)."""
