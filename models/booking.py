"""
models/booking.py
-----------------
Domain model for event bookings.
"""

import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from bson import ObjectId

from models.errors import EventNotFoundError, ValidationError
from models.ids import to_object_id

# Simple, conservative local@domain.tld check
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def normalize_email(value: str) -> str:
    """
    Trim and lowercase an email address, then check its shape.

    Raises:
        ValidationError: If the address is not of the form local@domain.tld.
    """
    if not isinstance(value, str):
        raise ValidationError("email", "Invalid email address")
    email = value.strip().lower()
    if not EMAIL_RE.match(email):
        raise ValidationError("email", "Invalid email address")
    return email


@dataclass
class Booking:
    """
    A single seat reservation for an event.

    Attributes:
        event_id: ObjectId of the booked Event.
        email: Attendee email, stored trimmed and lowercased.
        id: MongoDB ObjectId (None for new records).
        created_at: Set on insert.
        updated_at: Refreshed on every save.
    """
    event_id: ObjectId | str
    email: str
    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def pre_save(self, event_exists: Callable[[ObjectId], bool]) -> None:
        """
        Validate the booking in place before a write.

        Args:
            event_exists: Lookup returning True if an event with the id is stored.

        Raises:
            ValidationError: On a malformed email or event id.
            EventNotFoundError: If the referenced event does not exist.
        """
        self.email = normalize_email(self.email)
        self.event_id = to_object_id(self.event_id)
        if not event_exists(self.event_id):
            raise EventNotFoundError(self.event_id)

    def __str__(self) -> str:
        return f"{self.email} -> event {self.event_id}"
