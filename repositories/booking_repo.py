"""
repositories/booking_repo.py
----------------------------
Data access layer for bookings.
All queries against the `bookings` collection live here.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import BOOKINGS_COLLECTION
from db.connection import get_database
from models.booking import Booking
from models.ids import to_object_id
from models.errors import DocumentNotFoundError
from repositories.event_repo import EventRepository
from utils.logger import get_logger

logger = get_logger(__name__)


class BookingRepository:
    """Repository for CRUD operations on the bookings collection."""

    def __init__(self, db: Optional[Database] = None):
        self._db = db
        self.events = EventRepository(db)

    @property
    def collection(self):
        db = self._db if self._db is not None else get_database()
        return db[BOOKINGS_COLLECTION]

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, booking: Booking) -> Booking:
        """
        Validate and persist a booking.

        Runs the booking pre-save checks, including one lookup confirming
        the referenced event exists, before anything is written.

        Returns:
            The same Booking with `id` and timestamps populated.

        Raises:
            ValidationError: On a malformed email or event id.
            EventNotFoundError: If the referenced event does not exist.
            DocumentNotFoundError: If the booking to update no longer exists.
        """
        booking.pre_save(self.events.exists)
        now = datetime.now(timezone.utc)
        doc = {"eventId": booking.event_id, "email": booking.email, "updatedAt": now}

        try:
            if booking.id is None:
                doc["createdAt"] = now
                result = self.collection.insert_one(doc)
                booking.id = result.inserted_id
                booking.created_at = now
                logger.info(f"Added booking #{booking.id} for event {booking.event_id}")
            else:
                result = self.collection.update_one({"_id": booking.id}, {"$set": doc})
                if result.matched_count == 0:
                    raise DocumentNotFoundError(BOOKINGS_COLLECTION, booking.id)
                logger.info(f"Updated booking #{booking.id}")
        except PyMongoError as e:
            logger.error(f"Failed to save booking for event {booking.event_id}: {e}")
            raise

        booking.updated_at = now
        return booking

    def add(self, booking: Booking) -> Booking:
        """Insert a new booking."""
        booking.id = None
        return self.save(booking)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, booking_id: ObjectId | str) -> Optional[Booking]:
        """Fetch a single booking by id, or None."""
        doc = self.collection.find_one({"_id": to_object_id(booking_id, "id")})
        return self._doc_to_booking(doc) if doc else None

    def list_for_event(self, event_id: ObjectId | str) -> list[Booking]:
        """Return all bookings for an event, oldest first."""
        cursor = self.collection.find({"eventId": to_object_id(event_id)}).sort(
            "createdAt", ASCENDING
        )
        return [self._doc_to_booking(d) for d in cursor]

    def count_for_event(self, event_id: ObjectId | str) -> int:
        """Number of bookings made for an event."""
        return self.collection.count_documents({"eventId": to_object_id(event_id)})

    # ── DELETE ────────────────────────────────────────────

    def delete(self, booking_id: ObjectId | str) -> bool:
        """
        Delete a booking by id.

        Returns:
            True if a document was deleted, False otherwise.
        """
        try:
            result = self.collection.delete_one({"_id": to_object_id(booking_id, "id")})
        except PyMongoError as e:
            logger.error(f"Failed to delete booking #{booking_id}: {e}")
            raise
        deleted = result.deleted_count > 0
        if deleted:
            logger.info(f"Deleted booking #{booking_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _doc_to_booking(doc: dict) -> Booking:
        """Convert a stored document to a Booking domain object."""
        return Booking(
            id=doc["_id"],
            event_id=doc.get("eventId"),
            email=doc.get("email", ""),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )
