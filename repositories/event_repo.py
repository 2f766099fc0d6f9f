"""
repositories/event_repo.py
--------------------------
Data access layer for events.
All queries against the `events` collection live here.
"""

from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo import DESCENDING
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from config import EVENTS_COLLECTION
from db.connection import get_database
from models.ids import to_object_id
from models.errors import DocumentNotFoundError, DuplicateSlugError
from models.event import Event
from utils.logger import get_logger

logger = get_logger(__name__)


class EventRepository:
    """Repository for CRUD operations on the events collection."""

    def __init__(self, db: Optional[Database] = None):
        self._db = db

    @property
    def collection(self):
        db = self._db if self._db is not None else get_database()
        return db[EVENTS_COLLECTION]

    # ── CREATE / UPDATE ───────────────────────────────────

    def save(self, event: Event) -> Event:
        """
        Validate, normalize and persist an event.
        New events are inserted; events with an id are updated in place.

        Args:
            event: The Event domain object to persist.

        Returns:
            The same Event with `id`, `slug` and timestamps populated.

        Raises:
            ValidationError: If a field fails the pre-save checks (nothing is written).
            DuplicateSlugError: If another event already uses the slug.
            DocumentNotFoundError: If the event to update no longer exists.
        """
        event.pre_save()
        now = datetime.now(timezone.utc)
        doc = self._event_to_doc(event)

        try:
            if event.id is None:
                doc["createdAt"] = now
                doc["updatedAt"] = now
                result = self.collection.insert_one(doc)
                event.id = result.inserted_id
                event.created_at = now
                logger.info(f"Added event #{event.id} '{event.slug}'")
            else:
                doc["updatedAt"] = now
                result = self.collection.update_one({"_id": event.id}, {"$set": doc})
                if result.matched_count == 0:
                    raise DocumentNotFoundError(EVENTS_COLLECTION, event.id)
                logger.info(f"Updated event #{event.id} '{event.slug}'")
        except DuplicateKeyError:
            logger.error(f"Duplicate slug '{event.slug}' for event #{event.id}")
            raise DuplicateSlugError(event.slug) from None
        except PyMongoError as e:
            logger.error(f"Failed to save event '{event.slug}': {e}")
            raise

        event.updated_at = now
        event.mark_persisted()
        return event

    def add(self, event: Event) -> Event:
        """Insert a new event; alias of `save` for records without an id."""
        event.id = None
        return self.save(event)

    # ── READ ──────────────────────────────────────────────

    def get_by_id(self, event_id: ObjectId | str) -> Optional[Event]:
        """
        Fetch a single event by id.

        Returns:
            An Event object or None if not found.
        """
        doc = self.collection.find_one({"_id": to_object_id(event_id, "id")})
        return self._doc_to_event(doc) if doc else None

    def get_by_slug(self, slug: str) -> Optional[Event]:
        """Fetch a single event by its slug, or None."""
        doc = self.collection.find_one({"slug": slug})
        return self._doc_to_event(doc) if doc else None

    def exists(self, event_id: ObjectId) -> bool:
        """True if an event with this id is stored. Fetches only the id."""
        return self.collection.find_one({"_id": event_id}, {"_id": 1}) is not None

    def list_all(self) -> list[Event]:
        """Return all events, newest first."""
        cursor = self.collection.find().sort("createdAt", DESCENDING)
        return [self._doc_to_event(d) for d in cursor]

    def list_similar(self, slug: str, limit: int = 3) -> list[Event]:
        """
        Return events sharing at least one tag with the event `slug`.

        Returns:
            Up to `limit` events, never including the event itself.
            Empty if `slug` is unknown.
        """
        event = self.get_by_slug(slug)
        if event is None:
            return []
        cursor = self.collection.find(
            {"_id": {"$ne": event.id}, "tags": {"$in": event.tags}}
        ).limit(limit)
        return [self._doc_to_event(d) for d in cursor]

    # ── DELETE ────────────────────────────────────────────

    def delete(self, event_id: ObjectId | str) -> bool:
        """
        Delete an event by id. Bookings referencing it are left untouched.

        Returns:
            True if a document was deleted, False otherwise.
        """
        try:
            result = self.collection.delete_one({"_id": to_object_id(event_id, "id")})
        except PyMongoError as e:
            logger.error(f"Failed to delete event #{event_id}: {e}")
            raise
        deleted = result.deleted_count > 0
        if deleted:
            logger.info(f"Deleted event #{event_id}")
        return deleted

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _event_to_doc(event: Event) -> dict:
        """Convert an Event to the stored document shape (without _id/timestamps)."""
        return {
            "title": event.title,
            "slug": event.slug,
            "description": event.description,
            "overview": event.overview,
            "image": event.image,
            "venue": event.venue,
            "location": event.location,
            "date": event.date,
            "time": event.time,
            "mode": event.mode,
            "audience": event.audience,
            "agenda": list(event.agenda),
            "organizer": event.organizer,
            "tags": list(event.tags),
        }

    @staticmethod
    def _doc_to_event(doc: dict) -> Event:
        """Convert a stored document to an Event domain object."""
        event = Event(
            id=doc["_id"],
            title=doc.get("title", ""),
            slug=doc.get("slug"),
            description=doc.get("description", ""),
            overview=doc.get("overview", ""),
            image=doc.get("image", ""),
            venue=doc.get("venue", ""),
            location=doc.get("location", ""),
            date=doc.get("date", ""),
            time=doc.get("time", ""),
            mode=doc.get("mode", ""),
            audience=doc.get("audience", ""),
            agenda=list(doc.get("agenda", [])),
            organizer=doc.get("organizer", ""),
            tags=list(doc.get("tags", [])),
            created_at=doc.get("createdAt"),
            updated_at=doc.get("updatedAt"),
        )
        event.mark_persisted()
        return event
