"""
db/init_db.py
-------------
Creates the collection indexes if they do not already exist.
Run this module directly to prepare a fresh database:
    python -m db.init_db
"""

from pymongo import ASCENDING
from pymongo.database import Database
from pymongo.errors import PyMongoError

from config import BOOKINGS_COLLECTION, EVENTS_COLLECTION
from db.connection import get_database
from utils.logger import get_logger

logger = get_logger(__name__)


def create_indexes(db: Database | None = None) -> None:
    """
    Create the unique slug index on events and the eventId index on bookings.
    Safe to call multiple times; MongoDB ignores identical index specs.
    """
    db = db if db is not None else get_database()
    try:
        db[EVENTS_COLLECTION].create_index(
            [("slug", ASCENDING)], unique=True, name="slug_unique"
        )
        db[BOOKINGS_COLLECTION].create_index(
            [("eventId", ASCENDING)], name="eventId"
        )
        logger.info("Database indexes initialized successfully.")
    except PyMongoError as e:
        logger.error(f"Failed to initialize indexes: {e}")
        raise


if __name__ == "__main__":
    create_indexes()
    print("Database indexes created successfully.")
