"""
db/connection.py
----------------
Manages the process-wide MongoDB connection.

The first call to `connect()` builds a MongoClient, pings the server and
memoizes the database handle. Callers that arrive while that attempt is in
flight wait on the same Future and receive its outcome: the same handle on
success, the same exception on failure. A failed attempt leaves nothing
cached, so the next call starts over.
"""

import threading
from concurrent.futures import Future
from typing import Optional

from pymongo import MongoClient
from pymongo.database import Database

from config import MONGODB_DB_NAME, MONGODB_URI
from utils.logger import get_logger

logger = get_logger(__name__)

_client: MongoClient | None = None
_db: Database | None = None
_pending: Future | None = None
_lock = threading.Lock()


def _open() -> tuple[MongoClient, Database]:
    """Create a client and ping the server; closes the client on failure."""
    client: Optional[MongoClient] = None
    try:
        client = MongoClient(MONGODB_URI)
        client.admin.command("ping")
        return client, client.get_default_database(default=MONGODB_DB_NAME)
    except Exception:
        if client is not None:
            client.close()
        raise


def connect() -> Database:
    """
    Establish (once) and return the cached database handle.

    Returns:
        The pymongo Database named in the URI path, or MONGODB_DB_NAME.

    Raises:
        pymongo.errors.PyMongoError: If the server cannot be reached.
            Every caller waiting on that attempt gets the same error, and
            the cache is cleared so a later call retries.
    """
    global _client, _db, _pending
    if _db is not None:
        return _db

    with _lock:
        if _db is not None:
            return _db
        attempt = _pending
        owner = attempt is None
        if owner:
            attempt = _pending = Future()

    if not owner:
        return attempt.result()

    try:
        client, db = _open()
    except Exception as e:
        logger.error(f"Failed to connect to MongoDB: {e}")
        with _lock:
            _pending = None
        attempt.set_exception(e)
        raise

    with _lock:
        _client = client
        _db = db
        _pending = None
    attempt.set_result(db)
    logger.info(f"Connected to MongoDB database '{db.name}'.")
    return db


def get_database() -> Database:
    """Return the cached database handle, connecting on first use."""
    return connect()


def is_connected() -> bool:
    """Returns True if a connection has been established and cached."""
    return _db is not None


def close_connection() -> None:
    """Close the cached client and forget the handle."""
    global _client, _db
    with _lock:
        if _client is not None:
            _client.close()
            logger.info("MongoDB connection closed.")
        _client = None
        _db = None
