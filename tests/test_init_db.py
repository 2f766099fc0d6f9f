"""
Tests for index setup
Run with: pytest tests/test_init_db.py -v
"""
import pytest
from pymongo import ASCENDING
from pymongo.errors import OperationFailure

from config import BOOKINGS_COLLECTION, EVENTS_COLLECTION
from db.init_db import create_indexes


def test_creates_slug_and_event_indexes(db, collections):
    create_indexes(db)

    collections[EVENTS_COLLECTION].create_index.assert_called_once_with(
        [("slug", ASCENDING)], unique=True, name="slug_unique"
    )
    collections[BOOKINGS_COLLECTION].create_index.assert_called_once_with(
        [("eventId", ASCENDING)], name="eventId"
    )


def test_index_failure_propagates(db, collections):
    collections[EVENTS_COLLECTION].create_index.side_effect = OperationFailure("denied")
    with pytest.raises(OperationFailure):
        create_indexes(db)
