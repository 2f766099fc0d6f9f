"""Pytest configuration and shared fixtures."""

import os

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017/event_booking_test")

from unittest.mock import MagicMock

import pytest

from config import BOOKINGS_COLLECTION, EVENTS_COLLECTION
from models.event import Event


@pytest.fixture
def collections() -> dict[str, MagicMock]:
    return {EVENTS_COLLECTION: MagicMock(), BOOKINGS_COLLECTION: MagicMock()}


@pytest.fixture
def db(collections) -> MagicMock:
    """A stand-in pymongo Database whose [] lookup returns per-collection mocks."""
    database = MagicMock()
    database.__getitem__.side_effect = collections.__getitem__
    return database


@pytest.fixture
def event_data() -> dict:
    return {
        "title": "PyCon Lisbon 2024",
        "description": "Three days of talks and sprints.",
        "overview": "The yearly Python conference.",
        "image": "/images/pycon.png",
        "venue": "Centro de Congressos",
        "location": "Lisbon, Portugal",
        "date": "2024-03-05",
        "time": "09:30",
        "mode": "offline",
        "audience": "Developers",
        "organizer": "Python Portugal",
        "agenda": ["Registration", "Keynote", "Lightning talks"],
        "tags": ["python", "conference"],
    }


@pytest.fixture
def event(event_data) -> Event:
    return Event(**event_data)
