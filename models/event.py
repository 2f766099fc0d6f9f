"""
models/event.py
---------------
Domain model for events, plus the pre-save rules every event passes
through before it is written: required-field checks, date/time
normalization and slug generation.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from bson import ObjectId
from dateutil.parser import isoparse

from models.errors import ValidationError

REQUIRED_STRING_FIELDS: tuple[str, ...] = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)
REQUIRED_LIST_FIELDS: tuple[str, ...] = ("agenda", "tags")

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{1,2})(?::(\d{2}))?$", re.ASCII)


def generate_slug(title: str) -> str:
    """
    Build a URL-friendly slug from a title.

    >>> generate_slug("Hello, World!  Foo")
    'hello-world-foo'
    """
    slug = title.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    return re.sub(r"-+", "-", slug)


def normalize_date(value: str | date) -> str:
    """
    Reduce an ISO-8601 date or datetime to its UTC calendar date.

    Timezone-aware values are converted to UTC first; naive values are
    taken as already being UTC.

    Returns:
        The date as 'YYYY-MM-DD'.

    Raises:
        ValidationError: If the value cannot be parsed.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value.isoformat()
    else:
        try:
            parsed = isoparse(str(value).strip())
        except (ValueError, OverflowError):
            raise ValidationError("date", "Invalid event date") from None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc)
        except OverflowError:
            raise ValidationError("date", "Invalid event date") from None
    return parsed.date().isoformat()


def normalize_time(value: str) -> str:
    """
    Normalize a 24h clock time to zero-padded 'HH:MM'.
    Accepts 'H:M', 'HH:MM' and 'HH:MM:SS'; seconds are dropped.

    Raises:
        ValidationError: On a malformed or out-of-range time.
    """
    match = _TIME_RE.match(str(value).strip())
    if not match:
        raise ValidationError("time", "Invalid event time format (expected HH:mm)")

    hours = int(match.group(1))
    minutes = int(match.group(2))
    seconds = int(match.group(3) or 0)
    if hours > 23 or minutes > 59 or seconds > 59:
        raise ValidationError("time", "Invalid event time value")

    return f"{hours:02d}:{minutes:02d}"


@dataclass
class Event:
    """
    Represents a bookable event.

    Attributes:
        title: Display title; the slug is derived from it.
        slug: Unique URL identifier (None until first save).
        description: Long description.
        overview: Short summary shown in listings.
        image: Image URL or path.
        venue: Venue name.
        location: City / address.
        date: Event date, stored as 'YYYY-MM-DD'.
        time: Start time, stored as 24h 'HH:MM'.
        mode: e.g. 'online', 'offline', 'hybrid'.
        audience: Intended audience.
        agenda: Ordered agenda items.
        organizer: Organizer name or description.
        tags: Free-form tags.
        id: MongoDB ObjectId (None for new records).
        created_at: Set on insert.
        updated_at: Refreshed on every save.
    """
    title: str = ""
    description: str = ""
    overview: str = ""
    image: str = ""
    venue: str = ""
    location: str = ""
    date: str = ""
    time: str = ""
    mode: str = ""
    audience: str = ""
    organizer: str = ""
    agenda: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    slug: Optional[str] = None
    id: Optional[ObjectId] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    _persisted_title: Optional[str] = field(
        default=None, init=False, repr=False, compare=False
    )

    def mark_persisted(self) -> None:
        """Remember the stored title so later title edits can be detected."""
        self._persisted_title = self.title

    def title_changed(self) -> bool:
        """True if the title differs from the one last loaded or saved."""
        return self._persisted_title is not None and self.title != self._persisted_title

    def pre_save(self) -> None:
        """
        Validate and normalize the event in place before a write.

        Raises:
            ValidationError: Naming the first field that fails.
        """
        if isinstance(self.date, date):
            self.date = normalize_date(self.date)

        for name in REQUIRED_STRING_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ValidationError(name, f'Field "{name}" is required')
            setattr(self, name, value.strip())

        for name in REQUIRED_LIST_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, list) or not value:
                raise ValidationError(name, f'Field "{name}" must be a non-empty array')
            if any(not isinstance(item, str) or not item.strip() for item in value):
                raise ValidationError(
                    name, f'Field "{name}" must contain only non-empty strings'
                )

        self.date = normalize_date(self.date)
        self.time = normalize_time(self.time)

        if self.title_changed() or not self.slug:
            self.slug = generate_slug(self.title)
            if not self.slug:
                raise ValidationError(
                    "slug", f'Cannot derive a slug from title "{self.title}"'
                )

    def __str__(self) -> str:
        return f"{self.title} | {self.date} {self.time} | {self.venue}, {self.location}"
