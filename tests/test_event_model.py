"""
Unit tests for Event validation and normalization
Run with: pytest tests/test_event_model.py -v
"""
from datetime import date, datetime, timedelta, timezone

import pytest

from models.errors import ErrorCode, ValidationError
from models.event import (
    REQUIRED_LIST_FIELDS,
    REQUIRED_STRING_FIELDS,
    Event,
    generate_slug,
    normalize_date,
    normalize_time,
)


class TestGenerateSlug:
    """Test slug generation"""

    def test_punctuation_and_spaces(self):
        assert generate_slug("Hello, World!  Foo") == "hello-world-foo"

    def test_repeated_dashes_collapse(self):
        assert generate_slug("Python -- Data - Day") == "python-data-day"

    def test_surrounding_whitespace_trimmed(self):
        assert generate_slug("  AI Summit 2025  ") == "ai-summit-2025"

    def test_non_ascii_removed(self):
        assert generate_slug("CafÃ© Meetup") == "caf-meetup"


class TestNormalizeDate:
    """Test date normalization"""

    def test_datetime_string_reduced_to_date(self):
        assert normalize_date("2024-03-05T10:00:00Z") == "2024-03-05"

    def test_plain_date_kept(self):
        assert normalize_date("2024-03-05") == "2024-03-05"

    def test_offset_converted_to_utc(self):
        assert normalize_date("2024-03-05T23:30:00-05:00") == "2024-03-06"

    def test_date_and_datetime_objects(self):
        assert normalize_date(date(2024, 3, 5)) == "2024-03-05"
        eastern = timezone(timedelta(hours=9))
        assert normalize_date(datetime(2024, 3, 6, 2, 0, tzinfo=eastern)) == "2024-03-05"

    @pytest.mark.parametrize(
        "value",
        [
            "not a date",
            "2024-13-01",
            "2024-02-30",
            "",
            "0001-01-01T00:00:00+05:00",
            "9999-12-31T23:00:00-05:00",
        ],
    )
    def test_invalid_date_raises(self, value):
        with pytest.raises(ValidationError) as exc_info:
            normalize_date(value)
        assert exc_info.value.field == "date"


class TestNormalizeTime:
    """Test time normalization"""

    def test_single_digits_padded(self):
        assert normalize_time("9:5") == "09:05"

    def test_seconds_dropped(self):
        assert normalize_time("14:30:15") == "14:30"

    def test_already_normalized(self):
        assert normalize_time(" 00:00 ") == "00:00"

    def test_last_minute_of_day(self):
        assert normalize_time("23:59") == "23:59"

    @pytest.mark.parametrize("value", ["24:00", "12:60", "12:30:61"])
    def test_out_of_range_raises(self, value):
        with pytest.raises(ValidationError, match="Invalid event time value"):
            normalize_time(value)

    @pytest.mark.parametrize("value", ["noon", "9am", "123:00", "12:345", "12.30", "٩:٠٥"])
    def test_bad_format_raises(self, value):
        with pytest.raises(ValidationError, match="expected HH:mm"):
            normalize_time(value)


class TestEventPreSave:
    """Test the Event pre-save hook"""

    def test_normalizes_fields(self, event_data):
        event_data.update(
            title="  Hello, World!  Foo ",
            venue="  Main Hall ",
            date="2024-03-05T10:00:00Z",
            time="9:5",
        )
        event = Event(**event_data)
        event.pre_save()

        assert event.title == "Hello, World!  Foo"
        assert event.venue == "Main Hall"
        assert event.date == "2024-03-05"
        assert event.time == "09:05"
        assert event.slug == "hello-world-foo"

    @pytest.mark.parametrize("field_name", REQUIRED_STRING_FIELDS)
    def test_missing_string_field_named_in_error(self, event_data, field_name):
        event_data[field_name] = "   "
        with pytest.raises(ValidationError) as exc_info:
            Event(**event_data).pre_save()

        assert exc_info.value.field == field_name
        assert exc_info.value.code is ErrorCode.VALIDATION_FAILED
        assert f'"{field_name}" is required' in str(exc_info.value)

    @pytest.mark.parametrize("field_name", REQUIRED_LIST_FIELDS)
    def test_empty_list_field_named_in_error(self, event_data, field_name):
        event_data[field_name] = []
        with pytest.raises(ValidationError, match=f'"{field_name}" must be a non-empty array'):
            Event(**event_data).pre_save()

    @pytest.mark.parametrize("field_name", REQUIRED_LIST_FIELDS)
    def test_blank_list_item_rejected(self, event_data, field_name):
        event_data[field_name] = ["ok", "  "]
        with pytest.raises(ValidationError, match="only non-empty strings"):
            Event(**event_data).pre_save()

    def test_non_string_list_item_rejected(self, event_data):
        event_data["tags"] = ["python", 3]
        with pytest.raises(ValidationError) as exc_info:
            Event(**event_data).pre_save()
        assert exc_info.value.field == "tags"

    def test_missing_field_defaults_fail(self):
        with pytest.raises(ValidationError) as exc_info:
            Event().pre_save()
        assert exc_info.value.field == "title"

    def test_explicit_slug_kept_for_new_event(self, event):
        event.slug = "pycon-pt"
        event.pre_save()
        assert event.slug == "pycon-pt"

    def test_slug_kept_when_title_unchanged(self, event):
        event.pre_save()
        event.mark_persisted()
        event.slug = "custom-slug"
        event.pre_save()
        assert event.slug == "custom-slug"

    def test_slug_regenerated_when_title_changes(self, event):
        event.pre_save()
        event.mark_persisted()
        event.title = "PyCon Porto 2025"
        event.pre_save()
        assert event.slug == "pycon-porto-2025"

    def test_unsluggable_title_rejected(self, event):
        event.title = "!!!"
        with pytest.raises(ValidationError) as exc_info:
            event.pre_save()
        assert exc_info.value.field == "slug"

    def test_date_object_accepted(self, event):
        event.date = date(2024, 12, 1)
        event.pre_save()
        assert event.date == "2024-12-01"
