"""Tests for the external id and UTC timestamp helpers."""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from kiters.eid import ExternalId, base36_encode
from kiters.timestamp import UTC_FORMAT, format_utc, get_utc_formatter, get_utc_timestamp


class TestBase36:
    def test_known_values(self):
        assert base36_encode(b"") == ""
        assert base36_encode(b"\x01") == "1"
        assert base36_encode(b"\x23") == "z"
        assert base36_encode(b"\x24") == "10"
        assert base36_encode(b"\xff") == "73"

    def test_leading_zero_bytes_kept(self):
        assert base36_encode(b"\x00") == "0"
        assert base36_encode(b"\x00\x00\x01") == "001"

    def test_lowercase_alphanumeric(self):
        encoded = base36_encode(uuid.uuid4().bytes)
        assert encoded
        assert all(c.isdigit() or c.islower() for c in encoded)


class TestExternalId:
    def test_external_id_creation(self):
        eid = ExternalId.new("aid")
        assert eid.prefix == "aid"
        assert eid.to_string().startswith("aid-")
        assert str(eid) == eid.to_string()

    def test_uuid_roundtrip(self):
        eid = ExternalId.new("task")
        assert eid.uuid().bytes == eid.bytes_
        assert eid.uuid().version == 4

    def test_fixed_bytes(self):
        raw = uuid.UUID("00000000-0000-0000-0000-000000000024").bytes
        eid = ExternalId(prefix="job", bytes=raw)
        assert eid.to_string() == "job-" + "0" * 15 + "10"

    def test_distinct_ids(self):
        assert ExternalId.new("x") != ExternalId.new("x")

    def test_rejects_wrong_length(self):
        with pytest.raises(ValidationError):
            ExternalId(prefix="bad", bytes=b"\x00" * 8)

    def test_frozen(self):
        eid = ExternalId.new("aid")
        with pytest.raises(ValidationError):
            eid.prefix = "other"


class TestTimestamp:
    def test_formatter(self):
        assert get_utc_formatter() == UTC_FORMAT

    def test_timestamp_format_length(self):
        # Should be exactly 20 chars: YYYY-MM-DDTHH:MM:SSZ
        assert len(get_utc_timestamp()) == 20

    def test_timestamp_has_required_chars(self):
        ts = get_utc_timestamp()

        assert ts.endswith("Z"), "Must end with Z (UTC)"
        assert ts[4] == "-", "Year separator"
        assert ts[7] == "-", "Month separator"
        assert ts[10] == "T", "Date/time separator"
        assert ts[13] == ":", "Hour separator"
        assert ts[16] == ":", "Minute separator"

    def test_timestamp_components_are_digits(self):
        ts = get_utc_timestamp()
        for start, end in [(0, 4), (5, 7), (8, 10), (11, 13), (14, 16), (17, 19)]:
            assert ts[start:end].isdigit()

    def test_format_converts_to_utc(self):
        moment = datetime(2023, 10, 27, 12, 0, 5, tzinfo=timezone(timedelta(hours=2)))
        assert format_utc(moment) == "2023-10-27T10:00:05Z"

    def test_naive_datetime_taken_as_utc(self):
        assert format_utc(datetime(2024, 1, 2, 3, 4, 5)) == "2024-01-02T03:04:05Z"

    def test_years_below_1000_zero_padded(self):
        ts = format_utc(datetime(999, 1, 2, 3, 4, 5, tzinfo=timezone.utc))
        assert ts == "0999-01-02T03:04:05Z"
        assert len(ts) == 20
