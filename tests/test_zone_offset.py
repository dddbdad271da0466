"""Tests for the ZoneOffset class."""

from __future__ import annotations

import datetime

import pytest

from chronofield import Field, TemporalValue, ZoneOffset
from chronofield.errors import FieldOutOfRangeError, OverflowError


class TestZoneOffsetConstruction:
    """Tests for ZoneOffset construction."""

    def test_total_seconds(self) -> None:
        assert ZoneOffset(32400).total_seconds == 32400
        assert ZoneOffset.of_total_seconds(-3600).total_seconds == -3600

    def test_range(self) -> None:
        ZoneOffset(64800)
        ZoneOffset(-64800)
        with pytest.raises(FieldOutOfRangeError, match="OffsetSeconds"):
            ZoneOffset(64801)

    def test_of_components(self) -> None:
        assert ZoneOffset.of(5, 30).total_seconds == 19800
        assert ZoneOffset.of(-5, -30).total_seconds == -19800
        assert ZoneOffset.of(0, -30).total_seconds == -1800
        assert ZoneOffset.of(0, 0, 45).total_seconds == 45

    def test_of_hours_and_minutes(self) -> None:
        assert ZoneOffset.of_hours(9) == ZoneOffset(32400)
        assert ZoneOffset.of_hours_minutes(-3, -30) == ZoneOffset(-12600)

    def test_of_rejects_mixed_signs(self) -> None:
        with pytest.raises(FieldOutOfRangeError, match="OffsetMinutes"):
            ZoneOffset.of(5, -30)
        with pytest.raises(FieldOutOfRangeError, match="OffsetSeconds"):
            ZoneOffset.of(-5, 0, 30)
        with pytest.raises(FieldOutOfRangeError, match="OffsetSeconds"):
            ZoneOffset.of(0, 30, -1)

    def test_of_hours_out_of_range(self) -> None:
        with pytest.raises(FieldOutOfRangeError, match="OffsetHours"):
            ZoneOffset.of_hours(19)

    def test_of_total_exceeds_limit(self) -> None:
        with pytest.raises(FieldOutOfRangeError):
            ZoneOffset.of(18, 0, 1)

    def test_min_and_max(self) -> None:
        assert str(ZoneOffset.MIN) == "-18:00"
        assert str(ZoneOffset.MAX) == "+18:00"


class TestZoneOffsetComponents:
    """Tests for sign-carrying component accessors."""

    def test_positive(self) -> None:
        offset = ZoneOffset(3723)
        assert (offset.hours, offset.minutes, offset.seconds) == (1, 2, 3)

    def test_negative(self) -> None:
        offset = ZoneOffset(-3723)
        assert (offset.hours, offset.minutes, offset.seconds) == (-1, -2, -3)

    def test_negative_minutes_only(self) -> None:
        offset = ZoneOffset(-1800)
        assert (offset.hours, offset.minutes, offset.seconds) == (0, -30, 0)


class TestZoneOffsetUtcAndZero:
    """Tests distinguishing UTC from the unset offset."""

    def test_utc(self) -> None:
        utc = ZoneOffset.utc()
        assert utc.is_utc
        assert utc.total_seconds == 0
        assert utc == ZoneOffset(0)
        assert utc is ZoneOffset.utc()
        assert utc

    def test_zero_is_not_utc(self) -> None:
        zero = ZoneOffset.zero()
        assert zero.is_zero()
        assert not zero.is_utc
        assert zero != ZoneOffset.utc()
        assert not zero
        assert zero.total_seconds == 0

    def test_zero_sorts_first(self) -> None:
        assert ZoneOffset.zero() < ZoneOffset.MIN
        assert ZoneOffset.zero().compare_to(ZoneOffset.utc()) == -1

    def test_hash_distinguishes_zero(self) -> None:
        assert len({ZoneOffset.zero(), ZoneOffset.utc(), ZoneOffset(0)}) == 2


class TestZoneOffsetFields:
    """Tests for the field protocol on ZoneOffset."""

    def test_offset_seconds(self) -> None:
        offset = ZoneOffset(-18000)
        assert offset.get_field(Field.OFFSET_SECONDS) == TemporalValue(-18000)
        assert offset.is_supported_field(Field.OFFSET_SECONDS)

    def test_other_fields_unsupported(self) -> None:
        offset = ZoneOffset(-18000)
        assert offset.get_field(Field.HOUR_OF_DAY).is_unsupported
        assert not offset.is_supported_field(Field.INSTANT_SECONDS)

    def test_zero_unsupported(self) -> None:
        zero = ZoneOffset.zero()
        assert zero.get_field(Field.OFFSET_SECONDS).is_unsupported
        assert not zero.is_supported_field(Field.OFFSET_SECONDS)


class TestZoneOffsetText:
    """Tests for ZoneOffset ISO text and repr."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0, "Z"),
            (32400, "+09:00"),
            (-19800, "-05:30"),
            (3723, "+01:02:03"),
            (-45, "-00:00:45"),
        ],
    )
    def test_to_iso_format(self, seconds: int, expected: str) -> None:
        assert ZoneOffset(seconds).to_iso_format() == expected

    def test_zero_text(self) -> None:
        assert ZoneOffset.zero().to_iso_format() == ""

    def test_repr(self) -> None:
        assert repr(ZoneOffset(32400)) == "ZoneOffset(32400)"
        assert repr(ZoneOffset(0)) == "ZoneOffset.utc()"
        assert repr(ZoneOffset.zero()) == "ZoneOffset.zero()"


class TestZoneOffsetConversion:
    """Tests for conversion to and from datetime.timezone."""

    def test_to_timezone(self) -> None:
        assert ZoneOffset.utc().to_timezone() is datetime.timezone.utc
        tz = ZoneOffset.of(-5, -30).to_timezone()
        assert tz.utcoffset(None) == datetime.timedelta(hours=-5, minutes=-30)

    def test_zero_to_timezone(self) -> None:
        with pytest.raises(OverflowError):
            ZoneOffset.zero().to_timezone()

    def test_from_timezone(self) -> None:
        tz = datetime.timezone(datetime.timedelta(hours=9))
        assert ZoneOffset.from_timezone(tz) == ZoneOffset.of_hours(9)
        assert ZoneOffset.from_timezone(datetime.timezone.utc).is_utc

    def test_from_timezone_out_of_range(self) -> None:
        tz = datetime.timezone(datetime.timedelta(hours=23))
        with pytest.raises(FieldOutOfRangeError):
            ZoneOffset.from_timezone(tz)


class TestZoneOffsetOrdering:
    """Tests for ZoneOffset ordering."""

    def test_by_total_seconds(self) -> None:
        offsets = [ZoneOffset(3600), ZoneOffset(-3600), ZoneOffset.utc()]
        assert sorted(offsets) == [ZoneOffset(-3600), ZoneOffset(0), ZoneOffset(3600)]
        assert ZoneOffset(3600).compare_to(ZoneOffset(3600)) == 0
