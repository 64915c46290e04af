from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from blogforge.core.dates import normalize_timezone, parse_datetime_flexible


def test_naive_datetime_becomes_utc():
    assert parse_datetime_flexible(datetime(2018, 1, 1, 12)) == datetime(2018, 1, 1, 12, tzinfo=UTC)


def test_date_becomes_midnight_utc():
    assert parse_datetime_flexible(date(2018, 1, 1)) == datetime(2018, 1, 1, tzinfo=UTC)


def test_aware_datetime_is_converted():
    tz = timezone(timedelta(hours=-3))
    assert normalize_timezone(datetime(2018, 1, 1, 21, tzinfo=tz)) == datetime(2018, 1, 2, 0, tzinfo=UTC)


@pytest.mark.parametrize("value", ["", "   ", "yesterday-ish"])
def test_bad_values_raise_value_error(value):
    with pytest.raises(ValueError):
        parse_datetime_flexible(value)
