import datetime as dt

import pytest

from spotkit.availability import (
    Availability,
    SalePeriod,
    UnavailabilityReason,
    date_from_message,
    timestamp_to_date,
)

UTC = dt.timezone.utc


def test_timestamp_zero_is_epoch():
    assert timestamp_to_date(0) == dt.datetime(1970, 1, 1, tzinfo=UTC)


@pytest.mark.parametrize("ms", [1, 1_600_000_000_123, 9295169800000])
def test_timestamp_round_trip(ms):
    date = timestamp_to_date(ms)
    assert date.tzinfo is not None
    assert (date - timestamp_to_date(0)) // dt.timedelta(milliseconds=1) == ms


def test_timestamp_out_of_range():
    with pytest.raises(ValueError):
        timestamp_to_date(10**20)


def test_date_from_message_full():
    date = date_from_message({"year": 2020, "month": 5, "day": 3, "hour": 7, "minute": 9})
    assert date == dt.datetime(2020, 5, 3, 7, 9, tzinfo=UTC)


def test_date_from_message_defaults_month_and_day():
    assert date_from_message({"year": 1999}) == dt.datetime(1999, 1, 1, tzinfo=UTC)


def test_date_from_message_empty():
    assert date_from_message(None) == dt.datetime(dt.MINYEAR, 1, 1, tzinfo=UTC)


def test_date_from_message_invalid_month():
    with pytest.raises(ValueError):
        date_from_message({"year": 2020, "month": 13})


@pytest.mark.parametrize(
    "member, text",
    [
        (UnavailabilityReason.EMBARGO, "available date is in the future"),
        (UnavailabilityReason.BLACKLISTED, "blacklist present and country on it"),
    ],
)
def test_unavailability_reason_text(member, text):
    reason = UnavailabilityReason(member)
    assert reason is member
    assert str(reason) == text


def test_availability_from_message():
    availability = Availability.from_message(
        {"catalogue_str": ["premium"], "start": {"year": 2021, "month": 2, "day": 3}}
    )
    assert availability.catalogue_strs == ["premium"]
    assert availability.start == dt.datetime(2021, 2, 3, tzinfo=UTC)


def test_sale_period_from_message():
    period = SalePeriod.from_message(
        {
            "restriction": [{"countries_allowed": "SE"}],
            "start": {"year": 2010, "month": 1, "day": 2},
            "end": {"year": 2011, "month": 3, "day": 4},
        }
    )
    assert period.start < period.end
    assert period.restrictions[0].countries_allowed == ["SE"]
    assert period.end == dt.datetime(2011, 3, 4, tzinfo=UTC)