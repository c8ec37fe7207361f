from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from httptypes.date import HttpDate, fmt_http_date, parse_http_date
from httptypes.utils import HttpError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
SECONDS_IN_HOUR = 3600
SECONDS_IN_DAY = 86400


def test_rfc_example():
    d = EPOCH + timedelta(seconds=784111777)
    assert parse_http_date("Sun, 06 Nov 1994 08:49:37 GMT") == d
    assert parse_http_date("Sunday, 06-Nov-94 08:49:37 GMT") == d
    assert parse_http_date("Sun Nov  6 08:49:37 1994") == d


def test2():
    d = EPOCH + timedelta(seconds=1475419451)
    assert parse_http_date("Sun, 02 Oct 2016 14:44:11 GMT") == d
    with pytest.raises(HttpError):
        parse_http_date("Sun Nov 10 08:00:00 1000")
    with pytest.raises(HttpError):
        parse_http_date("Sun Nov 10 08*00:00 2000")
    with pytest.raises(HttpError):
        parse_http_date("Sunday, 06-Nov-94 08+49:37 GMT")


def test3():
    d = EPOCH
    assert parse_http_date("Thu, 01 Jan 1970 00:00:00 GMT") == d
    d += timedelta(seconds=SECONDS_IN_HOUR)
    assert parse_http_date("Thu, 01 Jan 1970 01:00:00 GMT") == d
    d += timedelta(seconds=SECONDS_IN_DAY)
    assert parse_http_date("Fri, 02 Jan 1970 01:00:00 GMT") == d
    d += timedelta(seconds=2592000)
    assert parse_http_date("Sun, 01 Feb 1970 01:00:00 GMT") == d
    d += timedelta(seconds=2592000)
    assert parse_http_date("Tue, 03 Mar 1970 01:00:00 GMT") == d
    d += timedelta(seconds=31536005)
    assert parse_http_date("Wed, 03 Mar 1971 01:00:05 GMT") == d
    d += timedelta(seconds=15552000)
    assert parse_http_date("Mon, 30 Aug 1971 01:00:05 GMT") == d
    d += timedelta(seconds=6048000)
    assert parse_http_date("Mon, 08 Nov 1971 01:00:05 GMT") == d
    d += timedelta(seconds=864000000)
    assert parse_http_date("Fri, 26 Mar 1999 01:00:05 GMT") == d


def test_fmt():
    assert fmt_http_date(EPOCH) == "Thu, 01 Jan 1970 00:00:00 GMT"
    d = EPOCH + timedelta(seconds=1475419451)
    assert fmt_http_date(d) == "Sun, 02 Oct 2016 14:44:11 GMT"


def test_parse_errors_are_bad_request():
    with pytest.raises(HttpError) as info:
        parse_http_date("not a date")
    assert info.value.status == 400


def test_parse_rejects_non_ascii():
    with pytest.raises(HttpError) as info:
        parse_http_date("Sün, 06 Nov 1994 08:49:37 GMT")
    assert info.value.status == 400


@pytest.mark.parametrize(
    "text",
    [
        "Sun, 06 Nov 1994 24:49:37 GMT",
        "Sun, 06 Nov 1994 08:60:37 GMT",
        "Sun, 00 Nov 1994 08:49:37 GMT",
        "Sun, 06 Nov 1969 08:49:37 GMT",
        "Sun, 06 Foo 1994 08:49:37 GMT",
        "Xyz, 06 Nov 1994 08:49:37 GMT",
        "Sun, 06 Nov 1994 08:49:37 UTC",
    ],
)
def test_parse_rejects_invalid_fields(text):
    with pytest.raises(HttpError):
        HttpDate.parse(text)


def test_parse_trims_whitespace():
    assert parse_http_date("  Sun, 06 Nov 1994 08:49:37 GMT\t") == parse_http_date(
        "Sun, 06 Nov 1994 08:49:37 GMT"
    )


def test_two_digit_year_mapping():
    assert parse_http_date("Sunday, 06-Nov-94 08:49:37 GMT").year == 1994
    assert parse_http_date("Friday, 06-Nov-20 08:49:37 GMT").year == 2020


def test_format_parse_round_trip():
    for seconds in (0, 784111777, 1475419451, 951782400):
        moment = EPOCH + timedelta(seconds=seconds)
        assert parse_http_date(fmt_http_date(moment)) == moment


def test_str_round_trip():
    text = "Sun, 06 Nov 1994 08:49:37 GMT"
    assert str(HttpDate.parse(text)) == text


def test_equal_across_formats():
    a = HttpDate.parse("Sun, 06 Nov 1994 08:49:37 GMT")
    b = HttpDate.parse("Sun Nov  6 08:49:37 1994")
    assert a == b
    assert hash(a) == hash(b)


def test_ordering():
    earlier = HttpDate.parse("Thu, 01 Jan 1970 00:00:00 GMT")
    later = HttpDate.parse("Sun, 02 Oct 2016 14:44:11 GMT")
    assert earlier < later
    assert later > earlier
    assert sorted([later, earlier]) == [earlier, later]


def test_from_datetime_drops_subseconds():
    moment = EPOCH + timedelta(seconds=1475419451, microseconds=999999)
    assert fmt_http_date(moment) == "Sun, 02 Oct 2016 14:44:11 GMT"


def test_from_datetime_naive_is_utc():
    naive = datetime(2016, 10, 2, 14, 44, 11)
    assert fmt_http_date(naive) == "Sun, 02 Oct 2016 14:44:11 GMT"


def test_from_datetime_before_epoch_fails():
    with pytest.raises(ValueError):
        HttpDate.from_datetime(EPOCH - timedelta(seconds=1))


def test_to_datetime_matches_parse():
    date = HttpDate.from_datetime(EPOCH + timedelta(seconds=784111777))
    assert date.to_datetime() == EPOCH + timedelta(seconds=784111777)
    assert str(date) == "Sun, 06 Nov 1994 08:49:37 GMT"