"""Parsing and formatting of dates used in HTTP header fields."""

from __future__ import annotations

import functools
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from httptypes.utils import HttpError

__all__ = ["HttpDate", "parse_http_date", "fmt_http_date"]

_IMF_FIXDATE_LENGTH = 29
_RFC850_MIN_LENGTH = 23
_ASCTIME_LENGTH = 24

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ASCII_WHITESPACE = " \t\n\r\x0b\x0c"

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_LONG_DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
_MONTH_NAMES = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

_NUMBER_RE = re.compile(r"\+?\d+")


def _number(text: str) -> int:
    if not _NUMBER_RE.fullmatch(text):
        raise HttpError(f"invalid digit found in {text!r}")
    return int(text)


def _lookup(names: tuple[str, ...], text: str, what: str) -> int:
    try:
        return names.index(text) + 1
    except ValueError:
        raise HttpError(f"Invalid {what}") from None


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class HttpDate:
    """A calendar date and time of day in GMT, as carried in HTTP headers.

    Equality and ordering compare the instant described, not the weekday.
    """

    second: int
    minute: int
    hour: int
    day: int
    month: int
    year: int
    week_day: int

    @classmethod
    def parse(cls, s: str) -> "HttpDate":
        """Parse an IMF-fixdate, RFC 850 or asctime formatted date."""
        if not s.isascii():
            raise HttpError("String slice is not valid ASCII")
        text = s.strip(_ASCII_WHITESPACE)
        date = None
        error: HttpError | None = None
        for parser in (_parse_imf_fixdate, _parse_rfc850_date, _parse_asctime):
            try:
                date = parser(text)
                break
            except HttpError as exc:
                error = exc
        if date is None:
            assert error is not None
            raise error
        if not date._is_valid():
            raise HttpError("Invalid date time")
        return date

    @classmethod
    def from_datetime(cls, moment: datetime) -> "HttpDate":
        """Build from a datetime; naive values are taken to be UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        moment = moment.astimezone(timezone.utc)
        if moment < _EPOCH:
            raise ValueError("all times should be after the epoch")
        return cls(
            second=moment.second,
            minute=moment.minute,
            hour=moment.hour,
            day=moment.day,
            month=moment.month,
            year=moment.year,
            week_day=moment.isoweekday(),
        )

    def to_datetime(self) -> datetime:
        """The instant described, as an aware UTC datetime."""
        return datetime(self.year, self.month, 1, tzinfo=timezone.utc) + timedelta(
            days=self.day - 1,
            hours=self.hour,
            minutes=self.minute,
            seconds=self.second,
        )

    def _is_valid(self) -> bool:
        return (
            self.second < 60
            and self.minute < 60
            and self.hour < 24
            and 0 < self.day < 32
            and 0 < self.month <= 12
            and 1970 <= self.year <= 9999
            and 1 <= self.week_day < 8
        )

    def __str__(self) -> str:
        return (
            f"{_DAY_NAMES[self.week_day - 1]}, {self.day:02d} "
            f"{_MONTH_NAMES[self.month - 1]} {self.year:04d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d} GMT"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HttpDate):
            return NotImplemented
        return self.to_datetime() == other.to_datetime()

    def __lt__(self, other: "HttpDate") -> bool:
        if not isinstance(other, HttpDate):
            return NotImplemented
        return self.to_datetime() < other.to_datetime()

    def __hash__(self) -> int:
        return hash(self.to_datetime())


def _parse_imf_fixdate(s: str) -> HttpDate:
    # Example: `Sun, 06 Nov 1994 08:49:37 GMT`
    if (
        len(s) != _IMF_FIXDATE_LENGTH
        or s[25:] != " GMT"
        or s[16] != " "
        or s[19] != ":"
        or s[22] != ":"
    ):
        raise HttpError("Date time not in imf fixdate format")
    month_part = s[7:12]
    if not (month_part.startswith(" ") and month_part.endswith(" ")):
        raise HttpError("Invalid Month")
    day_part = s[:5]
    if not day_part.endswith(", "):
        raise HttpError("Invalid Day")
    return HttpDate(
        second=_number(s[23:25]),
        minute=_number(s[20:22]),
        hour=_number(s[17:19]),
        day=_number(s[5:7]),
        month=_lookup(_MONTH_NAMES, month_part[1:4], "Month"),
        year=_number(s[12:16]),
        week_day=_lookup(_DAY_NAMES, day_part[:3], "Day"),
    )


def _parse_rfc850_date(s: str) -> HttpDate:
    # Example: `Sunday, 06-Nov-94 08:49:37 GMT`
    if len(s) < _RFC850_MIN_LENGTH:
        raise HttpError("Date time not in rfc850 format")
    for week_day, name in enumerate(_LONG_DAY_NAMES, start=1):
        prefix = f"{name}, "
        if s.startswith(prefix):
            rest = s[len(prefix):]
            break
    else:
        raise HttpError("Invalid day")
    if len(rest) != 22 or rest[12] != ":" or rest[15] != ":" or rest[18:22] != " GMT":
        raise HttpError("Date time not in rfc850 format")
    year = _number(rest[7:9])
    year += 2000 if year < 70 else 1900
    month_part = rest[2:7]
    if not (month_part.startswith("-") and month_part.endswith("-")):
        raise HttpError("Invalid month")
    return HttpDate(
        second=_number(rest[16:18]),
        minute=_number(rest[13:15]),
        hour=_number(rest[10:12]),
        day=_number(rest[0:2]),
        month=_lookup(_MONTH_NAMES, month_part[1:4], "month"),
        year=year,
        week_day=week_day,
    )


def _parse_asctime(s: str) -> HttpDate:
    # Example: `Sun Nov  6 08:49:37 1994`
    if (
        len(s) != _ASCTIME_LENGTH
        or s[10] != " "
        or s[13] != ":"
        or s[16] != ":"
        or s[19] != " "
    ):
        raise HttpError("Date time not in asctime format")
    day_part = s[8:10]
    if day_part[0] == " ":
        day_part = day_part[1:2]
    if s[7] != " ":
        raise HttpError("Invalid month")
    if s[3] != " ":
        raise HttpError("Invalid day")
    return HttpDate(
        second=_number(s[17:19]),
        minute=_number(s[14:16]),
        hour=_number(s[11:13]),
        day=_number(day_part),
        month=_lookup(_MONTH_NAMES, s[4:7], "month"),
        year=_number(s[20:24]),
        week_day=_lookup(_DAY_NAMES, s[0:3], "day"),
    )


def parse_http_date(s: str) -> datetime:
    """Parse a date from an HTTP header field into an aware UTC datetime.

    Supports IMF-fixdate and the legacy RFC 850 and asctime formats. Two
    digit years map to 1970 through 2069. Failures raise :class:`HttpError`
    with status 400.
    """
    try:
        return HttpDate.parse(s).to_datetime()
    except HttpError as exc:
        raise HttpError(exc.message, 400) from exc


def fmt_http_date(moment: datetime) -> str:
    """Format a datetime as an IMF-fixdate, e.g. ``Fri, 15 May 2015 15:34:21 GMT``."""
    return str(HttpDate.from_datetime(moment))