#!/usr/bin/env python
from datetime import date
from datetime import datetime
from datetime import timezone
from typing import ClassVar
from typing import Optional
from typing import Union

from .base import BaseElement
from .base import NamedBaseElement
from .base import ValuedBaseElement
from caldavclient.lib.namespace import ns

utc_tz = timezone.utc


def _to_utc_date_string(ts: Union[date, datetime]) -> str:
    """
    Format a time-range bound.  Aware datetimes are converted to UTC,
    naive ones are taken to be local wall time and sent as they are,
    so local midnight stays midnight on the wire.  Dates are midnight.
    """
    if isinstance(ts, datetime) and ts.tzinfo is not None:
        ts = ts.astimezone(utc_tz)
    return ts.strftime("%Y%m%dT%H%M%SZ")


# Operations
class CalendarQuery(BaseElement):
    tag: ClassVar[str] = ns("c", "calendar-query")


# Filters
class Filter(BaseElement):
    tag: ClassVar[str] = ns("c", "filter")


class CompFilter(NamedBaseElement):
    tag: ClassVar[str] = ns("c", "comp-filter")


class PropFilter(NamedBaseElement):
    tag: ClassVar[str] = ns("c", "prop-filter")


# Conditions
class TextMatch(ValuedBaseElement):
    tag: ClassVar[str] = ns("c", "text-match")

    def __init__(self, value, collation: str = "i;octet", negate: bool = False) -> None:
        super(TextMatch, self).__init__(value=value)
        self.attributes["collation"] = collation
        if negate:
            self.attributes["negate-condition"] = "yes"


class TimeRange(BaseElement):
    tag: ClassVar[str] = ns("c", "time-range")

    def __init__(
        self,
        start: Optional[Union[date, datetime]] = None,
        end: Optional[Union[date, datetime]] = None,
    ) -> None:
        ## start and end should be an icalendar "date with UTC time",
        ## ref https://tools.ietf.org/html/rfc4791#section-9.9
        super(TimeRange, self).__init__()
        if start is not None:
            self.attributes["start"] = _to_utc_date_string(start)
        if end is not None:
            self.attributes["end"] = _to_utc_date_string(end)


# Components / Data
class CalendarData(BaseElement):
    tag: ClassVar[str] = ns("c", "calendar-data")


# Properties
class CalendarHomeSet(BaseElement):
    tag: ClassVar[str] = ns("c", "calendar-home-set")


# calendar resource type, see rfc4791, sec. 4.2
class Calendar(BaseElement):
    tag: ClassVar[str] = ns("c", "calendar")


class SupportedCalendarComponentSet(ValuedBaseElement):
    tag: ClassVar[str] = ns("c", "supported-calendar-component-set")
