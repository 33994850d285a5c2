"""
A Calendar is a calendar collection on the server, as found in the
calendar home set by DAVClient.calendars().  It has the methods for
querying the calendar for events; the events are returned as plain
dicts, see caldavclient.lib.ical_map.
"""
import logging
from dataclasses import dataclass
from dataclasses import field
from datetime import date
from datetime import datetime
from datetime import timedelta
from typing import Any
from typing import Dict
from typing import List
from typing import Optional
from typing import TYPE_CHECKING
from typing import Union

import icalendar

from .elements import cdav
from .lib import vcal
from .lib.ical_map import object_to_dict
from .lib.url import URL
from .protocol.filters import CompFilter
from .protocol.filters import time_range

if TYPE_CHECKING:
    from .davclient import DAVClient

log = logging.getLogger("caldavclient")

TimeStamp = Optional[Union[date, datetime]]


@dataclass(frozen=True)
class Calendar:
    """
    A calendar collection.

    The client is not owned by the calendar, it's a plain reference
    back to the DAVClient the calendar was found through, and the
    client must stay open for as long as the calendar is used.
    """

    client: "DAVClient" = field(repr=False, compare=False)
    name: str
    url: URL
    components: List[str] = field(default_factory=list)

    def get_events(
        self, start: TimeStamp = None, end: TimeStamp = None, expand: bool = False
    ) -> List[Dict[str, Any]]:
        """
        Search for events, optionally within a time range.

        Args:
          start: only events ending after start
          end: only events starting before end
          expand: expand recurring events into one dict per
            occurrence (client side).  Requires both start and end.

        Naive datetimes are local wall time and are sent as they are,
        aware ones are converted to UTC.

        The query always carries a VCALENDAR/VEVENT comp-filter, also
        when no bounds are given, so resources holding only VTODO or
        VJOURNAL components are not returned.

        Returns:
          [ {"VERSION": "2.0", ..., "VEVENT": {"SUMMARY": ...}}, ... ]
          in the order given by the server.
        """
        if expand and not (start and end):
            raise ValueError("can't expand without a date range")

        filters = self._event_filter(start, end)
        found = self.client.report(
            self.url, cdav.CalendarQuery.tag, [cdav.CalendarData.tag], filters, depth=1
        )

        events = []
        for href, props in found.items():
            raw = props.get(cdav.CalendarData.tag)
            if not raw:
                log.debug("no calendar data for %s, skipping" % href)
                continue
            calendar = vcal.read(raw, forgiving=True)
            if expand:
                events.extend(
                    object_to_dict(occurrence)
                    for occurrence in self._expand(calendar, start, end)
                )
            else:
                events.append(object_to_dict(calendar))
        return events

    def get_todays_events(self, now: Optional[datetime] = None) -> List[Dict[str, Any]]:
        """
        Events from the local midnight to 23:59:59 of the current day
        """
        today = now or self.client.clock()
        start = today.replace(hour=0, minute=0, second=0, microsecond=0)
        end = today.replace(hour=23, minute=59, second=59, microsecond=0)
        return self.get_events(start, end)

    def get_future_events(
        self, span: Optional[timedelta] = None, now: Optional[datetime] = None
    ) -> List[Dict[str, Any]]:
        """
        Events from the midnight starting tomorrow, all of them or within
        the span given.
        """
        today = now or self.client.clock()
        start = (today + timedelta(days=1)).replace(
            hour=0, minute=0, second=0, microsecond=0
        )
        end = start + span if span else None
        return self.get_events(start, end)

    @staticmethod
    def _event_filter(start: TimeStamp, end: TimeStamp) -> List[CompFilter]:
        ## RFC4791 requires a filter in a calendar-query, so the comp-filters
        ## are always there, the time-range only when a bound is given.
        event_filters = []
        if start is not None or end is not None:
            event_filters.append(time_range(start, end))
        return [CompFilter("VCALENDAR", [CompFilter("VEVENT", event_filters)])]

    @staticmethod
    def _expand(
        calendar: icalendar.Calendar, start: TimeStamp, end: TimeStamp
    ) -> List[icalendar.Calendar]:
        """
        One calendar per occurrence of the events in calendar, each
        holding the top level properties and the timezones of the
        original.
        """
        import recurring_ical_events

        timezones = [c for c in calendar.subcomponents if c.name == "VTIMEZONE"]
        ret = []
        for occurrence in recurring_ical_events.of(
            calendar, components=["VEVENT"]
        ).between(start, end):
            single = icalendar.Calendar()
            for key, value in calendar.items():
                single[key] = value
            for timezone in timezones:
                single.add_component(timezone)
            single.add_component(occurrence)
            ret.append(single)
        return ret
