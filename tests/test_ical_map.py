#!/usr/bin/env python
from datetime import date
from datetime import datetime
from datetime import timedelta
from datetime import timezone

import icalendar

from caldavclient.lib.ical_map import classify
from caldavclient.lib.ical_map import object_to_dict
from caldavclient.lib.ical_map import value_of
from caldavclient.lib.ical_map import ValueKind

from fixture_helpers import ev1
from fixture_helpers import ev2
from fixture_helpers import evr

todo_with_alarm = """BEGIN:VCALENDAR
VERSION:2.0
PRODID:-//Example Corp.//CalDAV Client//EN
BEGIN:VTODO
UID:20070313T123432Z-456553@example.com
DTSTAMP:20070313T123432Z
DUE;VALUE=DATE:20070501
SUMMARY;LANGUAGE=en:Submit Quebec Income Tax Return for 2006
PRIORITY:1
EXDATE:20070401T000000Z,20070402T000000Z
ATTENDEE:urn:uuid:B5D6C2E8-AAAA-BBBB-CCCC-DDDDEEEEFFFF
BEGIN:VALARM
ACTION:AUDIO
TRIGGER:-PT15M
END:VALARM
END:VTODO
END:VCALENDAR
"""


def parse(data):
    return icalendar.Calendar.from_ical(data)


class TestClassify:
    def test_kinds(self):
        vevent = parse(ev2).subcomponents[0]
        assert classify(vevent) == ValueKind.COMPONENT
        assert classify(vevent["DTSTART"]) == ValueKind.DATETIME
        assert classify(vevent["DURATION"]) == ValueKind.DURATION
        assert classify(vevent["ORGANIZER"]) == ValueKind.ADDRESS
        assert classify(vevent["SUMMARY"]) == ValueKind.PLAIN
        assert classify(parse(evr).subcomponents[0]["RRULE"]) == ValueKind.RECURRENCE

    def test_date_lists(self):
        vtodo = parse(todo_with_alarm).subcomponents[0]
        assert classify(vtodo["EXDATE"]) == ValueKind.DATETIME
        assert value_of(vtodo["EXDATE"]) == datetime(2007, 4, 1, tzinfo=timezone.utc)


class TestObjectToDict:
    def test_calendar(self):
        result = object_to_dict(parse(ev1))
        assert list(result) == ["VERSION", "PRODID", "VEVENT"]
        assert result["VEVENT"] == {
            "UID": "20010712T182145Z-123401@example.com",
            "DTSTAMP": datetime(2006, 7, 12, 18, 21, 45, tzinfo=timezone.utc),
            "DTSTART": datetime(2006, 7, 14, 17, 0, tzinfo=timezone.utc),
            "DTEND": datetime(2006, 7, 15, 4, 0, tzinfo=timezone.utc),
            "SUMMARY": "Bastille Day Party",
        }

    def test_first_occurrence_wins(self):
        vevent = object_to_dict(parse(ev2))["VEVENT"]
        assert vevent["ATTENDEE"] == "mailto:alice@example.com"

    def test_address_normalization(self):
        vevent = object_to_dict(parse(ev2))["VEVENT"]
        assert vevent["ORGANIZER"] == "mailto:boss@example.com"
        vtodo = object_to_dict(parse(todo_with_alarm))["VTODO"]
        ## only mailto addresses are lowercased
        assert vtodo["ATTENDEE"] == "urn:uuid:B5D6C2E8-AAAA-BBBB-CCCC-DDDDEEEEFFFF"

    def test_recurrence_rule(self):
        vevent = object_to_dict(parse(evr))["VEVENT"]
        assert vevent["RRULE"] == {"freq": "YEARLY"}
        assert vevent["DTSTART"] == date(1997, 11, 2)

    def test_duration(self):
        vevent = object_to_dict(parse(ev2))["VEVENT"]
        assert vevent["DURATION"] == timedelta(hours=1)

    def test_parameters(self):
        vtodo = object_to_dict(parse(todo_with_alarm))["VTODO"]
        assert vtodo["SUMMARY"] == {
            "value": "Submit Quebec Income Tax Return for 2006",
            "LANGUAGE": "en",
        }
        assert vtodo["PRIORITY"] == 1
        assert vtodo["DUE"] == date(2007, 5, 1)

    def test_nested_components(self):
        vtodo = object_to_dict(parse(todo_with_alarm))["VTODO"]
        assert vtodo["VALARM"] == {
            "ACTION": "AUDIO",
            "TRIGGER": -timedelta(minutes=15),
        }

    def test_categories(self):
        vevent = object_to_dict(parse(evr))["VEVENT"]
        assert vevent["CATEGORIES"] == "ANNIVERSARY,PERSONAL,SPECIAL OCCASION"
