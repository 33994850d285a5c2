import datetime

import pytest
import tzlocal
from lxml import etree

from caldavclient.elements.cdav import _to_utc_date_string
from caldavclient.elements.cdav import CalendarQuery
from caldavclient.elements.cdav import CompFilter
from caldavclient.elements.cdav import TextMatch
from caldavclient.elements.cdav import TimeRange
from caldavclient.elements.dav import Prop
from caldavclient.elements.base import GenericElement

SOMEWHERE_REMOTE = datetime.timezone(datetime.timedelta(hours=-2))  # UTC-2 and no DST


def test_element():
    cq = CalendarQuery()
    assert str(cq).startswith("<?xml")
    assert not "xml" in repr(cq)
    assert "CalendarQuery" in repr(cq)
    assert "calendar-query" in str(cq)


def test_element_prefixes():
    cq = CalendarQuery() + Prop()
    assert "<c:calendar-query" in str(cq)
    assert "<d:prop" in str(cq)


def test_comp_filter_needs_name():
    with pytest.raises(ValueError):
        CompFilter().xmlelement()
    assert CompFilter("VEVENT").xmlelement().get("name") == "VEVENT"


def test_generic_element():
    elem = GenericElement("{DAV:}getetag", {"foo": "bar"}, "value").xmlelement()
    assert elem.tag == "{DAV:}getetag"
    assert elem.get("foo") == "bar"
    assert elem.text == "value"


def test_text_match():
    elem = TextMatch("meeting", negate=True).xmlelement()
    assert elem.text == "meeting"
    assert elem.get("collation") == "i;octet"
    assert elem.get("negate-condition") == "yes"


def test_time_range():
    elem = TimeRange(datetime.date(2024, 1, 1)).xmlelement()
    assert elem.get("start") == "20240101T000000Z"
    assert elem.get("end") is None
    elem = etree.fromstring(str(TimeRange(end=datetime.date(2024, 1, 2))).encode("utf-8"))
    assert dict(elem.attrib) == {"end": "20240102T000000Z"}


def test_to_utc_date_string_date():
    input = datetime.date(2019, 5, 14)
    res = _to_utc_date_string(input)
    assert res == "20190514T000000Z"


def test_to_utc_date_string_utc():
    input = datetime.datetime(2019, 5, 14, 21, 10, 23, 23, tzinfo=datetime.timezone.utc)
    res = _to_utc_date_string(input.astimezone())
    assert res == "20190514T211023Z"


def test_to_utc_date_string_dt_with_other_tz():
    input = datetime.datetime(2019, 5, 14, 21, 10, 23, 23, tzinfo=SOMEWHERE_REMOTE)
    res = _to_utc_date_string(input)
    assert res == "20190514T231023Z"


def test_to_utc_date_string_dt_with_local_tz():
    input = datetime.datetime(2019, 5, 14, 21, 10, 23, 23, tzinfo=tzlocal.get_localzone())
    res = _to_utc_date_string(input)
    exp = input.astimezone(datetime.timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    assert res == exp


def test_to_utc_date_string_naive_dt_keeps_wall_time():
    input = datetime.datetime(2019, 5, 14, 21, 10, 23, 23)
    res = _to_utc_date_string(input)
    assert res == "20190514T211023Z"
