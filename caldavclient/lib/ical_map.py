#!/usr/bin/env python
"""
Flattening of parsed icalendar components into plain dicts.

The result of object_to_dict is a dict keyed by property name (or
component name for subcomponents), holding:

* a nested dict for subcomponents (VEVENT, VALARM, VTIMEZONE ...)
* datetime or date objects for date and date-time properties
* a dict for RRULE/EXRULE, rule part names lowercased
* timedelta objects for durations
* a normalized string for calendar addresses (ATTENDEE, ORGANIZER)
* a string (or number) for anything else, or, when the property
  carries parameters, ``{"value": ..., "PARAM": ...}``

The mapping is lossy.  If a property name occurs more than once
(ATTENDEE, CATEGORIES, several VEVENTs with RECURRENCE-ID ...) only the
first one is kept.
"""
from datetime import date
from datetime import time
from datetime import timedelta
from enum import Enum
from typing import Any
from typing import Callable
from typing import Dict
from typing import Iterator
from typing import Tuple

from icalendar.cal import Component
from icalendar.prop import vCalAddress
from icalendar.prop import vDDDLists
from icalendar.prop import vDDDTypes
from icalendar.prop import vDuration
from icalendar.prop import vRecur

from caldavclient.lib.python_utilities import to_normal_str


class ValueKind(Enum):
    COMPONENT = "component"
    DATETIME = "datetime"
    RECURRENCE = "recurrence"
    DURATION = "duration"
    ADDRESS = "address"
    PLAIN = "plain"


def classify(value: Any) -> ValueKind:
    if isinstance(value, Component):
        return ValueKind.COMPONENT
    if isinstance(value, vRecur):
        return ValueKind.RECURRENCE
    if isinstance(value, vDuration):
        return ValueKind.DURATION
    if isinstance(value, vDDDLists):
        return ValueKind.DATETIME
    if isinstance(value, vDDDTypes):
        ## vDDDTypes is also used for DURATION and PERIOD values
        if isinstance(value.dt, timedelta):
            return ValueKind.DURATION
        if isinstance(value.dt, (date, time)):
            return ValueKind.DATETIME
        return ValueKind.PLAIN
    if isinstance(value, vCalAddress):
        return ValueKind.ADDRESS
    return ValueKind.PLAIN


def _datetime(value: Any) -> Any:
    if isinstance(value, vDDDLists):
        return value.dts[0].dt if value.dts else None
    return value.dt


def _recurrence(value: vRecur) -> Dict[str, Any]:
    ret = {}
    for key, parts in value.items():
        if isinstance(parts, list) and len(parts) == 1:
            parts = parts[0]
        ret[key.lower()] = parts
    return ret


def _duration(value: Any) -> timedelta:
    if isinstance(value, vDuration):
        return value.td
    return value.dt


def _address(value: vCalAddress) -> str:
    """
    MAILTO:John.Doe@Example.COM -> mailto:john.doe@example.com.  The
    scheme is always lowercased, the rest only for mailto.
    """
    text = str(value)
    if ":" not in text[1:]:
        return text
    scheme, rest = text.split(":", 1)
    scheme = scheme.lower()
    if scheme == "mailto":
        rest = rest.lower()
    return "%s:%s" % (scheme, rest)


def _text(value: Any) -> Any:
    if isinstance(value, str):
        return str(value)
    if isinstance(value, float):
        return float(value)
    if isinstance(value, int):
        return int(value)
    if hasattr(value, "to_ical"):
        return to_normal_str(value.to_ical())
    return value


def _plain(value: Any) -> Any:
    params = getattr(value, "params", None)
    if not params:
        return _text(value)
    ret = {"value": _text(value)}
    for name, param in params.items():
        ret[name] = param
    return ret


_extractors: Dict[ValueKind, Callable[[Any], Any]] = {
    ValueKind.COMPONENT: lambda value: object_to_dict(value),
    ValueKind.DATETIME: _datetime,
    ValueKind.RECURRENCE: _recurrence,
    ValueKind.DURATION: _duration,
    ValueKind.ADDRESS: _address,
    ValueKind.PLAIN: _plain,
}


def children(component: Component) -> Iterator[Tuple[str, Any]]:
    """
    (name, value) for every property instance, then for every
    subcomponent.  icalendar keeps repeated properties in a list, they
    are yielded one by one in the order they were parsed.
    """
    for name, values in component.items():
        if not isinstance(values, list):
            values = [values]
        for value in values:
            yield (name, value)
    for subcomponent in component.subcomponents:
        yield (subcomponent.name, subcomponent)


def value_of(value: Any) -> Any:
    return _extractors[classify(value)](value)


def object_to_dict(component: Component) -> Dict[str, Any]:
    """Converts an icalendar component to a plain dict"""
    result: Dict[str, Any] = {}
    for name, value in children(component):
        ## Can have multiple of the same, first one's the charm
        if name not in result:
            result[name] = value_of(value)
    return result
