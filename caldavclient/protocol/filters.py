"""
Filter trees for CalDAV REPORT requests (RFC4791 section 9.7).

A filter tree is built from three kinds of nodes:

- CompFilter: a ``<c:comp-filter name="VEVENT">`` with child nodes
- PropFilter: a ``<c:prop-filter name="SUMMARY">`` with child nodes
- AttributeFilter: a leaf element carrying attributes (and possibly a
  text value), like ``<c:time-range start="..." end="..."/>``

The nested-dict notation is also accepted::

    {"VCALENDAR": {"VEVENT": {"time-range": {"start": "20240101T000000Z"}}}}

where an all-uppercase key denotes a comp-filter and any other key a
leaf element with the value dict as attributes.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Mapping, Union

from caldavclient.elements import cdav
from caldavclient.elements.base import BaseElement, GenericElement
from caldavclient.lib.namespace import to_clark


@dataclass(frozen=True)
class AttributeFilter:
    tag: str
    attributes: dict[str, str] = field(default_factory=dict)
    text: str | None = None

    def to_element(self) -> BaseElement:
        return GenericElement(
            to_clark(self.tag, default_prefix="c"), self.attributes, self.text
        )


@dataclass(frozen=True)
class CompFilter:
    name: str
    children: list["FilterNode"] = field(default_factory=list)

    def to_element(self) -> BaseElement:
        return cdav.CompFilter(self.name) + [c.to_element() for c in self.children]


@dataclass(frozen=True)
class PropFilter:
    name: str
    children: list["FilterNode"] = field(default_factory=list)

    def to_element(self) -> BaseElement:
        return cdav.PropFilter(self.name) + [c.to_element() for c in self.children]


FilterNode = Union[CompFilter, PropFilter, AttributeFilter]
Filters = Union[list[FilterNode], Mapping[str, Mapping]]


def time_range(
    start: date | datetime | None = None, end: date | datetime | None = None
) -> AttributeFilter:
    """time-range leaf, only the bounds given are included"""
    element = cdav.TimeRange(start, end)
    return AttributeFilter("c:time-range", dict(element.attributes))


def text_match(
    value: str, collation: str = "i;octet", negate: bool = False
) -> AttributeFilter:
    element = cdav.TextMatch(value, collation=collation, negate=negate)
    return AttributeFilter("c:text-match", dict(element.attributes), value)


def filters_from_mapping(filters: Mapping[str, Mapping]) -> list[FilterNode]:
    result: list[FilterNode] = []
    for key, value in filters.items():
        if key == key.upper():
            result.append(CompFilter(key, filters_from_mapping(value)))
        else:
            result.append(AttributeFilter(key, dict(value)))
    return result


def normalize_filters(filters: Filters | None) -> list[FilterNode]:
    if not filters:
        return []
    if isinstance(filters, Mapping):
        return filters_from_mapping(filters)
    return list(filters)
