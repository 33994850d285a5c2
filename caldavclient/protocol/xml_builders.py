"""
Pure functions for building WebDAV/CalDAV XML request bodies.

All functions in this module are pure - they take data in and return XML out,
with no side effects or I/O.
"""
from typing import Iterable, List, Optional

from caldavclient.elements import cdav
from caldavclient.elements import dav
from caldavclient.elements.base import BaseElement
from caldavclient.elements.base import GenericElement
from caldavclient.lib.namespace import to_clark

from .filters import Filters, normalize_filters


def build_prop(props: Iterable[str]) -> BaseElement:
    """
    A ``<d:prop>`` element listing each property as an empty element.

    Args:
        props: Property names, in Clark notation, prefixed (``c:calendar-data``)
               or bare (bare names are taken to be in the DAV: namespace)
    """
    return dav.Prop() + [GenericElement(to_clark(p)) for p in props]


def build_filter(filters: Filters) -> Optional[BaseElement]:
    """
    A ``<c:filter>`` element holding the translated filter tree, or
    None if there are no filters.
    """
    nodes = normalize_filters(filters)
    if not nodes:
        return None
    return cdav.Filter() + [node.to_element() for node in nodes]


def build_request_body(
    root: str,
    props: Iterable[str],
    filters: Optional[Filters] = None,
) -> bytes:
    """
    Build a PROPFIND or REPORT request body.

    Args:
        root: Name of the root element, i.e. ``d:propfind`` or ``c:calendar-query``
        props: Properties to request
        filters: Filter tree, as a list of filter nodes or in the nested-dict notation

    Returns:
        UTF-8 encoded XML bytes
    """
    children: List[BaseElement] = [build_prop(props)]
    filter_element = build_filter(filters)
    if filter_element is not None:
        children.append(filter_element)
    request = GenericElement(to_clark(root)) + children
    return request.tostring()
