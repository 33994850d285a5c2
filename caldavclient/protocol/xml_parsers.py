"""
Pure functions for parsing WebDAV multistatus response bodies.

All functions in this module are pure - they take XML bytes in and return
structured data out, with no side effects or I/O.
"""

import logging
import re
from typing import Any
from urllib.parse import unquote

from lxml import etree
from lxml.etree import _Element

from caldavclient.elements import cdav, dav
from caldavclient.lib import error
from caldavclient.lib.url import URL

from .types import ResourceType

log = logging.getLogger("caldavclient")

## properties consisting of one or more hrefs
_HREF_PROPERTIES = {
    dav.CurrentUserPrincipal.tag,
    cdav.CalendarHomeSet.tag,
}

_status_re = re.compile(r"^\S+\s+(\d{3})\b")

## status code for propstats where the server gave no usable status line
UNKNOWN_STATUS = 0

Multistatus = dict[str, dict[int, dict[str, Any]]]


def parse_multistatus(body: bytes, huge_tree: bool = False) -> Multistatus:
    """
    Parse a 207 Multi-Status response body.

    Args:
        body: Raw XML response bytes
        huge_tree: Allow parsing very large XML documents

    Returns:
        ``{href: {status code: {property name: value}}}``, hrefs in the
        order given by the server.  A response with no propstat, only a
        status, is given as ``{status code: {}}``.  A missing or garbled
        status is given as UNKNOWN_STATUS, never as a success.

    Raises:
        XMLSyntaxError: If body is not valid XML
    """
    result: Multistatus = {}
    if not body or not body.strip():
        return result

    parser = etree.XMLParser(remove_blank_text=True, huge_tree=huge_tree)
    tree = etree.fromstring(body, parser)

    for elem in _strip_to_multistatus(tree):
        if not isinstance(elem.tag, str) or elem.tag == dav.ResponseDescription.tag:
            continue
        if elem.tag != dav.Response.tag:
            error.weirdness("unexpected element found in multistatus", elem)
            continue

        href, propstats, status = _parse_response_element(elem)
        ## the same href may come in several response elements
        by_status = result.setdefault(href, {})
        if status is not None:
            by_status.setdefault(_status_to_code(status), {})

        for propstat in propstats:
            status_elem = propstat.find(dav.Status.tag)
            code = _status_to_code(status_elem.text if status_elem is not None else None)
            if code == UNKNOWN_STATUS:
                error.weirdness("propstat without a valid status", propstat)
            properties = by_status.setdefault(code, {})
            for prop in propstat.iterfind(dav.Prop.tag):
                for child in prop:
                    properties[child.tag] = _element_to_value(child)

    return result


def success_properties(by_status: dict[int, dict[str, Any]]) -> dict[str, Any]:
    """The properties delivered with status 200, or an empty dict"""
    return by_status.get(200, {})


# Helper functions


def _strip_to_multistatus(tree: _Element) -> _Element | list[_Element]:
    """
    The response elements, normally the children of the multistatus
    root.  Some servers wrap the multistatus in an <xml> element, some
    send a bare response element.
    """
    if tree.tag == "xml" and len(tree) and tree[0].tag == dav.MultiStatus.tag:
        tree = tree[0]
    if tree.tag == dav.MultiStatus.tag:
        return tree
    return [tree]


def _parse_response_element(
    response: _Element,
) -> tuple[str, list[_Element], str | None]:
    """
    Parse a single DAV:response element.

    Returns:
        Tuple of (href, propstat elements list, status string)
    """
    status: str | None = None
    href: str | None = None
    propstats: list[_Element] = []

    for elem in response:
        if elem.tag == dav.Status.tag:
            status = elem.text
        elif elem.tag == dav.Href.tag:
            text = elem.text or ""
            ## Confluence quotes the user email twice
            if "%2540" in text:
                text = text.replace("%2540", "%40")
            href = unquote(text)
            if ":" in href:
                href = unquote(URL(href).path)
        elif elem.tag == dav.PropStat.tag:
            propstats.append(elem)
        elif elem.tag not in ("{DAV:}error", dav.ResponseDescription.tag):
            error.weirdness("unexpected element found in response", elem)

    return (href or "", propstats, status)


def _hrefs(elem: _Element) -> list[str]:
    return [child.text.strip() for child in elem if child.tag == dav.Href.tag and child.text]


def _element_to_value(elem: _Element) -> Any:
    """
    Convert a property element to a Python value.

    Text-only elements become their text, href properties become the
    href (a list if there are several), the resource type becomes a
    ResourceType, the supported component set a list of component
    names.  Other elements with children become a dict keyed by child
    tag, where only the first child with a given tag is kept.
    """
    tag = elem.tag

    if tag == dav.ResourceType.tag:
        return ResourceType.of(child.tag for child in elem)

    if tag == cdav.SupportedCalendarComponentSet.tag:
        return [child.get("name") for child in elem if child.get("name")]

    if tag in _HREF_PROPERTIES:
        hrefs = _hrefs(elem)
        if not hrefs:
            return None
        return hrefs[0] if len(hrefs) == 1 else hrefs

    if len(elem) == 0:
        return elem.text

    value: dict[str, Any] = {}
    for child in elem:
        if not isinstance(child.tag, str):
            ## comments and processing instructions
            continue
        if child.tag not in value:
            value[child.tag] = _element_to_value(child)
    return value


def _status_to_code(status: str | None) -> int:
    """The code of a status line like "HTTP/1.1 404 Not Found"."""
    match = _status_re.match(status or "")
    return int(match.group(1)) if match else UNKNOWN_STATUS
