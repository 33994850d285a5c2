#!/usr/bin/env python
import re
from typing import Dict
from typing import Optional

DAV_NS = "DAV:"
CALDAV_NS = "urn:ietf:params:xml:ns:caldav"

## The prefixes are visible on the wire, d: and c: is what most
## clients (and the RFC examples, more or less) are using.
nsmap: Dict[str, str] = {
    "d": DAV_NS,
    "c": CALDAV_NS,
}

_clark_re = re.compile(r"^\{([^}]*)\}(.+)$")


def ns(prefix: str, tag: Optional[str] = None) -> str:
    name = "{%s}" % nsmap[prefix]
    if tag is not None:
        name = "%s%s" % (name, tag)
    return name


def to_clark(name: str, default_prefix: str = "d") -> str:
    """
    Property and element names may be given in Clark notation
    (``{DAV:}displayname``), with one of the prefixes from nsmap
    (``c:calendar-data``) or bare (``displayname``), in which case
    the default_prefix namespace is used.  Returns Clark notation.
    """
    if _clark_re.match(name):
        return name
    if ":" in name:
        prefix, tag = name.split(":", 1)
        if prefix not in nsmap:
            raise ValueError("unknown namespace prefix %s in %s" % (prefix, name))
        return ns(prefix, tag)
    return ns(default_prefix, name)
