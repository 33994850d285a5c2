#!/usr/bin/env python
import logging
import os
from collections import defaultdict
from typing import Dict
from typing import Optional
from typing import Type

from caldavclient import __version__

## Environmental variables prepended with "PYTHON_CALDAVCLIENT" are used for debug purposes,
## environmental variables prepended with "CALDAV_" are for connection parameters
## one of DEBUG_PDB, DEBUG, DEVELOPMENT, PRODUCTION
debugmode = os.environ.get("PYTHON_CALDAVCLIENT_DEBUGMODE")
if not debugmode:
    if "dev" in __version__:
        debugmode = "DEVELOPMENT"
    else:
        debugmode = "PRODUCTION"

log = logging.getLogger("caldavclient")
if debugmode.startswith("DEBUG"):
    log.setLevel(logging.DEBUG)
else:
    log.setLevel(logging.WARNING)


def errmsg(r) -> str:
    """Utility for formatting an error response to an error string"""
    return "%s %s\n\n%s" % (r.status, r.reason, r.body)


def weirdness(*reasons) -> None:
    from caldavclient.lib.debug import xmlstring

    reason = " : ".join([xmlstring(x) for x in reasons])
    log.warning(f"Deviation from expectations found: {reason}")
    if debugmode == "DEBUG_PDB":
        log.error(f"Dropping into debugger due to {reason}")
        import pdb

        pdb.set_trace()


class DAVError(Exception):
    url: Optional[str] = None
    reason: str = "no reason"

    def __init__(self, url: Optional[str] = None, reason: Optional[str] = None) -> None:
        if url:
            self.url = url
        if reason:
            self.reason = reason

    def __str__(self) -> str:
        return "%s at '%s', reason %s" % (
            self.__class__.__name__,
            self.url,
            self.reason,
        )


class ProtocolError(DAVError):
    """
    The server does not behave like a CalDAV server, i.e. it does
    not announce calendar-access, or the calendar home set could not
    be found.
    """

    pass


class NotInitializedError(DAVError):
    """
    A calendar operation was attempted before DAVClient.init() had
    discovered the calendar home set.
    """

    pass


class NotFoundError(DAVError):
    pass


class HTTPError(DAVError):
    """
    The server answered with a status code of 400 or above.  The
    status property holds the status code.
    """

    status: int = 0

    def __init__(
        self,
        url: Optional[str] = None,
        reason: Optional[str] = None,
        status: Optional[int] = None,
    ) -> None:
        super(HTTPError, self).__init__(url=url, reason=reason)
        if status is not None:
            self.status = status

    def __str__(self) -> str:
        return "%s %i at '%s', reason %s" % (
            self.__class__.__name__,
            self.status,
            self.url,
            self.reason,
        )


class AuthorizationError(HTTPError):
    """
    The client encountered an HTTP 401 or 403 error and is passing it on
    to the user. The url property will contain the url in question,
    the reason property will contain the excuse the server sent.
    """

    pass


class PropfindError(HTTPError):
    pass


class ReportError(HTTPError):
    pass


class OptionsError(HTTPError):
    pass


exception_by_method: Dict[str, Type[HTTPError]] = defaultdict(lambda: HTTPError)
for method in (
    "report",
    "propfind",
    "options",
):
    exception_by_method[method] = locals()[method[0].upper() + method[1:] + "Error"]
