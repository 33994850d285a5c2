#!/usr/bin/env python
import sys
from typing import Any
from typing import Union
from urllib.parse import ParseResult
from urllib.parse import quote
from urllib.parse import unquote
from urllib.parse import urlparse
from urllib.parse import urlunparse

from caldavclient.lib.python_utilities import to_unicode

if sys.version_info < (3, 11):
    from typing_extensions import Self
else:
    from typing import Self

_default_ports = {"https": 443, "http": 80}


class URL:
    """
    Wraps URLs into objects.  Used internally, all methods in the
    library accept URLs as URL objects or strings.

    Hrefs delivered from the server in a multistatus response are
    usually absolute paths ("/dav/calendars/user/"), sometimes fully
    qualified URLs, and they need to be resolved against the base URL
    the DAVClient was set up with before sending new requests.

    The attributes of urllib's ParseResult (scheme, hostname, port,
    path, username, password ...) are available on the object.
    """

    def __init__(self, url: Union[str, bytes, ParseResult]) -> None:
        if isinstance(url, ParseResult):
            self.parsed = url
        else:
            self.parsed = urlparse(to_unicode(url))

    @classmethod
    def objectify(cls, url: Union[Self, str, ParseResult, None]) -> "URL":
        if url is None or isinstance(url, URL):
            return url
        return URL(url)

    def __getattr__(self, attr: str) -> Any:
        if attr == "parsed":
            raise AttributeError(attr)
        return getattr(self.parsed, attr)

    def __str__(self) -> str:
        return self.parsed.geturl()

    def __repr__(self) -> str:
        return "URL(%s)" % self

    def __bool__(self) -> bool:
        return bool(str(self))

    def __eq__(self, other: object) -> bool:
        ## trailing slashes, default ports, quoting and credentials are insignificant
        if not isinstance(other, URL):
            other = URL.objectify(str(other))
        return str(self.canonical()) == str(other.canonical())

    def __ne__(self, other: object) -> bool:
        return not self == other

    def __hash__(self) -> int:
        return hash(str(self.canonical()))

    def is_auth(self) -> bool:
        return self.username is not None

    def unauth(self) -> "URL":
        """returns the URL without username and password, the port made explicit"""
        if not self.is_auth():
            return self
        port = self.port or _default_ports[self.scheme]
        return URL(
            self.parsed._replace(
                netloc="%s:%s" % (self.hostname, port),
                path=self.path.replace("//", "/"),
            )
        )

    def canonical(self) -> "URL":
        """
        Remove authentication details and double slashes, quote the
        path properly, make the port explicit and strip the trailing
        slash.
        """
        url = self.unauth().parsed
        scheme = url.scheme or "https"
        netloc = url.netloc
        if netloc and ":" not in netloc and scheme in _default_ports:
            netloc = "%s:%s" % (netloc, _default_ports[scheme])
        path = quote(unquote(url.path.replace("//", "/")))
        if path.endswith("/"):
            path = path[:-1]
        return URL(url._replace(scheme=scheme, netloc=netloc, path=path))

    def join(self, path: Any) -> "URL":
        """
        Assumes this object is the base URL.  A relative path is
        appended to the base, an absolute path replaces the path of the
        base.  A fully qualified URL pointing to another host than the
        base is refused.
        """
        if not path or not str(path):
            return self
        path = URL.objectify(path)
        for attr in ("scheme", "hostname", "port"):
            mine = getattr(self, attr)
            theirs = getattr(path, attr)
            if mine and theirs and mine != theirs:
                raise ValueError("%s can't be joined with %s" % (self, path))

        if path.path.startswith("/"):
            ret_path = path.path
        else:
            sep = "" if self.path.endswith("/") else "/"
            ret_path = "%s%s%s" % (self.path, sep, path.path)
        return URL(
            urlunparse(
                (
                    self.scheme or path.scheme,
                    self.netloc or path.netloc,
                    ret_path,
                    path.params,
                    path.query,
                    path.fragment,
                )
            )
        )
