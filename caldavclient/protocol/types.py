"""
Core protocol types.

These dataclasses represent HTTP requests and responses at the protocol level,
independent of the I/O implementation that carries them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable


class DAVMethod(Enum):
    """WebDAV/CalDAV HTTP methods used by the client."""

    OPTIONS = "OPTIONS"
    PROPFIND = "PROPFIND"
    REPORT = "REPORT"


@dataclass(frozen=True)
class DAVRequest:
    """
    Represents an HTTP request to be made.

    Attributes:
        method: HTTP method (OPTIONS, PROPFIND, REPORT)
        url: Full URL for the request
        headers: HTTP headers as dict
        body: Request body as bytes (optional)
    """

    method: DAVMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None


@dataclass(frozen=True)
class DAVResponse:
    """
    Represents an HTTP response received.

    Attributes:
        status: HTTP status code
        headers: HTTP headers as dict
        body: Response body as bytes
        reason: Reason phrase as given by the server
    """

    status: int
    headers: dict[str, str]
    body: bytes
    reason: str = ""

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return default

    def dav_capabilities(self) -> list[str]:
        """The comma-separated items of the DAV header (RFC4918 section 10.1)."""
        dav_header = self.header("DAV")
        if not dav_header:
            return []
        return [x.strip() for x in dav_header.split(",") if x.strip()]


@dataclass(frozen=True)
class ResourceType:
    """
    Parsed value of the DAV:resourcetype property, the Clark names of
    the resource type elements delivered by the server.
    """

    types: frozenset[str] = frozenset()

    @classmethod
    def of(cls, tags: Iterable[str]) -> "ResourceType":
        return cls(frozenset(tags))

    def is_(self, tag: str) -> bool:
        return tag in self.types

    def __contains__(self, tag: object) -> bool:
        return tag in self.types
