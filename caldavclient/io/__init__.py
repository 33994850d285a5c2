"""
I/O layer for the WebDAV/CalDAV protocol.

The I/O layer is intentionally thin - it only handles HTTP transport.
All protocol logic (XML building/parsing) is in caldavclient.protocol.

Example:
    from caldavclient.io import SyncIO
    from caldavclient.protocol import DAVMethod, DAVRequest

    with SyncIO() as io:
        response = io.execute(DAVRequest(DAVMethod.OPTIONS, "https://cal.example.com/"))
        print(response.dav_capabilities())
"""

from .base import SyncIOProtocol
from .sync import SyncIO

__all__ = [
    "SyncIOProtocol",
    "SyncIO",
]
