"""
The transport interface the DAVClient talks to.

Anything with execute() and close() will do, SyncIO is the requests
based implementation and the test suite has a mocked one.
"""

from typing import Protocol, runtime_checkable

from caldavclient.protocol.types import DAVRequest, DAVResponse


@runtime_checkable
class SyncIOProtocol(Protocol):
    def execute(self, request: DAVRequest) -> DAVResponse:
        """
        Send the request and wait for the answer.  Error statuses are
        returned as any other response, it's up to the caller to raise.
        """
        ...

    def close(self) -> None:
        """Release the connection pool, if any."""
        ...
