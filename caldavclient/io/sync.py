"""
Synchronous I/O implementation using the requests library.
"""

import logging
from typing import Optional, Tuple, Union

import requests
from requests.auth import AuthBase

from caldavclient.lib.python_utilities import to_normal_str
from caldavclient.protocol.types import DAVRequest, DAVResponse

log = logging.getLogger("caldavclient")


class SyncIO:
    """
    Synchronous I/O shell using the requests library.

    This is a thin wrapper that executes DAVRequest objects via HTTP
    and returns DAVResponse objects.  Timeouts, proxies (through the
    standard environment variables) and .netrc handling are left to
    requests.

    Example:
        io = SyncIO(auth=requests.auth.HTTPBasicAuth("user", "pass"))
        response = io.execute(request)
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        auth: Optional[AuthBase] = None,
        timeout: Optional[float] = None,
        verify: Union[bool, str] = True,
        cert: Union[str, Tuple[str, str], None] = None,
    ):
        """
        Initialize the sync I/O handler.

        Args:
            session: Existing requests Session to use (creates new if None)
            auth: requests auth object, i.e. HTTPBasicAuth
            timeout: Request timeout in seconds
            verify: Verify SSL certificates, or path to a CA bundle
            cert: Client side certificate
        """
        self._owns_session = session is None
        self.session = session or requests.Session()
        self.auth = auth
        self.timeout = timeout
        self.verify = verify
        self.cert = cert

    def execute(self, request: DAVRequest) -> DAVResponse:
        """
        Execute a DAVRequest and return DAVResponse.

        Args:
            request: The request to execute

        Returns:
            DAVResponse with status, headers, and body
        """
        log.debug(
            "sending request - method={0}, url={1}, headers={2}\nbody:\n{3}".format(
                request.method.value,
                request.url,
                request.headers,
                to_normal_str(request.body),
            )
        )
        response = self.session.request(
            method=request.method.value,
            url=request.url,
            headers=request.headers,
            data=request.body,
            auth=self.auth,
            timeout=self.timeout,
            verify=self.verify,
            cert=self.cert,
        )
        log.debug("server responded with %i %s" % (response.status_code, response.reason))

        return DAVResponse(
            status=response.status_code,
            headers=dict(response.headers),
            body=response.content,
            reason=response.reason or "",
        )

    def close(self) -> None:
        """Close the session if we created it."""
        if self._owns_session and self.session:
            self.session.close()

    def __enter__(self) -> "SyncIO":
        return self

    def __exit__(self, *args) -> None:
        self.close()
