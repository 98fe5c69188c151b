"""Transport protocol.

Adapter boundary between the ingestion domain and the HTTP stack. The
domain only ever needs one shape of request: a GET with query parameters,
returning the response body as text.

Usage:
    body = transport.get("https://api.mixpanel.com/track", {"data": encoded})
"""

from typing import Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class Transport(Protocol):
    """Issue a single GET request and return the response body.

    Implementations must be safe to share between concurrent callers if
    the client using them is shared. They own connection pooling, TLS and
    default timeouts.
    """

    def get(
        self,
        url: str,
        params: Mapping[str, str],
        timeout: Optional[float] = None,
    ) -> str:
        """Send a GET request and read the whole body as text.

        Args:
            url: Absolute request URL, without query string.
            params: Query parameters to append to the URL.
            timeout: Per-request deadline in seconds. ``None`` keeps the
                transport's own default.

        Returns:
            The response body decoded as text.

        Raises:
            TransportError: If the request fails or the response is not 2xx.
        """
        ...
