"""httpx transport adapter.

Implements the Transport protocol on top of a synchronous ``httpx.Client``.
All httpx exceptions are converted to TransportError at the boundary.
"""

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from mixpanel_ingest.core.exceptions import TransportError
from mixpanel_ingest.core.protocols.transport import Transport

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class HttpxTransport(Transport):
    """Send GET requests through an httpx client.

    Pass an existing ``httpx.Client`` to share its connection pool; it is
    then left open by ``close()``. Without one, the adapter creates and owns
    its own client. ``httpx.Client`` is thread-safe, so one adapter can be
    shared by concurrent callers.
    """

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Wrap *client*, or build one with the given default timeout."""
        self._owns_client = client is None
        self._client = client if client is not None else httpx.Client(timeout=timeout)

    def get(
        self,
        url: str,
        params: Mapping[str, str],
        timeout: Optional[float] = None,
    ) -> str:
        """Send the request and return the body text.

        Raises:
            TransportError: On timeouts, connection failures, any other
                ``httpx.HTTPError``, a malformed URL, or a non-2xx status.
        """
        kwargs: Dict[str, Any] = {"params": dict(params)}
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = self._client.get(url, **kwargs)
            response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportError(f"Request to {url} timed out", url) from exc
        except httpx.HTTPStatusError as exc:
            status_code = exc.response.status_code
            raise TransportError(
                f"Request to {url} failed with HTTP {status_code}",
                url,
                status_code=status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to reach {url}: {exc}", url) from exc
        except httpx.InvalidURL as exc:
            raise TransportError(f"Invalid request URL {url}: {exc}", url) from exc

        return response.text

    def close(self) -> None:
        """Close the underlying client if this adapter created it."""
        if self._owns_client:
            self._client.close()
