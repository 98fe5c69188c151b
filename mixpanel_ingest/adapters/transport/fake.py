"""Fake transport for testing.

Records requests for assertions without touching the network.
"""

import base64
import json
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlsplit

from mixpanel_ingest.domains.ingestion.dispatch import DATA_PARAM


@dataclass
class SentRequest:
    """Single recorded transport call."""

    url: str
    params: Dict[str, str]
    timeout: Optional[float]

    @property
    def path(self) -> str:
        """Path component of the request URL."""
        return urlsplit(self.url).path

    @property
    def raw_data(self) -> str:
        """The ``data`` parameter, base64-decoded to the JSON text."""
        return base64.b64decode(self.params[DATA_PARAM]).decode("utf-8")

    @property
    def payload(self) -> Dict[str, Any]:
        """The ``data`` parameter, decoded to a dict."""
        return json.loads(self.raw_data)


class FakeTransport:
    """In-memory test double for the Transport protocol.

    Returns ``body`` for every request, or raises ``error`` when set.

    Usage:
        transport = FakeTransport()
        client = Mixpanel("token", "https://api.example.com", transport=transport)
        client.track("13793", "Signed Up")
        assert transport.last.path == "/track"
    """

    def __init__(self, body: str = "1\n", error: Optional[Exception] = None) -> None:
        """Initialize with the scripted response."""
        self.body = body
        self.error = error
        self.requests: list[SentRequest] = []

    def get(
        self,
        url: str,
        params: Mapping[str, str],
        timeout: Optional[float] = None,
    ) -> str:
        """Record the request and return the scripted body."""
        self.requests.append(SentRequest(url=url, params=dict(params), timeout=timeout))
        if self.error is not None:
            raise self.error
        return self.body

    # Test helpers

    @property
    def last(self) -> SentRequest:
        """Most recent request, or raise AssertionError if none was sent."""
        if not self.requests:
            raise AssertionError("No request was sent through the fake transport.")
        return self.requests[-1]

    def clear(self) -> None:
        """Reset recorded requests."""
        self.requests.clear()
