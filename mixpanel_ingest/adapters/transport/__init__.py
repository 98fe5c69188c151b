"""Transport adapters."""

from mixpanel_ingest.adapters.transport.fake import FakeTransport, SentRequest
from mixpanel_ingest.adapters.transport.httpx_transport import HttpxTransport

__all__ = ["FakeTransport", "HttpxTransport", "SentRequest"]
