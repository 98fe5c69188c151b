"""Transport invocation for encoded payloads.

The serialized JSON travels base64-encoded in a single ``data`` query
parameter of a GET request to ``base_url + path``.
"""

import base64
import logging
from typing import Dict, Optional

from mixpanel_ingest.core.protocols.transport import Transport
from mixpanel_ingest.domains.ingestion.types import Endpoint

logger = logging.getLogger(__name__)

DATA_PARAM = "data"


def build_url(base_url: str, endpoint: Endpoint) -> str:
    """Concatenate base URL and endpoint path without normalisation."""
    return f"{base_url}{endpoint.value}"


def build_params(data: bytes) -> Dict[str, str]:
    """Standard base64 (padded) of the serialized payload, as query params."""
    return {DATA_PARAM: base64.b64encode(data).decode("ascii")}


def dispatch(
    transport: Transport,
    url: str,
    data: bytes,
    timeout: Optional[float] = None,
) -> str:
    """Send the payload and return the raw response body.

    Transport failures propagate unchanged as ``TransportError``.
    """
    logger.debug("Sending %d byte payload to %s", len(data), url)
    return transport.get(url, build_params(data), timeout=timeout)
