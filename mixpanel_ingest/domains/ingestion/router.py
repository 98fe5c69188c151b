"""Endpoint routing for ingestion calls.

Updates go to ``/engage``. Events go to ``/track``, except import calls
whose effective timestamp is more than five days old, which go to
``/import``. Exactly five days old is not yet import-eligible.
"""

from datetime import datetime, timedelta
from typing import Optional

from mixpanel_ingest.domains.ingestion.encoder import as_aware
from mixpanel_ingest.domains.ingestion.types import CallKind, Endpoint

IMPORT_THRESHOLD = timedelta(days=5)


def route(call_kind: CallKind, timestamp: Optional[datetime], now: datetime) -> Endpoint:
    """Pick the endpoint for a call.

    Args:
        call_kind: The public operation being performed.
        timestamp: The event's explicit timestamp, if any. ``None`` means now.
        now: Current time at call time.

    Returns:
        The endpoint the request must be sent to.
    """
    if call_kind is CallKind.update:
        return Endpoint.engage
    if call_kind is CallKind.track or timestamp is None:
        return Endpoint.track

    if as_aware(timestamp) < as_aware(now) - IMPORT_THRESHOLD:
        return Endpoint.import_
    return Endpoint.track
