"""Wire encoder for event and profile-update payloads.

Turns payload models into the JSON objects the ingestion API expects and
serializes them to bytes. Client identity (token, distinct id) is injected
here; injected keys always win over caller properties of the same name.
"""

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping

from mixpanel_ingest.core.exceptions import SerializationError
from mixpanel_ingest.domains.ingestion.types import Event, Update

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def as_aware(moment: datetime) -> datetime:
    """Return *moment* as an aware datetime, reading naive values as local time."""
    if moment.tzinfo is None:
        return moment.astimezone()
    return moment


def unix_seconds(moment: datetime) -> int:
    """Whole seconds since the Unix epoch, floored.

    Raises:
        SerializationError: If a naive *moment* has no local-time equivalent,
            e.g. dates at the edge of the ``datetime`` range.
    """
    try:
        aware = as_aware(moment)
    except (ValueError, OverflowError) as e:
        raise SerializationError(f"Timestamp {moment!r} cannot be converted: {e}") from e
    return (aware - EPOCH) // timedelta(seconds=1)


def _merge(properties: Mapping[str, Any], injected: Mapping[str, Any]) -> Dict[str, Any]:
    shadowed = sorted(key for key in injected if key in properties)
    if shadowed:
        logger.warning("Caller properties %s replaced by injected values", shadowed)
    return {**properties, **injected}


def encode_event(
    event_name: str,
    event: Event,
    distinct_id: str,
    token: str,
) -> Dict[str, Any]:
    """Build the ``/track`` and ``/import`` payload.

    ``time`` is only present when the event carries an explicit timestamp.
    """
    injected: Dict[str, Any] = {"distinct_id": distinct_id, "token": token}
    if event.timestamp is not None:
        injected["time"] = unix_seconds(event.timestamp)

    return {
        "event": event_name,
        "properties": _merge(event.properties, injected),
    }


def encode_update(update: Update, distinct_id: str, token: str) -> Dict[str, Any]:
    """Build the ``/engage`` payload, keyed by the verbatim operation string."""
    return _merge(
        {update.operation: update.properties},
        {"$distinct_id": distinct_id, "$token": token},
    )


def serialize(payload: Mapping[str, Any]) -> bytes:
    """Serialize a payload to compact, key-sorted UTF-8 JSON.

    Raises:
        SerializationError: If a value is not representable in JSON,
            including NaN and infinite floats.
    """
    try:
        text = json.dumps(
            payload,
            separators=(",", ":"),
            sort_keys=True,
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Payload is not JSON serializable: {e}") from e
    return text.encode("utf-8")
