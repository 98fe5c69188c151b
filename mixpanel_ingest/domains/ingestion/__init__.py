"""Ingestion domain - payload encoding, routing and response handling."""

from mixpanel_ingest.domains.ingestion.encoder import encode_event, encode_update, serialize
from mixpanel_ingest.domains.ingestion.response import check_response
from mixpanel_ingest.domains.ingestion.router import IMPORT_THRESHOLD, route
from mixpanel_ingest.domains.ingestion.types import (
    CallKind,
    Endpoint,
    Event,
    ProfileOperation,
    RemoteFailureError,
    TrackFailedError,
    Update,
    UpdateFailedError,
)

__all__ = [
    "CallKind",
    "Endpoint",
    "Event",
    "IMPORT_THRESHOLD",
    "ProfileOperation",
    "RemoteFailureError",
    "TrackFailedError",
    "Update",
    "UpdateFailedError",
    "check_response",
    "encode_event",
    "encode_update",
    "route",
    "serialize",
]
