"""Client library for the Mixpanel ingestion API."""

from mixpanel_ingest.client import Mixpanel
from mixpanel_ingest.core.config import Settings
from mixpanel_ingest.core.exceptions import MixpanelError, SerializationError, TransportError
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
    "Mixpanel",
    "MixpanelError",
    "ProfileOperation",
    "RemoteFailureError",
    "SerializationError",
    "Settings",
    "TrackFailedError",
    "TransportError",
    "Update",
    "UpdateFailedError",
]
