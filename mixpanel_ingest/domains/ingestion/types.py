"""Ingestion domain types.

Pure domain types with no infrastructure dependencies: the payload models
callers build, the call and endpoint enums the router works with, and the
errors raised when the service reports a failure.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, JsonValue, field_validator

from mixpanel_ingest.core.exceptions import MixpanelError

# ---------------------------------------------------------------------------
# Calls and endpoints
# ---------------------------------------------------------------------------


class CallKind(str, Enum):
    """Which public operation a request belongs to."""

    track = "track"
    """Live event; always sent to ``/track``."""

    import_ = "import"
    """Backfilled event; sent to ``/import`` once old enough."""

    update = "update"
    """Profile mutation; always sent to ``/engage``."""

    @property
    def family(self) -> "CallKind":
        """Collapse import into track: both report behavioural events."""
        if self is CallKind.update:
            return CallKind.update
        return CallKind.track


class Endpoint(str, Enum):
    """Request paths exposed by the ingestion API."""

    track = "/track"
    import_ = "/import"
    engage = "/engage"


class ProfileOperation(str, Enum):
    """Profile-mutation verbs understood by ``/engage``.

    ``Update.operation`` also accepts plain strings, so verbs missing here
    can still be sent.
    """

    set = "$set"
    set_once = "$set_once"
    add = "$add"
    append = "$append"
    union = "$union"
    remove = "$remove"
    unset = "$unset"
    delete = "$delete"


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------


class Event(BaseModel):
    """A behavioural event sent through ``track`` or ``import_event``.

    The event name is passed alongside, not stored here. A missing
    timestamp means "now" and is left for the service to fill in.
    """

    model_config = ConfigDict(frozen=True)

    properties: Dict[str, JsonValue] = Field(default_factory=dict)
    timestamp: Optional[datetime] = None


class Update(BaseModel):
    """A profile mutation sent through ``update``."""

    model_config = ConfigDict(frozen=True)

    operation: str
    properties: Dict[str, JsonValue] = Field(default_factory=dict)

    @field_validator("operation", mode="before")
    @classmethod
    def _operation_value(cls, value: Any) -> Any:
        # Store the verb itself so it is used verbatim as the JSON key.
        if isinstance(value, ProfileOperation):
            return value.value
        return value


# ---------------------------------------------------------------------------
# Remote failures
# ---------------------------------------------------------------------------


class RemoteFailureError(MixpanelError):
    """The request completed but the service did not answer with success.

    Carries the raw response body so callers never need to re-read it.
    """

    def __init__(self, body: str, call_kind: CallKind, url: Optional[str] = None) -> None:
        """Initialize with the raw body and the call that failed."""
        self.body = body
        self.call_kind = call_kind
        super().__init__(f"{call_kind.value} call rejected by Mixpanel: {body!r}", url)


class TrackFailedError(RemoteFailureError):
    """A ``track`` or ``import_event`` call was rejected."""

    pass


class UpdateFailedError(RemoteFailureError):
    """An ``update`` call was rejected."""

    pass
