"""Interpretation of ingestion API responses.

The service answers ``1`` for success and anything else for failure, with
the same convention on every endpoint.
"""

from typing import Optional

from mixpanel_ingest.domains.ingestion.types import (
    CallKind,
    RemoteFailureError,
    TrackFailedError,
    UpdateFailedError,
)

SUCCESS_BODY = "1"


def is_success(body: str) -> bool:
    """Return True for ``1``, optionally followed by one line terminator."""
    return body.removesuffix("\n").removesuffix("\r") == SUCCESS_BODY


def failure_for(body: str, call_kind: CallKind, url: Optional[str] = None) -> RemoteFailureError:
    """Build the typed error for a rejected call."""
    if call_kind.family is CallKind.update:
        return UpdateFailedError(body, call_kind, url)
    return TrackFailedError(body, call_kind, url)


def check_response(body: str, call_kind: CallKind, url: Optional[str] = None) -> None:
    """Raise unless *body* is the success indicator.

    Raises:
        TrackFailedError: A track or import call was rejected.
        UpdateFailedError: An update call was rejected.
    """
    if not is_success(body):
        raise failure_for(body, call_kind, url)
