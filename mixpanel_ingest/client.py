"""Mixpanel ingestion client.

Three operations, each a single synchronous GET whose outcome is reported
immediately: ``track`` a live event, ``import_event`` a historical one, and
``update`` a user profile. Success returns ``None``; every failure raises a
``MixpanelError`` subclass.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from mixpanel_ingest.adapters.transport.httpx_transport import DEFAULT_TIMEOUT, HttpxTransport
from mixpanel_ingest.core.config import Settings
from mixpanel_ingest.core.protocols.transport import Transport
from mixpanel_ingest.domains.ingestion.dispatch import build_url, dispatch
from mixpanel_ingest.domains.ingestion.encoder import encode_event, encode_update, serialize
from mixpanel_ingest.domains.ingestion.response import check_response
from mixpanel_ingest.domains.ingestion.router import route
from mixpanel_ingest.domains.ingestion.types import CallKind, Event, Update

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Mixpanel:
    """Client bound to one project token and one API base URL.

    Holds no mutable state after construction, so an instance can be shared
    by concurrent callers as long as its transport can.

    Example:
        with Mixpanel("e3bc4100330c35722740fb8c6f5abddc", "https://api.mixpanel.com") as mp:
            mp.track("13793", "Signed Up", Event(properties={"Referred By": "Friend"}))
            mp.update("13793", Update(operation=ProfileOperation.set, properties={"Plan": "Pro"}))
    """

    def __init__(
        self,
        token: str,
        base_url: str,
        transport: Optional[Transport] = None,
        clock: Optional[Clock] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the client.

        Args:
            token: Project token, injected into every payload.
            base_url: API base URL; endpoint paths are appended verbatim.
            transport: Transport to send requests through. When omitted the
                client creates an ``HttpxTransport`` and closes it in ``close()``.
            clock: Returns the current time; used to route import calls.
            timeout: Default request timeout in seconds for the transport the
                client creates. Ignored when ``transport`` is given.
        """
        self._token = token
        self._base_url = base_url
        self._owned_transport: Optional[HttpxTransport] = None
        if transport is None:
            logger.info("No transport supplied, creating httpx transport for %s", base_url)
            transport = self._owned_transport = HttpxTransport(timeout=timeout)
        self._transport = transport
        self._clock = clock or _utc_now

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: Optional[Transport] = None,
    ) -> "Mixpanel":
        """Build a client from application settings."""
        return cls(
            settings.MIXPANEL_TOKEN,
            settings.MIXPANEL_API_URL,
            transport=transport,
            timeout=settings.MIXPANEL_TIMEOUT,
        )

    @property
    def token(self) -> str:
        """Project token."""
        return self._token

    @property
    def base_url(self) -> str:
        """API base URL."""
        return self._base_url

    # ------------------------------------------------------------------
    # Public operations
    # ------------------------------------------------------------------

    def track(
        self,
        distinct_id: str,
        event_name: str,
        event: Optional[Event] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        """Record a live event. Always sent to ``/track``.

        Raises:
            SerializationError: The event cannot be encoded as JSON.
            TransportError: The request failed.
            TrackFailedError: The service rejected the event.
        """
        self._send_event(CallKind.track, distinct_id, event_name, event, timeout)

    def import_event(
        self,
        distinct_id: str,
        event_name: str,
        event: Optional[Event] = None,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        """Backfill a historical event.

        Sent to ``/import`` when the event timestamp is more than five days
        before now, otherwise to ``/track``.

        Raises:
            SerializationError: The event cannot be encoded as JSON.
            TransportError: The request failed.
            TrackFailedError: The service rejected the event.
        """
        self._send_event(CallKind.import_, distinct_id, event_name, event, timeout)

    def update(
        self,
        distinct_id: str,
        update: Update,
        *,
        timeout: Optional[float] = None,
    ) -> None:
        """Apply a profile mutation. Always sent to ``/engage``.

        Raises:
            SerializationError: The update cannot be encoded as JSON.
            TransportError: The request failed.
            UpdateFailedError: The service rejected the update.
        """
        payload = encode_update(update, distinct_id, self._token)
        self._send(CallKind.update, payload, None, timeout)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Release the transport if the client created it."""
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> "Mixpanel":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _send_event(
        self,
        call_kind: CallKind,
        distinct_id: str,
        event_name: str,
        event: Optional[Event],
        timeout: Optional[float],
    ) -> None:
        event = event or Event()
        payload = encode_event(event_name, event, distinct_id, self._token)
        self._send(call_kind, payload, event.timestamp, timeout)

    def _send(
        self,
        call_kind: CallKind,
        payload: Dict[str, Any],
        timestamp: Optional[datetime],
        timeout: Optional[float],
    ) -> None:
        data = serialize(payload)
        endpoint = route(call_kind, timestamp, self._clock())
        url = build_url(self._base_url, endpoint)
        logger.debug("Routing %s call to %s", call_kind.value, endpoint.value)

        body = dispatch(self._transport, url, data, timeout=timeout)
        check_response(body, call_kind, url)
