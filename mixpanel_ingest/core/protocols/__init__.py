"""Core protocols for dependency injection."""

from mixpanel_ingest.core.protocols.transport import Transport

__all__ = [
    "Transport",
]
