"""Shared exceptions module."""

from typing import Optional


class MixpanelError(Exception):
    """Base exception for every failure raised by the client."""

    def __init__(self, message: str, url: Optional[str] = None):
        """Create a new MixpanelError instance.

        Args:
        ----
            message (str): The error message.
            url (str, optional): The request URL the failure relates to, if any.

        """
        self.message = message
        self.url = url
        super().__init__(self.message)


class SerializationError(MixpanelError):
    """Raised when a payload cannot be encoded as JSON.

    Always raised before any network call is attempted.
    """

    pass


class TransportError(MixpanelError):
    """Raised when the HTTP request itself fails.

    Covers connection and DNS failures, timeouts and non-2xx responses.
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        """Create a new TransportError instance.

        Args:
        ----
            message (str): The error message.
            url (str, optional): The request URL.
            status_code (int, optional): HTTP status, when a response was received.

        """
        self.status_code = status_code
        super().__init__(message, url)
