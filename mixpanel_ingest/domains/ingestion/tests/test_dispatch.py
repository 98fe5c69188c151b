"""Tests for transport invocation."""

import base64

import pytest

from mixpanel_ingest.adapters.transport.fake import FakeTransport
from mixpanel_ingest.core.exceptions import TransportError
from mixpanel_ingest.domains.ingestion.dispatch import build_params, build_url, dispatch
from mixpanel_ingest.domains.ingestion.types import Endpoint


def test_build_url_concatenates_verbatim():
    assert build_url("https://api.example.com", Endpoint.engage) == "https://api.example.com/engage"
    assert build_url("http://localhost:8080/mp", Endpoint.import_) == "http://localhost:8080/mp/import"


def test_build_params_uses_standard_padded_base64():
    # b"\xfb\xff" encodes to "+/8=" in the standard alphabet
    assert build_params(b"\xfb\xff") == {"data": "+/8="}


def test_dispatch_returns_body_and_forwards_timeout():
    transport = FakeTransport(body="1\n")
    body = dispatch(transport, "https://api.example.com/track", b'{"a":1}', timeout=2.5)

    assert body == "1\n"
    assert transport.last.timeout == 2.5
    assert base64.b64decode(transport.last.params["data"]) == b'{"a":1}'


def test_dispatch_propagates_transport_error():
    transport = FakeTransport(error=TransportError("boom", "https://api.example.com/track"))
    with pytest.raises(TransportError):
        dispatch(transport, "https://api.example.com/track", b"{}")
