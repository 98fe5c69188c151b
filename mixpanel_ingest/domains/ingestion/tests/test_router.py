"""Tests for endpoint routing."""

from dataclasses import dataclass
from datetime import timedelta, timezone
from typing import Optional

import pytest

from mixpanel_ingest.domains.ingestion.router import IMPORT_THRESHOLD, route
from mixpanel_ingest.domains.ingestion.types import CallKind, Endpoint


@dataclass
class RouteCase:
    id: str
    call_kind: CallKind
    age: Optional[timedelta]  # before now; None means no timestamp
    expected: Endpoint


ROUTE_CASES = [
    RouteCase("update", CallKind.update, None, Endpoint.engage),
    RouteCase("track_no_timestamp", CallKind.track, None, Endpoint.track),
    RouteCase("track_recent", CallKind.track, timedelta(days=1), Endpoint.track),
    RouteCase("track_ancient", CallKind.track, timedelta(days=400), Endpoint.track),
    RouteCase("import_no_timestamp", CallKind.import_, None, Endpoint.track),
    RouteCase("import_four_days", CallKind.import_, timedelta(days=4), Endpoint.track),
    RouteCase("import_exactly_five_days", CallKind.import_, IMPORT_THRESHOLD, Endpoint.track),
    RouteCase(
        "import_just_over_five_days",
        CallKind.import_,
        IMPORT_THRESHOLD + timedelta(microseconds=1),
        Endpoint.import_,
    ),
    RouteCase("import_six_days", CallKind.import_, timedelta(days=6), Endpoint.import_),
    RouteCase("import_future", CallKind.import_, -timedelta(days=1), Endpoint.track),
]


@pytest.mark.parametrize("case", ROUTE_CASES, ids=[c.id for c in ROUTE_CASES])
def test_route(case: RouteCase, now):
    timestamp = None if case.age is None else now - case.age
    assert route(case.call_kind, timestamp, now) is case.expected


def test_update_ignores_timestamp(now):
    assert route(CallKind.update, now - timedelta(days=30), now) is Endpoint.engage


def test_mixed_timezones_compare_by_instant(now):
    tokyo = timezone(timedelta(hours=9))
    six_days_ago = (now - timedelta(days=6)).astimezone(tokyo)
    assert route(CallKind.import_, six_days_ago, now) is Endpoint.import_
