"""Pytest fixtures and configuration.

This module provides:
- Sample wire records as the API sends them
- A client factory backed by httpx.MockTransport
- Request recording for asserting on outgoing queries
"""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from sponsorblock import ClientConfig, SponsorBlockClient

# =============================================================================
# Test Configuration
# =============================================================================

TEST_USER_ID = "aB3dE5gH7jK9mN1pQ3sT5vX7zA9cE1gI3kM5"
TEST_VIDEO_ID = "dQw4w9WgXcQ"

Handler = Callable[[httpx.Request], httpx.Response]


def json_handler(payload: Any, status_code: int = 200) -> Handler:
    """Build a transport handler that always answers with ``payload``."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=json.dumps(payload))

    return handler


def text_handler(text: str, status_code: int = 200) -> Handler:
    """Build a transport handler that always answers with a raw body."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=text)

    return handler


# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    """Requests sent through clients built by ``make_client``."""
    return []


@pytest.fixture
def make_client(requests_seen: list[httpx.Request]) -> Callable[..., SponsorBlockClient]:
    """Create clients whose HTTP traffic is answered by a local handler.

    Args:
        requests_seen: Collects every request sent

    Returns:
        Factory taking a handler and optional ClientConfig overrides
    """

    def _make(handler: Handler, **config: Any) -> SponsorBlockClient:
        def record(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(record))
        return SponsorBlockClient(ClientConfig(user_id=TEST_USER_ID, **config), http_client=http)

    return _make


# =============================================================================
# Sample Data Fixtures
# =============================================================================


@pytest.fixture
def skip_segment_record() -> dict[str, Any]:
    """A /skipSegments record."""
    return {
        "category": "sponsor",
        "actionType": "skip",
        "segment": [5.0, 10.0],
        "UUID": "a1b2c3d4e5f6",
        "videoDuration": 212.1,
        "locked": 1,
        "votes": -2,
        "description": "",
    }


@pytest.fixture
def highlight_record() -> dict[str, Any]:
    """A /skipSegments highlight record as older API versions reported it."""
    return {
        "category": "poi_highlight",
        "actionType": "skip",
        "segment": [30.5, 30.5],
        "UUID": "f6e5d4c3b2a1",
        "videoDuration": 0,
        "locked": 0,
        "votes": 7,
    }


@pytest.fixture
def segment_info_record() -> dict[str, Any]:
    """A /segmentInfo record."""
    return {
        "videoID": TEST_VIDEO_ID,
        "startTime": 10.5,
        "endTime": 20.0,
        "votes": 3,
        "locked": 0,
        "UUID": "0123456789abcdef",
        "userID": "public-submitter",
        "timeSubmitted": 1640995200000,
        "views": 42,
        "category": "selfpromo",
        "service": "YouTube",
        "actionType": "mute",
        "videoDuration": 120.5,
        "hidden": 0,
        "reputation": 1.5,
        "shadowHidden": 1,
        "hashedVideoID": "4a9b",
        "userAgent": "Chromium/5.0.0",
        "description": "",
    }


@pytest.fixture
def user_info_record() -> dict[str, Any]:
    """A /userInfo record for a user with a custom name."""
    return {
        "userID": "abc123",
        "userName": "CoolUser",
        "minutesSaved": 512.25,
        "segmentCount": 40,
        "ignoredSegmentCount": 2,
        "viewCount": 9000,
        "ignoredViewCount": 12,
        "warnings": 0,
        "warningReason": "",
        "reputation": 2.7,
        "vip": False,
        "lastSegmentID": "a1b2c3d4e5f6",
    }


@pytest.fixture
def user_stats_record() -> dict[str, Any]:
    """A /userStats record with category and action breakdowns."""
    return {
        "userID": "abc123",
        "userName": "abc123",
        "overallStats": {"minutesSaved": 512.25, "segmentCount": 40},
        "categoryCount": {
            "sponsor": 30,
            "selfpromo": 5,
            "poi_highlight": 3,
            "brand_new_category": 2,
        },
        "actionTypeCount": {"skip": 33, "mute": 2, "poi": 3, "chapter": 1},
    }


@pytest.fixture
def status_record() -> dict[str, Any]:
    """A /status record."""
    return {
        "uptime": 3600.5,
        "commit": "06af78c770b82722be8b03d2b1b82eb7409f675b",
        "db": 40,
        "startTime": 1640995200000,
        "processTime": 12,
        "loadavg": [0.5, 0.75],
    }
