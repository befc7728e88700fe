"""Tests for the endpoint client.

These tests verify:
- Query construction for each endpoint
- Response decoding and normalization
- Hash-prefix candidate matching
- Error propagation
"""

import hashlib
from datetime import datetime, timedelta, timezone

import pytest
from conftest import TEST_USER_ID, TEST_VIDEO_ID, json_handler, text_handler

from sponsorblock import (
    AcceptedActions,
    AcceptedCategories,
    ActionKind,
    Category,
    ClientError,
    DeserializationError,
    MalformedDataError,
    NoMatchingVideoHashError,
    ServerError,
    SponsorBlockClient,
)
from sponsorblock.client import video_id_hash_prefix


class TestFetchSegments:
    """Test GET /skipSegments."""

    @pytest.mark.asyncio
    async def test_segments_returned(
        self, make_client, requests_seen, skip_segment_record, highlight_record
    ):
        """Records are normalized and the query carries every parameter."""
        client = make_client(json_handler([skip_segment_record, highlight_record]))

        segments = await client.fetch_segments(TEST_VIDEO_ID)

        assert [s.category for s in segments] == [Category.SPONSOR, Category.HIGHLIGHT]
        assert segments[1].action is ActionKind.POINT_OF_INTEREST
        assert all(s.additional_info is None for s in segments)

        request = requests_seen[0]
        assert request.method == "GET"
        assert request.url.path == "/api/skipSegments"
        assert request.url.params["videoID"] == TEST_VIDEO_ID
        assert request.url.params["categories"] == AcceptedCategories.ALL.gen_url_value()
        assert request.url.params["actionTypes"] == '["skip","mute","poi","full"]'
        assert request.url.params["service"] == "YouTube"
        assert "requiredSegments" not in request.url.params

    @pytest.mark.asyncio
    async def test_filters_and_required_segments(self, make_client, requests_seen):
        """Flag sets and required UUIDs are encoded as JSON-style arrays."""
        client = make_client(json_handler([]), service="PeerTube")

        await client.fetch_segments(
            TEST_VIDEO_ID,
            categories=AcceptedCategories.SPONSOR | AcceptedCategories.HIGHLIGHT,
            actions=AcceptedActions.SKIP,
            required_segments=["uuid-a", "uuid-b"],
        )

        params = requests_seen[0].url.params
        assert params["categories"] == '["sponsor","poi_highlight"]'
        assert params["actionTypes"] == '["skip"]'
        assert params["requiredSegments"] == '["uuid-a","uuid-b"]'
        assert params["service"] == "PeerTube"

    @pytest.mark.asyncio
    async def test_not_found_is_surfaced(self, make_client):
        """A video without segments raises ClientError(404)."""
        client = make_client(text_handler("Not Found", status_code=404))

        with pytest.raises(ClientError) as exc_info:
            await client.fetch_segments(TEST_VIDEO_ID)

        assert exc_info.value.is_not_found

    @pytest.mark.asyncio
    async def test_server_error(self, make_client):
        """5xx responses raise ServerError."""
        client = make_client(text_handler("oops", status_code=500))

        with pytest.raises(ServerError) as exc_info:
            await client.fetch_segments(TEST_VIDEO_ID)

        assert exc_info.value.status == 500

    @pytest.mark.asyncio
    async def test_invalid_json(self, make_client):
        """A body that isn't JSON raises DeserializationError."""
        client = make_client(text_handler("<html>"))

        with pytest.raises(DeserializationError):
            await client.fetch_segments(TEST_VIDEO_ID)

    @pytest.mark.asyncio
    async def test_wrong_shape(self, make_client):
        """JSON of the wrong shape raises DeserializationError."""
        client = make_client(json_handler({"segments": []}))

        with pytest.raises(DeserializationError):
            await client.fetch_segments(TEST_VIDEO_ID)

    @pytest.mark.asyncio
    async def test_bad_segment_fails_call(self, make_client, skip_segment_record):
        """One malformed record fails the whole call."""
        bad = {**skip_segment_record, "segment": [10, 5]}
        client = make_client(json_handler([skip_segment_record, bad]))

        with pytest.raises(MalformedDataError):
            await client.fetch_segments(TEST_VIDEO_ID)


class TestFetchSegmentsPrivate:
    """Test GET /skipSegments/{hashPrefix}."""

    def test_hash_prefix(self):
        """The prefix is the leading hex of the SHA-256 of the video ID."""
        full = hashlib.sha256(b"Y").hexdigest()

        assert video_id_hash_prefix("Y", 4) == full[:4]
        assert video_id_hash_prefix("Y", 32) == full[:32]

    @pytest.mark.asyncio
    async def test_matching_candidate(self, make_client, requests_seen, skip_segment_record):
        """The candidate whose video ID matches is returned."""
        other = {**skip_segment_record, "UUID": "other-uuid"}
        candidates = [
            {"videoID": "X", "hash": "ab12", "segments": [other]},
            {"videoID": "Y", "hash": "ab12", "segments": [skip_segment_record]},
        ]
        client = make_client(json_handler(candidates))

        segments = await client.fetch_segments_private("Y")

        assert [s.uuid for s in segments] == ["a1b2c3d4e5f6"]
        request = requests_seen[0]
        assert request.url.path == f"/api/skipSegments/{video_id_hash_prefix('Y', 4)}"
        assert "videoID" not in request.url.params
        assert request.url.params["categories"] == AcceptedCategories.ALL.gen_url_value()

    @pytest.mark.asyncio
    async def test_no_matching_candidate(self, make_client, skip_segment_record):
        """Candidates that all belong to other videos raise NoMatchingVideoHashError."""
        candidates = [
            {"videoID": "X", "hash": "ab12", "segments": [skip_segment_record]},
            {"videoID": "Y", "hash": "ab12", "segments": []},
        ]
        client = make_client(json_handler(candidates))

        with pytest.raises(NoMatchingVideoHashError) as exc_info:
            await client.fetch_segments_private("Z")

        assert exc_info.value.video_id == "Z"

    @pytest.mark.asyncio
    async def test_configured_prefix_length(self, make_client, requests_seen):
        """The configured prefix length is used."""
        candidates = [{"videoID": "Y", "segments": []}]
        client = make_client(json_handler(candidates), hash_prefix_length=8)

        assert await client.fetch_segments_private("Y") == []
        assert requests_seen[0].url.path.endswith("/" + video_id_hash_prefix("Y", 8))


class TestFetchSegmentInfo:
    """Test GET /segmentInfo."""

    @pytest.mark.asyncio
    async def test_additional_info_included(self, make_client, requests_seen, segment_info_record):
        """Segment info always carries the additional fields."""
        client = make_client(json_handler([segment_info_record]))

        segments = await client.fetch_segment_info(["0123456789abcdef"])

        assert len(segments) == 1
        info = segments[0].additional_info
        assert info is not None
        assert info.video_id == TEST_VIDEO_ID
        assert info.time_submitted == datetime(2022, 1, 1, tzinfo=timezone.utc)
        assert segments[0].video_duration_on_submission == 120.5
        assert requests_seen[0].url.path == "/api/segmentInfo"
        assert requests_seen[0].url.params["UUIDs"] == '["0123456789abcdef"]'


class TestFetchUserInfo:
    """Test GET /userInfo."""

    @pytest.mark.asyncio
    async def test_public(self, make_client, requests_seen, user_info_record):
        """A custom user name is kept."""
        client = make_client(json_handler(user_info_record))

        info = await client.fetch_user_info_public("abc123")

        assert info.public_user_id == "abc123"
        assert info.user_name == "CoolUser"
        assert info.minutes_saved == 512.25
        assert info.total_segment_count() == 42
        assert info.total_view_count() == 9012
        assert info.vip is False
        assert info.last_segment_id == "a1b2c3d4e5f6"
        assert requests_seen[0].url.params["publicUserID"] == "abc123"

    @pytest.mark.asyncio
    async def test_default_name_unset(self, make_client, user_info_record):
        """A user name equal to the user ID means no name was chosen."""
        client = make_client(json_handler({**user_info_record, "userName": "abc123"}))

        info = await client.fetch_user_info_public("abc123")

        assert info.user_name is None

    @pytest.mark.asyncio
    async def test_local_uses_own_id(self, make_client, requests_seen, user_info_record):
        """Without an argument the client's own local user ID is sent."""
        client = make_client(json_handler(user_info_record))

        await client.fetch_user_info_local()

        assert requests_seen[0].url.params["userID"] == TEST_USER_ID
        assert "publicUserID" not in requests_seen[0].url.params

    @pytest.mark.asyncio
    async def test_local_explicit_id(self, make_client, requests_seen, user_info_record):
        """An explicit local user ID overrides the client's own."""
        client = make_client(json_handler(user_info_record))

        await client.fetch_user_info_local("someone-else")

        assert requests_seen[0].url.params["userID"] == "someone-else"


class TestFetchUserStats:
    """Test GET /userStats."""

    @pytest.mark.asyncio
    async def test_breakdowns(self, make_client, requests_seen, user_stats_record):
        """Unknown keys are dropped and the rest of the stats survive."""
        client = make_client(json_handler(user_stats_record))

        stats = await client.fetch_user_stats_public("abc123")

        assert stats.user_name is None
        assert stats.overall_stats.segment_count == 40
        assert stats.category_count == {
            Category.SPONSOR: 30,
            Category.UNPAID_SELF_PROMOTION: 5,
            Category.HIGHLIGHT: 3,
        }
        assert stats.action_type_count == {
            ActionKind.SKIP: 33,
            ActionKind.MUTE: 2,
            ActionKind.POINT_OF_INTEREST: 3,
        }

        params = requests_seen[0].url.params
        assert params["publicUserID"] == "abc123"
        assert params["fetchCategoryStats"] == "true"
        assert params["fetchActionTypeStats"] == "true"

    @pytest.mark.asyncio
    async def test_local(self, make_client, requests_seen, user_stats_record):
        """Local lookups send userID."""
        client = make_client(json_handler({**user_stats_record, "userName": "Named"}))

        stats = await client.fetch_user_stats_local()

        assert stats.user_name == "Named"
        assert requests_seen[0].url.params["userID"] == TEST_USER_ID


class TestFetchApiStatus:
    """Test GET /status."""

    @pytest.mark.asyncio
    async def test_status(self, make_client, requests_seen, status_record):
        """Wire units are converted to timedelta and datetime."""
        client = make_client(json_handler(status_record))

        status = await client.fetch_api_status()

        assert status.uptime == timedelta(seconds=3600.5)
        assert status.commit == status_record["commit"]
        assert status.db_version == 40
        assert status.request_start_time == datetime(2022, 1, 1, tzinfo=timezone.utc)
        assert status.request_time_taken == timedelta(milliseconds=12)
        assert status.load_average == (0.5, 0.75)
        assert requests_seen[0].url.path == "/api/status"

    @pytest.mark.asyncio
    async def test_missing_fields_default(self, make_client):
        """Missing and null fields fall back to zero values."""
        client = make_client(json_handler({"commit": "abc", "db": None}))

        status = await client.fetch_api_status()

        assert status.commit == "abc"
        assert status.db_version == 0
        assert status.uptime == timedelta(0)


class TestClientLifecycle:
    """Test construction and ownership of the HTTP client."""

    @pytest.mark.asyncio
    async def test_user_id_shortcut(self):
        """A bare user ID builds a default configuration."""
        async with SponsorBlockClient("my-local-id") as client:
            assert client.config.user_id.get_secret_value() == "my-local-id"
            assert client.config.base_url == "https://sponsor.ajay.app/api"

    @pytest.mark.asyncio
    async def test_borrowed_http_client_left_open(self, make_client):
        """A caller-supplied HTTP client is not closed by the library."""
        client = make_client(json_handler([]))

        await client.aclose()

        assert not client._http.is_closed

    @pytest.mark.asyncio
    async def test_testing_base_url(self, make_client, requests_seen):
        """Requests go to the configured base URL."""
        client = make_client(
            json_handler({"commit": "x"}),
            base_url="https://sponsor.ajay.app/test/api/",
        )

        await client.fetch_api_status()

        assert str(requests_seen[0].url) == "https://sponsor.ajay.app/test/api/status"
