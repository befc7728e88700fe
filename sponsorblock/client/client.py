"""The SponsorBlock API client."""

import hashlib
import json
from collections.abc import Iterable
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from sponsorblock.core import http_session
from sponsorblock.core.config import ClientConfig
from sponsorblock.core.constants import (
    SEGMENT_INFO_ENDPOINT,
    SKIP_SEGMENTS_ENDPOINT,
    STATUS_ENDPOINT,
    USER_INFO_ENDPOINT,
    USER_STATS_ENDPOINT,
)
from sponsorblock.core.exceptions import DeserializationError, NoMatchingVideoHashError
from sponsorblock.core.flags import to_url_array
from sponsorblock.core.logging_config import get_logger
from sponsorblock.segment.action import AcceptedActions
from sponsorblock.segment.category import AcceptedCategories
from sponsorblock.segment.models import Segment
from sponsorblock.segment.normalizer import RawHashMatch, RawSegment, normalize_segment

from .schemas import ApiStatus, UserInfo, UserStats

logger = get_logger("client")

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

_RAW_SEGMENTS = TypeAdapter(list[RawSegment])
_RAW_HASH_MATCHES = TypeAdapter(list[RawHashMatch])


def _decode_json(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DeserializationError(f"response is not valid JSON: {e}") from e


def _decode_list(adapter: TypeAdapter[T], text: str) -> T:
    try:
        return adapter.validate_python(_decode_json(text))
    except ValidationError as e:
        raise DeserializationError(f"unexpected response shape: {e}") from e


def _decode_record(model: type[M], text: str) -> M:
    try:
        return model.model_validate(_decode_json(text))
    except ValidationError as e:
        raise DeserializationError(f"unexpected {model.__name__} shape: {e}") from e


def video_id_hash_prefix(video_id: str, length: int) -> str:
    """
    Hash a video ID the way the API expects for private searches.

    Args:
        video_id: Video ID to hash
        length: Number of leading hex characters to keep

    Returns:
        Lowercase hex prefix of the SHA-256 of the video ID
    """
    return hashlib.sha256(video_id.encode("utf-8")).hexdigest()[:length]


class SponsorBlockClient:
    """
    Async client for the SponsorBlock API.

    Configuration is fixed at construction, so one instance can be shared by
    concurrent tasks. Every operation makes exactly one HTTP request.

    Errors:
        Any operation can raise any ``SponsorBlockError``. ``ClientError`` with
        ``is_not_found`` set means nothing in the database matched the query;
        most callers will want to treat that as an empty result.

    Example:
        async with SponsorBlockClient(gen_user_id()) as client:
            segments = await client.fetch_segments("dQw4w9WgXcQ")
    """

    def __init__(
        self,
        config: ClientConfig | str,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            config: Full configuration, or just a local user ID to use the defaults
            http_client: Optional pre-built HTTP client. The caller keeps
                ownership of it; it is not closed by ``aclose``.
        """
        if isinstance(config, str):
            config = ClientConfig(user_id=config)
        self.config = config
        self._owns_http = http_client is None
        if http_client is None:
            http_client = http_session.create_http_client(config)
        self._http = http_client

    async def __aenter__(self) -> "SponsorBlockClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_http:
            await self._http.aclose()

    async def _get(self, endpoint: str, params: http_session.QueryParams | None = None) -> str:
        return await http_session.get(self._http, self.config.endpoint_url(endpoint), params)

    def _local_user_id(self, local_user_id: str | None) -> str:
        if local_user_id is not None:
            return local_user_id
        return self.config.user_id.get_secret_value()

    def _segment_params(
        self,
        categories: AcceptedCategories,
        actions: AcceptedActions,
        required_segments: Iterable[str],
    ) -> dict[str, str]:
        params = {
            "categories": categories.gen_url_value(),
            "actionTypes": actions.gen_url_value(),
            "service": self.config.service,
        }
        required = list(required_segments)
        if required:
            params["requiredSegments"] = to_url_array(required)
        return params

    # =========================================================================
    # Segments
    # =========================================================================

    async def fetch_segments(
        self,
        video_id: str,
        categories: AcceptedCategories = AcceptedCategories.ALL,
        actions: AcceptedActions = AcceptedActions.ALL,
        required_segments: Iterable[str] = (),
    ) -> list[Segment]:
        """
        Fetch the segments for a video.

        Args:
            video_id: Video to fetch segments for
            categories: Categories to include
            actions: Action types to include
            required_segments: Segment UUIDs to return even if they are below
                the vote threshold

        Returns:
            Segments for the video

        Raises:
            ClientError: 404 if the video has no matching segments
        """
        params = {
            "videoID": video_id,
            **self._segment_params(categories, actions, required_segments),
        }
        text = await self._get(SKIP_SEGMENTS_ENDPOINT, params)

        segments = [normalize_segment(raw) for raw in _decode_list(_RAW_SEGMENTS, text)]
        logger.debug("Fetched %d segments for %s", len(segments), video_id)
        return segments

    async def fetch_segments_private(
        self,
        video_id: str,
        categories: AcceptedCategories = AcceptedCategories.ALL,
        actions: AcceptedActions = AcceptedActions.ALL,
        required_segments: Iterable[str] = (),
    ) -> list[Segment]:
        """
        Fetch the segments for a video without revealing the video ID.

        Only a prefix of the video ID's SHA-256 hash is sent
        (``config.hash_prefix_length`` characters). The API answers with every
        video sharing that prefix, and the requested one is picked out locally.

        Args:
            video_id: Video to fetch segments for
            categories: Categories to include
            actions: Action types to include
            required_segments: Segment UUIDs to return even if they are below
                the vote threshold

        Returns:
            Segments for the video

        Raises:
            ClientError: 404 if no video with the hash prefix has segments
            NoMatchingVideoHashError: If candidates came back but none is the
                requested video
        """
        prefix = video_id_hash_prefix(video_id, self.config.hash_prefix_length)
        params = self._segment_params(categories, actions, required_segments)
        text = await self._get(f"{SKIP_SEGMENTS_ENDPOINT}/{prefix}", params)

        candidates = _decode_list(_RAW_HASH_MATCHES, text)
        match = next((c for c in candidates if c.video_id == video_id), None)
        if match is None:
            logger.debug(
                "None of %d candidates for hash prefix %s matched", len(candidates), prefix
            )
            raise NoMatchingVideoHashError(video_id)

        segments = [normalize_segment(raw) for raw in match.segments]
        logger.debug("Fetched %d segments for %s (private)", len(segments), video_id)
        return segments

    async def fetch_segment_info(self, uuids: Iterable[str]) -> list[Segment]:
        """
        Fetch full information for specific segments.

        Unlike ``fetch_segments``, the returned segments carry
        ``additional_info``.

        Args:
            uuids: Segment UUIDs to look up

        Returns:
            Segments in the order the API returned them
        """
        text = await self._get(SEGMENT_INFO_ENDPOINT, {"UUIDs": to_url_array(uuids)})
        return [
            normalize_segment(raw, include_additional_info=True)
            for raw in _decode_list(_RAW_SEGMENTS, text)
        ]

    # =========================================================================
    # Users
    # =========================================================================

    async def fetch_user_info_public(self, public_user_id: str) -> UserInfo:
        """Fetch a user's info by their public user ID."""
        text = await self._get(USER_INFO_ENDPOINT, {"publicUserID": public_user_id})
        return _decode_record(UserInfo, text)

    async def fetch_user_info_local(self, local_user_id: str | None = None) -> UserInfo:
        """
        Fetch a user's info by their local (private) user ID.

        Args:
            local_user_id: Local user ID, defaults to this client's own
        """
        text = await self._get(USER_INFO_ENDPOINT, {"userID": self._local_user_id(local_user_id)})
        return _decode_record(UserInfo, text)

    async def fetch_user_stats_public(self, public_user_id: str) -> UserStats:
        """Fetch a user's stats, with per-category and per-action breakdowns."""
        params = {
            "publicUserID": public_user_id,
            "fetchCategoryStats": True,
            "fetchActionTypeStats": True,
        }
        return _decode_record(UserStats, await self._get(USER_STATS_ENDPOINT, params))

    async def fetch_user_stats_local(self, local_user_id: str | None = None) -> UserStats:
        """
        Fetch a user's stats by their local (private) user ID.

        Args:
            local_user_id: Local user ID, defaults to this client's own
        """
        params = {
            "userID": self._local_user_id(local_user_id),
            "fetchCategoryStats": True,
            "fetchActionTypeStats": True,
        }
        return _decode_record(UserStats, await self._get(USER_STATS_ENDPOINT, params))

    # =========================================================================
    # Status
    # =========================================================================

    async def fetch_api_status(self) -> ApiStatus:
        """Fetch the API server's status."""
        return _decode_record(ApiStatus, await self._get(STATUS_ENDPOINT))
