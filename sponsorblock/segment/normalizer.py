"""
Response normalization for segment records.

Turns the loosely typed, version-drifting wire records returned by the API
into validated, immutable ``Segment`` values. Two encodings of a segment's
bounds exist across endpoints: a ``segment: [start, end]`` array
(``/skipSegments``) and separate ``startTime``/``endTime`` fields
(``/segmentInfo``). Both are accepted and treated the same.
"""

import logging
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sponsorblock.core.exceptions import (
    DeserializationError,
    MalformedDataError,
    UnrecognizedValueError,
)
from sponsorblock.segment.action import ActionKind, action_kind_from_str
from sponsorblock.segment.category import Category, category_from_str
from sponsorblock.segment.models import AdditionalSegmentInfo, Segment, TimePoint, TimeSection

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# Older submissions were stored without a video duration, reported as 0.
VIDEO_DURATION_SENTINEL = 0.0


class RawSegment(BaseModel):
    """A segment record exactly as the API sends it."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    category: str
    action_type: str = Field("skip", alias="actionType")
    segment: tuple[float, float] | None = None
    start_time: float | None = Field(None, alias="startTime")
    end_time: float | None = Field(None, alias="endTime")
    uuid: str = Field(..., alias="UUID")
    locked: int = 0
    votes: int = 0
    video_duration: float | None = Field(None, alias="videoDuration")

    # Only sent by /segmentInfo
    video_id: str | None = Field(None, alias="videoID")
    user_id: str | None = Field(None, alias="userID")
    time_submitted: int | None = Field(None, alias="timeSubmitted")
    views: int = 0
    incorrect_votes: int = Field(0, alias="incorrectVotes")
    service: str | None = None
    hidden: int = 0
    shadow_hidden: int = Field(0, alias="shadowHidden")
    reputation: float = 0.0
    user_agent: str = Field("", alias="userAgent")
    description: str = ""


class RawHashMatch(BaseModel):
    """One candidate returned by a hash-prefix segment lookup."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    video_id: str = Field(..., alias="videoID")
    hash: str = ""
    segments: list[RawSegment] = Field(default_factory=list)


def _bounds(raw: RawSegment) -> tuple[float, float]:
    if raw.segment is not None:
        return raw.segment
    if raw.start_time is not None and raw.end_time is not None:
        return raw.start_time, raw.end_time
    raise MalformedDataError(f"segment {raw.uuid} has no start/end time")


def _validate_bounds(start: float, end: float) -> None:
    if start > end:
        raise MalformedDataError(f"segment start ({start}) > end ({end})")
    if start < 0:
        raise MalformedDataError(f"segment start ({start}) < 0")
    if end < 0:
        raise MalformedDataError(f"segment end ({end}) < 0")


def _video_duration(raw: RawSegment) -> float | None:
    duration = raw.video_duration
    if duration is None or duration == VIDEO_DURATION_SENTINEL:
        return None
    if duration < 0:
        raise MalformedDataError(f"video duration ({duration}) < 0")
    return duration


def _additional_info(raw: RawSegment) -> AdditionalSegmentInfo:
    missing = [
        name
        for name, value in (
            ("videoID", raw.video_id),
            ("userID", raw.user_id),
            ("timeSubmitted", raw.time_submitted),
        )
        if value is None
    ]
    if missing:
        raise MalformedDataError(f"segment {raw.uuid} is missing {', '.join(missing)}")

    return AdditionalSegmentInfo(
        video_id=raw.video_id,
        submitter_public_id=raw.user_id,
        time_submitted=datetime.fromtimestamp(raw.time_submitted / 1000, tz=timezone.utc),
        views=raw.views,
        incorrect_votes=raw.incorrect_votes,
        service=raw.service or "YouTube",
        hidden=raw.hidden != 0,
        shadow_hidden=raw.shadow_hidden != 0,
        reputation=raw.reputation,
        user_agent=raw.user_agent,
        description=raw.description,
    )


def normalize_segment(
    raw: RawSegment | Mapping[str, Any],
    include_additional_info: bool = False,
) -> Segment:
    """
    Validate a wire segment record and convert it into a ``Segment``.

    Args:
        raw: Wire record, parsed or as a decoded JSON object
        include_additional_info: Keep the segment-info fields. Endpoints that
            don't send them leave only placeholder defaults, so this must be
            False for them.

    Returns:
        The validated segment

    Raises:
        DeserializationError: If a mapping doesn't have the record's shape
        MalformedDataError: If the bounds or video duration are not sane
        UnrecognizedValueError: If the category or action token is unknown
    """
    if not isinstance(raw, RawSegment):
        try:
            raw = RawSegment.model_validate(raw)
        except ValidationError as e:
            raise DeserializationError(f"invalid segment record: {e}") from e

    start, end = _bounds(raw)
    _validate_bounds(start, end)

    category = category_from_str(raw.category)
    # The API reported "skip" for highlights before point actions existed.
    if category is Category.HIGHLIGHT:
        action = ActionKind.POINT_OF_INTEREST
    else:
        action = action_kind_from_str(raw.action_type)

    timing: TimeSection | TimePoint | None
    if action.has_section:
        timing = TimeSection(start=start, end=end)
    elif action is ActionKind.POINT_OF_INTEREST:
        timing = TimePoint(point=start)
    else:
        timing = None

    return Segment(
        category=category,
        action=action,
        timing=timing,
        uuid=raw.uuid,
        locked=raw.locked != 0,
        votes=raw.votes,
        video_duration_on_submission=_video_duration(raw),
        additional_info=_additional_info(raw) if include_additional_info else None,
    )


def _parse_counts(
    raw: Mapping[str, int] | None,
    lookup: Callable[[str], E],
) -> dict[E, int]:
    counts: dict[E, int] = {}
    for key, count in (raw or {}).items():
        try:
            counts[lookup(key)] = count
        except UnrecognizedValueError as e:
            # New server-side vocabulary must not break the rest of the map
            logger.debug("Skipping unrecognized %s '%s' in statistics", e.kind, e.raw)
    return counts


def parse_category_counts(raw: Mapping[str, int] | None) -> dict[Category, int]:
    """Parse a per-category count map, dropping unknown categories."""
    return _parse_counts(raw, category_from_str)


def parse_action_counts(raw: Mapping[str, int] | None) -> dict[ActionKind, int]:
    """Parse a per-action-type count map, dropping unknown action types."""
    return _parse_counts(raw, action_kind_from_str)
