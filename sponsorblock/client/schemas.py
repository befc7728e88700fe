"""Pydantic schemas for user and API status records."""

from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from sponsorblock.segment.action import ActionKind
from sponsorblock.segment.category import Category
from sponsorblock.segment.normalizer import parse_action_counts, parse_category_counts

_RECORD_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


def _unset_default_user_name(data: Any) -> Any:
    """Treat a user name equal to the public user ID as "no name chosen".

    The API falls back to the public user ID when a user never set a name.
    """
    if isinstance(data, dict) and data.get("userName") == data.get("userID"):
        data = {**data, "userName": None}
    return data


class UserInfo(BaseModel):
    """The results of a user info request."""

    model_config = _RECORD_CONFIG

    public_user_id: str = Field(..., alias="userID")
    user_name: str | None = Field(None, alias="userName")
    minutes_saved: float = Field(0.0, alias="minutesSaved")
    # Excludes ignored & hidden segments
    segment_count: int = Field(0, alias="segmentCount")
    ignored_segment_count: int = Field(0, alias="ignoredSegmentCount")
    # Views other users have on this user's segments, excluding ignored & hidden ones
    view_count: int = Field(0, alias="viewCount")
    ignored_view_count: int = Field(0, alias="ignoredViewCount")
    # Currently-enabled warnings
    warnings: int = 0
    warning_reason: str | None = Field(None, alias="warningReason")
    reputation: float = 0.0
    vip: bool = False
    locked: bool = False
    last_segment_id: str | None = Field(None, alias="lastSegmentID")

    @model_validator(mode="before")
    @classmethod
    def normalize_user_name(cls, data: Any) -> Any:
        return _unset_default_user_name(data)

    def total_segment_count(self) -> int:
        """Segments submitted, including ignored & hidden ones."""
        return self.segment_count + self.ignored_segment_count

    def total_view_count(self) -> int:
        """Views on this user's segments, including ignored & hidden ones."""
        return self.view_count + self.ignored_view_count


class OverallStats(BaseModel):
    """Overall stats for a user, a subset of what ``UserInfo`` provides."""

    model_config = _RECORD_CONFIG

    minutes_saved: float = Field(0.0, alias="minutesSaved")
    segment_count: int = Field(0, alias="segmentCount")


class UserStats(BaseModel):
    """The results of a user stats request.

    Categories and action types the library doesn't know yet are left out of
    the breakdown maps instead of failing the whole record.
    """

    model_config = _RECORD_CONFIG

    public_user_id: str = Field(..., alias="userID")
    user_name: str | None = Field(None, alias="userName")
    overall_stats: OverallStats = Field(default_factory=OverallStats, alias="overallStats")
    category_count: dict[Category, int] = Field(default_factory=dict, alias="categoryCount")
    action_type_count: dict[ActionKind, int] = Field(
        default_factory=dict, alias="actionTypeCount"
    )

    @model_validator(mode="before")
    @classmethod
    def normalize_user_name(cls, data: Any) -> Any:
        return _unset_default_user_name(data)

    @field_validator("category_count", mode="before")
    @classmethod
    def parse_categories(cls, v: Any) -> Any:
        return parse_category_counts(v) if isinstance(v, dict) or v is None else v

    @field_validator("action_type_count", mode="before")
    @classmethod
    def parse_action_types(cls, v: Any) -> Any:
        return parse_action_counts(v) if isinstance(v, dict) or v is None else v


class ApiStatus(BaseModel):
    """A snapshot of the API server's status.

    Missing or null fields fall back to zero values.
    """

    model_config = _RECORD_CONFIG

    # Server process uptime
    uptime: timedelta = timedelta(0)
    # SHA-1 of the commit the server is running
    commit: str = ""
    db_version: int = Field(0, alias="db")
    # When the server received the request
    request_start_time: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc), alias="startTime"
    )
    # How long the server took to answer
    request_time_taken: timedelta = Field(timedelta(0), alias="processTime")
    # Load averages over 5 and 15 minutes
    load_average: tuple[float, float] = Field((0.0, 0.0), alias="loadavg")

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            data = {k: v for k, v in data.items() if v is not None}
        return data

    @field_validator("uptime", mode="before")
    @classmethod
    def seconds_to_timedelta(cls, v: Any) -> Any:
        if isinstance(v, int | float | str) and not isinstance(v, bool):
            return timedelta(seconds=float(v))
        return v

    @field_validator("request_time_taken", mode="before")
    @classmethod
    def millis_to_timedelta(cls, v: Any) -> Any:
        if isinstance(v, int | float | str) and not isinstance(v, bool):
            return timedelta(milliseconds=float(v))
        return v

    @field_validator("request_start_time", mode="before")
    @classmethod
    def millis_to_datetime(cls, v: Any) -> Any:
        if isinstance(v, int | float) and not isinstance(v, bool):
            return datetime.fromtimestamp(v / 1000, tz=timezone.utc)
        return v
