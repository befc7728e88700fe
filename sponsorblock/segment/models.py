"""Domain models for segments."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from sponsorblock.segment.action import ActionKind
from sponsorblock.segment.category import Category


class TimeSection(BaseModel):
    """A section of a video with a start and end time, in seconds.

    ``start`` is guaranteed to be <= ``end``.
    """

    model_config = ConfigDict(frozen=True)

    start: float = Field(..., ge=0)
    end: float = Field(..., ge=0)

    @model_validator(mode="after")
    def check_order(self) -> "TimeSection":
        if self.start > self.end:
            raise ValueError(f"section start ({self.start}) > end ({self.end})")
        return self

    def duration(self) -> float:
        """Length of the section in seconds."""
        return self.end - self.start


class TimePoint(BaseModel):
    """A single point in a video, in seconds."""

    model_config = ConfigDict(frozen=True)

    point: float = Field(..., ge=0)


class AdditionalSegmentInfo(BaseModel):
    """Extra segment details only returned by the segment info endpoint."""

    model_config = ConfigDict(frozen=True)

    video_id: str
    submitter_public_id: str
    time_submitted: datetime
    views: int = 0
    incorrect_votes: int = 0
    service: str = "YouTube"
    hidden: bool = False
    shadow_hidden: bool = False
    reputation: float = 0.0
    user_agent: str = ""
    description: str = ""


class Segment(BaseModel):
    """A section or point in a video worth skipping or otherwise treating specially.

    ``timing`` depends on ``action``: a ``TimeSection`` for skip and mute, a
    ``TimePoint`` for points of interest, and ``None`` for full-video labels.
    """

    model_config = ConfigDict(frozen=True)

    category: Category
    action: ActionKind
    timing: TimeSection | TimePoint | None = None
    uuid: str
    locked: bool = False
    votes: int = 0
    video_duration_on_submission: float | None = None
    additional_info: AdditionalSegmentInfo | None = None

    @model_validator(mode="after")
    def check_timing_matches_action(self) -> "Segment":
        if self.action.has_section:
            expected: type | None = TimeSection
        elif self.action is ActionKind.POINT_OF_INTEREST:
            expected = TimePoint
        else:
            expected = None
        actual = type(self.timing) if self.timing is not None else None
        if actual is not expected:
            carried = actual.__name__ if actual else "no time value"
            raise ValueError(f"{self.action.value} segment cannot carry {carried}")
        return self

    @property
    def start(self) -> float | None:
        """Start of the section, or the point itself for points of interest."""
        if isinstance(self.timing, TimeSection):
            return self.timing.start
        if isinstance(self.timing, TimePoint):
            return self.timing.point
        return None

    @property
    def end(self) -> float | None:
        """End of the section, or the point itself for points of interest."""
        if isinstance(self.timing, TimeSection):
            return self.timing.end
        if isinstance(self.timing, TimePoint):
            return self.timing.point
        return None

    @property
    def point(self) -> float | None:
        if isinstance(self.timing, TimePoint):
            return self.timing.point
        return None

    def duration(self) -> float | None:
        """Length in seconds. Points have zero length; full-video labels have none."""
        if isinstance(self.timing, TimeSection):
            return self.timing.duration()
        if isinstance(self.timing, TimePoint):
            return 0.0
        return None
