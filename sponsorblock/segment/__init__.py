"""Segment taxonomy, domain models and response normalization."""

from sponsorblock.segment.action import AcceptedActions, ActionKind, action_kind_from_str
from sponsorblock.segment.category import AcceptedCategories, Category, category_from_str
from sponsorblock.segment.models import AdditionalSegmentInfo, Segment, TimePoint, TimeSection
from sponsorblock.segment.normalizer import (
    RawHashMatch,
    RawSegment,
    normalize_segment,
    parse_action_counts,
    parse_category_counts,
)

__all__ = [
    # Taxonomy
    "Category",
    "ActionKind",
    "AcceptedCategories",
    "AcceptedActions",
    "category_from_str",
    "action_kind_from_str",
    # Models
    "Segment",
    "TimeSection",
    "TimePoint",
    "AdditionalSegmentInfo",
    # Normalization
    "RawSegment",
    "RawHashMatch",
    "normalize_segment",
    "parse_category_counts",
    "parse_action_counts",
]
