"""SponsorBlock - a typed async client for the SponsorBlock API."""

from sponsorblock.client import (
    ApiStatus,
    OverallStats,
    SponsorBlockClient,
    UserInfo,
    UserStats,
)
from sponsorblock.core import (
    BASE_URL_MAIN,
    BASE_URL_TESTING,
    ClientConfig,
    ClientError,
    CommunicationError,
    DeserializationError,
    HttpError,
    MalformedDataError,
    NoMatchingVideoHashError,
    ServerError,
    SponsorBlockError,
    UnknownHttpOutcomeError,
    UnrecognizedValueError,
    gen_user_id,
    setup_logging,
)
from sponsorblock.core.constants import LIBRARY_VERSION
from sponsorblock.segment import (
    AcceptedActions,
    AcceptedCategories,
    ActionKind,
    AdditionalSegmentInfo,
    Category,
    Segment,
    TimePoint,
    TimeSection,
)

__version__ = LIBRARY_VERSION
__all__ = [
    # Client
    "SponsorBlockClient",
    "ClientConfig",
    "BASE_URL_MAIN",
    "BASE_URL_TESTING",
    "gen_user_id",
    "setup_logging",
    # Records
    "Segment",
    "TimeSection",
    "TimePoint",
    "AdditionalSegmentInfo",
    "UserInfo",
    "UserStats",
    "OverallStats",
    "ApiStatus",
    # Taxonomy
    "Category",
    "ActionKind",
    "AcceptedCategories",
    "AcceptedActions",
    # Errors
    "SponsorBlockError",
    "HttpError",
    "ServerError",
    "ClientError",
    "UnknownHttpOutcomeError",
    "CommunicationError",
    "DeserializationError",
    "MalformedDataError",
    "UnrecognizedValueError",
    "NoMatchingVideoHashError",
]
