"""Endpoint client and the records it returns."""

from sponsorblock.client.client import SponsorBlockClient, video_id_hash_prefix
from sponsorblock.client.schemas import ApiStatus, OverallStats, UserInfo, UserStats

__all__ = [
    "SponsorBlockClient",
    "video_id_hash_prefix",
    "ApiStatus",
    "OverallStats",
    "UserInfo",
    "UserStats",
]
