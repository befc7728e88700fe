"""Library constants and metadata.

This module centralizes:
- Library metadata
- API locations and defaults
- Endpoint paths
"""

# =============================================================================
# Library Metadata
# =============================================================================

LIBRARY_NAME = "sponsorblock"
LIBRARY_VERSION = "0.6.0"

DEFAULT_USER_AGENT = f"{LIBRARY_NAME}-py/{LIBRARY_VERSION}"

# =============================================================================
# API Configuration
# =============================================================================

# The official instance. This includes the `/api` path segment.
BASE_URL_MAIN = "https://sponsor.ajay.app/api"
# The public testing database.
BASE_URL_TESTING = "https://sponsor.ajay.app/test/api"

# See https://wiki.sponsor.ajay.app/w/Types#Service
DEFAULT_SERVICE = "YouTube"

# Characters of the SHA-256 video ID hash sent for private searches. Shorter
# prefixes match more videos, which gives more privacy.
DEFAULT_HASH_PREFIX_LENGTH = 4
MIN_HASH_PREFIX_LENGTH = 4
MAX_HASH_PREFIX_LENGTH = 32

# =============================================================================
# Endpoints
# =============================================================================

SKIP_SEGMENTS_ENDPOINT = "/skipSegments"
SEGMENT_INFO_ENDPOINT = "/segmentInfo"
USER_INFO_ENDPOINT = "/userInfo"
USER_STATS_ENDPOINT = "/userStats"
STATUS_ENDPOINT = "/status"
