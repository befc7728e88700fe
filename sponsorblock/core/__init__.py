"""Core package: configuration, transport, errors and logging."""

from sponsorblock.core.config import ClientConfig
from sponsorblock.core.constants import BASE_URL_MAIN, BASE_URL_TESTING
from sponsorblock.core.exceptions import (
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
)
from sponsorblock.core.flags import flags_to_url_value, iter_set_flags, to_url_array
from sponsorblock.core.http_session import create_http_client, get_response_text
from sponsorblock.core.logging_config import get_logger, log_api_request, setup_logging
from sponsorblock.core.user_id import gen_user_id

__all__ = [
    "ClientConfig",
    "BASE_URL_MAIN",
    "BASE_URL_TESTING",
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
    # Encoding
    "to_url_array",
    "iter_set_flags",
    "flags_to_url_value",
    # HTTP
    "create_http_client",
    "get_response_text",
    # Logging
    "setup_logging",
    "get_logger",
    "log_api_request",
    # Identity
    "gen_user_id",
]
