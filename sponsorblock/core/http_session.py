"""HTTP transport for talking to the API."""

import time
from collections.abc import Mapping

import httpx

from sponsorblock.core.config import ClientConfig
from sponsorblock.core.exceptions import (
    ClientError,
    CommunicationError,
    ServerError,
    UnknownHttpOutcomeError,
)
from sponsorblock.core.logging_config import get_logger, log_api_request

logger = get_logger("http")

QueryParams = Mapping[str, str | int | bool]


def create_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """
    Create an async HTTP client configured for the API.

    Connections are pooled by the client. No retries are configured; callers
    decide whether and when to retry.

    Args:
        config: Client configuration (user agent, timeout)

    Returns:
        Configured httpx.AsyncClient instance
    """
    return httpx.AsyncClient(
        headers={
            "User-Agent": config.user_agent,
            "Accept": "application/json",
        },
        timeout=config.timeout,
        follow_redirects=False,
    )


def get_response_text(response: httpx.Response) -> str:
    """
    Classify a completed response and return its body.

    Args:
        response: Response with its body already read

    Returns:
        Response body text for 2xx responses

    Raises:
        ClientError: For 4xx responses (404 means "nothing found")
        ServerError: For 5xx responses
        UnknownHttpOutcomeError: For any other status
    """
    status = response.status_code
    if response.is_success:
        return response.text
    if response.is_server_error:
        raise ServerError(status)
    if response.is_client_error:
        raise ClientError(status)
    raise UnknownHttpOutcomeError(status)


async def get(
    http: httpx.AsyncClient,
    url: str,
    params: QueryParams | None = None,
) -> str:
    """
    Send a GET request and return the classified response body.

    Args:
        http: HTTP client to send with
        url: Absolute request URL
        params: Query parameters

    Returns:
        Response body text

    Raises:
        CommunicationError: If no response was received
        ClientError, ServerError, UnknownHttpOutcomeError: On non-2xx status
    """
    path = httpx.URL(url).path
    started = time.perf_counter()
    try:
        response = await http.get(url, params=params)
    except httpx.HTTPError as e:
        duration_ms = (time.perf_counter() - started) * 1000
        log_api_request(logger, "GET", path, None, duration_ms, error=str(e))
        raise CommunicationError() from e

    duration_ms = (time.perf_counter() - started) * 1000
    log_api_request(logger, "GET", path, response.status_code, duration_ms)
    return get_response_text(response)
