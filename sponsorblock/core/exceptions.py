"""Custom exceptions for the SponsorBlock client."""


class SponsorBlockError(Exception):
    """Base exception for all client errors."""

    pass


class HttpError(SponsorBlockError):
    """The API answered with a non-success HTTP status.

    Attributes:
        status: HTTP status code returned by the server
    """

    kind = "HTTP"

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"{self.kind} error, with status code {status}")


class ServerError(HttpError):
    """The API itself failed (5xx). Usually transient."""

    kind = "internal API"


class ClientError(HttpError):
    """The API rejected the request (4xx).

    A 404 means nothing in the database matched the query; callers will
    usually want to treat it as an empty result rather than a failure.
    """

    kind = "client HTTP"

    @property
    def is_not_found(self) -> bool:
        """Whether this is the "no results" 404 case."""
        return self.status == 404


class UnknownHttpOutcomeError(HttpError):
    """The API answered with a status outside 2xx/4xx/5xx."""

    kind = "unknown HTTP"


class CommunicationError(SponsorBlockError):
    """Unable to communicate with the API (network or protocol failure).

    The underlying ``httpx`` exception is available as ``__cause__``.
    """

    def __init__(self, message: str = "unable to communicate with the API"):
        super().__init__(message)


class DeserializationError(SponsorBlockError):
    """The response body is not the JSON shape the library expects."""

    pass


class MalformedDataError(SponsorBlockError):
    """Data received from the API parsed but failed sanity checks.

    Attributes:
        reason: What check failed
    """

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"data received from the API does not meet verification: {reason}")


class UnrecognizedValueError(SponsorBlockError):
    """The library does not know a token it received from the API.

    Usually means this library is older than the API's vocabulary.

    Attributes:
        kind: Field the token was read from ("category" or "actionType")
        raw: The token as received
    """

    def __init__(self, kind: str, raw: str):
        self.kind = kind
        self.raw = raw
        super().__init__(f"received an unrecognized value of type '{kind}' from the API: {raw}")


class NoMatchingVideoHashError(SponsorBlockError):
    """A hash-prefix lookup returned no candidate for the requested video."""

    def __init__(self, video_id: str):
        self.video_id = video_id
        super().__init__(f"no hash-prefix match returned for video {video_id}")
