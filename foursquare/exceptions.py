"""Exception hierarchy for the Foursquare client."""

from __future__ import annotations

from foursquare.models import ClientError, RateLimitInfo


class FoursquareError(Exception):
    """Base exception for every failure surfaced by the client."""


class TransportError(FoursquareError):
    """The HTTP call itself failed (connection, TLS, timeout)."""


class UriError(FoursquareError):
    """The request URL could not be parsed or uses an unsupported scheme."""


class CodecError(FoursquareError):
    """A response body did not decode into the expected shape."""


class ResponseIOError(FoursquareError):
    """Reading the response body failed."""


class Fault(FoursquareError):
    """The API answered with a non-2xx status and a structured error body."""

    def __init__(
        self,
        status_code: int,
        error: ClientError,
        rate_limit_info: RateLimitInfo | None = None,
    ) -> None:
        self.status_code = status_code
        self.error = error
        self.rate_limit_info = rate_limit_info
        super().__init__(f"{status_code}: '{error.message}'")

    @property
    def message(self) -> str:
        return self.error.message

    @property
    def error_type(self) -> str | None:
        return self.error.error_type


class BadRequestError(Fault):
    """Raised on ``param_error`` or 400 responses."""


class AuthenticationError(Fault):
    """Raised on ``invalid_auth``/``not_authorized`` or 401 responses."""


class ForbiddenError(Fault):
    """Raised on 403 responses not explained by auth or rate limits."""


class NotFoundError(Fault):
    """Raised on ``endpoint_error`` or 404 responses."""


class RateLimitError(Fault):
    """Raised on ``rate_limit_exceeded``/``quota_exceeded`` or 429 responses."""


class ServerError(Fault):
    """Raised on ``server_error`` or 5xx responses."""
