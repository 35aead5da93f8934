"""Sync and async HTTP clients for the Foursquare v2 API."""

from __future__ import annotations

import copy
import logging
from typing import Any, Iterable, TypeVar
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from foursquare import config
from foursquare.credentials import AppCredentials, Credentials, UserCredentials
from foursquare.exceptions import (
    AuthenticationError,
    BadRequestError,
    CodecError,
    Fault,
    ForbiddenError,
    NotFoundError,
    RateLimitError,
    ResponseIOError,
    ServerError,
    TransportError,
    UriError,
)
from foursquare.models import (
    CategoriesResponse,
    ClientError,
    Envelope,
    ExploreResponse,
    FaultEnvelope,
    HoursResponse,
    RateLimitInfo,
    RecommendationsResponse,
    SearchResponse,
    SuggestResponse,
    TipsResponse,
    VenueResponse,
)
from foursquare.options import (
    CategoriesOptions,
    ExploreOptions,
    HoursOptions,
    QueryOptions,
    RecommendationsOptions,
    SearchOptions,
    SuggestOptions,
    TipsOptions,
    VenueDetailsOptions,
)

logger = logging.getLogger(__name__)

DEFAULT_HOST = "https://api.foursquare.com"

PayloadT = TypeVar("PayloadT")

# ``meta.errorType`` is more specific than the status code, so it wins.
_ERROR_TYPE_MAP: dict[str, type[Fault]] = {
    "param_error": BadRequestError,
    "invalid_auth": AuthenticationError,
    "not_authorized": AuthenticationError,
    "endpoint_error": NotFoundError,
    "rate_limit_exceeded": RateLimitError,
    "quota_exceeded": RateLimitError,
    "server_error": ServerError,
}

_STATUS_MAP: dict[int, type[Fault]] = {
    400: BadRequestError,
    401: AuthenticationError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def _credential_params(credentials: Credentials | None) -> list[tuple[str, str]]:
    if isinstance(credentials, AppCredentials):
        return [
            ("client_id", credentials.client_id),
            ("client_secret", credentials.client_secret),
        ]
    if isinstance(credentials, UserCredentials):
        return [("oauth_token", credentials.oauth_token)]
    return []


def _build_url(
    host: str,
    path: str,
    params: Iterable[tuple[str, str]],
    version: str,
    credentials: Credentials | None,
) -> httpx.URL:
    """Endpoint params first, then ``v``, then credentials."""
    try:
        url = httpx.URL(f"{host}{path}")
        query = [
            *url.params.multi_items(),
            *params,
            ("v", version),
            *_credential_params(credentials),
        ]
        return url.copy_with(params=query)
    except httpx.InvalidURL as exc:
        raise UriError(f"invalid request URL for {path!r}: {exc}") from exc


def _venue_path(venue_id: str, suffix: str = "") -> str:
    return f"/v2/venues/{quote(venue_id, safe='')}{suffix}"


def _params(options: QueryOptions | None) -> list[tuple[str, str]]:
    return options.to_params() if options is not None else []


def _build_fault(response: httpx.Response) -> Fault:
    """Decode a non-2xx body into the matching :class:`Fault` subclass.

    A fault body that is not a well-formed envelope raises :class:`CodecError`.
    """
    try:
        envelope = FaultEnvelope.model_validate_json(response.content)
    except ValidationError as exc:
        raise CodecError(
            f"undecodable fault body (HTTP {response.status_code}): {exc}"
        ) from exc

    error = ClientError.from_meta(envelope.meta)
    status = response.status_code
    exc_cls = _ERROR_TYPE_MAP.get(error.error_type or "") or _STATUS_MAP.get(status)
    if exc_cls is None:
        exc_cls = ServerError if status >= 500 else Fault

    logger.warning(
        "Foursquare fault %d (%s): %s",
        status,
        error.error_type,
        error.message,
        extra={
            "request_id": error.request_id,
            "error_type": error.error_type,
            "status_code": status,
        },
    )
    return exc_cls(status, error, RateLimitInfo.from_headers(response.headers))


def _decode(
    response: httpx.Response,
    payload_type: type[PayloadT],
) -> Envelope[PayloadT]:
    logger.debug("response headers %s", dict(response.headers))
    if not response.is_success:
        raise _build_fault(response)

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("response payload %s", response.text)
    try:
        envelope = Envelope[payload_type].model_validate_json(response.content)
    except ValidationError as exc:
        raise CodecError(
            f"could not decode {payload_type.__name__} envelope: {exc}"
        ) from exc
    logger.debug(
        "decoded %s", payload_type.__name__,
        extra={"request_id": envelope.meta.request_id},
    )
    return envelope


# ---------------------------------------------------------------------------
# Async client
# ---------------------------------------------------------------------------


class AsyncFoursquareClient:
    """Async client for the Foursquare API (backed by ``httpx.AsyncClient``).

    Pass ``http_client`` to share a configured ``httpx.AsyncClient``; it is
    then left open by :meth:`close`.
    """

    def __init__(
        self,
        version: str,
        credentials: Credentials | None = None,
        host: str = DEFAULT_HOST,
        timeout: float = 30.0,
        *,
        http_client: httpx.AsyncClient | None = None,
        _transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._version = version
        self._credentials = credentials
        self._owns_http = http_client is None
        if http_client is None:
            kwargs: dict[str, Any] = {"timeout": timeout}
            if _transport is not None:
                kwargs["transport"] = _transport
            http_client = httpx.AsyncClient(**kwargs)
        self._http = http_client

    @classmethod
    def from_settings(
        cls, settings: config.Settings | None = None
    ) -> AsyncFoursquareClient:
        settings = settings or config.settings
        return cls(
            settings.api_version,
            settings.credentials(),
            host=settings.host,
            timeout=settings.timeout,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def version(self) -> str:
        return self._version

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    def with_credentials(
        self, credentials: Credentials | None
    ) -> AsyncFoursquareClient:
        """Copy of this client using *credentials*, sharing the same connection pool."""
        clone = copy.copy(self)
        clone._credentials = credentials
        clone._owns_http = False
        return clone

    # -- context manager -----------------------------------------------------

    async def __aenter__(self) -> AsyncFoursquareClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_http:
            await self._http.aclose()

    # -- request engine ------------------------------------------------------

    async def request(
        self,
        method: str,
        path: str,
        payload_type: type[PayloadT],
        params: Iterable[tuple[str, str]] = (),
        body: bytes | None = None,
    ) -> Envelope[PayloadT]:
        url = _build_url(self._host, path, params, self._version, self._credentials)
        logger.debug("%s %s", method, path)
        try:
            response = await self._http.send(
                self._http.build_request(method, url, content=body),
                stream=True,
            )
        except httpx.UnsupportedProtocol as exc:
            raise UriError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        try:
            await response.aread()
        except (httpx.TransportError, httpx.StreamError) as exc:
            raise ResponseIOError(f"reading {method} {path} response: {exc}") from exc
        finally:
            await response.aclose()

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return _decode(response, payload_type)

    # -- public methods ------------------------------------------------------

    async def details(
        self,
        venue_id: str,
        options: VenueDetailsOptions | None = None,
    ) -> Envelope[VenueResponse]:
        return await self.request(
            "GET", _venue_path(venue_id), VenueResponse, _params(options)
        )

    async def search(self, options: SearchOptions) -> Envelope[SearchResponse]:
        return await self.request(
            "GET", "/v2/venues/search", SearchResponse, _params(options)
        )

    async def explore(self, options: ExploreOptions) -> Envelope[ExploreResponse]:
        return await self.request(
            "GET", "/v2/venues/explore", ExploreResponse, _params(options)
        )

    async def suggest(self, options: SuggestOptions) -> Envelope[SuggestResponse]:
        return await self.request(
            "GET", "/v2/venues/suggestcompletion", SuggestResponse, _params(options)
        )

    async def recommendations(
        self, options: RecommendationsOptions
    ) -> Envelope[RecommendationsResponse]:
        return await self.request(
            "GET",
            "/v2/search/recommendations",
            RecommendationsResponse,
            _params(options),
        )

    async def tips(
        self,
        venue_id: str,
        options: TipsOptions | None = None,
    ) -> Envelope[TipsResponse]:
        return await self.request(
            "GET", _venue_path(venue_id, "/tips"), TipsResponse, _params(options)
        )

    async def hours(
        self,
        venue_id: str,
        options: HoursOptions | None = None,
    ) -> Envelope[HoursResponse]:
        return await self.request(
            "GET", _venue_path(venue_id, "/hours"), HoursResponse, _params(options)
        )

    async def categories(
        self, options: CategoriesOptions | None = None
    ) -> Envelope[CategoriesResponse]:
        return await self.request(
            "GET", "/v2/venues/categories", CategoriesResponse, _params(options)
        )


# ---------------------------------------------------------------------------
# Sync client
# ---------------------------------------------------------------------------


class FoursquareClient:
    """Synchronous client for the Foursquare API (backed by ``httpx.Client``).

    Pass ``http_client`` to share a configured ``httpx.Client``; it is then
    left open by :meth:`close`.
    """

    def __init__(
        self,
        version: str,
        credentials: Credentials | None = None,
        host: str = DEFAULT_HOST,
        timeout: float = 30.0,
        *,
        http_client: httpx.Client | None = None,
        _transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._host = host.rstrip("/")
        self._version = version
        self._credentials = credentials
        self._owns_http = http_client is None
        if http_client is None:
            kwargs: dict[str, Any] = {"timeout": timeout}
            if _transport is not None:
                kwargs["transport"] = _transport
            http_client = httpx.Client(**kwargs)
        self._http = http_client

    @classmethod
    def from_settings(cls, settings: config.Settings | None = None) -> FoursquareClient:
        settings = settings or config.settings
        return cls(
            settings.api_version,
            settings.credentials(),
            host=settings.host,
            timeout=settings.timeout,
        )

    @property
    def host(self) -> str:
        return self._host

    @property
    def version(self) -> str:
        return self._version

    @property
    def credentials(self) -> Credentials | None:
        return self._credentials

    def with_credentials(self, credentials: Credentials | None) -> FoursquareClient:
        """Copy of this client using *credentials*, sharing the same connection pool."""
        clone = copy.copy(self)
        clone._credentials = credentials
        clone._owns_http = False
        return clone

    # -- context manager -----------------------------------------------------

    def __enter__(self) -> FoursquareClient:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_http:
            self._http.close()

    # -- request engine ------------------------------------------------------

    def request(
        self,
        method: str,
        path: str,
        payload_type: type[PayloadT],
        params: Iterable[tuple[str, str]] = (),
        body: bytes | None = None,
    ) -> Envelope[PayloadT]:
        url = _build_url(self._host, path, params, self._version, self._credentials)
        logger.debug("%s %s", method, path)
        try:
            response = self._http.send(
                self._http.build_request(method, url, content=body),
                stream=True,
            )
        except httpx.UnsupportedProtocol as exc:
            raise UriError(str(exc)) from exc
        except httpx.TransportError as exc:
            raise TransportError(f"{method} {path} failed: {exc}") from exc

        try:
            response.read()
        except (httpx.TransportError, httpx.StreamError) as exc:
            raise ResponseIOError(f"reading {method} {path} response: {exc}") from exc
        finally:
            response.close()

        logger.debug("%s %s -> %d", method, path, response.status_code)
        return _decode(response, payload_type)

    # -- public methods ------------------------------------------------------

    def details(
        self,
        venue_id: str,
        options: VenueDetailsOptions | None = None,
    ) -> Envelope[VenueResponse]:
        return self.request(
            "GET", _venue_path(venue_id), VenueResponse, _params(options)
        )

    def search(self, options: SearchOptions) -> Envelope[SearchResponse]:
        return self.request(
            "GET", "/v2/venues/search", SearchResponse, _params(options)
        )

    def explore(self, options: ExploreOptions) -> Envelope[ExploreResponse]:
        return self.request(
            "GET", "/v2/venues/explore", ExploreResponse, _params(options)
        )

    def suggest(self, options: SuggestOptions) -> Envelope[SuggestResponse]:
        return self.request(
            "GET", "/v2/venues/suggestcompletion", SuggestResponse, _params(options)
        )

    def recommendations(
        self, options: RecommendationsOptions
    ) -> Envelope[RecommendationsResponse]:
        return self.request(
            "GET",
            "/v2/search/recommendations",
            RecommendationsResponse,
            _params(options),
        )

    def tips(
        self,
        venue_id: str,
        options: TipsOptions | None = None,
    ) -> Envelope[TipsResponse]:
        return self.request(
            "GET", _venue_path(venue_id, "/tips"), TipsResponse, _params(options)
        )

    def hours(
        self,
        venue_id: str,
        options: HoursOptions | None = None,
    ) -> Envelope[HoursResponse]:
        return self.request(
            "GET", _venue_path(venue_id, "/hours"), HoursResponse, _params(options)
        )

    def categories(
        self, options: CategoriesOptions | None = None
    ) -> Envelope[CategoriesResponse]:
        return self.request(
            "GET", "/v2/venues/categories", CategoriesResponse, _params(options)
        )
