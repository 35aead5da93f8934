"""Typed Python client for the Foursquare v2 venues API."""

from __future__ import annotations

from foursquare.client import DEFAULT_HOST, AsyncFoursquareClient, FoursquareClient
from foursquare.credentials import AppCredentials, Credentials, UserCredentials
from foursquare.exceptions import (
    AuthenticationError,
    BadRequestError,
    CodecError,
    Fault,
    ForbiddenError,
    FoursquareError,
    NotFoundError,
    RateLimitError,
    ResponseIOError,
    ServerError,
    TransportError,
    UriError,
)
from foursquare.models import ClientError, Envelope, Meta, RateLimitInfo
from foursquare.options import (
    CategoriesOptions,
    ExploreOptions,
    Feature,
    HoursOptions,
    Intent,
    RecommendationsOptions,
    SearchOptions,
    SuggestOptions,
    TipsOptions,
    VenueDetailsOptions,
)

__all__ = [
    "DEFAULT_HOST",
    "AsyncFoursquareClient",
    "FoursquareClient",
    "AppCredentials",
    "Credentials",
    "UserCredentials",
    "FoursquareError",
    "TransportError",
    "UriError",
    "CodecError",
    "ResponseIOError",
    "Fault",
    "BadRequestError",
    "AuthenticationError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitError",
    "ServerError",
    "ClientError",
    "Envelope",
    "Meta",
    "RateLimitInfo",
    "CategoriesOptions",
    "ExploreOptions",
    "Feature",
    "HoursOptions",
    "Intent",
    "RecommendationsOptions",
    "SearchOptions",
    "SuggestOptions",
    "TipsOptions",
    "VenueDetailsOptions",
]
