"""Typed response models for the Foursquare v2 API.

All models accept both the API's camelCase keys and the snake_case attribute
names, and dump back to camelCase with ``model_dump(by_alias=True)``.

A single permissive :class:`Venue` shape is shared by every endpoint. Fields
that only some endpoints return (``contact``, ``verified``, ``location.cc``,
``location.formatted_address`` are missing from suggest results, for
example) are optional rather than split into per-endpoint venue types.
Unknown keys are kept as extras so newer API fields flow through.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
    )


# ---------------------------------------------------------------------------
# Envelope
# ---------------------------------------------------------------------------


class Meta(ApiModel):
    """The ``meta`` block present on every response."""

    code: int
    request_id: str
    error_type: str | None = None
    error_detail: str | None = None


PayloadT = TypeVar("PayloadT")


class Envelope(ApiModel, Generic[PayloadT]):
    """``{meta, response}`` wrapper, specialised per endpoint."""

    meta: Meta
    response: PayloadT


class FaultEnvelope(ApiModel):
    """Envelope shape returned with non-2xx statuses; ``response`` is usually ``{}``."""

    meta: Meta
    response: dict[str, Any] | None = None


class ClientError(ApiModel):
    """Decoded detail of an API fault."""

    message: str
    error_type: str | None = None
    code: int | None = None
    request_id: str | None = None

    @classmethod
    def from_meta(cls, meta: Meta) -> ClientError:
        return cls(
            message=meta.error_detail or meta.error_type or "",
            error_type=meta.error_type,
            code=meta.code,
            request_id=meta.request_id,
        )


@dataclass(frozen=True)
class RateLimitInfo:
    """Rate-limit metadata parsed from response headers."""

    limit: int
    remaining: int
    reset: int | None = None

    @classmethod
    def from_headers(cls, headers: Mapping[str, str]) -> RateLimitInfo | None:
        """Parse ``X-RateLimit-*`` headers, returning *None* if absent or malformed."""
        raw_limit = headers.get("x-ratelimit-limit")
        raw_remaining = headers.get("x-ratelimit-remaining")
        raw_reset = headers.get("x-ratelimit-reset")
        if raw_limit is None or raw_remaining is None:
            return None
        try:
            return cls(
                limit=int(raw_limit),
                remaining=int(raw_remaining),
                reset=int(raw_reset) if raw_reset is not None else None,
            )
        except ValueError:
            return None


# ---------------------------------------------------------------------------
# Shared venue building blocks
# ---------------------------------------------------------------------------


class Icon(ApiModel):
    prefix: str
    suffix: str


class Contact(ApiModel):
    phone: str | None = None
    formatted_phone: str | None = None
    twitter: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    facebook_username: str | None = None
    facebook_name: str | None = None


class LabeledLatLng(ApiModel):
    label: str
    lat: float
    lng: float


class Location(ApiModel):
    """Street address and coordinates.

    Venues whose location is hidden for privacy have ``is_fuzzed`` set and
    reduced-precision coordinates. ``distance`` is in meters and only present
    when the request carried a reference point.
    """

    address: str | None = None
    cross_street: str | None = None
    lat: float
    lng: float
    labeled_lat_lngs: list[LabeledLatLng] | None = None
    distance: int | None = None
    postal_code: str | None = None
    cc: str | None = None
    city: str | None = None
    state: str | None = None
    country: str | None = None
    formatted_address: list[str] | None = None
    is_fuzzed: bool | None = None


class Category(ApiModel):
    """A venue category; the categories endpoint nests sub-categories."""

    id: str
    name: str
    plural_name: str | None = None
    short_name: str | None = None
    icon: Icon | None = None
    primary: bool | None = None
    categories: list[Category] | None = None


class Price(ApiModel):
    """Price tier from 1 (least pricey) to 4 (most pricey)."""

    tier: int
    message: str | None = None
    currency: str | None = None


class Menu(ApiModel):
    type: str | None = None
    label: str | None = None
    anchor: str | None = None
    url: str | None = None
    mobile_url: str | None = None
    external_url: str | None = None


class Stats(ApiModel):
    checkins_count: int | None = None
    users_count: int | None = None
    tip_count: int | None = None
    visits_count: int | None = None


class Likes(ApiModel):
    count: int
    summary: str | None = None


class HereNow(ApiModel):
    count: int
    summary: str | None = None


class User(ApiModel):
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    gender: str | None = None
    photo: Icon | None = None


# ---------------------------------------------------------------------------
# Photos
# ---------------------------------------------------------------------------


class PhotoSource(ApiModel):
    name: str
    url: str | None = None


class Photo(ApiModel):
    """A photo; the full URL is ``prefix + "{width}x{height}" + suffix``."""

    id: str
    created_at: int | None = None
    prefix: str
    suffix: str
    width: int | None = None
    height: int | None = None
    visibility: str | None = None
    source: PhotoSource | None = None
    user: User | None = None

    def url(self, size: str = "original") -> str:
        return f"{self.prefix}{size}{self.suffix}"


class PhotoGroup(ApiModel):
    type: str
    name: str | None = None
    count: int | None = None
    items: list[Photo] = []


class Photos(ApiModel):
    count: int
    groups: list[PhotoGroup] = []


# ---------------------------------------------------------------------------
# Tips
# ---------------------------------------------------------------------------


class Tip(ApiModel):
    id: str
    created_at: int | None = None
    text: str
    type: str | None = None
    canonical_url: str | None = None
    lang: str | None = None
    likes: Likes | None = None
    agree_count: int | None = None
    disagree_count: int | None = None
    photo: Photo | None = None
    photourl: str | None = None
    url: str | None = None
    user: User | None = None


class TipGroup(ApiModel):
    type: str
    name: str | None = None
    count: int | None = None
    items: list[Tip] = []


class VenueTips(ApiModel):
    """Tip summary embedded in a complete venue."""

    count: int
    groups: list[TipGroup] = []


class TipList(ApiModel):
    count: int
    items: list[Tip] = []


class TipsResponse(ApiModel):
    tips: TipList


# ---------------------------------------------------------------------------
# Hours
# ---------------------------------------------------------------------------


class OpenInterval(ApiModel):
    """Machine-readable interval; ``end`` may carry a ``+`` for next-day times."""

    start: str
    end: str


class Timeframe(ApiModel):
    days: list[int]
    includes_today: bool | None = None
    open: list[OpenInterval] = []
    segments: list[Any] = []


class Hours(ApiModel):
    timeframes: list[Timeframe] = []


class HoursResponse(ApiModel):
    """Payload of ``/venues/{id}/hours``: opening and popular hours."""

    hours: Hours
    popular: Hours


class RenderedTime(ApiModel):
    rendered_time: str


class RenderedTimeframe(ApiModel):
    days: str
    includes_today: bool | None = None
    open: list[RenderedTime] = []
    segments: list[Any] = []


class VenueHours(ApiModel):
    """Human-readable hours embedded in a complete venue."""

    status: str | None = None
    is_open: bool | None = None
    is_local_holiday: bool | None = None
    timeframes: list[RenderedTimeframe] = []


# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------


class AttributeItem(ApiModel):
    display_name: str
    display_value: str | None = None


class AttributeGroup(ApiModel):
    type: str
    name: str | None = None
    summary: str | None = None
    count: int | None = None
    items: list[AttributeItem] = []


class Attributes(ApiModel):
    groups: list[AttributeGroup] = []


# ---------------------------------------------------------------------------
# Venue
# ---------------------------------------------------------------------------


class Venue(ApiModel):
    """A compact or complete venue."""

    id: str
    name: str
    contact: Contact | None = None
    location: Location
    categories: list[Category] = []
    # whether the owner has claimed and verified the listing
    verified: bool | None = None
    stats: Stats | None = None
    url: str | None = None
    hours: VenueHours | None = None
    popular: VenueHours | None = None
    has_menu: bool | None = None
    menu: Menu | None = None
    price: Price | None = None
    # 0 through 10
    rating: float | None = None
    rating_color: str | None = None
    rating_signals: int | None = None
    likes: Likes | None = None
    here_now: HereNow | None = None
    created_at: int | None = None
    photos: Photos | None = None
    best_photo: Photo | None = None
    tips: VenueTips | None = None
    attributes: Attributes | None = None
    description: str | None = None
    short_url: str | None = None
    canonical_url: str | None = None
    time_zone: str | None = None
    referral_id: str | None = None
    has_perk: bool | None = None


class VenueResponse(ApiModel):
    venue: Venue


class SearchResponse(ApiModel):
    venues: list[Venue]
    confident: bool | None = None


class SuggestResponse(ApiModel):
    """Payload of ``/venues/suggestcompletion``.

    Mini venues omit ``contact``, ``verified`` and most address fields.
    """

    minivenues: list[Venue]


class CategoriesResponse(ApiModel):
    categories: list[Category]


# ---------------------------------------------------------------------------
# Explore
# ---------------------------------------------------------------------------


class ReasonItem(ApiModel):
    summary: str | None = None
    type: str | None = None
    reason_name: str | None = None


class Reasons(ApiModel):
    count: int
    items: list[ReasonItem] = []


class ExploreItem(ApiModel):
    venue: Venue
    referral_id: str | None = None
    reasons: Reasons | None = None
    tips: list[Tip] | None = None


class ExploreGroup(ApiModel):
    type: str | None = None
    name: str
    items: list[ExploreItem] = []


class ExploreResponse(ApiModel):
    """Payload of ``/venues/explore``.

    ``suggested_radius`` is only present when the request set no radius.
    Clients should treat unfamiliar group types as opaque.
    """

    suggested_radius: int | None = None
    header_location: str | None = None
    header_full_location: str | None = None
    header_location_granularity: str | None = None
    query: str | None = None
    total_results: int
    groups: list[ExploreGroup]


# ---------------------------------------------------------------------------
# Recommendations
# ---------------------------------------------------------------------------


class Recommendation(ApiModel):
    display_type: str
    id: str | None = None
    venue: Venue | None = None
    photo: Photo | None = None
    snippets: dict[str, Any] | None = None


class RecommendationGroup(ApiModel):
    results: list[Recommendation] = []
    total_results: int | None = None


class RecommendationsResponse(ApiModel):
    group: RecommendationGroup
    context: dict[str, Any] | None = None
