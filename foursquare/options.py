"""Per-endpoint query options and their URL query-string encoding.

Every options model is frozen and every field defaults to absent. Fields are
emitted in declaration order under their camelCase wire name; absent values
and empty strings are skipped entirely. Lists are comma-joined, enums use
their wire tag and booleans encode as ``1``/``0``.

Cross-field requirements such as "either ``ll`` or ``near``" are left to the
API, which answers with a ``param_error`` fault.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Generic, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Intent(str, Enum):
    """Search intent; the API assumes ``checkin`` when none is sent."""

    CHECKIN = "checkin"
    BROWSE = "browse"
    GLOBAL = "global"
    MATCH = "match"

    @classmethod
    def default(cls) -> Intent:
        return cls.CHECKIN


class Feature(str, Enum):
    """Venue features accepted by the recommendations endpoint.

    The value of each member is its wire code. Codes are sparse (there is no
    6, 11 or 12) so they must never be derived from declaration order.
    """

    TAKES_CREDIT_CARDS = "1"
    WIFI = "3"
    DOG_FRIENDLY = "13"
    TAKES_RESERVATIONS = "0"
    OUTDOOR_SEATING = "2"
    LIVE_MUSIC = "4"
    DELIVERY = "5"
    FULL_BAR = "7"
    ROMANTIC = "8"
    SPECIAL_OCCASION = "9"
    PARKING = "10"
    GOOD_FOR_GROUPS = "14"
    HAPPY_HOUR = "15"


def _encode(value: Any) -> str | None:
    """Encode one option value, returning *None* when it should be omitted."""
    if value is None:
        return None
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, (list, tuple)):
        parts = [part for part in (_encode(v) for v in value) if part is not None]
        return ",".join(parts) if parts else None
    return str(value)


OptionsT = TypeVar("OptionsT", bound="QueryOptions")


class OptionsBuilder(Generic[OptionsT]):
    """Fluent construction: ``SearchOptions.builder().near("Tokyo").build()``.

    Each option name is a setter returning the builder. ``build()`` performs
    type conversion only and raises ``pydantic.ValidationError`` when a value
    cannot be converted.
    """

    def __init__(self, options_type: type[OptionsT]) -> None:
        self._options_type = options_type
        self._values: dict[str, Any] = {}

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._options_type.model_fields:
            raise AttributeError(
                f"{self._options_type.__name__} has no option {name!r}"
            )

        def setter(value: Any) -> OptionsBuilder[OptionsT]:
            self._values[name] = value
            return self

        return setter

    def build(self) -> OptionsT:
        return self._options_type(**self._values)


class QueryOptions(BaseModel):
    """Base for all options models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @classmethod
    def builder(cls: type[OptionsT]) -> OptionsBuilder[OptionsT]:
        return OptionsBuilder(cls)

    def to_params(self) -> list[tuple[str, str]]:
        """Ordered ``(wire_name, value)`` pairs for every present option."""
        params: list[tuple[str, str]] = []
        for name, info in type(self).model_fields.items():
            encoded = _encode(getattr(self, name))
            if encoded is not None:
                params.append((info.alias or name, encoded))
        return params

    def to_query(self) -> str:
        """Form-encoded query string (``near=foo+bar``).

        Commas inside list values are percent-encoded here (``1%2C3``); the raw
        comma-joined value is what :meth:`to_params` returns.
        """
        return str(httpx.QueryParams(self.to_params()))


# ---------------------------------------------------------------------------
# Endpoint options
# ---------------------------------------------------------------------------


class SearchOptions(QueryOptions):
    """Options for ``/venues/search``. Requires ``ll`` or ``near`` server-side."""

    ll: str | None = None
    near: str | None = None
    intent: Intent | None = None
    radius: int | None = None
    sw: str | None = None
    ne: str | None = None
    query: str | None = None
    # up to 50
    limit: int | None = None
    category_id: str | None = None
    ll_acc: float | None = None
    alt: int | None = None
    alt_acc: float | None = None
    url: str | None = None
    provider_id: str | None = None
    linked_id: str | None = None


class ExploreOptions(QueryOptions):
    """Options for ``/venues/explore``."""

    ll: str | None = None
    near: str | None = None
    ll_acc: float | None = None
    alt: int | None = None
    alt_acc: float | None = None
    radius: int | None = None
    section: str | None = None
    query: str | None = None
    limit: int | None = None
    offset: int | None = None
    novelty: str | None = None
    friend_visits: str | None = None
    time: str | None = None
    day: str | None = None
    venue_photos: bool | None = None
    last_venue: str | None = None
    open_now: bool | None = None
    sort_by_distance: bool | None = None
    price: tuple[int, ...] | None = None
    saved: bool | None = None


class SuggestOptions(QueryOptions):
    """Options for ``/venues/suggestcompletion``; ``query`` needs 3+ characters."""

    ll: str | None = None
    near: str | None = None
    ll_acc: float | None = None
    alt: int | None = None
    alt_acc: float | None = None
    query: str | None = None
    limit: int | None = None
    radius: int | None = None
    sw: str | None = None
    ne: str | None = None


class RecommendationsOptions(QueryOptions):
    """Options for ``/search/recommendations``."""

    ll: str | None = None
    near: str | None = None
    radius: int | None = None
    sw: str | None = None
    ne: str | None = None
    query: str | None = None
    limit: int | None = None
    offset: int | None = None
    category_id: str | None = None
    intent: str | None = None
    open_now: bool | None = None
    prices: tuple[int, ...] | None = None
    features: tuple[Feature, ...] | None = None
    sort_by_distance: bool | None = None
    sort_by_popularity: bool | None = None
    local_day: int | None = None
    local_time: str | None = None


class TipsOptions(QueryOptions):
    # sort: friends, recent or popular
    sort: str | None = None
    limit: int | None = None
    offset: int | None = None
    locale: str | None = None


class HoursOptions(QueryOptions):
    locale: str | None = None


class VenueDetailsOptions(QueryOptions):
    locale: str | None = None


class CategoriesOptions(QueryOptions):
    locale: str | None = None
