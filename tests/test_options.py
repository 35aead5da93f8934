"""Tests for foursquare.options — builders and query-string encoding."""

from __future__ import annotations

import pydantic
import pytest

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

_ALL_OPTIONS = [
    SearchOptions,
    ExploreOptions,
    SuggestOptions,
    RecommendationsOptions,
    TipsOptions,
    HoursOptions,
    VenueDetailsOptions,
    CategoriesOptions,
]


# ---------------------------------------------------------------------------
# Empty / absent fields
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("options_cls", _ALL_OPTIONS)
def test_all_absent_serializes_empty(options_cls):
    options = options_cls()
    assert options.to_params() == []
    assert options.to_query() == ""


@pytest.mark.parametrize("options_cls", _ALL_OPTIONS)
def test_builder_without_setters_serializes_empty(options_cls):
    assert options_cls.builder().build().to_query() == ""


def test_empty_strings_are_omitted():
    options = SearchOptions(ll="", near="", query="coffee")
    assert options.to_params() == [("query", "coffee")]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------


def test_near_uses_form_encoding():
    options = SearchOptions.builder().near("foo bar").build()
    assert options.to_query() == "near=foo+bar"


def test_wire_names_are_camel_case():
    options = SearchOptions(category_id="abc", ll_acc=10.5, provider_id="p", linked_id="l")
    assert options.to_params() == [
        ("categoryId", "abc"),
        ("llAcc", "10.5"),
        ("providerId", "p"),
        ("linkedId", "l"),
    ]


def test_declaration_order_is_kept():
    options = SearchOptions(query="coffee", ll="37.5665,126.9780", limit=5)
    assert [key for key, _ in options.to_params()] == ["ll", "query", "limit"]


def test_list_fields_are_comma_joined():
    options = RecommendationsOptions(prices=[1, 2, 3])
    assert dict(options.to_params())["prices"] == "1,2,3"


def test_query_string_percent_encodes_list_delimiter():
    options = RecommendationsOptions(features=[Feature.WIFI, Feature.DOG_FRIENDLY])
    assert options.to_params() == [("features", "3,13")]
    assert options.to_query() == "features=3%2C13"


def test_explore_price_is_comma_joined():
    options = ExploreOptions(near="Seoul", price=(1, 2))
    assert dict(options.to_params())["price"] == "1,2"


def test_features_use_wire_codes():
    options = RecommendationsOptions(
        ll="40.7686834,-73.9539324",
        features=[Feature.TAKES_CREDIT_CARDS, Feature.WIFI, Feature.DOG_FRIENDLY],
    )
    assert dict(options.to_params())["features"] == "1,3,13"


def test_feature_codes_skip_unused_numbers():
    codes = {feature.value for feature in Feature}
    assert codes == {str(n) for n in range(16)} - {"6", "11", "12"}
    assert Feature.DOG_FRIENDLY.value == "13"


def test_booleans_encode_as_one_and_zero():
    options = ExploreOptions(open_now=True, venue_photos=False, sort_by_distance=True)
    params = dict(options.to_params())
    assert params["openNow"] == "1"
    assert params["venuePhotos"] == "0"
    assert params["sortByDistance"] == "1"


def test_intent_encodes_as_string():
    options = SearchOptions(near="Chicago, IL", intent=Intent.BROWSE)
    assert ("intent", "browse") in options.to_params()


def test_intent_default_is_checkin():
    assert Intent.default() is Intent.CHECKIN
    assert Intent.default().value == "checkin"


def test_tips_options():
    options = TipsOptions(sort="recent", limit=20, offset=40)
    assert options.to_query() == "sort=recent&limit=20&offset=40"


def test_locale_options():
    assert HoursOptions(locale="fr").to_query() == "locale=fr"
    assert VenueDetailsOptions(locale="ko").to_query() == "locale=ko"


# ---------------------------------------------------------------------------
# Builder
# ---------------------------------------------------------------------------


def test_builder_chains_setters():
    options = (
        SuggestOptions.builder()
        .ll("37.5665,126.9780")
        .query("coffee")
        .limit(5)
        .build()
    )
    assert options == SuggestOptions(ll="37.5665,126.9780", query="coffee", limit=5)


def test_builder_converts_numeric_strings():
    options = SearchOptions.builder().limit("10").build()
    assert options.limit == 10


def test_builder_rejects_malformed_numbers():
    with pytest.raises(pydantic.ValidationError):
        SearchOptions.builder().limit("many").build()


def test_builder_rejects_unknown_option():
    with pytest.raises(AttributeError):
        SearchOptions.builder().sort("recent")


def test_keyword_construction_rejects_unknown_option():
    with pytest.raises(pydantic.ValidationError):
        SearchOptions(sort="recent")


def test_cross_field_rules_not_enforced():
    # neither ll nor near: the API reports this, not the options model
    options = SearchOptions(query="coffee")
    assert options.to_query() == "query=coffee"


def test_options_are_frozen():
    options = SearchOptions(near="Tokyo")
    with pytest.raises(pydantic.ValidationError):
        options.near = "Osaka"  # type: ignore[misc]
