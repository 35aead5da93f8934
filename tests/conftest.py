import pytest

_FS_ENV_VARS = (
    "FS_HOST",
    "FS_API_VERSION",
    "FS_CLIENT_ID",
    "FS_CLIENT_SECRET",
    "FS_OAUTH_TOKEN",
    "FS_TIMEOUT",
    "FS_LOG_FORMAT",
    "FS_LOG_LEVEL",
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no FS_* variables and no .env file in the working directory."""
    for name in _FS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield monkeypatch


@pytest.fixture
def venue_body():
    return {
        "id": "4b63f4c0f964a5209b982ae3",
        "name": "Blue Bottle Coffee",
        "contact": {"phone": "5105551234", "formattedPhone": "(510) 555-1234"},
        "location": {
            "address": "300 Webster St",
            "lat": 37.7956,
            "lng": -122.2772,
            "distance": 120,
            "postalCode": "94607",
            "cc": "US",
            "city": "Oakland",
            "state": "CA",
            "country": "United States",
            "formattedAddress": ["300 Webster St", "Oakland, CA 94607"],
        },
        "categories": [
            {
                "id": "4bf58dd8d48988d1e0931735",
                "name": "Coffee Shop",
                "pluralName": "Coffee Shops",
                "shortName": "Coffee Shop",
                "icon": {
                    "prefix": "https://ss3.4sqi.net/img/categories_v2/food/coffeeshop_",
                    "suffix": ".png",
                },
                "primary": True,
            }
        ],
        "verified": True,
        "referralId": "v-1501600000",
        "hasPerk": False,
    }
