"""Tests for the command-line example in examples/venues.py."""

from __future__ import annotations

import importlib.util
from pathlib import Path

import pytest

from foursquare.config import Settings

_VENUES = Path(__file__).resolve().parents[1] / "examples" / "venues.py"


@pytest.fixture()
def venues():
    spec = importlib.util.spec_from_file_location("venues_example", _VENUES)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_unknown_feature_code_is_a_usage_error(venues, capsys):
    with pytest.raises(SystemExit) as exc_info:
        venues.main(["recommendations", "--near", "Tokyo", "--feature", "6"])
    assert exc_info.value.code == 2
    assert "invalid Feature value: '6'" in capsys.readouterr().err


def test_known_feature_code_is_accepted(venues, clean_env):
    clean_env.setattr(venues, "settings", Settings())
    clean_env.setattr(venues, "setup_logging", lambda *args: None)
    # parses, then stops for lack of credentials
    assert venues.main(["recommendations", "--near", "Tokyo", "--feature", "13"]) == 2
