"""
Tests for formatting, display names, payload checks and quote files
"""

import json

import pytest

from cleanquote.models.quote import BuildingAge, FlooringType
from cleanquote.quote_engine import compute_quote
from cleanquote.utils import (
    default_quote_input, format_currency, format_percent, get_building_age_display_name,
    get_flooring_display_name, get_option_catalog, load_quote_input, save_quote_to_json,
    validate_quote_payload
)
from conftest import sample_payload


@pytest.mark.parametrize("amount, expected", [
    (0, "$0.00"),
    (716.85, "$716.85"),
    (1234567.891, "$1,234,567.89"),
    (-59, "-$59.00"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


def test_format_percent():
    assert format_percent(0.1) == "10%"
    assert format_percent(0.15) == "15%"
    assert format_percent(0.0) == "0%"


def test_display_names():
    assert get_flooring_display_name(FlooringType.CONCRETE) == "Concrete/warehouse/parkade"
    assert get_flooring_display_name("specialty") == "Specialty/Post-reno cleaning"
    assert get_building_age_display_name(BuildingAge.OLD) == "15+ years"
    assert get_flooring_display_name("unknown") == "Unknown"


def test_default_quote_input_prices_to_zero():
    quote_input = default_quote_input()
    quote = compute_quote(quote_input)

    assert quote_input.margin_percent == 35
    assert quote.subtotal == 0
    assert quote.final_quote == 0


def test_validate_quote_payload_accepts_complete_payload():
    assert validate_quote_payload(sample_payload()) == []


def test_validate_quote_payload_lists_missing_fields():
    payload = sample_payload()
    del payload["square_footage"]
    del payload["appliance_counts"]["tvs"]

    errors = validate_quote_payload(payload)

    assert "Missing required field: square_footage" in errors
    assert "Missing required field: appliance_counts.tvs" in errors
    assert len(errors) == 2


def test_validate_quote_payload_rejects_non_objects():
    assert validate_quote_payload([1, 2]) == ["Request body must be a JSON object"]
    assert validate_quote_payload(sample_payload(appliance_counts=3)) == [
        "appliance_counts must be an object"
    ]


def test_option_catalog():
    catalog = get_option_catalog()

    flooring = {option["value"]: option for option in catalog["flooring_type"]}
    assert flooring["rubber"]["rate"] == 0.16
    assert flooring["mixed"]["label"] == "Multiple floor types"
    assert [o["value"] for o in catalog["pet_hair_option"]] == ["none", "perSqft", "flat"]
    assert catalog["unit_rates"]["walk_in_fridges"] == 80
    assert catalog["area_discount_tiers"][0] == {"min_sqft": 0, "rate": 0.0}
    assert catalog["margin_percent"] == {
        "min": 20, "max": 60, "step": 5, "default": 35, "recommended": [30, 40]
    }
    json.dumps(catalog)


def test_save_and_load_quote(tmp_path, busy_input):
    path = tmp_path / "quote.json"
    result = compute_quote(busy_input)

    assert save_quote_to_json(busy_input, result, str(path)) is True

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["quote"]["final_quote"] == pytest.approx(result.final_quote)

    loaded = load_quote_input(str(path))
    assert compute_quote(loaded) == result


def test_load_quote_input_missing_file(tmp_path):
    assert load_quote_input(str(tmp_path / "missing.json")) is None


def test_save_quote_to_unwritable_path(tmp_path, sample_input):
    path = tmp_path / "no-such-dir" / "quote.json"
    assert save_quote_to_json(sample_input, compute_quote(sample_input), str(path)) is False
