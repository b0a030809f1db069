"""
Shared test fixtures for the cleaning quote tests
"""

import dataclasses

import pytest

from cleanquote.config import Settings
from cleanquote.models.quote import (
    ApplianceCounts, BathroomType, BuildingAge, Difficulty, FlooringType, FootTraffic,
    PetHairOption, QuoteInput, ServiceFrequency
)


def create_sample_quote_input(**overrides) -> QuoteInput:
    """5,000 sqft tile space with two standard bathrooms, nothing else billable"""
    quote_input = QuoteInput(
        square_footage=5000,
        flooring_type=FlooringType.TILE,
        bathroom_type=BathroomType.STANDARD,
        bathroom_count=2,
        building_age=BuildingAge.NEW,
        difficulty=Difficulty.EASY,
        foot_traffic=FootTraffic.LOW,
        high_reach_sqft=0,
        pet_hair_option=PetHairOption.NONE,
        furniture_affected_sqft=0,
        appliance_counts=ApplianceCounts(),
        light_fixtures=0,
        trash_bags=0,
        soap_dispensers=0,
        air_freshener_install=0,
        air_freshener_maintenance=0,
        service_frequency=ServiceFrequency.ONE_TIME,
        margin_percent=35
    )
    return dataclasses.replace(quote_input, **overrides)


def sample_payload(**overrides) -> dict:
    payload = create_sample_quote_input().to_dict()
    payload.update(overrides)
    return payload


@pytest.fixture
def sample_input():
    return create_sample_quote_input()


@pytest.fixture
def busy_input():
    """Every line item nonzero, recurring weekly service"""
    return create_sample_quote_input(
        square_footage=12000,
        flooring_type=FlooringType.MIXED,
        bathroom_type=BathroomType.LOCKER,
        bathroom_count=3,
        building_age=BuildingAge.OLD,
        difficulty=Difficulty.EXTREME,
        foot_traffic=FootTraffic.HIGH,
        high_reach_sqft=800,
        pet_hair_option=PetHairOption.PER_SQFT,
        furniture_affected_sqft=1500,
        appliance_counts=ApplianceCounts(ovens=2, stoves=3, fryers=1, walk_in_fridges=1, tvs=4),
        light_fixtures=40,
        trash_bags=10,
        soap_dispensers=6,
        air_freshener_install=2,
        air_freshener_maintenance=3,
        service_frequency=ServiceFrequency.WEEKLY,
        margin_percent=40,
        quoter_name="Dana Reyes"
    )


@pytest.fixture
def settings(tmp_path):
    return Settings(company_name="Sparkle Commercial Cleaning", pdf_output_dir=str(tmp_path / "pdfs"))


@pytest.fixture
def client(settings):
    from cleanquote.app import create_app

    app = create_app(settings)
    app.config['TESTING'] = True
    return app.test_client()
