"""
Core Quote Engine Algorithm
Implements the commercial cleaning quote calculation from facility parameters
"""

import logging
import math
from enum import Enum
from typing import Dict, List, Tuple, Type

from cleanquote import rates
from cleanquote.errors import InvalidEnumValue, InvalidRange
from cleanquote.models.quote import (
    BathroomType, BuildingAge, Difficulty, FlooringType, FootTraffic, LineItem,
    PetHairOption, QuoteInput, QuoteResult, ServiceFrequency
)

logger = logging.getLogger(__name__)


ENUM_FIELDS: Tuple[Tuple[str, Type[Enum]], ...] = (
    ("flooring_type", FlooringType),
    ("bathroom_type", BathroomType),
    ("building_age", BuildingAge),
    ("difficulty", Difficulty),
    ("foot_traffic", FootTraffic),
    ("pet_hair_option", PetHairOption),
    ("service_frequency", ServiceFrequency),
)

AREA_FIELDS = ("square_footage", "high_reach_sqft", "furniture_affected_sqft", "margin_percent")

COUNT_FIELDS = (
    "bathroom_count", "light_fixtures", "trash_bags", "soap_dispensers",
    "air_freshener_install", "air_freshener_maintenance",
)

APPLIANCE_FIELDS = ("ovens", "stoves", "fryers", "walk_in_fridges", "tvs")


def parse_enum(field: str, enum_cls: Type[Enum], value) -> Enum:
    """
    Resolve an enum member from a member or its string value
    Raises InvalidEnumValue for anything else
    """
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidEnumValue(field, value, [member.value for member in enum_cls])


def check_amount(field: str, value) -> float:
    """Validate a non-negative, finite number"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidRange(field, value, "must be a number")
    try:
        amount = float(value)
    except OverflowError:
        raise InvalidRange(field, value, "must be a finite number")
    if not math.isfinite(amount):
        raise InvalidRange(field, value, "must be a finite number")
    if amount < 0:
        raise InvalidRange(field, value)
    return amount


def check_count(field: str, value) -> int:
    """Validate a non-negative whole number"""
    amount = check_amount(field, value)
    if not amount.is_integer():
        raise InvalidRange(field, value, "must be a whole number")
    return int(amount)


def validate_quote_input(quote_input: QuoteInput) -> Dict:
    """
    Check every field before any pricing happens
    Returns the normalized values keyed by field name
    """
    values = {}

    for field, enum_cls in ENUM_FIELDS:
        values[field] = parse_enum(field, enum_cls, getattr(quote_input, field))

    for field in AREA_FIELDS:
        values[field] = check_amount(field, getattr(quote_input, field))

    for field in COUNT_FIELDS:
        values[field] = check_count(field, getattr(quote_input, field))

    for field in APPLIANCE_FIELDS:
        name = f"appliance_counts.{field}"
        values[name] = check_count(name, getattr(quote_input.appliance_counts, field))

    return values


def get_service_frequency_discount_rate(frequency) -> float:
    """Discount rate for how often the service recurs"""
    frequency = parse_enum("service_frequency", ServiceFrequency, frequency)
    return rates.SERVICE_FREQUENCY_DISCOUNTS[frequency]


def get_area_discount_rate(square_footage: float) -> float:
    """
    Area discount tier for the total square footage
    Tiers include their lower bound and exclude their upper bound
    """
    square_footage = check_amount("square_footage", square_footage)
    for minimum_sqft, rate in rates.AREA_DISCOUNT_TIERS:
        if square_footage >= minimum_sqft:
            return rate
    return 0.0


def calculate_pet_hair_cost(option, square_footage: float) -> float:
    """Pet hair removal: per sqft of total area, a flat fee, or nothing"""
    option = parse_enum("pet_hair_option", PetHairOption, option)
    if option is PetHairOption.PER_SQFT:
        return check_amount("square_footage", square_footage) * rates.PET_HAIR_PER_SQFT_RATE
    elif option is PetHairOption.FLAT:
        return rates.PET_HAIR_FLAT_FEE
    else:
        return 0.0


def _build_line_items(values: Dict) -> List[LineItem]:
    sqft = values["square_footage"]

    return [
        LineItem("Floor Cleaning", sqft * rates.FLOORING_RATES[values["flooring_type"]]),
        LineItem("Bathrooms", values["bathroom_count"] * rates.BATHROOM_RATES[values["bathroom_type"]]),
        LineItem("Building Age", sqft * rates.BUILDING_AGE_ADDERS[values["building_age"]]),
        LineItem("Difficulty", sqft * rates.DIFFICULTY_ADDERS[values["difficulty"]]),
        LineItem("Foot Traffic", sqft * rates.FOOT_TRAFFIC_ADDERS[values["foot_traffic"]]),
        LineItem("High-reach Areas", values["high_reach_sqft"] * rates.HIGH_REACH_RATE),
        LineItem("Pet Hair Removal", calculate_pet_hair_cost(values["pet_hair_option"], sqft)),
        LineItem("Furniture Moving", values["furniture_affected_sqft"] * rates.FURNITURE_MOVE_RATE),
        LineItem("Ovens", values["appliance_counts.ovens"] * rates.OVEN_RATE),
        LineItem("Stoves", values["appliance_counts.stoves"] * rates.STOVE_RATE),
        LineItem("Fryers", values["appliance_counts.fryers"] * rates.FRYER_RATE),
        LineItem("Walk-in Fridges", values["appliance_counts.walk_in_fridges"] * rates.WALK_IN_FRIDGE_RATE),
        LineItem("TVs", values["appliance_counts.tvs"] * rates.TV_RATE),
        LineItem("Light Fixtures", values["light_fixtures"] * rates.LIGHT_FIXTURE_RATE),
        LineItem("Trash Removal", values["trash_bags"] * rates.TRASH_BAG_RATE),
        LineItem("Soap Dispensers", values["soap_dispensers"] * rates.SOAP_DISPENSER_RATE),
        LineItem("Air Freshener Install", values["air_freshener_install"] * rates.AIR_FRESHENER_INSTALL_RATE),
        LineItem("Air Freshener Maintenance",
                 values["air_freshener_maintenance"] * rates.AIR_FRESHENER_MAINTENANCE_RATE),
    ]


def calculate_line_items(quote_input: QuoteInput) -> List[LineItem]:
    """All 18 line items in breakdown order, zero amounts included"""
    return _build_line_items(validate_quote_input(quote_input))


def compute_quote(quote_input: QuoteInput) -> QuoteResult:
    """
    Main quote calculation function
    Validates the whole input first, so a bad field never yields a partial result
    """
    values = validate_quote_input(quote_input)

    # 1. Line items
    line_items = _build_line_items(values)

    # 2. Subtotal
    subtotal = sum(item.amount for item in line_items)

    # 3. Discounts, both taken from the same subtotal
    frequency_rate = rates.SERVICE_FREQUENCY_DISCOUNTS[values["service_frequency"]]
    area_rate = get_area_discount_rate(values["square_footage"])
    service_frequency_discount = subtotal * frequency_rate
    area_discount = subtotal * area_rate
    total_after_discounts = subtotal - service_frequency_discount - area_discount

    # 4. Margin
    margin = total_after_discounts * values["margin_percent"] / 100
    final_quote = total_after_discounts + margin

    logger.debug(
        "Computed quote: subtotal=%.2f discounts=%.2f/%.2f margin=%.2f final=%.2f",
        subtotal, service_frequency_discount, area_discount, margin, final_quote
    )

    return QuoteResult(
        line_items=tuple(line_items),
        subtotal=subtotal,
        service_frequency_discount=service_frequency_discount,
        area_discount=area_discount,
        total_after_discounts=total_after_discounts,
        margin=margin,
        final_quote=final_quote,
        service_frequency_discount_rate=frequency_rate,
        area_discount_rate=area_rate,
        margin_percent=values["margin_percent"]
    )
