"""
Utility functions for formatting, display names, payload checks and quote files
"""

import json
import logging
from typing import Dict, List, Optional

from cleanquote import rates
from cleanquote.models.quote import (
    ApplianceCounts, BathroomType, BuildingAge, Difficulty, FlooringType, FootTraffic,
    PetHairOption, QuoteInput, QuoteResult, ServiceFrequency
)

logger = logging.getLogger(__name__)


FLOORING_NAMES = {
    'tile': 'Tile (standard)',
    'rubber': 'Rubber',
    'carpet': 'Carpet',
    'hardwood': 'Hardwood',
    'mixed': 'Multiple floor types',
    'concrete': 'Concrete/warehouse/parkade',
    'specialty': 'Specialty/Post-reno cleaning',
}

BATHROOM_NAMES = {
    'standard': 'Standard',
    'commercial': 'Commercial/Gym',
    'locker': 'Locker-room w/ showers',
}

BUILDING_AGE_NAMES = {
    '0-5': '0-5 years',
    '5-15': '5-15 years',
    '15+': '15+ years',
}

DIFFICULTY_NAMES = {
    'easy': 'Easy',
    'difficult': 'Difficult',
    'extreme': 'Extreme',
}

FOOT_TRAFFIC_NAMES = {
    'low': 'Low (0-50 daily)',
    'medium': 'Medium (50-200 daily)',
    'high': 'High (200+ daily)',
}

PET_HAIR_NAMES = {
    'none': 'None',
    'perSqft': 'Per sqft',
    'flat': 'Flat rate',
}

SERVICE_FREQUENCY_NAMES = {
    'one-time': 'One-time',
    'monthly': 'Monthly',
    'biweekly': 'Biweekly',
    'weekly': 'Weekly',
    'daily': 'Daily',
}

REQUIRED_FIELDS = [
    'square_footage', 'flooring_type', 'bathroom_type', 'bathroom_count',
    'building_age', 'difficulty', 'foot_traffic', 'high_reach_sqft',
    'pet_hair_option', 'furniture_affected_sqft', 'appliance_counts',
    'light_fixtures', 'trash_bags', 'soap_dispensers', 'air_freshener_install',
    'air_freshener_maintenance', 'service_frequency', 'margin_percent'
]

APPLIANCE_FIELDS = ['ovens', 'stoves', 'fryers', 'walk_in_fridges', 'tvs']


def format_currency(amount: float) -> str:
    """
    Format currency amount for display
    """
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_percent(rate: float) -> str:
    """
    Format a fractional rate (0.15) as a percentage (15%)
    """
    return f"{rate * 100:g}%"


def _display_name(names: Dict[str, str], value) -> str:
    value = getattr(value, 'value', value)
    return names.get(str(value), str(value).title())


def get_flooring_display_name(flooring_type) -> str:
    return _display_name(FLOORING_NAMES, flooring_type)


def get_bathroom_display_name(bathroom_type) -> str:
    return _display_name(BATHROOM_NAMES, bathroom_type)


def get_building_age_display_name(building_age) -> str:
    return _display_name(BUILDING_AGE_NAMES, building_age)


def get_service_frequency_display_name(frequency) -> str:
    return _display_name(SERVICE_FREQUENCY_NAMES, frequency)


def default_quote_input() -> QuoteInput:
    """
    Starting state of a blank quote form
    """
    return QuoteInput(
        square_footage=0.0,
        flooring_type=FlooringType.TILE,
        bathroom_type=BathroomType.STANDARD,
        bathroom_count=0,
        building_age=BuildingAge.NEW,
        difficulty=Difficulty.EASY,
        foot_traffic=FootTraffic.LOW,
        high_reach_sqft=0.0,
        pet_hair_option=PetHairOption.NONE,
        furniture_affected_sqft=0.0,
        appliance_counts=ApplianceCounts(),
        light_fixtures=0,
        trash_bags=0,
        soap_dispensers=0,
        air_freshener_install=0,
        air_freshener_maintenance=0,
        service_frequency=ServiceFrequency.ONE_TIME,
        margin_percent=float(rates.DEFAULT_MARGIN_PERCENT)
    )


def validate_quote_payload(data) -> List[str]:
    """
    Validate quote request data and return list of errors
    Only checks presence; values are checked by the quote engine
    """
    if not isinstance(data, dict):
        return ["Request body must be a JSON object"]

    errors = []

    for field in REQUIRED_FIELDS:
        if field not in data:
            errors.append(f"Missing required field: {field}")

    appliances = data.get('appliance_counts')
    if 'appliance_counts' in data:
        if not isinstance(appliances, dict):
            errors.append("appliance_counts must be an object")
        else:
            for field in APPLIANCE_FIELDS:
                if field not in appliances:
                    errors.append(f"Missing required field: appliance_counts.{field}")

    return errors


def get_option_catalog() -> Dict:
    """
    Every selectable option with its display name and rate, for building quote forms
    """
    def options(names, table):
        return [
            {'value': member.value, 'label': names[member.value], 'rate': rate}
            for member, rate in table.items()
        ]

    return {
        'flooring_type': options(FLOORING_NAMES, rates.FLOORING_RATES),
        'bathroom_type': options(BATHROOM_NAMES, rates.BATHROOM_RATES),
        'building_age': options(BUILDING_AGE_NAMES, rates.BUILDING_AGE_ADDERS),
        'difficulty': options(DIFFICULTY_NAMES, rates.DIFFICULTY_ADDERS),
        'foot_traffic': options(FOOT_TRAFFIC_NAMES, rates.FOOT_TRAFFIC_ADDERS),
        'service_frequency': options(SERVICE_FREQUENCY_NAMES, rates.SERVICE_FREQUENCY_DISCOUNTS),
        'pet_hair_option': [
            {'value': PetHairOption.NONE.value, 'label': PET_HAIR_NAMES['none'], 'rate': 0.0},
            {'value': PetHairOption.PER_SQFT.value, 'label': PET_HAIR_NAMES['perSqft'],
             'rate': rates.PET_HAIR_PER_SQFT_RATE},
            {'value': PetHairOption.FLAT.value, 'label': PET_HAIR_NAMES['flat'],
             'rate': rates.PET_HAIR_FLAT_FEE},
        ],
        'unit_rates': {
            'high_reach_sqft': rates.HIGH_REACH_RATE,
            'furniture_affected_sqft': rates.FURNITURE_MOVE_RATE,
            'ovens': rates.OVEN_RATE,
            'stoves': rates.STOVE_RATE,
            'fryers': rates.FRYER_RATE,
            'walk_in_fridges': rates.WALK_IN_FRIDGE_RATE,
            'tvs': rates.TV_RATE,
            'light_fixtures': rates.LIGHT_FIXTURE_RATE,
            'trash_bags': rates.TRASH_BAG_RATE,
            'soap_dispensers': rates.SOAP_DISPENSER_RATE,
            'air_freshener_install': rates.AIR_FRESHENER_INSTALL_RATE,
            'air_freshener_maintenance': rates.AIR_FRESHENER_MAINTENANCE_RATE,
        },
        'area_discount_tiers': [
            {'min_sqft': minimum, 'rate': rate}
            for minimum, rate in sorted(rates.AREA_DISCOUNT_TIERS)
        ],
        'margin_percent': {
            'min': rates.MARGIN_MIN_PERCENT,
            'max': rates.MARGIN_MAX_PERCENT,
            'step': rates.MARGIN_STEP_PERCENT,
            'default': rates.DEFAULT_MARGIN_PERCENT,
            'recommended': list(rates.MARGIN_RECOMMENDED_PERCENT),
        },
    }


def save_quote_to_json(quote_input: QuoteInput, result: QuoteResult, output_path: str) -> bool:
    """
    Save a quote input and its result to a JSON file
    """
    try:
        with open(output_path, 'w', encoding='utf-8') as file:
            json.dump({'input': quote_input.to_dict(), 'quote': result.to_dict()}, file, indent=2)
        return True
    except OSError as e:
        logger.error("Error saving quote to %s: %s", output_path, e)
        return False


def load_quote_input(file_path: str) -> Optional[QuoteInput]:
    """
    Load a quote input from a JSON file written by save_quote_to_json
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as file:
            data = json.load(file)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Error loading quote input from %s: %s", file_path, e)
        return None

    return QuoteInput.from_dict(data.get('input', data))
