"""
Cleaning rate tables
Every enum-keyed table lists all members so lookups never fall back to a default
"""

from cleanquote.models.quote import (
    BathroomType, BuildingAge, Difficulty, FlooringType, FootTraffic, ServiceFrequency
)


# Per sqft of total area
FLOORING_RATES = {
    FlooringType.TILE: 0.10,
    FlooringType.RUBBER: 0.16,
    FlooringType.CARPET: 0.12,
    FlooringType.HARDWOOD: 0.10,
    FlooringType.MIXED: 0.15,
    FlooringType.CONCRETE: 0.10,
    FlooringType.SPECIALTY: 0.20,
}

# Per bathroom
BATHROOM_RATES = {
    BathroomType.STANDARD: 45.0,
    BathroomType.COMMERCIAL: 70.0,
    BathroomType.LOCKER: 100.0,
}

# Adders, per sqft of total area
BUILDING_AGE_ADDERS = {
    BuildingAge.NEW: 0.0,
    BuildingAge.MID: 0.01,
    BuildingAge.OLD: 0.03,
}

DIFFICULTY_ADDERS = {
    Difficulty.EASY: 0.0,
    Difficulty.DIFFICULT: 0.03,
    Difficulty.EXTREME: 0.07,
}

FOOT_TRAFFIC_ADDERS = {
    FootTraffic.LOW: 0.0,
    FootTraffic.MEDIUM: 0.01,
    FootTraffic.HIGH: 0.03,
}

HIGH_REACH_RATE = 0.06         # per affected sqft
PET_HAIR_PER_SQFT_RATE = 0.03  # per sqft of total area
PET_HAIR_FLAT_FEE = 50.0
FURNITURE_MOVE_RATE = 0.04     # per affected sqft

# Per unit
OVEN_RATE = 40.0
STOVE_RATE = 25.0
FRYER_RATE = 50.0
WALK_IN_FRIDGE_RATE = 80.0
TV_RATE = 5.0
LIGHT_FIXTURE_RATE = 2.0
TRASH_BAG_RATE = 15.0
SOAP_DISPENSER_RATE = 3.0
AIR_FRESHENER_INSTALL_RATE = 30.0
AIR_FRESHENER_MAINTENANCE_RATE = 15.0  # per unit per month

SERVICE_FREQUENCY_DISCOUNTS = {
    ServiceFrequency.ONE_TIME: 0.0,
    ServiceFrequency.MONTHLY: 0.05,
    ServiceFrequency.BIWEEKLY: 0.10,
    ServiceFrequency.WEEKLY: 0.15,
    ServiceFrequency.DAILY: 0.20,
}

# (minimum sqft, rate), highest tier first; lower bound is inclusive
AREA_DISCOUNT_TIERS = (
    (25000, 0.20),
    (10000, 0.15),
    (2000, 0.10),
    (0, 0.0),
)

# Margin slider bounds used by the quote form
MARGIN_MIN_PERCENT = 20
MARGIN_MAX_PERCENT = 60
MARGIN_STEP_PERCENT = 5
MARGIN_RECOMMENDED_PERCENT = (30, 40)
DEFAULT_MARGIN_PERCENT = 35
