"""
Commercial Cleaning Quote Generator

Prices cleaning work from facility parameters: per-sqft and per-unit line items,
service frequency and area discounts, then a margin on top.
"""

from cleanquote.errors import InvalidEnumValue, InvalidRange, QuoteError
from cleanquote.models.quote import (
    ApplianceCounts, BathroomType, BuildingAge, Difficulty, FlooringType, FootTraffic,
    LineItem, PetHairOption, QuoteInput, QuoteResult, ServiceFrequency
)
from cleanquote.quote_engine import compute_quote

__version__ = "1.0.0"

__all__ = [
    "compute_quote", "QuoteInput", "QuoteResult", "LineItem", "ApplianceCounts",
    "FlooringType", "BathroomType", "BuildingAge", "Difficulty", "FootTraffic",
    "PetHairOption", "ServiceFrequency", "QuoteError", "InvalidEnumValue", "InvalidRange",
]
