from cleanquote.models.quote import (
    ApplianceCounts, BathroomType, BuildingAge, Difficulty, FlooringType, FootTraffic,
    LineItem, PetHairOption, QuoteInput, QuoteResult, ServiceFrequency
)

__all__ = [
    "ApplianceCounts", "BathroomType", "BuildingAge", "Difficulty", "FlooringType",
    "FootTraffic", "LineItem", "PetHairOption", "QuoteInput", "QuoteResult", "ServiceFrequency"
]
