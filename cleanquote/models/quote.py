"""
Cleaning Quote Data Models
Defines the schema for facility inputs and calculated quote results
"""

import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
from enum import Enum

from cleanquote.errors import InvalidRange


class FlooringType(Enum):
    TILE = "tile"
    RUBBER = "rubber"
    CARPET = "carpet"
    HARDWOOD = "hardwood"
    MIXED = "mixed"
    CONCRETE = "concrete"
    SPECIALTY = "specialty"


class BathroomType(Enum):
    STANDARD = "standard"
    COMMERCIAL = "commercial"
    LOCKER = "locker"


class BuildingAge(Enum):
    NEW = "0-5"
    MID = "5-15"
    OLD = "15+"


class Difficulty(Enum):
    EASY = "easy"
    DIFFICULT = "difficult"
    EXTREME = "extreme"


class FootTraffic(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class PetHairOption(Enum):
    NONE = "none"
    PER_SQFT = "perSqft"
    FLAT = "flat"


class ServiceFrequency(Enum):
    ONE_TIME = "one-time"
    MONTHLY = "monthly"
    BIWEEKLY = "biweekly"
    WEEKLY = "weekly"
    DAILY = "daily"


def _enum_value(value):
    return value.value if isinstance(value, Enum) else value


def _number(data: Dict, key: str, name: Optional[str] = None) -> float:
    value = data[key]
    name = name or key
    if isinstance(value, bool):
        raise InvalidRange(name, value, "must be a number")
    try:
        return float(value)
    except OverflowError:
        raise InvalidRange(name, value, "must be a finite number")
    except (TypeError, ValueError):
        raise InvalidRange(name, value, "must be a number")


def _count(data: Dict, key: str, name: Optional[str] = None) -> int:
    number = _number(data, key, name)
    if not math.isfinite(number) or not number.is_integer():
        raise InvalidRange(name or key, data[key], "must be a whole number")
    return int(number)


@dataclass(frozen=True)
class ApplianceCounts:
    """Number of each appliance that needs cleaning"""
    ovens: int = 0
    stoves: int = 0
    fryers: int = 0
    walk_in_fridges: int = 0
    tvs: int = 0

    def to_dict(self) -> Dict:
        return {
            "ovens": self.ovens,
            "stoves": self.stoves,
            "fryers": self.fryers,
            "walk_in_fridges": self.walk_in_fridges,
            "tvs": self.tvs
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'ApplianceCounts':
        return cls(
            ovens=_count(data, "ovens", "appliance_counts.ovens"),
            stoves=_count(data, "stoves", "appliance_counts.stoves"),
            fryers=_count(data, "fryers", "appliance_counts.fryers"),
            walk_in_fridges=_count(data, "walk_in_fridges", "appliance_counts.walk_in_fridges"),
            tvs=_count(data, "tvs", "appliance_counts.tvs")
        )


@dataclass(frozen=True)
class QuoteInput:
    """Complete set of facility parameters for one quote calculation"""

    # Space
    square_footage: float
    flooring_type: FlooringType
    bathroom_type: BathroomType
    bathroom_count: int
    building_age: BuildingAge

    # Site conditions
    difficulty: Difficulty
    foot_traffic: FootTraffic
    high_reach_sqft: float  # sqft above 6ft, not checked against square_footage
    pet_hair_option: PetHairOption
    furniture_affected_sqft: float

    # Appliances, fixtures and add-ons
    appliance_counts: ApplianceCounts
    light_fixtures: int
    trash_bags: int
    soap_dispensers: int
    air_freshener_install: int
    air_freshener_maintenance: int

    # Terms
    service_frequency: ServiceFrequency
    margin_percent: float  # e.g., 35 for 35%

    quoter_name: str = ""

    def to_dict(self) -> Dict:
        """Convert input to dictionary for JSON serialization"""
        return {
            "square_footage": self.square_footage,
            "flooring_type": _enum_value(self.flooring_type),
            "bathroom_type": _enum_value(self.bathroom_type),
            "bathroom_count": self.bathroom_count,
            "building_age": _enum_value(self.building_age),
            "difficulty": _enum_value(self.difficulty),
            "foot_traffic": _enum_value(self.foot_traffic),
            "high_reach_sqft": self.high_reach_sqft,
            "pet_hair_option": _enum_value(self.pet_hair_option),
            "furniture_affected_sqft": self.furniture_affected_sqft,
            "appliance_counts": self.appliance_counts.to_dict(),
            "light_fixtures": self.light_fixtures,
            "trash_bags": self.trash_bags,
            "soap_dispensers": self.soap_dispensers,
            "air_freshener_install": self.air_freshener_install,
            "air_freshener_maintenance": self.air_freshener_maintenance,
            "service_frequency": _enum_value(self.service_frequency),
            "margin_percent": self.margin_percent,
            "quoter_name": self.quoter_name
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'QuoteInput':
        """
        Create input from dictionary
        Enum fields are kept as received; compute_quote validates them
        """
        return cls(
            square_footage=_number(data, "square_footage"),
            flooring_type=data["flooring_type"],
            bathroom_type=data["bathroom_type"],
            bathroom_count=_count(data, "bathroom_count"),
            building_age=data["building_age"],
            difficulty=data["difficulty"],
            foot_traffic=data["foot_traffic"],
            high_reach_sqft=_number(data, "high_reach_sqft"),
            pet_hair_option=data["pet_hair_option"],
            furniture_affected_sqft=_number(data, "furniture_affected_sqft"),
            appliance_counts=ApplianceCounts.from_dict(data["appliance_counts"]),
            light_fixtures=_count(data, "light_fixtures"),
            trash_bags=_count(data, "trash_bags"),
            soap_dispensers=_count(data, "soap_dispensers"),
            air_freshener_install=_count(data, "air_freshener_install"),
            air_freshener_maintenance=_count(data, "air_freshener_maintenance"),
            service_frequency=data["service_frequency"],
            margin_percent=_number(data, "margin_percent"),
            quoter_name=str(data.get("quoter_name") or "")
        )


@dataclass(frozen=True)
class LineItem:
    """A single named component of the cost breakdown"""
    label: str
    amount: float

    def to_dict(self) -> Dict:
        return {"label": self.label, "amount": self.amount}


@dataclass(frozen=True)
class QuoteResult:
    """Result of a quote calculation; amounts are unrounded"""
    line_items: Tuple[LineItem, ...]
    subtotal: float
    service_frequency_discount: float
    area_discount: float
    total_after_discounts: float
    margin: float
    final_quote: float

    # Rates behind the totals, kept for presentation
    service_frequency_discount_rate: float = 0.0
    area_discount_rate: float = 0.0
    margin_percent: float = 0.0

    def nonzero_line_items(self) -> List[LineItem]:
        """Line items with a nonzero amount, in breakdown order"""
        return [item for item in self.line_items if item.amount != 0]

    def line_item(self, label: str) -> Optional[LineItem]:
        for item in self.line_items:
            if item.label == label:
                return item
        return None

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        return {
            "line_items": [item.to_dict() for item in self.line_items],
            "subtotal": self.subtotal,
            "service_frequency_discount": self.service_frequency_discount,
            "area_discount": self.area_discount,
            "total_after_discounts": self.total_after_discounts,
            "margin": self.margin,
            "final_quote": self.final_quote,
            "service_frequency_discount_rate": self.service_frequency_discount_rate,
            "area_discount_rate": self.area_discount_rate,
            "margin_percent": self.margin_percent
        }
