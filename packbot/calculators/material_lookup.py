"""
Packaging reference tables and the lookup that wraps them.

Three static tables drive every calculation:
1. FRAGILITY_PROFILES - padding per side for fragility levels 1-5
2. BOX_STOCK / CUSHIONING_MATERIALS / FINISHING_SUPPLIES - the material catalog
3. DISCOUNT_TIERS - bulk pricing multipliers keyed by minimum quantity

Prices are per unit (box, insert, tape run, label) unless noted.
Cushioning costs are per sq ft of coverage. Based on Uline pricing (2025).
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional


@dataclass(frozen=True)
class FragilityProfile:
    level: int
    label: str
    padding: float          # inches of cushioning added to each side
    protection_need: str


@dataclass(frozen=True)
class BoxStock:
    key: str
    name: str
    strength: str           # display only
    base_cost: float
    size_multiplier: float


@dataclass(frozen=True)
class CushioningMaterial:
    key: str
    name: str
    cost: float
    coverage: float


@dataclass(frozen=True)
class Supply:
    key: str
    name: str
    cost: float


FRAGILITY_PROFILES: Mapping[int, FragilityProfile] = MappingProxyType({
    1: FragilityProfile(1, "Very Low (Books, Clothing, Non-fragile items)", 0.5,
                        "Minimal protection needed"),
    2: FragilityProfile(2, "Low (Small electronics, Toys)", 1.0,
                        "Basic protection required"),
    3: FragilityProfile(3, "Medium (Glassware, Medium electronics)", 1.8,
                        "Standard cushioning needed"),
    4: FragilityProfile(4, "High (Large electronics, Artwork)", 2.5,
                        "Enhanced protection required"),
    5: FragilityProfile(5, "Very High (Precision instruments, Antiques)", 3.2,
                        "Maximum protection essential"),
})

BOX_STOCK: Mapping[str, BoxStock] = MappingProxyType({
    "single_wall": BoxStock("single_wall", "Single Wall Corrugated (200 lb test)",
                            "200 lb test Single Wall", 0.85, 0.12),
    "double_wall": BoxStock("double_wall", "Double Wall Corrugated (275 lb test)",
                            "275 lb test Double Wall", 1.45, 0.18),
    "heavy_duty": BoxStock("heavy_duty", "Heavy Duty Double Wall (500 lb test)",
                           "500 lb test Heavy Duty", 2.25, 0.25),
})

CUSHIONING_MATERIALS: Mapping[str, CushioningMaterial] = MappingProxyType({
    "bubble_wrap": CushioningMaterial("bubble_wrap", 'Bubble Wrap (3/16" small bubble)', 0.35, 2.0),
    "air_bubble": CushioningMaterial("air_bubble", 'Air Bubble Cushioning (1/2" large bubble)', 0.45, 1.8),
    "paper_fill": CushioningMaterial("paper_fill", "Crinkle Paper Fill", 0.15, 3.0),
    "corrugated_inserts": CushioningMaterial("corrugated_inserts", "Corrugated Inserts/Dividers", 0.65, 1.0),
    "foam_inserts": CushioningMaterial("foam_inserts", "Custom Foam Inserts", 1.25, 1.0),
    "void_fill": CushioningMaterial("void_fill", "Biodegradable Void Fill", 0.25, 2.5),
})

FINISHING_SUPPLIES: Mapping[str, Supply] = MappingProxyType({
    "packing_tape": Supply("packing_tape", '2" Packing Tape', 0.08),
    "labels": Supply("labels", "Shipping Labels", 0.05),
})

# Minimum quantity -> price multiplier
DISCOUNT_TIERS: Mapping[int, float] = MappingProxyType({
    1: 1.0,
    25: 0.95,
    100: 0.88,
    250: 0.82,
    500: 0.76,
    1000: 0.70,
    2500: 0.65,
})


def validate_discount_tiers(tiers: Mapping[int, float]) -> None:
    """
    Raise ValueError unless thresholds ascend, multipliers strictly descend,
    and the lowest tier is 1 unit at full price.
    """
    if not tiers:
        raise ValueError("Discount schedule is empty")
    thresholds = sorted(tiers)
    if thresholds[0] != 1 or tiers[1] != 1.0:
        raise ValueError("Discount schedule must start at 1 unit with multiplier 1.0")
    for lower, upper in zip(thresholds, thresholds[1:]):
        if tiers[upper] >= tiers[lower]:
            raise ValueError(
                f"Discount multiplier for {upper} units ({tiers[upper]}) must be "
                f"lower than for {lower} units ({tiers[lower]})"
            )
    for threshold, multiplier in tiers.items():
        if not 0 < multiplier <= 1.0:
            raise ValueError(f"Discount multiplier for {threshold} units out of range: {multiplier}")


class MaterialLookup:
    """
    Reads the packaging reference tables.

    Every table can be replaced at construction so calculators and tests
    can run against a different catalog without touching module state.
    """

    def __init__(self,
                 fragility_profiles: Optional[Mapping[int, FragilityProfile]] = None,
                 box_stock: Optional[Mapping[str, BoxStock]] = None,
                 cushioning: Optional[Mapping[str, CushioningMaterial]] = None,
                 supplies: Optional[Mapping[str, Supply]] = None,
                 discount_tiers: Optional[Mapping[int, float]] = None):
        self.fragility_profiles = fragility_profiles or FRAGILITY_PROFILES
        self.box_stock = box_stock or BOX_STOCK
        self.cushioning = cushioning or CUSHIONING_MATERIALS
        self.supplies = supplies or FINISHING_SUPPLIES
        tiers = discount_tiers or DISCOUNT_TIERS
        validate_discount_tiers(tiers)
        self.discount_tiers = MappingProxyType(dict(sorted(tiers.items())))

    def get_fragility_profile(self, level: int) -> FragilityProfile:
        """Raises KeyError for levels outside the table."""
        return self.fragility_profiles[level]

    def get_box_stock(self, key: str) -> BoxStock:
        return self.box_stock[key]

    def get_cushioning(self, key: str) -> CushioningMaterial:
        return self.cushioning[key]

    def get_supply(self, key: str) -> Supply:
        return self.supplies[key]
