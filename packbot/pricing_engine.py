"""
Bulk pricing - resolves the discount tier for an order quantity and
prices the order from the pre-discount unit cost.

Pure math. The total is always computed from the rounded unit price so the
order total matches the unit price a buyer sees.
"""

import math
from typing import Optional

from .calculators.material_lookup import MaterialLookup


class PricingEngine:
    """Applies the discount schedule from a MaterialLookup."""

    def __init__(self, lookup: Optional[MaterialLookup] = None):
        self.lookup = lookup or MaterialLookup()

    def resolve_discount_tier(self, quantity: int) -> tuple:
        """
        Returns (threshold, multiplier) for the largest threshold that does
        not exceed quantity. Quantities below every threshold get the lowest tier.
        """
        tiers = self.lookup.discount_tiers
        thresholds = list(tiers)
        selected = thresholds[0]
        for threshold in thresholds:
            if threshold <= quantity:
                selected = threshold
            else:
                break
        return selected, tiers[selected]

    @staticmethod
    def discount_percent(multiplier: float) -> int:
        """Whole-number percentage off list price, .5 rounds up (0.875 -> 13)."""
        return math.floor((1 - multiplier) * 100 + 0.5)

    def price_order(self, unit_cost_before_discount: float, quantity: int) -> dict:
        """
        Price an order.

        Returns:
            {
                discount_tier: int,
                discount_multiplier: float,
                discount_pct: int,
                unit_cost: float,    # rounded to cents
                total_cost: float,   # unit_cost x quantity
            }
        """
        tier, multiplier = self.resolve_discount_tier(quantity)
        unit_cost = round(unit_cost_before_discount * multiplier, 2)
        return {
            "discount_tier": tier,
            "discount_multiplier": multiplier,
            "discount_pct": self.discount_percent(multiplier),
            "unit_cost": unit_cost,
            "total_cost": round(unit_cost * quantity, 2),
        }
