"""
Packaging calculator - box specification, materials, costs, shipping weight
and sustainability for one product.

Pure function of the normalized product and the reference tables: no I/O,
no shared state. Internal math keeps full precision; rounding happens only
when values are written into the result.
"""

import logging
from typing import Optional

from .base import BaseCalculator
from .material_lookup import MaterialLookup
from ..pricing_engine import PricingEngine

logger = logging.getLogger(__name__)


class PackagingCalculator(BaseCalculator):

    # Box classification - first match wins
    SINGLE_WALL_MAX_WEIGHT = 10
    SINGLE_WALL_MAX_FRAGILITY = 2
    DOUBLE_WALL_MAX_WEIGHT = 40
    DOUBLE_WALL_MAX_FRAGILITY = 4

    # Box price scales with volume per 1000 cu in, never below 1x
    VOLUME_PRICING_UNIT = 1000.0

    # Packaging weight proxy: lbs per cu ft of box + lbs per $ of padding
    PACKAGING_LBS_PER_CU_FT = 0.5
    PACKAGING_LBS_PER_PADDING_DOLLAR = 0.1

    # (max shipping weight, category), inclusive upper bounds
    WEIGHT_CATEGORIES = [
        (1, "Light Package"),
        (10, "Standard Package"),
        (50, "Heavy Package"),
    ]
    FREIGHT_CATEGORY = "Freight Package"

    def __init__(self, lookup: Optional[MaterialLookup] = None,
                 pricing: Optional[PricingEngine] = None):
        self.lookup = lookup or MaterialLookup()
        self.pricing = pricing or PricingEngine(self.lookup)

    def calculate(self, product: dict) -> dict:
        length = product["length"]
        width = product["width"]
        height = product["height"]
        weight = product["weight"]
        fragility = product["fragility_level"]
        quantity = product["quantity"]

        profile = self.lookup.get_fragility_profile(fragility)
        padding = profile.padding

        box_l = length + padding * 2
        box_w = width + padding * 2
        box_h = height + padding * 2
        volume = self.box_volume(box_l, box_w, box_h)
        surface_area = self.box_surface_area(box_l, box_w, box_h)

        box = self.lookup.get_box_stock(self.select_box_type(weight, fragility))
        box_cost = box.base_cost + box.size_multiplier * max(1.0, volume / self.VOLUME_PRICING_UNIT)

        cushioning_items = self.select_cushioning(fragility, volume, surface_area)
        padding_cost = sum(item["cost"] for item in cushioning_items)

        tape = self.lookup.get_supply("packing_tape")
        label = self.lookup.get_supply("labels")

        unit_cost_before_discount = box_cost + padding_cost + tape.cost + label.cost
        pricing = self.pricing.price_order(unit_cost_before_discount, quantity)

        shipping_weight = weight + self.estimate_packaging_weight(volume, padding_cost)
        recycled_content = self.recycled_content_pct(fragility)

        material_items = [self.make_material_item(box.key, box.name, "box", box_cost)]
        material_items.extend(
            self.make_material_item(item["key"], item["name"], "cushioning", item["cost"])
            for item in cushioning_items
        )
        material_items.append(self.make_material_item(tape.key, tape.name, "finishing", tape.cost))
        material_items.append(self.make_material_item(label.key, label.name, "finishing", label.cost))

        logger.debug(
            "Packaging %sx%sx%s in, %s lbs, fragility %s, qty %s -> %s, $%.2f/unit",
            length, width, height, weight, fragility, quantity, box.key, pricing["unit_cost"],
        )

        box_dimensions = {
            "length": round(box_l, 1),
            "width": round(box_w, 1),
            "height": round(box_h, 1),
        }
        return {
            "box_size": f"{box_l:.1f}x{box_w:.1f}x{box_h:.1f}",
            "box_dimensions": box_dimensions,
            "padding_per_side": round(padding, 1),
            "fragility_level": fragility,
            "fragility_label": profile.label,
            "protection_need": profile.protection_need,
            "box_key": box.key,
            "box_type": box.name,
            "box_strength": box.strength,
            "materials": [box.name] + [item["name"] for item in cushioning_items]
                         + ["Packing Tape", "Shipping Labels"],
            "material_items": material_items,
            "box_unit_cost": round(box_cost, 2),
            "padding_unit_cost": round(padding_cost, 2),
            "unit_cost_before_discount": round(unit_cost_before_discount, 2),
            "discount_pct": pricing["discount_pct"],
            "discount_tier": pricing["discount_tier"],
            "discount_multiplier": pricing["discount_multiplier"],
            "unit_cost": pricing["unit_cost"],
            "quantity": quantity,
            "total_cost": pricing["total_cost"],
            "volume_cu_in": round(volume, 1),
            "surface_area_sq_in": round(surface_area, 1),
            "shipping_weight_lbs": round(shipping_weight, 1),
            "weight_category": self.weight_category(shipping_weight),
            "recycled_content_pct": recycled_content,
            "sustainability_score": self.sustainability_score(recycled_content, fragility),
        }

    def select_box_type(self, weight: float, fragility: int) -> str:
        """Ordered decision: single wall, then double wall, else heavy duty."""
        if weight <= self.SINGLE_WALL_MAX_WEIGHT and fragility <= self.SINGLE_WALL_MAX_FRAGILITY:
            return "single_wall"
        if weight <= self.DOUBLE_WALL_MAX_WEIGHT and fragility <= self.DOUBLE_WALL_MAX_FRAGILITY:
            return "double_wall"
        return "heavy_duty"

    def select_cushioning(self, fragility: int, volume: float, surface_area: float) -> list:
        """
        Cumulative by fragility: each level keeps the materials of the levels
        below it. Returns [{key, name, cost}, ...] in the order added.
        """
        selected = []

        if fragility >= 2:
            bubble = self.lookup.get_cushioning("bubble_wrap")
            cost = bubble.cost * self.sq_in_to_sq_ft(surface_area) / bubble.coverage
            selected.append({"key": bubble.key, "name": bubble.name, "cost": cost})
        if fragility >= 3:
            void_fill = self.lookup.get_cushioning("void_fill")
            cost = void_fill.cost * self.cu_in_to_cu_ft(volume) / void_fill.coverage
            selected.append({"key": void_fill.key, "name": void_fill.name, "cost": cost})
        if fragility >= 4:
            inserts = self.lookup.get_cushioning("corrugated_inserts")
            selected.append({"key": inserts.key, "name": inserts.name, "cost": inserts.cost})
        # Exact match on the top level, not >=; the scale is closed at 5.
        if fragility == 5:
            foam = self.lookup.get_cushioning("foam_inserts")
            selected.append({"key": foam.key, "name": foam.name, "cost": foam.cost})

        return selected

    def estimate_packaging_weight(self, volume: float, padding_cost: float) -> float:
        """Crude proxy for packaging weight in lbs. Category thresholds depend on it."""
        return (self.cu_in_to_cu_ft(volume) * self.PACKAGING_LBS_PER_CU_FT
                + padding_cost * self.PACKAGING_LBS_PER_PADDING_DOLLAR)

    def weight_category(self, shipping_weight: float) -> str:
        for max_weight, category in self.WEIGHT_CATEGORIES:
            if shipping_weight <= max_weight:
                return category
        return self.FREIGHT_CATEGORY

    def recycled_content_pct(self, fragility: int) -> int:
        """High-protection materials carry less recycled content."""
        if fragility <= 2:
            return 70
        if fragility <= 4:
            return 65
        return 60

    def sustainability_score(self, recycled_content: int, fragility: int) -> int:
        """Unclamped: fragility 1 scores 16."""
        return self.round_half_up(recycled_content / 10 + (10 - fragility))


def compute_packaging(product: dict, lookup: Optional[MaterialLookup] = None) -> dict:
    """Compute the PackagingResult for a NormalizedProduct dict."""
    return PackagingCalculator(lookup).calculate(product)
