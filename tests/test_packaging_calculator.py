"""
Packaging calculator tests - geometry, box classification, cushioning,
costs, shipping weight and sustainability.

Tests:
1-3.   Padding and box geometry
4-7.   Box type classification
8-11.  Cumulative cushioning (incl. foam inserts exact-match flag)
12-15. Costs and the worked 10x5x3 example
16-19. Shipping weight, category, sustainability
20-22. Purity and injected reference tables
"""

import pytest

from packbot import compute_packaging, normalize
from packbot.calculators.base import BaseCalculator
from packbot.calculators.material_lookup import (
    BOX_STOCK,
    CUSHIONING_MATERIALS,
    FRAGILITY_PROFILES,
    MaterialLookup,
)
from packbot.calculators.packaging import PackagingCalculator


def _product(length=10.0, width=5.0, height=3.0, weight=5.0, fragility=3, quantity=100):
    return {
        "length": length,
        "width": width,
        "height": height,
        "weight": weight,
        "fragility_level": fragility,
        "quantity": quantity,
    }


# ============================================================
# Padding and geometry
# ============================================================

def test_padding_strictly_increases_with_fragility():
    paddings = [FRAGILITY_PROFILES[level].padding for level in range(1, 6)]
    assert paddings == sorted(paddings)
    assert len(set(paddings)) == 5
    assert paddings[0] == 0.5
    assert paddings[-1] == 3.2


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5])
def test_outer_box_adds_twice_the_padding_on_every_axis(level):
    product = _product(length=12.0, width=7.5, height=4.2, fragility=level)
    result = compute_packaging(product)
    padding = FRAGILITY_PROFILES[level].padding
    box = result["box_dimensions"]
    assert box["length"] == pytest.approx(12.0 + 2 * padding)
    assert box["width"] == pytest.approx(7.5 + 2 * padding)
    assert box["height"] == pytest.approx(4.2 + 2 * padding)
    assert result["padding_per_side"] == padding


def test_volume_and_surface_area_use_outer_dimensions():
    """Fragility 1: 10x5x3 -> 11x6x4."""
    result = compute_packaging(_product(fragility=1))
    assert result["box_size"] == "11.0x6.0x4.0"
    assert result["volume_cu_in"] == 264.0
    assert result["surface_area_sq_in"] == 268.0


# ============================================================
# Box classification
# ============================================================

def test_light_low_fragility_gets_single_wall():
    result = compute_packaging(_product(weight=5.0, fragility=1))
    assert result["box_key"] == "single_wall"
    assert result["box_type"] == BOX_STOCK["single_wall"].name
    assert result["box_strength"] == "200 lb test Single Wall"


def test_fragility_alone_pushes_to_double_wall():
    """5 lbs qualifies for single wall by weight; fragility 3 does not."""
    result = compute_packaging(_product(weight=5.0, fragility=3))
    assert result["box_key"] == "double_wall"
    assert result["box_strength"] == "275 lb test Double Wall"


def test_weight_alone_pushes_to_heavy_duty():
    result = compute_packaging(_product(weight=50.0, fragility=1))
    assert result["box_key"] == "heavy_duty"
    assert result["box_strength"] == "500 lb test Heavy Duty"


@pytest.mark.parametrize("weight, fragility, expected", [
    (10.0, 2, "single_wall"),    # both limits inclusive
    (10.1, 1, "double_wall"),
    (40.0, 4, "double_wall"),
    (40.1, 2, "heavy_duty"),
    (1.0, 5, "heavy_duty"),
])
def test_box_classification_boundaries(weight, fragility, expected):
    calc = PackagingCalculator()
    assert calc.select_box_type(weight, fragility) == expected


# ============================================================
# Cushioning
# ============================================================

@pytest.mark.parametrize("fragility, expected_keys", [
    (1, []),
    (2, ["bubble_wrap"]),
    (3, ["bubble_wrap", "void_fill"]),
    (4, ["bubble_wrap", "void_fill", "corrugated_inserts"]),
    (5, ["bubble_wrap", "void_fill", "corrugated_inserts", "foam_inserts"]),
])
def test_cushioning_is_cumulative(fragility, expected_keys):
    result = compute_packaging(_product(fragility=fragility))
    cushioning = [i["key"] for i in result["material_items"] if i["category"] == "cushioning"]
    assert cushioning == expected_keys


def test_materials_list_order():
    result = compute_packaging(_product(fragility=3))
    assert result["materials"] == [
        BOX_STOCK["double_wall"].name,
        CUSHIONING_MATERIALS["bubble_wrap"].name,
        CUSHIONING_MATERIALS["void_fill"].name,
        "Packing Tape",
        "Shipping Labels",
    ]


def test_foam_inserts_only_on_exact_top_level():
    """
    Foam inserts are keyed on fragility == 5, not >= 5. Equivalent on the
    closed 1-5 scale; a level past 5 would get every other material but no foam.
    """
    calc = PackagingCalculator()
    keys_at_5 = [m["key"] for m in calc.select_cushioning(5, 1000.0, 600.0)]
    keys_at_6 = [m["key"] for m in calc.select_cushioning(6, 1000.0, 600.0)]
    assert "foam_inserts" in keys_at_5
    assert "foam_inserts" not in keys_at_6
    assert "corrugated_inserts" in keys_at_6


def test_cushioning_costs_scale_with_box():
    """Bubble wrap per sq ft of surface, void fill per cu ft of volume."""
    calc = PackagingCalculator()
    bubble, void_fill = calc.select_cushioning(3, 1728.0, 144.0)
    assert bubble["cost"] == pytest.approx(0.35 * 1.0 / 2.0)
    assert void_fill["cost"] == pytest.approx(0.25 * 1.0 / 2.5)


# ============================================================
# Costs
# ============================================================

def test_worked_example_end_to_end():
    """10x5x3 in, 5 lbs, fragility 3, 100 units."""
    product = normalize({"dimensions": "10x5x3", "weight": "5", "fragility": "3", "quantity": "100"})
    result = compute_packaging(product)

    assert result["padding_per_side"] == 1.8
    assert result["box_size"] == "13.6x8.6x6.6"
    assert result["box_key"] == "double_wall"
    assert CUSHIONING_MATERIALS["bubble_wrap"].name in result["materials"]
    assert CUSHIONING_MATERIALS["void_fill"].name in result["materials"]
    assert result["discount_pct"] == 12
    assert result["discount_tier"] == 100

    # volume 771.936 cu in < 1000, so the box is priced at 1x size
    assert result["box_unit_cost"] == 1.63
    assert result["padding_unit_cost"] == 0.69
    assert result["unit_cost_before_discount"] == 2.45
    assert result["unit_cost"] == 2.15
    assert result["total_cost"] == 215.0
    assert result["total_cost"] == round(result["unit_cost"] * 100, 2)


def test_box_cost_scales_above_1000_cubic_inches():
    """20x20x20 at fragility 1 -> 21^3 = 9261 cu in -> 0.85 + 0.12 * 9.261."""
    result = compute_packaging(_product(20.0, 20.0, 20.0, weight=5.0, fragility=1, quantity=1))
    assert result["box_unit_cost"] == 1.96


def test_single_unit_pays_list_price():
    """Fragility 1, qty 1: 0.97 box + 0.08 tape + 0.05 label, no discount."""
    result = compute_packaging(_product(fragility=1, quantity=1))
    assert result["padding_unit_cost"] == 0.0
    assert result["unit_cost_before_discount"] == 1.10
    assert result["discount_pct"] == 0
    assert result["unit_cost"] == 1.10
    assert result["total_cost"] == 1.10


@pytest.mark.parametrize("quantity", [1, 24, 25, 99, 100, 333, 2499, 2500, 10000])
def test_total_cost_matches_displayed_unit_price(quantity):
    result = compute_packaging(_product(fragility=4, quantity=quantity))
    assert result["total_cost"] == round(result["unit_cost"] * quantity, 2)


# ============================================================
# Shipping weight, category, sustainability
# ============================================================

def test_shipping_weight_adds_packaging_proxy():
    """5 + (771.936 / 1728) * 0.5 + 0.685 * 0.1 = 5.29."""
    result = compute_packaging(_product())
    assert result["shipping_weight_lbs"] == 5.3
    assert result["weight_category"] == "Standard Package"


@pytest.mark.parametrize("shipping_weight, category", [
    (0.5, "Light Package"),
    (1.0, "Light Package"),
    (1.01, "Standard Package"),
    (10.0, "Standard Package"),
    (10.5, "Heavy Package"),
    (50.0, "Heavy Package"),
    (50.1, "Freight Package"),
])
def test_weight_category_boundaries(shipping_weight, category):
    assert PackagingCalculator().weight_category(shipping_weight) == category


@pytest.mark.parametrize("fragility, recycled, score", [
    (1, 70, 16),
    (2, 70, 15),
    (3, 65, 14),   # 13.5 rounds up
    (4, 65, 13),   # 12.5 rounds up
    (5, 60, 11),
])
def test_sustainability_is_unclamped(fragility, recycled, score):
    result = compute_packaging(_product(fragility=fragility))
    assert result["recycled_content_pct"] == recycled
    assert result["sustainability_score"] == score


def test_round_half_up_helper():
    calc = PackagingCalculator()
    assert calc.round_half_up(12.5) == 13
    assert calc.round_half_up(13.5) == 14
    assert calc.round_half_up(12.49) == 12


# ============================================================
# Purity and injected tables
# ============================================================

def test_compute_packaging_is_idempotent():
    product = _product(weight=12.3, fragility=4, quantity=777)
    first = compute_packaging(product)
    second = compute_packaging(product)
    assert first == second
    assert product == _product(weight=12.3, fragility=4, quantity=777)


def test_calculator_is_a_base_calculator():
    assert isinstance(PackagingCalculator(), BaseCalculator)


def test_injected_discount_schedule():
    lookup = MaterialLookup(discount_tiers={1: 1.0, 10: 0.5})
    result = compute_packaging(_product(fragility=1, quantity=10), lookup=lookup)
    assert result["discount_pct"] == 50
    assert result["discount_tier"] == 10
    assert result["unit_cost"] == 0.55
