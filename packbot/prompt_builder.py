"""
Prompt assembly for the packaging recommendation.

Turns a NormalizedProduct and its PackagingResult into the user message sent
to the text-generation provider. SYSTEM_PROMPT fixes the persona and the
plain-text layout the provider must answer in.
"""

from .config import settings

SYSTEM_PROMPT_TEMPLATE = """You are a packaging specialist. Provide clear, practical recommendations for warehouse operations.

Format as PLAIN TEXT with NO special formatting:

PACKAGING RECOMMENDATION

SOLUTION:
Box Size: [L x W x H inches]
Box Type: [Single/Double Wall with strength rating]
Padding: [Type and amount needed]
Pack Time: [X minutes per unit]

COST BREAKDOWN:
Box: $[amount] per unit
Padding: $[amount] per unit
Total Unit Cost: $[amount]
Bulk Discount: [X%] for [quantity] units
Total Order Cost: $[amount]

SUPPLIER:
{supplier_name}
Phone: {supplier_phone}
Boxes:- {boxes_url}
Bubble Wrap :- {bubble_wrap_url}
Delivery: {delivery}

SUSTAINABILITY:
Recycled Content: [X%]
Fully Recyclable: Yes

This recommendation provides immediate implementation guidance for cost-effective packaging."""


def build_system_prompt(config=None) -> str:
    """Fill the supplier block from settings."""
    config = config or settings
    return SYSTEM_PROMPT_TEMPLATE.format(
        supplier_name=config.SUPPLIER_NAME,
        supplier_phone=config.SUPPLIER_PHONE,
        boxes_url=config.SUPPLIER_BOXES_URL,
        bubble_wrap_url=config.SUPPLIER_BUBBLE_WRAP_URL,
        delivery=config.SUPPLIER_DELIVERY,
    )


SYSTEM_PROMPT = build_system_prompt()


def format_dimensions(product: dict) -> str:
    return f"{product['length']:.1f}x{product['width']:.1f}x{product['height']:.1f}"


def build_recommendation_prompt(product: dict, result: dict) -> str:
    """
    Build the user message for one recommendation.

    Sections, in order: product specifications, calculated recommendations,
    cost breakdown, weight considerations, sustainability metrics.
    """
    materials = ", ".join(result["materials"])

    return f"""Product Packaging Analysis Request:

PRODUCT SPECIFICATIONS:
- Dimensions: {format_dimensions(product)} inches (L x W x H)
- Weight: {product['weight']:.1f} lbs
- Fragility Level: {product['fragility_level']}/5 ({result['fragility_label']})
- Quantity Ordered: {product['quantity']} units

CALCULATED RECOMMENDATIONS:
- Recommended Box Size: {result['box_size']} inches
- Padding Added: {result['padding_per_side']:.1f} inches per side for optimal protection
- Box Type: {result['box_type']} ({result['box_strength']})
- Required Materials: {materials}

DETAILED COST BREAKDOWN:
- Box Unit Cost: ${result['box_unit_cost']:.2f}
- Padding Materials Cost: ${result['padding_unit_cost']:.2f}
- Total Unit Cost (before discount): ${result['unit_cost_before_discount']:.2f}
- Bulk Discount Applied: {result['discount_pct']}% (for {product['quantity']} units)
- Final Unit Cost: ${result['unit_cost']:.2f}
- Total Order Cost: ${result['total_cost']:.2f}

WEIGHT CONSIDERATIONS:
- Product Weight: {product['weight']:.1f} lbs
- Estimated Shipping Weight: {result['shipping_weight_lbs']:.1f} lbs (including packaging)
- Weight Category: {result['weight_category']}

SUSTAINABILITY METRICS:
- Recycled Content: {result['recycled_content_pct']}%
- Box Recyclability: 100% recyclable corrugated cardboard
- Environmental Impact Score: {result['sustainability_score']}/10

Please provide a packaging recommendation following the warehouse operations format with accurate supplier information. Focus on cost efficiency and damage prevention.
"""
