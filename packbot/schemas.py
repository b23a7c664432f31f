from pydantic import BaseModel
from typing import Optional, List


class ProductInput(BaseModel):
    """The four raw answers, exactly as the user typed them."""
    dimensions: Optional[str] = None
    weight: Optional[str] = None
    fragility: Optional[str] = None
    quantity: Optional[str] = None


class NormalizedProduct(BaseModel):
    length: float
    width: float
    height: float
    weight: float
    fragility_level: int
    quantity: int


class BoxDimensions(BaseModel):
    length: float
    width: float
    height: float


class MaterialItem(BaseModel):
    key: str
    description: str
    category: str
    unit_cost: float


class PackagingResult(BaseModel):
    box_size: str
    box_dimensions: BoxDimensions
    padding_per_side: float
    fragility_level: int
    fragility_label: str
    protection_need: str
    box_key: str
    box_type: str
    box_strength: str
    materials: List[str]
    material_items: List[MaterialItem]
    box_unit_cost: float
    padding_unit_cost: float
    unit_cost_before_discount: float
    discount_pct: int
    discount_tier: int
    discount_multiplier: float
    unit_cost: float
    quantity: int
    total_cost: float
    volume_cu_in: float
    surface_area_sq_in: float
    shipping_weight_lbs: float
    weight_category: str
    recycled_content_pct: int
    sustainability_score: int


class PackagingResponse(BaseModel):
    product: NormalizedProduct
    result: PackagingResult


class StepAnswer(BaseModel):
    step: str
    value: Optional[str] = None


class StepValidation(BaseModel):
    valid: bool
    error: Optional[str] = None
    next_step: str


class RecommendationResponse(BaseModel):
    suggestion: str
