"""
Recommendation endpoint - the numbers come from the calculator, the prose
comes from the text-generation provider.

POST /api/chat - {dimensions, weight, fragility, quantity} -> {suggestion}
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..calculators.packaging import compute_packaging
from ..normalizer import NormalizationError, normalize
from ..prompt_builder import build_recommendation_prompt
from ..recommender import RecommendationClient, RecommendationError
from ..schemas import ProductInput, RecommendationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["recommendation"])


def get_client() -> RecommendationClient:
    return RecommendationClient()


@router.post("", response_model=RecommendationResponse)
def recommend(request: ProductInput, client: RecommendationClient = Depends(get_client)):
    try:
        product = normalize(request.model_dump())
    except NormalizationError:
        raise HTTPException(status_code=400, detail="Invalid input")

    result = compute_packaging(product)
    prompt = build_recommendation_prompt(product, result)

    try:
        suggestion = client.generate(prompt)
    except RecommendationError as e:
        logger.warning("Recommendation failed (%s): %s", e.status_code, e.message)
        raise HTTPException(status_code=e.status_code, detail=e.message)

    return {"suggestion": suggestion}
