"""
Packaging API - structured results without the narrative wrapper.

GET  /api/packaging/steps      - intake questions, in order
POST /api/packaging/validate   - check one answer for one step
POST /api/packaging/calculate  - normalize + compute, returns product and result
POST /api/packaging/pdf        - same input, returns the PDF quote sheet
"""

import logging

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from ..calculators.packaging import compute_packaging
from ..conversation import list_steps, validate_answer
from ..normalizer import NormalizationError, normalize
from ..pdf_generator import generate_packaging_pdf
from ..schemas import PackagingResponse, ProductInput, StepAnswer, StepValidation

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/packaging", tags=["packaging"])


def normalize_or_400(request: ProductInput) -> dict:
    """Normalize request fields, mapping a validation failure to HTTP 400."""
    try:
        return normalize(request.model_dump())
    except NormalizationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid input: {e.message}")


@router.get("/steps")
def get_steps():
    return {"steps": list_steps()}


@router.post("/validate", response_model=StepValidation)
def validate_step(answer: StepAnswer):
    try:
        return validate_answer(answer.step, answer.value)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/calculate", response_model=PackagingResponse)
def calculate(request: ProductInput):
    """Normalized product plus its full packaging result. No AI."""
    product = normalize_or_400(request)
    return {"product": product, "result": compute_packaging(product)}


@router.post("/pdf")
def download_pdf(request: ProductInput):
    """
    Packaging quote sheet for the given answers.
    Returns: application/pdf
    """
    product = normalize_or_400(request)
    result = compute_packaging(product)
    pdf_bytes = generate_packaging_pdf(product, result)
    logger.info("Generated packaging PDF (%d bytes) for box %s", len(pdf_bytes), result["box_size"])
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": 'attachment; filename="packaging-quote.pdf"'},
    )
