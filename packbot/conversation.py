"""
Turn-by-turn intake - the four questions a user answers before a
recommendation is generated, in order.

Answers are checked with the same field parsers normalize() uses, so an
answer accepted here is never rejected later.
"""

from typing import Optional

from .normalizer import ERROR_MESSAGES, NormalizationError, PARSERS

STEPS = ("dimensions", "weight", "fragility", "quantity", "complete")

PROMPTS = {
    "dimensions": "Enter dimensions (L x W x H in inches):",
    "weight": "Enter weight (lbs):",
    "fragility": "Fragility level (1-5):\n1:VeryLow 2:Low 3:Med 4:High 5:VeryHigh",
    "quantity": "How many units?",
    "complete": 'Type "restart" to begin again',
}

PLACEHOLDERS = {
    "dimensions": "10x5x3",
    "weight": "5",
    "fragility": "1-5",
    "quantity": "100",
    "complete": "restart",
}

RESTART_WORD = "restart"


def list_steps() -> list:
    """Step descriptors for a client to render the intake."""
    return [
        {"step": step, "prompt": PROMPTS[step], "placeholder": PLACEHOLDERS[step]}
        for step in STEPS
    ]


def next_step(step: str) -> str:
    """The step after `step`; "complete" is terminal. Raises ValueError for unknown steps."""
    if step not in STEPS:
        raise ValueError(f"Unknown step: {step}. Available: {list(STEPS)}")
    index = STEPS.index(step)
    return STEPS[min(index + 1, len(STEPS) - 1)]


def validate_answer(step: str, value: Optional[str]) -> dict:
    """
    Check one answer for one step.

    Returns:
        {valid: bool, error: str | None, next_step: str}
        next_step is the current step again when the answer is invalid.
    """
    if step not in STEPS:
        raise ValueError(f"Unknown step: {step}. Available: {list(STEPS)}")

    text = (value or "").strip()

    if step == "complete":
        if text.lower() == RESTART_WORD:
            return {"valid": True, "error": None, "next_step": STEPS[0]}
        return {"valid": False, "error": PROMPTS["complete"], "next_step": step}

    if not text:
        return {"valid": False, "error": ERROR_MESSAGES[step], "next_step": step}

    try:
        PARSERS[step](text)
    except NormalizationError as e:
        return {"valid": False, "error": e.message, "next_step": step}
    return {"valid": True, "error": None, "next_step": next_step(step)}
