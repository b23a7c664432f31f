"""
Input normalizer - turns four free-form answers into a NormalizedProduct.

    {"dimensions": "25x12x8 cm", "weight": "2kg", "fragility": "3", "quantity": "100"}
        -> {"length": 9.8, "width": 4.7, "height": 3.1, "weight": 4.4,
            "fragility_level": 3, "quantity": 100}

Lengths come out in inches, weight in pounds. Dimension and weight values are
rounded to one decimal on the way in and downstream math uses the rounded
values. Any bad field fails the whole record.
"""

import logging
import math
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

logger = logging.getLogger(__name__)

CM_TO_IN = 0.393701
KG_TO_LBS = 2.20462
G_TO_LBS = 0.00220462
OZ_TO_LBS = 0.0625

MIN_FRAGILITY = 1
MAX_FRAGILITY = 5

# Order totals stay exact to the cent in float math below this
MAX_QUANTITY = 1_000_000_000

ERROR_MESSAGES = {
    "dimensions": "Format: 10x5x3",
    "weight": "Enter valid weight > 0",
    "fragility": "Enter 1-5",
    "quantity": "Enter whole number > 0",
}

_NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
_INTEGER_RE = re.compile(r"\d+")


class NormalizationError(ValueError):
    """A raw answer could not be turned into a valid field value."""

    def __init__(self, field: str, message: str = None):
        self.field = field
        self.message = message or ERROR_MESSAGES.get(field, "Invalid input")
        super().__init__(f"{field}: {self.message}")


def _one_decimal(value: float, field: str) -> float:
    """Fixed-point rounding to one decimal, half up on the exact binary value."""
    if not math.isfinite(value):
        raise NormalizationError(field, "Value is too large")
    try:
        return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))
    except InvalidOperation:
        raise NormalizationError(field, "Value is too large")


def _to_int(digits: str, field: str) -> int:
    """int() refuses digit strings past the interpreter's conversion limit."""
    try:
        return int(digits)
    except ValueError:
        raise NormalizationError(field, "Value is too large")


def _require(raw: dict, field: str) -> str:
    value = raw.get(field)
    if value is None or not str(value).strip():
        raise NormalizationError(field, f"Missing {field}")
    return str(value)


def parse_dimensions(value: str) -> tuple:
    """Returns (length, width, height) in inches, one decimal each."""
    tokens = _NUMBER_RE.findall(value)
    if len(tokens) != 3:
        raise NormalizationError("dimensions")
    dims = [float(t) for t in tokens]
    if "cm" in value.lower():
        dims = [d * CM_TO_IN for d in dims]
    dims = [_one_decimal(d, "dimensions") for d in dims]
    if any(d <= 0 for d in dims):
        raise NormalizationError("dimensions", "Dimensions must be greater than 0")
    return tuple(dims)


def parse_weight(value: str) -> float:
    """
    Returns weight in pounds, one decimal.

    Unit detection is a plain substring test in this order: "kg", "g", "oz"
    (unless "lbs" is also present). Anything else is already pounds.
    """
    match = _NUMBER_RE.search(value)
    if not match:
        raise NormalizationError("weight")
    weight = float(match.group())
    if weight <= 0:
        raise NormalizationError("weight")

    lowered = value.lower()
    if "kg" in lowered:
        weight *= KG_TO_LBS
    elif "g" in lowered:
        weight *= G_TO_LBS
    elif "oz" in lowered and "lbs" not in lowered:
        weight *= OZ_TO_LBS

    weight = _one_decimal(weight, "weight")
    if weight <= 0:
        raise NormalizationError("weight", "Weight rounds to 0.0 lbs")
    return weight


def parse_fragility(value: str) -> int:
    match = _INTEGER_RE.search(value)
    if not match:
        raise NormalizationError("fragility")
    level = _to_int(match.group(), "fragility")
    if level < MIN_FRAGILITY or level > MAX_FRAGILITY:
        raise NormalizationError("fragility")
    return level


def parse_quantity(value: str) -> int:
    match = _INTEGER_RE.search(value)
    if not match:
        raise NormalizationError("quantity")
    quantity = _to_int(match.group(), "quantity")
    if quantity <= 0:
        raise NormalizationError("quantity")
    if quantity > MAX_QUANTITY:
        raise NormalizationError("quantity", "Quantity is too large")
    return quantity


PARSERS = {
    "dimensions": parse_dimensions,
    "weight": parse_weight,
    "fragility": parse_fragility,
    "quantity": parse_quantity,
}


def normalize(raw: dict) -> dict:
    """
    Normalize a RawProductInput dict.

    Raises NormalizationError for the first field that fails, checked in the
    order dimensions, weight, fragility, quantity. Never returns a partial record.
    """
    try:
        length, width, height = parse_dimensions(_require(raw, "dimensions"))
        weight = parse_weight(_require(raw, "weight"))
        fragility = parse_fragility(_require(raw, "fragility"))
        quantity = parse_quantity(_require(raw, "quantity"))
    except NormalizationError as e:
        logger.info("Rejected product input: %s", e)
        raise

    return {
        "length": length,
        "width": width,
        "height": height,
        "weight": weight,
        "fragility_level": fragility,
        "quantity": quantity,
    }
