"""
Sustainable packaging recommendation engine.

normalize() turns four raw answers into a NormalizedProduct;
compute_packaging() turns that into a PackagingResult.
"""

from .calculators.packaging import compute_packaging
from .normalizer import NormalizationError, normalize

__all__ = ["compute_packaging", "normalize", "NormalizationError"]
