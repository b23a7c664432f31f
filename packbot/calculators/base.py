"""
Abstract base class for packaging calculators.

Input: NormalizedProduct dict (from packbot.normalizer)
Output: PackagingResult dict
"""

import math
from abc import ABC, abstractmethod


class BaseCalculator(ABC):
    """All packaging calculators inherit from this."""

    SQ_IN_PER_SQ_FT = 144.0
    CU_IN_PER_CU_FT = 1728.0

    @abstractmethod
    def calculate(self, product: dict) -> dict:
        """
        Takes a validated NormalizedProduct dict.
        Returns a PackagingResult dict.
        """
        pass

    # --- Helper methods for all calculators ---

    def sq_in_to_sq_ft(self, sq_in: float) -> float:
        return sq_in / self.SQ_IN_PER_SQ_FT

    def cu_in_to_cu_ft(self, cu_in: float) -> float:
        return cu_in / self.CU_IN_PER_CU_FT

    def box_volume(self, length: float, width: float, height: float) -> float:
        """Volume in cubic inches."""
        return length * width * height

    def box_surface_area(self, length: float, width: float, height: float) -> float:
        """Surface area of all six faces in square inches."""
        return 2.0 * (length * width + width * height + height * length)

    def round_half_up(self, value: float) -> int:
        """Round to the nearest integer, .5 always up (13.5 -> 14, 12.5 -> 13)."""
        return math.floor(value + 0.5)

    def make_material_item(self, key: str, description: str, category: str,
                           unit_cost: float) -> dict:
        """Build a per-unit material line for the PackagingResult."""
        return {
            "key": key,
            "description": description,
            "category": category,
            "unit_cost": round(unit_cost, 2),
        }
