"""
Airline brand: reputation ladder and concept transitions.
"""

from .reputation import (
    StableBrand,
    brand_phase,
    brand_demand_modifier,
    calculate_new_reputation,
)

__all__ = [
    'StableBrand',
    'brand_phase',
    'brand_demand_modifier',
    'calculate_new_reputation',
]
