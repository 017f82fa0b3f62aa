"""
Route network: generation, classification and the route marketplace.
"""

from .routes import (
    generate_routes_for_hub,
    get_route_category,
    build_route_market,
    airport_code_from_name,
)

__all__ = [
    'generate_routes_for_hub',
    'get_route_category',
    'build_route_market',
    'airport_code_from_name',
]
