"""
Route generation, classification and the monthly route marketplace.

Routes are generated from a hub to every other airport in the game. The
marketplace offers a small random selection of the unopened routes in each
category and is rebuilt on the first day of every month.
"""

from typing import Dict, Iterable, List, Mapping, Optional, Tuple, Union
import logging
import math
import re

import numpy as np

from core import constants as C
from core.catalogs import Catalogs
from core.geo import distance_between
from core.models import Airport, AirportScale, Route, RouteCategory, RouteMarket

logger = logging.getLogger(__name__)

# Hubs that only fly international routes
NO_DOMESTIC_HUBS: Dict[str, str] = {
    "ICN": "KR",
    "TPE": "TW",
}

_CODE_IN_NAME = re.compile(r"\(([^)]+)\)")


def js_round(value: float) -> int:
    """Round half up, the way ``Math.round`` does."""
    return int(math.floor(value + 0.5))


def airport_code_from_name(name: str) -> Optional[str]:
    """Extract the code from a display name such as 'Seoul Incheon (ICN)'."""
    match = _CODE_IN_NAME.search(name or "")
    return match.group(1) if match else None


def _is_banned_domestic(hub: Airport, destination: Airport) -> bool:
    return NO_DOMESTIC_HUBS.get(hub.code) == destination.country


def build_route(hub: Airport, destination: Airport, catalogs: Catalogs) -> Optional[Route]:
    """
    Candidate route from ``hub`` to ``destination``.

    Returns None for self-pairs, banned domestic pairs and routes shorter
    than the minimum distance.
    """
    if destination.code == hub.code or _is_banned_domestic(hub, destination):
        return None

    distance = js_round(distance_between(hub, destination))
    if distance < C.MIN_ROUTE_DISTANCE_KM:
        return None

    turnaround = js_round((distance / C.CRUISE_SPEED_KMH) * 2 * 60 + C.TURNAROUND_GROUND_MINUTES)
    price = js_round(distance * C.ROUTE_PRICE_PER_KM + C.ROUTE_BASE_PRICE)

    is_domestic = hub.country == destination.country
    demand = catalogs.demand_matrix[(is_domestic, hub.scale, destination.scale)]
    competition = catalogs.competition_matrix[(hub.scale, destination.scale)]

    return Route(
        id=f"{hub.code}-{destination.code}",
        origin=hub.display_name,
        destination=destination.display_name,
        origin_code=hub.code,
        destination_code=destination.code,
        distance=distance,
        turnaround_time=turnaround,
        price=price,
        demand_classes=dict(demand),
        competition=competition,
    )


def generate_routes_for_hub(hub: Airport, airports: Iterable[Airport], catalogs: Catalogs) -> List[Route]:
    """All candidate routes from ``hub`` to the other airports, in table order."""
    routes = []
    for destination in airports:
        route = build_route(hub, destination, catalogs)
        if route is not None:
            routes.append(route)
    logger.debug(f"Generated {len(routes)} routes from {hub.code}")
    return routes


AirportLookup = Union[Mapping[str, Airport], Iterable[Airport]]


def _as_index(airports: AirportLookup) -> Mapping[str, Airport]:
    if isinstance(airports, Mapping):
        return airports
    return {a.code: a for a in airports}


def route_endpoint_codes(route: Route) -> Tuple[Optional[str], Optional[str]]:
    """Origin and destination codes, parsing the display names when needed."""
    origin = route.origin_code or airport_code_from_name(route.origin)
    destination = route.destination_code or airport_code_from_name(route.destination)
    return origin, destination


def get_route_category(route: Route, airports: AirportLookup) -> RouteCategory:
    """
    Classify a route by the scale of its endpoints.

    Large (HUB/MEGA) to large is trunk, large to MAJOR is feeder, and
    everything else, including unknown airports, is regional.
    """
    index = _as_index(airports)
    origin_code, destination_code = route_endpoint_codes(route)
    origin = index.get(origin_code)
    destination = index.get(destination_code)
    if origin is None or destination is None:
        return RouteCategory.REGIONAL

    if origin.scale.is_large and destination.scale.is_large:
        return RouteCategory.TRUNK
    if origin.scale.is_large or destination.scale.is_large:
        other = destination if origin.scale.is_large else origin
        if other.scale == AirportScale.MAJOR:
            return RouteCategory.FEEDER
    return RouteCategory.REGIONAL


def build_route_market(
    routes: Iterable[Route],
    airports: AirportLookup,
    rng: np.random.Generator,
    per_category: int = C.MARKET_ROUTES_PER_CATEGORY,
) -> RouteMarket:
    """Shuffle the unopened routes and offer up to ``per_category`` of each kind."""
    index = _as_index(airports)
    unopened = [r for r in routes if not r.is_opened]
    shuffled = [unopened[i] for i in rng.permutation(len(unopened))]

    market = RouteMarket()
    for route in shuffled:
        offered = market.for_category(get_route_category(route, index))
        if len(offered) < per_category:
            offered.append(route)
    return market
