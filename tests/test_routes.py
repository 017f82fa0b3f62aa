"""Tests for distance, route generation, classification and the marketplace."""

import math

import numpy as np
import pytest

from core.geo import calculate_distance, distance_between
from core.models import (
    AirportScale, CabinClass, CompetitionLevel, Route, RouteCategory,
)
from network.routes import (
    airport_code_from_name, build_route_market, generate_routes_for_hub,
    get_route_category, js_round,
)


@pytest.fixture
def airports(catalogs):
    return {a.code: a for a in catalogs.airports}


def _route(origin, destination, origin_code=None, destination_code=None, opened=False):
    return Route(
        id=f"{origin.code}-{destination.code}",
        origin=origin.display_name,
        destination=destination.display_name,
        origin_code=origin.code if origin_code is None else origin_code,
        destination_code=destination.code if destination_code is None else destination_code,
        distance=1000,
        turnaround_time=231,
        price=6_000_000_000,
        demand_classes={CabinClass.FIRST: 0, CabinClass.BUSINESS: 10, CabinClass.ECONOMY: 100},
        competition=CompetitionLevel.LOW,
        is_opened=opened,
    )


def test_distance_identity_and_symmetry(airports):
    """Distance from a point to itself is zero and order does not matter."""
    icn, lhr = airports["ICN"], airports["LHR"]
    assert calculate_distance(icn.lat, icn.lon, icn.lat, icn.lon) == 0
    assert distance_between(icn, lhr) == pytest.approx(distance_between(lhr, icn))


def test_distance_known_pair(airports):
    """London Heathrow to New York JFK is about 5,550 km."""
    assert distance_between(airports["LHR"], airports["JFK"]) == pytest.approx(5550, abs=50)


def test_distance_antipodal_points():
    """Opposite points on the globe are half the circumference apart."""
    assert calculate_distance(0, 0, 0, 180) == pytest.approx(math.pi * 6371)


def test_js_round_rounds_half_up():
    assert js_round(2.5) == 3
    assert js_round(3.5) == 4
    assert js_round(2.49) == 2


def test_icn_hub_never_serves_korea(airports, catalogs):
    """Incheon only flies international routes."""
    routes = generate_routes_for_hub(airports["ICN"], catalogs.airports, catalogs)
    assert routes
    destinations = [airports[r.destination_code] for r in routes]
    assert all(a.country != "KR" for a in destinations)
    assert all(r.destination_code != "ICN" for r in routes)


def test_tpe_hub_never_serves_taiwan(airports, catalogs):
    routes = generate_routes_for_hub(airports["TPE"], catalogs.airports, catalogs)
    assert all(airports[r.destination_code].country != "TW" for r in routes)
    assert "TPE-KHH" not in {r.id for r in routes}


def test_short_routes_are_excluded(airports, catalogs):
    """Gimpo to Incheon is too short to sell."""
    routes = generate_routes_for_hub(airports["GMP"], catalogs.airports, catalogs)
    ids = {r.id for r in routes}
    assert "GMP-ICN" not in ids
    assert "GMP-CJU" in ids
    assert all(r.distance >= 100 for r in routes)
    assert len(routes) == len(catalogs.airports) - 2


def test_generated_route_fields(airports, catalogs):
    """Derived figures follow the distance formulas and the domestic tables."""
    routes = {r.id: r for r in generate_routes_for_hub(airports["GMP"], catalogs.airports, catalogs)}
    route = routes["GMP-CJU"]

    expected_distance = js_round(distance_between(airports["GMP"], airports["CJU"]))
    assert route.distance == expected_distance
    assert route.turnaround_time == js_round((expected_distance / 850) * 2 * 60 + 90)
    assert route.price == js_round(expected_distance * 1_000_000 + 5_000_000_000)
    assert route.origin == "Seoul Gimpo (GMP)"
    assert route.origin_code == "GMP"
    assert route.destination_code == "CJU"
    assert not route.is_opened
    assert route.price_strategy is None

    # HUB to MAJOR, domestic
    assert route.demand_classes == {
        CabinClass.FIRST: 6, CabinClass.BUSINESS: 35, CabinClass.ECONOMY: 600,
    }
    assert route.competition == CompetitionLevel.MEDIUM


def test_international_route_uses_international_demand(airports, catalogs):
    routes = {r.id: r for r in generate_routes_for_hub(airports["ICN"], catalogs.airports, catalogs)}
    route = routes["ICN-LHR"]
    assert route.demand_classes == {
        CabinClass.FIRST: 60, CabinClass.BUSINESS: 200, CabinClass.ECONOMY: 500,
    }
    assert route.competition == CompetitionLevel.HIGH


def test_route_category_rules(airports):
    """Trunk, feeder and regional follow the endpoint scales."""
    icn, nrt, pus, tae = airports["ICN"], airports["NRT"], airports["PUS"], airports["TAE"]
    assert icn.scale == AirportScale.MEGA and nrt.scale == AirportScale.HUB

    assert get_route_category(_route(icn, nrt), airports) == RouteCategory.TRUNK
    assert get_route_category(_route(icn, pus), airports) == RouteCategory.FEEDER
    assert get_route_category(_route(pus, nrt), airports) == RouteCategory.FEEDER
    assert get_route_category(_route(icn, tae), airports) == RouteCategory.REGIONAL
    assert get_route_category(_route(pus, airports["FUK"]), airports) == RouteCategory.REGIONAL


def test_route_category_unknown_airport_is_regional(airports):
    route = _route(airports["ICN"], airports["NRT"], destination_code="XXX")
    route = Route(**{**route.__dict__, "destination": "Nowhere (XXX)"})
    assert get_route_category(route, airports) == RouteCategory.REGIONAL


def test_route_category_falls_back_to_display_names(airports):
    """Routes without explicit codes are resolved from 'Name (CODE)'."""
    route = _route(airports["ICN"], airports["NRT"], origin_code="", destination_code="")
    assert get_route_category(route, airports) == RouteCategory.TRUNK
    assert airport_code_from_name("Seoul Incheon (ICN)") == "ICN"
    assert airport_code_from_name("No code here") is None


def test_route_category_is_idempotent(airports):
    route = _route(airports["ICN"], airports["PUS"])
    first = get_route_category(route, airports)
    assert get_route_category(route, airports) == first
    assert get_route_category(route, list(airports.values())) == first


def test_route_market_caps_each_category(airports, catalogs):
    routes = generate_routes_for_hub(airports["HND"], catalogs.airports, catalogs)
    market = build_route_market(routes, airports, np.random.default_rng(3))

    for category in RouteCategory:
        offered = market.for_category(category)
        assert len(offered) <= 4
        assert all(get_route_category(r, airports) == category for r in offered)
    assert len(market.trunk) == 4


def test_route_market_skips_opened_routes(airports):
    icn = airports["ICN"]
    routes = [_route(icn, airports[code], opened=(code == "NRT")) for code in ("NRT", "HND", "PEK")]
    market = build_route_market(routes, airports, np.random.default_rng(0))
    assert {r.id for r in market.trunk} == {"ICN-HND", "ICN-PEK"}


def test_route_market_is_reproducible_with_seed(airports, catalogs):
    routes = generate_routes_for_hub(airports["HND"], catalogs.airports, catalogs)
    first = build_route_market(routes, airports, np.random.default_rng(11))
    second = build_route_market(routes, airports, np.random.default_rng(11))
    assert [r.id for r in first.all_routes()] == [r.id for r in second.all_routes()]
