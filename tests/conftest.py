"""Shared fixtures for the airline simulation tests."""

from dataclasses import replace
from datetime import date

import numpy as np
import pytest

from core.catalogs import default_catalogs
from core.models import (
    AircraftConfigurationType, AirlineConcept, BrandReputationType, CabinClass, CompetitionLevel,
    GameState, PlayerAircraft, Route, ScheduleEntry, TicketPriceStrategy,
)


@pytest.fixture
def catalogs():
    """Bundled game tables."""
    return default_catalogs()


@pytest.fixture
def safe_catalogs(catalogs):
    """Game tables with accidents switched off."""
    rules = replace(catalogs.rules, base_accident_probability=0.0, age_accident_modifier=0.0)
    return replace(catalogs, rules=rules)


@pytest.fixture
def deadly_catalogs(catalogs):
    """Game tables where every flying aircraft crashes."""
    return replace(catalogs, rules=replace(catalogs.rules, base_accident_probability=1.0))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def base_state(catalogs):
    """An FSC airline on 14 March 2024 with no fleet and no routes."""
    return GameState(
        cash=1_000_000_000_000,
        date=date(2024, 3, 14),
        founding_date=date(2024, 1, 1),
        concept=AirlineConcept.FSC,
        reputation=BrandReputationType.FSC_NORMAL,
        airports=list(catalogs.airports),
    )


@pytest.fixture
def gmp_cju_route():
    """An opened domestic route with simple round numbers."""
    return Route(
        id="GMP-CJU",
        origin="Seoul Gimpo (GMP)",
        destination="Jeju (CJU)",
        origin_code="GMP",
        destination_code="CJU",
        distance=1000,
        turnaround_time=200,
        price=6_000_000_000,
        demand_classes={CabinClass.FIRST: 0, CabinClass.BUSINESS: 100, CabinClass.ECONOMY: 1000},
        competition=CompetitionLevel.LOW,
        is_opened=True,
        price_strategy=TicketPriceStrategy.STANDARD,
    )


def make_aircraft(aircraft_id="ac-1", purchase_date=date(2024, 3, 15), route_ids=(),
                  model_id="A320neo",
                  configuration=AircraftConfigurationType.FSC_MEDIUM_HAUL,
                  capacity=None, base="GMP", **kwargs):
    """Build a fleet aircraft flying ``route_ids``."""
    if capacity is None:
        capacity = {CabinClass.FIRST: 0, CabinClass.BUSINESS: 18, CabinClass.ECONOMY: 144}
    return PlayerAircraft(
        id=aircraft_id,
        nickname=f"Test {aircraft_id}",
        model_id=model_id,
        purchase_date=purchase_date,
        configuration_id=configuration,
        capacity=capacity,
        base=base,
        schedule=[ScheduleEntry(route_id=r, flight_number=100 + i) for i, r in enumerate(route_ids)],
        **kwargs,
    )
