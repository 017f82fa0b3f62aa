"""Tests for player actions."""

from datetime import date

import numpy as np
import pytest

from actions import (
    ActionError, buyout_aircraft, change_concept, change_configuration, establish_hub,
    extend_lease, lease_aircraft, open_route, purchase_aircraft, purchase_facility,
    retrofit_aircraft, return_lease, sell_aircraft, set_maintenance_level, set_price_strategy,
    set_service_level, setup_airline, transfer_aircraft_base, update_schedule,
)
from core.models import (
    AircraftConfigurationType as Config, AirlineConcept, AirlineProfile, AirportFacilityType,
    BrandReputationType, CabinClass, CrewServiceLevel, MaintenanceLevel, MealServiceLevel,
    Ownership, StartingCapitalLevel, TicketPriceStrategy, years_between,
)

B = 1_000_000_000
FOUNDED = date(2024, 1, 1)


@pytest.fixture
def profile():
    return AirlineProfile(name="Han River Air", code="HR", hubs=("GMP",), country="KR")


@pytest.fixture
def airline(profile, catalogs):
    """A wealthy full-service airline founded at Gimpo."""
    return setup_airline(profile, AirlineConcept.FSC, StartingCapitalLevel.WEALTHY,
                         start_date=FOUNDED, catalogs=catalogs,
                         rng=np.random.default_rng(1)).state


@pytest.fixture
def with_aircraft(airline):
    return purchase_aircraft(airline, "A320neo", Config.FSC_MEDIUM_HAUL, "Hanbit", "GMP").state


@pytest.fixture
def with_lease(airline):
    return lease_aircraft(airline, "B787", Config.FSC_LONG_HAUL, "Mirae", "GMP").state


def test_setup_airline(profile, catalogs):
    result = setup_airline(profile, AirlineConcept.FSC, StartingCapitalLevel.STANDARD,
                           start_date=FOUNDED, rng=np.random.default_rng(1))
    state = result.state

    assert state.cash == 500 * B
    assert state.date == FOUNDED and state.founding_date == FOUNDED
    assert state.concept == AirlineConcept.FSC
    assert state.reputation == BrandReputationType.FSC_NORMAL
    assert state.airport_facilities == {"GMP": {AirportFacilityType.OFFICE}}
    assert state.airport_index()["GMP"].slots == catalogs.airport("GMP").slots * 2
    assert catalogs.airport("GMP").slots == 600

    assert state.routes and all(r.id.startswith("GMP-") for r in state.routes)
    assert not any(r.is_opened for r in state.routes)
    assert 0 < len(state.route_market.all_routes()) <= 12
    assert "Han River Air" in result.message


def test_setup_airline_rejects_unknown_hub(catalogs):
    profile = AirlineProfile(name="Nowhere Air", code="NA", hubs=("XXX",), country="KR")
    with pytest.raises(ActionError):
        setup_airline(profile, AirlineConcept.LCC, StartingCapitalLevel.STANDARD)


def test_purchase_aircraft(airline):
    state = purchase_aircraft(airline, "A320neo", Config.FSC_MEDIUM_HAUL, "Hanbit", "GMP").state
    aircraft = state.fleet[0]

    assert state.cash == pytest.approx(airline.cash - 110 * B * 1.1)
    assert aircraft.capacity == {CabinClass.FIRST: 0, CabinClass.BUSINESS: 18, CabinClass.ECONOMY: 144}
    assert aircraft.purchase_date == FOUNDED
    assert aircraft.ownership == Ownership.OWNED
    assert aircraft.schedule == []
    assert airline.fleet == []


def test_second_hand_aircraft_are_backdated(airline):
    state = purchase_aircraft(airline, "A380", Config.FSC_LONG_HAUL, "Big One", "GMP").state
    assert state.fleet[0].purchase_date == date(2014, 1, 1)


def test_purchase_needs_cash(profile):
    poor = setup_airline(profile, AirlineConcept.LCC, StartingCapitalLevel.CHALLENGING,
                         start_date=FOUNDED, rng=np.random.default_rng(1)).state
    with pytest.raises(ActionError, match="Not enough cash"):
        purchase_aircraft(poor, "A320neo", Config.LCC_ECONOMY, "Too dear", "GMP")
    assert poor.fleet == []
    assert poor.cash == 50 * B


def test_purchase_unknown_model(airline):
    with pytest.raises(ActionError):
        purchase_aircraft(airline, "Concorde", Config.FSC_LONG_HAUL, "Fast", "GMP")


def test_lease_aircraft(airline, with_lease):
    aircraft = with_lease.fleet[0]
    monthly = 292 * B * 1.2 * 0.025

    assert aircraft.ownership == Ownership.LEASED
    assert aircraft.lease_cost == pytest.approx(monthly)
    assert with_lease.cash == pytest.approx(airline.cash - monthly)
    assert aircraft.lease_end_date == date(2029, 1, 1)
    # 787-9 entered service in 2014, so the lessor's airframe is ten years old
    assert aircraft.purchase_date == date(2014, 1, 1)


def test_open_route(airline):
    route = airline.route_index()["GMP-CJU"]
    market_before = {r.id for r in airline.route_market.all_routes()}
    state = open_route(airline, "GMP-CJU", TicketPriceStrategy.LOW_COST).state

    opened = state.route_index()["GMP-CJU"]
    assert opened.is_opened
    assert opened.price_strategy == TicketPriceStrategy.LOW_COST
    assert state.cash == airline.cash - route.price
    assert "GMP-CJU" not in {r.id for r in state.route_market.all_routes()}
    assert market_before - {"GMP-CJU"} == {r.id for r in state.route_market.all_routes()}

    with pytest.raises(ActionError):
        open_route(state, "GMP-CJU")
    with pytest.raises(ActionError):
        open_route(state, "GMP-XXX")


def test_update_schedule(with_aircraft):
    state = open_route(with_aircraft, "GMP-CJU").state
    aircraft_id = state.fleet[0].id
    rng = np.random.default_rng(9)

    state = update_schedule(state, aircraft_id, ["GMP-CJU", "GMP-CJU"], rng=rng).state
    schedule = state.fleet[0].schedule
    assert [entry.route_id for entry in schedule] == ["GMP-CJU", "GMP-CJU"]
    assert all(100 <= entry.flight_number < 10000 for entry in schedule)

    cleared = update_schedule(state, aircraft_id, [], rng=rng).state
    assert cleared.fleet[0].schedule == []


def test_update_schedule_rejects_unopened_routes(with_aircraft):
    with pytest.raises(ActionError, match="not open"):
        update_schedule(with_aircraft, with_aircraft.fleet[0].id, ["GMP-CJU"])
    with pytest.raises(ActionError):
        update_schedule(with_aircraft, "ac-missing", [])


def test_update_schedule_day_limit(with_aircraft):
    state = with_aircraft
    for route_id in ("GMP-CJU", "GMP-LHR", "GMP-JFK"):
        state = open_route(state, route_id).state
    routes = state.route_index()
    aircraft_id = state.fleet[0].id
    assert routes["GMP-LHR"].turnaround_time + routes["GMP-CJU"].turnaround_time > 1440
    assert routes["GMP-JFK"].turnaround_time > 1440

    with pytest.raises(ActionError, match="more than a day"):
        update_schedule(state, aircraft_id, ["GMP-LHR", "GMP-CJU"])

    # A single long route is allowed on its own
    state = update_schedule(state, aircraft_id, ["GMP-JFK"]).state
    assert len(state.fleet[0].schedule) == 1


def test_return_lease_early_costs_a_penalty(with_lease):
    aircraft = with_lease.fleet[0]
    state = return_lease(with_lease, aircraft.id).state
    assert state.fleet == []
    assert state.cash == pytest.approx(with_lease.cash - aircraft.lease_cost * 3)


def test_return_owned_aircraft_fails(with_aircraft):
    with pytest.raises(ActionError, match="not leased"):
        return_lease(with_aircraft, with_aircraft.fleet[0].id)


def test_extend_lease_grounds_aircraft(with_lease):
    state = open_route(with_lease, "GMP-HND").state
    aircraft_id = state.fleet[0].id
    state = update_schedule(state, aircraft_id, ["GMP-HND"]).state

    extended = extend_lease(state, aircraft_id).state
    assert extended.fleet[0].lease_end_date == date(2034, 1, 1)
    assert extended.fleet[0].schedule == []


def test_buyout_aircraft(with_lease):
    aircraft = with_lease.fleet[0]
    state = buyout_aircraft(with_lease, aircraft.id).state
    bought = state.fleet[0]
    assert bought.ownership == Ownership.OWNED
    assert bought.lease_cost is None and bought.lease_end_date is None
    assert state.cash == pytest.approx(with_lease.cash - 292 * B * 0.8)


def test_sell_new_aircraft_at_list_price(with_aircraft):
    state = sell_aircraft(with_aircraft, with_aircraft.fleet[0].id).state
    assert state.fleet == []
    assert state.cash == pytest.approx(with_aircraft.cash + 110 * B * 1.1)


def test_sell_old_aircraft_depreciates(airline):
    state = purchase_aircraft(airline, "A380", Config.FSC_LONG_HAUL, "Big One", "GMP").state
    age = years_between(date(2014, 1, 1), FOUNDED)
    expected = 445 * B * 1.2 * (1 - 0.9 * age / 25)
    sold = sell_aircraft(state, state.fleet[0].id).state
    assert sold.cash - state.cash == pytest.approx(expected)


def test_sell_leased_aircraft_fails(with_lease):
    with pytest.raises(ActionError):
        sell_aircraft(with_lease, with_lease.fleet[0].id)


def test_change_concept(airline):
    state = change_concept(airline, AirlineConcept.LCC).state
    transition = state.concept_transition

    assert state.cash == airline.cash - 250 * B
    assert state.reputation == BrandReputationType.TRANSITIONING
    assert state.concept == AirlineConcept.FSC
    assert transition.from_concept == AirlineConcept.FSC
    assert transition.to_concept == AirlineConcept.LCC
    assert transition.end_date == date(2026, 1, 1)

    with pytest.raises(ActionError, match="already in progress"):
        change_concept(state, AirlineConcept.FSC)


def test_service_and_maintenance_settings(airline):
    state = set_service_level(airline, CrewServiceLevel.EXEMPLARY).state
    assert state.service_levels.crew == CrewServiceLevel.EXEMPLARY
    assert state.service_levels.meal == MealServiceLevel.STANDARD

    state = set_service_level(state, MealServiceLevel.PREMIUM).state
    assert state.service_levels.meal == MealServiceLevel.PREMIUM
    assert state.service_levels.crew == CrewServiceLevel.EXEMPLARY

    state = set_maintenance_level(state, MaintenanceLevel.ADVANCED).state
    assert state.maintenance_level == MaintenanceLevel.ADVANCED
    assert airline.maintenance_level == MaintenanceLevel.STANDARD


def test_set_price_strategy(airline):
    state = open_route(airline, "GMP-CJU").state
    state = set_price_strategy(state, "GMP-CJU", TicketPriceStrategy.PREMIUM).state
    assert state.route_index()["GMP-CJU"].price_strategy == TicketPriceStrategy.PREMIUM


def test_establish_domestic_hub(airline):
    result = establish_hub(airline, "PUS")
    state = result.state

    assert state.cash == airline.cash - 500 * B
    assert state.airline_profile.hubs == ("GMP", "PUS")
    assert AirportFacilityType.OFFICE in state.airport_facilities["PUS"]
    new_routes = [r for r in state.routes if r.id.startswith("PUS-")]
    assert new_routes
    assert len(state.routes) == len(airline.routes) + len(new_routes)
    assert len({r.id for r in state.routes}) == len(state.routes)


def test_establish_foreign_hub(airline):
    state = establish_hub(airline, "NRT").state
    assert state.cash == airline.cash - 1000 * B * 0.25
    assert state.airline_profile.hubs == ("GMP", "NRT")
    assert len(state.routes) == len(airline.routes)
    assert state.airport_facilities["NRT"] == {AirportFacilityType.OFFICE}

    with pytest.raises(ActionError, match="already a hub"):
        establish_hub(state, "NRT")


def test_purchase_facility(airline):
    with pytest.raises(ActionError, match="requires"):
        purchase_facility(airline, "CJU", AirportFacilityType.LOUNGE)

    state = purchase_facility(airline, "GMP", AirportFacilityType.LOUNGE).state
    assert state.cash == airline.cash - 250 * B
    assert state.airport_facilities["GMP"] == {AirportFacilityType.OFFICE, AirportFacilityType.LOUNGE}
    assert airline.airport_facilities["GMP"] == {AirportFacilityType.OFFICE}

    with pytest.raises(ActionError, match="already exists"):
        purchase_facility(state, "GMP", AirportFacilityType.LOUNGE)


def test_transfer_aircraft_base(with_aircraft):
    aircraft_id = with_aircraft.fleet[0].id
    state = transfer_aircraft_base(with_aircraft, aircraft_id, "PUS").state
    assert state.fleet[0].base == "PUS"
    assert state.cash == with_aircraft.cash - 5 * B

    with pytest.raises(ActionError, match="already based"):
        transfer_aircraft_base(state, aircraft_id, "PUS")

    scheduled = open_route(state, "GMP-CJU").state
    scheduled = update_schedule(scheduled, aircraft_id, ["GMP-CJU"]).state
    with pytest.raises(ActionError, match="schedule"):
        transfer_aircraft_base(scheduled, aircraft_id, "GMP")


def test_change_configuration(with_aircraft):
    state = open_route(with_aircraft, "GMP-CJU").state
    aircraft_id = state.fleet[0].id
    state = update_schedule(state, aircraft_id, ["GMP-CJU"]).state

    refitted = change_configuration(state, aircraft_id, Config.LCC_ECONOMY).state
    aircraft = refitted.fleet[0]
    assert aircraft.configuration_id == Config.LCC_ECONOMY
    assert aircraft.capacity == {CabinClass.FIRST: 0, CabinClass.BUSINESS: 0, CabinClass.ECONOMY: 189}
    assert aircraft.schedule == []
    assert refitted.cash == pytest.approx(state.cash - 110 * B * 0.05)


def test_retrofit_aircraft(airline):
    state = purchase_aircraft(airline, "A380", Config.FSC_LONG_HAUL, "Big One", "GMP").state
    retrofitted = retrofit_aircraft(state, state.fleet[0].id).state
    assert retrofitted.fleet[0].purchase_date == FOUNDED
    assert retrofitted.cash == pytest.approx(state.cash - 445 * B * 0.2)
