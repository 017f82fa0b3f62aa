"""
Player actions.

Each action takes the current ``GameState`` and returns an ``ActionResult``
holding a new state and a confirmation message. When a precondition fails
(not enough cash, unknown aircraft, missing prerequisite facility...) the
action raises ``ActionError`` and the state is left exactly as it was.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import List, Optional, Sequence, Union
import logging
import uuid

import numpy as np

from core import constants as C
from core.catalogs import Catalogs, default_catalogs
from core.models import (
    AirlineConcept, AirlineProfile, AircraftConfigurationType, AirportFacilityType,
    BaggageServiceLevel, BrandReputationType, ConceptTransition, CrewServiceLevel, GameState,
    MaintenanceLevel, MealServiceLevel, Ownership, PlayerAircraft, ScheduleEntry,
    ServiceLevels, StartingCapitalLevel, TicketPriceStrategy, add_years, years_between,
)
from network.routes import build_route_market, generate_routes_for_hub

logger = logging.getLogger(__name__)

DEFAULT_FOUNDING_DATE = date(2024, 1, 1)


class ActionError(ValueError):
    """A player action could not be carried out."""


@dataclass
class ActionResult:
    state: GameState
    message: str


def _catalogs(catalogs: Optional[Catalogs]) -> Catalogs:
    return catalogs or default_catalogs()


def _require_cash(state: GameState, amount: float, what: str) -> None:
    if state.cash < amount:
        raise ActionError(f"Not enough cash for {what}: need {amount:,.0f}, have {state.cash:,.0f}")


def _require_aircraft(state: GameState, aircraft_id: str) -> PlayerAircraft:
    aircraft = state.find_aircraft(aircraft_id)
    if aircraft is None:
        raise ActionError(f"Unknown aircraft {aircraft_id}")
    return aircraft


def _replace_aircraft(state: GameState, aircraft: PlayerAircraft) -> List[PlayerAircraft]:
    return [aircraft if ac.id == aircraft.id else ac for ac in state.fleet]


def _new_aircraft_id() -> str:
    return f"ac-{uuid.uuid4().hex[:8]}"


def setup_airline(
    profile: AirlineProfile,
    concept: AirlineConcept,
    capital_level: StartingCapitalLevel,
    start_date: date = DEFAULT_FOUNDING_DATE,
    catalogs: Optional[Catalogs] = None,
    rng: Optional[np.random.Generator] = None,
) -> ActionResult:
    """
    Found a new airline at its first hub.

    The game gets its own copy of the airport table with doubled slots at
    the home hub, every route out of that hub, and an initial marketplace.
    """
    catalogs = _catalogs(catalogs)
    rng = rng if rng is not None else np.random.default_rng()
    if not profile.hubs:
        raise ActionError("An airline needs at least one hub")

    hub_code = profile.hubs[0]
    hub = catalogs.airport(hub_code)
    if hub is None:
        raise ActionError(f"Invalid hub selected: {hub_code}")

    hub = replace(hub, slots=hub.slots * 2)
    airports = [hub if a.code == hub_code else a for a in catalogs.airports]
    routes = generate_routes_for_hub(hub, airports, catalogs)

    state = GameState(
        cash=catalogs.starting_capital[capital_level],
        date=start_date,
        founding_date=start_date,
        routes=routes,
        route_market=build_route_market(routes, airports, rng,
                                        per_category=catalogs.rules.market_routes_per_category),
        reputation=catalogs.concepts[concept].initial_reputation,
        concept=concept,
        maintenance_level=MaintenanceLevel.STANDARD,
        service_levels=ServiceLevels(),
        airport_facilities={hub_code: {AirportFacilityType.OFFICE}},
        airports=airports,
        airline_profile=profile,
    )
    logger.info(f"Founded {profile.name} ({profile.code}) at {hub_code} with {len(routes)} candidate routes")
    return ActionResult(state, f"Congratulations on founding {profile.name} ({profile.code})!")


def purchase_aircraft(
    state: GameState,
    model_id: str,
    configuration_id: AircraftConfigurationType,
    nickname: str,
    base: str,
    catalogs: Optional[Catalogs] = None,
) -> ActionResult:
    """Buy a new (or second-hand) aircraft outright."""
    catalogs = _catalogs(catalogs)
    model = catalogs.aircraft_models.get(model_id)
    configuration = catalogs.configurations.get(configuration_id)
    if model is None or configuration is None:
        raise ActionError(f"Unknown aircraft model {model_id!r} or configuration {configuration_id}")

    price = model.price * configuration.cost_modifier
    _require_cash(state, price, f"a {model.name}")

    aircraft = PlayerAircraft(
        id=_new_aircraft_id(),
        nickname=nickname,
        model_id=model.id,
        purchase_date=add_years(state.date, -model.initial_age_on_purchase),
        configuration_id=configuration_id,
        capacity=configuration.seating(model.capacity),
        base=base,
    )
    new_state = replace(state, cash=state.cash - price, fleet=state.fleet + [aircraft])
    return ActionResult(new_state, f"Purchased {nickname} ({model.name}).")


def lease_aircraft(
    state: GameState,
    model_id: str,
    configuration_id: AircraftConfigurationType,
    nickname: str,
    base: str,
    catalogs: Optional[Catalogs] = None,
) -> ActionResult:
    """Lease an aircraft for the standard term against a one-month deposit."""
    catalogs = _catalogs(catalogs)
    model = catalogs.aircraft_models.get(model_id)
    configuration = catalogs.configurations.get(configuration_id)
    if model is None or configuration is None:
        raise ActionError(f"Unknown aircraft model {model_id!r} or configuration {configuration_id}")

    monthly_cost = model.price * configuration.cost_modifier * C.LEASE_MONTHLY_RATE
    deposit = monthly_cost * C.LEASE_DEPOSIT_MONTHS
    _require_cash(state, deposit, "the lease deposit")

    # Lessors supply airframes a few years old, never older than the type itself
    lease_age = max(C.LEASE_MIN_AGE_YEARS, min(C.LEASE_MAX_AGE_YEARS, state.date.year - model.unlock_year))

    aircraft = PlayerAircraft(
        id=_new_aircraft_id(),
        nickname=nickname,
        model_id=model.id,
        purchase_date=add_years(state.date, -lease_age),
        configuration_id=configuration_id,
        capacity=configuration.seating(model.capacity),
        base=base,
        ownership=Ownership.LEASED,
        lease_cost=monthly_cost,
        lease_end_date=add_years(state.date, C.LEASE_TERM_YEARS),
    )
    new_state = replace(state, cash=state.cash - deposit, fleet=state.fleet + [aircraft])
    return ActionResult(new_state, f"Leased {nickname} ({model.name}).")


def open_route(
    state: GameState,
    route_id: str,
    price_strategy: TicketPriceStrategy = TicketPriceStrategy.STANDARD,
) -> ActionResult:
    """Pay for a route, set its pricing and take it off the marketplace."""
    route = state.route_index().get(route_id)
    if route is None:
        raise ActionError(f"Unknown route {route_id}")
    if route.is_opened:
        raise ActionError(f"Route {route_id} is already open")
    _require_cash(state, route.price, f"route {route_id}")

    opened = replace(route, is_opened=True, price_strategy=price_strategy)
    new_state = replace(
        state,
        cash=state.cash - route.price,
        routes=[opened if r.id == route_id else r for r in state.routes],
        route_market=state.route_market.without(route_id),
    )
    return ActionResult(new_state, f"Opened {route.origin} - {route.destination} for {route.price:,.0f}.")


def update_schedule(
    state: GameState,
    aircraft_id: str,
    route_ids: Sequence[str],
    rng: Optional[np.random.Generator] = None,
) -> ActionResult:
    """
    Replace an aircraft's daily rotations.

    All routes must be open and the rotations must fit in one day, except
    that a single route longer than a day may be flown on its own.
    """
    rng = rng if rng is not None else np.random.default_rng()
    aircraft = _require_aircraft(state, aircraft_id)
    routes = state.route_index()

    total_minutes = 0
    for route_id in route_ids:
        route = routes.get(route_id)
        if route is None or not route.is_opened:
            raise ActionError(f"Route {route_id} is not open")
        total_minutes += route.turnaround_time
    if len(route_ids) > 1 and total_minutes > C.MINUTES_PER_DAY:
        raise ActionError(f"Schedule needs {total_minutes} minutes, more than a day")

    schedule = [
        ScheduleEntry(route_id=route_id, flight_number=int(rng.integers(100, 10000)))
        for route_id in route_ids
    ]
    updated = replace(aircraft, schedule=schedule)
    return ActionResult(replace(state, fleet=_replace_aircraft(state, updated)),
                        f"Updated the schedule of {aircraft.nickname}.")


def _require_leased(aircraft: PlayerAircraft) -> None:
    if not aircraft.is_leased:
        raise ActionError(f"{aircraft.nickname} is not leased")


def return_lease(state: GameState, aircraft_id: str) -> ActionResult:
    """Hand a leased aircraft back, paying a penalty if the term has not ended."""
    aircraft = _require_aircraft(state, aircraft_id)
    _require_leased(aircraft)

    early = aircraft.lease_end_date is not None and state.date < aircraft.lease_end_date
    penalty = (aircraft.lease_cost or 0) * C.LEASE_EARLY_RETURN_PENALTY_MONTHS if early else 0
    _require_cash(state, penalty, "the early return penalty")

    new_state = replace(
        state,
        cash=state.cash - penalty,
        fleet=[ac for ac in state.fleet if ac.id != aircraft_id],
    )
    if early:
        return ActionResult(new_state, f"Returned {aircraft.nickname} early (penalty {penalty:,.0f}).")
    return ActionResult(new_state, f"Returned {aircraft.nickname}.")


def extend_lease(state: GameState, aircraft_id: str) -> ActionResult:
    """Extend a lease by another full term; the aircraft is grounded."""
    aircraft = _require_aircraft(state, aircraft_id)
    _require_leased(aircraft)
    current_end = aircraft.lease_end_date or state.date

    updated = replace(aircraft, lease_end_date=add_years(current_end, C.LEASE_TERM_YEARS), schedule=[])
    return ActionResult(replace(state, fleet=_replace_aircraft(state, updated)),
                        f"Extended the lease of {aircraft.nickname} by {C.LEASE_TERM_YEARS} years.")


def buyout_aircraft(state: GameState, aircraft_id: str,
                    catalogs: Optional[Catalogs] = None) -> ActionResult:
    """Buy a leased aircraft from its lessor."""
    catalogs = _catalogs(catalogs)
    aircraft = _require_aircraft(state, aircraft_id)
    _require_leased(aircraft)
    model = catalogs.aircraft_models.get(aircraft.model_id)
    if model is None:
        raise ActionError(f"Unknown aircraft model {aircraft.model_id!r}")

    cost = model.price * C.LEASE_BUYOUT_FACTOR
    _require_cash(state, cost, "the buyout")

    updated = replace(aircraft, ownership=Ownership.OWNED, lease_cost=None,
                      lease_end_date=None, schedule=[])
    new_state = replace(state, cash=state.cash - cost, fleet=_replace_aircraft(state, updated))
    return ActionResult(new_state, f"Bought out {aircraft.nickname} for {cost:,.0f}.")


def aircraft_sale_price(aircraft: PlayerAircraft, today: date, catalogs: Catalogs) -> float:
    """Resale value: straight-line depreciation to a residual share of list price."""
    model = catalogs.aircraft_models[aircraft.model_id]
    configuration = catalogs.configurations[aircraft.configuration_id]
    list_price = model.price * configuration.cost_modifier
    age = years_between(aircraft.purchase_date, today)
    depreciation = min(age, C.AIRCRAFT_DEPRECIATION_YEARS) / C.AIRCRAFT_DEPRECIATION_YEARS
    return list_price * (1 - (1 - C.AIRCRAFT_RESIDUAL_VALUE) * depreciation)


def sell_aircraft(state: GameState, aircraft_id: str,
                  catalogs: Optional[Catalogs] = None) -> ActionResult:
    catalogs = _catalogs(catalogs)
    aircraft = _require_aircraft(state, aircraft_id)
    if aircraft.ownership != Ownership.OWNED \
            or aircraft.model_id not in catalogs.aircraft_models \
            or aircraft.configuration_id not in catalogs.configurations:
        raise ActionError(f"{aircraft.nickname} cannot be sold")

    price = aircraft_sale_price(aircraft, state.date, catalogs)
    new_state = replace(
        state,
        cash=state.cash + price,
        fleet=[ac for ac in state.fleet if ac.id != aircraft_id],
    )
    return ActionResult(new_state, f"Sold {aircraft.nickname} for {price:,.0f}.")


def change_concept(state: GameState, concept: AirlineConcept,
                   catalogs: Optional[Catalogs] = None) -> ActionResult:
    """Start a paid, multi-year switch to another airline concept."""
    catalogs = _catalogs(catalogs)
    concept_data = catalogs.concepts.get(concept)
    if concept_data is None:
        raise ActionError(f"Unknown concept {concept}")
    if state.concept is None:
        raise ActionError("The airline has not chosen a concept yet")
    if state.concept_transition is not None:
        raise ActionError("A concept change is already in progress")

    rules = catalogs.rules
    _require_cash(state, rules.concept_change_cost, "a concept change")

    transition = ConceptTransition(
        from_concept=state.concept,
        to_concept=concept,
        start_date=state.date,
        end_date=add_years(state.date, rules.concept_transition_years),
    )
    new_state = replace(
        state,
        cash=state.cash - rules.concept_change_cost,
        concept_transition=transition,
        reputation=BrandReputationType.TRANSITIONING,
    )
    return ActionResult(new_state, f"Started the switch to '{concept_data.name}'; "
                                   f"it takes {rules.concept_transition_years} years.")


def set_maintenance_level(state: GameState, level: MaintenanceLevel,
                          catalogs: Optional[Catalogs] = None) -> ActionResult:
    catalogs = _catalogs(catalogs)
    name = catalogs.maintenance_levels[level].name
    return ActionResult(replace(state, maintenance_level=level),
                        f"Maintenance level changed to '{name}'.")


ServiceLevel = Union[MealServiceLevel, CrewServiceLevel, BaggageServiceLevel]


def set_service_level(state: GameState, level: ServiceLevel,
                      catalogs: Optional[Catalogs] = None) -> ActionResult:
    """Change the meal, crew or baggage service; the category follows the level's type."""
    catalogs = _catalogs(catalogs)
    if isinstance(level, MealServiceLevel):
        services = replace(state.service_levels, meal=level)
        label, name = "Meal", catalogs.meal_levels[level].name
    elif isinstance(level, CrewServiceLevel):
        services = replace(state.service_levels, crew=level)
        label, name = "Cabin crew", catalogs.crew_levels[level].name
    elif isinstance(level, BaggageServiceLevel):
        services = replace(state.service_levels, baggage=level)
        label, name = "Baggage", catalogs.baggage_levels[level].name
    else:
        raise ActionError(f"Unknown service level {level!r}")
    return ActionResult(replace(state, service_levels=services),
                        f"{label} service changed to '{name}'.")


def set_price_strategy(state: GameState, route_id: str, strategy: TicketPriceStrategy,
                       catalogs: Optional[Catalogs] = None) -> ActionResult:
    catalogs = _catalogs(catalogs)
    route = state.route_index().get(route_id)
    if route is None:
        raise ActionError(f"Unknown route {route_id}")
    updated = replace(route, price_strategy=strategy)
    new_state = replace(state, routes=[updated if r.id == route_id else r for r in state.routes])
    return ActionResult(new_state, f"Pricing on {route.destination} changed to "
                                   f"'{catalogs.price_strategies[strategy].name}'.")


def establish_hub(state: GameState, airport_code: str,
                  catalogs: Optional[Catalogs] = None) -> ActionResult:
    """
    Open a new base.

    A domestic hub generates a new set of routes; a foreign one is an
    office that cuts costs on routes touching it, at a quarter of the price.
    """
    catalogs = _catalogs(catalogs)
    profile = state.airline_profile
    airport = state.airport_index().get(airport_code)
    if airport is None or profile is None:
        raise ActionError(f"Cannot establish a hub at {airport_code}")
    if airport_code in profile.hubs:
        raise ActionError(f"{airport_code} is already a hub")

    foreign = airport.country != profile.country
    cost = catalogs.hub_establishment_costs[airport.scale]
    if foreign:
        cost *= C.FOREIGN_HUB_COST_FACTOR
    _require_cash(state, cost, f"a hub at {airport_code}")

    facilities = {code: set(f) for code, f in state.airport_facilities.items()}
    facilities.setdefault(airport_code, set()).add(AirportFacilityType.OFFICE)
    routes = list(state.routes)
    if not foreign:
        known = {r.id for r in routes}
        routes += [r for r in generate_routes_for_hub(airport, state.airports, catalogs)
                   if r.id not in known]

    new_state = replace(
        state,
        cash=state.cash - cost,
        airline_profile=replace(profile, hubs=tuple(profile.hubs) + (airport_code,)),
        routes=routes,
        airport_facilities=facilities,
    )
    if foreign:
        return ActionResult(new_state, f"Opened an overseas office at {airport.display_name}.")
    return ActionResult(new_state, f"Established a new hub at {airport.display_name}.")


def purchase_facility(state: GameState, airport_code: str, facility: AirportFacilityType,
                      catalogs: Optional[Catalogs] = None) -> ActionResult:
    catalogs = _catalogs(catalogs)
    airport = state.airport_index().get(airport_code)
    data = catalogs.facilities.get(facility)
    if airport is None or data is None:
        raise ActionError(f"Cannot build {facility} at {airport_code}")

    owned = state.airport_facilities.get(airport_code, set())
    if facility in owned:
        raise ActionError(f"{data.name} already exists at {airport_code}")
    cost = data.costs[airport.scale]
    _require_cash(state, cost, data.name)
    if data.prerequisite is not None and data.prerequisite not in owned:
        prerequisite = catalogs.facilities[data.prerequisite].name
        raise ActionError(f"{data.name} requires a {prerequisite} at {airport_code}")

    facilities = {code: set(f) for code, f in state.airport_facilities.items()}
    facilities[airport_code] = set(owned) | {facility}
    new_state = replace(state, cash=state.cash - cost, airport_facilities=facilities)
    return ActionResult(new_state, f"Built {data.name} at {airport_code}.")


def transfer_aircraft_base(state: GameState, aircraft_id: str, new_base: str) -> ActionResult:
    aircraft = _require_aircraft(state, aircraft_id)
    if aircraft.schedule:
        raise ActionError(f"{aircraft.nickname} has a schedule and cannot be transferred")
    _require_cash(state, C.HUB_TRANSFER_COST, "the transfer")
    if aircraft.base == new_base:
        raise ActionError(f"{aircraft.nickname} is already based at {new_base}")

    updated = replace(aircraft, base=new_base)
    new_state = replace(state, cash=state.cash - C.HUB_TRANSFER_COST,
                        fleet=_replace_aircraft(state, updated))
    return ActionResult(new_state, f"Transferred {aircraft.nickname} to {new_base}.")


def change_configuration(state: GameState, aircraft_id: str,
                         configuration_id: AircraftConfigurationType,
                         catalogs: Optional[Catalogs] = None) -> ActionResult:
    """Refit the cabin; the aircraft is reseated and grounded."""
    catalogs = _catalogs(catalogs)
    aircraft = _require_aircraft(state, aircraft_id)
    model = catalogs.aircraft_models.get(aircraft.model_id)
    configuration = catalogs.configurations.get(configuration_id)
    if model is None or configuration is None:
        raise ActionError(f"Cannot refit {aircraft.nickname} as {configuration_id}")

    cost = model.price * C.CONFIGURATION_CHANGE_COST_FACTOR
    _require_cash(state, cost, "the cabin refit")

    updated = replace(aircraft, configuration_id=configuration_id,
                      capacity=configuration.seating(model.capacity), schedule=[])
    new_state = replace(state, cash=state.cash - cost, fleet=_replace_aircraft(state, updated))
    return ActionResult(new_state, f"Refitted {aircraft.nickname} (cost {cost:,.0f}).")


def retrofit_aircraft(state: GameState, aircraft_id: str,
                      catalogs: Optional[Catalogs] = None) -> ActionResult:
    """Overhaul an airframe so it counts as new; the aircraft is grounded."""
    catalogs = _catalogs(catalogs)
    aircraft = _require_aircraft(state, aircraft_id)
    model = catalogs.aircraft_models.get(aircraft.model_id)
    if model is None:
        raise ActionError(f"Unknown aircraft model {aircraft.model_id!r}")

    cost = model.price * C.RETROFIT_COST_FACTOR
    _require_cash(state, cost, "the retrofit")

    updated = replace(aircraft, purchase_date=state.date, schedule=[])
    new_state = replace(state, cash=state.cash - cost, fleet=_replace_aircraft(state, updated))
    return ActionResult(new_state, f"Retrofitted {aircraft.nickname} (cost {cost:,.0f}).")
