"""
Daily revenue and cost accounting.

For every opened route the day's seat supply is collected from the
aircraft scheduled on it, fixed aircraft costs are spread over the routes
each aircraft flies in proportion to turnaround time, and passenger demand
is derived from the route baseline and the brand, price, performance and
facility multipliers. Passengers flown are the smaller of supply and
demand in each cabin.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Dict, Mapping, Optional
import logging

import numpy as np

from core.catalogs import (
    AircraftConfiguration, AircraftModel, Catalogs, MaintenanceData, ServiceLevelData,
)
from core.constants import DAYS_PER_MONTH
from core.models import CabinClass, CABIN_ORDER, GameState, PlayerAircraft, Route
from operations.facilities import calculate_facility_effects
from operations.performance import find_performance_tier

logger = logging.getLogger(__name__)


def cabin_vector(values: Optional[Mapping[CabinClass, float]]) -> np.ndarray:
    """Per-cabin values as an array in cabin order; missing cabins are 0."""
    values = values or {}
    return np.array([values.get(cabin, 0) for cabin in CABIN_ORDER], dtype=float)


def cabin_dict(vector: np.ndarray) -> Dict[CabinClass, float]:
    return {cabin: float(v) for cabin, v in zip(CABIN_ORDER, vector)}


@dataclass
class RouteDailyStats:
    """One opened route's figures for the day."""
    route_id: str
    supply: np.ndarray = field(default_factory=lambda: np.zeros(len(CABIN_ORDER)))
    demand: np.ndarray = field(default_factory=lambda: np.zeros(len(CABIN_ORDER)))
    passengers: np.ndarray = field(default_factory=lambda: np.zeros(len(CABIN_ORDER)))
    cost: float = 0.0
    revenue: float = 0.0

    @property
    def load_factor(self) -> float:
        seats = self.supply.sum()
        if seats == 0:
            return 0.0
        return float(self.passengers.sum() / seats)

    @property
    def profit(self) -> float:
        return self.revenue - self.cost


@dataclass
class DailyLedger:
    """Network-wide income, expenses and passengers for one day."""
    income: float = 0.0
    expenses: float = 0.0
    passengers: np.ndarray = field(default_factory=lambda: np.zeros(len(CABIN_ORDER)))
    route_stats: Dict[str, RouteDailyStats] = field(default_factory=dict)

    @property
    def profit(self) -> float:
        return self.income - self.expenses

    @property
    def passengers_by_cabin(self) -> Dict[CabinClass, float]:
        return cabin_dict(self.passengers)


def aircraft_daily_fixed_cost(
    aircraft: PlayerAircraft,
    model: AircraftModel,
    configuration: AircraftConfiguration,
    maintenance: MaintenanceData,
    crew: ServiceLevelData,
    today: date,
) -> float:
    """Operating, maintenance, crew and (live) lease cost of one aircraft for a day."""
    cost = (model.operating_cost * configuration.operating_cost_modifier
            + maintenance.cost_per_aircraft_per_day
            + crew.cost_per_aircraft_per_day)
    if aircraft.is_leased and aircraft.lease_cost and not aircraft.is_lease_expired(today):
        cost += aircraft.lease_cost / DAYS_PER_MONTH
    return cost


def _allocate_fleet(state: GameState, opened: Mapping[str, Route], catalogs: Catalogs,
                    stats: Dict[str, RouteDailyStats]) -> None:
    """Add each flying aircraft's seats and costs to the routes it serves."""
    maintenance = catalogs.maintenance_levels[state.maintenance_level]
    crew = catalogs.crew_levels[state.service_levels.crew]

    for aircraft in state.fleet:
        if aircraft.is_lease_expired(state.date) or not aircraft.schedule:
            continue

        model = catalogs.aircraft_models.get(aircraft.model_id)
        configuration = catalogs.configurations.get(aircraft.configuration_id)
        if model is None or configuration is None:
            logger.warning(f"Skipping aircraft {aircraft.id}: unknown model "
                           f"{aircraft.model_id!r} or configuration {aircraft.configuration_id}")
            continue

        fixed_cost = aircraft_daily_fixed_cost(aircraft, model, configuration, maintenance, crew, state.date)
        total_time = sum(
            opened[entry.route_id].turnaround_time
            for entry in aircraft.schedule
            if entry.route_id in opened
        )
        seats = cabin_vector(aircraft.capacity)

        for entry in aircraft.schedule:
            route = opened.get(entry.route_id)
            if route is None:
                logger.warning(f"Aircraft {aircraft.id} is scheduled on missing or unopened "
                               f"route {entry.route_id}")
                continue
            route_stats = stats[route.id]
            route_stats.supply += seats
            route_stats.cost += model.cost_per_flight
            if total_time > 0:
                route_stats.cost += fixed_cost * (route.turnaround_time / total_time)


def settle_daily_operations(
    state: GameState,
    brand_modifier: Mapping[CabinClass, float],
    catalogs: Catalogs,
) -> DailyLedger:
    """
    Income, expenses and passengers for the day described by ``state``.

    ``state`` must already carry the day's date and performance scores.
    Routes without a price strategy still incur costs but carry nobody.
    """
    rules = catalogs.rules
    airports = state.airport_index()
    opened = {r.id: r for r in state.routes if r.is_opened}
    stats = {route_id: RouteDailyStats(route_id) for route_id in opened}

    _allocate_fleet(state, opened, catalogs, stats)

    otp_tier = find_performance_tier(state.on_time_performance, catalogs.otp_tiers)
    satisfaction_tier = find_performance_tier(state.passenger_satisfaction, catalogs.satisfaction_tiers)
    performance_demand = cabin_vector(otp_tier.demand_modifier) * cabin_vector(satisfaction_tier.demand_modifier)
    brand_demand = cabin_vector(brand_modifier)
    price_per_km = cabin_vector(rules.ticket_price_per_km)

    service_cost_per_passenger = (
        catalogs.meal_levels[state.service_levels.meal].cost_per_passenger
        + catalogs.baggage_levels[state.service_levels.baggage].cost_per_passenger
    )

    ledger = DailyLedger(route_stats=stats)
    for route_id, route_stats in stats.items():
        route = opened[route_id]
        origin_effects = calculate_facility_effects(state.airport_facilities, route.origin_code, catalogs.facilities)

        if route.origin_code in airports and route.destination_code in airports:
            destination_effects = calculate_facility_effects(
                state.airport_facilities, route.destination_code, catalogs.facilities)
            route_stats.cost *= origin_effects.cost_modifier * destination_effects.cost_modifier
        ledger.expenses += route_stats.cost

        if route.price_strategy is None:
            continue
        strategy = catalogs.price_strategies.get(route.price_strategy)
        if strategy is None:
            logger.warning(f"Route {route_id} has unknown price strategy {route.price_strategy}")
            continue

        competition = rules.competition_modifiers[route.competition]
        demand = (cabin_vector(route.demand_classes) * competition * brand_demand
                  * cabin_vector(strategy.demand_modifier) * performance_demand
                  * cabin_vector(origin_effects.demand_modifier))
        passengers = np.minimum(route_stats.supply, demand)

        route_stats.demand = demand
        route_stats.passengers = passengers
        route_stats.cost += float(passengers.sum()) * service_cost_per_passenger
        ledger.expenses += float(passengers.sum()) * service_cost_per_passenger

        route_stats.revenue = float(np.sum(
            passengers * price_per_km * route.distance * cabin_vector(strategy.price_modifier)
        ))
        ledger.income += route_stats.revenue
        ledger.passengers += passengers

    logger.debug(f"{state.date}: income {ledger.income:,.0f}, expenses {ledger.expenses:,.0f}, "
                 f"passengers {ledger.passengers.sum():,.0f}")
    return ledger
