"""
Daily update engine.

One call to ``DailyUpdateEngine.tick`` advances the game by one day and
returns a new ``GameState``; the previous state is never modified. The day
runs in a fixed order:

1. advance the date
2. end crash recovery when its date arrives
3. accident check (an accident ends the day immediately)
4. ground aircraft whose leases have run out
5. complete a finished concept change
6. on-time performance and passenger satisfaction
7. route revenue and costs
8. refresh the route marketplace on the first of the month
9. add the day's passengers to the lifetime tally
10. re-evaluate brand reputation
"""

from dataclasses import dataclass, field, replace
from datetime import date, timedelta
from typing import Dict, List, Optional, Tuple
import logging
import math

import numpy as np

from brand.reputation import brand_demand_modifier, brand_phase, calculate_new_reputation
from core.catalogs import Catalogs, default_catalogs
from core.models import (
    BrandReputationType, CabinClass, CABIN_ORDER, GameState, PlayerAircraft,
    add_years,
)
from network.routes import build_route_market
from operations.economics import DailyLedger, RouteDailyStats, settle_daily_operations
from operations.facilities import calculate_facility_effects
from operations.performance import calculate_on_time_performance, calculate_passenger_satisfaction


@dataclass
class DailyReport:
    """Figures recorded for one simulated day."""
    date: date
    cash: float
    income: float = 0.0
    expenses: float = 0.0
    passengers: Dict[CabinClass, float] = field(
        default_factory=lambda: {cabin: 0.0 for cabin in CABIN_ORDER}
    )
    on_time_performance: float = 0.0
    passenger_satisfaction: float = 0.0
    reputation: BrandReputationType = BrandReputationType.STARTUP
    accident: bool = False
    market_refreshed: bool = False
    route_stats: Dict[str, RouteDailyStats] = field(default_factory=dict)

    @property
    def profit(self) -> float:
        return self.income - self.expenses

    @property
    def total_passengers(self) -> float:
        return sum(self.passengers.values())


@dataclass
class DailyUpdateResult:
    state: GameState
    notifications: List[str]
    report: DailyReport


class DailyUpdateEngine:
    """
    Advances a game state one day at a time.

    Args:
        catalogs: Reference tables; the bundled defaults when omitted
        rng: Random generator for accidents and the route marketplace
        random_seed: Seed used to create a generator when ``rng`` is omitted
    """

    def __init__(
        self,
        catalogs: Optional[Catalogs] = None,
        rng: Optional[np.random.Generator] = None,
        random_seed: Optional[int] = None,
    ):
        self.catalogs = catalogs or default_catalogs()
        self.rng = rng if rng is not None else np.random.default_rng(random_seed)
        self.logger = logging.getLogger('DailyUpdateEngine')

    def tick(self, previous: GameState) -> DailyUpdateResult:
        """Run one simulated day."""
        notifications: List[str] = []
        today = previous.date + timedelta(days=1)

        # Working copy with fresh containers so the caller's state is untouched
        state = replace(
            previous,
            date=today,
            fleet=list(previous.fleet),
            routes=list(previous.routes),
            passengers_carried=dict(previous.passengers_carried),
            airport_facilities={code: set(f) for code, f in previous.airport_facilities.items()},
            airports=list(previous.airports),
        )

        self._recover_from_crash(state, notifications)

        if self._check_accidents(state, notifications):
            report = DailyReport(
                date=today,
                cash=state.cash,
                on_time_performance=state.on_time_performance,
                passenger_satisfaction=state.passenger_satisfaction,
                reputation=state.reputation,
                accident=True,
            )
            return DailyUpdateResult(state, notifications, report)

        self._ground_expired_leases(state, notifications)
        self._complete_concept_transition(state, notifications)

        airports = state.airport_index()
        state.on_time_performance = calculate_on_time_performance(
            state.fleet, today, state.maintenance_level, state.airport_facilities,
            airports, state.airline_profile, self.catalogs,
        )
        state.passenger_satisfaction = calculate_passenger_satisfaction(
            state.fleet, today, state.service_levels, state.airport_facilities, self.catalogs,
        )

        brand_modifier = brand_demand_modifier(brand_phase(state), today, self.catalogs)
        ledger = settle_daily_operations(state, brand_modifier, self.catalogs)
        state.cash += ledger.income - ledger.expenses

        market_refreshed = self._refresh_market(state)
        self._tally_passengers(state, ledger)

        if state.concept_transition is None and state.crashed_reputation_end_date is None:
            new_reputation = calculate_new_reputation(state, self.catalogs)
            if new_reputation != state.reputation:
                self.logger.info(f"{today}: reputation {state.reputation.value} -> {new_reputation.value}")
                state.reputation = new_reputation

        report = DailyReport(
            date=today,
            cash=state.cash,
            income=ledger.income,
            expenses=ledger.expenses,
            passengers=ledger.passengers_by_cabin,
            on_time_performance=state.on_time_performance,
            passenger_satisfaction=state.passenger_satisfaction,
            reputation=state.reputation,
            market_refreshed=market_refreshed,
            route_stats=ledger.route_stats,
        )
        return DailyUpdateResult(state, notifications, report)

    def _recover_from_crash(self, state: GameState, notifications: List[str]) -> None:
        end = state.crashed_reputation_end_date
        if end is None or state.date < end:
            return
        if state.concept is not None:
            state.reputation = self.catalogs.concepts[state.concept].initial_reputation
        else:
            state.reputation = BrandReputationType.STARTUP
        state.crashed_reputation_end_date = None
        notifications.append("The airline has put the fatal accident behind it; "
                             "its reputation is starting to recover.")
        self.logger.info(f"{state.date}: crash recovery complete, reputation {state.reputation.value}")

    def _accident_probability(self, aircraft: PlayerAircraft, state: GameState) -> float:
        rules = self.catalogs.rules
        maintenance = self.catalogs.maintenance_levels[state.maintenance_level]
        base_effects = calculate_facility_effects(
            state.airport_facilities, aircraft.base, self.catalogs.facilities)
        age = aircraft.age_in_years(state.date)
        return ((rules.base_accident_probability + age * rules.age_accident_modifier)
                * maintenance.accident_modifier * base_effects.accident_modifier)

    def _check_accidents(self, state: GameState, notifications: List[str]) -> bool:
        """Roll for an accident per flying aircraft; stop at the first one."""
        if state.reputation == BrandReputationType.CRASHED:
            return False

        rules = self.catalogs.rules
        for aircraft in state.fleet:
            if not aircraft.schedule:
                continue
            probability = self._accident_probability(aircraft, state)
            if self.rng.random() >= probability:
                continue

            model = self.catalogs.aircraft_models.get(aircraft.model_id)
            model_name = model.name if model else aircraft.model_id
            notifications.append(f"[EMERGENCY] {aircraft.nickname} ({model_name}) "
                                 f"has been involved in a fatal accident!")

            state.fleet = [ac for ac in state.fleet if ac.id != aircraft.id]
            state.cash -= rules.accident_penalty_cost
            state.reputation = BrandReputationType.CRASHED
            state.crashed_reputation_end_date = add_years(state.date, rules.crash_reputation_years)
            self.logger.info(f"{state.date}: accident involving {aircraft.id}, "
                             f"reputation crashed until {state.crashed_reputation_end_date}")
            return True
        return False

    def _ground_expired_leases(self, state: GameState, notifications: List[str]) -> None:
        grounded = 0
        fleet = []
        for aircraft in state.fleet:
            if aircraft.is_lease_expired(state.date) and aircraft.schedule:
                aircraft = replace(aircraft, schedule=[])
                grounded += 1
            fleet.append(aircraft)
        state.fleet = fleet

        if grounded:
            notifications.append("Some aircraft leases have expired. "
                                 "Return, extend or buy out the aircraft from the fleet panel.")
            self.logger.info(f"{state.date}: grounded {grounded} aircraft with expired leases")

    def _complete_concept_transition(self, state: GameState, notifications: List[str]) -> None:
        transition = state.concept_transition
        if transition is None or state.date < transition.end_date:
            return
        concept = self.catalogs.concepts[transition.to_concept]
        state.concept = transition.to_concept
        state.reputation = concept.initial_reputation
        state.concept_transition = None
        notifications.append(f"The switch to the '{concept.name}' concept is complete.")
        self.logger.info(f"{state.date}: concept transition to {concept.id.value} complete")

    def _refresh_market(self, state: GameState) -> bool:
        if state.date.day != 1:
            return False
        state.route_market = build_route_market(
            state.routes, state.airport_index(), self.rng,
            per_category=self.catalogs.rules.market_routes_per_category,
        )
        self.logger.info(f"{state.date}: route market refreshed with "
                         f"{len(state.route_market.all_routes())} routes")
        return True

    @staticmethod
    def _tally_passengers(state: GameState, ledger: DailyLedger) -> None:
        for cabin, flown in ledger.passengers_by_cabin.items():
            state.passengers_carried[cabin] = state.passengers_carried.get(cabin, 0) + math.floor(flown)


def process_daily_update(
    previous_state: GameState,
    catalogs: Optional[Catalogs] = None,
    rng: Optional[np.random.Generator] = None,
) -> Tuple[GameState, List[str]]:
    """Advance ``previous_state`` by one day; returns the new state and notifications."""
    result = DailyUpdateEngine(catalogs=catalogs, rng=rng).tick(previous_state)
    return result.state, result.notifications
