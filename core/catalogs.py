"""
Read-only reference catalogs consumed by the simulation.

Every record here is frozen and every table is exposed through a
``MappingProxyType`` so the engine can look values up by key without being
able to change them. ``default_catalogs()`` assembles the bundled game data
from the ``data`` package; tests and callers may build their own bundle or
derive one with ``dataclasses.replace``.
"""

from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple
import math

from core.models import (
    CabinClass, CABIN_ORDER, AirportScale, CompetitionLevel, AirlineConcept,
    BrandReputationType, AircraftConfigurationType, TicketPriceStrategy,
    MaintenanceLevel, MealServiceLevel, CrewServiceLevel, BaggageServiceLevel,
    PerformanceLevel, AirportFacilityType, StartingCapitalLevel, Airport,
)
from core import constants as C


def frozen_map(values: Mapping) -> Mapping:
    """Read-only view over a copy of ``values``."""
    return MappingProxyType(dict(values))


def per_cabin(first: float, business: float, economy: float) -> Mapping[CabinClass, float]:
    return frozen_map({
        CabinClass.FIRST: first,
        CabinClass.BUSINESS: business,
        CabinClass.ECONOMY: economy,
    })


NEUTRAL_DEMAND = per_cabin(1.0, 1.0, 1.0)


@dataclass(frozen=True)
class AircraftModel:
    """Purchasable aircraft type."""
    id: str
    name: str
    manufacturer: str
    price: float
    range_km: int
    capacity: int  # all-economy seat count
    operating_cost: float  # per day
    cost_per_flight: float
    unlock_year: int
    initial_age_on_purchase: int = 0


@dataclass(frozen=True)
class AircraftConfiguration:
    """Cabin layout with its cost and comfort trade-offs."""
    id: AircraftConfigurationType
    name: str
    cost_modifier: float
    operating_cost_modifier: float
    seat_shares: Mapping[CabinClass, float]
    satisfaction_modifier: float

    def seating(self, base_capacity: int) -> Dict[CabinClass, int]:
        """Seats per cabin for an airframe with ``base_capacity`` economy seats."""
        return {
            cabin: int(math.floor(base_capacity * self.seat_shares.get(cabin, 0.0)))
            for cabin in CABIN_ORDER
        }


@dataclass(frozen=True)
class BrandReputation:
    """
    One rung of the brand ladder.

    ``required_*`` gate evolution into a better rung; ``*_penalty`` are the
    floors below which the brand devolves.
    """
    id: BrandReputationType
    name: str
    demand_modifier: Mapping[CabinClass, float]
    required_otp: Optional[float] = None
    required_satisfaction: Optional[float] = None
    otp_penalty: Optional[float] = None
    satisfaction_penalty: Optional[float] = None


@dataclass(frozen=True)
class AirlineConceptData:
    id: AirlineConcept
    name: str
    initial_reputation: BrandReputationType


@dataclass(frozen=True)
class TicketPriceStrategyData:
    id: TicketPriceStrategy
    name: str
    price_modifier: Mapping[CabinClass, float]
    demand_modifier: Mapping[CabinClass, float]


@dataclass(frozen=True)
class MaintenanceData:
    id: MaintenanceLevel
    name: str
    cost_per_aircraft_per_day: float
    accident_modifier: float
    otp_modifier: float
    otp_age_mitigation: float  # share of the age penalty that is removed


@dataclass(frozen=True)
class ServiceLevelData:
    """Meal, crew or baggage service option."""
    id: object
    name: str
    satisfaction_points: float
    cost_per_passenger: float = 0.0
    cost_per_aircraft_per_day: float = 0.0


@dataclass(frozen=True)
class PerformanceTier:
    """OTP or satisfaction band and the demand multiplier it earns."""
    level: PerformanceLevel
    name: str
    threshold: float
    demand_modifier: Mapping[CabinClass, float]


@dataclass(frozen=True)
class FacilityEffects:
    """Combined effect of airport facilities; the defaults are neutral."""
    cost_modifier: float = 1.0
    accident_modifier: float = 1.0
    otp_bonus: float = 0.0
    satisfaction_bonus: float = 0.0
    demand_modifier: Mapping[CabinClass, float] = field(default_factory=lambda: NEUTRAL_DEMAND)

    def combine(self, other: 'FacilityEffects') -> 'FacilityEffects':
        """Stack another facility's effects on top of these."""
        return FacilityEffects(
            cost_modifier=self.cost_modifier * other.cost_modifier,
            accident_modifier=self.accident_modifier * other.accident_modifier,
            otp_bonus=self.otp_bonus + other.otp_bonus,
            satisfaction_bonus=self.satisfaction_bonus + other.satisfaction_bonus,
            demand_modifier=frozen_map({
                cabin: self.demand_modifier.get(cabin, 1.0) * other.demand_modifier.get(cabin, 1.0)
                for cabin in CABIN_ORDER
            }),
        )


@dataclass(frozen=True)
class AirportFacilityData:
    id: AirportFacilityType
    name: str
    description: str
    costs: Mapping[AirportScale, float]
    effects: FacilityEffects
    prerequisite: Optional[AirportFacilityType] = None


@dataclass(frozen=True)
class EconomyRules:
    """Tunable scalar rules of the economy."""
    base_accident_probability: float = C.BASE_ACCIDENT_PROBABILITY
    age_accident_modifier: float = C.AIRCRAFT_AGE_ACCIDENT_MODIFIER
    accident_penalty_cost: float = C.ACCIDENT_PENALTY_COST
    crash_reputation_years: int = C.CRASH_REPUTATION_DURATION_YEARS
    concept_change_cost: float = C.CONCEPT_CHANGE_COST
    concept_transition_years: int = C.CONCEPT_TRANSITION_YEARS
    reputation_passenger_floor: int = C.REPUTATION_PASSENGER_FLOOR
    otp_base_score: float = C.OTP_BASE_SCORE
    otp_age_penalty_per_year: float = C.OTP_AGE_PENALTY_PER_YEAR
    otp_foreign_hub_bonus: float = C.OTP_FOREIGN_HUB_BONUS
    fleet_stretch_threshold: float = C.FLEET_STRETCH_THRESHOLD
    fleet_stretch_penalty: float = C.FLEET_STRETCH_PENALTY
    satisfaction_base_score: float = C.SATISFACTION_BASE_SCORE
    satisfaction_age_threshold: float = C.SATISFACTION_AGE_THRESHOLD_YEARS
    satisfaction_age_penalty_per_year: float = C.SATISFACTION_AGE_PENALTY_PER_YEAR
    market_routes_per_category: int = C.MARKET_ROUTES_PER_CATEGORY
    competition_modifiers: Mapping[CompetitionLevel, float] = field(
        default_factory=lambda: frozen_map({
            CompetitionLevel.LOW: 0.8,
            CompetitionLevel.MEDIUM: 0.6,
            CompetitionLevel.HIGH: 0.4,
        })
    )
    ticket_price_per_km: Mapping[CabinClass, float] = field(
        default_factory=lambda: per_cabin(900, 400, 120)
    )


DemandKey = Tuple[bool, AirportScale, AirportScale]  # (is_domestic, origin, destination)


@dataclass(frozen=True)
class Catalogs:
    """Bundle of every reference table the engine and actions read."""
    aircraft_models: Mapping[str, AircraftModel]
    configurations: Mapping[AircraftConfigurationType, AircraftConfiguration]
    reputations: Mapping[BrandReputationType, BrandReputation]
    concepts: Mapping[AirlineConcept, AirlineConceptData]
    price_strategies: Mapping[TicketPriceStrategy, TicketPriceStrategyData]
    maintenance_levels: Mapping[MaintenanceLevel, MaintenanceData]
    meal_levels: Mapping[MealServiceLevel, ServiceLevelData]
    crew_levels: Mapping[CrewServiceLevel, ServiceLevelData]
    baggage_levels: Mapping[BaggageServiceLevel, ServiceLevelData]
    otp_tiers: Tuple[PerformanceTier, ...]
    satisfaction_tiers: Tuple[PerformanceTier, ...]
    facilities: Mapping[AirportFacilityType, AirportFacilityData]
    demand_matrix: Mapping[DemandKey, Mapping[CabinClass, int]]
    competition_matrix: Mapping[Tuple[AirportScale, AirportScale], CompetitionLevel]
    airports: Tuple[Airport, ...]
    hub_establishment_costs: Mapping[AirportScale, float]
    starting_capital: Mapping[StartingCapitalLevel, float]
    rules: EconomyRules = field(default_factory=EconomyRules)

    def airport(self, code: str) -> Optional[Airport]:
        for airport in self.airports:
            if airport.code == code:
                return airport
        return None


@lru_cache(maxsize=None)
def default_catalogs() -> Catalogs:
    """The bundled game tables, built once."""
    from data import aircraft, airports, brand, facilities, market, services

    return Catalogs(
        aircraft_models=frozen_map({m.id: m for m in aircraft.AIRCRAFT_MODELS}),
        configurations=frozen_map({c.id: c for c in aircraft.CONFIGURATIONS}),
        reputations=frozen_map({r.id: r for r in brand.REPUTATIONS}),
        concepts=frozen_map({c.id: c for c in brand.CONCEPTS}),
        price_strategies=frozen_map({s.id: s for s in market.PRICE_STRATEGIES}),
        maintenance_levels=frozen_map({m.id: m for m in services.MAINTENANCE_LEVELS}),
        meal_levels=frozen_map({s.id: s for s in services.MEAL_LEVELS}),
        crew_levels=frozen_map({s.id: s for s in services.CREW_LEVELS}),
        baggage_levels=frozen_map({s.id: s for s in services.BAGGAGE_LEVELS}),
        otp_tiers=tuple(services.OTP_TIERS),
        satisfaction_tiers=tuple(services.SATISFACTION_TIERS),
        facilities=frozen_map({f.id: f for f in facilities.FACILITIES}),
        demand_matrix=frozen_map(market.DEMAND_MATRIX),
        competition_matrix=frozen_map(market.COMPETITION_MATRIX),
        airports=tuple(airports.AIRPORTS),
        hub_establishment_costs=frozen_map(facilities.HUB_ESTABLISHMENT_COSTS),
        starting_capital=frozen_map(market.STARTING_CAPITAL),
    )
