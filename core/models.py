"""
Core data models for the airline tycoon simulation.

This module defines the fundamental data structures representing airports,
routes, aircraft, schedules and the per-day game state that the daily
update engine consumes and produces.
"""

from dataclasses import dataclass, field
from datetime import date, timedelta
from enum import Enum
from typing import Optional, List, Dict, Set, Tuple
import calendar


class CabinClass(Enum):
    """Aircraft cabin classes."""
    FIRST = "first"
    BUSINESS = "business"
    ECONOMY = "economy"


# Fixed cabin order used whenever per-cabin values are vectorised
CABIN_ORDER: Tuple[CabinClass, ...] = (
    CabinClass.FIRST,
    CabinClass.BUSINESS,
    CabinClass.ECONOMY,
)


class AirportScale(Enum):
    """Airport size tiers."""
    REGIONAL = "REGIONAL"
    MAJOR = "MAJOR"
    HUB = "HUB"
    MEGA = "MEGA"

    @property
    def is_large(self) -> bool:
        return self in (AirportScale.HUB, AirportScale.MEGA)


class CompetitionLevel(Enum):
    """Competitive pressure on a route."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class RouteCategory(Enum):
    """Route marketplace buckets."""
    TRUNK = "trunk"
    FEEDER = "feeder"
    REGIONAL = "regional"


class AirlineConcept(Enum):
    """Strategic positioning of the airline."""
    FSC = "FSC"  # Full-Service Carrier
    LCC = "LCC"  # Low-Cost Carrier


class BrandReputationType(Enum):
    """Brand reputation ladder states."""
    STARTUP = "STARTUP"
    FSC_CLASSIC = "FSC_CLASSIC"
    FSC_PREMIUM = "FSC_PREMIUM"
    FSC_NORMAL = "FSC_NORMAL"
    LCC_GOOD = "LCC_GOOD"
    LCC_STANDARD = "LCC_STANDARD"
    ULCC = "ULCC"
    TRANSITIONING = "TRANSITIONING"
    CRASHED = "CRASHED"


class AircraftConfigurationType(Enum):
    """Cabin layouts an aircraft can be fitted with."""
    FSC_LONG_HAUL = "FSC_LH"
    FSC_MEDIUM_HAUL = "FSC_MH"
    LCC_BUSINESS = "LCC_BUSINESS"
    LCC_ECONOMY = "LCC_ECONOMY"


class Ownership(Enum):
    """How the airline holds an aircraft."""
    OWNED = "owned"
    LEASED = "leased"


class TicketPriceStrategy(Enum):
    """Per-route pricing policy."""
    PREMIUM = "PREMIUM"
    STANDARD = "STANDARD"
    LOW_COST = "LOW_COST"
    ULTRA_LOW_COST = "ULTRA_LOW_COST"


class MaintenanceLevel(Enum):
    """Fleet-wide maintenance programme."""
    MINIMAL = "MINIMAL"
    STANDARD = "STANDARD"
    ADVANCED = "ADVANCED"
    STATE_OF_THE_ART = "STATE_OF_THE_ART"


class MealServiceLevel(Enum):
    NONE = "NONE"
    SNACKS = "SNACKS"
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"


class CrewServiceLevel(Enum):
    SAFETY_ONLY = "SAFETY_ONLY"
    BASIC = "BASIC"
    ATTENTIVE = "ATTENTIVE"
    EXEMPLARY = "EXEMPLARY"


class BaggageServiceLevel(Enum):
    PERSONAL_ITEM_ONLY = "PERSONAL_ITEM_ONLY"
    PAID_CARRY_ON = "PAID_CARRY_ON"
    FREE_CHECKED_ONE = "FREE_CHECKED_ONE"
    GENEROUS = "GENEROUS"


class PerformanceLevel(Enum):
    """Tiers shared by on-time performance and passenger satisfaction."""
    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    AVERAGE = "AVERAGE"
    POOR = "POOR"
    CRITICAL = "CRITICAL"


class AirportFacilityType(Enum):
    """Per-airport upgrades the airline can buy."""
    OFFICE = "OFFICE"
    MAINTENANCE_CENTER = "MAINTENANCE_CENTER"
    GROUND_SERVICES = "GROUND_SERVICES"
    FUEL_DEPOT = "FUEL_DEPOT"
    CREW_CENTER = "CREW_CENTER"
    LOUNGE = "LOUNGE"


class StartingCapitalLevel(Enum):
    CHALLENGING = "CHALLENGING"
    STANDARD = "STANDARD"
    WEALTHY = "WEALTHY"


def cabin_values(first: float = 0, business: float = 0, economy: float = 0) -> Dict[CabinClass, float]:
    """Build a per-cabin mapping in the canonical cabin order."""
    return {
        CabinClass.FIRST: first,
        CabinClass.BUSINESS: business,
        CabinClass.ECONOMY: economy,
    }


def years_between(start: date, end: date) -> float:
    """Elapsed years between two dates, using a 365.25-day year."""
    return (end - start).days / 365.25


def add_years(day: date, years: int) -> date:
    """
    Shift a date by whole calendar years.

    February 29 rolls over to March 1 when the target year is not a leap
    year.
    """
    target_year = day.year + years
    if day.month == 2 and day.day == 29 and not calendar.isleap(target_year):
        return date(target_year, 3, 1)
    return day.replace(year=target_year)


@dataclass(frozen=True)
class Airport:
    """Airport definition."""
    code: str  # IATA code (e.g., "ICN")
    name: str
    country: str  # ISO country code (e.g., "KR")
    lat: float
    lon: float
    scale: AirportScale
    slots: int  # daily
    runway_length: int  # meters

    @property
    def display_name(self) -> str:
        """Human-readable name carrying the code, e.g. 'Incheon (ICN)'."""
        return f"{self.name} ({self.code})"

    def __str__(self) -> str:
        return self.display_name


@dataclass(frozen=True)
class Route:
    """A possible (or opened) route from one of the airline's hubs."""
    id: str
    origin: str  # display name, "Name (CODE)"
    destination: str
    origin_code: str
    destination_code: str
    distance: int  # km
    turnaround_time: int  # minutes per round trip
    price: int  # cost to open the route
    demand_classes: Dict[CabinClass, int]
    competition: CompetitionLevel
    is_opened: bool = False
    price_strategy: Optional[TicketPriceStrategy] = None

    def __str__(self) -> str:
        return self.id

    def __hash__(self) -> int:
        return hash(self.id)


@dataclass(frozen=True)
class ScheduleEntry:
    """One route rotation in an aircraft's daily schedule."""
    route_id: str
    flight_number: int


@dataclass
class PlayerAircraft:
    """An aircraft in the airline's fleet."""
    id: str
    nickname: str
    model_id: str
    purchase_date: date  # may be backdated; only used for age
    configuration_id: AircraftConfigurationType
    capacity: Dict[CabinClass, int]  # seating snapshot
    base: str  # airport code of the home base
    schedule: List[ScheduleEntry] = field(default_factory=list)
    ownership: Ownership = Ownership.OWNED
    lease_cost: Optional[float] = None  # per month
    lease_end_date: Optional[date] = None

    @property
    def is_leased(self) -> bool:
        return self.ownership == Ownership.LEASED

    def age_in_years(self, on: date) -> float:
        """Aircraft age on a given date."""
        return years_between(self.purchase_date, on)

    def is_lease_expired(self, on: date) -> bool:
        """True when a leased aircraft's contract has run out."""
        return (
            self.is_leased
            and self.lease_end_date is not None
            and on >= self.lease_end_date
        )

    def __str__(self) -> str:
        return f"{self.nickname} ({self.model_id})"


@dataclass(frozen=True)
class ConceptTransition:
    """An in-progress change of airline concept."""
    from_concept: AirlineConcept
    to_concept: AirlineConcept
    start_date: date
    end_date: date

    def progress(self, on: date) -> float:
        """Elapsed fraction of the transition, clamped to [0, 1]."""
        total = (self.end_date - self.start_date).days
        if total <= 0:
            return 1.0
        elapsed = (on - self.start_date).days
        return max(0.0, min(1.0, elapsed / total))


@dataclass(frozen=True)
class AirlineProfile:
    """Identity of the player's airline."""
    name: str
    code: str
    hubs: Tuple[str, ...]  # airport codes, first is the home hub
    country: str  # home country code


@dataclass(frozen=True)
class ServiceLevels:
    """Operator-selected in-flight service settings."""
    meal: MealServiceLevel = MealServiceLevel.STANDARD
    crew: CrewServiceLevel = CrewServiceLevel.ATTENTIVE
    baggage: BaggageServiceLevel = BaggageServiceLevel.FREE_CHECKED_ONE


@dataclass
class RouteMarket:
    """Routes currently offered for purchase, bucketed by category."""
    trunk: List[Route] = field(default_factory=list)
    feeder: List[Route] = field(default_factory=list)
    regional: List[Route] = field(default_factory=list)

    def for_category(self, category: RouteCategory) -> List[Route]:
        return getattr(self, category.value)

    def all_routes(self) -> List[Route]:
        return self.trunk + self.feeder + self.regional

    def without(self, route_id: str) -> 'RouteMarket':
        """Copy of the market with one route removed from every list."""
        return RouteMarket(
            trunk=[r for r in self.trunk if r.id != route_id],
            feeder=[r for r in self.feeder if r.id != route_id],
            regional=[r for r in self.regional if r.id != route_id],
        )


@dataclass
class GameState:
    """
    Complete snapshot of one simulated day.

    Ticks never modify a GameState in place; they return a new one.
    """
    cash: float
    date: date
    founding_date: date
    fleet: List[PlayerAircraft] = field(default_factory=list)
    routes: List[Route] = field(default_factory=list)
    route_market: RouteMarket = field(default_factory=RouteMarket)
    reputation: BrandReputationType = BrandReputationType.STARTUP
    concept: Optional[AirlineConcept] = None
    concept_transition: Optional[ConceptTransition] = None
    passengers_carried: Dict[CabinClass, int] = field(
        default_factory=lambda: {cabin: 0 for cabin in CABIN_ORDER}
    )
    maintenance_level: MaintenanceLevel = MaintenanceLevel.STANDARD
    service_levels: ServiceLevels = field(default_factory=ServiceLevels)
    crashed_reputation_end_date: Optional[date] = None
    airport_facilities: Dict[str, Set[AirportFacilityType]] = field(default_factory=dict)
    airports: List[Airport] = field(default_factory=list)
    airline_profile: Optional[AirlineProfile] = None
    on_time_performance: float = 98.0
    passenger_satisfaction: float = 75.0

    @property
    def total_passengers_carried(self) -> int:
        return sum(self.passengers_carried.values())

    def airport_index(self) -> Dict[str, Airport]:
        """Airports keyed by code."""
        return {a.code: a for a in self.airports}

    def route_index(self) -> Dict[str, Route]:
        """Routes keyed by id."""
        return {r.id: r for r in self.routes}

    def find_aircraft(self, aircraft_id: str) -> Optional[PlayerAircraft]:
        for aircraft in self.fleet:
            if aircraft.id == aircraft_id:
                return aircraft
        return None

    def __str__(self) -> str:
        return (f"GameState({self.date}, cash={self.cash:,.0f}, "
                f"fleet={len(self.fleet)}, reputation={self.reputation.value})")


# Type aliases for clarity
Money = float
Score = float
