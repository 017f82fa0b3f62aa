"""
On-time performance and passenger satisfaction scoring.

Both scores are recomputed from scratch every day from the fleet, the
maintenance programme, the service settings and airport facilities, and
are clamped to the 0-100 range.
"""

from datetime import date
from typing import Iterable, Mapping, Optional, Sequence, Set
import logging

import numpy as np

from core.catalogs import Catalogs, PerformanceTier
from core.models import (
    AirlineProfile, Airport, AirportFacilityType, MaintenanceLevel, PlayerAircraft,
    ServiceLevels,
)
from operations.facilities import total_otp_bonus, total_satisfaction_bonus

logger = logging.getLogger(__name__)


def fleet_average_age(fleet: Sequence[PlayerAircraft], today: date) -> float:
    """Mean aircraft age in years; 0 for an empty fleet."""
    if not fleet:
        return 0.0
    return float(np.mean([ac.age_in_years(today) for ac in fleet]))


def count_foreign_hubs(profile: Optional[AirlineProfile], airports: Mapping[str, Airport]) -> int:
    """Hubs located outside the airline's home country."""
    if profile is None:
        return 0
    count = 0
    for code in profile.hubs:
        airport = airports.get(code)
        if airport is not None and airport.country != profile.country:
            count += 1
    return count


def count_stretched_aircraft(fleet: Iterable[PlayerAircraft], threshold: float) -> int:
    return sum(1 for ac in fleet if len(ac.schedule) > threshold)


def _clamp_score(score: float) -> float:
    return float(np.clip(score, 0.0, 100.0))


def calculate_on_time_performance(
    fleet: Sequence[PlayerAircraft],
    today: date,
    maintenance_level: MaintenanceLevel,
    airport_facilities: Mapping[str, Set[AirportFacilityType]],
    airports: Mapping[str, Airport],
    profile: Optional[AirlineProfile],
    catalogs: Catalogs,
) -> float:
    """
    Daily on-time performance score.

    Starts from the base score, adds the maintenance modifier, subtracts the
    fleet-age penalty (partly mitigated by maintenance), adds bonuses for
    foreign hubs and facilities, and penalises aircraft flying more than
    the stretch threshold of rotations.
    """
    rules = catalogs.rules
    maintenance = catalogs.maintenance_levels[maintenance_level]

    age_penalty = fleet_average_age(fleet, today) * rules.otp_age_penalty_per_year
    mitigated_penalty = age_penalty * (1 - maintenance.otp_age_mitigation)

    score = rules.otp_base_score + maintenance.otp_modifier - mitigated_penalty
    score += count_foreign_hubs(profile, airports) * rules.otp_foreign_hub_bonus
    score += total_otp_bonus(airport_facilities, catalogs.facilities)
    score -= count_stretched_aircraft(fleet, rules.fleet_stretch_threshold) * rules.fleet_stretch_penalty
    return _clamp_score(score)


def calculate_passenger_satisfaction(
    fleet: Sequence[PlayerAircraft],
    today: date,
    service_levels: ServiceLevels,
    airport_facilities: Mapping[str, Set[AirportFacilityType]],
    catalogs: Catalogs,
) -> float:
    """Daily passenger satisfaction score."""
    rules = catalogs.rules
    score = rules.satisfaction_base_score
    score += catalogs.meal_levels[service_levels.meal].satisfaction_points
    score += catalogs.crew_levels[service_levels.crew].satisfaction_points
    score += catalogs.baggage_levels[service_levels.baggage].satisfaction_points

    avg_age = fleet_average_age(fleet, today)
    if avg_age > rules.satisfaction_age_threshold:
        score -= (avg_age - rules.satisfaction_age_threshold) * rules.satisfaction_age_penalty_per_year

    if fleet:
        modifiers = []
        for ac in fleet:
            config = catalogs.configurations.get(ac.configuration_id)
            modifiers.append(config.satisfaction_modifier if config else 0.0)
        score += float(np.mean(modifiers))

    score += total_satisfaction_bonus(airport_facilities, catalogs.facilities)
    return _clamp_score(score)


def find_performance_tier(score: float, tiers: Sequence[PerformanceTier]) -> PerformanceTier:
    """Highest tier whose threshold the score reaches, else the lowest tier."""
    ordered = sorted(tiers, key=lambda t: t.threshold, reverse=True)
    for tier in ordered:
        if score >= tier.threshold:
            return tier
    return ordered[-1]
