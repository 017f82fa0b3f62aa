"""Aggregation of airport facility effects."""

from typing import Dict, Iterable, Mapping, Set
import logging

from core.catalogs import AirportFacilityData, FacilityEffects
from core.models import AirportFacilityType

logger = logging.getLogger(__name__)

FacilityCatalog = Mapping[AirportFacilityType, AirportFacilityData]


def _fold(facilities: Iterable[AirportFacilityType], catalog: FacilityCatalog) -> FacilityEffects:
    effects = FacilityEffects()
    for facility in facilities:
        data = catalog.get(facility)
        if data is None:
            logger.debug(f"Ignoring unknown facility type {facility}")
            continue
        effects = effects.combine(data.effects)
    return effects


def calculate_facility_effects(
    airport_facilities: Mapping[str, Set[AirportFacilityType]],
    airport_code: str,
    catalog: FacilityCatalog,
) -> FacilityEffects:
    """
    Combined effect of every facility owned at one airport.

    Cost, accident and demand modifiers multiply; OTP and satisfaction
    bonuses add. An airport with no facilities (or an unknown code) yields
    the neutral bundle.
    """
    owned = airport_facilities.get(airport_code)
    if not owned:
        return FacilityEffects()
    # Sorted so the float products are reproducible regardless of set order
    return _fold(sorted(owned, key=lambda f: f.value), catalog)


def network_facility_effects(
    airport_facilities: Mapping[str, Set[AirportFacilityType]],
    catalog: FacilityCatalog,
) -> Dict[str, FacilityEffects]:
    """Effects for every airport that has at least one facility."""
    return {
        code: calculate_facility_effects(airport_facilities, code, catalog)
        for code in sorted(airport_facilities)
        if airport_facilities[code]
    }


def total_otp_bonus(airport_facilities: Mapping[str, Set[AirportFacilityType]],
                    catalog: FacilityCatalog) -> float:
    """Sum of OTP bonuses across all owned facilities, everywhere."""
    return sum(e.otp_bonus for e in network_facility_effects(airport_facilities, catalog).values())


def total_satisfaction_bonus(airport_facilities: Mapping[str, Set[AirportFacilityType]],
                             catalog: FacilityCatalog) -> float:
    """Sum of satisfaction bonuses across all owned facilities, everywhere."""
    return sum(
        e.satisfaction_bonus
        for e in network_facility_effects(airport_facilities, catalog).values()
    )
