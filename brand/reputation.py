"""
Brand reputation state machine.

Reputation moves along a small ladder per concept. Devolution is checked
first, so a brand that falls below its upkeep requirements is downgraded
even if it would also qualify for an upgrade on the same day.
"""

from dataclasses import dataclass
from datetime import date
from typing import Dict, Union
import logging

from core.catalogs import Catalogs
from core.models import (
    BrandReputationType as R, CabinClass, CABIN_ORDER, ConceptTransition, GameState,
    years_between,
)

logger = logging.getLogger(__name__)

# Passenger-mix upkeep and upgrade requirements
FSC_PREMIUM_MIN_PREMIUM_RATIO = 0.20
FSC_PREMIUM_UPGRADE_PREMIUM_RATIO = 0.25
FSC_CLASSIC_YEARS_IN_SERVICE = 5
LCC_GOOD_MIN_BUSINESS_RATIO = 0.03
LCC_GOOD_UPGRADE_BUSINESS_RATIO = 0.05
ULCC_MIN_ECONOMY_RATIO = 0.95
ULCC_UPGRADE_ECONOMY_RATIO = 0.98

UNREACHABLE_SCORE = 101


@dataclass(frozen=True)
class StableBrand:
    """Brand phase when no concept change is in progress."""
    reputation: R


BrandPhase = Union[StableBrand, ConceptTransition]


def brand_phase(state: GameState) -> BrandPhase:
    if state.concept_transition is not None:
        return state.concept_transition
    return StableBrand(state.reputation)


def brand_demand_modifier(phase: BrandPhase, today: date, catalogs: Catalogs) -> Dict[CabinClass, float]:
    """
    Per-cabin demand multiplier earned by the brand.

    During a concept change the multiplier slides linearly from the old
    concept's starting reputation to the new one's.
    """
    if isinstance(phase, ConceptTransition):
        progress = phase.progress(today)
        start = catalogs.reputations[catalogs.concepts[phase.from_concept].initial_reputation]
        end = catalogs.reputations[catalogs.concepts[phase.to_concept].initial_reputation]
        return {
            cabin: start.demand_modifier[cabin] * (1 - progress) + end.demand_modifier[cabin] * progress
            for cabin in CABIN_ORDER
        }
    return dict(catalogs.reputations[phase.reputation].demand_modifier)


def _or_default(value, default):
    # Unset and zero thresholds both fall back to the default
    return value or default


def calculate_new_reputation(state: GameState, catalogs: Catalogs) -> R:
    """
    Next reputation for ``state``.

    The reputation is left alone before a concept is chosen, while a concept
    change or crash recovery is running, and until enough passengers have
    flown for the passenger mix to mean anything.
    """
    current = state.reputation
    if state.concept is None or state.concept_transition is not None \
            or state.crashed_reputation_end_date is not None:
        return current

    carried = state.passengers_carried
    total = sum(carried.get(cabin, 0) for cabin in CABIN_ORDER)
    if total < catalogs.rules.reputation_passenger_floor:
        return current

    first = carried.get(CabinClass.FIRST, 0)
    business = carried.get(CabinClass.BUSINESS, 0)
    economy = carried.get(CabinClass.ECONOMY, 0)
    premium_ratio = (first + business) / total
    business_ratio = business / total
    economy_ratio = economy / total
    years_in_service = years_between(state.founding_date, state.date)

    otp = state.on_time_performance
    satisfaction = state.passenger_satisfaction

    data = catalogs.reputations.get(current)
    otp_floor = _or_default(data.otp_penalty if data else None, 0)
    satisfaction_floor = _or_default(data.satisfaction_penalty if data else None, 0)

    # Devolution
    if current == R.FSC_PREMIUM:
        if otp < otp_floor or premium_ratio < FSC_PREMIUM_MIN_PREMIUM_RATIO \
                or satisfaction < satisfaction_floor:
            return R.FSC_NORMAL
    elif current == R.FSC_CLASSIC:
        if otp < otp_floor or satisfaction < satisfaction_floor:
            return R.FSC_PREMIUM
    elif current == R.LCC_GOOD:
        if otp < otp_floor or business_ratio < LCC_GOOD_MIN_BUSINESS_RATIO \
                or satisfaction < satisfaction_floor:
            return R.LCC_STANDARD
    elif current == R.ULCC:
        if economy_ratio < ULCC_MIN_ECONOMY_RATIO:
            return R.LCC_STANDARD

    # Evolution
    if current == R.FSC_NORMAL:
        required_otp = _or_default(data.required_otp if data else None, UNREACHABLE_SCORE)
        required_sat = _or_default(data.required_satisfaction if data else None, UNREACHABLE_SCORE)
        if premium_ratio >= FSC_PREMIUM_UPGRADE_PREMIUM_RATIO and otp >= required_otp \
                and satisfaction >= required_sat:
            return R.FSC_PREMIUM
    elif current == R.FSC_PREMIUM:
        if years_in_service >= FSC_CLASSIC_YEARS_IN_SERVICE:
            return R.FSC_CLASSIC
    elif current == R.LCC_STANDARD:
        required_otp = _or_default(data.required_otp if data else None, UNREACHABLE_SCORE)
        required_sat = _or_default(data.required_satisfaction if data else None, UNREACHABLE_SCORE)
        if economy_ratio >= ULCC_UPGRADE_ECONOMY_RATIO:
            return R.ULCC
        if business_ratio >= LCC_GOOD_UPGRADE_BUSINESS_RATIO and otp >= required_otp \
                and satisfaction >= required_sat:
            return R.LCC_GOOD
    elif current == R.LCC_GOOD:
        if economy_ratio >= ULCC_UPGRADE_ECONOMY_RATIO:
            return R.ULCC

    return current
