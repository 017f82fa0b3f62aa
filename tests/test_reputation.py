"""Tests for the brand reputation ladder and the brand demand multiplier."""

from dataclasses import replace
from datetime import date

import pytest

from brand.reputation import (
    StableBrand, brand_demand_modifier, brand_phase, calculate_new_reputation,
)
from core.models import (
    AirlineConcept, BrandReputationType as R, CabinClass, ConceptTransition, GameState,
)


def passengers(first, business, economy):
    return {CabinClass.FIRST: first, CabinClass.BUSINESS: business, CabinClass.ECONOMY: economy}


@pytest.fixture
def fsc_state():
    """A full-service airline with a healthy premium mix and good scores."""
    return GameState(
        cash=0,
        date=date(2025, 1, 1),
        founding_date=date(2024, 1, 1),
        concept=AirlineConcept.FSC,
        reputation=R.FSC_NORMAL,
        passengers_carried=passengers(5_000, 25_000, 70_000),
        on_time_performance=96.0,
        passenger_satisfaction=88.0,
    )


@pytest.fixture
def lcc_state():
    return GameState(
        cash=0,
        date=date(2025, 1, 1),
        founding_date=date(2024, 1, 1),
        concept=AirlineConcept.LCC,
        reputation=R.LCC_STANDARD,
        passengers_carried=passengers(0, 6_000, 94_000),
        on_time_performance=92.0,
        passenger_satisfaction=75.0,
    )


def test_fsc_normal_upgrades_to_premium(fsc_state, catalogs):
    assert calculate_new_reputation(fsc_state, catalogs) == R.FSC_PREMIUM


def test_small_airlines_keep_their_reputation(fsc_state, catalogs):
    """Fewer passengers than the floor means no change at all."""
    state = replace(fsc_state, passengers_carried=passengers(500, 2_500, 7_000))
    assert calculate_new_reputation(state, catalogs) == R.FSC_NORMAL


def test_fsc_normal_needs_every_requirement(fsc_state, catalogs):
    assert calculate_new_reputation(replace(fsc_state, on_time_performance=94.9), catalogs) == R.FSC_NORMAL
    assert calculate_new_reputation(replace(fsc_state, passenger_satisfaction=84), catalogs) == R.FSC_NORMAL
    thin_premium = replace(fsc_state, passengers_carried=passengers(2_000, 20_000, 78_000))
    assert calculate_new_reputation(thin_premium, catalogs) == R.FSC_NORMAL


def test_fsc_premium_becomes_classic_after_five_years(fsc_state, catalogs):
    premium = replace(fsc_state, reputation=R.FSC_PREMIUM)
    assert calculate_new_reputation(premium, catalogs) == R.FSC_PREMIUM

    veteran = replace(premium, date=date(2029, 1, 2))
    assert calculate_new_reputation(veteran, catalogs) == R.FSC_CLASSIC


def test_devolution_wins_over_evolution(fsc_state, catalogs):
    """A five-year-old premium brand with poor punctuality drops a rung."""
    state = replace(fsc_state, reputation=R.FSC_PREMIUM, date=date(2030, 1, 1),
                    on_time_performance=85.0)
    assert calculate_new_reputation(state, catalogs) == R.FSC_NORMAL


def test_fsc_premium_devolves_on_thin_premium_mix(fsc_state, catalogs):
    state = replace(fsc_state, reputation=R.FSC_PREMIUM,
                    passengers_carried=passengers(1_000, 15_000, 84_000))
    assert calculate_new_reputation(state, catalogs) == R.FSC_NORMAL


def test_fsc_classic_devolves_on_low_satisfaction(fsc_state, catalogs):
    state = replace(fsc_state, reputation=R.FSC_CLASSIC, passenger_satisfaction=65.0)
    assert calculate_new_reputation(state, catalogs) == R.FSC_PREMIUM


def test_lcc_standard_upgrades_to_good(lcc_state, catalogs):
    assert calculate_new_reputation(lcc_state, catalogs) == R.LCC_GOOD


def test_lcc_all_economy_becomes_ulcc(lcc_state, catalogs):
    state = replace(lcc_state, passengers_carried=passengers(0, 1_000, 99_000))
    assert calculate_new_reputation(state, catalogs) == R.ULCC


def test_lcc_good_devolves_without_business(lcc_state, catalogs):
    state = replace(lcc_state, reputation=R.LCC_GOOD,
                    passengers_carried=passengers(0, 2_000, 97_000))
    assert calculate_new_reputation(state, catalogs) == R.LCC_STANDARD


def test_ulcc_devolves_when_economy_share_drops(lcc_state, catalogs):
    state = replace(lcc_state, reputation=R.ULCC,
                    passengers_carried=passengers(0, 10_000, 90_000))
    assert calculate_new_reputation(state, catalogs) == R.LCC_STANDARD


def test_reputation_frozen_while_blocked(fsc_state, catalogs):
    """No concept, a concept change or crash recovery all pin the reputation."""
    no_concept = replace(fsc_state, concept=None)
    assert calculate_new_reputation(no_concept, catalogs) == R.FSC_NORMAL

    transition = ConceptTransition(AirlineConcept.FSC, AirlineConcept.LCC,
                                   date(2024, 12, 1), date(2026, 12, 1))
    changing = replace(fsc_state, concept_transition=transition)
    assert calculate_new_reputation(changing, catalogs) == R.FSC_NORMAL

    recovering = replace(fsc_state, crashed_reputation_end_date=date(2026, 1, 1))
    assert calculate_new_reputation(recovering, catalogs) == R.FSC_NORMAL


def test_stable_brand_modifier(fsc_state, catalogs):
    phase = brand_phase(fsc_state)
    assert phase == StableBrand(R.FSC_NORMAL)
    modifier = brand_demand_modifier(phase, fsc_state.date, catalogs)
    assert modifier == {CabinClass.FIRST: 1.0, CabinClass.BUSINESS: 1.0, CabinClass.ECONOMY: 1.0}


def test_transition_modifier_interpolates(catalogs):
    transition = ConceptTransition(AirlineConcept.FSC, AirlineConcept.LCC,
                                   date(2024, 1, 1), date(2024, 1, 11))
    halfway = brand_demand_modifier(transition, date(2024, 1, 6), catalogs)
    # FSC_NORMAL (1.0, 1.0, 1.0) sliding towards LCC_STANDARD (0, 0.8, 1.1)
    assert halfway[CabinClass.FIRST] == pytest.approx(0.5)
    assert halfway[CabinClass.BUSINESS] == pytest.approx(0.9)
    assert halfway[CabinClass.ECONOMY] == pytest.approx(1.05)

    before = brand_demand_modifier(transition, date(2023, 12, 1), catalogs)
    after = brand_demand_modifier(transition, date(2024, 6, 1), catalogs)
    assert before[CabinClass.FIRST] == pytest.approx(1.0)
    assert after[CabinClass.FIRST] == pytest.approx(0.0)
    assert after[CabinClass.ECONOMY] == pytest.approx(1.1)
