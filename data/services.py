"""Maintenance programmes, in-flight service options and performance tiers."""

from core.catalogs import MaintenanceData, ServiceLevelData, PerformanceTier, per_cabin
from core.models import (
    MaintenanceLevel, MealServiceLevel, CrewServiceLevel, BaggageServiceLevel,
    PerformanceLevel,
)

M = 1_000_000

MAINTENANCE_LEVELS = [
    MaintenanceData(MaintenanceLevel.MINIMAL, "Minimal", 0.5 * M,
                    accident_modifier=100.0, otp_modifier=-20, otp_age_mitigation=0.1),
    MaintenanceData(MaintenanceLevel.STANDARD, "Standard", 2 * M,
                    accident_modifier=1.0, otp_modifier=0, otp_age_mitigation=0.5),
    MaintenanceData(MaintenanceLevel.ADVANCED, "Advanced", 5 * M,
                    accident_modifier=0.2, otp_modifier=2, otp_age_mitigation=0.8),
    MaintenanceData(MaintenanceLevel.STATE_OF_THE_ART, "State of the art", 10 * M,
                    accident_modifier=0.05, otp_modifier=4, otp_age_mitigation=0.95),
]

# Meal and baggage are charged per passenger, crew per aircraft per day
MEAL_LEVELS = [
    ServiceLevelData(MealServiceLevel.NONE, "No meal", -15, cost_per_passenger=0),
    ServiceLevelData(MealServiceLevel.SNACKS, "Snacks", 0, cost_per_passenger=15_000),
    ServiceLevelData(MealServiceLevel.STANDARD, "Standard meal", 10, cost_per_passenger=80_000),
    ServiceLevelData(MealServiceLevel.PREMIUM, "Premium dining", 25, cost_per_passenger=300_000),
]

CREW_LEVELS = [
    ServiceLevelData(CrewServiceLevel.SAFETY_ONLY, "Safety only", -20, cost_per_aircraft_per_day=40 * M),
    ServiceLevelData(CrewServiceLevel.BASIC, "Basic", -5, cost_per_aircraft_per_day=80 * M),
    ServiceLevelData(CrewServiceLevel.ATTENTIVE, "Attentive", 15, cost_per_aircraft_per_day=200 * M),
    ServiceLevelData(CrewServiceLevel.EXEMPLARY, "Exemplary", 30, cost_per_aircraft_per_day=500 * M),
]

# Negative costs are baggage fees collected
BAGGAGE_LEVELS = [
    ServiceLevelData(BaggageServiceLevel.PERSONAL_ITEM_ONLY, "Personal item only", -25,
                     cost_per_passenger=-100_000),
    ServiceLevelData(BaggageServiceLevel.PAID_CARRY_ON, "Paid carry-on", -10,
                     cost_per_passenger=-50_000),
    ServiceLevelData(BaggageServiceLevel.FREE_CHECKED_ONE, "One free checked bag", 10,
                     cost_per_passenger=40_000),
    ServiceLevelData(BaggageServiceLevel.GENEROUS, "Generous allowance", 20,
                     cost_per_passenger=120_000),
]


def _otp_tier(level: PerformanceLevel, name: str, threshold: float, modifier: float) -> PerformanceTier:
    return PerformanceTier(level, name, threshold, per_cabin(modifier, modifier, modifier))


OTP_TIERS = [
    _otp_tier(PerformanceLevel.EXCELLENT, "Excellent", 98, 1.05),
    _otp_tier(PerformanceLevel.GOOD, "Good", 95, 1.02),
    _otp_tier(PerformanceLevel.AVERAGE, "Average", 90, 1.0),
    _otp_tier(PerformanceLevel.POOR, "Poor", 80, 0.95),
    _otp_tier(PerformanceLevel.CRITICAL, "Critical", 0, 0.85),
]

SATISFACTION_TIERS = [
    PerformanceTier(PerformanceLevel.EXCELLENT, "Excellent", 90, per_cabin(1.25, 1.15, 1.05)),
    PerformanceTier(PerformanceLevel.GOOD, "Good", 75, per_cabin(1.1, 1.05, 1.02)),
    PerformanceTier(PerformanceLevel.AVERAGE, "Average", 50, per_cabin(1.0, 1.0, 1.0)),
    PerformanceTier(PerformanceLevel.POOR, "Poor", 25, per_cabin(0.85, 0.9, 0.98)),
    PerformanceTier(PerformanceLevel.CRITICAL, "Critical", 0, per_cabin(0.6, 0.75, 0.95)),
]
