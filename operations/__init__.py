"""Day-to-day operations: facilities, performance scoring and economics."""

from .facilities import calculate_facility_effects
from .performance import (
    calculate_on_time_performance, calculate_passenger_satisfaction, find_performance_tier,
)
from .economics import settle_daily_operations, DailyLedger, RouteDailyStats

__all__ = [
    'calculate_facility_effects',
    'calculate_on_time_performance',
    'calculate_passenger_satisfaction',
    'find_performance_tier',
    'settle_daily_operations',
    'DailyLedger',
    'RouteDailyStats',
]
