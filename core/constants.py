"""Scalar constants for the airline economy."""

# Safety
BASE_ACCIDENT_PROBABILITY = 0.00000025  # per aircraft per day
AIRCRAFT_AGE_ACCIDENT_MODIFIER = 0.00000001  # added per year of age
ACCIDENT_PENALTY_COST = 100_000_000_000
CRASH_REPUTATION_DURATION_YEARS = 2

# Brand
CONCEPT_CHANGE_COST = 250_000_000_000
CONCEPT_TRANSITION_YEARS = 2
REPUTATION_PASSENGER_FLOOR = 50_000

# On-time performance
OTP_BASE_SCORE = 99.0
OTP_AGE_PENALTY_PER_YEAR = 0.25
OTP_FOREIGN_HUB_BONUS = 0.5
FLEET_STRETCH_THRESHOLD = 1.5  # schedule entries per aircraft
FLEET_STRETCH_PENALTY = 1.0

# Passenger satisfaction
SATISFACTION_BASE_SCORE = 50.0
SATISFACTION_AGE_THRESHOLD_YEARS = 15
SATISFACTION_AGE_PENALTY_PER_YEAR = 1.0

# Route generation
MIN_ROUTE_DISTANCE_KM = 100
CRUISE_SPEED_KMH = 850
TURNAROUND_GROUND_MINUTES = 90
ROUTE_PRICE_PER_KM = 1_000_000
ROUTE_BASE_PRICE = 5_000_000_000
MARKET_ROUTES_PER_CATEGORY = 4
MINUTES_PER_DAY = 1440

# Hubs and fleet management
HUB_TRANSFER_COST = 5_000_000_000
FOREIGN_HUB_COST_FACTOR = 0.25
CONFIGURATION_CHANGE_COST_FACTOR = 0.05
RETROFIT_COST_FACTOR = 0.20

# Leasing
LEASE_DEPOSIT_MONTHS = 1
LEASE_MONTHLY_RATE = 0.025
LEASE_TERM_YEARS = 5
LEASE_EARLY_RETURN_PENALTY_MONTHS = 3
LEASE_BUYOUT_FACTOR = 0.8
LEASE_MIN_AGE_YEARS = 1
LEASE_MAX_AGE_YEARS = 10
DAYS_PER_MONTH = 30

# Resale
AIRCRAFT_RESIDUAL_VALUE = 0.10
AIRCRAFT_DEPRECIATION_YEARS = 25
