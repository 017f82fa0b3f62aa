"""Passenger demand, competition, pricing and starting capital tables."""

from core.catalogs import TicketPriceStrategyData, per_cabin
from core.models import (
    AirportScale, CompetitionLevel, TicketPriceStrategy, StartingCapitalLevel,
)

MEGA = AirportScale.MEGA
HUB = AirportScale.HUB
MAJOR = AirportScale.MAJOR
REGIONAL = AirportScale.REGIONAL

_SCALES = (MEGA, HUB, MAJOR, REGIONAL)

# Baseline daily passengers (first, business, economy), rows = origin scale
_INTERNATIONAL = (
    ((60, 200, 500), (45, 160, 420), (25, 100, 350), (10, 40, 200)),
    ((45, 160, 420), (35, 130, 380), (20, 80, 300), (8, 30, 180)),
    ((25, 100, 350), (20, 80, 300), (10, 40, 250), (2, 15, 150)),
    ((10, 40, 200), (8, 30, 180), (2, 15, 150), (0, 5, 100)),
)

_DOMESTIC = (
    ((15, 60, 800), (12, 50, 750), (8, 40, 650), (2, 20, 450)),
    ((12, 50, 750), (10, 45, 700), (6, 35, 600), (1, 15, 400)),
    ((8, 40, 650), (6, 35, 600), (4, 25, 500), (0, 10, 350)),
    ((2, 20, 450), (1, 15, 400), (0, 10, 350), (0, 5, 250)),
)

DEMAND_MATRIX = {}
for _is_domestic, _table in ((False, _INTERNATIONAL), (True, _DOMESTIC)):
    for _i, _origin in enumerate(_SCALES):
        for _j, _destination in enumerate(_SCALES):
            DEMAND_MATRIX[(_is_domestic, _origin, _destination)] = per_cabin(*_table[_i][_j])

_L, _M, _H = CompetitionLevel.LOW, CompetitionLevel.MEDIUM, CompetitionLevel.HIGH

_COMPETITION = (
    (_H, _H, _M, _M),
    (_H, _H, _M, _L),
    (_M, _M, _L, _L),
    (_M, _L, _L, _L),
)

COMPETITION_MATRIX = {
    (origin, destination): _COMPETITION[i][j]
    for i, origin in enumerate(_SCALES)
    for j, destination in enumerate(_SCALES)
}

PRICE_STRATEGIES = [
    TicketPriceStrategyData(TicketPriceStrategy.PREMIUM, "Premium",
                            price_modifier=per_cabin(1.3, 1.25, 1.2),
                            demand_modifier=per_cabin(0.85, 0.9, 0.8)),
    TicketPriceStrategyData(TicketPriceStrategy.STANDARD, "Standard",
                            price_modifier=per_cabin(1.0, 1.0, 1.0),
                            demand_modifier=per_cabin(1.0, 1.0, 1.0)),
    TicketPriceStrategyData(TicketPriceStrategy.LOW_COST, "Low cost",
                            price_modifier=per_cabin(0.8, 0.85, 0.85),
                            demand_modifier=per_cabin(1.1, 1.1, 1.2)),
    TicketPriceStrategyData(TicketPriceStrategy.ULTRA_LOW_COST, "Ultra low cost",
                            price_modifier=per_cabin(0.6, 0.7, 0.7),
                            demand_modifier=per_cabin(1.2, 1.25, 1.35)),
]

STARTING_CAPITAL = {
    StartingCapitalLevel.CHALLENGING: 50_000_000_000,
    StartingCapitalLevel.STANDARD: 500_000_000_000,
    StartingCapitalLevel.WEALTHY: 5_000_000_000_000,
}
