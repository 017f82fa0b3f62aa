"""Aircraft types and cabin configurations available in the game."""

from core.catalogs import AircraftModel, AircraftConfiguration, per_cabin
from core.models import AircraftConfigurationType

B = 1_000_000_000
M = 1_000_000

AIRCRAFT_MODELS = [
    # Current production
    AircraftModel("A320neo", "Airbus A320neo", "Airbus", 110 * B, 6300, 180, 15 * M, 4 * M, 2016),
    AircraftModel("B737MAX", "Boeing 737 MAX 8", "Boeing", 120 * B, 6570, 189, 16 * M, 4.5 * M, 2017),
    AircraftModel("A321neo", "Airbus A321neo", "Airbus", 130 * B, 7400, 220, 18 * M, 5 * M, 2017),
    AircraftModel("A321XLR", "Airbus A321XLR", "Airbus", 142 * B, 8700, 220, 19 * M, 5.5 * M, 2024),
    AircraftModel("A350", "Airbus A350-900", "Airbus", 317 * B, 15000, 325, 35 * M, 20 * M, 2015),
    AircraftModel("B787", "Boeing 787-9 Dreamliner", "Boeing", 292 * B, 14140, 290, 30 * M, 17 * M, 2014),
    AircraftModel("B777X", "Boeing 777-9", "Boeing", 442 * B, 13940, 426, 48 * M, 26 * M, 2025),
    AircraftModel("A330neo", "Airbus A330-900neo", "Airbus", 296 * B, 13330, 287, 30.5 * M, 16.5 * M, 2018),
    AircraftModel("A350-1000", "Airbus A350-1000", "Airbus", 366 * B, 16100, 366, 40 * M, 22 * M, 2018),

    # Second-hand airframes, delivered with hours on them
    AircraftModel("A380", "Airbus A380-800", "Airbus", 445 * B, 15200, 555, 60 * M, 35 * M, 2007,
                  initial_age_on_purchase=10),
    AircraftModel("A320-200", "Airbus A320-200", "Airbus", 70 * B, 6100, 170, 16 * M, 4.2 * M, 1988,
                  initial_age_on_purchase=15),
    AircraftModel("B737-800", "Boeing 737-800", "Boeing", 75 * B, 5440, 175, 17 * M, 4.4 * M, 1998,
                  initial_age_on_purchase=15),
    AircraftModel("B757-200", "Boeing 757-200", "Boeing", 80 * B, 7250, 220, 19 * M, 5.5 * M, 1982,
                  initial_age_on_purchase=20),
    AircraftModel("A330-200", "Airbus A330-200", "Airbus", 200 * B, 13450, 247, 28 * M, 15 * M, 1998,
                  initial_age_on_purchase=15),
    AircraftModel("A330-300", "Airbus A330-300", "Airbus", 220 * B, 11750, 277, 30 * M, 16 * M, 1994,
                  initial_age_on_purchase=15),
    AircraftModel("B767-300ER", "Boeing 767-300ER", "Boeing", 180 * B, 11070, 260, 29 * M, 15.5 * M, 1988,
                  initial_age_on_purchase=20),
    AircraftModel("B777-300ER", "Boeing 777-300ER", "Boeing", 375 * B, 13650, 396, 45 * M, 25 * M, 2004,
                  initial_age_on_purchase=10),
    AircraftModel("B747-8i", "Boeing 747-8i", "Boeing", 418 * B, 14320, 467, 55 * M, 30 * M, 2012,
                  initial_age_on_purchase=8),
]

CONFIGURATIONS = [
    AircraftConfiguration(
        id=AircraftConfigurationType.FSC_LONG_HAUL,
        name="FSC long-haul",
        cost_modifier=1.2,
        operating_cost_modifier=1.15,
        seat_shares=per_cabin(0.05, 0.15, 0.6),
        satisfaction_modifier=10,
    ),
    AircraftConfiguration(
        id=AircraftConfigurationType.FSC_MEDIUM_HAUL,
        name="FSC medium-haul",
        cost_modifier=1.1,
        operating_cost_modifier=1.1,
        seat_shares=per_cabin(0, 0.1, 0.8),
        satisfaction_modifier=5,
    ),
    AircraftConfiguration(
        id=AircraftConfigurationType.LCC_BUSINESS,
        name="LCC with business cabin",
        cost_modifier=1.05,
        operating_cost_modifier=1.0,
        seat_shares=per_cabin(0, 0.05, 0.9),
        satisfaction_modifier=-5,
    ),
    AircraftConfiguration(
        id=AircraftConfigurationType.LCC_ECONOMY,
        name="LCC all-economy",
        cost_modifier=1.0,
        operating_cost_modifier=0.95,
        seat_shares=per_cabin(0, 0, 1.05),
        satisfaction_modifier=-15,
    ),
]
