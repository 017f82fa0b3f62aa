"""
Example: Found an airline, put two aircraft to work and run a month.

This demonstrates:
- Setting up a new airline at a home hub
- Buying and leasing aircraft
- Opening routes and assigning schedules
- Running the daily update engine and reading the results
"""

from datetime import date
import logging

import numpy as np

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

from actions import (
    setup_airline, purchase_aircraft, lease_aircraft, open_route, update_schedule,
)
from core.engine import DailyUpdateEngine
from core.models import (
    AirlineConcept, AirlineProfile, AircraftConfigurationType, StartingCapitalLevel,
    TicketPriceStrategy,
)


def create_airline(rng):
    """Found a full-service carrier based at Gimpo."""
    profile = AirlineProfile(name="Han River Air", code="HR", hubs=("GMP",), country="KR")
    state = setup_airline(
        profile, AirlineConcept.FSC, StartingCapitalLevel.STANDARD,
        start_date=date(2024, 1, 1), rng=rng,
    ).state

    state = purchase_aircraft(state, "A321neo", AircraftConfigurationType.FSC_MEDIUM_HAUL,
                              "Hanbit", "GMP").state
    state = lease_aircraft(state, "B787", AircraftConfigurationType.FSC_LONG_HAUL,
                           "Mirae", "GMP").state

    # Short-haul to Jeju and a long-haul to Tokyo
    state = open_route(state, "GMP-CJU", TicketPriceStrategy.STANDARD).state
    state = open_route(state, "GMP-HND", TicketPriceStrategy.PREMIUM).state

    narrowbody, widebody = state.fleet
    state = update_schedule(state, narrowbody.id, ["GMP-CJU", "GMP-CJU"], rng=rng).state
    state = update_schedule(state, widebody.id, ["GMP-HND"], rng=rng).state
    return state


def main():
    """Run basic airline example."""
    print("="*60)
    print("Airline Tycoon - Basic Example")
    print("="*60)

    rng = np.random.default_rng(42)
    state = create_airline(rng)
    print(f"\nStarting cash: {state.cash:,.0f}")
    print(f"Fleet: {', '.join(str(ac) for ac in state.fleet)}")

    engine = DailyUpdateEngine(rng=rng)
    for _ in range(31):
        result = engine.tick(state)
        state = result.state
        for message in result.notifications:
            print(f"  [{state.date}] {message}")

    report = result.report
    print("\n" + "="*60)
    print("AFTER ONE MONTH")
    print("="*60)
    print(f"Date: {state.date}")
    print(f"Cash: {state.cash:,.0f}")
    print(f"On-time performance: {state.on_time_performance:.1f}")
    print(f"Passenger satisfaction: {state.passenger_satisfaction:.1f}")
    print(f"Reputation: {state.reputation.value}")
    print(f"Passengers carried: {state.total_passengers_carried:,}")
    print(f"Last day profit: {report.profit:,.0f}")
    for route_id, stats in report.route_stats.items():
        print(f"  {route_id}: load factor {stats.load_factor:.1%}, profit {stats.profit:,.0f}")


if __name__ == "__main__":
    main()
