"""
Long duration simulation of a low-cost carrier.
Runs for three years so brand reputation has time to evolve.
"""

from datetime import date

import numpy as np

from actions import setup_airline, purchase_aircraft, open_route, update_schedule
from core.models import (
    AirlineConcept, AirlineProfile, AircraftConfigurationType, StartingCapitalLevel,
    TicketPriceStrategy,
)
from core.simulator import Simulator, SimulationConfig


def create_airline():
    rng = np.random.default_rng(7)
    profile = AirlineProfile(name="Jeju Breeze", code="JB", hubs=("PUS",), country="KR")
    state = setup_airline(profile, AirlineConcept.LCC, StartingCapitalLevel.WEALTHY,
                          start_date=date(2024, 1, 1), rng=rng).state

    routes = ["PUS-CJU", "PUS-GMP", "PUS-FUK", "PUS-KIX"]
    for route_id in routes:
        state = open_route(state, route_id, TicketPriceStrategy.LOW_COST).state

    for i, route_id in enumerate(routes):
        state = purchase_aircraft(state, "A320neo", AircraftConfigurationType.LCC_ECONOMY,
                                  f"Breeze {i + 1}", "PUS").state
        state = update_schedule(state, state.fleet[-1].id, [route_id], rng=rng).state
    return state


def run_simulation():
    print("="*50)
    print("Running 3-Year Airline Simulation")
    print("="*50)

    config = SimulationConfig(
        days=3 * 365,
        random_seed=42,
        log_level="WARNING",
        output_dir="simulation_results/long_run",
        export_csv=True,
        progress_bar=True,
    )

    sim = Simulator(config, create_airline())
    results = sim.run()
    print(results.summary())

    daily = sim.recorder.daily_frame()
    if not daily.empty:
        monthly = daily[['income', 'expenses', 'profit']].groupby(
            [d.strftime('%Y-%m') for d in daily.index]).sum()
        print("\nMonthly profit:")
        print(monthly.tail(12).to_string())
        print(f"\nReputation changes: {daily['reputation'].nunique() - 1}")

    print("\nRoute summary:")
    print(sim.recorder.route_summary().to_string())


if __name__ == "__main__":
    run_simulation()
