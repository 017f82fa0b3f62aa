"""Airport facilities and hub establishment costs."""

from core.catalogs import AirportFacilityData, FacilityEffects, frozen_map, per_cabin
from core.models import AirportFacilityType as F, AirportScale

B = 1_000_000_000

HUB_ESTABLISHMENT_COSTS = {
    AirportScale.MEGA: 2000 * B,
    AirportScale.HUB: 1000 * B,
    AirportScale.MAJOR: 500 * B,
    AirportScale.REGIONAL: 200 * B,
}


def _costs(mega: float, hub: float, major: float, regional: float):
    return frozen_map({
        AirportScale.MEGA: mega,
        AirportScale.HUB: hub,
        AirportScale.MAJOR: major,
        AirportScale.REGIONAL: regional,
    })


FACILITIES = [
    AirportFacilityData(
        id=F.OFFICE,
        name="Branch office",
        description="Local presence required before any other facility.",
        costs=frozen_map(HUB_ESTABLISHMENT_COSTS),
        effects=FacilityEffects(cost_modifier=0.97),
    ),
    AirportFacilityData(
        id=F.MAINTENANCE_CENTER,
        name="Maintenance center",
        description="In-house line maintenance lowers accident risk and delays.",
        costs=_costs(500 * B, 300 * B, 150 * B, 50 * B),
        effects=FacilityEffects(accident_modifier=0.9, otp_bonus=1.0),
        prerequisite=F.OFFICE,
    ),
    AirportFacilityData(
        id=F.GROUND_SERVICES,
        name="Ground services",
        description="Own ground handling for faster turnarounds.",
        costs=_costs(800 * B, 500 * B, 250 * B, 100 * B),
        effects=FacilityEffects(cost_modifier=0.95, otp_bonus=0.5),
        prerequisite=F.OFFICE,
    ),
    AirportFacilityData(
        id=F.FUEL_DEPOT,
        name="Fuel depot",
        description="Bulk fuel storage at contract prices.",
        costs=_costs(1000 * B, 700 * B, 350 * B, 150 * B),
        effects=FacilityEffects(cost_modifier=0.95),
        prerequisite=F.OFFICE,
    ),
    AirportFacilityData(
        id=F.CREW_CENTER,
        name="Crew center",
        description="Crew base with rest and training facilities.",
        costs=_costs(600 * B, 400 * B, 200 * B, 80 * B),
        effects=FacilityEffects(satisfaction_bonus=3, cost_modifier=0.98),
        prerequisite=F.OFFICE,
    ),
    AirportFacilityData(
        id=F.LOUNGE,
        name="Premium lounge",
        description="Lounge access attracts premium travellers.",
        costs=_costs(400 * B, 250 * B, 120 * B, 50 * B),
        effects=FacilityEffects(demand_modifier=per_cabin(1.05, 1.05, 1.0)),
        prerequisite=F.OFFICE,
    ),
]
