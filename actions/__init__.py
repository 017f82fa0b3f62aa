"""
Player actions that change the game state between daily updates.
"""

from .player import (
    ActionError,
    ActionResult,
    setup_airline,
    purchase_aircraft,
    lease_aircraft,
    open_route,
    update_schedule,
    return_lease,
    extend_lease,
    buyout_aircraft,
    sell_aircraft,
    change_concept,
    set_maintenance_level,
    set_service_level,
    set_price_strategy,
    establish_hub,
    purchase_facility,
    transfer_aircraft_base,
    change_configuration,
    retrofit_aircraft,
)

__all__ = [
    'ActionError',
    'ActionResult',
    'setup_airline',
    'purchase_aircraft',
    'lease_aircraft',
    'open_route',
    'update_schedule',
    'return_lease',
    'extend_lease',
    'buyout_aircraft',
    'sell_aircraft',
    'change_concept',
    'set_maintenance_level',
    'set_service_level',
    'set_price_strategy',
    'establish_hub',
    'purchase_facility',
    'transfer_aircraft_base',
    'change_configuration',
    'retrofit_aircraft',
]
