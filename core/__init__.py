"""
Core simulation components.

Import the engine and simulator from ``core.engine`` and ``core.simulator``.
"""

from core.models import *
from core.catalogs import Catalogs, EconomyRules, default_catalogs

__all__ = [
    'Catalogs',
    'EconomyRules',
    'default_catalogs',
]
