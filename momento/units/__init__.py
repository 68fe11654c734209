"""Temporal units.

This package provides:
    - Unit: calendar/clock granularities with a total order
    - Timezone: fixed UTC-offset timezone
"""

from __future__ import annotations

from momento.units.timezone import Timezone
from momento.units.unit import Unit

__all__: list[str] = [
    "Timezone",
    "Unit",
]
