"""Target temperature bounds derived from the aircon mode table."""

from __future__ import annotations

import logging

from .const import FALLBACK_TEMP_STEP
from .models import AirconCapabilities, CapabilityMetadata

_LOGGER = logging.getLogger(__name__)


def _parse_temperatures(mode: str, temperatures: list[str]) -> list[int]:
    parsed = []
    for value in temperatures:
        try:
            # Half-degree set-points are truncated to whole degrees.
            parsed.append(int(float(value)))
        except (TypeError, ValueError):
            _LOGGER.debug("Skipping temperature %r of mode %s", value, mode)
    return parsed


def all_temperatures(aircon: AirconCapabilities) -> list[int]:
    """Return the set-points of every mode as one list."""
    temperatures: list[int] = []
    for mode, values in aircon.modes.items():
        temperatures.extend(_parse_temperatures(mode, values))
    return temperatures


def min_temperature(aircon: AirconCapabilities) -> int:
    """Return the lowest set-point of any mode."""
    return min(all_temperatures(aircon))


def max_temperature(aircon: AirconCapabilities) -> int:
    """Return the highest set-point of any mode."""
    return max(all_temperatures(aircon))


def temperature_step(aircon: AirconCapabilities) -> int:
    """Return the set-point step of the first mode.

    Assumes every mode uses the same step, which holds for the aircons seen
    so far but is not guaranteed by the API.
    """
    for mode, values in aircon.modes.items():
        distinct = sorted(set(_parse_temperatures(mode, values)))
        if len(distinct) < 2:
            return FALLBACK_TEMP_STEP
        return distinct[1] - distinct[0]
    return FALLBACK_TEMP_STEP


def derive_capabilities(aircon: AirconCapabilities) -> CapabilityMetadata:
    """Return the temperature bounds of the aircon."""
    temperatures = all_temperatures(aircon)
    if not temperatures:
        raise ValueError("Aircon reports no temperature set-points")
    return CapabilityMetadata(
        min_temp=min(temperatures),
        max_temp=max(temperatures),
        step=temperature_step(aircon),
    )
