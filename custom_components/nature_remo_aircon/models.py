"""Data models for the Nature API aircon records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any

# Form parameters of a POST /appliances/{id}/aircon_settings request.
type ControlCommand = dict[str, str]


class ThermostatState(IntEnum):
    """Heating/cooling state of the thermostat abstraction."""

    OFF = 0
    HEAT = 1
    COOL = 2
    AUTO = 3


class TemperatureDisplayUnit(IntEnum):
    """Temperature display unit of the thermostat abstraction."""

    CELSIUS = 0
    FAHRENHEIT = 1


@dataclass(frozen=True)
class CapabilityMetadata:
    """Target temperature bounds derived from the aircon modes."""

    min_temp: int
    max_temp: int
    step: int


def _parse_temperature(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


@dataclass
class AirconSettings:
    """Settings snapshot last reported for an aircon."""

    mode: str | None = None
    button: str | None = None
    temp: float | None = None
    vol: str | None = None
    dir: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AirconSettings:
        """Build the snapshot from a settings JSON object."""
        return cls(
            mode=data.get("mode"),
            button=data.get("button"),
            temp=_parse_temperature(data.get("temp")),
            vol=data.get("vol"),
            dir=data.get("dir"),
        )


@dataclass
class AirconCapabilities:
    """Modes and temperature set-points supported by an aircon."""

    modes: dict[str, list[str]] = field(default_factory=dict)
    temp_unit: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AirconCapabilities:
        """Build the capabilities from an aircon JSON object."""
        raw_modes = (data.get("range") or {}).get("modes") or {}
        modes = {
            name: [str(temp) for temp in (mode or {}).get("temp") or []]
            for name, mode in raw_modes.items()
        }
        return cls(modes=modes, temp_unit=data.get("tempUnit"))


@dataclass
class Appliance:
    """Appliance registered to a Nature Remo account."""

    id: str
    nickname: str | None = None
    aircon: AirconCapabilities | None = None
    settings: AirconSettings | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Appliance:
        """Build the appliance from an element of the appliances list."""
        aircon = data.get("aircon")
        settings = data.get("settings")
        return cls(
            id=data["id"],
            nickname=data.get("nickname"),
            aircon=AirconCapabilities.from_dict(aircon) if aircon is not None else None,
            settings=AirconSettings.from_dict(settings) if settings is not None else None,
        )
