"""Translation between aircon settings and the thermostat vocabulary."""

from __future__ import annotations

from homeassistant.components.climate.const import HVACMode

from .const import (
    BUTTON_POWER_OFF,
    BUTTON_POWER_ON,
    MODE_AUTO,
    MODE_COOL,
    MODE_WARM,
    TEMP_UNIT_CELSIUS,
    TEMP_UNIT_FAHRENHEIT,
)
from .errors import InvalidValueError, UnsupportedOperationError
from .models import (
    AirconSettings,
    ControlCommand,
    TemperatureDisplayUnit,
    ThermostatState,
)

_STATE_TO_MODE = {
    ThermostatState.HEAT: MODE_WARM,
    ThermostatState.COOL: MODE_COOL,
    ThermostatState.AUTO: MODE_AUTO,
}

_STATE_TO_HVAC_MODE = {
    ThermostatState.OFF: HVACMode.OFF,
    ThermostatState.HEAT: HVACMode.HEAT,
    ThermostatState.COOL: HVACMode.COOL,
    ThermostatState.AUTO: HVACMode.AUTO,
}


def to_thermostat_state(settings: AirconSettings) -> ThermostatState | None:
    """Return the thermostat state for the settings.

    Returns None when the aircon runs in a mode the thermostat cannot show,
    such as dry or auto. AUTO is only ever sent, never read back.
    """
    if settings.button == BUTTON_POWER_OFF:
        return ThermostatState.OFF
    if settings.mode == MODE_WARM:
        return ThermostatState.HEAT
    if settings.mode == MODE_COOL:
        return ThermostatState.COOL
    return None


def from_thermostat_state(value: int) -> ControlCommand:
    """Return the command that puts the aircon into the given state."""
    if value == ThermostatState.OFF:
        return {"button": BUTTON_POWER_OFF}
    try:
        mode = _STATE_TO_MODE[ThermostatState(value)]
    except (KeyError, ValueError) as err:
        raise InvalidValueError(
            f"unexpected heating cooling state value: {value}"
        ) from err
    return {"button": BUTTON_POWER_ON, "operation_mode": mode}


def temperature_command(value: float) -> ControlCommand:
    """Return the command that sets the target temperature."""
    if float(value).is_integer():
        return {"temperature": str(int(value))}
    return {"temperature": str(value)}


def to_display_unit(temp_unit: str | None) -> TemperatureDisplayUnit:
    """Return the display unit for the aircon temperature unit symbol."""
    if temp_unit == TEMP_UNIT_CELSIUS:
        return TemperatureDisplayUnit.CELSIUS
    if temp_unit == TEMP_UNIT_FAHRENHEIT:
        return TemperatureDisplayUnit.FAHRENHEIT
    raise InvalidValueError(f"unexpected temperature unit: {temp_unit}")


def check_display_unit_change(value: int) -> None:
    """Validate a display unit change; only Celsius is accepted."""
    if value == TemperatureDisplayUnit.CELSIUS:
        return
    if value == TemperatureDisplayUnit.FAHRENHEIT:
        raise UnsupportedOperationError("temperature display unit cannot be set")
    raise InvalidValueError(f"unexpected temperature display unit value: {value}")


def to_hvac_mode(state: ThermostatState | None) -> HVACMode | None:
    """Return the Home Assistant HVAC mode for the thermostat state."""
    if state is None:
        return None
    return _STATE_TO_HVAC_MODE[state]


def from_hvac_mode(hvac_mode: HVACMode | str) -> ThermostatState:
    """Return the thermostat state for the Home Assistant HVAC mode."""
    for state, mode in _STATE_TO_HVAC_MODE.items():
        if mode == hvac_mode:
            return state
    raise InvalidValueError(f"unsupported hvac mode: {hvac_mode}")
