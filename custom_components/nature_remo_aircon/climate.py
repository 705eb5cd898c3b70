"""Climate platform for Nature Remo Aircon integration."""

from __future__ import annotations

from datetime import timedelta
import logging
from typing import Any, ClassVar

import voluptuous as vol

from homeassistant.components.climate import ClimateEntity
from homeassistant.components.climate.const import (
    ATTR_HVAC_MODE,
    ClimateEntityFeature,
    HVACMode,
)
from homeassistant.const import ATTR_TEMPERATURE, UnitOfTemperature
from homeassistant.core import HomeAssistant
from homeassistant.helpers import entity_platform
from homeassistant.helpers.entity_platform import AddEntitiesCallback
from homeassistant.helpers.update_coordinator import (
    CoordinatorEntity,
    DataUpdateCoordinator,
)

from . import translation
from .__init__ import NatureRemoAirconConfigEntry
from .const import (
    ATTR_UNIT,
    CONF_REFRESH_RATE,
    DEFAULT_NAME,
    DEFAULT_REFRESH_RATE,
    DOMAIN,
    FALLBACK_MAX_TEMP,
    FALLBACK_MIN_TEMP,
    FALLBACK_TEMP_STEP,
    SERVICE_SET_TEMPERATURE_DISPLAY_UNIT,
)
from .errors import NatureRemoError
from .models import (
    Appliance,
    CapabilityMetadata,
    TemperatureDisplayUnit,
    ThermostatState,
)
from .registry import AirconRegistry

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: NatureRemoAirconConfigEntry,
    async_add_entities: AddEntitiesCallback,
) -> None:
    """Set up the climate platform from a config entry."""
    registry = entry.runtime_data
    refresh_rate = entry.data.get(CONF_REFRESH_RATE, DEFAULT_REFRESH_RATE)

    coordinator: DataUpdateCoordinator[Appliance | None] = DataUpdateCoordinator(
        hass,
        _LOGGER,
        name="climate",
        update_method=registry.async_refresh,
        update_interval=timedelta(seconds=refresh_rate),
        config_entry=entry,
    )

    await coordinator.async_config_entry_first_refresh()

    async_add_entities([NatureRemoAirconClimate(coordinator, registry, entry.entry_id)])

    platform = entity_platform.async_get_current_platform()
    platform.async_register_entity_service(
        SERVICE_SET_TEMPERATURE_DISPLAY_UNIT,
        {vol.Required(ATTR_UNIT): vol.Coerce(int)},
        "async_set_temperature_display_unit",
    )


class NatureRemoAirconClimate(CoordinatorEntity, ClimateEntity):
    """Representation of a Nature Remo controlled aircon."""

    _attr_has_entity_name = True
    _attr_icon = "mdi:air-conditioner"
    _attr_hvac_modes: ClassVar = [
        HVACMode.OFF,
        HVACMode.HEAT,
        HVACMode.COOL,
        HVACMode.AUTO,
    ]
    _attr_supported_features: ClassVar = (
        ClimateEntityFeature.TARGET_TEMPERATURE
        | ClimateEntityFeature.TURN_ON
        | ClimateEntityFeature.TURN_OFF
    )

    def __init__(
        self,
        coordinator: DataUpdateCoordinator,
        registry: AirconRegistry,
        entry_id: str,
    ) -> None:
        """Initialize the aircon."""
        super().__init__(coordinator)
        self._registry = registry
        self._attr_unique_id = f"{DOMAIN}_{entry_id}"
        record = registry.record
        self._attr_name = (record.nickname if record else None) or DEFAULT_NAME

        self._attr_min_temp = FALLBACK_MIN_TEMP
        self._attr_max_temp = FALLBACK_MAX_TEMP
        self._attr_target_temperature_step = FALLBACK_TEMP_STEP

    @property
    def available(self) -> bool:
        """Return whether an aircon record has been fetched."""
        return super().available and self._registry.record is not None

    @property
    def hvac_mode(self) -> HVACMode | None:
        """Return the HVAC mode of the in-memory aircon record."""
        try:
            state = self._registry.get_heating_cooling_state()
        except NatureRemoError:
            return None
        return translation.to_hvac_mode(state)

    @property
    def target_temperature(self) -> float | None:
        """Return the target temperature of the in-memory aircon record."""
        try:
            return self._registry.get_target_temperature()
        except NatureRemoError:
            return None

    @property
    def current_temperature(self) -> float | None:
        """Return the current temperature of the in-memory aircon record."""
        try:
            return self._registry.get_current_temperature()
        except NatureRemoError:
            return None

    @property
    def temperature_unit(self) -> str:
        """Return the unit the aircon reports temperatures in."""
        try:
            unit = self._registry.get_temperature_display_units()
        except NatureRemoError:
            return UnitOfTemperature.CELSIUS
        if unit == TemperatureDisplayUnit.FAHRENHEIT:
            return UnitOfTemperature.FAHRENHEIT
        return UnitOfTemperature.CELSIUS

    async def async_added_to_hass(self) -> None:
        """Attach to the registry once Home Assistant knows the entity."""
        await super().async_added_to_hass()
        self._registry.notifier.attach(self)

    async def async_will_remove_from_hass(self) -> None:
        """Detach from the registry."""
        self._registry.notifier.detach()
        await super().async_will_remove_from_hass()

    def apply_capabilities(self, metadata: CapabilityMetadata) -> None:
        """Apply the target temperature bounds of the aircon."""
        self._attr_min_temp = metadata.min_temp
        self._attr_max_temp = metadata.max_temp
        self._attr_target_temperature_step = metadata.step
        self.async_write_ha_state()

    def apply_state(
        self, state: ThermostatState | None, temperature: float | None
    ) -> None:
        """Write the state once the registry has a new record."""
        if state is None:
            _LOGGER.warning(
                "Aircon settings have no thermostat equivalent: %s",
                self._registry.record.settings if self._registry.record else None,
            )
        self.async_write_ha_state()

    async def async_set_hvac_mode(self, hvac_mode: HVACMode) -> None:
        """Set new HVAC mode."""
        state = translation.from_hvac_mode(hvac_mode)
        await self._registry.async_set_heating_cooling_state(state)

    async def async_set_temperature(self, **kwargs: Any) -> None:
        """Set new target temperature."""
        if (hvac_mode := kwargs.get(ATTR_HVAC_MODE)) is not None:
            await self.async_set_hvac_mode(hvac_mode)

        temperature = kwargs.get(ATTR_TEMPERATURE)
        if temperature is None:
            return
        await self._registry.async_set_target_temperature(temperature)

    async def async_turn_on(self) -> None:
        """Turn the aircon on in cooling mode."""
        await self._registry.async_set_heating_cooling_state(ThermostatState.COOL)

    async def async_turn_off(self) -> None:
        """Turn the aircon off."""
        await self._registry.async_set_heating_cooling_state(ThermostatState.OFF)

    async def async_set_temperature_display_unit(self, unit: int) -> None:
        """Change the temperature display unit."""
        await self._registry.async_set_temperature_display_units(unit)
