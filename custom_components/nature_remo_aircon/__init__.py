"""Nature Remo Aircon integration for Home Assistant."""

from __future__ import annotations

from typing import Final

from homeassistant.config_entries import ConfigEntry
from homeassistant.const import CONF_ACCESS_TOKEN, Platform
from homeassistant.core import HomeAssistant

from .const import CONF_APPLIANCE_ID
from .nature_client import NatureRemoClient
from .registry import AirconRegistry

type NatureRemoAirconConfigEntry = ConfigEntry[AirconRegistry]

PLATFORMS: Final = [Platform.CLIMATE]


async def async_setup_entry(
    hass: HomeAssistant, entry: NatureRemoAirconConfigEntry
) -> bool:
    """Set up Nature Remo Aircon from a config entry."""
    client = NatureRemoClient(entry.data[CONF_ACCESS_TOKEN])
    entry.runtime_data = AirconRegistry(client, entry.data.get(CONF_APPLIANCE_ID))

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    return True


async def async_unload_entry(
    hass: HomeAssistant, entry: NatureRemoAirconConfigEntry
) -> bool:
    """Unload a config entry."""
    return await hass.config_entries.async_unload_platforms(entry, PLATFORMS)
