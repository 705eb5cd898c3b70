"""Diagnostics support for Nature Remo Aircon."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from homeassistant.components.diagnostics import async_redact_data
from homeassistant.const import CONF_ACCESS_TOKEN
from homeassistant.core import HomeAssistant

from .__init__ import NatureRemoAirconConfigEntry

TO_REDACT = {CONF_ACCESS_TOKEN}


async def async_get_config_entry_diagnostics(
    hass: HomeAssistant, entry: NatureRemoAirconConfigEntry
) -> dict[str, Any]:
    """Return the selected aircon and its last known record."""
    registry = entry.runtime_data
    notifier = registry.notifier
    return {
        "entry": async_redact_data(dict(entry.data), TO_REDACT),
        "appliance_id": registry.appliance_id,
        "capabilities_published": registry.capabilities_published,
        "capabilities": asdict(notifier.capabilities) if notifier.capabilities else None,
        "surface_attached": notifier.attached,
        "record": asdict(registry.record) if registry.record else None,
    }
