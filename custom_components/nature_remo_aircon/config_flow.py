"""Config flow for Nature Remo Aircon integration."""

from __future__ import annotations

import hashlib
import logging
from typing import Any

import voluptuous as vol

from homeassistant import config_entries
from homeassistant.const import CONF_ACCESS_TOKEN
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError

from .const import (
    CONF_APPLIANCE_ID,
    CONF_REFRESH_RATE,
    DEFAULT_NAME,
    DEFAULT_REFRESH_RATE,
    DOMAIN,
)
from .errors import AuthenticationError
from .nature_client import NatureRemoClient

_LOGGER = logging.getLogger(__name__)


class InvalidAuthError(HomeAssistantError):
    """Error to indicate there is invalid auth."""


class NoAirconError(HomeAssistantError):
    """Error to indicate no matching aircon was found."""


async def _async_validate_input(
    hass: HomeAssistant, data: dict[str, Any]
) -> dict[str, Any]:
    """Validate the user input allows us to reach an aircon."""
    client = NatureRemoClient(data[CONF_ACCESS_TOKEN])

    try:
        appliances = await client.async_get_appliances()
    except AuthenticationError as err:
        _LOGGER.error("Failed to validate access token: %s", err)
        raise InvalidAuthError(f"Invalid access token: {err}") from err

    appliance_id = data.get(CONF_APPLIANCE_ID)
    if appliance_id:
        aircon = next((app for app in appliances if app.id == appliance_id), None)
    else:
        aircon = next((app for app in appliances if app.aircon is not None), None)
    if aircon is None:
        raise NoAirconError("No aircon found for the access token")

    return {"title": aircon.nickname or DEFAULT_NAME}


def _unique_id(data: dict[str, Any]) -> str:
    """Return the unique ID for the entry data."""
    if appliance_id := data.get(CONF_APPLIANCE_ID):
        return appliance_id
    return hashlib.sha256(data[CONF_ACCESS_TOKEN].encode()).hexdigest()


class NatureRemoAirconConfigFlow(config_entries.ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Nature Remo Aircon."""

    VERSION = 1

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> config_entries.ConfigFlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            await self.async_set_unique_id(_unique_id(user_input))
            self._abort_if_unique_id_configured()

            try:
                info = await _async_validate_input(self.hass, user_input)
            except InvalidAuthError:
                errors["base"] = "invalid_auth"
            except NoAirconError:
                errors["base"] = "no_aircon"
            except Exception:
                _LOGGER.exception("Unexpected error during access token validation")
                errors["base"] = "cannot_connect"
            else:
                return self.async_create_entry(title=info["title"], data=user_input)

        data_schema = vol.Schema(
            {
                vol.Required(CONF_ACCESS_TOKEN): str,
                vol.Optional(CONF_APPLIANCE_ID, default=""): str,
                vol.Optional(CONF_REFRESH_RATE, default=DEFAULT_REFRESH_RATE): vol.All(
                    vol.Coerce(int), vol.Range(min=10)
                ),
            }
        )

        return self.async_show_form(
            step_id="user", data_schema=data_schema, errors=errors
        )
