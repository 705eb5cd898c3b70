"""Controller that keeps the selected aircon record in sync."""

from __future__ import annotations

import logging

from . import capabilities, translation
from .errors import (
    DeviceNotReadyError,
    NatureRemoError,
    ParseError,
    TransportError,
    TranslationError,
    UpdateFailedError,
    VendorError,
)
from .models import (
    Appliance,
    AirconSettings,
    ControlCommand,
    TemperatureDisplayUnit,
    ThermostatState,
)
from .nature_client import NatureRemoClient
from .notifier import PresentationNotifier

_LOGGER = logging.getLogger(__name__)


class AirconRegistry:
    """Owns the record of one aircon and translates thermostat operations.

    Refreshes and updates are not serialised against each other; whichever
    response arrives last replaces the record.
    """

    def __init__(
        self,
        client: NatureRemoClient,
        appliance_id: str | None = None,
        notifier: PresentationNotifier | None = None,
    ) -> None:
        """Initialize the registry without a record."""
        self.client = client
        self.appliance_id = appliance_id or None
        self.notifier = notifier or PresentationNotifier()
        self.record: Appliance | None = None
        self._capabilities_published = False

    @property
    def capabilities_published(self) -> bool:
        """Return whether the temperature bounds have been published."""
        return self._capabilities_published

    async def async_refresh(self) -> Appliance | None:
        """Fetch the appliances and replace the record of the target aircon.

        Failures are logged and leave the previous record in place.
        """
        _LOGGER.debug("Refreshing target appliance record")
        try:
            appliances = await self.client.async_get_appliances()
        except TransportError as err:
            _LOGGER.error("Failed to refresh target appliance record: %s", err)
            return self.record
        except ParseError as err:
            _LOGGER.error("Failed to parse appliances: %s", err)
            return self.record

        appliance = self._select(appliances)
        if appliance is None:
            _LOGGER.warning(
                "Target aircon could not be found. You can leave `appliance_id`"
                " blank to automatically use the first aircon"
            )
            return self.record

        _LOGGER.debug("Target aircon: %s", appliance)
        self.record = appliance
        self.appliance_id = appliance.id
        self._publish_capabilities_if_needed()
        self._publish_state()
        return self.record

    async def async_update(self, command: ControlCommand) -> AirconSettings:
        """Send a command and replace the settings with the response."""
        record = self._require_record()
        _LOGGER.debug("Making request for update: %s", command)
        try:
            data = await self.client.async_update_aircon_settings(record.id, command)
        except NatureRemoError as err:
            _LOGGER.error("Failed to update: %s", err)
            raise UpdateFailedError("failed to update") from err

        if data is None:
            _LOGGER.error("Failed to update: empty response")
            raise UpdateFailedError("failed to update")
        if "code" in data:
            _LOGGER.error("Server returned error: %s", data)
            raise VendorError("server returned error", code=str(data["code"]))

        settings = AirconSettings.from_dict(data)
        # Applies to the current record, which a refresh may have replaced.
        self._require_record().settings = settings
        self._publish_state()
        return settings

    def get_heating_cooling_state(self) -> ThermostatState:
        """Return the current heating/cooling state."""
        settings = self._require_settings()
        state = translation.to_thermostat_state(settings)
        if state is None:
            raise TranslationError(f"unsupported settings: {settings}")
        return state

    async def async_set_heating_cooling_state(self, value: int) -> AirconSettings:
        """Switch the aircon off or into heating, cooling or auto mode."""
        try:
            command = translation.from_thermostat_state(value)
        except NatureRemoError:
            _LOGGER.error("Unexpected heating cooling state value: %s", value)
            raise
        return await self.async_update(command)

    def get_current_temperature(self) -> float | None:
        """Return the current temperature.

        The aircon settings carry no room temperature, so this is the target.
        """
        return self.get_target_temperature()

    def get_target_temperature(self) -> float | None:
        """Return the target temperature."""
        return self._require_settings().temp

    async def async_set_target_temperature(self, value: float) -> AirconSettings:
        """Set the target temperature."""
        return await self.async_update(translation.temperature_command(value))

    def get_temperature_display_units(self) -> TemperatureDisplayUnit:
        """Return the temperature unit the aircon reports in."""
        record = self._require_record()
        temp_unit = record.aircon.temp_unit if record.aircon is not None else None
        return translation.to_display_unit(temp_unit)

    async def async_set_temperature_display_units(self, value: int) -> None:
        """Change the display unit; the aircon only supports Celsius."""
        try:
            translation.check_display_unit_change(value)
        except NatureRemoError as err:
            _LOGGER.error("Cannot set temperature display unit %s: %s", value, err)
            raise

    def _select(self, appliances: list[Appliance]) -> Appliance | None:
        if self.appliance_id:
            return next((app for app in appliances if app.id == self.appliance_id), None)
        return next((app for app in appliances if app.aircon is not None), None)

    def _require_record(self) -> Appliance:
        if self.record is None:
            raise DeviceNotReadyError("aircon has not been fetched yet")
        return self.record

    def _require_settings(self) -> AirconSettings:
        record = self._require_record()
        if record.settings is None:
            raise DeviceNotReadyError(f"aircon {record.id} reports no settings")
        return record.settings

    def _publish_capabilities_if_needed(self) -> None:
        if self._capabilities_published:
            return
        assert self.record is not None
        if self.record.aircon is None:
            _LOGGER.warning("Appliance %s reports no aircon range", self.record.id)
            return
        try:
            metadata = capabilities.derive_capabilities(self.record.aircon)
        except ValueError as err:
            _LOGGER.error("Failed to derive temperature bounds: %s", err)
            return

        _LOGGER.debug("Notifying target temperature bounds: %s", metadata)
        self.notifier.publish_capabilities(metadata)
        self._capabilities_published = True

    def _publish_state(self) -> None:
        assert self.record is not None
        settings = self.record.settings
        if settings is None:
            return
        _LOGGER.debug("Notifying values: %s", settings)
        self.notifier.publish_state(
            translation.to_thermostat_state(settings), settings.temp
        )
