"""Hand-off of aircon changes to the entity presenting them."""

from __future__ import annotations

from typing import Protocol

from .models import CapabilityMetadata, ThermostatState


class PresentationSurface(Protocol):
    """Entity that shows the aircon as a thermostat."""

    def apply_capabilities(self, metadata: CapabilityMetadata) -> None:
        """Apply new target temperature bounds."""

    def apply_state(
        self, state: ThermostatState | None, temperature: float | None
    ) -> None:
        """Apply a new thermostat state and temperature."""


class PresentationNotifier:
    """Forward capability and state changes to the attached surface.

    Home Assistant adds the entity only after the first refresh, so whatever
    was published before then is replayed on attach.
    """

    def __init__(self) -> None:
        """Initialize the notifier without a surface."""
        self._surface: PresentationSurface | None = None
        self.capabilities: CapabilityMetadata | None = None
        self.state: ThermostatState | None = None
        self.temperature: float | None = None
        self._has_state = False

    @property
    def attached(self) -> bool:
        """Return whether a surface is attached."""
        return self._surface is not None

    def attach(self, surface: PresentationSurface) -> None:
        """Attach a surface and replay the last published values."""
        self._surface = surface
        if self.capabilities is not None:
            surface.apply_capabilities(self.capabilities)
        if self._has_state:
            surface.apply_state(self.state, self.temperature)

    def detach(self) -> None:
        """Detach the current surface."""
        self._surface = None

    def publish_capabilities(self, metadata: CapabilityMetadata) -> None:
        """Publish the target temperature bounds."""
        self.capabilities = metadata
        if self._surface is not None:
            self._surface.apply_capabilities(metadata)

    def publish_state(
        self, state: ThermostatState | None, temperature: float | None
    ) -> None:
        """Publish the thermostat state; skipped while no surface is attached."""
        self.state = state
        self.temperature = temperature
        self._has_state = True
        if self._surface is None:
            return
        self._surface.apply_state(state, temperature)
