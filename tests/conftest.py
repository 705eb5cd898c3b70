"""Shared fixtures for nature_remo_aircon tests."""

from __future__ import annotations

import copy
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from custom_components.nature_remo_aircon.models import (
    Appliance,
    CapabilityMetadata,
    ThermostatState,
)
from custom_components.nature_remo_aircon.nature_client import NatureRemoClient
from custom_components.nature_remo_aircon.notifier import PresentationNotifier
from custom_components.nature_remo_aircon.registry import AirconRegistry


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations):
    """Allow Home Assistant to load the integration under test."""
    yield


# ── Sample API payloads ────────────────────────────────────────────────

TV_APPLIANCE: dict[str, Any] = {
    "id": "A",
    "nickname": "TV",
    "type": "TV",
    "aircon": None,
    "settings": None,
}

AIRCON_APPLIANCE: dict[str, Any] = {
    "id": "B",
    "nickname": "Living room",
    "type": "AC",
    "aircon": {
        "range": {
            "modes": {
                "warm": {"temp": ["16", "17", "18"], "vol": ["auto"], "dir": ["auto"]},
                "cool": {"temp": ["20", "22"], "vol": ["auto"], "dir": ["auto"]},
                "blow": {"temp": [""], "vol": ["auto"], "dir": ["auto"]},
            },
            "fixedButtons": ["power-off"],
        },
        "tempUnit": "c",
    },
    "settings": {
        "temp": "24",
        "temp_unit": "c",
        "mode": "cool",
        "vol": "auto",
        "dir": "auto",
        "button": "",
    },
}

SECOND_AIRCON_APPLIANCE: dict[str, Any] = {
    **copy.deepcopy(AIRCON_APPLIANCE),
    "id": "C",
    "nickname": "Bedroom",
    "settings": {"temp": "19", "mode": "warm", "button": ""},
}


def appliance_payloads() -> list[dict[str, Any]]:
    """Return a fresh copy of the appliances list."""
    return copy.deepcopy([TV_APPLIANCE, AIRCON_APPLIANCE, SECOND_AIRCON_APPLIANCE])


def appliances() -> list[Appliance]:
    """Return the appliances list as models."""
    return [Appliance.from_dict(item) for item in appliance_payloads()]


class FakeSurface:
    """Records what the notifier forwards."""

    def __init__(self) -> None:
        self.capabilities: list[CapabilityMetadata] = []
        self.states: list[tuple[ThermostatState | None, float | None]] = []

    def apply_capabilities(self, metadata: CapabilityMetadata) -> None:
        self.capabilities.append(metadata)

    def apply_state(
        self, state: ThermostatState | None, temperature: float | None
    ) -> None:
        self.states.append((state, temperature))


# ── Fixtures ───────────────────────────────────────────────────────────


@pytest.fixture
def mock_client() -> MagicMock:
    """A client whose requests are mocked."""
    client = MagicMock(spec=NatureRemoClient)
    client.async_get_appliances = AsyncMock(return_value=appliances())
    client.async_update_aircon_settings = AsyncMock(
        return_value={"mode": "cool", "button": "", "temp": "24"}
    )
    return client


@pytest.fixture
def surface() -> FakeSurface:
    """A surface recording published values."""
    return FakeSurface()


@pytest.fixture
def registry(mock_client: MagicMock, surface: FakeSurface) -> AirconRegistry:
    """A registry with an attached surface and no configured appliance."""
    notifier = PresentationNotifier()
    notifier.attach(surface)
    return AirconRegistry(mock_client, None, notifier)
