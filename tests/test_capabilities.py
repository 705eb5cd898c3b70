"""Tests for deriving target temperature bounds."""

from __future__ import annotations

import pytest

from custom_components.nature_remo_aircon.capabilities import (
    all_temperatures,
    derive_capabilities,
    max_temperature,
    min_temperature,
    temperature_step,
)
from custom_components.nature_remo_aircon.models import (
    AirconCapabilities,
    CapabilityMetadata,
)


def _aircon(modes: dict[str, list[str]]) -> AirconCapabilities:
    return AirconCapabilities(modes=modes, temp_unit="c")


def test_example_mode_table() -> None:
    aircon = _aircon({"warm": ["16", "17", "18"], "cool": ["20", "22"]})

    assert all_temperatures(aircon) == [16, 17, 18, 20, 22]
    assert min_temperature(aircon) == 16
    assert max_temperature(aircon) == 22
    assert temperature_step(aircon) == 1


def test_step_uses_first_mode_only() -> None:
    aircon = _aircon({"cool": ["20", "22", "24"], "warm": ["16", "17", "18"]})
    assert temperature_step(aircon) == 2


def test_step_sorts_and_ignores_duplicates() -> None:
    aircon = _aircon({"cool": ["26", "24", "24", "28"]})
    assert temperature_step(aircon) == 2


def test_step_falls_back_for_single_value_mode() -> None:
    aircon = _aircon({"dry": ["0"], "cool": ["20", "22"]})
    assert temperature_step(aircon) == 1


def test_blank_temperatures_are_skipped() -> None:
    aircon = _aircon({"blow": [""], "cool": ["20", "21"]})
    assert all_temperatures(aircon) == [20, 21]


@pytest.mark.parametrize(
    "modes",
    [
        {"cool": ["30"]},
        {"warm": ["16", "31"], "cool": ["18", "25"]},
        {"auto": ["-2", "-1", "0", "1", "2"], "cool": ["18", "30"]},
    ],
)
def test_min_not_above_max(modes) -> None:
    aircon = _aircon(modes)
    assert min_temperature(aircon) <= max_temperature(aircon)


def test_derive_capabilities() -> None:
    aircon = _aircon({"warm": ["16", "17", "18"], "cool": ["20", "22"]})
    assert derive_capabilities(aircon) == CapabilityMetadata(16, 22, 1)


def test_derive_capabilities_without_temperatures() -> None:
    with pytest.raises(ValueError):
        derive_capabilities(_aircon({"blow": [""]}))


def test_half_degree_set_points_are_truncated() -> None:
    aircon = _aircon({"cool": ["17.5", "18", "18.5", "30", "30.5"], "blow": [""]})

    assert all_temperatures(aircon) == [17, 18, 18, 30, 30]
    assert derive_capabilities(aircon) == CapabilityMetadata(17, 30, 1)
