"""Tests for the presentation notifier."""

from __future__ import annotations

from custom_components.nature_remo_aircon.models import (
    CapabilityMetadata,
    ThermostatState,
)
from custom_components.nature_remo_aircon.notifier import PresentationNotifier

from .conftest import FakeSurface


def test_state_without_surface_is_only_remembered() -> None:
    notifier = PresentationNotifier()

    notifier.publish_state(ThermostatState.HEAT, 21)

    assert not notifier.attached
    assert notifier.state is ThermostatState.HEAT
    assert notifier.temperature == 21


def test_attach_replays_published_values() -> None:
    notifier = PresentationNotifier()
    notifier.publish_capabilities(CapabilityMetadata(16, 30, 1))
    notifier.publish_state(ThermostatState.COOL, 25)
    surface = FakeSurface()

    notifier.attach(surface)

    assert surface.capabilities == [CapabilityMetadata(16, 30, 1)]
    assert surface.states == [(ThermostatState.COOL, 25)]


def test_attach_before_anything_published() -> None:
    notifier = PresentationNotifier()
    surface = FakeSurface()

    notifier.attach(surface)

    assert surface.capabilities == []
    assert surface.states == []


def test_undefined_state_is_forwarded() -> None:
    notifier = PresentationNotifier()
    surface = FakeSurface()
    notifier.attach(surface)

    notifier.publish_state(None, 24)

    assert surface.states == [(None, 24)]


def test_detach_stops_forwarding() -> None:
    notifier = PresentationNotifier()
    surface = FakeSurface()
    notifier.attach(surface)
    notifier.detach()

    notifier.publish_capabilities(CapabilityMetadata(18, 28, 2))
    notifier.publish_state(ThermostatState.OFF, 22)

    assert surface.capabilities == []
    assert surface.states == []
    assert notifier.capabilities == CapabilityMetadata(18, 28, 2)
