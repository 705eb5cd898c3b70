"""Tests for the Nature Remo Aircon integration."""
