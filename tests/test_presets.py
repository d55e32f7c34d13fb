"""Tests for named presets and input ranges."""

import pytest

from impactsim.core.parameters import AsteroidParameters
from impactsim.data.presets import (
    DELTA_V_RANGE_KM_S,
    DIAMETER_RANGE_M,
    ENTRY_ANGLE_RANGE_DEG,
    PRESETS,
    VELOCITY_RANGE_KM_S,
    custom_parameters,
    get_preset,
)


class TestPresets:
    def test_known_presets(self) -> None:
        assert set(PRESETS) == {"Impactor-2025", "Chelyabinsk-2013", "Tunguska-1908", "Chicxulub-Killer"}

    def test_chelyabinsk_values(self) -> None:
        preset = get_preset("Chelyabinsk-2013")
        assert preset.to_parameters() == AsteroidParameters(
            diameter_m=20.0, density_kg_m3=3300.0, velocity_km_s=19.0, entry_angle_deg=18.0
        )

    def test_unknown_preset_raises(self) -> None:
        with pytest.raises(KeyError, match="Unknown asteroid preset"):
            get_preset("Apophis")


class TestCustomParameters:
    def test_defaults(self) -> None:
        params = custom_parameters()
        assert params.diameter_m == 100.0
        assert params.density_kg_m3 == 3000.0
        assert params.velocity_km_s == 20.0
        assert params.entry_angle_deg == 45.0

    def test_clamps_to_slider_range(self) -> None:
        params = custom_parameters(diameter_m=5000.0, velocity_km_s=1.0, entry_angle_deg=5.0)
        assert params.diameter_m == DIAMETER_RANGE_M.maximum
        assert params.velocity_km_s == VELOCITY_RANGE_KM_S.minimum
        assert params.entry_angle_deg == ENTRY_ANGLE_RANGE_DEG.minimum


class TestInputRange:
    def test_contains(self) -> None:
        assert DELTA_V_RANGE_KM_S.contains(0.0)
        assert DELTA_V_RANGE_KM_S.contains(5.0)
        assert not DELTA_V_RANGE_KM_S.contains(5.1)

    def test_clamp(self) -> None:
        assert DELTA_V_RANGE_KM_S.clamp(-1.0) == 0.0
        assert DELTA_V_RANGE_KM_S.clamp(2.5) == 2.5
