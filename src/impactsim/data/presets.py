"""Named asteroid scenarios and the input ranges offered to users.

Presets mirror well-known events (Chelyabinsk, Tunguska) plus a hypothetical
impactor and a Chicxulub-scale extinction body.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from impactsim.core.parameters import AsteroidParameters
from impactsim.utils.constants import DEFAULT_DENSITY_KG_M3

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsteroidPreset:
    """A named, pre-filled asteroid scenario."""

    name: str
    diameter_m: float
    density_kg_m3: float
    velocity_km_s: float
    entry_angle_deg: float

    def to_parameters(self) -> AsteroidParameters:
        return AsteroidParameters(
            diameter_m=self.diameter_m,
            density_kg_m3=self.density_kg_m3,
            velocity_km_s=self.velocity_km_s,
            entry_angle_deg=self.entry_angle_deg,
        )


@dataclass(frozen=True)
class InputRange:
    """Inclusive slider range for one user input.

    Attributes:
        minimum: Smallest allowed value.
        maximum: Largest allowed value.
        step: Slider increment.
        default: Initial value for a custom asteroid.
    """

    minimum: float
    maximum: float
    step: float
    default: float

    def contains(self, value: float) -> bool:
        return self.minimum <= value <= self.maximum

    def clamp(self, value: float) -> float:
        return max(self.minimum, min(self.maximum, value))


PRESETS: dict[str, AsteroidPreset] = {
    preset.name: preset
    for preset in (
        AsteroidPreset("Impactor-2025", 250.0, 3000.0, 20.0, 45.0),
        AsteroidPreset("Chelyabinsk-2013", 20.0, 3300.0, 19.0, 18.0),
        AsteroidPreset("Tunguska-1908", 60.0, 2000.0, 25.0, 30.0),
        AsteroidPreset("Chicxulub-Killer", 10000.0, 2500.0, 30.0, 60.0),
    )
}

DIAMETER_RANGE_M = InputRange(minimum=10.0, maximum=1000.0, step=10.0, default=100.0)
VELOCITY_RANGE_KM_S = InputRange(minimum=10.0, maximum=50.0, step=1.0, default=20.0)
ENTRY_ANGLE_RANGE_DEG = InputRange(minimum=15.0, maximum=90.0, step=5.0, default=45.0)
DELTA_V_RANGE_KM_S = InputRange(minimum=0.0, maximum=5.0, step=0.1, default=0.0)


def get_preset(name: str) -> AsteroidPreset:
    """Look up a preset by name.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        logger.error("Unknown asteroid preset: %r", name)
        raise KeyError(f"Unknown asteroid preset: {name!r}") from None


def custom_parameters(
    diameter_m: float = DIAMETER_RANGE_M.default,
    velocity_km_s: float = VELOCITY_RANGE_KM_S.default,
    entry_angle_deg: float = ENTRY_ANGLE_RANGE_DEG.default,
) -> AsteroidParameters:
    """Build a custom asteroid with stony density, clamping inputs to the slider ranges."""
    return AsteroidParameters(
        diameter_m=DIAMETER_RANGE_M.clamp(diameter_m),
        density_kg_m3=DEFAULT_DENSITY_KG_M3,
        velocity_km_s=VELOCITY_RANGE_KM_S.clamp(velocity_km_s),
        entry_angle_deg=ENTRY_ANGLE_RANGE_DEG.clamp(entry_angle_deg),
    )
