"""Input structures shared by the physics engine and the trajectory model."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from impactsim.utils.constants import DEFAULT_DENSITY_KG_M3, DEFAULT_ENTRY_ANGLE_DEG

logger = logging.getLogger(__name__)


class InvalidParameter(ValueError):
    """An input lies outside its documented domain."""


@dataclass(frozen=True)
class AsteroidParameters:
    """Physical description of an incoming asteroid.

    Attributes:
        diameter_m: Diameter in meters.
        density_kg_m3: Bulk density in kg/m³ (stony ≈ 3000).
        velocity_km_s: Approach speed in km/s.
        entry_angle_deg: Entry angle from horizontal in degrees, in (0, 90].
    """

    diameter_m: float
    density_kg_m3: float = DEFAULT_DENSITY_KG_M3
    velocity_km_s: float = 20.0
    entry_angle_deg: float = DEFAULT_ENTRY_ANGLE_DEG


@dataclass(frozen=True)
class DeflectionImpulse:
    """Velocity change applied to the asteroid by a deflection effort.

    Attributes:
        delta_v_km_s: Applied delta-v in km/s, >= 0.
    """

    delta_v_km_s: float = 0.0


def require_positive(name: str, value: float) -> None:
    """Raise InvalidParameter unless ``value`` is a finite number > 0."""
    if not (math.isfinite(value) and value > 0):
        logger.error("Invalid %s: %r (must be positive)", name, value)
        raise InvalidParameter(f"{name} must be positive, got {value!r}")


def require_non_negative(name: str, value: float) -> None:
    """Raise InvalidParameter unless ``value`` is a finite number >= 0."""
    if not (math.isfinite(value) and value >= 0):
        logger.error("Invalid %s: %r (must be non-negative)", name, value)
        raise InvalidParameter(f"{name} must be non-negative, got {value!r}")


def require_entry_angle(value: float) -> None:
    """Raise InvalidParameter unless ``value`` lies in (0, 90] degrees."""
    if not (math.isfinite(value) and 0 < value <= 90):
        logger.error("Invalid entry_angle_deg: %r (must be in (0, 90])", value)
        raise InvalidParameter(f"entry_angle_deg must be in (0, 90], got {value!r}")
