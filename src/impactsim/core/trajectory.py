"""Planar approach geometry and impact/miss classification.

The asteroid closes radially on a target sphere at the origin while the
applied delta-v bends its heading progressively over the approach. Units are
scene design units, not kilometers.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field

import numpy as np

logger = logging.getLogger(__name__)
from numpy.typing import NDArray
from scipy.optimize import brentq

from impactsim.core.parameters import (
    AsteroidParameters,
    DeflectionImpulse,
    require_entry_angle,
    require_non_negative,
    require_positive,
)
from impactsim.utils.constants import (
    IMPACT_TOLERANCE,
    MAX_TRAJECTORY_BEND_RAD,
    MIN_RENDER_SIZE,
    RENDER_SCALE_M,
    TARGET_RADIUS,
    TRAJECTORY_BEND_PER_KM_S,
    TRAJECTORY_START_DISTANCE,
    TRAJECTORY_STEPS,
)


@dataclass(frozen=True, eq=False)
class Trajectory:
    """A discretised approach path.

    Attributes:
        points: Array of shape (TRAJECTORY_STEPS + 1, 3), start point first.
        will_impact: Whether the final point lies on or inside the target.
        impact_point: Final point on impact, the origin otherwise. Gate on
            ``will_impact`` rather than comparing against the origin.
        asteroid_render_size: Presentation size in scene units.
    """

    points: NDArray[np.float64] = field(repr=False)
    will_impact: bool
    impact_point: NDArray[np.float64]
    asteroid_render_size: float

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Trajectory):
            return NotImplemented
        return (
            self.will_impact == other.will_impact
            and self.asteroid_render_size == other.asteroid_render_size
            and np.array_equal(self.points, other.points)
            and np.array_equal(self.impact_point, other.impact_point)
        )

    __hash__ = None

    @property
    def start_position(self) -> NDArray[np.float64]:
        return self.points[0]

    @property
    def final_distance(self) -> float:
        """Distance of the last point from the target center."""
        return float(np.linalg.norm(self.points[-1]))

    @property
    def color(self) -> str:
        return "#FF4444" if self.will_impact else "#44FF44"

    @property
    def status_label(self) -> str:
        return "IMPACT!" if self.will_impact else "DEFLECTED!"


def _miss_distance(delta_v_km_s: float) -> float:
    """Perpendicular offset at closest approach produced by the full bend.

    A line leaving the start point rotated by the bend angle passes the
    origin at ``start_distance * sin(bend)``; beyond a right angle the
    offset stays at the start distance.
    """
    bend = min(delta_v_km_s * TRAJECTORY_BEND_PER_KM_S, MAX_TRAJECTORY_BEND_RAD)
    return TRAJECTORY_START_DISTANCE * math.sin(bend)


def _path_points(angle_rad: float, delta_v_km_s: float) -> NDArray[np.float64]:
    t = np.linspace(0.0, 1.0, TRAJECTORY_STEPS + 1)
    deflection_effect = delta_v_km_s * TRAJECTORY_BEND_PER_KM_S
    deflected_angle = angle_rad + deflection_effect * t
    # Radial closing; the miss offset ramps in with the bend and is zero for dv = 0
    distance = TRAJECTORY_START_DISTANCE * (1.0 - t) + _miss_distance(delta_v_km_s) * t

    points = np.zeros((TRAJECTORY_STEPS + 1, 3), dtype=np.float64)
    points[:, 0] = distance * np.cos(deflected_angle)
    points[:, 1] = distance * np.sin(deflected_angle)
    return points


def compute_trajectory(
    params: AsteroidParameters,
    deflection: DeflectionImpulse = DeflectionImpulse(),
) -> Trajectory:
    """Build the approach path and classify it as impact or miss.

    Args:
        params: Asteroid parameters (diameter, velocity and entry angle are used).
        deflection: Applied delta-v.

    Returns:
        A Trajectory with TRAJECTORY_STEPS + 1 points.

    Raises:
        InvalidParameter: If diameter or velocity is not positive, the entry
            angle is outside (0, 90] degrees, or delta-v is negative.
    """
    require_positive("diameter_m", params.diameter_m)
    require_positive("velocity_km_s", params.velocity_km_s)
    require_entry_angle(params.entry_angle_deg)
    require_non_negative("delta_v_km_s", deflection.delta_v_km_s)

    angle_rad = math.radians(params.entry_angle_deg)
    points = _path_points(angle_rad, deflection.delta_v_km_s)

    final_point = points[-1]
    distance_from_center = float(np.linalg.norm(final_point))
    will_impact = distance_from_center <= TARGET_RADIUS + IMPACT_TOLERANCE
    impact_point = final_point.copy() if will_impact else np.zeros(3, dtype=np.float64)
    # will_impact is derived from these arrays
    points.setflags(write=False)
    impact_point.setflags(write=False)

    logger.debug(
        "Trajectory: angle=%.1f deg, dv=%.3f km/s, final distance=%.3f, impact=%s",
        params.entry_angle_deg, deflection.delta_v_km_s, distance_from_center, will_impact,
    )
    return Trajectory(
        points=points,
        will_impact=will_impact,
        impact_point=impact_point,
        asteroid_render_size=max(MIN_RENDER_SIZE, params.diameter_m / RENDER_SCALE_M),
    )


def critical_delta_v(params: AsteroidParameters) -> float:
    """
    Find the delta-v (km/s) at which the trajectory turns from impact to miss.

    Solves ``final_distance(dv) = TARGET_RADIUS + IMPACT_TOLERANCE`` with
    Brent's method over the range where the miss offset grows monotonically.

    Raises:
        InvalidParameter: On out-of-domain parameters.
        ValueError: If no delta-v within the bend limit clears the target.
    """
    require_positive("diameter_m", params.diameter_m)
    require_positive("velocity_km_s", params.velocity_km_s)
    require_entry_angle(params.entry_angle_deg)

    contact = TARGET_RADIUS + IMPACT_TOLERANCE

    def margin(delta_v_km_s: float) -> float:
        return _miss_distance(delta_v_km_s) - contact

    upper = MAX_TRAJECTORY_BEND_RAD / TRAJECTORY_BEND_PER_KM_S
    if margin(upper) <= 0:
        raise ValueError("No delta-v within the bend limit clears the target")

    result = brentq(margin, 0.0, upper, xtol=1e-12)
    logger.debug("Critical delta-v for angle %.1f deg: %.6f km/s", params.entry_angle_deg, result)
    return float(result)
