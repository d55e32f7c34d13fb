"""Impact and deflection physics.

Maps asteroid parameters and an applied delta-v to mass, energy, crater,
casualty and survival estimates. The crater, population and survival
relations are simplified heuristics whose constants are fixed.
"""

from __future__ import annotations

import logging
import math
from dataclasses import asdict, dataclass

from impactsim.core.parameters import (
    AsteroidParameters,
    DeflectionImpulse,
    InvalidParameter,
    require_non_negative,
    require_positive,
)
from impactsim.core.threat import ThreatLevel, classify_threat
from impactsim.utils.constants import (
    CRATER_COEFFICIENT,
    CRATER_DEPTH_RATIO,
    CRATER_MASS_EXPONENT,
    CRATER_MASS_REFERENCE_KG,
    CRATER_VELOCITY_EXPONENT,
    EARTH_DIAMETER_KM,
    EARTH_MOON_DISTANCE_M,
    KILOTON_TONS,
    MEGATON_TONS,
    PEOPLE_PER_CRATER_KM2,
    SURVIVAL_DECAY_PER_MEGATON,
    TNT_TON_JOULES,
    WORLD_POPULATION,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ImpactReport:
    """Consequences of an asteroid impact.

    Attributes:
        mass_kg: Asteroid mass in kg.
        kinetic_energy_j: Kinetic energy at approach speed in joules.
        tnt_equivalent_tons: Kinetic energy in tons of TNT.
        crater_diameter_m: Estimated crater diameter in meters.
        population_at_risk: People at risk, capped at world population.
        survival_chance_percent: Survival chance in [0, 100].
        deflection_angle_rad: Angular perturbation from the applied delta-v.
        deflection_distance_km: Course shift at the Earth-Moon reference distance.
    """

    mass_kg: float
    kinetic_energy_j: float
    tnt_equivalent_tons: float
    crater_diameter_m: float
    population_at_risk: float
    survival_chance_percent: float
    deflection_angle_rad: float
    deflection_distance_km: float

    @property
    def threat_level(self) -> ThreatLevel:
        return classify_threat(self.tnt_equivalent_tons)

    @property
    def deflected(self) -> bool:
        """True when the course shift clears Earth's diameter."""
        return self.deflection_distance_km > EARTH_DIAMETER_KM

    @property
    def deflection_status(self) -> str:
        return "Earth Miss!" if self.deflected else "Impact Still Likely"

    @property
    def crater_depth_m(self) -> float:
        return self.crater_diameter_m * CRATER_DEPTH_RATIO

    @property
    def crater_diameter_km(self) -> float:
        return self.crater_diameter_m / 1000.0

    @property
    def mass_billion_kg(self) -> float:
        return self.mass_kg / 1e12

    @property
    def energy_petajoules(self) -> float:
        return self.kinetic_energy_j / 1e15

    @property
    def tnt_display(self) -> str:
        """TNT equivalent as ``"12.3 kt"`` or ``"4.5 Mt"``."""
        if self.tnt_equivalent_tons >= MEGATON_TONS:
            return f"{self.tnt_equivalent_tons / MEGATON_TONS:.1f} Mt"
        return f"{self.tnt_equivalent_tons / KILOTON_TONS:.1f} kt"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["threat_level"] = self.threat_level.value
        data["crater_depth_m"] = self.crater_depth_m
        data["deflected"] = self.deflected
        return data


def _mass_kg(diameter_m: float, density_kg_m3: float) -> float:
    radius = diameter_m / 2.0
    volume = (4.0 / 3.0) * math.pi * radius**3
    return volume * density_kg_m3


def _crater_diameter_m(mass_kg: float, velocity_km_s: float) -> float:
    """Simplified crater scaling law. Not a physically rigorous pi-scaling."""
    return (
        CRATER_COEFFICIENT
        * (mass_kg / CRATER_MASS_REFERENCE_KG) ** CRATER_MASS_EXPONENT
        * velocity_km_s**CRATER_VELOCITY_EXPONENT
        * 1000.0
    )


def _population_at_risk(crater_diameter_m: float) -> float:
    crater_km = crater_diameter_m / 1000.0
    return min(crater_km**2 * PEOPLE_PER_CRATER_KM2, WORLD_POPULATION)


def _deflection(delta_v_km_s: float, velocity_km_s: float) -> tuple[float, float]:
    """Return (deflection angle in rad, course shift in km)."""
    angle = (delta_v_km_s * 1000.0) / (velocity_km_s * 1000.0)
    distance_km = angle * EARTH_MOON_DISTANCE_M / 1000.0
    return angle, distance_km


def _survival_chance(deflection_distance_km: float, tnt_equivalent_tons: float) -> float:
    if deflection_distance_km > EARTH_DIAMETER_KM:
        return 100.0
    megatons = tnt_equivalent_tons / MEGATON_TONS
    return max(0.0, 100.0 - megatons * SURVIVAL_DECAY_PER_MEGATON)


def compute_impact_report(
    params: AsteroidParameters,
    deflection: DeflectionImpulse = DeflectionImpulse(),
) -> ImpactReport:
    """Compute the impact consequences for one asteroid.

    Args:
        params: Asteroid diameter, density and velocity (entry angle unused).
        deflection: Applied delta-v.

    Returns:
        An ImpactReport with every field finite and non-negative.

    Raises:
        InvalidParameter: If diameter, density or velocity is not positive,
            or delta-v is negative, or the inputs are too large
            for the results to be finite.
    """
    require_positive("diameter_m", params.diameter_m)
    require_positive("density_kg_m3", params.density_kg_m3)
    require_positive("velocity_km_s", params.velocity_km_s)
    require_non_negative("delta_v_km_s", deflection.delta_v_km_s)

    try:
        mass = _mass_kg(params.diameter_m, params.density_kg_m3)
        velocity_ms = params.velocity_km_s * 1000.0
        kinetic_energy = 0.5 * mass * velocity_ms**2
        tnt_tons = kinetic_energy / TNT_TON_JOULES
        crater = _crater_diameter_m(mass, params.velocity_km_s)
        angle, distance_km = _deflection(deflection.delta_v_km_s, params.velocity_km_s)
    except OverflowError as exc:
        logger.error("Impact inputs overflow: d=%r m, v=%r km/s", params.diameter_m, params.velocity_km_s)
        raise InvalidParameter(f"Inputs too large to evaluate: {exc}") from exc

    if not all(math.isfinite(v) for v in (mass, kinetic_energy, tnt_tons, crater, distance_km)):
        logger.error("Impact inputs overflow: d=%r m, v=%r km/s", params.diameter_m, params.velocity_km_s)
        raise InvalidParameter("Inputs too large to evaluate: result is not finite")

    population = _population_at_risk(crater)
    survival = _survival_chance(distance_km, tnt_tons)

    logger.debug(
        "Impact report: d=%.1f m, v=%.1f km/s, E=%.3e J, crater=%.1f m, survival=%.1f%%",
        params.diameter_m, params.velocity_km_s, kinetic_energy, crater, survival,
    )
    return ImpactReport(
        mass_kg=mass,
        kinetic_energy_j=kinetic_energy,
        tnt_equivalent_tons=tnt_tons,
        crater_diameter_m=crater,
        population_at_risk=population,
        survival_chance_percent=survival,
        deflection_angle_rad=angle,
        deflection_distance_km=distance_km,
    )


def minimum_deflection_delta_v(params: AsteroidParameters) -> float:
    """
    Delta-v (km/s) at which the course shift equals Earth's diameter.

    Any delta-v strictly greater than the returned value yields a report
    with ``deflected`` set and 100% survival.

    Raises:
        InvalidParameter: If velocity is not positive.
    """
    require_positive("velocity_km_s", params.velocity_km_s)
    required_angle = EARTH_DIAMETER_KM * 1000.0 / EARTH_MOON_DISTANCE_M
    return required_angle * params.velocity_km_s
