"""Combine the physics report and the trajectory for one set of inputs."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from impactsim.core.parameters import AsteroidParameters, DeflectionImpulse
from impactsim.core.physics import ImpactReport, compute_impact_report
from impactsim.core.threat import assess_impact
from impactsim.core.trajectory import Trajectory, compute_trajectory
from impactsim.data.presets import get_preset

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioAssessment:
    """Physics report and trajectory computed from the same inputs.

    The two halves are independent: ``report.deflected`` and
    ``trajectory.will_impact`` come from different deflection models and
    may disagree.
    """

    params: AsteroidParameters
    deflection: DeflectionImpulse
    report: ImpactReport
    trajectory: Trajectory

    @property
    def assessment(self) -> str:
        return assess_impact(
            self.report.tnt_equivalent_tons,
            deflected=self.deflection.delta_v_km_s > 0 and self.report.deflected,
        )


def assess_scenario(
    params: AsteroidParameters,
    deflection: DeflectionImpulse = DeflectionImpulse(),
) -> ScenarioAssessment:
    """Run both models for one input set.

    Raises:
        InvalidParameter: If either model rejects the inputs.
    """
    report = compute_impact_report(params, deflection)
    trajectory = compute_trajectory(params, deflection)
    logger.debug("Scenario assessed: threat=%s, impact=%s", report.threat_level.name, trajectory.will_impact)
    return ScenarioAssessment(params=params, deflection=deflection, report=report, trajectory=trajectory)


def assess_preset(name: str, deflection: DeflectionImpulse = DeflectionImpulse()) -> ScenarioAssessment:
    """Run both models for a named preset."""
    return assess_scenario(get_preset(name).to_parameters(), deflection)
