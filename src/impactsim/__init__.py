"""
impactsim — Asteroid impact and deflection estimates for Python.

Pure, deterministic functions that turn an asteroid's size, density,
speed and entry angle into energy, crater and casualty estimates, and
into an approach path showing whether a deflection clears the planet.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from impactsim.core.parameters import AsteroidParameters, DeflectionImpulse, InvalidParameter
from impactsim.core.physics import ImpactReport, compute_impact_report, minimum_deflection_delta_v
from impactsim.core.trajectory import Trajectory, compute_trajectory, critical_delta_v
from impactsim.core.threat import ThreatLevel, classify_threat, assess_impact
from impactsim.core.scenario import ScenarioAssessment, assess_scenario, assess_preset
from impactsim.data.presets import PRESETS, AsteroidPreset, get_preset, custom_parameters

__all__ = [
    "__version__",
    "AsteroidParameters",
    "DeflectionImpulse",
    "InvalidParameter",
    "ImpactReport",
    "compute_impact_report",
    "minimum_deflection_delta_v",
    "Trajectory",
    "compute_trajectory",
    "critical_delta_v",
    "ThreatLevel",
    "classify_threat",
    "assess_impact",
    "ScenarioAssessment",
    "assess_scenario",
    "assess_preset",
    "PRESETS",
    "AsteroidPreset",
    "get_preset",
    "custom_parameters",
]
