from __future__ import annotations

import logging
from enum import Enum

from impactsim.utils.constants import (
    ASSESSMENT_MINIMAL_TONS,
    ASSESSMENT_REGIONAL_TONS,
    THREAT_EXTINCTION_TONS,
    THREAT_GLOBAL_TONS,
    THREAT_REGIONAL_TONS,
)

logger = logging.getLogger(__name__)


class ThreatLevel(Enum):
    """Impact severity bands keyed on TNT equivalent."""

    LOCAL = "local impact"
    REGIONAL = "regional devastation"
    GLOBAL = "global catastrophe"
    EXTINCTION = "extinction event"


def classify_threat(tnt_equivalent_tons: float) -> ThreatLevel:
    """
    Classify an impact by its TNT equivalent.

    Breakpoints are 1,000 / 100,000 / 10,000,000 tons; each band includes
    its lower breakpoint.

    Args:
        tnt_equivalent_tons: Impact energy in tons of TNT

    Returns:
        The matching ThreatLevel
    """
    if tnt_equivalent_tons >= THREAT_EXTINCTION_TONS:
        return ThreatLevel.EXTINCTION
    elif tnt_equivalent_tons >= THREAT_GLOBAL_TONS:
        return ThreatLevel.GLOBAL
    elif tnt_equivalent_tons >= THREAT_REGIONAL_TONS:
        return ThreatLevel.REGIONAL
    else:
        return ThreatLevel.LOCAL


def assess_impact(tnt_equivalent_tons: float, deflected: bool = False) -> str:
    """Generate the human-readable impact assessment.

    Uses its own three tiers (1e3 and 1e6 tons), independent of ThreatLevel.
    """
    if tnt_equivalent_tons < ASSESSMENT_MINIMAL_TONS:
        text = "This asteroid would likely burn up in the atmosphere or cause minimal damage."
    elif tnt_equivalent_tons < ASSESSMENT_REGIONAL_TONS:
        text = "This impact would cause significant regional destruction, similar to major nuclear weapons."
    else:
        text = "This would be a civilization-threatening event, potentially causing global climate effects."

    if deflected:
        text += " However, the applied deflection would successfully divert the asteroid away from Earth!"

    logger.debug("Impact assessment: %.3e tons (deflected=%s)", tnt_equivalent_tons, deflected)
    return text
