from __future__ import annotations

import pytest

from impactsim.core.threat import ThreatLevel, assess_impact, classify_threat


class TestClassifyThreat:
    """Test suite for TNT-based threat bands."""

    @pytest.mark.parametrize(
        "tons, expected",
        [
            (0.0, ThreatLevel.LOCAL),
            (999.9, ThreatLevel.LOCAL),
            (1_000.0, ThreatLevel.REGIONAL),
            (99_999.0, ThreatLevel.REGIONAL),
            (100_000.0, ThreatLevel.GLOBAL),
            (9_999_999.0, ThreatLevel.GLOBAL),
            (10_000_000.0, ThreatLevel.EXTINCTION),
            (1e14, ThreatLevel.EXTINCTION),
        ],
    )
    def test_breakpoints(self, tons, expected):
        assert classify_threat(tons) == expected

    def test_labels(self):
        assert ThreatLevel.LOCAL.value == "local impact"
        assert ThreatLevel.EXTINCTION.value == "extinction event"


class TestAssessImpact:
    def test_minimal_damage(self):
        assert "burn up" in assess_impact(10.0)

    def test_nuclear_scale(self):
        assert "nuclear weapons" in assess_impact(500_000.0)

    def test_civilization_threatening(self):
        assert "civilization-threatening" in assess_impact(1e9)

    def test_deflection_note(self):
        text = assess_impact(1e9, deflected=True)
        assert text.endswith("successfully divert the asteroid away from Earth!")
        assert "However" not in assess_impact(1e9, deflected=False)

    @pytest.mark.parametrize(
        "tons, phrase",
        [
            (999.0, "burn up"),
            (1_000.0, "nuclear weapons"),
            (999_999.0, "nuclear weapons"),
            (1_000_000.0, "civilization-threatening"),
            (5_000_000.0, "civilization-threatening"),
        ],
    )
    def test_tier_breakpoints(self, tons, phrase):
        assert phrase in assess_impact(tons)

    def test_tiers_independent_of_threat_bands(self):
        # 5 Mt is still the GLOBAL band but already civilization-threatening
        assert classify_threat(5e6) == ThreatLevel.GLOBAL
        assert "civilization-threatening" in assess_impact(5e6)
