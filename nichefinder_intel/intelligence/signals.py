"""
Signal classifier: maps 0–100 component scores to ordinal levels.

    demand       >= 70 High          >= 40 Med        else Low
    trend        >= 70 Rising        >= 40 Stable     else Fading
    feasibility  >= 70 Solo-friendly >= 40 Complex    else Hard

Stateless and total.  Scores are compared as-is: values above 100 land in
the top tier and negative values in the bottom tier.
"""

from __future__ import annotations

from dataclasses import dataclass

from nichefinder_intel.models.opportunity import ScoringDetails
from nichefinder_intel.taxonomy.signal_taxonomy import (
    MOMENTUM_GLYPHS,
    BuildabilityLevel,
    DemandLevel,
    MomentumLevel,
)

HIGH_THRESHOLD = 70.0
MID_THRESHOLD = 40.0


@dataclass(frozen=True)
class SignalProfile:
    """Three classifications derived from one ``ScoringDetails``."""

    demand:       DemandLevel
    momentum:     MomentumLevel
    buildability: BuildabilityLevel

    @property
    def momentum_glyph(self) -> str:
        return MOMENTUM_GLYPHS[self.momentum]


def demand_level(score: float) -> DemandLevel:
    if score >= HIGH_THRESHOLD:
        return DemandLevel.HIGH
    if score >= MID_THRESHOLD:
        return DemandLevel.MED
    return DemandLevel.LOW


def momentum_level(trend: float) -> MomentumLevel:
    if trend >= HIGH_THRESHOLD:
        return MomentumLevel.RISING
    if trend >= MID_THRESHOLD:
        return MomentumLevel.STABLE
    return MomentumLevel.FADING


def buildability_level(feasibility: float) -> BuildabilityLevel:
    if feasibility >= HIGH_THRESHOLD:
        return BuildabilityLevel.SOLO_FRIENDLY
    if feasibility >= MID_THRESHOLD:
        return BuildabilityLevel.COMPLEX
    return BuildabilityLevel.HARD


def classify(scoring: ScoringDetails) -> SignalProfile:
    """Classify demand, momentum and buildability for one scoring record."""
    return SignalProfile(
        demand=demand_level(scoring.demand),
        momentum=momentum_level(scoring.trend),
        buildability=buildability_level(scoring.feasibility),
    )
