"""
"Why this ranks highly" bullets.

Rules are evaluated independently in priority order; every rule that holds
contributes one bullet and the list is truncated to the first three:

    demand      >= 70   "Strong demand signal (x/100)"
    feasibility >= 70   "High feasibility for solo builder (x/100)"
    competition <= 40   "Low competition (x/100)"
    trend       >= 70   "Rising trend (x/100)"

When nothing fires, a single "Balanced opportunity…" bullet quotes the
composite score.  Values are printed with one decimal place.
"""

from __future__ import annotations

from nichefinder_intel.intelligence.signals import HIGH_THRESHOLD, MID_THRESHOLD
from nichefinder_intel.models.opportunity import Opportunity

MAX_REASONS = 3


def ranking_reasons(opportunity: Opportunity) -> list[str]:
    """Return 1–3 human-readable ranking reasons for ``opportunity``."""
    scoring = opportunity.scoring
    reasons: list[str] = []

    if scoring.demand >= HIGH_THRESHOLD:
        reasons.append(f"Strong demand signal ({scoring.demand:.1f}/100)")
    if scoring.feasibility >= HIGH_THRESHOLD:
        reasons.append(f"High feasibility for solo builder ({scoring.feasibility:.1f}/100)")
    if scoring.competition <= MID_THRESHOLD:
        reasons.append(f"Low competition ({scoring.competition:.1f}/100)")
    if scoring.trend >= HIGH_THRESHOLD:
        reasons.append(f"Rising trend ({scoring.trend:.1f}/100)")

    if not reasons:
        return [f"Balanced opportunity with composite score of {scoring.composite:.1f}/100"]
    return reasons[:MAX_REASONS]
