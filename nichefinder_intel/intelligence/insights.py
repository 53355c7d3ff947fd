"""
Insight feed: prioritized narrative lines for the top of the ranking.

Only the first ``CANDIDATE_WINDOW`` (5) opportunities are examined; the
caller owns the ordering and the engine never sorts.  Each candidate is
classified (see ``signals.classify``) and run through a mutually exclusive
rule cascade; the first matching rule yields exactly one insight:

  #  Condition                                 Type      Icon  Kind
  1  demand High  AND momentum Rising          hot       🔥    hot
  2  demand High  AND momentum Stable          info      📈    stable
  3  demand High  AND momentum Fading          warning   ⚠️    fading
  4  demand Med   AND momentum Rising          rising    ⭐    rising
  5  buildability Solo-friendly AND demand≠Low info      🎯    solo

Candidates matching no rule contribute nothing.  The feed is capped at
``MAX_INSIGHTS`` (6).  With one insight per candidate the cap cannot bind
today; it is enforced regardless.

Also here: ``insights_for()`` (drawer filter) and ``group_insights()``
(the drawer's themed Intelligence tab).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from nichefinder_intel.intelligence.signals import SignalProfile, classify
from nichefinder_intel.models.intelligence import Insight
from nichefinder_intel.models.opportunity import Opportunity
from nichefinder_intel.taxonomy.signal_taxonomy import (
    BuildabilityLevel,
    DemandLevel,
    InsightType,
    MomentumLevel,
)

logger = logging.getLogger(__name__)

CANDIDATE_WINDOW = 5
MAX_INSIGHTS = 6


@dataclass(frozen=True)
class InsightRule:
    """One row of the insight cascade.

    ``template`` is formatted with ``name`` and ``demand`` (lower-cased level).
    """

    kind:      str
    type:      InsightType
    icon:      str
    template:  str
    matches:   Callable[[SignalProfile], bool]


INSIGHT_RULES: tuple[InsightRule, ...] = (
    InsightRule(
        kind="hot",
        type=InsightType.HOT,
        icon="🔥",
        template="{name} shows strong demand and rising momentum across all sources",
        matches=lambda s: s.demand is DemandLevel.HIGH and s.momentum is MomentumLevel.RISING,
    ),
    InsightRule(
        kind="stable",
        type=InsightType.INFO,
        icon="📈",
        template="{name} holds steady: demand is high but trend momentum is flattening",
        matches=lambda s: s.demand is DemandLevel.HIGH and s.momentum is MomentumLevel.STABLE,
    ),
    InsightRule(
        kind="fading",
        type=InsightType.WARNING,
        icon="⚠️",
        template="{name} has near-max demand but limited growth signals",
        matches=lambda s: s.demand is DemandLevel.HIGH and s.momentum is MomentumLevel.FADING,
    ),
    InsightRule(
        kind="rising",
        type=InsightType.RISING,
        icon="⭐",
        template="{name} is gaining momentum with steady demand growth",
        matches=lambda s: s.demand is DemandLevel.MED and s.momentum is MomentumLevel.RISING,
    ),
    InsightRule(
        kind="solo",
        type=InsightType.INFO,
        icon="🎯",
        template="{name} is highly feasible for solo builders with {demand} demand",
        matches=lambda s: (
            s.buildability is BuildabilityLevel.SOLO_FRIENDLY
            and s.demand is not DemandLevel.LOW
        ),
    ),
)


def insight_for(opportunity: Opportunity) -> Optional[Insight]:
    """Apply the rule cascade to one opportunity.  ``None`` if no rule matches."""
    signals = classify(opportunity.scoring)
    for rule in INSIGHT_RULES:
        if rule.matches(signals):
            return Insight(
                id=f"insight-{opportunity.id}-{rule.kind}",
                icon=rule.icon,
                text=rule.template.format(
                    name=opportunity.name,
                    demand=signals.demand.value.lower(),
                ),
                opportunity_id=opportunity.id,
                type=rule.type,
            )
    return None


def generate_insights(
    opportunities:    Sequence[Opportunity],
    candidate_window: int = CANDIDATE_WINDOW,
    max_insights:     int = MAX_INSIGHTS,
) -> list[Insight]:
    """Build the insight feed from the first ``candidate_window`` records.

    Args:
        opportunities:    Collection already ordered by rank.
        candidate_window: How many leading records to examine.
        max_insights:     Hard cap on the returned list.

    Returns:
        At most ``max_insights`` insights, in candidate order.
    """
    insights: list[Insight] = []
    for opp in opportunities[:candidate_window]:
        insight = insight_for(opp)
        if insight is not None:
            insights.append(insight)

    logger.debug(
        "Insight feed: %d insight(s) from %d candidate(s)",
        len(insights), min(len(opportunities), candidate_window),
    )
    return insights[:max_insights]


def insights_for(opportunity_id: str, insights: Sequence[Insight]) -> list[Insight]:
    """Insights that reference ``opportunity_id``, in feed order."""
    return [i for i in insights if i.opportunity_id == opportunity_id]


# ── Theme grouping ────────────────────────────────────────────────────────────

INSIGHT_THEMES: tuple[str, ...] = ("demand", "momentum", "risk", "other")


def group_insights(insights: Sequence[Insight]) -> dict[str, list[Insight]]:
    """Bucket insights by theme for the Intelligence tab.

    demand   : type hot, or text mentions "demand"
    momentum : type rising, or text mentions "momentum" / "rising"
    risk     : type warning, or text mentions "saturation" / "competition"
    other    : in none of the above

    The first three buckets may overlap.  Every theme key is always present.
    """
    groups: dict[str, list[Insight]] = {theme: [] for theme in INSIGHT_THEMES}
    for insight in insights:
        text = insight.text.lower()
        placed = False
        if insight.type is InsightType.HOT or "demand" in text:
            groups["demand"].append(insight)
            placed = True
        if insight.type is InsightType.RISING or "momentum" in text or "rising" in text:
            groups["momentum"].append(insight)
            placed = True
        if insight.type is InsightType.WARNING or "saturation" in text or "competition" in text:
            groups["risk"].append(insight)
            placed = True
        if not placed:
            groups["other"].append(insight)
    return groups
