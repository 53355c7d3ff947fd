"""
Command-center KPI ribbon.

Total over any collection, including the empty one::

    compute_kpis([]) == CommandCenterKPIs(0, 0.0, 0, None)

``highest`` is chosen by a strict ``>`` reduction over ``Opportunity.score``,
so the first record wins ties.
"""

from __future__ import annotations

import logging
from typing import Sequence

from nichefinder_intel.intelligence.signals import HIGH_THRESHOLD
from nichefinder_intel.models.intelligence import CommandCenterKPIs
from nichefinder_intel.models.opportunity import Opportunity

logger = logging.getLogger(__name__)


def compute_kpis(opportunities: Sequence[Opportunity]) -> CommandCenterKPIs:
    """Aggregate count, mean demand, trending count and top record."""
    if not opportunities:
        return CommandCenterKPIs()

    total_demand = 0.0
    trending = 0
    highest: Opportunity | None = None

    for opp in opportunities:
        total_demand += opp.scoring.demand
        if opp.scoring.trend >= HIGH_THRESHOLD:
            trending += 1
        if highest is None or opp.score > highest.score:
            highest = opp

    kpis = CommandCenterKPIs(
        total_opportunities=len(opportunities),
        avg_demand_score=total_demand / len(opportunities),
        trending_count=trending,
        highest=highest,
    )
    logger.debug(
        "KPIs: total=%d avg_demand=%.1f trending=%d",
        kpis.total_opportunities, kpis.avg_demand_score, kpis.trending_count,
    )
    return kpis
