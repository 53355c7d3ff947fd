"""
Composition layer: the two views the dashboard renders.

build_command_center(opportunities)
    -> CommandCenterView   (KPI ribbon + top cards + insight feed)

build_brief(opportunity, feed=...)
    -> OpportunityBrief    (everything the detail drawer shows)

Both are pure: each call recomputes every derived value from its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Mapping, Optional, Sequence

from nichefinder_intel.intelligence.actions import ActionPath, suggest_actions
from nichefinder_intel.intelligence.insights import generate_insights, group_insights, insights_for
from nichefinder_intel.intelligence.kpis import compute_kpis
from nichefinder_intel.intelligence.questions import BuilderQuestion, builder_questions
from nichefinder_intel.intelligence.reasons import ranking_reasons
from nichefinder_intel.intelligence.signals import SignalProfile, classify
from nichefinder_intel.intelligence.summary import DEFAULT_RECENT_ACTIVITY_DAYS, summarize
from nichefinder_intel.models.intelligence import CommandCenterKPIs, Insight
from nichefinder_intel.models.opportunity import Opportunity
from nichefinder_intel.taxonomy.signal_taxonomy import SummaryMode

DEFAULT_TOP_CARDS = 9


@dataclass
class CommandCenterView:
    """Landing-page data for a ranked collection."""

    kpis:      CommandCenterKPIs
    insights:  list[Insight]
    top_cards: list[Opportunity]


@dataclass
class OpportunityBrief:
    """Detail-drawer data for one opportunity.

    Attributes:
        opportunity:    The source record.
        summary:        Summary sentence (mode chosen by the caller).
        signals:        Demand / momentum / buildability levels.
        reasons:        1–3 ranking bullets.
        questions:      Exactly six builder Q&A entries.
        actions:        Three builder action paths.
        insights:       Feed insights that reference this opportunity.
        insight_groups: ``insights`` bucketed by theme.
    """

    opportunity:    Opportunity
    summary:        str
    signals:        SignalProfile
    reasons:        list[str]
    questions:      list[BuilderQuestion]
    actions:        list[ActionPath]
    insights:       list[Insight] = field(default_factory=list)
    insight_groups: dict[str, list[Insight]] = field(default_factory=dict)


def build_command_center(
    opportunities: Sequence[Opportunity],
    top_cards:     int = DEFAULT_TOP_CARDS,
) -> CommandCenterView:
    """Derive KPIs, the insight feed and the leading cards from a ranked list."""
    return CommandCenterView(
        kpis=compute_kpis(opportunities),
        insights=generate_insights(opportunities),
        top_cards=list(opportunities[:top_cards]),
    )


def build_brief(
    opportunity:          Opportunity,
    feed:                 Sequence[Insight] = (),
    descriptions:         Mapping[str, str] | None = None,
    summary_mode:         SummaryMode | str = SummaryMode.CATALOG,
    now:                  Optional[datetime] = None,
    recent_activity_days: int = DEFAULT_RECENT_ACTIVITY_DAYS,
) -> OpportunityBrief:
    """Assemble every per-opportunity derivation.

    Args:
        opportunity:  Record being opened.
        feed:         The command-center insight feed (filtered to this record).
        descriptions: Description table for CATALOG summaries.
        summary_mode: Summary strategy.
        now:          Reference time for SIGNALS recency checks.
        recent_activity_days: Recency window for SIGNALS summaries.
    """
    own_insights = insights_for(opportunity.id, feed)
    return OpportunityBrief(
        opportunity=opportunity,
        summary=summarize(
            opportunity,
            descriptions=descriptions,
            mode=summary_mode,
            now=now,
            recent_activity_days=recent_activity_days,
        ),
        signals=classify(opportunity.scoring),
        reasons=ranking_reasons(opportunity),
        questions=builder_questions(opportunity),
        actions=suggest_actions(opportunity),
        insights=own_insights,
        insight_groups=group_insights(own_insights),
    )
