"""
Terminal and Markdown formatters for CLI output.

All formatters accept already-derived values (views, briefs, opportunity
lists) and return plain multi-line strings suitable for ``typer.echo()``.
They compute nothing beyond presentation.

Report layouts
--------------
``format_report_text()`` / ``format_report_markdown()`` list every
opportunity with rank, display score, category, the four component scores
and the contributing source names::

    1. Zigbee2MQTT (Score: 78.4)
       Category: zigbee2mqtt
       Demand: 82.0 | Feasibility: 75.0 | Competition: 30.0 | Trend: 71.0
       Sources: HACS, GitHub, YouTube
"""

from __future__ import annotations

from datetime import datetime
from typing import Sequence

from nichefinder_intel.intelligence.brief import CommandCenterView, OpportunityBrief
from nichefinder_intel.intelligence.signals import classify
from nichefinder_intel.models.opportunity import Opportunity

_RULE = "-" * 72


def _source_names(opp: Opportunity) -> str:
    return ", ".join(s.name for s in opp.data_sources) or "none"


# ── Command center ────────────────────────────────────────────────────────────


def format_command_center(view: CommandCenterView) -> str:
    """KPI ribbon, top opportunity cards and the intelligence feed."""
    kpis = view.kpis
    lines: list[str] = []
    lines.append("")
    lines.append("=== Opportunities Command Center ===")
    lines.append(f"  Total opportunities:   {kpis.total_opportunities}")
    lines.append(f"  Avg demand score:      {kpis.avg_demand_score:.1f}")
    lines.append(f"  Trending opportunities:{kpis.trending_count:>3}")
    lines.append(f"  Highest upside:        {kpis.highest_name}")

    lines.append("")
    lines.append("  [TOP OPPORTUNITIES]")
    if not view.top_cards:
        lines.append("    (no opportunities loaded)")
    else:
        header = (
            f"    {'#':>3}  {'Name':<30}  {'Score':>6}  "
            f"{'Demand':>6}  {'Momentum':>8}  {'Buildability':>13}"
        )
        lines.append(header)
        lines.append("    " + _RULE)
        for rank, opp in enumerate(view.top_cards, start=1):
            signals = classify(opp.scoring)
            lines.append(
                f"    {rank:>3}  {opp.name[:30]:<30}  {opp.score:>6.1f}  "
                f"{signals.demand.value:>6}  "
                f"{signals.momentum_glyph + ' ' + signals.momentum.value:>8}  "
                f"{signals.buildability.value:>13}"
            )

    if view.insights:
        lines.append("")
        lines.append("  [INTELLIGENCE FEED]")
        for insight in view.insights:
            lines.append(f"    {insight.icon} {insight.text}")

    return "\n".join(lines)


# ── Opportunity brief ─────────────────────────────────────────────────────────


def format_brief(brief: OpportunityBrief) -> str:
    """Full detail view for one opportunity."""
    opp = brief.opportunity
    scoring = opp.scoring
    lines: list[str] = []
    lines.append("")
    lines.append(f"=== {opp.name} ===")
    lines.append(f"  Category: {opp.display_category or 'unknown'}")
    lines.append(f"  Score:    {opp.score:.1f}/100")
    lines.append(f"  {brief.summary}")

    lines.append("")
    lines.append("  [SIGNALS]")
    lines.append(
        f"    Demand: {brief.signals.demand.value} ({scoring.demand:.0f})  "
        f"Momentum: {brief.signals.momentum.value} {brief.signals.momentum_glyph} ({scoring.trend:.0f})  "
        f"Buildability: {brief.signals.buildability.value} ({scoring.feasibility:.0f})"
    )

    lines.append("")
    lines.append("  [WHY THIS RANKS HIGHLY]")
    for reason in brief.reasons:
        lines.append(f"    - {reason}")

    lines.append("")
    lines.append("  [BUILDER QUESTIONS]")
    for q in brief.questions:
        lines.append(f"    Q: {q.question}")
        lines.append(f"       {q.answer}")
        lines.append(f"       Why? {q.why}")

    lines.append("")
    lines.append("  [ACTIONS]")
    for action in brief.actions:
        lines.append(f"    {action.title}: {action.description}")
        for idx, step in enumerate(action.steps, start=1):
            lines.append(f"      {idx:02d} {step}")

    lines.append("")
    lines.append("  [INTELLIGENCE]")
    if not brief.insights:
        lines.append("    (no feed insights for this opportunity)")
    else:
        for theme, items in brief.insight_groups.items():
            for insight in items:
                lines.append(f"    [{theme}] {insight.icon} {insight.text}")

    lines.append("")
    lines.append("  [EVIDENCE]")
    if not opp.data_sources:
        lines.append("    (no data sources)")
    for source in opp.data_sources:
        label = source.source_label or source.source_type
        lines.append(f"    {source.name} ({label}): {source.data_points} data points")

    return "\n".join(lines)


# ── Analysis reports ──────────────────────────────────────────────────────────


def format_report_text(
    opportunities: Sequence[Opportunity],
    generated_at:  datetime,
) -> str:
    """Plain-text analysis report."""
    lines: list[str] = []
    lines.append("NICHEFINDER ANALYSIS REPORT")
    lines.append("===========================")
    lines.append("")
    lines.append(f"Analysis Date: {generated_at:%Y-%m-%d %H:%M:%S} UTC")
    lines.append(f"Opportunities: {len(opportunities)}")
    lines.append("")
    lines.append("TOP OPPORTUNITIES")
    lines.append("-----------------")
    lines.append("")

    for idx, opp in enumerate(opportunities, start=1):
        s = opp.scoring
        lines.append(f"{idx}. {opp.name} (Score: {opp.score:.1f})")
        lines.append(f"   Category: {opp.category}")
        lines.append(
            f"   Demand: {s.demand:.1f} | Feasibility: {s.feasibility:.1f} | "
            f"Competition: {s.competition:.1f} | Trend: {s.trend:.1f}"
        )
        lines.append(f"   Sources: {_source_names(opp)}")
        lines.append("")

    return "\n".join(lines)


def format_report_markdown(
    opportunities: Sequence[Opportunity],
    generated_at:  datetime,
) -> str:
    """Markdown analysis report."""
    lines: list[str] = []
    lines.append("# NicheFinder Analysis Report")
    lines.append("")
    lines.append(f"**Analysis Date:** {generated_at:%Y-%m-%d %H:%M:%S} UTC")
    lines.append("")
    lines.append(f"**Opportunities:** {len(opportunities)}")
    lines.append("")
    lines.append("## Top Opportunities")
    lines.append("")

    for idx, opp in enumerate(opportunities, start=1):
        s = opp.scoring
        lines.append(f"### {idx}. {opp.name} (Score: {opp.score:.1f})")
        lines.append("")
        lines.append(f"**Category:** {opp.category}")
        lines.append("")
        lines.append("**Scoring Breakdown:**")
        lines.append(f"- Demand: {s.demand:.1f}")
        lines.append(f"- Feasibility: {s.feasibility:.1f}")
        lines.append(f"- Competition: {s.competition:.1f}")
        lines.append(f"- Trend: {s.trend:.1f}")
        lines.append("")
        lines.append(f"**Data Sources:** {_source_names(opp)}")
        lines.append("")
        lines.append("---")
        lines.append("")

    return "\n".join(lines)
