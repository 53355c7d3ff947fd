"""
Builder Q&A: a fixed six-question report for one opportunity.

Order is part of the contract (the drawer renders them as an accordion):

  1. What user pain does this solve?   integration description
  2. Is momentum rising or fading?     MomentumLevel from trend
  3. Can I build this solo?            BuildabilityLevel from feasibility
  4. Is this a niche or mass market?   GitHub stars > 1000 → "Mass market"
  5. What's the upside?                display score + component inputs
  6. What's the risk?                  GitHub open_issues > 20 → "High maintenance burden"

Missing GitHub metadata counts as 0 stars / 0 open issues.
"""

from __future__ import annotations

from dataclasses import dataclass

from nichefinder_intel.intelligence.signals import buildability_level, momentum_level
from nichefinder_intel.models.opportunity import Opportunity

MASS_MARKET_STARS = 1000
HIGH_MAINTENANCE_ISSUES = 20


@dataclass(frozen=True)
class BuilderQuestion:
    """One question / answer / justification triple."""

    question: str
    answer:   str
    why:      str


def builder_questions(opportunity: Opportunity) -> list[BuilderQuestion]:
    """Return exactly six builder questions in fixed order."""
    scoring = opportunity.scoring
    stars = opportunity.github_metric("stars")
    open_issues = opportunity.github_metric("open_issues")
    mass_market = stars > MASS_MARKET_STARS

    return [
        BuilderQuestion(
            question="What user pain does this solve?",
            answer=f"Integration for {opportunity.name} in Home Assistant ecosystem",
            why=f"Based on {_count(stars)} GitHub stars and community interest",
        ),
        BuilderQuestion(
            question="Is momentum rising or fading?",
            answer=momentum_level(scoring.trend).value,
            why=f"Trend score: {scoring.trend:.1f}/100",
        ),
        BuilderQuestion(
            question="Can I build this solo?",
            answer=buildability_level(scoring.feasibility).value,
            why=f"Feasibility score: {scoring.feasibility:.1f}/100",
        ),
        BuilderQuestion(
            question="Is this a niche or mass market?",
            answer="Mass market" if mass_market else "Niche",
            why=f"{_count(stars)} stars indicates {'broad' if mass_market else 'focused'} appeal",
        ),
        BuilderQuestion(
            question="What's the upside?",
            answer=f"Score: {opportunity.score:.1f}/100",
            why=(
                f"Composite of demand ({scoring.demand:.1f}), "
                f"feasibility ({scoring.feasibility:.1f}), "
                f"competition ({scoring.competition:.1f})"
            ),
        ),
        BuilderQuestion(
            question="What's the risk?",
            answer=(
                "High maintenance burden"
                if open_issues > HIGH_MAINTENANCE_ISSUES
                else "Manageable"
            ),
            why=f"{_count(open_issues)} open issues",
        ),
    ]


def _count(value: float) -> str:
    # Upstream counts are integers; render 1200.0 as "1200".
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.1f}"
