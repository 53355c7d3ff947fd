"""
Builder action paths shown on the drawer's Actions tab.

Always three paths in fixed order.  Two descriptions react to GitHub
metadata (missing values count as 0):

  Contribute / Maintain   open_issues > 10  → cites the open-issue count
  Differentiate / Extend  static
  Monetize                stars > 500       → "Significant user base…"
"""

from __future__ import annotations

from dataclasses import dataclass

from nichefinder_intel.models.opportunity import Opportunity

_MAINTENANCE_ISSUES = 10
_MONETIZABLE_STARS = 500


@dataclass(frozen=True)
class ActionPath:
    """A suggested path forward with ordered steps."""

    title:       str
    description: str
    steps:       tuple[str, ...]


def suggest_actions(opportunity: Opportunity) -> list[ActionPath]:
    """Return the three builder action paths for ``opportunity``."""
    open_issues = opportunity.github_metric("open_issues")
    stars = opportunity.github_metric("stars")

    return [
        ActionPath(
            title="Contribute / Maintain",
            description=(
                f"{open_issues:.0f} open issues suggest maintenance opportunities"
                if open_issues > _MAINTENANCE_ISSUES
                else "Stable project with room for enhancements"
            ),
            steps=(
                "Review open issues and PRs",
                "Identify quick wins or documentation gaps",
                "Submit quality contributions to build reputation",
            ),
        ),
        ActionPath(
            title="Differentiate / Extend",
            description="Build complementary tools or enhanced versions",
            steps=(
                "Analyze feature gaps in existing solution",
                "Survey user feedback and feature requests",
                "Build focused extension or alternative approach",
            ),
        ),
        ActionPath(
            title="Monetize",
            description=(
                "Significant user base suggests monetization potential"
                if stars > _MONETIZABLE_STARS
                else "Niche opportunity for specialized services"
            ),
            steps=(
                "Offer premium support or consulting",
                "Create training content or courses",
                "Build SaaS wrapper for non-technical users",
            ),
        ),
    ]
