"""
Signal and insight taxonomy for opportunity intelligence.

Three ordinal levels are derived from the 0–100 component scores, each using
the same two-tier cut (>= 70 top tier, >= 40 middle tier, below that bottom):

  ``DemandLevel``        keyed on ``scoring.demand``
  ``MomentumLevel``      keyed on ``scoring.trend``
  ``BuildabilityLevel``  keyed on ``scoring.feasibility``

``InsightType`` is the closed set of narrative-feed tags.  ``SourceKind`` is
the *open* set of upstream data-source tags; unknown values are carried as
plain strings, so members here are only the values the engine reacts to.

This module has NO imports from any other ``nichefinder_intel`` package.
"""

from enum import StrEnum


class DemandLevel(StrEnum):
    """Ordinal demand classification."""

    HIGH = "High"
    MED = "Med"
    LOW = "Low"


class MomentumLevel(StrEnum):
    """Direction of the trend signal."""

    RISING = "Rising"
    STABLE = "Stable"
    FADING = "Fading"


class BuildabilityLevel(StrEnum):
    """How approachable the integration is for a single developer."""

    SOLO_FRIENDLY = "Solo-friendly"
    COMPLEX = "Complex"
    HARD = "Hard"


class InsightType(StrEnum):
    """Narrative feed tag.  Drives styling in the dashboard."""

    HOT = "hot"
    RISING = "rising"
    WARNING = "warning"
    INFO = "info"


class SourceKind(StrEnum):
    """Data-source tags emitted by the upstream pipeline (snake_case)."""

    HACS = "hacs"
    GITHUB = "git_hub"
    YOUTUBE = "youtube"
    REDDIT = "reddit"
    OTHER = "other"
    """Externally tagged wrapper ``{"other": "<label>"}`` for unrecognized sources."""


class SummaryMode(StrEnum):
    """Summary generation strategy.

    The two strategies are not output-compatible; exactly one is active.
    """

    CATALOG = "catalog"
    """Lookup-table chain: category, name substring, topics, name."""

    SIGNALS = "signals"
    """Description plus activity / popularity / attention markers."""


MOMENTUM_GLYPHS: dict[MomentumLevel, str] = {
    MomentumLevel.RISING: "↗",
    MomentumLevel.STABLE: "→",
    MomentumLevel.FADING: "↘",
}
