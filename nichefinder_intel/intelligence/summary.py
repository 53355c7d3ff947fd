"""
Summary generator: one-paragraph description of an opportunity.

Two strategies exist and they are NOT output-compatible; callers pick one
via ``SummaryMode`` (config: ``intelligence.summary_mode``).

CATALOG (default)
-----------------
Ordered fallback chain, first match wins:

  1. Exact match of ``category.lower()`` against the description table.
  2. Substring match, in table order: the lower-cased name contains a key,
     or a key (spaces → underscores) contains the lower-cased name.
  3. ``metadata.topics`` present:
     ``"Home Assistant integration for {first 3 topics, '-' → ' '}."``
  4. ``"Home Assistant integration for {name}."``

The description table is content, not logic.  It is injected by the caller
(see ``nichefinder_intel.content.descriptions``); with no table, steps 1–2
never match.

SIGNALS
-------
``metadata.description`` (or the name), followed by any of:

  "Active recently"      GitHub ``pushed_at`` within ``recent_activity_days``
  "Popular"              GitHub stars > 500  OR  HACS downloads > 1000
  "Community attention"  a YouTube / other source with ``data_points > 0``

Parts are joined with ``". "`` and the result ends with a period.
"""

from __future__ import annotations

from datetime import datetime
from typing import Mapping, Optional

from nichefinder_intel.models.opportunity import Opportunity
from nichefinder_intel.taxonomy.signal_taxonomy import SourceKind, SummaryMode
from nichefinder_intel.utils.time_utils import days_since

_TOPIC_LIMIT = 3
_POPULAR_STARS = 500
_POPULAR_DOWNLOADS = 1000
DEFAULT_RECENT_ACTIVITY_DAYS = 90


def summarize(
    opportunity:          Opportunity,
    descriptions:         Mapping[str, str] | None = None,
    mode:                 SummaryMode | str = SummaryMode.CATALOG,
    now:                  Optional[datetime] = None,
    recent_activity_days: int = DEFAULT_RECENT_ACTIVITY_DAYS,
) -> str:
    """Return a non-empty summary sentence for ``opportunity``.

    Args:
        opportunity:          Record to describe.
        descriptions:         Lower-cased key → canned sentence (CATALOG mode).
        mode:                 Which strategy to use.
        now:                  Reference time for recency (SIGNALS mode).
        recent_activity_days: Recency window for "Active recently".

    Returns:
        Summary text.  Never raises for missing metadata.
    """
    if SummaryMode(mode) is SummaryMode.SIGNALS:
        return summarize_from_signals(opportunity, now=now, recent_activity_days=recent_activity_days)
    return summarize_from_catalog(opportunity, descriptions or {})


def summarize_from_catalog(
    opportunity:  Opportunity,
    descriptions: Mapping[str, str],
) -> str:
    category = opportunity.category.lower()
    if category in descriptions:
        return descriptions[category]

    matched = match_description(opportunity.name, descriptions)
    if matched is not None:
        return matched

    topics = opportunity.topics[:_TOPIC_LIMIT]
    if topics:
        readable = ", ".join(t.replace("-", " ") for t in topics)
        return f"Home Assistant integration for {readable}."

    return f"Home Assistant integration for {opportunity.name}."


def match_description(name: str, descriptions: Mapping[str, str]) -> Optional[str]:
    """Return the first table entry whose key overlaps ``name``, or ``None``.

    A key matches when the lower-cased name contains it, or when the key
    (with spaces replaced by underscores) contains the lower-cased name.
    Table iteration order is the tie-break.  Empty names and keys never match.
    """
    needle = name.lower().strip()
    if not needle:
        return None
    for key, text in descriptions.items():
        if not key:
            continue
        if key in needle or needle in key.replace(" ", "_"):
            return text
    return None


def summarize_from_signals(
    opportunity:          Opportunity,
    now:                  Optional[datetime] = None,
    recent_activity_days: int = DEFAULT_RECENT_ACTIVITY_DAYS,
) -> str:
    parts: list[str] = [opportunity.description or opportunity.name]

    github = opportunity.find_source(SourceKind.GITHUB)
    if github is not None and github.metadata.get("pushed_at"):
        if days_since(github.metadata["pushed_at"], now=now) <= recent_activity_days:
            parts.append("Active recently")

    stars = opportunity.github_metric("stars")
    downloads = opportunity.source_metric(SourceKind.HACS, "downloads")
    if stars > _POPULAR_STARS or downloads > _POPULAR_DOWNLOADS:
        parts.append("Popular")

    attention = opportunity.find_source(SourceKind.YOUTUBE, SourceKind.OTHER)
    if attention is not None and attention.data_points > 0:
        parts.append("Community attention")

    cleaned = [p.strip().rstrip(".") for p in parts if p and p.strip().rstrip(".")]
    return ". ".join(cleaned) + "."
