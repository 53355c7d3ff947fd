"""
Export helpers for derived intelligence.

All writers create parent directories and return the written ``Path``.

``build_intelligence_payload()`` is the JSON shape written by the
``export`` command: KPI ribbon, insight feed and one brief per opportunity.
``flatten_opportunities_for_export()`` produces one flat row per
opportunity (scores plus classification levels) for spreadsheet use.
"""

from __future__ import annotations

import csv
import json
import logging
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any, Sequence

from nichefinder_intel.intelligence.brief import CommandCenterView, OpportunityBrief
from nichefinder_intel.intelligence.reasons import ranking_reasons
from nichefinder_intel.intelligence.signals import classify
from nichefinder_intel.models.opportunity import Opportunity

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "v1"

FLAT_FIELDNAMES: list[str] = [
    "rank", "id", "name", "category", "score",
    "demand", "feasibility", "competition", "trend", "composite",
    "demand_level", "momentum_level", "buildability_level",
    "sources", "reasons",
]


def export_to_csv(
    records: list[dict],
    path: Path,
    fieldnames: list[str] | None = None,
) -> Path:
    """Write ``records`` to a UTF-8 CSV file.

    Args:
        records:    List of row dicts.
        path:       Destination file path (parent dirs created if missing).
        fieldnames: Column order.  If None, uses the keys of the first record.

    Returns:
        ``path`` as written.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    if not records:
        path.write_text("", encoding="utf-8")
        return path
    cols = fieldnames or list(records[0].keys())
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(records)
    logger.info("CSV written: %s (%d rows)", path, len(records))
    return path


def export_to_json(data: dict | list, path: Path) -> Path:
    """Write ``data`` to a pretty-printed UTF-8 JSON file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(data, indent=2, default=str, ensure_ascii=False),
        encoding="utf-8",
    )
    logger.info("JSON written: %s", path)
    return path


def brief_to_dict(brief: OpportunityBrief) -> dict[str, Any]:
    """Serialise a brief; the opportunity is referenced by id and name only."""
    return {
        "opportunity_id": brief.opportunity.id,
        "name":           brief.opportunity.name,
        "summary":        brief.summary,
        "signals": {
            "demand":       brief.signals.demand.value,
            "momentum":     brief.signals.momentum.value,
            "buildability": brief.signals.buildability.value,
        },
        "reasons":   list(brief.reasons),
        "questions": [asdict(q) for q in brief.questions],
        "actions":   [
            {"title": a.title, "description": a.description, "steps": list(a.steps)}
            for a in brief.actions
        ],
        "insight_ids": [i.id for i in brief.insights],
    }


def build_intelligence_payload(
    view:         CommandCenterView,
    briefs:       Sequence[OpportunityBrief],
    generated_at: datetime,
) -> dict[str, Any]:
    """Assemble the JSON document written by the ``export`` command."""
    kpis = view.kpis
    return {
        "schema_version": SCHEMA_VERSION,
        "generated_at":   generated_at.isoformat(),
        "kpis": {
            "total_opportunities": kpis.total_opportunities,
            "avg_demand_score":    round(kpis.avg_demand_score, 2),
            "trending_count":      kpis.trending_count,
            "highest": (
                {"id": kpis.highest.id, "name": kpis.highest.name, "score": kpis.highest.score}
                if kpis.highest is not None else None
            ),
        },
        "insights": [i.model_dump(mode="json") for i in view.insights],
        "opportunities": [brief_to_dict(b) for b in briefs],
    }


def flatten_opportunities_for_export(
    opportunities: Sequence[Opportunity],
) -> list[dict[str, Any]]:
    """One flat row per opportunity, in input (rank) order.

    Multi-valued fields (``sources``, ``reasons``) are joined with ``"; "``.
    """
    rows: list[dict[str, Any]] = []
    for rank, opp in enumerate(opportunities, start=1):
        s = opp.scoring
        signals = classify(s)
        rows.append(
            {
                "rank":               rank,
                "id":                 opp.id,
                "name":               opp.name,
                "category":           opp.category,
                "score":              opp.score,
                "demand":             s.demand,
                "feasibility":        s.feasibility,
                "competition":        s.competition,
                "trend":              s.trend,
                "composite":          s.composite,
                "demand_level":       signals.demand.value,
                "momentum_level":     signals.momentum.value,
                "buildability_level": signals.buildability.value,
                "sources":            "; ".join(src.name for src in opp.data_sources),
                "reasons":            "; ".join(ranking_reasons(opp)),
            }
        )
    return rows
