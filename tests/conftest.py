"""
Shared pytest fixtures for the NicheFinder intelligence test suite.

Provides:
  - ``make_opportunity``: factory fixture building an ``Opportunity`` from
    component scores plus optional GitHub / HACS / YouTube sources.
  - ``sample_opportunity``: a fully populated record shaped like the
    backend's ``/api/opportunities`` output.
  - ``sample_descriptions``: a small ordered description table.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable, Optional

import pytest

from nichefinder_intel.models.opportunity import DataSource, Opportunity, ScoringDetails

FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0, tzinfo=timezone.utc)


def _build_opportunity(
    name: str = "Test Integration",
    *,
    opp_id: Optional[str] = None,
    category: str = "test_integration",
    score: Optional[float] = None,
    demand: float = 50.0,
    feasibility: float = 50.0,
    competition: float = 50.0,
    trend: float = 50.0,
    composite: Optional[float] = None,
    github: Optional[dict[str, Any]] = None,
    hacs: Optional[dict[str, Any]] = None,
    youtube_points: Optional[int] = None,
    metadata: Optional[dict[str, Any]] = None,
) -> Opportunity:
    sources: list[DataSource] = []
    if hacs is not None:
        sources.append(
            DataSource(name="HACS", source_type="hacs", collected_at=FIXED_NOW,
                       data_points=1, metadata=hacs)
        )
    if github is not None:
        sources.append(
            DataSource(name="GitHub", source_type="git_hub", collected_at=FIXED_NOW,
                       data_points=1, metadata=github)
        )
    if youtube_points is not None:
        sources.append(
            DataSource.model_validate(
                {
                    "name": "YouTube",
                    "source_type": {"other": "YouTube"},
                    "collected_at": FIXED_NOW,
                    "data_points": youtube_points,
                    "metadata": {"match_type": "exact" if youtube_points else "general"},
                }
            )
        )

    comp = composite if composite is not None else (
        demand * 0.4 + feasibility * 0.3 + competition * 0.2 + trend * 0.1
    )
    return Opportunity(
        id=opp_id or name.lower().replace(" ", "-"),
        name=name,
        category=category,
        score=score if score is not None else comp,
        scoring=ScoringDetails(
            demand=demand,
            feasibility=feasibility,
            competition=competition,
            trend=trend,
            composite=comp,
        ),
        data_sources=sources,
        discovered_at=FIXED_NOW,
        metadata=metadata or {},
    )


@pytest.fixture
def make_opportunity() -> Callable[..., Opportunity]:
    """Factory: ``make_opportunity("Foo", demand=85, trend=80, github={...})``."""
    return _build_opportunity


@pytest.fixture
def sample_opportunity() -> Opportunity:
    """A realistic record in the backend's wire shape."""
    return Opportunity.model_validate(
        {
            "id": "6a1c0c3e-2f7b-4e43-9d62-0d2d7c1b9a10",
            "name": "Zigbee2MQTT",
            "category": "zigbee2mqtt",
            "score": 78.4,
            "scoring_details": {
                "demand": 82.0,
                "feasibility": 75.0,
                "competition": 30.0,
                "trend": 71.0,
                "composite": 78.4,
                "weights": {"demand": 0.4, "feasibility": 0.3, "competition": 0.2, "trend": 0.1},
            },
            "data_sources": [
                {
                    "name": "HACS",
                    "source_type": "hacs",
                    "collected_at": "2026-10-18T08:00:00Z",
                    "data_points": 1,
                    "metadata": {"domain": "zigbee2mqtt", "downloads": 5400},
                },
                {
                    "name": "GitHub",
                    "source_type": "git_hub",
                    "collected_at": "2026-10-18T08:00:00Z",
                    "data_points": 1,
                    "metadata": {
                        "full_name": "Koenkk/zigbee2mqtt",
                        "stars": 1200,
                        "forks": 300,
                        "open_issues": 25,
                        "pushed_at": "2026-10-01T10:00:00Z",
                    },
                },
                {
                    "name": "YouTube",
                    "source_type": {"other": "YouTube"},
                    "collected_at": "2026-10-18T08:00:00Z",
                    "data_points": 4,
                    "metadata": {"match_type": "exact", "video_ids": ["a", "b", "c", "d"]},
                },
            ],
            "discovered_at": "2026-10-18T08:05:00Z",
            "metadata": {
                "description": "Zigbee to MQTT bridge",
                "topics": ["zigbee", "mqtt", "home-automation", "iot"],
            },
        }
    )


@pytest.fixture
def sample_descriptions() -> dict[str, str]:
    """Ordered description table (keys already lower-cased)."""
    return {
        "zigbee2mqtt": "Bridges Zigbee devices over MQTT.",
        "philips hue": "Local control of Hue lights.",
        "hue": "Generic Hue description.",
        "sonos": "Sonos speaker control.",
    }
