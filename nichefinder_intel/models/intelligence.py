"""
Derived intelligence output models.

``Insight`` is one entry of the narrative feed shown under the KPI ribbon.
``CommandCenterKPIs`` is the four-number ribbon itself.

Both are frozen and recomputed from scratch on every call; nothing here is
cached between derivations.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

from nichefinder_intel.models.opportunity import Opportunity
from nichefinder_intel.taxonomy.signal_taxonomy import InsightType


class Insight(BaseModel):
    """A typed, icon-tagged narrative line about one opportunity.

    Attributes:
        id:             ``insight-<opportunity_id>-<kind>``.
        icon:           Emoji shown beside the text.
        text:           Sentence with the opportunity name as its subject.
        opportunity_id: Back-reference to the source ``Opportunity.id``.
        type:           Feed tag: hot, rising, warning or info.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    icon: str
    text: str
    opportunity_id: str
    type: InsightType


class CommandCenterKPIs(BaseModel):
    """Cross-opportunity summary statistics.

    Attributes:
        total_opportunities: Number of records in the collection.
        avg_demand_score:    Mean ``scoring.demand`` over all records (0 when empty).
        trending_count:      Records with ``scoring.trend >= 70``.
        highest:             Record with the strictly largest ``score``
                             (first seen wins ties), or ``None`` when empty.
    """

    model_config = ConfigDict(frozen=True)

    total_opportunities: int = 0
    avg_demand_score: float = 0.0
    trending_count: int = 0
    highest: Optional[Opportunity] = None

    @property
    def highest_name(self) -> str:
        return self.highest.name if self.highest is not None else "N/A"
