"""
Opportunity input models.

These mirror the JSON emitted by the NicheFinder backend's
``GET /api/opportunities`` endpoint, one ``Opportunity`` per ranked
integration candidate::

    {
      "id": "3f0c…",
      "name": "Zigbee2MQTT",
      "category": "zigbee2mqtt",
      "score": 78.4,
      "scoring_details": {"demand": 82.0, ..., "weights": {...}},
      "data_sources": [
        {"name": "GitHub", "source_type": "git_hub", "metadata": {"stars": 1200}},
        {"name": "YouTube", "source_type": {"other": "YouTube"}, "data_points": 3}
      ],
      "discovered_at": "2026-10-01T12:00:00Z",
      "metadata": {"topics": ["zigbee", "mqtt"]}
    }

All models are frozen; the intelligence engine only ever reads them.
Component scores are deliberately *not* range-validated: out-of-range values
flow through to the classifiers unchanged.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from nichefinder_intel.taxonomy.signal_taxonomy import SourceKind
from nichefinder_intel.utils.time_utils import utcnow


class ScoreWeights(BaseModel):
    """Weights used upstream for the composite score.  Display only."""

    model_config = ConfigDict(frozen=True)

    demand: float = 0.4
    feasibility: float = 0.3
    competition: float = 0.2
    trend: float = 0.1


class ScoringDetails(BaseModel):
    """Per-component scores (nominally 0–100) and the weighted composite.

    Attributes:
        demand:      User request volume and recency.
        feasibility: API availability / documentation quality.
        competition: Existing integrations (higher = more crowded).
        trend:       Growth trajectory.
        composite:   Weighted overall score.
        weights:     Weights that produced ``composite``.
    """

    model_config = ConfigDict(frozen=True)

    demand: float = 0.0
    feasibility: float = 0.0
    competition: float = 0.0
    trend: float = 0.0
    composite: float = 0.0
    weights: ScoreWeights = ScoreWeights()


class DataSource(BaseModel):
    """One upstream source that contributed evidence for an opportunity.

    ``source_type`` is an open set.  The externally tagged wrapper
    ``{"other": "YouTube"}`` is normalized to ``source_type="other"`` with
    ``source_label="YouTube"``.

    Metadata shape depends on the source:
      - ``git_hub``: ``stars``, ``forks``, ``open_issues``, ``pushed_at``, ``full_name``
      - ``hacs``:    ``domain``, ``downloads``
      - ``youtube`` / ``other``: ``match_type``, ``note``
    """

    model_config = ConfigDict(frozen=True)

    name: str
    source_type: str
    source_label: Optional[str] = None
    collected_at: datetime = Field(default_factory=utcnow)
    data_points: int = 0
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def unwrap_other_source_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and isinstance(data.get("source_type"), dict):
            wrapper = data["source_type"]
            label = next(iter(wrapper.values()), None) if wrapper else None
            data = {
                **data,
                "source_type": SourceKind.OTHER.value,
                "source_label": data.get("source_label") or (str(label) if label else None),
            }
        return data

    @field_validator("metadata", mode="before")
    @classmethod
    def null_metadata_to_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def kind(self) -> str:
        """Normalized lower-case source tag."""
        return self.source_type.strip().lower()

    def metric(self, key: str, default: float = 0) -> float:
        """Return a numeric metadata value, or ``default`` when absent or non-numeric."""
        value = self.metadata.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return value


class Opportunity(BaseModel):
    """A ranked integration opportunity produced by the upstream pipeline.

    Attributes:
        id:            Unique identifier (UUID string upstream).
        name:          Display name.
        category:      Free-form category slug, e.g. ``"smart_home_device"``.
        score:         Display rank score (composite as ranked upstream).
        scoring:       Component breakdown (JSON key ``scoring_details``).
        data_sources:  Contributing sources, in upstream order.
        discovered_at: When the opportunity was first identified.
        metadata:      Open-ended bag (``description``, ``topics``, …).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    category: str = ""
    score: float = 0.0
    scoring: ScoringDetails = Field(default_factory=ScoringDetails, alias="scoring_details")
    data_sources: list[DataSource] = Field(default_factory=list)
    discovered_at: datetime = Field(default_factory=utcnow)
    metadata: dict[str, Any] = Field(default_factory=dict)

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id_to_str(cls, v: Any) -> Any:
        return v if isinstance(v, str) else str(v)

    @field_validator("metadata", mode="before")
    @classmethod
    def null_metadata_to_empty(cls, v: Any) -> Any:
        return {} if v is None else v

    @property
    def display_category(self) -> str:
        """Category with underscores rendered as spaces."""
        return self.category.replace("_", " ")

    @property
    def description(self) -> str:
        """``metadata.description`` if it is a non-empty string, else ``""``."""
        value = self.metadata.get("description")
        return value.strip() if isinstance(value, str) else ""

    @property
    def topics(self) -> list[str]:
        """String entries of ``metadata.topics`` (empty when missing or malformed)."""
        value = self.metadata.get("topics")
        if not isinstance(value, list):
            return []
        return [t for t in value if isinstance(t, str) and t]

    def find_source(self, *kinds: str) -> Optional[DataSource]:
        """Return the first data source whose kind is one of ``kinds``."""
        wanted = {k.lower() for k in kinds}
        for source in self.data_sources:
            if source.kind in wanted:
                return source
        return None

    def source_metric(self, kind: str, key: str, default: float = 0) -> float:
        """Numeric metadata value from the first source of ``kind``, or ``default``."""
        source = self.find_source(kind)
        if source is None:
            return default
        return source.metric(key, default)

    def github_metric(self, key: str, default: float = 0) -> float:
        """Shortcut for ``source_metric("git_hub", key)`` (stars, open_issues, …)."""
        return self.source_metric(SourceKind.GITHUB, key, default)
