"""
Opportunity reader: loads an ``/api/opportunities`` response saved to disk.

Accepted shapes::

    {"opportunities": [ {...}, {...} ]}     # API response body
    [ {...}, {...} ]                         # bare list

Order is preserved exactly; the backend returns opportunities ranked by
score and the insight feed relies on that order.

``load_opportunities()`` returns ``None`` rather than raising when the file
is missing, so CLI commands can print a friendly "no data yet" message.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from nichefinder_intel.models.opportunity import Opportunity

logger = logging.getLogger(__name__)


def parse_opportunities(payload: Any) -> list[Opportunity]:
    """Validate a decoded API payload into ``Opportunity`` models.

    Raises:
        ValueError: If ``payload`` is neither a list nor an object with an
            ``opportunities`` list.
        pydantic.ValidationError: If a record is malformed.
    """
    if isinstance(payload, dict):
        records = payload.get("opportunities")
    else:
        records = payload

    if not isinstance(records, list):
        raise ValueError(
            "Expected a JSON array or an object with an 'opportunities' array."
        )
    return [Opportunity.model_validate(r) for r in records]


def load_opportunities(path: Path) -> list[Opportunity] | None:
    """Load opportunities from ``path``.

    Returns:
        Opportunities in file order, or ``None`` if the file does not exist.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Opportunities file not found: %s", path)
        return None

    payload = json.loads(path.read_text(encoding="utf-8"))
    opportunities = parse_opportunities(payload)
    logger.info("Loaded %d opportunit(ies) from %s", len(opportunities), path)
    return opportunities


def find_opportunity(
    opportunities: list[Opportunity],
    opportunity_id: str,
) -> Opportunity | None:
    """Return the opportunity with ``id == opportunity_id`` (exact match), else ``None``."""
    for opp in opportunities:
        if opp.id == opportunity_id:
            return opp
    return None
