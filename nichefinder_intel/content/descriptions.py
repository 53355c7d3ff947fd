"""
Integration description table loader.

The table maps an integration key (lower-cased category slug or product
name) to a canned one-sentence description.  It is editorial content kept in
``config/integration_descriptions.json`` and loaded once at startup; the
summary generator receives it as a plain mapping.

JSON shape: a single object, order significant (first match wins)::

    {
      "zigbee2mqtt": "Bridges Zigbee devices to Home Assistant over MQTT…",
      "philips hue": "Local control of Philips Hue lights…"
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def load_descriptions(path: Path) -> dict[str, str]:
    """Load the description table, lower-casing keys and preserving order.

    Args:
        path: JSON file location.

    Returns:
        Ordered key → description mapping.  Empty if the file does not exist.

    Raises:
        ValueError: If the JSON is not an object of string values.
    """
    path = Path(path)
    if not path.exists():
        logger.warning("Description table not found: %s (catalog summaries fall back to topics)", path)
        return {}

    raw = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError(f"Description table must be a JSON object, got {type(raw).__name__}.")

    table: dict[str, str] = {}
    for key, text in raw.items():
        if not isinstance(text, str) or not text.strip():
            raise ValueError(f"Description for '{key}' must be a non-empty string.")
        normalized = key.strip().lower()
        if normalized and normalized not in table:
            table[normalized] = text.strip()

    logger.info("Loaded %d integration description(s) from %s", len(table), path)
    return table
