"""Load risk category weights from YAML (with fallbacks to the defaults)."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .config import DEFAULT_RISK_WEIGHTS, RISK_CATEGORY_ORDER

logger = logging.getLogger(__name__)

WEIGHTS_FILENAME = "risk_weights.yaml"

_CACHE: dict[str, float] | None = None


def reset_cache() -> None:
    global _CACHE
    _CACHE = None


def load_risk_weights(base_path: str | Path | None = None) -> dict[str, float]:
    """Return category weights from ``risk_weights.yaml`` or the defaults.

    The file is expected to look like::

        weights:
          technical: 0.3
          dependency: 0.2
          ...

    All five categories must be present and numeric; otherwise the defaults
    are used. Weights need not sum to 1, the aggregator normalizes them.
    """
    global _CACHE
    if _CACHE is not None:
        return dict(_CACHE)
    base = Path(base_path or Path(__file__).resolve().parent.parent)
    yaml_path = base / WEIGHTS_FILENAME
    if not yaml_path.exists():
        _CACHE = dict(DEFAULT_RISK_WEIGHTS)
        return dict(_CACHE)
    try:
        data = yaml.safe_load(yaml_path.read_text()) or {}
        raw = data.get("weights") or {}
        weights = {name: float(raw[name]) for name in RISK_CATEGORY_ORDER}
        if any(w < 0 for w in weights.values()) or sum(weights.values()) <= 0:
            raise ValueError("weights must be non-negative with a positive sum")
        _CACHE = weights
    except (OSError, yaml.YAMLError, KeyError, TypeError, ValueError, AttributeError) as exc:
        logger.warning("Ignoring %s, using default risk weights: %s", yaml_path, exc)
        _CACHE = dict(DEFAULT_RISK_WEIGHTS)
    return dict(_CACHE)
