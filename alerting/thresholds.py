"""
Threshold extraction from a graph panel's grid settings.

Grafana stores alert boundaries as `threshold1`, `threshold2`, ... keys in the
panel grid, next to unrelated keys such as `threshold1Color` or `leftMax`.
"""

import logging
import math
import re
from typing import Any, List, Mapping, Optional

logger = logging.getLogger(__name__)

THRESHOLD_KEY = re.compile(r"threshold\d+$")


def _as_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if math.isfinite(number) else None


def extract_thresholds(grid: Mapping[str, Any]) -> List[float]:
    """
    Return every numeric threshold in the grid, in key discovery order.

    Keys must end in `threshold<digits>`; null and non-numeric values are
    skipped. Position in the result says nothing about the key's suffix.
    """
    if not isinstance(grid, Mapping):
        return []

    thresholds: List[float] = []
    for key, value in grid.items():
        if not isinstance(key, str) or not THRESHOLD_KEY.search(key):
            continue
        number = _as_number(value)
        if number is None:
            if value is not None:
                logger.debug(f"Skipping non-numeric {key}={value!r}")
            continue
        thresholds.append(number)
    return thresholds
