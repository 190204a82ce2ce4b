"""Sampling depth resolution to meters."""

from __future__ import annotations

import logging
import math
import re
from typing import Optional, Tuple

logger = logging.getLogger(__name__)

DEPTH_PATTERNS: Tuple[re.Pattern[str], ...] = (
    # 5, 5., 5.0, 5 m, 5cm
    re.compile(r"(?P<num>\d+(?:\.\d*)?)\s*(?P<unit>\w+)?"),
    # .5, 0.5 meter
    re.compile(r"(?P<num>\d*\.\d+)\s*(?P<unit>\w+)?"),
)

# m, meter(s) with an optional centi/milli prefix
UNIT_PATTERN = re.compile(r"(?P<prefix>c(?:enti)?|m(?:illi)?)?m(?:eters?)?", re.IGNORECASE)

PREFIX_MULTIPLIERS = {
    "c": 0.01,
    "centi": 0.01,
    "m": 0.001,
    "milli": 0.001,
}


def unit_multiplier(unit: Optional[str]) -> float:
    """Return the factor converting ``unit`` to meters.

    Unknown units and a missing unit count as meters.
    """

    if not unit:
        return 1.0
    m = UNIT_PATTERN.fullmatch(unit.strip())
    if not m or not m["prefix"]:
        return 1.0
    return PREFIX_MULTIPLIERS.get(m["prefix"].lower(), 1.0)


def parse_depth(value: str, unit: Optional[str] = None) -> Optional[float]:
    """Return the depth in meters encoded by ``value`` or ``None``.

    Args:
        value: Raw depth text such as ``"5 m"`` or ``".5 meter"``
        unit: Separately recorded unit, used when ``value`` carries none

    Returns:
        Depth in meters, or None if the value is not a number
    """

    text = value.strip() if value else ""
    for pattern in DEPTH_PATTERNS:
        m = pattern.fullmatch(text)
        if not m:
            continue
        try:
            number = float(m["num"])
        except ValueError:
            continue
        if not math.isfinite(number):
            continue
        return number * unit_multiplier(m["unit"] or unit)

    logger.debug("no depth extracted from %r", value)
    return None


__all__ = ["DEPTH_PATTERNS", "UNIT_PATTERN", "parse_depth", "unit_multiplier"]
