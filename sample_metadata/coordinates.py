"""
Geographic coordinate resolution.

Coordinates show up either as one combined latitude/longitude value or as
two separate attributes. Both decimal degrees and degrees-minutes-seconds
(DMS) are understood; results are signed decimal degrees where south and
west are negative.

Supported spellings:

``41º40,13.5''N 2º48'00.6''E``
    Combined DMS pair. Each half is rounded to five decimal places.
``38.98 N 77.11 W`` / ``41.67, 2.80``
    Combined decimal pair.
``41.67042`` / ``-2.8`` / ``N 41.67`` / ``41°40'13.5''N``
    Single axis, decimal or DMS.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple, Union

logger = logging.getLogger(__name__)

# Marks are matched literally, never as regex syntax
DEGREE_SIGNS = "°º˚"
MINUTE_MARKS = "'′’´"
SECOND_MARKS = ("''", "’’", "′′", "´´", "″", '"')

_DEG = "[" + re.escape(DEGREE_SIGNS) + "]"
_MIN = "[" + re.escape(MINUTE_MARKS) + ",]"
_SEC = "(?:" + "|".join(re.escape(s) for s in SECOND_MARKS) + ")"


@dataclass(frozen=True)
class Axis:
    """Hemisphere letters and magnitude limit of one coordinate axis."""

    name: str
    hemispheres: str
    negative: str
    limit: float


LATITUDE = Axis("latitude", "NS", "S", 90.0)
LONGITUDE = Axis("longitude", "EW", "W", 180.0)


def _dms(prefix: str, axis: Axis) -> str:
    return (
        rf"(?P<{prefix}sign>[-+])?(?P<{prefix}deg>\d{{1,3}})\s*{_DEG}\s*"
        rf"(?P<{prefix}min>\d{{1,2}}(?:\.\d+)?)\s*{_MIN}?"
        rf"(?:\s*(?P<{prefix}sec>\d{{1,2}}(?:\.\d+)?)\s*{_SEC}?)?"
        rf"\s*(?P<{prefix}hemi>[{axis.hemispheres}])?"
    )


def _decimal(prefix: str, axis: Axis) -> str:
    return (
        rf"(?P<{prefix}pre>[{axis.hemispheres}])?\s*"
        rf"(?P<{prefix}sign>[-+])?(?P<{prefix}num>\d{{1,3}}(?:\.\d+)?)\s*{_DEG}?"
        rf"\s*(?P<{prefix}post>[{axis.hemispheres}])?"
    )


DMS_PAIR = re.compile(
    _dms("lat_", LATITUDE) + r"\s*[,;/]?\s*" + _dms("lon_", LONGITUDE),
    re.IGNORECASE,
)
DECIMAL_PAIR = re.compile(
    _decimal("lat_", LATITUDE) + r"(?:\s*[,;/]\s*|\s+)" + _decimal("lon_", LONGITUDE),
    re.IGNORECASE,
)
_SINGLE = {
    axis.name: (
        re.compile(_decimal("", axis), re.IGNORECASE),
        re.compile(_dms("", axis), re.IGNORECASE),
    )
    for axis in (LATITUDE, LONGITUDE)
}


def dms_to_decimal(degrees: float, minutes: float, seconds: float = 0.0) -> float:
    """Convert an unsigned DMS angle to decimal degrees rounded to 5 places."""

    return round(degrees + minutes / 60 + seconds / 3600, 5)


def _signed(magnitude: float, sign: Optional[str], hemi: Optional[str], axis: Axis) -> Optional[float]:
    hemi = hemi.upper() if hemi else None
    if sign == "-" and hemi:
        return None
    value = -magnitude if sign == "-" or hemi == axis.negative else magnitude
    if abs(value) > axis.limit:
        return None
    return value


def _from_dms(m: re.Match[str], prefix: str, axis: Axis) -> Optional[float]:
    minutes = float(m[prefix + "min"])
    seconds = float(m[prefix + "sec"] or 0)
    if minutes >= 60 or seconds >= 60:
        return None
    magnitude = dms_to_decimal(int(m[prefix + "deg"]), minutes, seconds)
    return _signed(magnitude, m[prefix + "sign"], m[prefix + "hemi"], axis)


def _from_decimal(m: re.Match[str], prefix: str, axis: Axis) -> Optional[float]:
    pre, post = m[prefix + "pre"], m[prefix + "post"]
    if pre and post:
        return None
    return _signed(float(m[prefix + "num"]), m[prefix + "sign"], pre or post, axis)


def _pair(m: re.Match[str], convert) -> Optional[Tuple[float, float]]:
    lat = convert(m, "lat_", LATITUDE)
    lon = convert(m, "lon_", LONGITUDE)
    if lat is None or lon is None:
        return None
    return (lat, lon)


def parse_lat_lon(value: str) -> Optional[Tuple[float, float]]:
    """Return ``(latitude, longitude)`` from a combined value or ``None``.

    Both halves must parse; a half-readable pair is never returned.
    """

    text = value.strip() if value else ""
    if text:
        m = DMS_PAIR.fullmatch(text)
        if m:
            pair = _pair(m, _from_dms)
            if pair is not None:
                return pair
        m = DECIMAL_PAIR.fullmatch(text)
        if m:
            pair = _pair(m, _from_decimal)
            if pair is not None:
                return pair
    logger.debug("no lat/lon extracted from %r", value)
    return None


def _parse_axis(value: str, axis: Axis) -> Optional[float]:
    text = value.strip() if value else ""
    if text:
        decimal, dms = _SINGLE[axis.name]
        m = decimal.fullmatch(text)
        if m:
            return _from_decimal(m, "", axis)
        m = dms.fullmatch(text)
        if m:
            return _from_dms(m, "", axis)
    logger.debug("no %s extracted from %r", axis.name, value)
    return None


def parse_latitude(value: str) -> Optional[float]:
    """Return a signed decimal latitude or ``None``."""

    return _parse_axis(value, LATITUDE)


def parse_longitude(value: str) -> Optional[float]:
    """Return a signed decimal longitude or ``None``."""

    return _parse_axis(value, LONGITUDE)


def parse_coordinate(value: str) -> Union[Tuple[float, float], float, None]:
    """Resolve ``value`` without knowing which encoding it uses.

    A combined pair is preferred, then a latitude, then a longitude.
    """

    pair = parse_lat_lon(value)
    if pair is not None:
        return pair
    lat = parse_latitude(value)
    if lat is not None:
        return lat
    return parse_longitude(value)


__all__ = [
    "Axis",
    "LATITUDE",
    "LONGITUDE",
    "dms_to_decimal",
    "parse_coordinate",
    "parse_lat_lon",
    "parse_latitude",
    "parse_longitude",
]
