"""
Data model for normalized sample metadata.

Attributes arrive from the document extractor as free text; the resolvers
turn a small number of them into typed values collected on a
:class:`SampleRecord`. All models are immutable and built fresh for every
document.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, FiniteFloat


class TagClass(str, Enum):
    """Semantic class of an attribute tag, in classification priority order."""

    DATE = "date"
    DEPTH = "depth"
    LAT_LON = "lat_lon"
    LATITUDE = "latitude"
    LONGITUDE = "longitude"
    UNCLASSIFIED = "unclassified"


class Attribute(BaseModel):
    """One ``(tag, value, unit)`` field of a sample document."""

    model_config = ConfigDict(frozen=True)

    tag: str
    value: str
    unit: Optional[str] = None


class ResolvedDate(BaseModel):
    """A date candidate found in an attribute value.

    ``tag_confidence`` is true when the attribute tag is itself a known
    date tag, i.e. both tag and value say "this is a date".
    """

    model_config = ConfigDict(frozen=True)

    source_tag: str
    timestamp: datetime
    tag_confidence: bool


class SampleDocument(BaseModel):
    """Raw output of the document extractor for one sample."""

    model_config = ConfigDict(frozen=True)

    primary_id: str
    runs: Tuple[str, ...] = ()
    attributes: Tuple[Attribute, ...] = ()


class SampleRecord(BaseModel):
    """Normalized metadata for one sample.

    ``primary_id`` and ``runs`` are passed through untouched. ``dates``
    holds every date candidate in attribute order; depth and coordinates
    hold the first successful result of their class.
    """

    model_config = ConfigDict(frozen=True)

    primary_id: str
    runs: Tuple[str, ...] = ()
    dates: Tuple[ResolvedDate, ...] = ()
    depth: Optional[FiniteFloat] = None
    lat_lon: Optional[Tuple[FiniteFloat, FiniteFloat]] = None
    latitude: Optional[FiniteFloat] = None
    longitude: Optional[FiniteFloat] = None

    @property
    def coordinates(self) -> Optional[Tuple[float, float]]:
        """Return ``(latitude, longitude)`` from whichever encoding was found."""

        if self.lat_lon is not None:
            return self.lat_lon
        if self.latitude is not None and self.longitude is not None:
            return (self.latitude, self.longitude)
        return None

    def preferred_dates(self) -> List[ResolvedDate]:
        """Return tag-confident date candidates, or all of them if none are."""

        confident = [d for d in self.dates if d.tag_confidence]
        return confident or list(self.dates)


__all__ = [
    "Attribute",
    "ResolvedDate",
    "SampleDocument",
    "SampleRecord",
    "TagClass",
]
