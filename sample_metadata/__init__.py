"""
Sample metadata normalization.

Classifies attribute tags of biological sample records and resolves
collection dates, sampling depth and geographic coordinates from their
free-text values.
"""

from .coordinates import (
    dms_to_decimal,
    parse_coordinate,
    parse_lat_lon,
    parse_latitude,
    parse_longitude,
)
from .dates import month_to_int, parse_date
from .depth import parse_depth
from .errors import (
    ExtractionError,
    InvalidDocument,
    MissingAttributes,
    MissingIdentifier,
    NoInputFiles,
)
from .models import Attribute, ResolvedDate, SampleDocument, SampleRecord, TagClass
from .record import build_from_document, build_record
from .tags import classify

__all__ = [
    "Attribute",
    "ResolvedDate",
    "SampleDocument",
    "SampleRecord",
    "TagClass",
    "classify",
    "parse_date",
    "month_to_int",
    "parse_depth",
    "dms_to_decimal",
    "parse_lat_lon",
    "parse_latitude",
    "parse_longitude",
    "parse_coordinate",
    "build_record",
    "build_from_document",
    "ExtractionError",
    "MissingIdentifier",
    "MissingAttributes",
    "InvalidDocument",
    "NoInputFiles",
]
