from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .coordinates import parse_lat_lon, parse_latitude, parse_longitude
from .dates import parse_date
from .depth import parse_depth
from .errors import MissingAttributes, MissingIdentifier
from .models import Attribute, ResolvedDate, SampleDocument, SampleRecord, TagClass
from .tags import classify

logger = logging.getLogger(__name__)

# Record field filled from the first attribute tagged with each class
_FIRST_MATCH: Dict[TagClass, Tuple[str, Callable[[Attribute], object]]] = {
    TagClass.DEPTH: ("depth", lambda a: parse_depth(a.value, a.unit)),
    TagClass.LAT_LON: ("lat_lon", lambda a: parse_lat_lon(a.value)),
    TagClass.LATITUDE: ("latitude", lambda a: parse_latitude(a.value)),
    TagClass.LONGITUDE: ("longitude", lambda a: parse_longitude(a.value)),
}


def build_record(
    primary_id: Optional[str],
    attributes: Optional[Sequence[Attribute]],
    runs: Iterable[str] = (),
) -> SampleRecord:
    """Resolve dates, depth and coordinates from a sample's attributes.

    Every attribute value is tried as a date and all candidates are kept.
    Depth and coordinate classes are resolved from the first attribute of
    that class in attribute order only. If that value cannot be read the
    field stays ``None``; later attributes of the same class are ignored.

    ``primary_id`` and ``runs`` are passed through as received.

    Raises
    ------
    MissingIdentifier
        ``primary_id`` is empty or blank.
    MissingAttributes
        ``attributes`` is ``None``. An empty sequence is valid.
    """

    if not primary_id or not primary_id.strip():
        raise MissingIdentifier()
    if attributes is None:
        raise MissingAttributes()

    dates: List[ResolvedDate] = []
    resolved: Dict[str, object] = {}
    seen: Set[TagClass] = set()

    for attr in attributes:
        tag_class = classify(attr.tag)

        timestamp = parse_date(attr.value)
        if timestamp is not None:
            dates.append(
                ResolvedDate(
                    source_tag=attr.tag,
                    timestamp=timestamp,
                    tag_confidence=tag_class is TagClass.DATE,
                )
            )

        if tag_class not in _FIRST_MATCH or tag_class in seen:
            continue
        seen.add(tag_class)
        field, resolve = _FIRST_MATCH[tag_class]
        value = resolve(attr)
        if value is not None:
            resolved[field] = value

    logger.debug(
        "%s: %d date candidate(s), resolved %s",
        primary_id,
        len(dates),
        ", ".join(sorted(resolved)) or "nothing else",
    )
    return SampleRecord(
        primary_id=primary_id,
        runs=tuple(runs),
        dates=tuple(dates),
        **resolved,
    )


def build_from_document(document: SampleDocument) -> SampleRecord:
    """Build a :class:`SampleRecord` from extractor output."""

    return build_record(document.primary_id, document.attributes, document.runs)


__all__ = ["build_from_document", "build_record"]
