"""Attribute extraction from ENA sample XML.

Reads the identifier, linked runs and free-text attributes of each
``SAMPLE`` element. No normalization happens here; values are handed to
:mod:`sample_metadata.record` as found.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List, Optional, Union
from xml.etree import ElementTree as ET

from sample_metadata.errors import InvalidDocument, MissingAttributes, MissingIdentifier
from sample_metadata.models import Attribute, SampleDocument

logger = logging.getLogger(__name__)

RUN_DB = "ENA-RUN"


def _child_text(element: ET.Element, tag: str) -> Optional[str]:
    child = element.find(tag)
    if child is None or child.text is None:
        return None
    return child.text


def get_primary_id(sample: ET.Element) -> str:
    """Return the text of ``IDENTIFIERS/PRIMARY_ID``."""

    ids = sample.find("IDENTIFIERS")
    if ids is None:
        raise MissingIdentifier("Missing IDENTIFIERS")
    primary = ids.find("PRIMARY_ID")
    if primary is None:
        raise MissingIdentifier("Missing PRIMARY_ID node")
    if not primary.text or not primary.text.strip():
        raise MissingIdentifier("Missing PRIMARY_ID value")
    return primary.text.strip()


def get_runs(sample: ET.Element) -> List[str]:
    """Return run accessions linked through ``ENA-RUN`` cross references."""

    runs: List[str] = []
    links = sample.find("SAMPLE_LINKS")
    if links is None:
        return runs
    for link in links:
        xref = link.find("XREF_LINK")
        if xref is None or (_child_text(xref, "DB") or "").strip() != RUN_DB:
            continue
        ids = _child_text(xref, "ID") or ""
        runs.extend(run.strip() for run in ids.split(",") if run.strip())
    return runs


def get_attributes(sample: ET.Element, skip: Optional[re.Pattern] = None) -> List[Attribute]:
    """Return the ``SAMPLE_ATTRIBUTES`` of a sample in document order.

    Attributes without a tag or value are dropped, as are tags matching
    ``skip``.
    """

    collection = sample.find("SAMPLE_ATTRIBUTES")
    if collection is None:
        raise MissingAttributes()

    attrs: List[Attribute] = []
    for node in collection:
        tag = _child_text(node, "TAG")
        if tag is None:
            continue
        if skip is not None and skip.search(tag):
            logger.debug("Skipping attribute %r", tag)
            continue
        value = _child_text(node, "VALUE")
        if value is None:
            logger.debug("Attribute %r has no value", tag)
            continue
        attrs.append(Attribute(tag=tag, value=value, unit=_child_text(node, "UNITS")))
    return attrs


def parse_sample(sample: ET.Element, skip: Optional[re.Pattern] = None) -> SampleDocument:
    """Extract one :class:`SampleDocument` from a ``SAMPLE`` element."""

    primary_id = get_primary_id(sample)
    return SampleDocument(
        primary_id=primary_id,
        runs=tuple(get_runs(sample)),
        attributes=tuple(get_attributes(sample, skip)),
    )


def _parse_root(source: Union[str, bytes, Path]) -> ET.Element:
    # strings holding markup are documents, any other string is a file path
    if isinstance(source, str):
        text = source.strip()
        source = text.encode("utf-8") if text.startswith("<") else Path(source)
    try:
        if isinstance(source, Path):
            return ET.parse(source).getroot()
        return ET.fromstring(source.strip())
    except ET.ParseError as e:
        raise InvalidDocument(f"Malformed XML: {e}") from e


def iter_sample_elements(source: Union[str, bytes, Path]) -> Iterator[ET.Element]:
    """Yield ``SAMPLE`` elements from a single sample or a ``SAMPLE_SET``."""

    root = _parse_root(source)
    if root.tag == "SAMPLE":
        yield root
    elif root.tag == "SAMPLE_SET":
        samples = root.findall("SAMPLE")
        if not samples:
            raise InvalidDocument("SAMPLE_SET contains no SAMPLE")
        yield from samples
    else:
        raise InvalidDocument(f"Unexpected root element {root.tag!r}")


def iter_samples(
    source: Union[str, bytes, Path], skip: Optional[re.Pattern] = None
) -> Iterator[SampleDocument]:
    """Yield a :class:`SampleDocument` for every sample in ``source``.

    ``source`` may be a file path (``Path`` or ``str``), raw bytes or the
    XML text itself. A string starting with ``<`` is read as XML text.
    A missing file raises ``FileNotFoundError``.
    """

    for sample in iter_sample_elements(source):
        yield parse_sample(sample, skip)


__all__ = [
    "get_attributes",
    "get_primary_id",
    "get_runs",
    "iter_sample_elements",
    "iter_samples",
    "parse_sample",
]
