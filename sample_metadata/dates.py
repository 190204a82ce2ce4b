"""
Collection date resolution.

Operators type sampling dates in dozens of spellings. ``parse_date`` tries
a fixed, ordered list of grammars against the whole value and returns the
first one that yields a valid calendar instant. Missing components default
to the first day of the month and midnight UTC; ranges resolve to their
start.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)

# Legacy spreadsheet (Mac 1904 date system) day zero
SPREADSHEET_EPOCH = datetime(1904, 1, 1, tzinfo=UTC)

# Accepted stems per month, January first; a name resolves when it starts
# with one of the stems of its month
MONTH_STEMS: Tuple[Tuple[str, ...], ...] = (
    ("jan",),
    ("feb",),
    ("mar",),
    ("apr",),
    ("may", "mai"),
    ("jun",),
    ("jul",),
    ("aug",),
    ("sep",),
    ("oct",),
    ("nov",),
    ("dec",),
)


def month_to_int(name: str) -> Optional[int]:
    """Return the month number (1-12) for a month name or abbreviation.

    Matching is case-insensitive and prefix based, so ``"Sept"``,
    ``"september"`` and ``"SEP"`` all give 9. Names shorter than three
    letters never match.
    """

    lowered = name.strip().lower()
    for number, stems in enumerate(MONTH_STEMS, start=1):
        if lowered.startswith(stems):
            return number
    return None


def _timestamp(
    year: int,
    month: int,
    day: int = 1,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
) -> datetime:
    return datetime(year, month, day, hour, minute, second, tzinfo=UTC)


def _from_spreadsheet(m: re.Match[str]) -> Optional[datetime]:
    return SPREADSHEET_EPOCH + timedelta(days=int(m["days"]))


def _from_numeric(m: re.Match[str]) -> Optional[datetime]:
    parts = m.groupdict()
    year = int(parts["year"])
    if len(parts["year"]) == 2:
        year += 2000
    return _timestamp(
        year,
        int(parts["month"]),
        int(parts.get("day") or 1),
        int(parts.get("hour") or 0),
        int(parts.get("minute") or 0),
        int(parts.get("second") or 0),
    )


def _from_month_name(m: re.Match[str]) -> Optional[datetime]:
    month = month_to_int(m["month"])
    if month is None:
        return None
    return _timestamp(int(m["year"]), month)


def _from_month_range(m: re.Match[str]) -> Optional[datetime]:
    # the closing month only has to be a real month name
    if month_to_int(m["end"]) is None:
        return None
    return _from_month_name(m)


@dataclass(frozen=True)
class DateGrammar:
    """One candidate spelling of a date and how to build its timestamp."""

    name: str
    pattern: re.Pattern[str]
    build: Callable[[re.Match[str]], Optional[datetime]]

    def resolve(self, value: str) -> Optional[datetime]:
        m = self.pattern.fullmatch(value)
        if not m:
            return None
        try:
            return self.build(m)
        except (ValueError, OverflowError):
            # out-of-range component, e.g. month 13
            return None


_MONTH_WORD = r"(?P<month>[a-z]{3,})\.?"

DATE_GRAMMARS: Tuple[DateGrammar, ...] = (
    # 34210
    DateGrammar("spreadsheet", re.compile(r"(?P<days>\d{5})"), _from_spreadsheet),
    # 2012-03-09T08:59, 2012-03-09T08:59:03Z
    DateGrammar(
        "iso_datetime",
        re.compile(
            r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
            r"T(?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2})(?:\.\d+)?)?"
            r"(?:Z|[+-]00:?00)?"
        ),
        _from_numeric,
    ),
    # 2017-06-16Z
    DateGrammar(
        "iso_date_utc",
        re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})Z"),
        _from_numeric,
    ),
    # 2017-06-16/2017-07-09
    DateGrammar(
        "date_range",
        re.compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})/\d{4}-\d{2}-\d{2}"),
        _from_numeric,
    ),
    # 2015-01, 2015-01/2015-02
    DateGrammar(
        "year_month",
        re.compile(r"(?P<year>\d{4})-(?P<month>\d{1,2})(?:/\d{4}-\d{1,2})?"),
        _from_numeric,
    ),
    # 20100910
    DateGrammar(
        "compact",
        re.compile(r"(?P<year>\d{4})(?P<month>\d{2})(?P<day>\d{2})"),
        _from_numeric,
    ),
    # 12/06, 2/14-6/14
    DateGrammar(
        "month_short_year",
        re.compile(r"(?P<month>\d{1,2})/(?P<year>\d{2})(?:-\d{1,2}/\d{2})?"),
        _from_numeric,
    ),
    # Dec-2015, May, 2017
    DateGrammar(
        "month_name_year",
        re.compile(_MONTH_WORD + r"(?:\s*[,-]\s*|\s+)(?P<year>\d{4})", re.IGNORECASE),
        _from_month_name,
    ),
    # March-April 2017
    DateGrammar(
        "month_name_range",
        re.compile(
            r"(?P<month>[a-z]{3,})\s*-\s*(?P<end>[a-z]{3,})\s+(?P<year>\d{4})",
            re.IGNORECASE,
        ),
        _from_month_range,
    ),
    # July of 2011
    DateGrammar(
        "month_of_year",
        re.compile(_MONTH_WORD + r"\s+of\s+(?P<year>\d{4})", re.IGNORECASE),
        _from_month_name,
    ),
    # 2008 August
    DateGrammar(
        "year_month_name",
        re.compile(r"(?P<year>\d{4})\s+" + _MONTH_WORD, re.IGNORECASE),
        _from_month_name,
    ),
)


def parse_date(value: str) -> Optional[datetime]:
    """Return the UTC instant encoded by ``value`` or ``None``.

    Grammars are tried in :data:`DATE_GRAMMARS` order and the first one
    that matches the whole (stripped) value and produces a valid date wins.
    """

    text = value.strip() if value else ""
    if not text:
        return None
    for grammar in DATE_GRAMMARS:
        resolved = grammar.resolve(text)
        if resolved is not None:
            return resolved
    logger.debug("no date extracted from %r", value)
    return None


__all__ = ["DATE_GRAMMARS", "DateGrammar", "month_to_int", "parse_date"]
