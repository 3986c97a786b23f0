"""Calendar lookups for competition seasons.

Competition weeks are counted from the ISO week that precedes the first
week of official play, which moves around from year to year. The per-year
offsets and championship weeks come from a SeasonCalendar; the default one
reads the tables in labeling.config, and callers with fresher data can
build their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta

from labeling.config import (
    CHAMPIONSHIP_WEEKS,
    DEFAULT_CHAMPIONSHIP_WEEK,
    DEFAULT_FIRST_COMPETITION_WEEK,
    FIRST_COMPETITION_WEEKS,
)


@dataclass
class SeasonCalendar:
    """Per-year season constants."""
    first_competition_weeks: dict = field(default_factory=lambda: dict(FIRST_COMPETITION_WEEKS))
    championship_weeks: dict = field(default_factory=lambda: dict(CHAMPIONSHIP_WEEKS))
    default_first_competition_week: int = DEFAULT_FIRST_COMPETITION_WEEK
    default_championship_week: int = DEFAULT_CHAMPIONSHIP_WEEK

    def first_competition_week(self, year: int) -> int:
        return self.first_competition_weeks.get(year, self.default_first_competition_week)

    def championship_week(self, year: int) -> int:
        return self.championship_weeks.get(year, self.default_championship_week)


DEFAULT_CALENDAR = SeasonCalendar()


def iso_week_of_year(day: date | None) -> int:
    """Return the ISO week number of a date, or -1 if there is no date."""
    if day is None:
        return -1
    return day.isocalendar()[1]


def competition_week(day: date | None, calendar: SeasonCalendar | None = None) -> int:
    """Return the competition week a date falls in (never negative).

    Events start mid-week, so the date is shifted back one day before
    taking its week of year. Returns -1 if there is no date.
    """
    if day is None:
        return -1
    calendar = calendar or DEFAULT_CALENDAR
    shifted = day - timedelta(days=1)
    week = iso_week_of_year(shifted) - calendar.first_competition_week(shifted.year)
    return max(week, 0)


def month_name(day: date | None) -> str:
    """Full month name of a date ("March"), or "" if there is no date."""
    if day is None:
        return ""
    return day.strftime("%B")


def date_range_label(start: date | None, end: date | None) -> str:
    """Format an event's date span for display.

    Examples:
        (Mar 3 2016, Mar 3 2016) -> "Mar 3, 2016"
        (Mar 3 2016, Mar 5 2016) -> "Mar 3 to Mar 5, 2016"
        (None, Mar 5 2016)       -> ""
    """
    if start is None or end is None:
        return ""
    if start == end:
        return _full_date(end)
    return f"{_short_date(start)} to {_full_date(end)}"


def _short_date(day: date) -> str:
    return f"{day.strftime('%b')} {day.day}"


def _full_date(day: date) -> str:
    return f"{_short_date(day)}, {day.year}"
