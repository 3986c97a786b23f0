"""Map events and week numbers to season labels, and labels back to week numbers.

Labels look like "Week 3", "Championship Event", "Preseason Events" or
"March Offseason Events". Two historical quirks are kept on purpose:

- From 2017 on there are two championships, so championship events are
  labeled by city ("Houston Championship").
- In 2016 the first week of play was billed as Week 0.5 and every later
  week was renumbered one lower.
"""

from __future__ import annotations

from labeling.config import (
    CHAMPIONSHIP_LABEL,
    CITY_CHAMPIONSHIP_FIRST_YEAR,
    CITY_CHAMPIONSHIP_LABEL,
    FLOAT_REGIONAL_LABEL,
    GENERIC_OFFSEASON_LABEL,
    HALF_WEEK_EVENT_KEY,
    MAX_WEEK_NUMBER,
    OFFSEASON_LABEL,
    PRESEASON_LABEL,
    REGIONAL_LABEL,
    SHIFTED_WEEK_YEAR,
    WEEKLESS_LABEL,
)
from labeling.models import Event, EventType
from labeling.season_calendar import DEFAULT_CALENDAR, SeasonCalendar, month_name


def label_for_event(event: Event) -> str:
    """Generate the section label for an event from its type, week and dates."""
    event_type = event.event_type

    if event_type in (EventType.CMP_DIVISION, EventType.CMP_FINALS):
        if event.year >= CITY_CHAMPIONSHIP_FIRST_YEAR and event.city:
            return CITY_CHAMPIONSHIP_LABEL.format(city=event.city)
        return CHAMPIONSHIP_LABEL

    if event_type in (EventType.REGIONAL, EventType.DISTRICT, EventType.DISTRICT_CMP):
        week = event.week
        if event.year == SHIFTED_WEEK_YEAR:
            if week is None:
                return REGIONAL_LABEL.format(week=0)
            if event.key == HALF_WEEK_EVENT_KEY:
                return FLOAT_REGIONAL_LABEL.format(week=0.5)
            return REGIONAL_LABEL.format(week=week - 1)
        if week is not None:
            return REGIONAL_LABEL.format(week=week)
        return REGIONAL_LABEL.format(week=0)

    if event_type is EventType.OFFSEASON:
        month = month_name(event.start_date)
        if not month:
            return GENERIC_OFFSEASON_LABEL
        return OFFSEASON_LABEL.format(month=month)

    if event_type is EventType.PRESEASON:
        return PRESEASON_LABEL

    return WEEKLESS_LABEL


def label_from_week_number(year: int, week: int | None,
                           calendar: SeasonCalendar | None = None) -> str:
    """Generate a label from a bare competition week number.

    The championship week of the year anchors everything else: earlier
    weeks are "Week N", later weeks are offseason. There is no date here,
    so offseason weeks share one generic label.
    """
    if week is None:
        return WEEKLESS_LABEL

    if week <= 0:
        return PRESEASON_LABEL

    cmp_week = (calendar or DEFAULT_CALENDAR).championship_week(year)

    if year == SHIFTED_WEEK_YEAR and week == 1:
        return FLOAT_REGIONAL_LABEL.format(week=0.5)
    if year == SHIFTED_WEEK_YEAR and 1 < week < cmp_week:
        week -= 1

    if 0 < week < cmp_week:
        return REGIONAL_LABEL.format(week=week)
    if week == cmp_week:
        return CHAMPIONSHIP_LABEL
    if week > cmp_week:
        return GENERIC_OFFSEASON_LABEL
    return WEEKLESS_LABEL


def week_number_from_label(year: int, label: str,
                           calendar: SeasonCalendar | None = None) -> int:
    """Find the first week number whose label matches, or -1.

    Several weeks can share a label (all offseason weeks do), so this
    is a search over the small range of possible weeks, not arithmetic.
    """
    for week in range(MAX_WEEK_NUMBER):
        if label_from_week_number(year, week, calendar) == label:
            return week
    return -1
