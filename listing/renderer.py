"""Render event lists into sections for display.

Three views share one walk over the sorted events:

  Team schedule:  sorted by type then date, a header per type
                  (and per district within district events)
  Week:           same ordering and headers as the team schedule
  District:       sorted by date, a header per week label

The output is a flat list of Header and EventEntry items. Events that
are happening now also go out to the renderer's notification sink.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date

from labeling.models import Event, EventType
from labeling.season_calendar import SeasonCalendar
from labeling.week_labels import label_from_week_number
from listing.config import DISTRICT_HEADER, EVENT_TYPE_HEADERS, WEEK_HEADER_SUFFIX
from listing.notifications import LiveEventUpdate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    """A section header row."""
    text: str


@dataclass(frozen=True)
class EventEntry:
    """A row for one event. The event itself is not copied."""
    event: Event


def _date_key(event: Event) -> tuple:
    # Undated events go last
    return (event.start_date is None, event.start_date or date.min)


def _district_order(event: Event) -> int:
    if event.event_type is EventType.DISTRICT and event.district is not None:
        return event.district.order
    return -1


def sort_by_type_and_date(events: list[Event]) -> list[Event]:
    """Sort by event type, then district for district events, then start date."""
    return sorted(
        events,
        key=lambda e: (e.event_type.order, _district_order(e), *_date_key(e)),
    )


def sort_by_date(events: list[Event]) -> list[Event]:
    return sorted(events, key=_date_key)


def type_header(event: Event) -> str:
    """Header text for the type/date views."""
    if event.event_type is EventType.DISTRICT:
        if not event.district_name:
            return EVENT_TYPE_HEADERS[EventType.DISTRICT]
        return DISTRICT_HEADER.format(district=event.district_name)
    return EVENT_TYPE_HEADERS.get(event.event_type, EVENT_TYPE_HEADERS[EventType.OTHER])


class EventListRenderer:
    """Builds sectioned event lists.

    Args:
        notify: callable taking a LiveEventUpdate, e.g. LiveEventBus.publish.
            Called once for every live event, right after its row is added.
        calendar: season constants for week labels in the district view.
    """

    def __init__(self, notify=None, calendar: SeasonCalendar | None = None):
        self.notify = notify
        self.calendar = calendar

    def render_for_team_schedule(self, events: list[Event], output: list | None = None) -> list:
        """Events sorted by type and date. Best for a team's season schedule."""
        return self._render_by_type(events, output)

    def render_for_week(self, events: list[Event], output: list | None = None) -> list:
        """Events for one week, sorted by type and date like the team schedule."""
        return self._render_by_type(events, output)

    def render_for_district(self, events: list[Event], output: list | None = None) -> list:
        """Events sorted by date, grouped under their week label."""
        output = [] if output is None else output
        last_header = None

        for event in sort_by_date(events):
            current_header = label_from_week_number(event.year, event.week, self.calendar)
            if current_header != last_header:
                output.append(Header(current_header + WEEK_HEADER_SUFFIX))
            self._add_event(event, output)
            last_header = current_header

        return output

    def _render_by_type(self, events: list[Event], output: list | None) -> list:
        output = [] if output is None else output
        # Sentinels no real event matches
        last_type = None
        last_district = object()

        for event in sort_by_type_and_date(events):
            current_type = event.event_type
            current_district = event.district
            if (current_type is not last_type
                    or (current_type is EventType.DISTRICT and current_district is not last_district)):
                output.append(Header(type_header(event)))
            self._add_event(event, output)
            last_type = current_type
            last_district = current_district

        return output

    def _add_event(self, event: Event, output: list) -> None:
        output.append(EventEntry(event))
        if event.is_happening_now:
            self._send_live_update(event)

    def _send_live_update(self, event: Event) -> None:
        if self.notify is None:
            return
        logger.debug("Sending live event broadcast: %s", event.key)
        try:
            self.notify(LiveEventUpdate(event))
        except Exception:
            logger.warning("Live event broadcast failed for %s", event.key, exc_info=True)


def render_for_team_schedule(events: list[Event], notify=None) -> list:
    return EventListRenderer(notify).render_for_team_schedule(events)


def render_for_week(events: list[Event], notify=None) -> list:
    return EventListRenderer(notify).render_for_week(events)


def render_for_district(events: list[Event], notify=None, calendar: SeasonCalendar | None = None) -> list:
    return EventListRenderer(notify, calendar).render_for_district(events)
