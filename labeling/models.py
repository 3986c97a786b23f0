"""Data models for events supplied by the data feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from labeling.config import DISTRICT_NAMES, EVENT_TYPE_CODES
from labeling.event_keys import event_code, year_of


class EventType(Enum):
    """Event classification. Declaration order is the listing sort order."""
    REGIONAL = "regional"
    DISTRICT = "district"
    DISTRICT_CMP = "district_cmp"
    CMP_DIVISION = "cmp_division"
    CMP_FINALS = "cmp_finals"
    OFFSEASON = "offseason"
    PRESEASON = "preseason"
    OTHER = "other"

    @property
    def order(self) -> int:
        return list(EventType).index(self)

    @classmethod
    def from_code(cls, code) -> EventType:
        """Map a feed type code (0, 1, 99, ...) or member name to a member.

        Anything unrecognized is OTHER.
        """
        if isinstance(code, cls):
            return code
        if isinstance(code, bool):
            return cls.OTHER
        if isinstance(code, int):
            name = EVENT_TYPE_CODES.get(code)
            return cls[name] if name else cls.OTHER
        if isinstance(code, str):
            return cls.__members__.get(code.strip().upper(), cls.OTHER)
        return cls.OTHER


class DistrictType(Enum):
    """Geographic districts. Declaration order is the district identity."""
    FIM = "fim"
    MAR = "mar"
    NE = "ne"
    PNW = "pnw"
    IN = "in"
    CHS = "chs"
    NC = "nc"
    PCH = "pch"
    ONT = "ont"
    ISR = "isr"
    FMA = "fma"
    FIT = "fit"

    @property
    def order(self) -> int:
        return list(DistrictType).index(self)

    @property
    def display_name(self) -> str:
        return DISTRICT_NAMES[self.name]

    @classmethod
    def from_abbreviation(cls, value: str | None) -> DistrictType | None:
        """Accept "ne", "NE" or a district key like "2016ne"."""
        code = event_code(value)
        if not code:
            return None
        return cls.__members__.get(code)


@dataclass
class Event:
    """One event as seen by the labeling engine.

    Fields are normalized on construction: feed type codes and names become
    EventType members, district strings become DistrictType (kept only for
    DISTRICT events), malformed years fall back to the key's year, bad
    weeks and dates become None, datetimes become dates.
    """
    key: str
    name: str
    event_type: EventType = EventType.OTHER
    year: int | None = None               # derived from key when omitted
    city: str | None = None
    district: DistrictType | None = None  # only meaningful for DISTRICT events
    week: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    is_happening_now: bool = False

    def __post_init__(self):
        # Normalize loosely typed fields so labeling and sorting never fail
        self.event_type = EventType.from_code(self.event_type)
        if isinstance(self.district, str):
            self.district = DistrictType.from_abbreviation(self.district)
        if not isinstance(self.district, DistrictType) or self.event_type is not EventType.DISTRICT:
            self.district = None
        if not _is_whole_number(self.year):
            self.year = year_of(self.key)
        if not _is_whole_number(self.week) or self.week < 0:
            self.week = None
        self.start_date = _parse_date(self.start_date)
        self.end_date = _parse_date(self.end_date)
        if not isinstance(self.is_happening_now, bool):
            self.is_happening_now = False

    @property
    def district_name(self) -> str:
        return self.district.display_name if self.district else ""

    def is_happening_on(self, day: date) -> bool:
        """Check if the event's date window contains a day."""
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= day <= self.end_date

    @classmethod
    def from_dict(cls, data: dict, ref_date: date | None = None) -> Event:
        """Build an event from a data feed dictionary.

        Keys: key, name, year, city, event_type, district, week,
        start_date, end_date, is_happening_now. Only key is required.
        If is_happening_now is missing (or not a real boolean) and ref_date
        is given, it is derived from the event dates.
        """
        district = data.get("district")
        if isinstance(district, dict):
            district = district.get("abbreviation") or district.get("key")

        event = cls(
            key=data["key"],
            name=data.get("name") or "",
            event_type=data.get("event_type"),
            year=data.get("year"),
            city=data.get("city") or None,
            district=district if isinstance(district, str) else None,
            week=data.get("week"),
            start_date=data.get("start_date"),
            end_date=data.get("end_date"),
        )

        flag = data.get("is_happening_now")
        if isinstance(flag, bool):
            event.is_happening_now = flag
        elif ref_date is not None:
            event.is_happening_now = event.is_happening_on(ref_date)

        return event


def _is_whole_number(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _parse_date(value) -> date | None:
    """Parse a YYYY-MM-DD string; anything else becomes None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None
