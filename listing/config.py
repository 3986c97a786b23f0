"""Section header text for rendered event lists."""

from labeling.models import EventType

# Header for a run of events of one type
EVENT_TYPE_HEADERS = {
    EventType.REGIONAL: "Regional Events",
    EventType.DISTRICT: "District Events",
    EventType.DISTRICT_CMP: "District Championships",
    EventType.CMP_DIVISION: "Championship Divisions",
    EventType.CMP_FINALS: "Championship Finals",
    EventType.OFFSEASON: "Offseason Events",
    EventType.PRESEASON: "Preseason Events",
    EventType.OTHER: "Other Events",
}

# "Pacific Northwest District Events"
DISTRICT_HEADER = "{district} District Events"

# "Week 3 Events", appended to a week label in the district view
WEEK_HEADER_SUFFIX = " Events"
