"""Central configuration for event labeling: key shapes, name rules, labels, season tables."""

import re

# --- Event Keys ---
# "<year><code>", e.g. "2016necmp"
EVENT_KEY_PATTERN = re.compile(r"[1-9]\d{3}[a-z0-9]+")

# First run of letters in a match, event or district key ("2014calb_qm17" -> "calb")
EVENT_CODE_PATTERN = re.compile(r"[a-zA-Z]+")

# --- Short Name Extraction ---
# "XYZ District - NAME Event ..."
DISTRICT_EVENT_NAME_PATTERN = re.compile(r"[A-Z]{2,3} District -(.+)")
EVENT_SUFFIX_PATTERN = re.compile(r"(.+)Event")

# "... NAME Regional sponsored by ...", greedy up to the last terminal word
REGIONAL_EVENT_NAME_PATTERN = re.compile(
    r"\s*(?:MAR |PNW |)"                       # organizational prefix
    r"(?:FIRST Robotics|FRC|)"                 # program prefix
    r"(.+)"                                    # (1) name
    r"(?:(?:District|Regional|Region|State|Tournament|FRC|Field)\b)"
)
FRC_SUFFIX_PATTERN = re.compile(r"(.+)(?:FIRST Robotics|FRC)")

# Ordered rules, first match wins:
#   (pattern, match mode, strip capture before the suffix attempt, suffix pattern)
SHORT_NAME_RULES = [
    (DISTRICT_EVENT_NAME_PATTERN, "fullmatch", True, EVENT_SUFFIX_PATTERN),
    (REGIONAL_EVENT_NAME_PATTERN, "match", False, FRC_SUFFIX_PATTERN),
]

# --- Week Labels ---
CHAMPIONSHIP_LABEL = "Championship Event"
CITY_CHAMPIONSHIP_LABEL = "{city} Championship"
REGIONAL_LABEL = "Week {week}"
FLOAT_REGIONAL_LABEL = "Week {week:.1f}"
WEEKLESS_LABEL = "Other Official Events"
OFFSEASON_LABEL = "{month} Offseason Events"
GENERIC_OFFSEASON_LABEL = "Offseason Events"
PRESEASON_LABEL = "Preseason Events"

# Championships are labeled by city once the season split into two of them
CITY_CHAMPIONSHIP_FIRST_YEAR = 2017

# 2016: week 1 was relabeled Week 0.5 and every later week shifted down by one
SHIFTED_WEEK_YEAR = 2016
HALF_WEEK_EVENT_KEY = "2016scmb"

# Reverse lookup searches weeks 0..MAX_WEEK_NUMBER - 1
MAX_WEEK_NUMBER = 20

# --- Season Calendar ---
# ISO week of year that precedes competition week 1
FIRST_COMPETITION_WEEKS = {
    2010: 8,
    2011: 8,
    2012: 8,
    2013: 8,
    2014: 8,
    2015: 8,
    2016: 8,
    2017: 8,
    2018: 8,
    2019: 8,
    2020: 8,
    2021: 9,
    2022: 9,
    2023: 8,
    2024: 8,
    2025: 8,
}
DEFAULT_FIRST_COMPETITION_WEEK = 8

# Competition week of the championship event(s)
CHAMPIONSHIP_WEEKS = {
    2010: 8,
    2011: 8,
    2012: 8,
    2013: 8,
    2014: 8,
    2015: 8,
    2016: 9,
    2017: 8,
    2018: 8,
    2019: 8,
    2020: 8,
    2021: 8,
    2022: 8,
    2023: 8,
    2024: 8,
    2025: 8,
}
DEFAULT_CHAMPIONSHIP_WEEK = 8

# --- Event Type Codes (data feed numbering) ---
EVENT_TYPE_CODES = {
    0: "REGIONAL",
    1: "DISTRICT",
    2: "DISTRICT_CMP",
    3: "CMP_DIVISION",
    4: "CMP_FINALS",
    99: "OFFSEASON",
    100: "PRESEASON",
}

# --- Districts ---
DISTRICT_NAMES = {
    "FIM": "Michigan",
    "MAR": "Mid-Atlantic Robotics",
    "NE": "New England",
    "PNW": "Pacific Northwest",
    "IN": "Indiana",
    "CHS": "Chesapeake",
    "NC": "North Carolina",
    "PCH": "Peachtree",
    "ONT": "Ontario",
    "ISR": "Israel",
    "FMA": "FIRST Mid-Atlantic",
    "FIT": "Texas",
}
