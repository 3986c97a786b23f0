"""Validate event keys and pull short codes out of event, match and district keys."""

from __future__ import annotations

import re

from labeling.config import EVENT_CODE_PATTERN, EVENT_KEY_PATTERN


def validate_key(key: str | None) -> bool:
    """Check that a key looks like "<year><code>", e.g. "2016necmp"."""
    if not key:
        return False
    return EVENT_KEY_PATTERN.fullmatch(key) is not None


def year_of(key: str | None) -> int:
    """Return the year of an event key, or -1 if the key is malformed."""
    if not validate_key(key):
        return -1
    return int(key[:4])


def short_code(key: str | None) -> str | None:
    """Strip the digits out of a valid event key ("2016necmp" -> "necmp").

    Malformed keys are returned unchanged.
    """
    if validate_key(key):
        return re.sub(r"[0-9]+", "", key)
    return key


def event_code(identifier: str | None) -> str:
    """Return the abbreviated event or district code of a key.

    Examples:
        "2014calb_qm17" -> "CALB"
        "2014necmp"     -> "NECMP"
        "2014pnw"       -> "PNW"
        "2014"          -> ""
    """
    if not identifier:
        return ""
    m = EVENT_CODE_PATTERN.search(identifier)
    return m.group().upper() if m else ""
