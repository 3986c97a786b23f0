"""Shorten official event names for display.

Official names carry sponsor and venue boilerplate in a handful of
recurring shapes:

  District:  "MAR District - Hatboro-Horsham Event sponsored by ..."
  Regional:  "Silicon Valley Regional sponsored by Google.org"
  Program:   "Buckeye FRC Regional"
  Other:     "Festival of Champions"  (left as is)

The shapes live in SHORT_NAME_RULES and are tried in order; the first
rule whose pattern matches decides the result.
"""

from __future__ import annotations

from labeling.config import SHORT_NAME_RULES


def short_name(event_name: str | None) -> str:
    """Extract a short name like "Silicon Valley" from a full event name.

    Never raises. Names that fit no rule come back trimmed.
    """
    if not event_name:
        return ""

    for pattern, mode, strip_first, suffix_pattern in SHORT_NAME_RULES:
        m = getattr(pattern, mode)(event_name)
        if not m:
            continue
        return _strip_suffix(m.group(1), strip_first, suffix_pattern)

    return event_name.strip()


def _strip_suffix(partial: str, strip_first: bool, suffix_pattern) -> str:
    """Cut a trailing "Event..." or "FRC..." clause off a captured name."""
    if strip_first:
        partial = partial.strip()
    m = suffix_pattern.match(partial)
    if m:
        return m.group(1).strip()
    return partial.strip()
